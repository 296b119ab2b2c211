"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request helpers
    └── {feature}.py      # Fetch functions (one per endpoint)

Fetch functions return the decoded JSON payload unchanged; reshaping for
display happens in ``analysis/``.
"""
