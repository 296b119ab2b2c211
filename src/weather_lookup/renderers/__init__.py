"""Pure rendering functions: display records -> HTML strings.

All renderers follow the same pattern:
  - Input: pydantic records from analysis/ or a WeatherView
  - Output: str (HTML fragment, or the full page for build_page_html)
  - No side effects, no I/O, no Prefect decorators

Templates live in ``templates/``. Fragments have no <html>/<body> tags;
``page.html.j2`` assembles them and holds the CSS.

Public API:
  - weather: build_current_html, build_hourly_html, build_daily_html,
    build_page_html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
