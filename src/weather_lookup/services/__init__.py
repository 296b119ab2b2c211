"""Shared utilities (HTTP client)."""
