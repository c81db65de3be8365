"""Utility helper functions."""

from blogapp.utils.helpers import (
    get_summary,
    host,
    pages_count,
    to_iso,
    today_str,
    utc_now,
)

__all__ = [
    "get_summary",
    "host",
    "pages_count",
    "to_iso",
    "today_str",
    "utc_now",
]
