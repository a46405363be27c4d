"""Inline style rules and the table that owns them."""

from .models import StyleRule
from .registry import StyleConflictError, StyleTable, TableStats, UnknownStyleError
from .defaults import DEFAULT_STYLES, default_style_table, load_default_styles

__all__ = [
    "StyleRule",
    "StyleTable",
    "StyleConflictError",
    "UnknownStyleError",
    "TableStats",
    "DEFAULT_STYLES",
    "default_style_table",
    "load_default_styles",
]
