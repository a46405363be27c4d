"""Built-in style rules for Markdown-flavoured notes."""

from __future__ import annotations

from typing import Iterable, Sequence

from .models import StyleRule
from .registry import StyleTable

DEFAULT_STYLES: tuple[StyleRule, ...] = (
    StyleRule("bold", "**", "**", description="Strong emphasis"),
    StyleRule("italics", "*", "*", description="Emphasis"),
    StyleRule("highlight", "==", "==", description="Highlighted text"),
    StyleRule("inlineCode", "`", "`", description="Inline code span"),
    StyleRule("comment", "%%", "%%", description="Hidden comment"),
    StyleRule("strikethrough", "~~", "~~", description="Struck-through text"),
    StyleRule("underscore", "<u>", "</u>", description="Underlined text"),
    StyleRule("inlineMath", "$", "$", description="Inline math"),
)


def load_default_styles(
    table: StyleTable,
    *,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    extra_styles: Iterable[StyleRule] | None = None,
    replace: bool = False,
) -> StyleTable:
    """Register the built-in rules (filtered) plus ``extra_styles`` into ``table``."""

    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    for rule in DEFAULT_STYLES:
        if include_set is not None and rule.name not in include_set:
            continue
        if rule.name in exclude_set:
            continue
        table.register(rule, replace=replace)

    for rule in extra_styles or ():
        table.register(rule, replace=replace)
    return table


def default_style_table() -> StyleTable:
    return load_default_styles(StyleTable())


__all__ = ["DEFAULT_STYLES", "load_default_styles", "default_style_table"]
