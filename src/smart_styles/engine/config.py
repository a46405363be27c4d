"""Transformer configuration: style table, trim tables, and compiled matchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Pattern

from smart_styles.styles import StyleTable, default_style_table

from .patterns import (
    EXTRA_WORD_GLYPHS,
    TRIM_AFTER,
    TRIM_BEFORE,
    TrimPattern,
    run_after,
    run_before,
    token_alternation,
)


@dataclass(frozen=True)
class TransformerConfig:
    """Read-only matchers shared by every transformer built from it.

    Attributes:
        styles: Rules ``transform_text`` can toggle. Marker glyphs are read
            from it once, at construction.
        extra_word_glyphs: Glyphs counted as word characters besides letters,
            digits, and style markers.
        trim_before: Structural prefixes never wrapped, tried in order.
        trim_after: Structural suffixes never wrapped, tried in order.

    Examples:
        TransformerConfig(styles=default_style_table(), extra_word_glyphs=())
    """

    styles: StyleTable = field(default_factory=default_style_table)
    extra_word_glyphs: tuple[str, ...] = EXTRA_WORD_GLYPHS
    trim_before: tuple[TrimPattern, ...] = TRIM_BEFORE
    trim_after: tuple[TrimPattern, ...] = TRIM_AFTER

    marker_tokens: tuple[str, ...] = field(init=False)
    word_tokens: tuple[str, ...] = field(init=False)
    word_before: Pattern[str] = field(init=False, repr=False)
    word_after: Pattern[str] = field(init=False, repr=False)
    marker_before: Pattern[str] = field(init=False, repr=False)
    marker_after: Pattern[str] = field(init=False, repr=False)
    trim_before_regexes: tuple[Pattern[str], ...] = field(init=False, repr=False)
    trim_after_regexes: tuple[Pattern[str], ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        markers = self.styles.markers()
        words = tuple(dict.fromkeys(markers + tuple(self.extra_word_glyphs)))
        word_alt = token_alternation(words, alnum=True)
        marker_alt = token_alternation(markers, alnum=False)

        object.__setattr__(self, "marker_tokens", markers)
        object.__setattr__(self, "word_tokens", words)
        object.__setattr__(self, "word_before", run_before(word_alt))
        object.__setattr__(self, "word_after", run_after(word_alt))
        object.__setattr__(self, "marker_before", run_before(marker_alt))
        object.__setattr__(self, "marker_after", run_after(marker_alt))
        object.__setattr__(
            self,
            "trim_before_regexes",
            tuple(pattern.leading() for pattern in self.trim_before),
        )
        object.__setattr__(
            self,
            "trim_after_regexes",
            tuple(pattern.trailing() for pattern in self.trim_after),
        )


def build_config(
    *,
    styles: Optional[StyleTable] = None,
    extra_word_glyphs: Optional[Iterable[str]] = None,
    trim_before: Optional[Iterable[TrimPattern]] = None,
    trim_after: Optional[Iterable[TrimPattern]] = None,
) -> TransformerConfig:
    """Build a ``TransformerConfig``; ``None`` keeps the built-in default."""

    overrides: dict[str, object] = {}
    if styles is not None:
        overrides["styles"] = styles
    if extra_word_glyphs is not None:
        overrides["extra_word_glyphs"] = tuple(extra_word_glyphs)
    if trim_before is not None:
        overrides["trim_before"] = tuple(trim_before)
    if trim_after is not None:
        overrides["trim_after"] = tuple(trim_after)
    return TransformerConfig(**overrides)


__all__ = ["TransformerConfig", "build_config"]
