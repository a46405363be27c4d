"""Smart selection: grow a cursor or selection to natural style boundaries.

Expansion of a non-empty selection runs in passes:

1. marker growth -- swallow style markers touching either edge
2. whitespace pre-trim -- drop edge whitespace (structure-aware)
3. word growth -- swallow partial words touching either edge
4. whitespace post-trim
5. boundary trim (optional) -- cut headings, bullets, quotes, link syntax

A bare cursor only runs word growth (on its own line) and the boundary trim.
No pass ever reorders ``start`` and ``end``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Pattern

from smart_styles.buffer import EditorHost, Position, Range

from .config import TransformerConfig
from .markup import structure_lengths


@dataclass(frozen=True, slots=True)
class ExpansionResult:
    """An expanded range plus the structural widths the boundary trim removed."""

    range: Range
    trimmed_before: int = 0
    trimmed_after: int = 0


class SmartSelection:
    """Computes expansion candidates against one host buffer.

    Instances are cheap and hold no counters between calls; trim widths travel
    on the returned ``ExpansionResult``.
    """

    def __init__(self, editor: EditorHost, config: TransformerConfig) -> None:
        self.editor = editor
        self.config = config

    def expand(self, span: Range, *, trim: bool = True) -> ExpansionResult:
        if span.is_empty:
            return self.expand_cursor(span.start, trim=trim)
        return self.expand_range(span, trim=trim)

    def expand_cursor(self, cursor: Position, *, trim: bool = True) -> ExpansionResult:
        span = self._grow(
            Range.at(cursor), self.config.word_before, self.config.word_after
        )
        if trim:
            return self.trim_smart_selection(span)
        return ExpansionResult(span)

    def expand_range(self, span: Range, *, trim: bool = True) -> ExpansionResult:
        span = self._grow(span, self.config.marker_before, self.config.marker_after)
        span = self.whitespace_pretrim(span)
        span = self._grow(span, self.config.word_before, self.config.word_after)
        span = self._strip_whitespace(span)
        if trim:
            return self.trim_smart_selection(span)
        return ExpansionResult(span)

    def trim_smart_selection(self, span: Range) -> ExpansionResult:
        """Shrink ``span`` past structural prefixes and suffixes.

        Prefixes are matched on the start line (up to ``end`` when the span is
        single-line), suffixes on the end line (from ``start`` likewise).
        """

        start, end = span.start, span.end
        same_line = not span.is_multiline
        start_line = self.editor.get_line(start.line)
        end_line = start_line if same_line else self.editor.get_line(end.line)

        trimmed_before = 0
        for regex in self.config.trim_before_regexes:
            limit = end.ch if same_line else len(start_line)
            match = regex.match(start_line[start.ch : limit])
            if match and match.end():
                start = start.with_ch(start.ch + match.end())
                trimmed_before += match.end()

        trimmed_after = 0
        for regex in self.config.trim_after_regexes:
            lower = start.ch if same_line else 0
            match = regex.search(end_line[lower : end.ch])
            if match and match.group(0):
                width = len(match.group(0))
                end = end.with_ch(end.ch - width)
                trimmed_after += width

        return ExpansionResult(Range(start, end), trimmed_before, trimmed_after)

    def whitespace_pretrim(self, span: Range) -> Range:
        """Drop whitespace at the edges of ``span``.

        Whitespace is measured after the structural prefix/suffix is cut from
        the text, so ``"> quote"`` loses ``"> "``. A structural edge without
        whitespace behind it is left for the boundary trim to count, and a
        selection holding nothing but structure (``"- "``) keeps its extent
        so word growth can reach the text behind it.
        """

        text = self.editor.get_range(span.start, span.end)
        if not text.strip():
            return Range.at(span.start)
        lead, trail = structure_lengths(text, self.config)
        remaining = text[lead : len(text) - trail]
        if not remaining.strip():
            indent = len(text) - len(text.lstrip())
            return Range(_position_at(span.start, text, indent), span.end)

        space_before = len(remaining) - len(remaining.lstrip())
        space_after = len(remaining) - len(remaining.rstrip())
        cut_before = lead + space_before if space_before else 0
        cut_after = trail + space_after if space_after else 0
        return Range(
            _position_at(span.start, text, cut_before),
            _position_at(span.start, text, len(text) - cut_after),
        )

    def _strip_whitespace(self, span: Range) -> Range:
        text = self.editor.get_range(span.start, span.end)
        if not text.strip():
            return Range.at(span.start)
        space_before = len(text) - len(text.lstrip())
        space_after = len(text) - len(text.rstrip())
        return Range(
            _position_at(span.start, text, space_before),
            _position_at(span.start, text, len(text) - space_after),
        )

    def _grow(self, span: Range, before: Pattern[str], after: Pattern[str]) -> Range:
        """Extend each edge over the maximal token run touching it."""

        start_line = self.editor.get_line(span.start.line)
        end_line = self.editor.get_line(span.end.line)
        reach_back = before.search(start_line[: span.start.ch])
        reach_forward = after.match(end_line[span.end.ch :])
        back = len(reach_back.group(0)) if reach_back else 0
        forward = len(reach_forward.group(0)) if reach_forward else 0
        return Range(
            span.start.with_ch(span.start.ch - back),
            span.end.with_ch(span.end.ch + forward),
        )


def _position_at(origin: Position, text: str, offset: int) -> Position:
    """Map ``offset`` into ``text`` (which starts at ``origin``) to a position."""

    consumed = text[:offset]
    newlines = consumed.count("\n")
    if not newlines:
        return Position(origin.line, origin.ch + offset)
    return Position(origin.line + newlines, offset - consumed.rfind("\n") - 1)


__all__ = ["ExpansionResult", "SmartSelection"]
