"""Text transformer: toggles inline styles around smart selections."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from smart_styles.buffer import EditorHost, Position, Range, Selection
from smart_styles.runtime import telemetry
from smart_styles.styles import StyleRule

from .config import TransformerConfig, build_config
from .markup import Modification, restyle
from .offsets import MarkerEdges, calculate_offsets, offset_cursor
from .selection import ExpansionResult, SmartSelection


class EditorNotBoundError(RuntimeError):
    """Raised when a transform runs before ``set_editor``."""


class TextTransformer:
    """Applies or removes a style around every selection of a host buffer.

    Per selection, in document order: normalize, expand twice (once without
    the boundary trim, once with it), remove the style if either candidate is
    already wrapped in it, apply it if nothing was removed or ``toggle`` is
    off, then restore the selection so it still brackets the same logical text.
    """

    def __init__(
        self,
        config: Optional[TransformerConfig] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.config = config or build_config()
        self.editor: Optional[EditorHost] = None
        self._logger_name = logger_name or "smart_styles.engine"

    def set_editor(self, editor: EditorHost) -> None:
        self.editor = editor

    def transform_text(self, style: str, toggle: bool = True) -> tuple[Selection, ...]:
        """Toggle ``style`` on every selection; return the restored selections.

        With ``toggle=False`` the style is always applied: text that already
        carries it is unwrapped and then wrapped again around a fresh
        expansion, so the result is styled either way.
        """

        editor = self._require_editor()
        rule = self.config.styles.get(style)
        pending = _ordered_ranges(editor.list_selections())
        restored: List[Selection] = []

        with telemetry.span(
            f"transform::{rule.name}",
            logger_name=self._logger_name,
            component="transformer",
            metadata={"selections": len(pending), "toggle": toggle},
        ):
            for index in range(len(pending)):
                span = pending[index]
                before = {
                    line: len(editor.get_line(line))
                    for line in range(span.start.line, span.end.line + 1)
                }
                restored.append(self._transform_range(span, rule, toggle))
                deltas = {
                    line: len(editor.get_line(line)) - length
                    for line, length in before.items()
                }
                for later in range(index + 1, len(pending)):
                    pending[later] = _shift_range(pending[later], deltas)

            editor.set_selections(restored)
        return tuple(restored)

    def get_smart_selection(self, trim: bool = True) -> ExpansionResult:
        """Expansion candidate for the primary selection, without editing."""

        editor = self._require_editor()
        span = editor.list_selections()[0].normalized()
        return SmartSelection(editor, self.config).expand(span, trim=trim)

    def inside_style(self, span: Range, rule: StyleRule) -> bool:
        editor = self._require_editor()
        return rule.wraps(editor.get_range(span.start, span.end))

    def detect_style(self, span: Range) -> Optional[str]:
        """Name of the first style whose markers wrap ``span``, if any."""

        for rule in self.config.styles:
            if self.inside_style(span, rule):
                return rule.name
        return None

    def offset_cursor(self, position: Position, delta: int) -> Position:
        editor = self._require_editor()
        return offset_cursor(position, delta, len(editor.get_line(position.line)))

    def _transform_range(self, span: Range, rule: StyleRule, toggle: bool) -> Selection:
        expander = SmartSelection(self._require_editor(), self.config)
        check = expander.expand(span, trim=False)
        trimmed = expander.expand(span, trim=True)

        candidates = [check]
        if trimmed.range != check.range:
            candidates.append(trimmed)
        for candidate in candidates:
            if not self.inside_style(candidate.range, rule):
                continue
            removed = self._modify(span, candidate, rule, "remove")
            if toggle:
                return removed
            span = removed.normalized()
            trimmed = expander.expand(span, trim=True)
            break

        return self._modify(span, trimmed, rule, "apply")

    def _modify(
        self,
        span: Range,
        target: ExpansionResult,
        rule: StyleRule,
        modification: Modification,
    ) -> Selection:
        """Rewrite ``target`` and return the selection to restore.

        Offsets are measured from the user's own selection (edge whitespace
        cut, never grown), or from the cursor itself for a bare cursor.
        """

        editor = self._require_editor()
        has_selection = not span.is_empty
        original = span
        if has_selection:
            original = SmartSelection(editor, self.config).whitespace_pretrim(span)
        original_text = editor.get_range(original.start, original.end)
        edges = MarkerEdges.measure(
            original_text, rule, multiline=original.is_multiline
        )
        offsets = calculate_offsets(
            edges,
            rule,
            modification,
            trimmed_before=target.trimmed_before,
            trimmed_after=target.trimmed_after,
        )
        expanded = target.range
        telemetry.record_event(
            f"style.{modification}",
            level="debug",
            logger_name=self._logger_name,
            data={
                "style": rule.name,
                "from": (expanded.start.line, expanded.start.ch),
                "to": (expanded.end.line, expanded.end.ch),
                "pre": offsets.pre,
                "post": offsets.post,
            },
        )

        if has_selection:
            editor.set_selection(expanded.start, expanded.end)
            value = editor.get_selection()
            editor.replace_selection(
                restyle(
                    value,
                    rule,
                    modification,
                    self.config,
                    multiline=expanded.is_multiline,
                )
            )
            return Selection(
                self.offset_cursor(original.start, offsets.pre),
                self.offset_cursor(original.end, offsets.post),
            )

        value = editor.get_range(expanded.start, expanded.end)
        editor.replace_range(
            restyle(value, rule, modification, self.config, multiline=False),
            expanded.start,
            expanded.end,
        )
        return Selection.cursor(self.offset_cursor(span.start, offsets.pre))

    def _require_editor(self) -> EditorHost:
        if self.editor is None:
            raise EditorNotBoundError("No editor bound; call set_editor() first")
        return self.editor


def _ordered_ranges(selections: Sequence[Selection]) -> List[Range]:
    unique = dict.fromkeys(selection.normalized() for selection in selections)
    return sorted(unique, key=lambda span: (span.start, span.end))


def _shift_range(span: Range, deltas: Dict[int, int]) -> Range:
    start, end = span.start, span.end
    if start.line in deltas:
        start = start.with_ch(max(0, start.ch + deltas[start.line]))
    if end.line in deltas:
        end = end.with_ch(max(0, end.ch + deltas[end.line]))
    return Range(start, end)


__all__ = ["TextTransformer", "EditorNotBoundError"]
