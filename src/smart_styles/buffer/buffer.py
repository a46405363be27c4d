"""In-memory host buffer implementing ``EditorHost``."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import ContextManager, Optional, Sequence, Tuple

from smart_styles.runtime import telemetry

from .document import LineDocument
from .state import Position, Range, Selection, normalize_selection
from .validation import ensure_position


@dataclass(slots=True)
class BufferView:
    version: int
    text: str
    selections: Tuple[Selection, ...]


class Buffer:
    """List-of-lines buffer with CodeMirror-style multi-selection semantics.

    Hosts that own their own text model implement ``EditorHost`` directly;
    this class serves tests and headless callers.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[LineDocument] = None,
        selections: Sequence[Selection] = (),
    ) -> None:
        self.name = name
        self.document = document or LineDocument()
        self._selections: Tuple[Selection, ...] = tuple(selections) or (
            Selection.cursor(Position(0, 0)),
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        selections: Sequence[Selection] = (),
        name: str = "default",
    ) -> "Buffer":
        return cls(
            name=name, document=LineDocument.from_text(text), selections=selections
        )

    def snapshot(self) -> BufferView:
        return BufferView(
            version=self.document.version,
            text=self.document.text(),
            selections=self._selections,
        )

    def get_value(self) -> str:
        return self.document.text()

    def get_line(self, index: int) -> str:
        return self.document.get_line(index)

    def line_count(self) -> int:
        return self.document.line_count

    def get_range(self, start: Position, end: Position) -> str:
        span = self._validated(start, end)
        lines = self.document.snapshot()
        if not span.is_multiline:
            return lines[span.start.line][span.start.ch : span.end.ch]
        parts = [lines[span.start.line][span.start.ch :]]
        parts.extend(lines[span.start.line + 1 : span.end.line])
        parts.append(lines[span.end.line][: span.end.ch])
        return "\n".join(parts)

    def list_selections(self) -> Tuple[Selection, ...]:
        return self._selections

    def set_selection(self, anchor: Position, head: Position) -> None:
        self._validated(anchor, head)
        self._selections = (Selection(anchor, head),)

    def set_selections(self, selections: Sequence[Selection]) -> None:
        if not selections:
            raise ValueError("At least one selection is required")
        for selection in selections:
            self._validated(selection.anchor, selection.head)
        self._selections = tuple(selections)

    def get_selection(self) -> str:
        span = self._selections[0].normalized()
        return self.get_range(span.start, span.end)

    def replace_selection(self, text: str) -> None:
        span = self._selections[0].normalized()
        caret = self._replace(text, span, label="replace_selection")
        self._selections = (Selection.cursor(caret),) + self._selections[1:]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        self._replace(text, self._validated(start, end), label="replace_range")

    def set_cursor(self, position: Position) -> None:
        ensure_position(self.document, position)
        self._selections = (Selection.cursor(position),)

    def _validated(self, first: Position, second: Position) -> Range:
        ensure_position(self.document, first)
        ensure_position(self.document, second)
        return normalize_selection(first, second)

    def _replace(self, text: str, span: Range, *, label: str) -> Position:
        """Splice ``text`` over ``span`` and return the position after it."""

        with Transaction(self, label):
            head = self.document.get_line(span.start.line)[: span.start.ch]
            tail = self.document.get_line(span.end.line)[span.end.ch :]
            new_lines = (head + text + tail).split("\n")
            self.document = self.document.update_lines(
                span.start.line, span.end.line + 1, new_lines
            )
        last = span.start.line + len(new_lines) - 1
        return Position(last, len(self.document.get_line(last)) - len(tail))


class Transaction(AbstractContextManager["Transaction"]):
    """Wraps a single buffer edit in a telemetry span."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False
