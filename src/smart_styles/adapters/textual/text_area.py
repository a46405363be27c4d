"""``EditorHost`` implementation backed by a Textual ``TextArea``."""

from __future__ import annotations

from typing import Sequence, Tuple

from textual.widgets import TextArea
from textual.widgets.text_area import Selection as TextSelection

from smart_styles.buffer import Position, Selection

Location = Tuple[int, int]


def _location(position: Position) -> Location:
    return (position.line, position.ch)


def _position(location: Location) -> Position:
    row, col = location
    return Position(row, col)


class TextAreaHost:
    """Exposes a ``TextArea`` through the line/selection API the engine uses.

    ``TextArea`` tracks a single selection, so only the primary selection of a
    multi-selection survives ``set_selections``.
    """

    def __init__(self, text_area: TextArea) -> None:
        self.text_area = text_area

    def get_line(self, index: int) -> str:
        return self.text_area.document.get_line(index)

    def line_count(self) -> int:
        return self.text_area.document.line_count

    def get_range(self, start: Position, end: Position) -> str:
        return self.text_area.get_text_range(_location(start), _location(end))

    def list_selections(self) -> Tuple[Selection, ...]:
        start, end = self.text_area.selection
        return (Selection(_position(start), _position(end)),)

    def set_selection(self, anchor: Position, head: Position) -> None:
        self.text_area.selection = TextSelection(_location(anchor), _location(head))

    def set_selections(self, selections: Sequence[Selection]) -> None:
        primary = selections[0]
        self.set_selection(primary.anchor, primary.head)

    def get_selection(self) -> str:
        return self.text_area.selected_text

    def replace_selection(self, text: str) -> None:
        start, end = sorted(self.text_area.selection)
        self.text_area.replace(text, start, end, maintain_selection_offset=False)

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        self.text_area.replace(text, _location(start), _location(end))

    def set_cursor(self, position: Position) -> None:
        self.text_area.selection = TextSelection.cursor(_location(position))
