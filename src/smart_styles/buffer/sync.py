"""Host boundary: the editor operations the style engine consumes."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .state import Position, Selection


class EditorHost(Protocol):
    """Line-oriented text buffer supplied by the host editor.

    Positions are zero-based. Columns index Python strings, so they count code
    points; a host that reports UTF-16 columns must convert them before
    calling in. ``get_range`` joins partial first/last lines and full interior
    lines with ``"\\n"``.
    """

    def get_line(self, index: int) -> str:
        ...

    def line_count(self) -> int:
        ...

    def get_range(self, start: Position, end: Position) -> str:
        ...

    def list_selections(self) -> Sequence[Selection]:
        ...

    def set_selection(self, anchor: Position, head: Position) -> None:
        """Replace every selection with the single ``(anchor, head)`` pair."""
        ...

    def set_selections(self, selections: Sequence[Selection]) -> None:
        """Replace every selection, keeping order; the first one is primary."""
        ...

    def get_selection(self) -> str:
        """Return the text covered by the primary selection."""
        ...

    def replace_selection(self, text: str) -> None:
        ...

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        ...

    def set_cursor(self, position: Position) -> None:
        ...


class BufferValidationError(RuntimeError):
    """Raised when a buffer is asked about positions outside its text."""

    def __init__(self, message: str, *, position: Optional[Position] = None) -> None:
        super().__init__(message)
        self.position = position
