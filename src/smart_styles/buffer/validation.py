"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import LineDocument
from .state import Position
from .sync import BufferValidationError


def ensure_position(document: LineDocument, position: Position) -> Position:
    if position.line >= document.line_count:
        raise BufferValidationError("Line out of range", position=position)
    if position.ch > len(document.get_line(position.line)):
        raise BufferValidationError("Column out of range", position=position)
    return position
