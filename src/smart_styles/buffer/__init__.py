"""Buffer value types, the host protocol, and an in-memory host."""

from .buffer import Buffer, BufferView, Transaction
from .document import LineDocument
from .state import Position, Range, Selection, normalize_selection
from .sync import BufferValidationError, EditorHost
from .validation import ensure_position

__all__ = [
    "Buffer",
    "BufferView",
    "Transaction",
    "LineDocument",
    "Position",
    "Range",
    "Selection",
    "normalize_selection",
    "EditorHost",
    "BufferValidationError",
    "ensure_position",
]
