"""Smart inline-style toggling for plain-text markup editors."""

from .buffer import Buffer, EditorHost, Position, Range, Selection
from .engine import EditorNotBoundError, TextTransformer, TransformerConfig, build_config
from .styles import StyleRule, StyleTable, UnknownStyleError

__all__ = [
    "adapters",
    "buffer",
    "engine",
    "runtime",
    "styles",
    "Buffer",
    "EditorHost",
    "Position",
    "Range",
    "Selection",
    "TextTransformer",
    "TransformerConfig",
    "build_config",
    "EditorNotBoundError",
    "StyleRule",
    "StyleTable",
    "UnknownStyleError",
]

__version__ = "0.1.0"
