"""Smart-selection engine: expansion, trimming, offsets, and the transformer."""

from .config import TransformerConfig, build_config
from .markup import restyle, split_edges, structure_lengths, trim_text
from .offsets import MarkerEdges, Offsets, calculate_offsets, offset_cursor
from .patterns import EXTRA_WORD_GLYPHS, TRIM_AFTER, TRIM_BEFORE, TrimPattern
from .selection import ExpansionResult, SmartSelection
from .transformer import EditorNotBoundError, TextTransformer

__all__ = [
    "TransformerConfig",
    "build_config",
    "restyle",
    "split_edges",
    "structure_lengths",
    "trim_text",
    "MarkerEdges",
    "Offsets",
    "calculate_offsets",
    "offset_cursor",
    "TrimPattern",
    "TRIM_BEFORE",
    "TRIM_AFTER",
    "EXTRA_WORD_GLYPHS",
    "ExpansionResult",
    "SmartSelection",
    "TextTransformer",
    "EditorNotBoundError",
]
