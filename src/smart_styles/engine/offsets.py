"""Cursor restoration math for style edits.

After markers are inserted or removed, the host selection is rebuilt from the
pre-edit boundaries shifted by two signed deltas: ``pre`` for the start edge
and ``post`` for the end edge (positive moves right).
"""

from __future__ import annotations

from dataclasses import dataclass

from smart_styles.buffer import Position
from smart_styles.styles import StyleRule

from .markup import Modification


@dataclass(frozen=True, slots=True)
class MarkerEdges:
    """Which markers the measured text already carries at its own edges."""

    starts_with_prefix: bool = False
    ends_with_suffix: bool = False
    multiline: bool = False

    @classmethod
    def measure(cls, text: str, rule: StyleRule, *, multiline: bool) -> "MarkerEdges":
        return cls(
            starts_with_prefix=text.startswith(rule.prefix),
            ends_with_suffix=text.endswith(rule.suffix),
            multiline=multiline,
        )


@dataclass(frozen=True, slots=True)
class Offsets:
    pre: int
    post: int


def calculate_offsets(
    edges: MarkerEdges,
    rule: StyleRule,
    modification: Modification,
    *,
    trimmed_before: int = 0,
    trimmed_after: int = 0,
) -> Offsets:
    """Deltas for the start and end edge of the restored selection.

    ``trimmed_before``/``trimmed_after`` are the structural widths the
    expansion cut off its candidate; they are folded back in last.
    """

    sign = 1 if modification == "apply" else -1
    prefix_len = len(rule.prefix)
    if edges.multiline:
        collapsed = -len(rule.suffix)
    else:
        collapsed = -(prefix_len + len(rule.suffix))

    if edges.starts_with_prefix and edges.ends_with_suffix:
        pre, post = 0, collapsed
    elif edges.starts_with_prefix:
        pre, post = 0, (0 if edges.multiline else -prefix_len)
    elif edges.ends_with_suffix:
        pre, post = sign * prefix_len, collapsed
    else:
        pre = post = sign * prefix_len

    return Offsets(pre=pre - trimmed_before, post=post + trimmed_after)


def offset_cursor(position: Position, delta: int, line_length: int) -> Position:
    """Shift ``position`` along its line, clamped to ``[0, line_length]``."""

    return position.with_ch(max(0, min(position.ch + delta, line_length)))


__all__ = ["MarkerEdges", "Offsets", "calculate_offsets", "offset_cursor"]
