"""Position, range, and selection value types shared by hosts and the engine."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based (line, column) location; orders line first, then column."""

    line: int
    ch: int

    def __post_init__(self) -> None:
        if self.line < 0 or self.ch < 0:
            raise ValueError(f"Position cannot be negative: ({self.line}, {self.ch})")

    def with_ch(self, ch: int) -> "Position":
        return replace(self, ch=ch)


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open span ``[start, end)`` with ``start <= end``."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @classmethod
    def at(cls, position: Position) -> "Range":
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def is_multiline(self) -> bool:
        return self.start.line != self.end.line

    def contains(self, other: "Range") -> bool:
        return self.start <= other.start and other.end <= self.end


@dataclass(frozen=True, slots=True)
class Selection:
    """A host selection; ``head`` may precede ``anchor`` after a backward drag."""

    anchor: Position
    head: Position

    @classmethod
    def cursor(cls, position: Position) -> "Selection":
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.head

    def normalized(self) -> Range:
        return normalize_selection(self.anchor, self.head)


def normalize_selection(anchor: Position, head: Position) -> Range:
    """Order a possibly reversed (anchor, head) pair into a ``Range``."""

    if head < anchor:
        return Range(head, anchor)
    return Range(anchor, head)
