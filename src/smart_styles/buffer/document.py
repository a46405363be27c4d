"""Line storage backing the in-memory host buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, slots=True)
class LineDocument:
    """Versioned, immutable tuple of lines.

    Lines never contain ``"\\n"``. A trailing newline in the source text shows
    up as a final empty line, so ``text()`` gives back exactly what
    ``from_text`` was handed.
    """

    lines: Tuple[str, ...] = ("",)
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "LineDocument":
        return cls(lines=tuple(text.split("\n")))

    def snapshot(self) -> Tuple[str, ...]:
        return self.lines

    def text(self) -> str:
        return "\n".join(self.lines)

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "LineDocument":
        """Next version, with lines ``start`` up to ``end`` swapped for ``new_lines``."""

        spliced = self.lines[:start] + tuple(new_lines) + self.lines[end:]
        return LineDocument(lines=spliced, version=self.version + 1)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def get_line(self, index: int) -> str:
        return self.lines[index]
