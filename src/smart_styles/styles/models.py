"""Dataclasses describing inline style rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StyleRule:
    """A named inline style and the marker pair that wraps styled text.

    Every style toggles through the same algorithm; only ``prefix`` and
    ``suffix`` differ between rules.
    """

    name: str
    prefix: str
    suffix: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("style name cannot be empty")
        if not self.prefix or not self.suffix:
            raise ValueError(f"style '{self.name}' needs a non-empty prefix and suffix")
        if "\n" in self.prefix or "\n" in self.suffix:
            raise ValueError(f"style '{self.name}' markers cannot span lines")

    @property
    def markers(self) -> tuple[str, str]:
        return (self.prefix, self.suffix)

    def wraps(self, text: str) -> bool:
        """True when ``text`` starts with the prefix and ends with the suffix.

        The two markers may not overlap, so a lone ``*`` is not italic.
        """

        if len(text) < len(self.prefix) + len(self.suffix):
            return False
        return text.startswith(self.prefix) and text.endswith(self.suffix)

    def wrap(self, text: str) -> str:
        return f"{self.prefix}{text}{self.suffix}"

    def unwrap(self, text: str) -> str:
        """Strip one marker pair from the edges of ``text``, if both are present."""

        if not self.wraps(text):
            return text
        return text[len(self.prefix) : len(text) - len(self.suffix)]


__all__ = ["StyleRule"]
