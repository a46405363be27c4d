"""Style table holding the rules a transformer can toggle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from .models import StyleRule


@dataclass(slots=True)
class TableStats:
    """Lightweight snapshot describing table state."""

    style_count: int
    names: tuple[str, ...]


class StyleConflictError(ValueError):
    """Raised when a new rule would make style detection ambiguous."""

    def __init__(self, rule: StyleRule, existing: StyleRule):
        reason = "name" if rule.name == existing.name else "markers"
        super().__init__(
            f"Style '{rule.name}' conflicts with '{existing.name}' ({reason})"
        )
        self.rule = rule
        self.existing = existing


class UnknownStyleError(KeyError):
    """Raised when a style name is not registered in the table."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Style '{self.name}' is not registered"


class StyleTable:
    """Owns the named style rules, keyed by name and by marker pair."""

    def __init__(self) -> None:
        self._rules: Dict[str, StyleRule] = {}
        self._by_markers: Dict[tuple[str, str], str] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[StyleRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def get(self, name: str) -> StyleRule:
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownStyleError(name) from None

    def register(self, rule: StyleRule, *, replace: bool = False) -> StyleRule:
        conflict = self.detect_conflict(rule)
        while conflict is not None:
            if not replace:
                raise StyleConflictError(rule, conflict)
            self.unregister(conflict.name)
            conflict = self.detect_conflict(rule)
        self.unregister(rule.name)
        self._rules[rule.name] = rule
        self._by_markers[rule.markers] = rule.name
        return rule

    def unregister(self, name: str) -> Optional[StyleRule]:
        rule = self._rules.pop(name, None)
        if rule is not None:
            self._by_markers.pop(rule.markers, None)
        return rule

    def detect_conflict(self, rule: StyleRule) -> Optional[StyleRule]:
        if rule.name in self._rules and self._rules[rule.name] != rule:
            return self._rules[rule.name]
        owner = self._by_markers.get(rule.markers)
        if owner is not None and owner != rule.name:
            return self._rules[owner]
        return None

    def markers(self) -> tuple[str, ...]:
        """Every distinct marker string used by the table."""

        seen: Dict[str, None] = {}
        for rule in self._rules.values():
            seen.setdefault(rule.prefix)
            seen.setdefault(rule.suffix)
        return tuple(seen)

    def stats(self) -> TableStats:
        return TableStats(style_count=len(self._rules), names=tuple(self._rules))


__all__ = [
    "StyleTable",
    "StyleConflictError",
    "UnknownStyleError",
    "TableStats",
]
