"""Structural trim tables and the glyph sets that define a "word".

Order inside each trim table matters: longer or more specific patterns come
first, since every entry is tried once, in sequence, against whatever the
previous entries left over.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Pattern


@dataclass(frozen=True, slots=True)
class TrimPattern:
    """A literal (or, with ``regex=True``, a pattern) never wrapped in markers."""

    source: str
    regex: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        if not self.source:
            raise ValueError("trim pattern cannot be empty")

    @property
    def expression(self) -> str:
        return self.source if self.regex else re.escape(self.source)

    def leading(self) -> Pattern[str]:
        return re.compile(r"\A(?:" + self.expression + ")")

    def trailing(self) -> Pattern[str]:
        return re.compile("(?:" + self.expression + r")\Z")


TRIM_BEFORE: tuple[TrimPattern, ...] = (
    TrimPattern(r"> \[!\w+\] ", regex=True, description="callout"),
    TrimPattern("###### "),
    TrimPattern("##### "),
    TrimPattern("#### "),
    TrimPattern("### "),
    TrimPattern("## "),
    TrimPattern("# "),
    TrimPattern("- [ ] "),
    TrimPattern("- [x] "),
    TrimPattern(r"- \[\S\] ", regex=True, description="custom checkbox"),
    TrimPattern("- "),
    TrimPattern('"'),
    TrimPattern("["),
    TrimPattern(">"),
)

# "](" keeps Markdown links intact, "::" keeps inline fields intact.
TRIM_AFTER: tuple[TrimPattern, ...] = (
    TrimPattern('"'),
    TrimPattern("](", description="link target"),
    TrimPattern("::", description="inline field"),
    TrimPattern("]"),
)

EXTRA_WORD_GLYPHS: tuple[str, ...] = ("(", ")")

# Letters and digits of any script; "_" is excluded so it is not swallowed as a word char.
ALNUM = r"[^\W_]"


def token_alternation(tokens: Iterable[str], *, alnum: bool) -> str:
    """Build ``a|b|...`` from literal tokens, longest first so ``**`` beats ``*``."""

    ordered = sorted(dict.fromkeys(tokens), key=lambda token: (-len(token), token))
    parts = [re.escape(token) for token in ordered if token]
    if alnum:
        parts.insert(0, ALNUM)
    if not parts:
        # Matches nothing; an empty run is still a valid (no-op) expansion.
        return "(?!)"
    return "|".join(parts)


def run_before(alternation: str) -> Pattern[str]:
    """Matcher for the maximal token run that ends a string."""

    return re.compile("(?:" + alternation + r")*\Z")


def run_after(alternation: str) -> Pattern[str]:
    """Matcher for the maximal token run that starts a string."""

    return re.compile("(?:" + alternation + ")*")


__all__ = [
    "TrimPattern",
    "TRIM_BEFORE",
    "TRIM_AFTER",
    "EXTRA_WORD_GLYPHS",
    "token_alternation",
    "run_before",
    "run_after",
]
