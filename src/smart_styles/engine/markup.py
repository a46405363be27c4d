"""Pure text helpers: structural edges and marker wrapping."""

from __future__ import annotations

from typing import Literal

from smart_styles.styles import StyleRule

from .config import TransformerConfig

Modification = Literal["apply", "remove"]


def structure_lengths(text: str, config: TransformerConfig) -> tuple[int, int]:
    """Length of the structural prefix and suffix found on ``text``.

    Each trim pattern is tried once, in table order, against what the earlier
    patterns left over.
    """

    lead = 0
    for regex in config.trim_before_regexes:
        match = regex.match(text[lead:])
        if match:
            lead += match.end()

    trail = 0
    for regex in config.trim_after_regexes:
        match = regex.search(text[lead : len(text) - trail])
        if match:
            trail += len(match.group(0))
    return lead, trail


def trim_text(text: str, config: TransformerConfig) -> str:
    """Return ``text`` without its structural prefix and suffix."""

    lead, trail = structure_lengths(text, config)
    return text[lead : len(text) - trail]


def split_edges(text: str, config: TransformerConfig) -> tuple[str, str, str]:
    """Split one line into ``(lead, core, tail)``; only ``core`` takes markers.

    ``lead`` holds indentation and structural prefixes (bullets, headings,
    checkboxes), ``tail`` trailing whitespace and structural suffixes. A line
    with nothing worth styling comes back as ``(text, "", "")``.
    """

    start, stop = 0, len(text)
    start += _leading_space(text, start, stop)
    lead, trail = structure_lengths(text[start:stop], config)
    start += lead
    stop -= trail
    start += _leading_space(text, start, stop)
    stop -= _trailing_space(text, start, stop)
    if start >= stop:
        return text, "", ""
    return text[:start], text[start:stop], text[stop:]


def restyle(
    text: str,
    rule: StyleRule,
    modification: Modification,
    config: TransformerConfig,
    *,
    multiline: bool,
) -> str:
    """Apply or remove ``rule`` on ``text``.

    Single-line text is wrapped or unwrapped as a whole. Multi-line text is
    handled line by line so every line keeps its own bullet or heading outside
    the markers; a removal falls back to unwrapping the block as a whole when
    the markers only sit at its two ends.
    """

    if not multiline:
        return rule.wrap(text) if modification == "apply" else rule.unwrap(text)

    lines = text.split("\n")
    if modification == "apply":
        return "\n".join(_restyle_line(line, rule.wrap, config) for line in lines)

    cores = [split_edges(line, config)[1] for line in lines]
    if all(rule.wraps(core) for core in cores if core):
        return "\n".join(_restyle_line(line, rule.unwrap, config) for line in lines)
    return rule.unwrap(text)


def _restyle_line(line: str, transform, config: TransformerConfig) -> str:
    lead, core, tail = split_edges(line, config)
    if not core:
        return line
    return lead + transform(core) + tail


def _leading_space(text: str, start: int, stop: int) -> int:
    segment = text[start:stop]
    return len(segment) - len(segment.lstrip())


def _trailing_space(text: str, start: int, stop: int) -> int:
    segment = text[start:stop]
    return len(segment) - len(segment.rstrip())


__all__ = [
    "Modification",
    "structure_lengths",
    "trim_text",
    "split_edges",
    "restyle",
]
