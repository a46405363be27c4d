from __future__ import annotations

import pytest

from smart_styles.buffer import Buffer, Position, Range
from smart_styles.engine import ExpansionResult, SmartSelection, build_config


def make_expander(text: str, **overrides) -> SmartSelection:
    return SmartSelection(Buffer.from_text(text), build_config(**overrides))


def span(start: int, end: int, line: int = 0) -> Range:
    return Range(Position(line, start), Position(line, end))


@pytest.mark.parametrize(
    ("text", "cursor", "expected"),
    [
        ("say hello there", 6, span(4, 9)),
        ("version v12 ok", 9, span(8, 11)),
        ("call (abc) now", 7, span(5, 10)),
        ("foo, bar", 1, span(0, 3)),
        ("un café noir", 5, span(3, 7)),
        ("snake_case", 2, span(0, 5)),
        ("word", 4, span(0, 4)),
        ("", 0, span(0, 0)),
    ],
)
def test_cursor_expands_over_word_glyphs(text: str, cursor: int, expected: Range) -> None:
    result = make_expander(text).expand_cursor(Position(0, cursor), trim=False)

    assert result == ExpansionResult(expected)


def test_cursor_expansion_includes_touching_markers() -> None:
    result = make_expander("x ==mark== y").expand_cursor(Position(0, 5), trim=False)

    assert result.range == span(2, 10)


def test_parentheses_excluded_when_not_word_glyphs() -> None:
    expander = make_expander("call (abc) now", extra_word_glyphs=())

    assert expander.expand_cursor(Position(0, 7), trim=False).range == span(6, 9)


def test_range_grows_over_markers_then_words() -> None:
    expander = make_expander("pre **bold** post")

    assert expander.expand_range(span(6, 8), trim=False).range == span(4, 12)
    assert expander.expand_range(span(5, 7), trim=False).range == span(4, 12)


def test_range_grows_over_partial_words() -> None:
    expander = make_expander("hello world")

    assert expander.expand_range(span(1, 8), trim=False).range == span(0, 11)


def test_whitespace_pretrim_drops_edge_newlines() -> None:
    expander = make_expander("alpha\nbeta")

    leading = expander.whitespace_pretrim(Range(Position(0, 5), Position(1, 4)))
    trailing = expander.whitespace_pretrim(Range(Position(0, 0), Position(1, 0)))

    assert leading == Range(Position(1, 0), Position(1, 4))
    assert trailing == Range(Position(0, 0), Position(0, 5))


def test_whitespace_pretrim_collapses_blank_selection() -> None:
    expander = make_expander("a   b")

    assert expander.whitespace_pretrim(span(1, 4)) == Range.at(Position(0, 1))


def test_whitespace_pretrim_cuts_structure_followed_by_space() -> None:
    expander = make_expander(">  quoted")

    assert expander.whitespace_pretrim(span(0, 9)) == span(3, 9)


def test_whitespace_pretrim_leaves_bare_structure_for_trim() -> None:
    expander = make_expander("# Title")

    assert expander.whitespace_pretrim(span(0, 7)) == span(0, 7)


@pytest.mark.parametrize(
    ("text", "selected"),
    [("- alpha", span(0, 2)), ('say "x" ok', span(4, 5))],
    ids=["bullet", "quote"],
)
def test_whitespace_pretrim_keeps_structure_only_selection(
    text: str, selected: Range
) -> None:
    assert make_expander(text).whitespace_pretrim(selected) == selected


def test_structure_only_selection_grows_to_following_word() -> None:
    expander = make_expander("- alpha")

    assert expander.expand_range(span(0, 2), trim=False).range == span(0, 7)
    assert expander.expand_range(span(0, 2)) == ExpansionResult(span(2, 7), 2, 0)


@pytest.mark.parametrize(
    ("text", "start", "end", "expected", "before", "after"),
    [
        ("### Heading", 0, 11, span(4, 11), 4, 0),
        ("- item", 0, 6, span(2, 6), 2, 0),
        ("- [ ] task", 0, 10, span(6, 10), 6, 0),
        ("- [?] ask", 0, 9, span(6, 9), 6, 0),
        ("> [!tip] Callout", 0, 16, span(9, 16), 9, 0),
        ("[label](url)", 0, 8, span(1, 6), 1, 2),
        ("[[wiki]]", 0, 8, span(1, 7), 1, 1),
        ("key:: value", 0, 5, span(0, 3), 0, 2),
        ("plain", 0, 5, span(0, 5), 0, 0),
    ],
)
def test_trim_smart_selection(
    text: str, start: int, end: int, expected: Range, before: int, after: int
) -> None:
    result = make_expander(text).trim_smart_selection(span(start, end))

    assert result == ExpansionResult(expected, before, after)


def test_trim_only_inspects_start_and_end_lines() -> None:
    expander = make_expander("- first\n- second")

    result = expander.trim_smart_selection(Range(Position(0, 0), Position(1, 8)))

    assert result.range == Range(Position(0, 2), Position(1, 8))
    assert result.trimmed_before == 2


def test_trim_stays_within_candidate() -> None:
    expander = make_expander('"[x]"')

    result = expander.trim_smart_selection(span(0, 5))

    assert span(0, 5).contains(result.range)


def test_expand_dispatches_on_empty_span() -> None:
    expander = make_expander("# word")

    cursor = expander.expand(Range.at(Position(0, 4)))
    selection = expander.expand(span(0, 6))

    assert cursor.range == span(2, 6)
    assert selection == ExpansionResult(span(2, 6), 2, 0)
