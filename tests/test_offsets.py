from __future__ import annotations

import pytest

from smart_styles.buffer import Position
from smart_styles.engine import MarkerEdges, Offsets, calculate_offsets, offset_cursor
from smart_styles.styles import StyleRule, default_style_table

TABLE = default_style_table()
BOLD = TABLE.get("bold")


@pytest.mark.parametrize(
    ("edges", "modification", "expected"),
    [
        (MarkerEdges(), "apply", Offsets(2, 2)),
        (MarkerEdges(), "remove", Offsets(-2, -2)),
        (MarkerEdges(True, True), "remove", Offsets(0, -4)),
        (MarkerEdges(True, True, multiline=True), "remove", Offsets(0, -2)),
        (MarkerEdges(True, False), "apply", Offsets(0, -2)),
        (MarkerEdges(True, False, multiline=True), "apply", Offsets(0, 0)),
        (MarkerEdges(False, True), "apply", Offsets(2, -4)),
        (MarkerEdges(False, True), "remove", Offsets(-2, -4)),
    ],
)
def test_offset_policy(edges: MarkerEdges, modification: str, expected: Offsets) -> None:
    assert calculate_offsets(edges, BOLD, modification) == expected


def test_trim_widths_fold_into_offsets() -> None:
    offsets = calculate_offsets(
        MarkerEdges(), BOLD, "apply", trimmed_before=2, trimmed_after=1
    )

    assert offsets == Offsets(0, 3)


def test_asymmetric_markers_use_prefix_for_start_edge() -> None:
    underscore = TABLE.get("underscore")

    assert calculate_offsets(MarkerEdges(), underscore, "apply") == Offsets(3, 3)
    assert calculate_offsets(
        MarkerEdges(True, True), underscore, "remove"
    ) == Offsets(0, -7)


def test_marker_edges_measure() -> None:
    rule = StyleRule("highlight", "==", "==")

    edges = MarkerEdges.measure("==mark", rule, multiline=False)

    assert edges == MarkerEdges(starts_with_prefix=True, ends_with_suffix=False)


@pytest.mark.parametrize(
    ("delta", "expected"),
    [(-10, 0), (-2, 1), (0, 3), (2, 5), (10, 5)],
)
def test_offset_cursor_clamps(delta: int, expected: int) -> None:
    assert offset_cursor(Position(4, 3), delta, 5) == Position(4, expected)
