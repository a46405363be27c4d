from __future__ import annotations

from typing import List, Tuple

from textual.widgets.text_area import Selection as TextSelection

from smart_styles.adapters.textual import TextAreaHost
from smart_styles.buffer import Position, Selection
from smart_styles.engine import TextTransformer

Location = Tuple[int, int]


class FakeDocument:
    def __init__(self, text: str) -> None:
        self.lines: List[str] = text.split("\n")

    def get_line(self, index: int) -> str:
        return self.lines[index]

    @property
    def line_count(self) -> int:
        return len(self.lines)


class FakeTextArea:
    """Stands in for ``TextArea`` with the subset of its API the host uses."""

    def __init__(self, text: str) -> None:
        self.document = FakeDocument(text)
        self.selection = TextSelection.cursor((0, 0))
        self.replace_calls: List[tuple[str, bool]] = []

    @property
    def text(self) -> str:
        return "\n".join(self.document.lines)

    @property
    def selected_text(self) -> str:
        return self.get_text_range(*self.selection)

    def get_text_range(self, start: Location, end: Location) -> str:
        (start_row, start_col), (end_row, end_col) = sorted((start, end))
        lines = self.document.lines
        if start_row == end_row:
            return lines[start_row][start_col:end_col]
        parts = [lines[start_row][start_col:], *lines[start_row + 1 : end_row]]
        parts.append(lines[end_row][:end_col])
        return "\n".join(parts)

    def replace(
        self,
        insert: str,
        start: Location,
        end: Location,
        *,
        maintain_selection_offset: bool = True,
    ) -> None:
        self.replace_calls.append((insert, maintain_selection_offset))
        (start_row, start_col), (end_row, end_col) = sorted((start, end))
        lines = self.document.lines
        head = lines[start_row][:start_col]
        tail = lines[end_row][end_col:]
        new_lines = (head + insert + tail).split("\n")
        lines[start_row : end_row + 1] = new_lines
        if not maintain_selection_offset:
            row = start_row + len(new_lines) - 1
            self.selection = TextSelection.cursor((row, len(lines[row]) - len(tail)))


def make_host(text: str) -> tuple[FakeTextArea, TextAreaHost]:
    text_area = FakeTextArea(text)
    return text_area, TextAreaHost(text_area)  # type: ignore[arg-type]


def test_host_reads_lines_and_ranges() -> None:
    _, host = make_host("alpha\nbeta")

    assert host.line_count() == 2
    assert host.get_line(1) == "beta"
    assert host.get_range(Position(0, 3), Position(1, 2)) == "ha\nbe"


def test_host_translates_selections() -> None:
    text_area, host = make_host("alpha\nbeta")

    host.set_selection(Position(1, 4), Position(0, 1))

    assert text_area.selection == TextSelection((1, 4), (0, 1))
    assert host.list_selections() == (Selection(Position(1, 4), Position(0, 1)),)
    assert host.get_selection() == "lpha\nbeta"


def test_host_keeps_only_primary_selection() -> None:
    text_area, host = make_host("alpha\nbeta")

    host.set_selections(
        [Selection.cursor(Position(1, 2)), Selection.cursor(Position(0, 1))]
    )

    assert text_area.selection == TextSelection((1, 2), (1, 2))


def test_replace_selection_moves_cursor_past_insert() -> None:
    text_area, host = make_host("hello world")
    host.set_selection(Position(0, 6), Position(0, 11))

    host.replace_selection("there")

    assert text_area.text == "hello there"
    assert text_area.replace_calls == [("there", False)]
    assert text_area.selection == TextSelection.cursor((0, 11))


def test_set_cursor() -> None:
    text_area, host = make_host("hello")

    host.set_cursor(Position(0, 3))

    assert text_area.selection == TextSelection((0, 3), (0, 3))


def test_transformer_drives_text_area() -> None:
    text_area, host = make_host("hello world")
    text_area.selection = TextSelection((0, 0), (0, 5))
    transformer = TextTransformer()
    transformer.set_editor(host)

    transformer.transform_text("bold")

    assert text_area.text == "**hello** world"
    assert text_area.selection == TextSelection((0, 2), (0, 7))


def test_transformer_toggles_word_under_text_area_cursor() -> None:
    text_area, host = make_host("say word")
    text_area.selection = TextSelection.cursor((0, 6))
    transformer = TextTransformer()
    transformer.set_editor(host)

    transformer.transform_text("inlineCode")
    assert text_area.text == "say `word`"
    assert text_area.selection == TextSelection.cursor((0, 7))

    transformer.transform_text("inlineCode")
    assert text_area.text == "say word"
    assert text_area.selection == TextSelection.cursor((0, 6))
