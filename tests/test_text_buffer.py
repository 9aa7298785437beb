import os

import pytest

from ayed.layout import Position
from ayed.selection import Selection, Selections
from ayed.text_buffer import TextBuffer, TextBufferError


def load(tmp_path, text, name="file.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8", newline="")
    return TextBuffer.from_path(str(path))


def test_new_buffer_has_one_empty_line():
    buffer = TextBuffer()
    assert buffer.line_count() == 1
    assert buffer.first_line() == ""
    assert buffer.last_row() == 0
    assert buffer.is_dirty() is False
    assert buffer.path is None


def test_from_path_splits_lines(tmp_path):
    buffer = load(tmp_path, "hello\nworld\n")
    assert buffer.line(0) == "hello"
    assert buffer.line(1) == "world"
    assert buffer.line(2) == ""
    assert buffer.line_count() == 3
    assert buffer.line(3) is None
    assert buffer.line(-1) is None
    assert buffer.path == str(tmp_path / "file.txt")


def test_from_missing_path_raises(tmp_path):
    with pytest.raises(TextBufferError, match="can't read"):
        TextBuffer.from_path(str(tmp_path / "missing.txt"))


def test_write_round_trip(tmp_path):
    text = "one\ntwo\r\nthree"
    buffer = load(tmp_path, text)
    buffer.insert_char_at(Position(0, 0), "X")
    assert buffer.is_dirty()
    buffer.write_atomic()
    assert not buffer.is_dirty()
    assert (tmp_path / "file.txt").read_text(encoding="utf-8", newline="") == "X" + text
    assert not os.path.exists(str(tmp_path / "file.txt") + ".ayed-tmp")


def test_write_to_other_path(tmp_path):
    buffer = load(tmp_path, "abc\ndef")
    target = tmp_path / "copy.txt"
    buffer.write_to_atomic(str(target))
    assert target.read_text(encoding="utf-8") == "abc\ndef"


def test_write_without_path_raises():
    with pytest.raises(TextBufferError, match="missing path"):
        TextBuffer().write_atomic()


def test_write_fails_when_temp_file_exists(tmp_path):
    buffer = load(tmp_path, "abc")
    target = tmp_path / "file.txt"
    (tmp_path / "file.txt.ayed-tmp").write_text("busy")
    with pytest.raises(TextBufferError):
        buffer.write_to_atomic(str(target))
    assert target.read_text() == "abc"


def test_insert_char(tmp_path):
    text = "hello"
    buffer = load(tmp_path, text)
    buffer.insert_char_at(Position(2, 0), "X")
    assert buffer.line(0) == text[:2] + "X" + text[2:]
    buffer.insert_char_at(Position(len(text) + 1, 0), "!")
    assert buffer.line(0).endswith("!")


def test_insert_newline_splits_line(tmp_path):
    buffer = load(tmp_path, "hello")
    buffer.insert_char_at(Position(2, 0), "\n")
    assert buffer.line(0) == "he"
    assert buffer.line(1) == "llo"
    assert buffer.is_dirty()


@pytest.mark.parametrize(
    "at, message",
    [
        (Position(0, 5), "bad row"),
        (Position(-1, 0), "bad column"),
        (Position(9, 0), "bad column"),
    ],
)
def test_insert_out_of_bounds(tmp_path, at, message):
    buffer = load(tmp_path, "abc")
    with pytest.raises(TextBufferError, match=message):
        buffer.insert_char_at(at, "x")
    with pytest.raises(TextBufferError, match=message):
        buffer.split_line(at)


def test_delete_undoes_insert(tmp_path):
    text = "hello\nworld"
    buffer = load(tmp_path, text)
    buffer.insert_char_at(Position(3, 1), "Z")
    buffer.delete_at(Position(3, 1))
    assert [buffer.line(0), buffer.line(1)] == text.split("\n")


def test_delete_at_line_end_joins(tmp_path):
    buffer = load(tmp_path, "hello\nworld")
    buffer.delete_at(Position(5, 0))
    assert buffer.line(0) == "helloworld"
    assert buffer.line_count() == 1


def test_delete_at_end_of_last_line_is_noop(tmp_path):
    buffer = load(tmp_path, "abc")
    buffer.delete_at(Position(3, 0))
    assert buffer.line(0) == "abc"
    assert buffer.is_dirty()


def test_delete_at_bad_positions(tmp_path):
    buffer = load(tmp_path, "abc")
    with pytest.raises(TextBufferError, match="bad row"):
        buffer.delete_at(Position(0, 3))
    with pytest.raises(TextBufferError, match="bad column"):
        buffer.delete_at(Position(4, 0))


def test_join_line_errors(tmp_path):
    buffer = load(tmp_path, "a\nb")
    with pytest.raises(TextBufferError, match="no next line"):
        buffer.join_line_with_next(1)
    with pytest.raises(TextBufferError, match="bad row"):
        buffer.join_line_with_next(2)


def test_selection_char_count_counts_terminators(tmp_path):
    buffer = load(tmp_path, "hello\nworld")
    single = Selection().with_anchor(Position(1, 0)).with_cursor(Position(3, 0))
    assert buffer.selection_char_count(single) == 3
    whole_first_line = Selection().with_anchor(Position(0, 0)).with_cursor(Position(5, 0))
    spanning = Selection().with_anchor(Position(0, 0)).with_cursor(Position(0, 1))
    assert buffer.selection_char_count(spanning) == buffer.selection_char_count(whole_first_line) + 1


def test_limit_position_to_content(tmp_path):
    buffer = load(tmp_path, "hello\nhi")
    assert buffer.limit_position_to_content(Position(10, 9)) == Position(2, 1)
    assert buffer.limit_position_to_content(Position(-3, -1)) == Position(0, 0)
    assert buffer.limit_position_to_content(Position(4, 0)) == Position(4, 0)


def test_limit_selection_keeps_desired_columns(tmp_path):
    buffer = load(tmp_path, "hello\nhi")
    selection = Selection().with_anchor(Position(0, 0)).with_cursor(Position(4, 0))
    moved = selection.with_provisional_cursor(Position(4, 1))
    limited = buffer.limit_selection_to_content(moved)
    assert limited.cursor == Position(2, 1)
    assert limited.desired_cursor_column_index == selection.desired_cursor_column_index


def test_move_position_horizontally(tmp_path):
    buffer = load(tmp_path, "ab\ncd")
    assert buffer.move_position_horizontally(Position(0, 0), -1) is None
    assert buffer.move_position_horizontally(Position(2, 1), 5) is None
    assert buffer.move_position_horizontally(Position(0, 1), -3) == Position(2, 0)
    assert buffer.move_position_horizontally(Position(2, 0), 1) == Position(0, 1)
    assert buffer.move_position_horizontally(Position(1, 0), 7) == Position(2, 0)
    assert buffer.move_position_horizontally(Position(1, 0), 0) == Position(1, 0)


def test_selections_follow_insert(tmp_path):
    buffer = load(tmp_path, "hello\nworld")
    cursor = Position(4, 0)
    before = Selection.with_position(Position(1, 0))
    selections = Selections(Selection.with_position(cursor), [before])
    buffer.add_selections(selections)
    buffer.insert_char_at(Position(2, 0), "X")
    assert selections.primary().cursor == cursor.offset((1, 0))
    assert selections.get(1).cursor == before.cursor


def test_selections_follow_split_and_join(tmp_path):
    buffer = load(tmp_path, "hello\nworld")
    original = Position(4, 0)
    selections = Selections(Selection.with_position(original))
    buffer.add_selections(selections)
    buffer.split_line(Position(2, 0))
    assert selections.primary().cursor == Position(2, 1)
    buffer.join_line_with_next(0)
    assert selections.primary().cursor == original


def test_selections_follow_delete(tmp_path):
    buffer = load(tmp_path, "hello\nworld")
    cursor = Position(4, 0)
    below = Position(1, 1)
    selections = Selections(Selection.with_position(cursor), [Selection.with_position(below)])
    buffer.add_selections(selections)
    buffer.delete_at(Position(1, 0))
    assert selections.primary().cursor == cursor.offset((-1, 0))
    assert selections.get(1).cursor == below


def test_dropped_selections_are_forgotten(tmp_path):
    buffer = load(tmp_path, "hello")
    selections = Selections(Selection.with_position(Position(3, 0)))
    buffer.add_selections(selections)
    del selections
    buffer.insert_char_at(Position(0, 0), "X")
    assert buffer.line(0) == "Xhello"
    assert buffer._selections == []