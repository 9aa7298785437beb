"""An editable buffer of text lines that keeps attached selections in place."""

from __future__ import annotations

import os
import weakref
from collections.abc import Callable

from ayed.layout import Position
from ayed.selection import Selection, Selections


class TextBufferError(Exception):
    """An edit, read or write on a text buffer failed."""


class TextBuffer:
    """Lines of text addressed by row and character column.

    There is always at least one line. Line terminators are not stored; they
    are implied between lines, and ``"\\n"`` stands for one when inserting.
    A column equal to a line's length addresses its (implied) terminator.
    """

    def __init__(self, path: str | None = None) -> None:
        self._lines: list[str] = [""]
        self._selections: list[weakref.ref] = []
        self.path = path
        self._dirty = False

    @classmethod
    def from_path(cls, path: str) -> TextBuffer:
        """Load the file at ``path`` into a new buffer."""
        try:
            with open(path, encoding="utf-8", newline="") as file:
                content = file.read()
        except (OSError, UnicodeDecodeError) as err:
            raise TextBufferError(f"can't read '{path}': {err}") from err
        buffer = cls(path)
        buffer._lines = content.split("\n")
        return buffer

    def write_atomic(self) -> None:
        """Write the buffer to its own path, atomically."""
        if self.path is None:
            raise TextBufferError("missing path")
        self.write_to_atomic(self.path)

    def write_to_atomic(self, path: str) -> None:
        """Write to a fresh temporary file next to ``path``, then rename it over ``path``."""
        tmp_path = f"{path}.ayed-tmp"
        try:
            with open(tmp_path, "x", encoding="utf-8", newline="") as file:
                file.write("\n".join(self._lines))
            os.replace(tmp_path, path)
        except OSError as err:
            raise TextBufferError(str(err)) from err
        self._dirty = False

    def is_dirty(self) -> bool:
        return self._dirty

    def add_selections(self, selections: Selections) -> None:
        """Keep ``selections`` adjusted through edits for as long as it is alive."""
        self._selections.append(weakref.ref(selections))

    def line(self, row: int) -> str | None:
        if 0 <= row < len(self._lines):
            return self._lines[row]
        return None

    def first_line(self) -> str:
        return self._lines[0]

    def last_row(self) -> int:
        return max(0, len(self._lines) - 1)

    def line_count(self) -> int:
        return len(self._lines)

    def line_char_count(self, row: int) -> int | None:
        line = self.line(row)
        return None if line is None else len(line)

    def selection_char_count(self, selection: Selection) -> int:
        """Count the characters (terminators included) covered by ``selection``."""
        start, end = selection.start_end()
        total = 0
        for row in range(start.row, end.row + 1):
            begin = start.column if row == start.row else 0
            if row == end.row:
                stop = end.column
            else:
                length = self.line_char_count(row)
                stop = begin if length is None else length
            count = stop + 1 - begin
            if count < 0:
                raise ValueError(f"selection runs backwards on row {row}: {selection}")
            total += count
        return total

    def limit_selection_to_content(self, selection: Selection) -> Selection:
        cursor = self.limit_position_to_content(selection.cursor)
        anchor = self.limit_position_to_content(selection.anchor)
        return selection.with_provisional_cursor(cursor).with_provisional_anchor(anchor)

    def limit_position_to_content(self, position: Position) -> Position:
        row = min(max(position.row, 0), self.last_row())
        column = min(max(position.column, 0), self.line_char_count(row) or 0)
        return Position(column, row)

    def move_position_horizontally(self, position: Position, direction: int) -> Position | None:
        """Move one character in the sign of ``direction``, wrapping across lines.

        Returns ``None`` when the move would leave the buffer.
        """
        step = (direction > 0) - (direction < 0)
        target = position.column + step
        end_column = self.line_char_count(position.row)
        if target < 0:
            if position.row == 0:
                return None
            previous_row = position.row - 1
            moved = Position(self.line_char_count(previous_row) or 0, previous_row)
        elif end_column is not None and target > end_column:
            if position.row == self.last_row():
                return None
            moved = Position(0, position.row + 1)
        else:
            moved = position.offset((step, 0))
        return self.limit_position_to_content(moved)

    def insert_char_at(self, at: Position, ch: str) -> None:
        if ch == "\n":
            self.split_line(at)
        else:
            line = self._line_for_edit(at)
            self._lines[at.row] = line[:at.column] + ch + line[at.column:]
            self._adjust_selections(lambda pos: _after_insert_char(pos, at))
        self._dirty = True

    def split_line(self, at: Position) -> None:
        """Break the line at ``at``, moving the rest to a new following line."""
        line = self._line_for_edit(at)
        self._lines[at.row] = line[:at.column]
        self._lines.insert(at.row + 1, line[at.column:])
        self._adjust_selections(lambda pos: _after_split_line(pos, at))
        self._dirty = True

    def delete_at(self, at: Position) -> None:
        """Delete the character at ``at``; at a line's end, join it with the next."""
        line = self.line(at.row)
        if line is None:
            raise TextBufferError("bad row")
        if not 0 <= at.column <= len(line):
            raise TextBufferError("bad column")
        if at.column == len(line):
            try:
                self.join_line_with_next(at.row)
            except TextBufferError:
                pass
        else:
            self._lines[at.row] = line[:at.column] + line[at.column + 1:]
            self._adjust_selections(lambda pos: _after_delete_at(pos, at))
        self._dirty = True

    def delete_selection(self, selection: Selection) -> None:
        start = selection.start()
        for _ in range(self.selection_char_count(selection)):
            self.delete_at(start)
        self._dirty = True

    def join_line_with_next(self, row: int) -> None:
        if not 0 <= row <= self.last_row():
            raise TextBufferError("bad row")
        if row + 1 > self.last_row():
            raise TextBufferError("no next line to join")
        next_line = self._lines.pop(row + 1)
        original_length = len(self._lines[row])
        self._lines[row] += next_line
        self._adjust_selections(lambda pos: _after_join(pos, row, original_length))
        self._dirty = True

    def _line_for_edit(self, at: Position) -> str:
        line = self.line(at.row)
        if line is None:
            raise TextBufferError(f"position out of bounds (bad row): {at!r}")
        if not 0 <= at.column <= len(line):
            raise TextBufferError(f"position out of bounds (bad column): {at!r}")
        return line

    def _adjust_selections(self, adjust: Callable[[Position], Position]) -> None:
        alive = []
        for ref in self._selections:
            selections = ref()
            if selections is None:
                continue
            alive.append(ref)
            for index, selection in enumerate(list(selections)):
                cursor = adjust(selection.cursor)
                anchor = adjust(selection.anchor)
                selections.set(index, selection.with_anchor(anchor).with_cursor(cursor))
        self._selections = alive


def _after_insert_char(pos: Position, inserted_at: Position) -> Position:
    if pos < inserted_at:
        return pos
    if pos.row == inserted_at.row:
        return pos.offset((1, 0))
    return pos


def _after_split_line(pos: Position, split_at: Position) -> Position:
    if pos < split_at:
        return pos
    if pos.row == split_at.row:
        column = max(0, pos.column - split_at.column)
    else:
        column = pos.column
    return Position(column, pos.row + 1)


def _after_delete_at(pos: Position, deleted_at: Position) -> Position:
    if pos <= deleted_at:
        return pos
    if pos.row == deleted_at.row:
        return pos.offset((-1, 0))
    return pos


def _after_join(pos: Position, row: int, original_length: int) -> Position:
    if pos.row <= row:
        return pos
    if pos.row == row + 1:
        return Position(pos.column + original_length, row)
    return pos.offset((0, -1))