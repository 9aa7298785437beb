"""Cursor/anchor selections and sets of selections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace

from ayed.layout import Position

COLUMN_MAX = 2**31 - 1
"""Largest column index; used as "end of line" when splitting selections."""


@dataclass(frozen=True)
class Selection:
    """A range of text between an anchor and a cursor.

    The desired column indices remember where the cursor and anchor would
    like to be when moving vertically across shorter lines.
    """

    cursor: Position = Position.ZERO
    anchor: Position = Position.ZERO
    desired_cursor_column_index: int = 0
    desired_anchor_column_index: int = 0

    @classmethod
    def with_position(cls, position: Position) -> Selection:
        """Return an empty selection at ``position``."""
        return cls(position, position, position.column, position.column)

    def with_cursor(self, cursor: Position) -> Selection:
        return replace(self, cursor=cursor, desired_cursor_column_index=cursor.column)

    def with_provisional_cursor(self, cursor: Position) -> Selection:
        """Move the cursor while keeping its desired column."""
        return replace(self, cursor=cursor)

    def with_desired_cursor_column_index(self, column: int) -> Selection:
        return replace(self, desired_cursor_column_index=column)

    def with_anchor(self, anchor: Position) -> Selection:
        return replace(self, anchor=anchor, desired_anchor_column_index=anchor.column)

    def with_provisional_anchor(self, anchor: Position) -> Selection:
        """Move the anchor while keeping its desired column."""
        return replace(self, anchor=anchor)

    def with_start(self, start: Position) -> Selection:
        return self.with_anchor(start) if self.is_forward() else self.with_cursor(start)

    def with_end(self, end: Position) -> Selection:
        return self.with_cursor(end) if self.is_forward() else self.with_anchor(end)

    def with_start_and_end(self, start: Position, end: Position) -> Selection:
        if self.is_forward():
            return self.with_anchor(start).with_cursor(end)
        return self.with_cursor(start).with_anchor(end)

    def shrunk_to_cursor(self) -> Selection:
        return replace(
            self,
            anchor=self.cursor,
            desired_anchor_column_index=self.desired_cursor_column_index,
        )

    def shrunk_to_start(self) -> Selection:
        start = self.start()
        return replace(self, cursor=start, anchor=start)

    def flipped(self) -> Selection:
        return Selection(
            cursor=self.anchor,
            anchor=self.cursor,
            desired_cursor_column_index=self.desired_anchor_column_index,
            desired_anchor_column_index=self.desired_cursor_column_index,
        )

    def flipped_forward(self) -> Selection:
        return self if self.is_forward() else self.flipped()

    def desired_cursor(self) -> Position:
        return self.cursor.with_column(self.desired_cursor_column_index)

    def desired_anchor(self) -> Position:
        return self.anchor.with_column(self.desired_anchor_column_index)

    def to_desired(self) -> Selection:
        """Reset the desired columns to the actual cursor and anchor columns."""
        return Selection(
            cursor=self.cursor,
            anchor=self.anchor,
            desired_cursor_column_index=self.cursor.column,
            desired_anchor_column_index=self.anchor.column,
        )

    def start(self) -> Position:
        return self.start_end()[0]

    def end(self) -> Position:
        return self.start_end()[1]

    def start_end(self) -> tuple[Position, Position]:
        if self.cursor < self.anchor:
            return self.cursor, self.anchor
        return self.anchor, self.cursor

    def is_forward(self) -> bool:
        return self.anchor <= self.cursor

    def merged_with(self, other: Selection) -> Selection | None:
        """Return the union with ``other`` if they overlap, keeping this one's direction."""
        if not self.overlaps_with(other):
            return None
        start = min(self.start(), other.start())
        end = max(self.end(), other.end())
        cursor, anchor = (start, end) if self._cursor_is_at_start() else (end, start)
        return Selection(
            cursor=cursor,
            anchor=anchor,
            desired_cursor_column_index=self.desired_cursor_column_index,
            desired_anchor_column_index=self.desired_anchor_column_index,
        )

    def overlaps_with(self, other: Selection) -> bool:
        return (self.start() <= other.start() <= self.end()) or (
            other.start() <= self.start() <= other.end()
        )

    def contains(self, position: Position) -> bool:
        return self.start() <= position <= self.end()

    def split_lines(self) -> Iterator[Selection]:
        """Yield one selection per line covered; inner lines span to ``COLUMN_MAX``."""
        start, end = self.start_end()
        line_count = max(0, end.row - start.row) + 1
        for i in range(line_count):
            start_column = start.column if i == 0 else 0
            end_column = end.column if i == line_count - 1 else COLUMN_MAX
            row = start.row + i
            yield Selection().with_start_and_end(
                Position(start_column, row), Position(end_column, row)
            )

    def line_span(self) -> int:
        start, end = self.start_end()
        return max(0, end.row - start.row) + 1

    def _cursor_is_at_start(self) -> bool:
        return self.cursor <= self.anchor


@dataclass
class Selections:
    """A primary selection followed by any number of extra selections."""

    primary_selection: Selection = field(default_factory=Selection)
    extra_selections: list[Selection] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.extra_selections = list(self.extra_selections)

    @classmethod
    def from_iterable(cls, selections: Iterable[Selection]) -> Selections:
        """Build from selections whose first element becomes the primary."""
        items = list(selections)
        if not items:
            raise ValueError("couldn't build selections: no selection given")
        return cls(items[0], items[1:])

    def primary(self) -> Selection:
        return self.primary_selection

    def change_primary(self, index: int) -> None:
        """Swap the primary with the selection at ``index``."""
        if index == 0:
            return
        if not 1 <= index <= len(self.extra_selections):
            raise IndexError(f"no selection at index {index}")
        extra = index - 1
        self.primary_selection, self.extra_selections[extra] = (
            self.extra_selections[extra],
            self.primary_selection,
        )

    def clear_extras(self) -> None:
        self.extra_selections.clear()

    def overlapping_selections_merged(self) -> Selections:
        """Return a copy in which overlapping selections are merged together."""
        pending = list(self)
        merged: list[Selection] = []
        while pending:
            selection, *others = pending
            pending = []
            for other in others:
                combined = selection.merged_with(other)
                if combined is None:
                    pending.append(other)
                else:
                    selection = combined
            merged.append(selection)
        return Selections(merged[0], merged[1:])

    def count(self) -> int:
        return 1 + len(self.extra_selections)

    def __len__(self) -> int:
        return self.count()

    def get(self, index: int) -> Selection | None:
        if index == 0:
            return self.primary_selection
        if 1 <= index <= len(self.extra_selections):
            return self.extra_selections[index - 1]
        return None

    def set(self, index: int, selection: Selection) -> None:
        """Replace the selection at ``index``."""
        if index == 0:
            self.primary_selection = selection
        elif 1 <= index <= len(self.extra_selections):
            self.extra_selections[index - 1] = selection
        else:
            raise IndexError(f"no selection at index {index}")

    def add(self, selection: Selection) -> int:
        """Append an extra selection and return its index."""
        self.extra_selections.append(selection)
        return len(self.extra_selections)

    def __iter__(self) -> Iterator[Selection]:
        yield self.primary_selection
        yield from self.extra_selections