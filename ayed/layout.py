"""Positions, offsets, sizes and rectangles on a character grid."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@dataclass(frozen=True)
class Offset:
    """A signed displacement in columns and rows."""

    column: int = 0
    row: int = 0


def _as_offset(offset: Offset | tuple[int, int]) -> Offset:
    return offset if isinstance(offset, Offset) else Offset(*offset)


@total_ordering
@dataclass(frozen=True)
class Position:
    """A cell location; positions order by row, then column."""

    column: int = 0
    row: int = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.row, self.column) < (other.row, other.column)

    def offset(self, offset: Offset | tuple[int, int]) -> Position:
        offset = _as_offset(offset)
        return Position(self.column + offset.column, self.row + offset.row)

    def with_column(self, column: int) -> Position:
        return Position(column, self.row)

    def local_to(self, origin: Position) -> tuple[int | None, int | None]:
        """Return the column and row relative to ``origin``; ``None`` where negative."""
        column = self.column - origin.column
        row = self.row - origin.row
        return (column if column >= 0 else None, row if row >= 0 else None)

    def to_offset(self) -> Offset:
        return Offset(self.column, self.row)


Position.ZERO = Position(0, 0)


@dataclass(frozen=True)
class Size:
    """A width (columns) and height (rows)."""

    column: int = 0
    row: int = 0


def _unsigned(value: int) -> int:
    if value < 0:
        raise ValueError(f"negative coordinate: {value}")
    return value


@dataclass(frozen=True)
class Rect:
    """A rectangle of cells; a default rectangle is one cell at the origin."""

    x: int = 0
    y: int = 0
    width: int = 1
    height: int = 1

    @classmethod
    def with_position_and_size(cls, position: Position, size: Size) -> Rect:
        return cls(_unsigned(position.column), _unsigned(position.row), size.column, size.row)

    @classmethod
    def from_positions(cls, a: Position, b: Position) -> Rect:
        """Return the smallest rectangle containing both positions."""
        top, bottom = sorted((a.row, b.row))
        left, right = sorted((a.column, b.column))
        return cls(_unsigned(left), _unsigned(top), right - left + 1, bottom - top + 1)

    def top(self) -> int:
        return self.y

    def bottom(self) -> int:
        return max(0, self.y + self.height - 1)

    def left(self) -> int:
        return self.x

    def right(self) -> int:
        return max(0, self.x + self.width - 1)

    def top_left(self) -> Position:
        return Position(self.x, self.y)

    def bottom_right(self) -> Position:
        return Position(self.right(), self.bottom())

    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains_position(self, position: Position) -> bool:
        """Whether ``position`` lies between the corners in reading order."""
        return self.top_left() <= position <= self.bottom_right()

    def intersection(self, other: Rect) -> Rect | None:
        top = max(self.top(), other.top())
        bottom = min(self.bottom(), other.bottom())
        left = max(self.left(), other.left())
        right = min(self.right(), other.right())
        if top <= bottom and left <= right:
            return Rect(left, top, right - left + 1, bottom - top + 1)
        return None

    def offset_from_position(self, position: Position) -> Offset:
        """Return how far ``position`` lies outside the rectangle on each axis."""
        if position.column < self.left():
            column = position.column - self.left()
        elif position.column > self.right():
            column = position.column - self.right()
        else:
            column = 0
        if position.row < self.top():
            row = position.row - self.top()
        elif position.row > self.bottom():
            row = position.row - self.bottom()
        else:
            row = 0
        return Offset(column, row)