"""Lay out text cells in a grid of aligned columns."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class CellId:
    """Coordinates of a cell in the grid."""

    x: int = 0
    y: int = 0

    def min_max(self, other: CellId) -> tuple[CellId, CellId]:
        """Return the component-wise minimum and maximum of two ids."""
        low = CellId(min(self.x, other.x), min(self.y, other.y))
        high = CellId(max(self.x, other.x), max(self.y, other.y))
        return low, high


@dataclass
class Cell:
    """A cell holding some text."""

    content: str = ""


def _as_id(cell_id: CellId | tuple[int, int]) -> CellId:
    return cell_id if isinstance(cell_id, CellId) else CellId(*cell_id)


class GridStringBuilder:
    """Collects cells and renders them as lines with aligned columns."""

    def __init__(self) -> None:
        self._cells: dict[CellId, Cell] = {}
        self._spans: list[tuple[CellId, CellId]] = []
        self._max_cell_id = CellId()

    def cell(self, cell_id: CellId | tuple[int, int]) -> Cell | None:
        """Return the cell at ``cell_id``, following spans."""
        found = self.cell_and_id(cell_id)
        return found[1] if found else None

    def cell_and_id(self, cell_id: CellId | tuple[int, int]) -> tuple[CellId, Cell] | None:
        """Return the id actually holding ``cell_id``'s content, and its cell."""
        actual = self._span_of(_as_id(cell_id))[0]
        cell = self._cells.get(actual)
        return (actual, cell) if cell is not None else None

    def set_cell(self, cell_id: CellId | tuple[int, int], cell: Cell) -> None:
        cell_id = _as_id(cell_id)
        self._max_cell_id = self._max_cell_id.min_max(cell_id)[1]
        self._cells[cell_id] = cell

    def set_cell_span(self, start: CellId | tuple[int, int], end: CellId | tuple[int, int]) -> None:
        """Make the rectangle between two ids behave as one cell."""
        self._spans.append(_as_id(start).min_max(_as_id(end)))

    def columns(self) -> Iterator[Iterator[tuple[CellId, Cell]]]:
        """Yield, for each column, the (id, cell) pairs that have content."""
        width = self._max_cell_id.x
        height = self._max_cell_id.y
        for x in range(width + 1):
            yield self._column(x, height)

    def _column(self, x: int, height: int) -> Iterator[tuple[CellId, Cell]]:
        for y in range(height + 1):
            cell_id = CellId(x, y)
            cell = self.cell(cell_id)
            if cell is not None:
                yield cell_id, cell

    def build(self) -> tuple[tuple[int, int], list[str]]:
        """Render the grid, returning ``((width, height), lines)``."""
        height = self._max_cell_id.y + 1
        widths = [
            max(
                (len(cell.content) if self._is_end_of_span(cell_id) else 0 for cell_id, cell in column),
                default=0,
            )
            for column in self.columns()
        ]
        starts = [sum(widths[:x]) for x in range(len(widths))]

        lines = []
        for y in range(height):
            line = ""
            for x, (start, width) in enumerate(zip(starts, widths)):
                cell_id = CellId(x, y)
                found = self.cell_and_id(cell_id)
                if found is not None and found[0] == cell_id:
                    line += found[1].content
                line += " " * max(0, start + width - len(line))
            lines.append(line)
        return (sum(widths), height), lines

    def _span_of(self, cell_id: CellId) -> tuple[CellId, CellId]:
        for low, high in self._spans:
            if low.x <= cell_id.x <= high.x and low.y <= cell_id.y <= high.y:
                return low, high
        return cell_id, cell_id

    def _is_end_of_span(self, cell_id: CellId) -> bool:
        return self._span_of(cell_id)[1] == cell_id