"""Views onto text buffers, with optional virtual lines for wrapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ayed.layout import Position
from ayed.selection import Selections
from ayed.slotmap import Handle, SlotMap
from ayed.text_buffer import TextBuffer


@dataclass(frozen=True)
class TrueLineExcerpt:
    """A run of characters from one buffer line, ``start`` to ``end`` inclusive.

    ``ends_line`` marks the last excerpt of its line; it also covers the
    position of the line terminator.
    """

    row: int
    start: int
    end: int
    ends_line: bool = False

    def char_count(self) -> int:
        return self.end - self.start

    def contains_position(self, position: Position) -> bool:
        if position.row != self.row:
            return False
        last = self.end + 1 if self.ends_line else self.end
        return self.start <= position.column <= last

    def position_column_offset_within(self, position: Position) -> int | None:
        """Return the column of ``position`` relative to this excerpt, if inside it."""
        if not self.contains_position(position):
            return None
        return position.column - self.start


@dataclass(frozen=True)
class TextFragment:
    """Literal text shown in a virtual line that is not part of the buffer."""

    text: str

    def char_count(self) -> int:
        return len(self.text)

    def contains_position(self, position: Position) -> bool:
        # Literal text shows no buffer characters.
        return False

    def position_column_offset_within(self, position: Position) -> int | None:
        return None


VirtualFragment = Union[TrueLineExcerpt, TextFragment]


@dataclass
class VirtualLine:
    """One displayed line, made of fragments."""

    fragments: list[VirtualFragment] = field(default_factory=list)


@dataclass
class VirtualBuffer:
    """The displayed lines of a view when they differ from the buffer's lines."""

    lines: list[VirtualLine] = field(default_factory=list)

    def line(self, index: int) -> VirtualLine | None:
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None


def _char_range(line: str, start: int, end: int) -> str | None:
    """Return characters ``start`` to ``end`` inclusive, or ``None`` if out of range."""
    if start < 0 or end < 0 or start > len(line) or end >= len(line) or start > end + 1:
        return None
    return line[start:end + 1]


@dataclass
class View:
    """A window onto a buffer, scrolled to ``top_left``.

    Positions come in three spaces: true (buffer rows and columns), virtual
    (rows and columns of the virtual buffer, or true ones when there is none)
    and view (virtual ones relative to ``top_left``).
    """

    top_left: Position
    buffer: Handle
    selections: Selections = field(default_factory=Selections)
    virtual_buffer: VirtualBuffer | None = None

    def render_view_line(self, idx: int, buffers: SlotMap[TextBuffer]) -> str | None:
        """Return the text of view line ``idx``, or ``None`` past the end."""
        row = self.top_left.row + idx
        if self.virtual_buffer is not None:
            return self._render_virtual_line(row, buffers)
        return buffers.get(self.buffer).line(row)

    def map_true_position_to_view_position(self, position: Position) -> Position | None:
        virtual = self.map_true_position_to_virtual_position(position)
        if virtual is None:
            return None
        return self.map_virtual_position_to_view_position(virtual)

    def map_view_position_to_true_position(self, position: Position) -> Position | None:
        virtual = self.map_view_position_to_virtual_position(position)
        return self.map_virtual_position_to_true_position(virtual)

    def map_virtual_position_to_view_position(self, position: Position) -> Position | None:
        column, row = position.local_to(self.top_left)
        if column is None or row is None:
            return None
        return Position(column, row)

    def map_view_position_to_virtual_position(self, position: Position) -> Position:
        return position.offset(self.top_left.to_offset())

    def map_true_position_to_virtual_position(self, position: Position) -> Position | None:
        """Return the first virtual position showing ``position``."""
        if self.virtual_buffer is None:
            return position
        for vline_idx, vline in enumerate(self.virtual_buffer.lines):
            column = 0
            for fragment in vline.fragments:
                offset = fragment.position_column_offset_within(position)
                if offset is not None:
                    return Position(column + offset, vline_idx)
                column += fragment.char_count()
        return None

    def map_virtual_position_to_true_position(self, position: Position) -> Position | None:
        if self.virtual_buffer is None:
            return position
        vline = self.virtual_buffer.line(position.row)
        if vline is None:
            raise IndexError(f"no virtual line at row {position.row}")
        column = 0
        for fragment in vline.fragments:
            after = column + fragment.char_count()
            if isinstance(fragment, TrueLineExcerpt) and column <= position.column <= after:
                return Position(fragment.start + position.column - column, fragment.row)
            column = after
        return None

    def map_view_line_idx_to_line_number(self, idx: int) -> int | None:
        """Return the 1-based buffer line number shown on view line ``idx``."""
        view_line = idx + self.top_left.row
        if self.virtual_buffer is None:
            return view_line + 1
        vline = self.virtual_buffer.line(view_line)
        if vline is None:
            return None
        for fragment in vline.fragments:
            if isinstance(fragment, TrueLineExcerpt):
                return fragment.row + 1
        return None

    def rebuild_line_wrap(self, buffers: SlotMap[TextBuffer], wrap_column: int) -> None:
        """Rebuild the virtual buffer so no line is wider than ``wrap_column``."""
        if wrap_column == 0:
            return
        buffer = buffers.get(self.buffer)
        vbuffer = VirtualBuffer()
        for row in range(buffer.line_count()):
            rest = buffer.line(row) or ""
            pieces = 0
            while len(rest) >= wrap_column:
                vbuffer.lines.append(
                    VirtualLine(
                        [
                            TrueLineExcerpt(
                                row,
                                wrap_column * pieces,
                                wrap_column * (pieces + 1) - 1,
                                False,
                            )
                        ]
                    )
                )
                rest = rest[wrap_column:]
                pieces += 1
            if rest or pieces == 0:
                start = wrap_column * pieces
                vbuffer.lines.append(
                    VirtualLine([TrueLineExcerpt(row, start, start + len(rest) - 1, True)])
                )
        self.virtual_buffer = vbuffer

    def _render_virtual_line(self, idx: int, buffers: SlotMap[TextBuffer]) -> str | None:
        assert self.virtual_buffer is not None
        vline = self.virtual_buffer.line(idx)
        if vline is None:
            return None
        buffer = buffers.get(self.buffer)
        parts = []
        for fragment in vline.fragments:
            if isinstance(fragment, TextFragment):
                parts.append(fragment.text)
                continue
            line = buffer.line(fragment.row)
            if line is None:
                parts.append(f"$<bad vfrag: {fragment.row}>")
            elif not line and fragment.ends_line:
                parts.append(" ")
            else:
                excerpt = _char_range(line, fragment.start, fragment.end)
                if excerpt is None:
                    parts.append(
                        f"$<bad vfrag: {fragment.row}:{fragment.start}-{fragment.end}>"
                    )
                else:
                    parts.append(excerpt)
        return "".join(parts)