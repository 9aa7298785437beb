"""Helpers for working with character and UTF-8 byte indices in strings."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice


def _byte_offsets(s: str) -> Iterator[int]:
    """Yield the UTF-8 byte offset of every character, then the total byte length."""
    offset = 0
    for ch in s:
        yield offset
        offset += len(ch.encode("utf-8"))
    yield offset


def line_clamped_filled(line: str, start: int, char_count: int, fill: str) -> str:
    """Return ``char_count`` characters of ``line`` from ``start``, padded with ``fill``."""
    taken = line[start:start + char_count]
    return taken + fill * (char_count - len(taken))


def char_index_to_byte_index(s: str, ch_idx: int) -> int | None:
    """Return the UTF-8 byte offset of character ``ch_idx``.

    The index one past the last character maps to the byte length; anything
    further is ``None``.
    """
    if ch_idx == 0:
        return 0
    return next(islice(_byte_offsets(s), ch_idx, None), None)


def char_index_to_byte_index_end(s: str, ch_idx: int) -> int | None:
    """Return the UTF-8 byte offset just after character ``ch_idx``."""
    offsets = list(_byte_offsets(s))
    offsets.append(offsets[-1] + 1)
    index = ch_idx + 1
    return offsets[index] if index < len(offsets) else None


def byte_index_to_char_index(s: str, byte_idx: int) -> int | None:
    """Return the index of the first character starting at or after ``byte_idx``."""
    if byte_idx == 0:
        return 0
    for index, offset in enumerate(_byte_offsets(s)):
        if offset >= byte_idx:
            return index
    return None


def char_count(s: str) -> int:
    """Return the number of characters (code points) in ``s``."""
    return len(s)