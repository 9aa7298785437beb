"""Build a fixed-width line from left- and right-aligned text."""

from __future__ import annotations

from typing import Generic, TypeVar

ELLIPSIS = " …"

T = TypeVar("T")


class LineBuilder(Generic[T]):
    """Places left-aligned and right-aligned text on a line of fixed length.

    Left-aligned text wins when both do not fit; truncated text is marked
    with an ellipsis.
    """

    def __init__(self, line_length: int) -> None:
        self.line_length = line_length
        self._left: list[tuple[str, T]] = []
        self._right: list[tuple[str, T]] = []

    def add_right_aligned(self, content: str, data: T) -> LineBuilder[T]:
        self._right.append((content, data))
        return self

    def add_left_aligned(self, content: str, data: T) -> LineBuilder[T]:
        self._left.append((content, data))
        return self

    def build(self) -> tuple[str, list[tuple[int, int, T]]]:
        """Return the rendered line and the positions of the data payloads."""
        length = self.line_length
        left = "".join(content for content, _ in self._left)
        right = "".join(content for content, _ in self._right)

        left_space = min(len(left), length)
        right_space = min(len(right), length - left_space)
        right_start = length - right_space

        line = (
            left[:left_space]
            + " " * (right_start - left_space)
            + right[len(right) - right_space:]
        )

        if left_space > 0 and (left_space < len(left) or left_space >= right_start):
            line = line[:max(0, left_space - len(ELLIPSIS))] + ELLIPSIS + line[left_space:]
        elif right_space < len(right):
            line = line[:right_start] + ELLIPSIS + line[right_start + len(ELLIPSIS):]

        return line[:length], []