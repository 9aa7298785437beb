"""Regex-driven syntax highlighting of a text buffer."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ayed.layout import Position
from ayed.style import DEFAULT_PRIORITY, Color, Style, priority_from_str
from ayed.text_buffer import TextBuffer


@dataclass(frozen=True)
class Highlight:
    """A styled range of characters on one line, in content coordinates.

    ``start`` and ``end`` are both inclusive.
    """

    start: Position
    end: Position
    style: Style
    priority: int = DEFAULT_PRIORITY


def _parse_rule_style(values: Sequence[str]) -> tuple[Color | None, int | None]:
    color = None
    priority = None
    for value in values:
        try:
            color = Color.from_hex(value)
            continue
        except ValueError:
            pass
        try:
            priority = priority_from_str(value)
        except ValueError:
            pass
    return color, priority


def regex_syntax_highlight(
    buffer: TextBuffer,
    syntax: Mapping[str, Sequence[re.Pattern[str]]],
    syntax_style: Mapping[str, Sequence[str]],
) -> list[Highlight]:
    """Highlight every match of each rule's patterns.

    A rule's style values hold a ``#rrggbb`` colour and optionally a
    ``priority:N``; rules without a style entry or colour are ignored. When a
    pattern has a first group that took part in the match, only that group is
    highlighted.
    """
    rules = []
    for name, patterns in syntax.items():
        values = syntax_style.get(name)
        if values is None:
            continue
        color, priority = _parse_rule_style(values)
        if color is None:
            continue
        style = Style(foreground_color=color)
        rules.append((list(patterns), style, DEFAULT_PRIORITY if priority is None else priority))

    highlights = []
    for row in range(buffer.line_count()):
        line = buffer.line(row)
        if line is None:
            break
        for patterns, style, priority in rules:
            for pattern in patterns:
                for match in pattern.finditer(line):
                    group = 1 if pattern.groups >= 1 and match.start(1) != -1 else 0
                    start, stop = match.span(group)
                    end = max(0, stop - 1)
                    highlights.append(
                        Highlight(Position(start, row), Position(end, row), style, priority)
                    )
    return highlights