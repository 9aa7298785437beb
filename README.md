# ayed

Building blocks for a multi-cursor text editor, in plain Python with no
third-party dependencies.

## What is inside

- `ayed.text_buffer.TextBuffer`: a line-based text buffer. A position names a
  line by row and a code point by column. There is always at least one line,
  and `"\n"` stands for a line break when inserting. `insert_char_at`,
  `split_line`, `delete_at`, `delete_selection` and `join_line_with_next` keep
  every `Selections` registered with `add_selections` in step with the edit.
  These references are weak, so the buffer does not keep a set alive.
  `TextBuffer.from_path` loads a file. `write_atomic` and `write_to_atomic`
  write to a `<path>.ayed-tmp` file and then rename it over the target. The
  buffer tracks whether it is dirty. Failures raise `TextBufferError`.
- `ayed.selection.Selection` and `Selections`: an immutable cursor/anchor
  selection. It remembers the column the cursor and anchor "want" to be at,
  merges and splits by line, and tests for overlap and containment.
  `Selections` is a primary selection plus extras. It can change the primary,
  add, get, set and iterate. `overlapping_selections_merged` returns a copy in
  which overlapping selections are merged.
- `ayed.view.View`: a window onto a buffer held in a `SlotMap`, scrolled to
  `top_left`. `rebuild_line_wrap` builds a `VirtualBuffer` of `VirtualLine`s
  made of `TrueLineExcerpt` and `TextFragment` fragments, which gives soft line
  wrapping. Positions map between true, virtual and view coordinates, and
  `render_view_line` returns the text of a displayed line.
- `ayed.highlight.regex_syntax_highlight`: applies compiled regex patterns to
  each buffer line and returns `Highlight` ranges carrying a `Style` and a
  priority. Each rule's style values give a `#rrggbb` colour and an optional
  `priority:N`.
- `ayed.slotmap.SlotMap`: generational storage that hands out `Handle`s. A
  handle becomes stale once its value is removed, and using it then raises
  `StaleHandleError`.
- `ayed.layout`: the geometry types `Position`, `Offset`, `Size` and `Rect`,
  with intersection and containment.
- `ayed.style`: `Color` (including `Color.from_hex`), `Style`, the theme
  colours and `priority_from_str`.
- `ayed.grid.GridStringBuilder`: lays out text cells in aligned columns.
  Cells can span several columns and rows.
- `ayed.line_builder.LineBuilder`: fits left-aligned and right-aligned text
  into a line of fixed width and marks truncated text with an ellipsis.
- `ayed.strings`: helpers for converting between character indices and UTF-8
  byte indices.

## Example

```python
from ayed.selection import Selections
from ayed.text_buffer import TextBuffer

buffer = TextBuffer()
selections = Selections()
buffer.add_selections(selections)

for ch in "hello\nworld":
    buffer.insert_char_at(selections.primary().cursor, ch)

print(buffer.line(0), buffer.line(1))   # hello world
print(buffer.is_dirty())                # True
```

## What it does not do

This is a library only. It has no terminal screen and no key handling, and it
provides no command to start an editor. It also has no command language, modes
or configuration loading. To build an editor, you drive these pieces from your
own front end.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```