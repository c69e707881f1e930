# quilledit

A small desktop text editor with a Tk window. The document is held in a piece
table, search uses the Knuth–Morris–Pratt algorithm, and every edit can be
undone and redone. The editor closes brackets as you type them and highlights
the bracket that matches the one at the cursor.

## Running the editor

The window needs Python's `tkinter` to be available.

```
pip install .
quilledit
```

`python -m quilledit.app` starts the same window. The command takes no
options other than `--help`.

The window opens with an empty, untitled document. Its title shows the name
of the file being edited, or `Untitled - Text Editor` when there is none.
Files are read and written as UTF-8.

### Menus and keys

| Action          | Menu               | Key      |
|-----------------|--------------------|----------|
| New file        | File → New         |          |
| Open file       | File → Open        |          |
| Save            | File → Save        | Ctrl+S   |
| Quit            | File → Quit        |          |
| Undo            | Edit → Undo        | Ctrl+Z   |
| Redo            | Edit → Redo        | Ctrl+Y   |
| Zoom in / out   | View → Zoom In/Out |          |
| Find            | Search → Find...   | Ctrl+F   |

- **New** asks for a file name, creates that file empty and clears the text.
- **Save** writes to the open file; when no file is open yet it asks for a
  name, suggesting `Untitled.txt`.
- **Find** shows a search bar. Matches are found as you type and the first is
  selected; *Next* (or Enter) and *Previous* step through them, wrapping
  around at either end. Escape or the close button hides the bar.
- Typing `(`, `[`, `{` or `<` inserts the closing bracket too and puts the
  cursor between the pair.
- When the character before the cursor is a bracket, it and its partner are
  highlighted; a bracket without a partner is shown in red.
- Zoom changes the font size in steps of 2 points, between 6 and 48; the
  default is 12.

## Using the pieces from Python

The parts of the editor work without a window.

```python
from quilledit.piecetable import PieceTable
from quilledit.search import kmp_search
from quilledit.undo_redo import UndoRedoStack
from quilledit.matching import find_matching_bracket, bracket_levels

table = PieceTable("hello world")
table.insert(", dear", 5)
print(table.value())              # hello, dear world
print(kmp_search("o", table))     # offsets of every "o", overlaps included

history = UndoRedoStack()
history.push("a", "ab")
print(history.undo())             # a
print(history.redo())             # ab

match = find_matching_bracket("f(x[1])", 7)
print(match.position, match.match)  # 6 1

print(bracket_levels("(a[b])"))   # [(0, 1), (2, 2), (4, 2), (5, 1)]
```

- `quilledit.piecetable` — `PieceTable` with `insert(value, at)`, `value()`,
  `add_length()` and `len()`; insert positions outside the text are ignored.
- `quilledit.search` — `kmp_search(pattern, table)` over a `PieceTable` or a
  string, and `prefix_table(pattern)`.
- `quilledit.undo_redo` — `UndoRedoStack` of whole-text snapshots; `undo()`
  and `redo()` return `None` when there is nothing to do, and a new `push()`
  discards what could have been redone.
- `quilledit.matching` — `find_matching_bracket(text, cursor)` returning a
  `BracketMatch` (or `None` if the character is not a bracket),
  `bracket_levels(text)` giving the nesting level (1 to 3) of round, square
  and curly brackets, and the helpers `is_opening_bracket`,
  `is_closing_bracket` and `matching_bracket`.
- `quilledit.window_title` — `window_title(filepath)`.
- `quilledit.session` — `EditorSession` ties these together: it keeps the
  current text, file name, search results, undo history and font size, and
  is what the window drives. `auto_close_pair(char)` gives the closing
  character for an opening bracket.
- `quilledit.app` — `EditorApp`, the Tk window, `key_action(keysym, control)`
  and `main()`.

## What it does not do

There is one document per window and no prompt about unsaved changes on quit
or open. There is no Save As once a file is open. The window does not colour
brackets by nesting level; `bracket_levels` is available for that but is not
used by it.

## Tests

```
pip install .[test]
pytest
```