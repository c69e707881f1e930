"""Editor state: text, history, file, zoom and search, independent of any toolkit."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .piecetable import PieceTable
from .search import kmp_search
from .undo_redo import UndoRedoStack
from .window_title import window_title

DEFAULT_FONT_SIZE = 12
MIN_FONT_SIZE = 6
MAX_FONT_SIZE = 48
ZOOM_STEP = 2

_AUTO_CLOSE = {"(": ")", "[": "]", "{": "}", "<": ">"}

PathLike = Union[str, os.PathLike]


def auto_close_pair(char: str) -> str | None:
    """Return the closing character typed along with ``char``, or None."""
    return _AUTO_CLOSE.get(char)


class EditorSession:
    """The state behind one editor window."""

    def __init__(self) -> None:
        self.text = ""
        self.table = PieceTable("")
        self.history = UndoRedoStack()
        self.filename: Path | None = None
        self._font_size = DEFAULT_FONT_SIZE
        self._pending: str | None = None
        self._pattern = ""
        self._matches: list[int] = []
        self._current = -1

    @property
    def font_size(self) -> int:
        return self._font_size

    def zoom_in(self) -> int:
        """Enlarge the font by one step up to the maximum; return the size."""
        if self._font_size < MAX_FONT_SIZE:
            self._font_size += ZOOM_STEP
        return self._font_size

    def zoom_out(self) -> int:
        """Shrink the font by one step down to the minimum; return the size."""
        if self._font_size > MIN_FONT_SIZE:
            self._font_size -= ZOOM_STEP
        return self._font_size

    def set_text(self, text: str) -> None:
        """Replace the document text and rebuild its piece table."""
        self.text = text
        self.table = PieceTable(text)

    def begin_user_action(self, text: str) -> None:
        """Remember the text as it was before a user edit."""
        self._pending = text

    def end_user_action(self, text: str) -> None:
        """Record the edit that produced ``text`` in the history."""
        if self._pending is not None:
            self.history.push(self._pending, text)
        self._pending = None
        self.set_text(text)

    def undo(self) -> str | None:
        """Revert to the text before the last edit; return it, or None if nothing to undo."""
        text = self.history.undo()
        if text is not None:
            self.set_text(text)
        return text

    def redo(self) -> str | None:
        """Reapply the next undone edit; return the text, or None if nothing to redo."""
        text = self.history.redo()
        if text is not None:
            self.set_text(text)
        return text

    def new_file(self, path: PathLike) -> None:
        """Create an empty file at ``path`` and start editing it."""
        target = Path(path)
        target.write_text("", encoding="utf-8")
        self.set_text("")
        self.filename = target

    def open_file(self, path: PathLike) -> str:
        """Load ``path`` into the editor and return its contents."""
        target = Path(path)
        contents = target.read_text(encoding="utf-8")
        self.set_text(contents)
        self.filename = target
        return contents

    def save(self, path: PathLike | None = None) -> Path:
        """Write the text to the current file, or to ``path`` if none is open yet."""
        if self.filename is not None:
            target = self.filename
        elif path is not None:
            target = Path(path)
        else:
            raise ValueError("no file name to save to")
        target.write_text(self.text, encoding="utf-8")
        self.filename = target
        return target

    def title(self) -> str:
        return window_title(self.filename)

    def search(self, pattern: str) -> tuple[int, int] | None:
        """Find every occurrence of ``pattern`` and select the first one."""
        self._pattern = pattern
        self._matches = kmp_search(pattern, self.table) if pattern else []
        self._current = 0 if self._matches else -1
        return self.current_selection()

    def next_match(self) -> tuple[int, int] | None:
        """Select the following match, wrapping to the first."""
        if not self._matches:
            return None
        self._current = (self._current + 1) % len(self._matches)
        return self.current_selection()

    def previous_match(self) -> tuple[int, int] | None:
        """Select the preceding match, wrapping to the last."""
        if not self._matches:
            return None
        self._current = (self._current - 1) % len(self._matches)
        return self.current_selection()

    def current_selection(self) -> tuple[int, int] | None:
        """Return ``(start, end)`` of the selected match, or None."""
        if self._current < 0:
            return None
        start = self._matches[self._current]
        return start, start + len(self._pattern)