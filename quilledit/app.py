"""Tk front end: menus, search bar, text area and key handling."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from .matching import find_matching_bracket
from .session import EditorSession, auto_close_pair

if TYPE_CHECKING:
    import tkinter as tk

FIND = "find"
UNDO = "undo"
REDO = "redo"
SAVE = "save"

_BRACKET_KEYSYMS = {
    "parenleft": "(",
    "bracketleft": "[",
    "braceleft": "{",
    "less": "<",
}
_CONTROL_KEYS = {"f": FIND, "z": UNDO, "y": REDO, "s": SAVE}
_CONTROL_MASK = 0x0004

HIGHLIGHT_TAG = "paren_highlight"
MISMATCH_TAG = "paren_mismatch"
_LEVEL_COLOURS = {1: "blue", 2: "green", 3: "orange"}


def key_action(keysym: str, control: bool) -> str | None:
    """Decide what a key press in the text area does.

    Opening brackets give the pair of characters to insert, whatever the
    modifiers.  With Control held, ``f``, ``z``, ``y`` and ``s`` give
    :data:`FIND`, :data:`UNDO`, :data:`REDO` and :data:`SAVE`.  Any other key
    gives None and is handled normally.
    """
    opener = _BRACKET_KEYSYMS.get(keysym)
    if opener is not None:
        return opener + auto_close_pair(opener)
    if control:
        return _CONTROL_KEYS.get(keysym)
    return None


class EditorApp:
    """The editor window built on a Tk root."""

    def __init__(self, root: tk.Tk) -> None:
        import tkinter as tk
        import tkinter.font as tkfont

        self.root = root
        self.session = EditorSession()
        self._snapshot = ""
        self._search_visible = False

        root.title("Simple Text Editor")
        root.geometry("800x600")
        self._update_title()
        root.protocol("WM_DELETE_WINDOW", self.quit)

        self._build_menus(tk)

        self.search_frame = tk.Frame(root)
        self.search_var = tk.StringVar(master=root)
        self.search_entry = tk.Entry(self.search_frame, textvariable=self.search_var)
        self.search_entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        tk.Button(self.search_frame, text="Previous", command=self.previous_match).pack(side=tk.LEFT)
        tk.Button(self.search_frame, text="Next", command=self.next_match).pack(side=tk.LEFT)
        tk.Button(self.search_frame, text="\u2715", command=self.hide_search_bar).pack(side=tk.LEFT)
        self.search_var.trace_add("write", lambda *_: self._on_search_changed())
        self.search_entry.bind("<Escape>", lambda _e: self.hide_search_bar())
        self.search_entry.bind("<Return>", lambda _e: self.next_match())

        self.text_frame = tk.Frame(root)
        self.text_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.font = tkfont.Font(root=root, family="TkFixedFont", size=self.session.font_size)
        self.text = tk.Text(self.text_frame, undo=False, wrap=tk.NONE, font=self.font)
        yscroll = tk.Scrollbar(self.text_frame, orient=tk.VERTICAL, command=self.text.yview)
        xscroll = tk.Scrollbar(self.text_frame, orient=tk.HORIZONTAL, command=self.text.xview)
        self.text.configure(yscrollcommand=yscroll.set, xscrollcommand=xscroll.set)
        yscroll.pack(side=tk.RIGHT, fill=tk.Y)
        xscroll.pack(side=tk.BOTTOM, fill=tk.X)
        self.text.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        self.text.tag_configure(HIGHLIGHT_TAG, foreground="#9CDCFE")
        self.text.tag_configure(MISMATCH_TAG, foreground="#F44747")
        for level, colour in _LEVEL_COLOURS.items():
            self.text.tag_configure(f"bracket_level_{level}", foreground=colour)

        self.text.bind("<KeyPress>", self._on_key_press)
        self.text.bind("<KeyRelease>", self._on_cursor_moved)
        self.text.bind("<ButtonRelease>", self._on_cursor_moved)
        self.text.bind("<<Paste>>", lambda _e: self.text.after_idle(self._sync))
        self.text.bind("<<Cut>>", lambda _e: self.text.after_idle(self._sync))
        self.text.focus_set()

    def _build_menus(self, tk) -> None:
        menubar = tk.Menu(self.root)

        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="New", command=self.new_file)
        file_menu.add_command(label="Open", command=self.open_file)
        file_menu.add_command(label="Save", command=self.save)
        file_menu.add_command(label="Quit", command=self.quit)
        menubar.add_cascade(label="File", menu=file_menu)

        edit_menu = tk.Menu(menubar, tearoff=False)
        edit_menu.add_command(label="Undo", command=self.undo)
        edit_menu.add_command(label="Redo", command=self.redo)
        menubar.add_cascade(label="Edit", menu=edit_menu)

        view_menu = tk.Menu(menubar, tearoff=False)
        view_menu.add_command(label="Zoom In", command=self.zoom_in)
        view_menu.add_command(label="Zoom Out", command=self.zoom_out)
        menubar.add_cascade(label="View", menu=view_menu)

        search_menu = tk.Menu(menubar, tearoff=False)
        search_menu.add_command(label="Find...", command=self.show_search_bar)
        menubar.add_cascade(label="Search", menu=search_menu)

        self.root.config(menu=menubar)

    def run(self) -> None:
        """Enter the Tk main loop until the window closes."""
        self.root.mainloop()

    # --- text and history -------------------------------------------------

    def _widget_text(self) -> str:
        return self.text.get("1.0", "end-1c")

    def _index(self, offset: int) -> str:
        return f"1.0 + {offset} chars"

    def _sync(self) -> None:
        """Record any edit made in the widget since the last snapshot."""
        current = self._widget_text()
        if current != self._snapshot:
            self.session.begin_user_action(self._snapshot)
            self.session.end_user_action(current)
            self._snapshot = current

    def _replace_text(self, text: str) -> None:
        self.text.delete("1.0", "end")
        self.text.insert("1.0", text)
        self._snapshot = text

    def undo(self) -> None:
        self._sync()
        text = self.session.undo()
        if text is not None:
            self._replace_text(text)

    def redo(self) -> None:
        self._sync()
        text = self.session.redo()
        if text is not None:
            self._replace_text(text)

    # --- zoom ---------------------------------------------------------------

    def zoom_in(self) -> None:
        self.font.configure(size=self.session.zoom_in())

    def zoom_out(self) -> None:
        self.font.configure(size=self.session.zoom_out())

    # --- files ----------------------------------------------------------------

    def _update_title(self) -> None:
        self.root.title(self.session.title())

    def new_file(self) -> None:
        from tkinter import filedialog

        path = filedialog.asksaveasfilename(parent=self.root, title="Create New File")
        if not path:
            return
        try:
            self.session.new_file(path)
        except OSError as exc:
            print(f"Error creating file: {exc}", file=sys.stderr)
            return
        self._replace_text("")
        self._update_title()

    def open_file(self) -> None:
        from tkinter import filedialog

        path = filedialog.askopenfilename(parent=self.root, title="Open File")
        if not path:
            return
        try:
            contents = self.session.open_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error reading file: {exc}", file=sys.stderr)
            return
        self._replace_text(contents)
        self._update_title()

    def save(self) -> None:
        from tkinter import filedialog

        self._sync()
        path = None
        if self.session.filename is None:
            path = filedialog.asksaveasfilename(
                parent=self.root, title="Save File", initialfile="Untitled.txt"
            )
            if not path:
                return
        try:
            self.session.save(path)
        except OSError:
            print("Error saving file!", file=sys.stderr)
            return
        self._update_title()

    def quit(self) -> None:
        self.root.destroy()

    # --- search ---------------------------------------------------------------

    def show_search_bar(self) -> None:
        import tkinter as tk

        if not self._search_visible:
            self.search_frame.pack(side=tk.TOP, fill=tk.X, before=self.text_frame)
            self._search_visible = True
        self.search_entry.focus_set()

    def hide_search_bar(self) -> None:
        if self._search_visible:
            self.search_frame.pack_forget()
            self._search_visible = False
        self.text.focus_set()

    def _select(self, selection: tuple[int, int] | None) -> None:
        if selection is None:
            return
        start, end = (self._index(offset) for offset in selection)
        self.text.tag_remove("sel", "1.0", "end")
        self.text.tag_add("sel", start, end)
        self.text.mark_set("insert", start)
        self.text.see(start)

    def _on_search_changed(self) -> None:
        self._sync()
        self._select(self.session.search(self.search_var.get()))

    def next_match(self) -> None:
        self._select(self.session.next_match())

    def previous_match(self) -> None:
        self._select(self.session.previous_match())

    # --- keys and bracket highlighting ----------------------------------------

    def _on_key_press(self, event):
        action = key_action(event.keysym, bool(event.state & _CONTROL_MASK))
        if action is None:
            return None
        if action == FIND:
            self.show_search_bar()
        elif action == UNDO:
            self.undo()
        elif action == REDO:
            self.redo()
        elif action == SAVE:
            self.save()
        else:
            self._sync()
            self.text.insert("insert", action)
            self.text.mark_set("insert", "insert - 1 chars")
            self._sync()
            self._highlight_match()
        return "break"

    def _on_cursor_moved(self, _event=None) -> None:
        self._sync()
        self._highlight_match()

    def _highlight_match(self) -> None:
        self.text.tag_remove(HIGHLIGHT_TAG, "1.0", "end")
        self.text.tag_remove(MISMATCH_TAG, "1.0", "end")
        cursor = len(self.text.get("1.0", "insert"))
        found = find_matching_bracket(self._widget_text(), cursor)
        if found is None:
            return
        tag = HIGHLIGHT_TAG if found.matched else MISMATCH_TAG
        spots = [found.position] + ([found.match] if found.matched else [])
        for offset in spots:
            self.text.tag_add(tag, self._index(offset), self._index(offset + 1))


def main(argv: list[str] | None = None) -> int:
    """Start the editor window."""
    parser = argparse.ArgumentParser(prog="quilledit", description="A simple text editor.")
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    EditorApp(root).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())