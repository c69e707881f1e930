"""A small Tk text editor built on a piece table, with search, undo/redo, zoom and bracket matching."""

__version__ = "0.1.0"
__all__ = ["__version__"]