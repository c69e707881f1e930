"""Window title text for the file being edited."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

UNTITLED = "Untitled - Text Editor"


def window_title(filepath: Union[str, os.PathLike, None]) -> str:
    """Return "<basename> - Text Editor" for an existing path, else the untitled title."""
    if filepath and os.path.exists(filepath):
        return f"{Path(filepath).name} - Text Editor"
    return UNTITLED