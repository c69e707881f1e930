"""A piece table holding a document as an original text plus appended edits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Source(Enum):
    """Which buffer a piece refers to."""

    ORIGINAL = 0
    ADD = 1


@dataclass(frozen=True)
class Piece:
    """A span of ``length`` characters starting at ``start`` in one buffer."""

    which: Source
    start: int
    length: int


class PieceTable:
    """A document built from an immutable original text and a growing add buffer."""

    def __init__(self, original: str | None = None) -> None:
        self.original = original or ""
        self._add: list[str] = []
        self._pieces: list[Piece] = [Piece(Source.ORIGINAL, 0, len(self.original))]
        self._length = len(self.original)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self.value()

    def add_length(self) -> int:
        """Return the total number of characters ever inserted."""
        return sum(len(chunk) for chunk in self._add)

    def insert(self, value: str, at: int) -> None:
        """Insert ``value`` before position ``at``.

        Positions outside ``0..len(self)`` are ignored and leave the table unchanged.
        """
        if not 0 <= at <= self._length:
            return

        new_piece = Piece(Source.ADD, self.add_length(), len(value))
        self._add.append(value)

        if at == 0:
            self._pieces.insert(0, new_piece)
        else:
            offset = 0
            for index, piece in enumerate(self._pieces):
                if offset + piece.length >= at:
                    split = at - offset
                    if split == piece.length:
                        self._pieces.insert(index + 1, new_piece)
                    else:
                        head = Piece(piece.which, piece.start, split)
                        tail = Piece(piece.which, piece.start + split, piece.length - split)
                        self._pieces[index:index + 1] = [head, new_piece, tail]
                    break
                offset += piece.length

        self._length += len(value)

    def value(self) -> str:
        """Return the full current text of the document."""
        buffers = {Source.ORIGINAL: self.original, Source.ADD: "".join(self._add)}
        return "".join(
            buffers[piece.which][piece.start:piece.start + piece.length]
            for piece in self._pieces
        )