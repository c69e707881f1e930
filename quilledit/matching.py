"""Bracket matching and nesting-level colouring for editor text."""

from __future__ import annotations

from dataclasses import dataclass

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_REVERSE = {close: open_ for open_, close in _PAIRS.items()}

# Brackets that take part in nesting-level colouring; angle brackets do not.
_LEVEL_OPENERS = "([{"
_LEVEL_CLOSERS = ")]}"
MAX_LEVEL = 3


@dataclass(frozen=True)
class BracketMatch:
    """A bracket at ``position`` and the offset of its partner, or None if unmatched."""

    position: int
    match: int | None

    @property
    def matched(self) -> bool:
        return self.match is not None


def is_opening_bracket(ch: str) -> bool:
    return ch in _PAIRS


def is_closing_bracket(ch: str) -> bool:
    return ch in _REVERSE


def matching_bracket(ch: str) -> str | None:
    """Return the counterpart of a bracket character, or None for anything else."""
    return _PAIRS.get(ch) or _REVERSE.get(ch)


def find_matching_bracket(text: str, cursor: int) -> BracketMatch | None:
    """Find the partner of the bracket just before ``cursor``.

    At the very start of the text the character under the cursor is used instead.
    Returns None when that character is not a bracket.
    """
    position = cursor - 1 if cursor > 0 else 0
    if not 0 <= position < len(text):
        return None
    current = text[position]
    partner = matching_bracket(current)
    if partner is None:
        return None

    if is_opening_bracket(current):
        candidates = range(position + 1, len(text))
    else:
        candidates = range(position - 1, -1, -1)

    level = 1
    for index in candidates:
        ch = text[index]
        if ch == current:
            level += 1
        elif ch == partner:
            level -= 1
            if level == 0:
                return BracketMatch(position, index)
    return BracketMatch(position, None)


def bracket_levels(text: str) -> list[tuple[int, int]]:
    """Return ``(offset, level)`` for each round, square or curly bracket nested at most three deep."""
    levels: list[tuple[int, int]] = []
    level = 0
    for index, ch in enumerate(text):
        if ch in _LEVEL_OPENERS:
            level += 1
            if 1 <= level <= MAX_LEVEL:
                levels.append((index, level))
        elif ch in _LEVEL_CLOSERS:
            if 1 <= level <= MAX_LEVEL:
                levels.append((index, level))
            level -= 1
    return levels