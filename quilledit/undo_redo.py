"""Linear undo/redo history of whole-text snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UndoRedoAction:
    """The text before and after one user action."""

    prev_text: str
    next_text: str


@dataclass
class UndoRedoStack:
    """History of actions with a cursor pointing at the last applied one."""

    actions: list[UndoRedoAction] = field(default_factory=list)
    current_index: int = -1

    def __init__(self) -> None:
        self.actions = []
        self.current_index = -1

    def push(self, prev: str, next_text: str) -> None:
        """Record an action, discarding anything that could have been redone."""
        del self.actions[self.current_index + 1:]
        self.actions.append(UndoRedoAction(prev, next_text))
        self.current_index += 1

    def can_undo(self) -> bool:
        return self.current_index >= 0

    def can_redo(self) -> bool:
        return self.current_index < len(self.actions) - 1

    def undo(self) -> str | None:
        """Step back and return the text before that action, or None if there is none."""
        if not self.can_undo():
            return None
        action = self.actions[self.current_index]
        self.current_index -= 1
        return action.prev_text

    def redo(self) -> str | None:
        """Step forward and return the text after that action, or None if there is none."""
        if not self.can_redo():
            return None
        self.current_index += 1
        return self.actions[self.current_index].next_text