from __future__ import annotations

from typing import List, Optional

from .state import GameState

# The most recent board-changing moves are kept in a circular stack.
# UNDO_CAPACITY is the number of moves that can be undone plus one, since the
# entry on top is the state currently shown.
UNDO_CAPACITY = 4


class UndoStack:
    """Fixed-size circular stack of GameState snapshots."""

    def __init__(self, capacity: int = UNDO_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError('Undo capacity must be at least 1')
        self.capacity = capacity
        self._slots: List[Optional[GameState]] = [None] * capacity
        self.top = 0
        self.size = 0

    def __len__(self) -> int:
        return self.size

    @property
    def can_undo(self) -> bool:
        return self.size > 1

    def reset(self) -> None:
        self._slots = [None] * self.capacity
        self.top = 0
        self.size = 0

    def push(self, state: GameState) -> None:
        """Stores a snapshot of state on top, overwriting the oldest entry when full."""
        self.top = (self.top + 1) % self.capacity
        if self.size < self.capacity:
            self.size += 1
        self._slots[self.top] = state.copy()

    def pop(self) -> Optional[GameState]:
        """
        Drops the top entry and returns a copy of the one below it, which is the
        state before the last board-changing move. Returns None when fewer than
        two entries remain.
        """
        if self.size <= 1:
            return None
        index = (self.top - 1) % self.capacity
        restored = self._slots[index]
        if restored is None:
            raise RuntimeError(f"Undo slot {index} is empty with size={self.size}")
        self._slots[self.top] = None
        self.top = index
        self.size -= 1
        return restored.copy()

    def peek(self) -> Optional[GameState]:
        if self.size == 0:
            return None
        current = self._slots[self.top]
        return current.copy() if current is not None else None

    def states(self) -> List[GameState]:
        """Snapshots held, oldest first."""
        out: List[GameState] = []
        for back in range(self.size - 1, -1, -1):
            s = self._slots[(self.top - back) % self.capacity]
            if s is not None:
                out.append(s.copy())
        return out
