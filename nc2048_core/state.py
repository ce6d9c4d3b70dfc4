from __future__ import annotations

from dataclasses import dataclass, field

from .board import Board


@dataclass
class GameState:
    """Represents the live game: the board and the score. Snapshotted for undo and saved to disk."""
    board: Board = field(default_factory=Board)
    score: int = 0

    def copy(self) -> 'GameState':
        return GameState(board=self.board.copy(), score=self.score)

    def restore(self, other: 'GameState') -> None:
        """Overwrites this state in place with the contents of another."""
        self.board.grid[:] = other.board.grid
        self.score = other.score

    def reset(self) -> None:
        self.board.clear()
        self.score = 0
