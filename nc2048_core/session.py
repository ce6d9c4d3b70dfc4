from __future__ import annotations

import logging
import random
from typing import Any, Dict, Optional

from .config import DEFAULT_SAVE_FILE
from .moves import Direction, move_available, push
from .savefile import SaveFileError, load_game, save_game
from .spawn import new_tile
from .state import GameState
from .undo import UndoStack

logger = logging.getLogger(__name__)

MSG_NO_UNDO = 'No undos available.'
MSG_SAVED = 'Game saved.'
MSG_SAVE_FAILED = 'Error saving game!'
MSG_LOADED = 'Game loaded.'
MSG_LOAD_FAILED = 'Error loading game!'
MSG_RANDOM = 'New tiles spawn randomly.'
MSG_DETERMINISTIC = 'New tiles spawn deterministically.'


class Game:
    """
    One game in progress: the live state, its undo history and the tile mode.
    Front-ends call the command methods and read back board, score, game_over
    and message. No command raises for an expected failure; they return False
    and leave a status message instead.
    """

    def __init__(
        self,
        random_tiles: bool = True,
        rng: Optional[random.Random] = None,
        save_path: str = DEFAULT_SAVE_FILE,
    ) -> None:
        self.state = GameState()
        self.undo_stack = UndoStack()
        self.random_tiles = random_tiles
        self.rng = rng or random.Random()
        self.save_path = save_path
        self.message = ''
        self.new_game()

    @property
    def board(self):
        return self.state.board

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def game_over(self) -> bool:
        return not move_available(self.state.board)

    def new_game(self, random_tiles: Optional[bool] = None) -> None:
        if random_tiles is not None:
            self.random_tiles = random_tiles
        self.state.reset()
        self.undo_stack.reset()
        new_tile(self.state.board, self.random_tiles, self.rng)
        self.undo_stack.push(self.state)
        self.message = ''
        logger.debug("new game (random_tiles=%s)", self.random_tiles)

    def move(self, direction: Direction) -> bool:
        """Pushes the tiles; on a change spawns a tile and records the new state."""
        if not push(self.state, direction):
            return False
        new_tile(self.state.board, self.random_tiles, self.rng)
        self.undo_stack.push(self.state)
        self.message = ''
        logger.debug("moved %s, score=%d", direction.name, self.state.score)
        return True

    def undo(self) -> bool:
        previous = self.undo_stack.pop()
        if previous is None:
            self.message = MSG_NO_UNDO
            return False
        self.state.restore(previous)
        self.message = ''
        logger.debug("undo, %d entries left", len(self.undo_stack))
        return True

    def set_random_tiles(self, random_tiles: bool) -> None:
        self.random_tiles = random_tiles
        self.message = MSG_RANDOM if random_tiles else MSG_DETERMINISTIC

    def save(self) -> bool:
        try:
            save_game(self.state, self.save_path)
        except SaveFileError as e:
            logger.warning("save failed: %s", e)
            self.message = MSG_SAVE_FAILED
            return False
        self.message = MSG_SAVED
        return True

    def load(self) -> bool:
        """Replaces the live state with the saved one; history restarts from it."""
        try:
            loaded = load_game(self.save_path)
        except SaveFileError as e:
            logger.warning("load failed: %s", e)
            self.message = MSG_LOAD_FAILED
            return False
        self.state.restore(loaded)
        self.undo_stack.reset()
        self.undo_stack.push(self.state)
        self.message = MSG_LOADED
        return True

    def snapshot(self) -> Dict[str, Any]:
        return {
            'board': self.state.board.rows(),
            'score': self.state.score,
            'gameOver': self.game_over,
            'message': self.message,
            'undoDepth': len(self.undo_stack) - 1,
            'randomTiles': self.random_tiles,
            'maxTile': self.state.board.max_tile(),
        }
