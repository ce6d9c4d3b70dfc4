from __future__ import annotations

# Facade module that re-exports the nc2048 core.
# The Flask app and the tests import from here; the single-responsibility
# modules live under nc2048_core/*.

from nc2048_core.board import DIM, Board, Coord
from nc2048_core.state import GameState
from nc2048_core.moves import (
    Direction,
    lines_for,
    push,
    left,
    right,
    up,
    down,
    move_available,
)
from nc2048_core.spawn import new_tile
from nc2048_core.undo import UNDO_CAPACITY, UndoStack
from nc2048_core.savefile import (
    RECORD,
    SaveFileError,
    pack_state,
    unpack_state,
    save_game,
    load_game,
)
from nc2048_core.session import Game
from nc2048_core.config import DEFAULT_SAVE_FILE, Settings

__all__ = [
    'DIM', 'Board', 'Coord', 'GameState', 'Direction', 'lines_for', 'push',
    'left', 'right', 'up', 'down', 'move_available', 'new_tile',
    'UNDO_CAPACITY', 'UndoStack', 'RECORD', 'SaveFileError', 'pack_state',
    'unpack_state', 'save_game', 'load_game', 'Game', 'DEFAULT_SAVE_FILE',
    'Settings', 'main',
]


def main() -> None:
    # CLI driver delegated to nc2048_core.cli
    from nc2048_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
