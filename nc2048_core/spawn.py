from __future__ import annotations

import random
from typing import Optional

from .board import Board, Coord

FOUR_CHANCE = 0.1  # probability a random tile is a 4 rather than a 2


def new_tile(board: Board, random_tiles: bool = True, rng: Optional[random.Random] = None) -> Coord:
    """
    Places one new tile on an empty cell and returns where it went.
    Deterministic mode puts a 2 in the first empty cell (row-major). Random mode
    picks an empty cell uniformly and places a 2 (90%) or a 4 (10%).
    """
    empty = board.empty_cells()
    if not empty:
        raise ValueError('Cannot place a new tile: board is full')
    if random_tiles:
        rng = rng or random.Random()
        r, c = empty[rng.randrange(len(empty))]
        value = 4 if rng.random() < FOUR_CHANCE else 2
    else:
        r, c = empty[0]
        value = 2
    board.set(r, c, value)
    return r, c
