from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

from .board import DIM, Board, Coord
from .state import GameState


class Direction(Enum):
    UP = 'UP'
    DOWN = 'DOWN'
    LEFT = 'LEFT'
    RIGHT = 'RIGHT'

    @classmethod
    def parse(cls, text: str) -> 'Direction':
        """Accepts a direction name (any case) or one of the w/a/s/d keys."""
        key = str(text).strip().upper()
        if key in _KEY_ALIASES:
            return _KEY_ALIASES[key]
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown direction: {text!r}") from None


_KEY_ALIASES: Dict[str, Direction] = {
    'W': Direction.UP,
    'A': Direction.LEFT,
    'S': Direction.DOWN,
    'D': Direction.RIGHT,
}


def lines_for(direction: Direction) -> List[List[Coord]]:
    """
    Returns every row or column the push acts on. Each line is ordered from the
    edge the tiles are pushed towards, so position 0 is where tiles come to rest.
    """
    span = range(DIM)
    if direction is Direction.LEFT:
        return [[(i, j) for j in span] for i in span]
    if direction is Direction.RIGHT:
        return [[(i, j) for j in reversed(span)] for i in span]
    if direction is Direction.UP:
        return [[(i, j) for i in span] for j in span]
    if direction is Direction.DOWN:
        return [[(i, j) for i in reversed(span)] for j in span]
    raise ValueError(f"Unknown direction: {direction!r}")


def _push_line(board: Board, line: List[Coord]) -> Tuple[bool, int]:
    """
    Compacts and merges a single line in place, scanning from its resting edge.
    Returns (changed, score gained).
    """
    changed = False
    gained = 0
    zeros = 0
    unmerged = 0

    for k, (r, c) in enumerate(line):
        value = board.at(r, c)
        if value == 0:
            zeros += 1
        elif value == unmerged:
            # Merge into the slot the held tile is sliding to; its source becomes a gap.
            board.set(*line[k - zeros - 1], unmerged * 2)
            gained += unmerged * 2
            changed = True
            zeros += 1
            unmerged = 0
        elif unmerged:
            if zeros:
                changed = True
            board.set(*line[k - zeros - 1], unmerged)
            unmerged = value
        else:
            unmerged = value

    if unmerged:
        slot = line[DIM - zeros - 1]
        if board.at(*slot) != unmerged:
            changed = True
            board.set(*slot, unmerged)

    while zeros:
        board.set(*line[DIM - zeros], 0)
        zeros -= 1

    return changed, gained


def push(state: GameState, direction: Direction) -> bool:
    """
    Pushes all tiles towards one edge, merging equal neighbours once per push.
    The earliest pair from the resting edge merges first, so [2,2,2,2] pushed
    left gives [4,4,0,0]. Adds every merge result to the score.
    Returns True if any tile moved or merged.
    """
    changed_any = False
    for line in lines_for(direction):
        changed, gained = _push_line(state.board, line)
        state.score += gained
        changed_any = changed_any or changed
    return changed_any


def left(state: GameState) -> bool:
    return push(state, Direction.LEFT)


def right(state: GameState) -> bool:
    return push(state, Direction.RIGHT)


def up(state: GameState) -> bool:
    return push(state, Direction.UP)


def down(state: GameState) -> bool:
    return push(state, Direction.DOWN)


def move_available(board: Board) -> bool:
    """True if the board has an empty cell or two orthogonally adjacent equal tiles."""
    for r, c in board.coords():
        value = board.at(r, c)
        if value == 0:
            return True
        if r < DIM - 1 and value == board.at(r + 1, c):
            return True
        if c < DIM - 1 and value == board.at(r, c + 1):
            return True
    return False
