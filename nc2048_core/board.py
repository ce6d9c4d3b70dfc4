from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

DIM = 4  # board is DIM x DIM
Coord = Tuple[int, int]


def _empty_grid() -> List[int]:
    return [0] * (DIM * DIM)


@dataclass
class Board:
    """The DIM x DIM grid of tile values. 0 is an empty cell."""
    grid: List[int] = field(default_factory=_empty_grid)  # row-major, length == DIM * DIM

    def __post_init__(self) -> None:
        if len(self.grid) != DIM * DIM:
            raise ValueError(f"Board grid must have {DIM * DIM} cells, got {len(self.grid)}")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """Builds a board from a list of DIM rows of DIM values."""
        if len(rows) != DIM or any(len(r) != DIM for r in rows):
            raise ValueError(f"Board must be {DIM}x{DIM}")
        return cls(grid=[int(v) for r in rows for v in r])

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * DIM + c

    def at(self, r: int, c: int) -> int:
        return self.grid[self.index(r, c)]

    def set(self, r: int, c: int, value: int) -> None:
        self.grid[self.index(r, c)] = value

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board in row-major order."""
        for r in range(DIM):
            for c in range(DIM):
                yield (r, c)

    def empty_cells(self) -> List[Coord]:
        return [(r, c) for (r, c) in self.coords() if self.at(r, c) == 0]

    def rows(self) -> List[List[int]]:
        return [self.grid[r * DIM:(r + 1) * DIM] for r in range(DIM)]

    def copy(self) -> 'Board':
        return Board(grid=list(self.grid))

    def clear(self) -> None:
        for i in range(DIM * DIM):
            self.grid[i] = 0

    def max_tile(self) -> int:
        return max(self.grid)

    def is_valid(self) -> bool:
        """True when every non-zero tile is a power of two no smaller than 2."""
        for v in self.grid:
            if v == 0:
                continue
            if v < 2 or v & (v - 1):
                return False
        return True

    def pretty(self) -> str:
        """Generates a human-readable string representation of the board."""
        width = max(4, len(str(self.max_tile())))
        lines: List[str] = []
        for row in self.rows():
            lines.append(" ".join((str(v) if v else ".").rjust(width) for v in row))
        return "\n".join(lines)
