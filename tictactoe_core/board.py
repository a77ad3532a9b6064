from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

if TYPE_CHECKING:
    from .moves import Move

SIZE = 3
Coord = Tuple[int, int]  # (x, y) == (column, row)


class Mark(Enum):
    """One of the two player symbols."""
    X = 'X'
    O = 'O'

    @property
    def other(self) -> 'Mark':
        return Mark.O if self is Mark.X else Mark.X

    def __str__(self) -> str:
        return self.value


Cell = Optional[Mark]


def _empty_grid() -> List[List[Cell]]:
    return [[None] * SIZE for _ in range(SIZE)]


@dataclass
class Board:
    """The 3x3 occupancy grid, stored row-major (grid[y][x])."""
    grid: List[List[Cell]] = field(default_factory=_empty_grid)

    def __post_init__(self) -> None:
        if len(self.grid) != SIZE or any(len(line) != SIZE for line in self.grid):
            raise ValueError(f'Invalid grid: expected {SIZE}x{SIZE} cells')

    def is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y) is None

    def get(self, x: int, y: int) -> Cell:
        """Gets the mark at (x, y), or None when empty or off the grid."""
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            return None
        return self.grid[y][x]

    def place(self, mark: Mark, move: 'Move') -> None:
        """Writes the mark into the move's cell. Legality is the caller's job."""
        self.grid[move.y][move.x] = mark

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board, row by row."""
        for y in range(SIZE):
            for x in range(SIZE):
                yield (x, y)

    def is_full(self) -> bool:
        return all(not self.is_empty(x, y) for x, y in self.coords())

    def pretty(self) -> str:
        """Renders rows of glyphs joined by '|', separated by '-+-+-' lines."""
        rows: List[str] = []
        for line in self.grid:
            cells = [str(cell) if cell is not None else ' ' for cell in line]
            rows.append('|'.join(cells) + '\n')
        return '-+-+-\n'.join(rows)

    def __str__(self) -> str:
        return self.pretty()
