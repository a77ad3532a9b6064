from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import SIZE, Board, Coord, Mark
from .moves import Move


class InvalidMove(Exception):
    """Raised when a move targets a cell that is already occupied."""


def _winning_lines() -> Tuple[Tuple[Coord, ...], ...]:
    rows = [tuple((x, y) for x in range(SIZE)) for y in range(SIZE)]
    cols = [tuple((x, y) for y in range(SIZE)) for x in range(SIZE)]
    diags = [
        tuple((i, i) for i in range(SIZE)),
        tuple((SIZE - 1 - i, i) for i in range(SIZE)),
    ]
    return tuple(rows + cols + diags)


# Rows, then columns, then the two diagonals.
WINNING_LINES = _winning_lines()


@dataclass
class Game:
    """Represents one game: the current turn and the board it owns."""
    turn: Mark = Mark.X
    board: Board = field(default_factory=Board)

    def is_legal(self, move: Move) -> bool:
        return self.board.is_empty(move.x, move.y)

    def make_move(self, move: Move) -> None:
        """Places the current mark and passes the turn. Raises InvalidMove if occupied."""
        if not self.is_legal(move):
            raise InvalidMove(f'cell ({move.x}, {move.y}) is already taken')
        self.board.place(self.turn, move)
        self.turn = self.turn.other

    def winner(self) -> Optional[Mark]:
        """Recomputes the winner from the board; None while no line is complete."""
        for line in WINNING_LINES:
            cells: List[Optional[Mark]] = [self.board.get(x, y) for x, y in line]
            first = cells[0]
            if first is not None and all(c == first for c in cells):
                return first
        return None

    def is_full(self) -> bool:
        return self.board.is_full()

    def pretty(self) -> str:
        return self.board.pretty()

    def __str__(self) -> str:
        return self.pretty()
