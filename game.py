from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core functionality.
# Tests and scripts import from here; the modules live under tictactoe_core/*.

import sys

from tictactoe_core.board import SIZE, Board, Cell, Coord, Mark
from tictactoe_core.moves import InvalidMoveFormat, Move, parse_move
from tictactoe_core.state import WINNING_LINES, Game, InvalidMove
from tictactoe_core.cli import InputClosed, play, main as _cli_main

__all__ = [
    'SIZE',
    'Board',
    'Cell',
    'Coord',
    'Mark',
    'InvalidMoveFormat',
    'Move',
    'parse_move',
    'WINNING_LINES',
    'Game',
    'InvalidMove',
    'InputClosed',
    'play',
    'main',
]


def main() -> int:
    # CLI driver delegated to tictactoe_core.cli
    return _cli_main()


if __name__ == '__main__':
    sys.exit(main())
