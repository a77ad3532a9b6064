"""
Tic-tac-toe core Python package.

This package contains the game-state engine for the console game, kept apart
from the console driver so it can be tested without any I/O.
Modules:
- board.py: Mark, Board, Coord
- moves.py: Move, parse_move, InvalidMoveFormat
- state.py: Game, InvalidMove, WINNING_LINES
- cli.py: console driver
"""
