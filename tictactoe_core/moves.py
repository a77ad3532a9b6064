from __future__ import annotations

import re
from dataclasses import dataclass

from .board import SIZE

_INT_TOKEN = re.compile(r'[+-]?[0-9]+')
_SEPARATOR = re.compile(r'[ \t]+')


class InvalidMoveFormat(ValueError):
    """Raised when a line of input does not describe a move on the board."""


@dataclass(frozen=True)
class Move:
    """A zero-based (column, row) target. Out-of-range values are rejected."""
    x: int
    y: int

    def __post_init__(self) -> None:
        if not (0 <= self.x < SIZE and 0 <= self.y < SIZE):
            raise InvalidMoveFormat(f'move ({self.x}, {self.y}) is off the board')


def parse_move(text: str) -> Move:
    """
    Parses a one-based "column row" line such as "2 3\\n" into a Move.
    Both numbers must lie in [1, 3]; the trailing line terminator is optional.
    """
    line = text
    if line.endswith('\r\n'):
        line = line[:-2]
    elif line.endswith('\n'):
        line = line[:-1]
    # Exactly one line; plain ASCII digits only.
    if '\n' in line or '\r' in line:
        raise InvalidMoveFormat(f'expected a single line, got {text!r}')
    tokens = _SEPARATOR.split(line.strip(' \t'))
    if len(tokens) != 2 or not all(_INT_TOKEN.fullmatch(tok) for tok in tokens):
        raise InvalidMoveFormat(f'expected two numbers, got {text!r}')
    col, row = int(tokens[0]), int(tokens[1])
    if not (1 <= col <= SIZE and 1 <= row <= SIZE):
        raise InvalidMoveFormat(f'numbers must be between 1 and {SIZE}, got {text!r}')
    return Move(col - 1, row - 1)
