from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, List, Optional

from .board import Mark
from .moves import InvalidMoveFormat, parse_move
from .state import Game, InvalidMove


class InputClosed(Exception):
    """Raised when the input stream ends before the game is decided."""


def _env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


def play(game: Game, read_line: Callable[[], str], stop_on_draw: bool = False) -> Optional[Mark]:
    """
    Runs the turn loop until someone wins and returns the winner.
    With stop_on_draw, a full board without a winner ends the game and returns None.
    read_line follows file.readline: an empty string means end of input.
    """
    while game.winner() is None:
        if stop_on_draw and game.is_full():
            print(game)
            print('Draw, no more moves possible.')
            return None
        print(game)
        print(f'{game.turn} turn:')
        line = read_line()
        if not line:
            raise InputClosed()
        try:
            move = parse_move(line)
        except InvalidMoveFormat:
            print('wrong input format')
            continue
        try:
            game.make_move(move)
        except InvalidMove:
            print('Invalid move, go again')

    winner = game.winner()
    print(game)
    print(f'{winner} won!!!')
    return winner


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Two-player tic-tac-toe on the console')
    parser.add_argument(
        '--stop-on-draw',
        action='store_true',
        default=_env_flag('TICTACTOE_STOP_ON_DRAW'),
        help='End the game when the board is full and nobody has won '
             '(default: keep prompting; env TICTACTOE_STOP_ON_DRAW)',
    )
    args = parser.parse_args(argv)

    game = Game()
    try:
        play(game, sys.stdin.readline, stop_on_draw=args.stop_on_draw)
    except InputClosed:
        print('error: input closed before the game finished.')
        return 1
    return 0
