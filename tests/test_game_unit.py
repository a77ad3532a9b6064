import unittest

from game import WINNING_LINES, Game, InvalidMove, Mark, Move, parse_move


def play_lines(game, lines):
    for text in lines:
        game.make_move(parse_move(text + '\n'))


class TestGameUnit(unittest.TestCase):
    def test_given_new_game_when_created_then_x_to_move_on_empty_board(self):
        game = Game()
        self.assertIs(game.turn, Mark.X)
        self.assertIsNone(game.winner())
        self.assertEqual(str(game), str(game.board))

    def test_given_games_when_created_then_boards_not_shared(self):
        g1, g2 = Game(), Game()
        g1.make_move(Move(0, 0))
        self.assertTrue(g2.board.is_empty(0, 0))

    def test_given_legal_moves_when_applied_then_turn_alternates(self):
        game = Game()
        game.make_move(Move(0, 0))
        self.assertIs(game.turn, Mark.O)
        self.assertEqual(game.board.get(0, 0), Mark.X)
        game.make_move(Move(1, 0))
        self.assertIs(game.turn, Mark.X)
        self.assertEqual(game.board.get(1, 0), Mark.O)

    def test_given_occupied_cell_when_make_move_then_invalid_and_nothing_changes(self):
        game = Game()
        game.make_move(Move(0, 0))
        before = game.pretty()
        self.assertFalse(game.is_legal(Move(0, 0)))
        with self.assertRaises(InvalidMove):
            game.make_move(Move(0, 0))
        self.assertIs(game.turn, Mark.O)
        self.assertEqual(game.pretty(), before)
        self.assertEqual(game.board.get(0, 0), Mark.X)

    def test_given_lines_table_when_inspected_then_eight_distinct_lines(self):
        self.assertEqual(len(WINNING_LINES), 8)
        self.assertEqual(len(set(WINNING_LINES)), 8)
        self.assertEqual(WINNING_LINES[0], ((0, 0), (1, 0), (2, 0)))
        self.assertEqual(WINNING_LINES[3], ((0, 0), (0, 1), (0, 2)))
        self.assertEqual(WINNING_LINES[6], ((0, 0), (1, 1), (2, 2)))
        self.assertEqual(WINNING_LINES[7], ((2, 0), (1, 1), (0, 2)))

    def test_given_any_line_filled_by_one_mark_when_winner_then_that_mark(self):
        for mark in (Mark.X, Mark.O):
            for line in WINNING_LINES:
                with self.subTest(mark=mark, line=line):
                    game = Game()
                    for x, y in line:
                        game.board.place(mark, Move(x, y))
                    self.assertIs(game.winner(), mark)

    def test_given_mixed_or_partial_line_when_winner_then_none(self):
        game = Game()
        game.board.place(Mark.X, Move(0, 0))
        game.board.place(Mark.X, Move(1, 0))
        self.assertIsNone(game.winner())
        game.board.place(Mark.O, Move(2, 0))
        self.assertIsNone(game.winner())

    def test_given_main_diagonal_scenario_when_played_then_x_wins_on_fifth_move(self):
        game = Game()
        play_lines(game, ['1 1', '1 2', '2 2', '1 3'])
        self.assertIsNone(game.winner())
        play_lines(game, ['3 3'])
        self.assertIs(game.winner(), Mark.X)

    def test_given_anti_diagonal_when_o_completes_then_o_wins(self):
        game = Game()
        play_lines(game, ['1 1', '3 1', '2 1', '2 2', '1 2', '1 3'])
        self.assertIs(game.winner(), Mark.O)

    def test_given_full_board_without_line_when_queried_then_no_winner_and_all_moves_rejected(self):
        game = Game()
        # X O X / X O O / O X X
        play_lines(game, ['1 1', '2 1', '3 1', '2 2', '1 2', '3 2', '2 3', '1 3', '3 3'])
        self.assertTrue(game.is_full())
        self.assertIsNone(game.winner())
        for x, y in game.board.coords():
            with self.assertRaises(InvalidMove):
                game.make_move(Move(x, y))
        self.assertIsNone(game.winner())


if __name__ == '__main__':
    unittest.main(verbosity=2)
