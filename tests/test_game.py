import unittest

from fourinarow.game.rules import FourInARowGame
from fourinarow.utils import COLS, Move, Owner

BLACK = Owner.BLACK
WHITE = Owner.WHITE

# Column order that fills the board two rows at a time without any four
DRAW_ORDER = [0, 2, 1, 3, 4, 6, 5] * 6


class TestFourInARowGame(unittest.TestCase):
    def setUp(self):
        self.game = FourInARowGame()

    def play(self, column):
        return self.game.play(Move(self.game.current_player(), column))

    def test_new_game(self):
        self.assertEqual(self.game.current_player(), BLACK)
        self.assertEqual([m.column for m in self.game.legal_moves()], list(range(COLS)))
        self.assertTrue(all(m.owner == BLACK for m in self.game.legal_moves()))
        self.assertFalse(self.game.is_over())
        self.assertIsNone(self.game.winner())

    def test_successful_play_switches_turn(self):
        self.assertTrue(self.play(3))
        self.assertEqual(self.game.current_player(), WHITE)
        self.assertTrue(all(m.owner == WHITE for m in self.game.legal_moves()))
        self.assertTrue(self.play(3))
        self.assertEqual(self.game.current_player(), BLACK)

    def test_wrong_owner_is_rejected_without_mutation(self):
        before = self.game.board.copy()
        self.assertFalse(self.game.play(Move(WHITE, 0)))
        self.assertEqual(self.game.current_player(), BLACK)
        self.assertEqual(self.game.board, before)

    def test_full_column_keeps_turn(self):
        for _ in range(6):
            self.assertTrue(self.play(2))
        before = self.game.board.copy()
        self.assertEqual(self.game.current_player(), BLACK)

        self.assertFalse(self.play(2))
        self.assertEqual(self.game.current_player(), BLACK)
        self.assertEqual(self.game.board, before)

    def test_apply_turn_alias(self):
        self.assertTrue(self.game.apply_turn(Move(BLACK, 0)))
        self.assertFalse(self.game.apply_turn(Move(BLACK, 0)))

    def test_vertical_win_scenario(self):
        for _ in range(3):
            self.play(3)
            self.play(0)
        self.assertFalse(self.game.is_over())
        self.play(3)
        self.assertEqual(self.game.winner(), BLACK)
        self.assertTrue(self.game.is_over())

    def test_full_board_draw(self):
        for col in DRAW_ORDER:
            self.assertIsNone(self.game.winner())
            self.assertTrue(self.play(col))
        self.assertTrue(self.game.is_over())
        self.assertIsNone(self.game.winner())
        self.assertEqual(self.game.legal_moves(), [])

    def test_render_matches_board(self):
        self.play(0)
        self.assertEqual(str(self.game), self.game.board.render())


if __name__ == '__main__':
    unittest.main()
