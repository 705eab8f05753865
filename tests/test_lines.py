import unittest

from fourinarow.game.lines import (LINES, board_lines, scannable_lines, window_owner,
                                   windows)
from fourinarow.utils import ROWS, COLS, CONNECT_N, EMPTY, Occupied, Owner


def brute_force_windows():
    """Every run of CONNECT_N on-board cells in the four directions."""
    found = set()
    for row in range(ROWS):
        for col in range(COLS):
            for dr, dc in [(0, 1), (1, 0), (1, 1), (1, -1)]:
                cells = tuple((row + dr * i, col + dc * i) for i in range(CONNECT_N))
                if all(0 <= r < ROWS and 0 <= c < COLS for r, c in cells):
                    found.add(cells)
    return found


class TestBoardLines(unittest.TestCase):
    def test_line_counts(self):
        lines = board_lines()
        # rows + columns + two diagonal families of (ROWS + COLS - 1) each
        self.assertEqual(len(lines), ROWS + COLS + 2 * (ROWS + COLS - 1))
        self.assertEqual(len(LINES), 25)
        self.assertEqual(len(scannable_lines()), 25)

    def test_every_line_is_listed_once(self):
        lines = board_lines()
        self.assertEqual(len(set(lines)), len(lines))

    def test_every_cell_is_on_one_line_per_direction(self):
        lines = board_lines()
        for row in range(ROWS):
            for col in range(COLS):
                hits = sum(1 for line in lines if (row, col) in line)
                self.assertEqual(hits, 4)

    def test_rows_and_columns_come_first(self):
        lines = board_lines()
        self.assertEqual(lines[0], tuple((0, c) for c in range(COLS)))
        self.assertEqual(lines[ROWS], tuple((r, 0) for r in range(ROWS)))

    def test_short_diagonals_are_filtered(self):
        self.assertIn(((0, COLS - 1),), board_lines())
        self.assertTrue(all(len(line) >= CONNECT_N for line in LINES))

    def test_windows_cover_all_possible_fours(self):
        from_lines = {w for line in LINES for w in windows(line)}
        self.assertEqual(from_lines, brute_force_windows())
        self.assertEqual(len(from_lines), 69)

    def test_windows_of_a_line(self):
        line = tuple((0, c) for c in range(COLS))
        self.assertEqual(len(list(windows(line))), COLS - CONNECT_N + 1)
        self.assertEqual(list(windows(line[:3])), [])

    def test_other_board_sizes(self):
        # 4 rows, 4 columns and one diagonal in each direction
        self.assertEqual(len(scannable_lines(4, 4)), 10)
        self.assertEqual(len(scannable_lines(3, 3)), 0)


class TestWindowOwner(unittest.TestCase):
    def test_full_window_of_one_owner(self):
        self.assertEqual(window_owner([Occupied(Owner.WHITE)] * 4), Owner.WHITE)

    def test_all_empty_window(self):
        self.assertIsNone(window_owner([EMPTY] * 4))

    def test_window_with_one_empty(self):
        self.assertIsNone(window_owner([Occupied(Owner.BLACK)] * 3 + [EMPTY]))

    def test_mixed_window(self):
        cells = [Occupied(Owner.BLACK)] * 3 + [Occupied(Owner.WHITE)]
        self.assertIsNone(window_owner(cells))


if __name__ == '__main__':
    unittest.main()
