import unittest

from game import Board, EMPTY, GameConfig, InvalidConfiguration, OutOfBounds, deal_board, random_board
from helpers import mk_board


class TestBoard(unittest.TestCase):
    def test_given_rows_when_building_board_then_columns_are_indexed_x_then_y(self):
        board = mk_board([
            ['r', 'b'],
            ['g', 'y'],
            ['r', 'r'],
        ])
        self.assertEqual(board.width, 2)
        self.assertEqual(board.height, 3)
        self.assertEqual(board.get(1, 0), 'b')
        self.assertEqual(board.get(0, 1), 'g')
        self.assertEqual(board.column(1), ['b', 'y', 'r'])
        self.assertEqual(board.to_rows(), [['r', 'b'], ['g', 'y'], ['r', 'r']])

    def test_given_coordinates_outside_grid_when_accessing_then_out_of_bounds(self):
        board = mk_board([['r', 'b']])
        for x, y in [(-1, 0), (2, 0), (0, 1), (0, -1)]:
            with self.assertRaises(OutOfBounds):
                board.get(x, y)
            with self.assertRaises(OutOfBounds):
                board.set(x, y, 'r')
        # OutOfBounds is also an IndexError for callers that only know builtins
        with self.assertRaises(IndexError):
            board.get(5, 5)

    def test_given_set_when_reading_back_then_value_stored_and_copy_is_independent(self):
        board = mk_board([['r', 'b']])
        clone = board.copy()
        board.set(0, 0, EMPTY)
        self.assertIsNone(board.get(0, 0))
        self.assertEqual(clone.get(0, 0), 'r')
        self.assertEqual(board.count_tiles(), 1)
        self.assertFalse(board.is_column_empty(1))
        self.assertTrue(board.is_column_empty(0))

    def test_given_new_board_without_columns_then_every_cell_empty(self):
        board = Board(width=3, height=2)
        self.assertTrue(board.is_empty())
        self.assertEqual(board.snapshot(), ((None, None),) * 3)

    def test_given_bad_dimensions_when_building_then_invalid_configuration(self):
        with self.assertRaises(InvalidConfiguration):
            Board(width=0, height=2)
        with self.assertRaises(InvalidConfiguration):
            Board(width=2, height=2, columns=[['r', 'r'], ['r']])
        with self.assertRaises(InvalidConfiguration):
            mk_board([[]])

    def test_given_highlight_when_pretty_then_marked_cells_upper_cased(self):
        board = mk_board([
            ['r', None],
            ['b', 'r'],
        ])
        self.assertEqual(board.pretty({(0, 0)}), "R .\nb r")
        board2 = mk_board([['blue', 'brown']])
        self.assertEqual(board2.pretty(symbols={'blue': '0', 'brown': '1'}), "0 1")

    def test_given_seed_when_dealing_then_deterministic_and_uses_first_colors_only(self):
        config = GameConfig(ncolors=2, width=5, height=4)
        a = deal_board(config, seed=11)
        b = deal_board(config, seed=11)
        self.assertEqual(a.snapshot(), b.snapshot())
        self.assertEqual((a.width, a.height), (5, 4))
        self.assertEqual(a.count_tiles(), 20)
        used = {c for col in a.columns for c in col}
        self.assertTrue(used <= {'green', 'blue'})

    def test_given_no_colors_or_zero_size_when_random_board_then_invalid_configuration(self):
        with self.assertRaises(InvalidConfiguration):
            random_board(0, 3, ['r'])
        with self.assertRaises(InvalidConfiguration):
            random_board(3, 3, [])


if __name__ == '__main__':
    unittest.main(verbosity=2)
