import unittest

from game import (
    GameConfig,
    InvalidCluster,
    compute_clusters,
    deal_board,
    remove_cluster,
)
from helpers import mk_board


class TestCollapse(unittest.TestCase):
    def test_given_single_column_when_removing_top_pair_then_blue_falls_to_bottom(self):
        board = mk_board([['r'], ['r'], ['b']])
        removed = remove_cluster(board, [(0, 0), (0, 1)])
        self.assertEqual(removed, 2)
        self.assertEqual(board.column(0), [None, None, 'b'])

    def test_given_middle_row_cluster_when_removed_then_tiles_above_fall_one_row(self):
        board = mk_board([
            ['g', 'b', 'g'],
            ['r', 'r', 'r'],
            ['b', 'g', 'b'],
        ])
        remove_cluster(board, [(0, 1), (1, 1), (2, 1)])
        self.assertEqual(board.to_rows(), [
            [None, None, None],
            ['g', 'b', 'g'],
            ['b', 'g', 'b'],
        ])

    def test_given_cluster_spanning_columns_when_removed_then_each_column_falls_independently(self):
        board = mk_board([
            ['r', 'b'],
            ['r', 'r'],
            ['g', 'b'],
        ])
        remove_cluster(board, compute_clusters(board).cluster_at(0, 0))
        self.assertEqual(board.to_rows(), [
            [None, None],
            [None, 'b'],
            ['g', 'b'],
        ])

    def test_given_emptied_first_column_when_removed_then_columns_shift_left(self):
        board = mk_board([
            ['r', 'b', 'g'],
            ['r', 'b', 'g'],
        ])
        remove_cluster(board, [(0, 0), (0, 1)])
        self.assertEqual(board.to_rows(), [
            ['b', 'g', None],
            ['b', 'g', None],
        ])

    def test_given_emptied_middle_column_when_removed_then_only_right_side_shifts(self):
        board = mk_board([
            ['g', 'r', 'b'],
            ['g', 'r', 'y'],
        ])
        remove_cluster(board, [(1, 0), (1, 1)])
        self.assertEqual(board.to_rows(), [
            ['g', 'b', None],
            ['g', 'y', None],
        ])

    def test_given_two_adjacent_columns_emptied_when_removed_then_both_close_up(self):
        board = mk_board([['r', 'r', 'b']])
        remove_cluster(board, [(0, 0), (1, 0)])
        self.assertEqual(board.to_rows(), [['b', None, None]])

    def test_given_left_column_emptied_and_right_partially_when_removed_then_right_work_survives_shift(self):
        board = mk_board([
            ['r', 'r'],
            ['r', 'b'],
        ])
        remove_cluster(board, compute_clusters(board).cluster_at(0, 0))
        self.assertEqual(board.to_rows(), [
            [None, None],
            ['b', None],
        ])

    def test_given_random_boards_when_removing_largest_cluster_then_tiles_conserved_and_columns_full_height(self):
        for seed in range(10):
            board = deal_board(GameConfig(ncolors=3, width=8, height=6), seed=seed)
            for _ in range(6):
                removable = compute_clusters(board).removable()
                if not removable:
                    break
                before = board.count_tiles()
                n = remove_cluster(board, removable[0])
                self.assertEqual(n, len(removable[0]))
                self.assertEqual(board.count_tiles(), before - n)
                self.assertEqual(len(board.columns), board.width)
                for col in board.columns:
                    self.assertEqual(len(col), board.height)
                    # gravity: no tile sits above an empty cell
                    tiles = [c for c in col if c is not None]
                    self.assertEqual(col, [None] * (board.height - len(tiles)) + tiles)
                # compaction: empty columns only at the right edge
                empties = [board.is_column_empty(x) for x in range(board.width)]
                self.assertEqual(empties, sorted(empties))

    def test_given_invalid_cluster_when_removing_then_invalid_cluster_raised(self):
        cases = [
            [],
            [(0, 0), (5, 0)],          # off board
            [(0, 0), (1, 0)],          # mixed colors
            [(2, 0), (2, 1)],          # empty cells
            [(0, 0), (0, 0)],          # duplicate
        ]
        for positions in cases:
            board = mk_board([
                ['r', 'b', None],
                ['r', 'b', None],
            ])
            with self.subTest(positions=positions):
                with self.assertRaises(InvalidCluster):
                    remove_cluster(board, positions)
                # nothing changed
                self.assertEqual(board.to_rows(), [['r', 'b', None], ['r', 'b', None]])


if __name__ == '__main__':
    unittest.main(verbosity=2)
