from __future__ import annotations

from typing import Dict, Iterable, List, Set

from .board import EMPTY, Board, Color, Coord
from .errors import InvalidCluster


def _validate(board: Board, positions: List[Coord]) -> None:
    if not positions:
        raise InvalidCluster("cannot remove an empty cluster")
    if len(set(positions)) != len(positions):
        raise InvalidCluster("cluster lists a position more than once")
    colors: Set[Color] = set()
    for (x, y) in positions:
        if not board.in_bounds(x, y):
            raise InvalidCluster(f"cluster position ({x}, {y}) is off the board")
        colors.add(board.columns[x][y])
    if EMPTY in colors:
        raise InvalidCluster("cluster includes an empty cell")
    if len(colors) != 1:
        raise InvalidCluster(f"cluster mixes colors: {sorted(colors)}")


def apply_gravity(board: Board, x: int, rows: Iterable[int]) -> None:
    """Deletes `rows` from column x and refills it with empties from the top."""
    col = board.columns[x]
    # Bottom-up so earlier deletions don't shift the indices still to delete
    for y in sorted(rows, reverse=True):
        del col[y]
    while len(col) < board.height:
        col.insert(0, EMPTY)


def compact_column(board: Board, x: int) -> None:
    """Slides every column right of x one step left; the rightmost becomes empty."""
    for mx in range(x, board.width - 1):
        board.columns[mx] = board.columns[mx + 1]
    board.columns[board.width - 1] = [EMPTY] * board.height


def remove_cluster(board: Board, positions: Iterable[Coord]) -> int:
    """Removes a cluster in place, letting tiles fall and closing emptied columns.

    Columns are processed right to left so a compaction never moves a column
    that still has to be processed. Returns the number of removed tiles.
    """
    cells = list(positions)
    _validate(board, cells)

    by_column: Dict[int, List[int]] = {}
    for (x, y) in cells:
        by_column.setdefault(x, []).append(y)

    for x in sorted(by_column, reverse=True):
        apply_gravity(board, x, by_column[x])
        if board.is_column_empty(x):
            compact_column(board, x)
    return len(cells)
