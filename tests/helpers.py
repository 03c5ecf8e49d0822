from game import Board, GameConfig


def mk_board(rows):
    """Row-major board, top row first; None marks an empty cell."""
    h = len(rows)
    w = len(rows[0])
    for r in rows:
        assert len(r) == w
    return Board.from_rows(rows)


def mk_config(board, palette=('r', 'b', 'g', 'y')):
    return GameConfig(ncolors=len(palette), width=board.width, height=board.height, palette=palette)


def has_adjacent_pair(board):
    """Brute-force check for two 4-adjacent tiles of the same color."""
    for x in range(board.width):
        for y in range(board.height):
            c = board.get(x, y)
            if c is None:
                continue
            if x + 1 < board.width and board.get(x + 1, y) == c:
                return True
            if y + 1 < board.height and board.get(x, y + 1) == c:
                return True
    return False
