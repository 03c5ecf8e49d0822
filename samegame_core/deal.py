from __future__ import annotations

import random
from typing import Optional, Sequence

from .board import Board, Color
from .config import GameConfig
from .errors import InvalidConfiguration


def random_board(width: int, height: int, colors: Sequence[Color], rng: Optional[random.Random] = None) -> Board:
    """Fills a width x height board with colors drawn uniformly from `colors`."""
    if width <= 0 or height <= 0:
        raise InvalidConfiguration(f"board must be at least 1x1, got {width}x{height}")
    if not colors:
        raise InvalidConfiguration("need at least one color")
    rng = rng or random.Random()
    columns = [[rng.choice(colors) for _ in range(height)] for _ in range(width)]
    return Board(width=width, height=height, columns=columns)


def deal_board(config: GameConfig, seed: Optional[int] = None) -> Board:
    """Deals a fresh random board for `config` using the first `ncolors` palette entries."""
    rng = random.Random(seed)
    return random_board(config.width, config.height, config.colors, rng)
