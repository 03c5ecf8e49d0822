from __future__ import annotations

# Facade module that re-exports the SameGame core API.
# The Flask app, the CLI entry point and the tests import from here;
# single-responsibility modules live under samegame_core/*.

try:
    from .samegame_core.board import Board, Color, Coord, EMPTY  # type: ignore
    from .samegame_core.clusters import (  # type: ignore
        MIN_CLUSTER_SIZE,
        NO_CLUSTER,
        Cluster,
        ClusterMap,
        compute_clusters,
        is_removable,
    )
    from .samegame_core.collapse import apply_gravity, compact_column, remove_cluster  # type: ignore
    from .samegame_core.config import DEFAULT_COLORS, DEFAULT_PALETTE, GameConfig  # type: ignore
    from .samegame_core.deal import deal_board, random_board  # type: ignore
    from .samegame_core.errors import (  # type: ignore
        InvalidCluster,
        InvalidConfiguration,
        OutOfBounds,
        SameGameError,
    )
    from .samegame_core.scoring import Score, ScoreTracker, cluster_points, tiles_left_bonus  # type: ignore
    from .samegame_core.session import GameSession, GameStatus  # type: ignore
    from .samegame_core.ai import greedy_pick_move, play_greedy  # type: ignore
except ImportError:
    from samegame_core.board import Board, Color, Coord, EMPTY  # type: ignore
    from samegame_core.clusters import (  # type: ignore
        MIN_CLUSTER_SIZE,
        NO_CLUSTER,
        Cluster,
        ClusterMap,
        compute_clusters,
        is_removable,
    )
    from samegame_core.collapse import apply_gravity, compact_column, remove_cluster  # type: ignore
    from samegame_core.config import DEFAULT_COLORS, DEFAULT_PALETTE, GameConfig  # type: ignore
    from samegame_core.deal import deal_board, random_board  # type: ignore
    from samegame_core.errors import (  # type: ignore
        InvalidCluster,
        InvalidConfiguration,
        OutOfBounds,
        SameGameError,
    )
    from samegame_core.scoring import Score, ScoreTracker, cluster_points, tiles_left_bonus  # type: ignore
    from samegame_core.session import GameSession, GameStatus  # type: ignore
    from samegame_core.ai import greedy_pick_move, play_greedy  # type: ignore


def new_game(ncolors: int = 4, width: int = 16, height: int = 12, palette=DEFAULT_PALETTE,
             seed: int | None = None) -> GameSession:
    """Convenience constructor mirroring the classic SameGame(ncolors, width, height, palette) signature."""
    return GameSession(GameConfig(ncolors=ncolors, width=width, height=height, palette=tuple(palette)), seed=seed)


def main() -> None:
    # CLI driver delegated to samegame_core.cli
    from samegame_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
