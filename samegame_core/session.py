from __future__ import annotations

import enum
import logging
from typing import List, Optional, Tuple

from .board import Board, Color, Coord
from .clusters import Cluster, ClusterMap, compute_clusters, is_removable
from .collapse import remove_cluster
from .config import GameConfig
from .deal import deal_board
from .errors import InvalidConfiguration, OutOfBounds
from .scoring import Score, ScoreTracker, cluster_points

log = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    PLAYING = "playing"
    TERMINAL = "terminal"


class GameSession:
    """One game: board, score, the current preview, and the move/termination rules.

    Callers only interact through preview_at / clear_preview / select_at and the
    read-only accessors; the board is never mutated from outside.
    """

    def __init__(self, config: Optional[GameConfig] = None, board: Optional[Board] = None,
                 seed: Optional[int] = None, score: int = 0) -> None:
        self.config = config or GameConfig()
        if board is None:
            board = deal_board(self.config, seed=seed)
        elif (board.width, board.height) != (self.config.width, self.config.height):
            raise InvalidConfiguration(
                f"board is {board.width}x{board.height} but config says {self.config.width}x{self.config.height}"
            )
        self.board = board
        self.tracker = ScoreTracker(cells_remaining=board.count_tiles(), score=score)
        self.preview: Cluster = ()
        self.moves = 0
        self._clusters: Optional[ClusterMap] = None
        self.status = GameStatus.PLAYING
        self._update_status()

    @classmethod
    def restore(cls, config: GameConfig, board: Board, score: int = 0) -> "GameSession":
        """Rebuilds a session from a board snapshot and the score earned so far."""
        return cls(config=config, board=board, score=score)

    # ----- derived state -----

    @property
    def clusters(self) -> ClusterMap:
        if self._clusters is None:
            self._clusters = compute_clusters(self.board)
        return self._clusters

    @property
    def cells_remaining(self) -> int:
        return self.tracker.cells_remaining

    @property
    def preview_points(self) -> int:
        return cluster_points(len(self.preview))

    def _update_status(self) -> None:
        if self.clusters.has_removable():
            self.status = GameStatus.PLAYING
        else:
            self.status = GameStatus.TERMINAL

    def _cluster_at(self, x: int, y: int) -> Cluster:
        try:
            return self.clusters.cluster_at(x, y)
        except OutOfBounds:
            log.debug("ignoring out-of-bounds cell (%d, %d)", x, y)
            return ()

    # ----- caller-facing operations -----

    def preview_at(self, x: int, y: int) -> int:
        """Highlights the removable cluster under (x, y); returns its size, 0 if none."""
        cluster = self._cluster_at(x, y)
        self.preview = cluster if is_removable(cluster) else ()
        return len(self.preview)

    def clear_preview(self) -> None:
        self.preview = ()

    def select_at(self, x: int, y: int) -> int:
        """Removes the cluster under (x, y) if it is removable; returns the number of tiles removed."""
        cluster = self._cluster_at(x, y)
        if not is_removable(cluster):
            return 0
        removed = remove_cluster(self.board, cluster)
        points = self.tracker.record_removal(removed)
        self.moves += 1
        self._clusters = None
        log.debug("move %d: removed %d tiles at (%d, %d) for %d points", self.moves, removed, x, y, points)

        self.clear_preview()
        self.preview_at(x, y)
        self._update_status()
        if self.status is GameStatus.TERMINAL:
            s = self.tracker.snapshot()
            log.info("game over after %d moves: %d tiles left, total score %d",
                     self.moves, self.cells_remaining, s.score_total)
        return removed

    def is_terminal(self) -> bool:
        return self.status is GameStatus.TERMINAL

    def snapshot(self) -> Tuple[Tuple[Color, ...], ...]:
        return self.board.snapshot()

    def get_score(self) -> Score:
        return self.tracker.snapshot()

    def legal_moves(self) -> List[Coord]:
        """One representative cell (the top-left-most) per removable cluster, sorted."""
        return sorted(min(c, key=lambda p: (p[1], p[0])) for c in self.clusters.removable())
