from __future__ import annotations

from dataclasses import dataclass

BONUS_THRESHOLD = 50  # bonus starts once fewer tiles than this remain
BONUS_PER_TILE = 100


def cluster_points(ntiles: int) -> int:
    """Points for removing (or previewing) a cluster of ntiles: ntiles ** 2."""
    return ntiles * ntiles


def tiles_left_bonus(cells_remaining: int) -> int:
    return max((BONUS_THRESHOLD - cells_remaining) * BONUS_PER_TILE, 0)


@dataclass(frozen=True)
class Score:
    score: int
    score_left: int
    score_total: int


class ScoreTracker:
    """Running score for one game.

    `score` only ever grows; the tiles-left bonus is recomputed from the
    current tile count rather than accumulated.
    """

    def __init__(self, cells_remaining: int, score: int = 0) -> None:
        if cells_remaining < 0 or score < 0:
            raise ValueError("score and cell count must be non-negative")
        self.score = score
        self.cells_remaining = cells_remaining

    def record_removal(self, ntiles: int) -> int:
        """Books a removed cluster and returns the points it earned."""
        if ntiles > self.cells_remaining:
            raise ValueError(f"cannot remove {ntiles} tiles, only {self.cells_remaining} left")
        points = cluster_points(ntiles)
        self.score += points
        self.cells_remaining -= ntiles
        return points

    @property
    def score_left(self) -> int:
        return tiles_left_bonus(self.cells_remaining)

    @property
    def score_total(self) -> int:
        return self.score + self.score_left

    def snapshot(self) -> Score:
        return Score(score=self.score, score_left=self.score_left, score_total=self.score_total)
