from __future__ import annotations


class SameGameError(Exception):
    """Base class for all game errors."""


class OutOfBounds(SameGameError, IndexError):
    """Raised when a coordinate falls outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside the {width}x{height} board")
        self.x = x
        self.y = y


class InvalidCluster(SameGameError, RuntimeError):
    """Raised when the collapse engine is handed something that is not a cluster."""


class InvalidConfiguration(SameGameError, ValueError):
    """Raised when a game is configured with bad dimensions, color count or palette."""
