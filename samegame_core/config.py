from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidConfiguration

DEFAULT_PALETTE: Tuple[str, ...] = ("green", "blue", "red", "orange", "brown", "pink")
DEFAULT_COLORS = 4
DEFAULT_WIDTH = 16
DEFAULT_HEIGHT = 12


@dataclass(frozen=True)
class GameConfig:
    """Static setup of a game: color count, grid dimensions and palette."""
    ncolors: int = DEFAULT_COLORS
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    palette: Tuple[str, ...] = DEFAULT_PALETTE

    def __post_init__(self) -> None:
        # Accept any sequence for the palette but store a tuple
        object.__setattr__(self, "palette", tuple(self.palette))
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration(f"board must be at least 1x1, got {self.width}x{self.height}")
        if self.ncolors <= 0:
            raise InvalidConfiguration(f"need at least one color, got {self.ncolors}")
        if len(self.palette) < self.ncolors:
            raise InvalidConfiguration(
                f"palette has {len(self.palette)} colors but {self.ncolors} were requested"
            )
        if any(not c for c in self.palette):
            raise InvalidConfiguration("palette entries must be non-empty")
        if len(set(self.palette)) != len(self.palette):
            raise InvalidConfiguration("palette entries must be distinct")

    @property
    def colors(self) -> Tuple[str, ...]:
        """The palette entries actually dealt onto the board."""
        return self.palette[: self.ncolors]

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @classmethod
    def from_env(cls, prefix: str = "SAMEGAME_") -> "GameConfig":
        """Build a config from SAMEGAME_COLORS / _WIDTH / _HEIGHT / _PALETTE, falling back to defaults."""

        def _int(name: str, default: int) -> int:
            raw = os.getenv(prefix + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise InvalidConfiguration(f"{prefix}{name} must be an integer, got {raw!r}")

        raw_palette: Optional[str] = os.getenv(prefix + "PALETTE")
        palette = DEFAULT_PALETTE
        if raw_palette:
            palette = tuple(p.strip() for p in raw_palette.split(",") if p.strip())
        return cls(
            ncolors=_int("COLORS", DEFAULT_COLORS),
            width=_int("WIDTH", DEFAULT_WIDTH),
            height=_int("HEIGHT", DEFAULT_HEIGHT),
            palette=palette,
        )


def debug_enabled() -> bool:
    return os.getenv("SAMEGAME_DEBUG", "0").lower() in ("1", "true", "yes", "on")
