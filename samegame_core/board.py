from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from .errors import InvalidConfiguration, OutOfBounds

Color = Optional[str]  # palette entry, or EMPTY
Coord = Tuple[int, int]  # (x, y): column, row; (0, 0) is top-left

EMPTY: Color = None


@dataclass
class Board:
    """Mutable grid of colored cells, stored column-major as columns[x][y].

    Row 0 is the top. Every column always holds exactly `height` cells; removal
    and compaction only change the values inside them.
    """
    width: int
    height: int
    columns: List[List[Color]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration(f"board must be at least 1x1, got {self.width}x{self.height}")
        if not self.columns:
            self.columns = [[EMPTY] * self.height for _ in range(self.width)]
        if len(self.columns) != self.width or any(len(col) != self.height for col in self.columns):
            raise InvalidConfiguration("column data does not match board dimensions")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Color]]) -> "Board":
        """Build a board from row-major data, top row first."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(r) != width for r in rows):
            raise InvalidConfiguration("rows must all have the same length")
        columns = [[rows[y][x] for y in range(height)] for x in range(width)]
        return cls(width=width, height=height, columns=columns)

    def to_rows(self) -> List[List[Color]]:
        return [[self.columns[x][y] for x in range(self.width)] for y in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> Color:
        self._check(x, y)
        return self.columns[x][y]

    def set(self, x: int, y: int, color: Color) -> None:
        self._check(x, y)
        self.columns[x][y] = color

    def column(self, x: int) -> List[Color]:
        if not 0 <= x < self.width:
            raise OutOfBounds(x, 0, self.width, self.height)
        return self.columns[x]

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def is_column_empty(self, x: int) -> bool:
        return all(c is EMPTY for c in self.column(x))

    def count_tiles(self) -> int:
        return sum(1 for col in self.columns for c in col if c is not EMPTY)

    def is_empty(self) -> bool:
        return self.count_tiles() == 0

    def copy(self) -> "Board":
        return Board(self.width, self.height, [list(col) for col in self.columns])

    def snapshot(self) -> Tuple[Tuple[Color, ...], ...]:
        """Immutable column-major copy of the cell values."""
        return tuple(tuple(col) for col in self.columns)

    def pretty(
        self,
        highlight: Optional[Iterable[Coord]] = None,
        symbols: Optional[Dict[str, str]] = None,
    ) -> str:
        """Text rendering of the grid.

        Each color is drawn with its entry in `symbols` (or its first letter),
        empty cells as '.', and highlighted cells upper-cased.
        """
        marked: Set[Coord] = set(highlight or ())
        sym = symbols or {}
        lines: List[str] = []
        for y in range(self.height):
            row: List[str] = []
            for x in range(self.width):
                color = self.columns[x][y]
                if color is EMPTY:
                    row.append(".")
                    continue
                ch = (sym.get(color) or str(color)[0]).lower()
                row.append(ch.upper() if (x, y) in marked else ch)
            lines.append(" ".join(row))
        return "\n".join(lines)
