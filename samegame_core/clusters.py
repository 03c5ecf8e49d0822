from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .board import EMPTY, Board, Coord
from .errors import OutOfBounds

MIN_CLUSTER_SIZE = 2  # smaller clusters cannot be removed
NO_CLUSTER = -1

Cluster = Tuple[Coord, ...]


@dataclass(frozen=True)
class ClusterMap:
    """Partition of a board's tiles into maximal same-color groups.

    `ids[x][y]` is the cluster id of each cell (NO_CLUSTER for empty cells)
    and `members[id]` lists that cluster's positions in discovery order.
    """
    width: int
    height: int
    ids: Tuple[Tuple[int, ...], ...]
    members: Tuple[Cluster, ...]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(x, y, self.width, self.height)

    def cluster_id(self, x: int, y: int) -> int:
        self._check(x, y)
        return self.ids[x][y]

    def cluster_at(self, x: int, y: int) -> Cluster:
        cid = self.cluster_id(x, y)
        if cid == NO_CLUSTER:
            return ()
        return self.members[cid]

    def size_at(self, x: int, y: int) -> int:
        return len(self.cluster_at(x, y))

    def clusters(self) -> Tuple[Cluster, ...]:
        return self.members

    def removable(self) -> List[Cluster]:
        """Clusters of at least MIN_CLUSTER_SIZE cells, largest first."""
        found = [m for m in self.members if len(m) >= MIN_CLUSTER_SIZE]
        found.sort(key=lambda m: (-len(m), min(m)))
        return found

    def has_removable(self) -> bool:
        return any(len(m) >= MIN_CLUSTER_SIZE for m in self.members)


def compute_clusters(board: Board) -> ClusterMap:
    """Flood-fills every unassigned tile, row by row, to label its cluster.

    Uses an explicit stack so large boards never hit the recursion limit.
    """
    w, h = board.width, board.height
    ids: List[List[int]] = [[NO_CLUSTER] * h for _ in range(w)]
    members: List[Cluster] = []

    for (x, y) in board.coords():
        color = board.columns[x][y]
        if color is EMPTY or ids[x][y] != NO_CLUSTER:
            continue
        cid = len(members)
        found: List[Coord] = []
        to_visit: List[Coord] = [(x, y)]
        while to_visit:
            ox, oy = to_visit.pop()
            if not (0 <= ox < w and 0 <= oy < h):
                continue
            if ids[ox][oy] != NO_CLUSTER or board.columns[ox][oy] != color:
                continue
            ids[ox][oy] = cid
            found.append((ox, oy))
            to_visit.extend(((ox - 1, oy), (ox + 1, oy), (ox, oy - 1), (ox, oy + 1)))
        members.append(tuple(found))

    return ClusterMap(
        width=w,
        height=h,
        ids=tuple(tuple(col) for col in ids),
        members=tuple(members),
    )


def is_removable(cluster: Cluster) -> bool:
    return len(cluster) >= MIN_CLUSTER_SIZE
