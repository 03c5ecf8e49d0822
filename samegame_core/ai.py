from __future__ import annotations

from typing import Optional

from .board import Coord
from .session import GameSession


def greedy_pick_move(session: GameSession) -> Optional[Coord]:
    """Picks a cell in the largest removable cluster (ties go to the top-left-most), or None when stuck."""
    removable = session.clusters.removable()
    if not removable:
        return None
    return min(removable[0], key=lambda p: (p[1], p[0]))


def play_greedy(session: GameSession, max_moves: Optional[int] = None) -> int:
    """Plays greedy moves until the game ends (or max_moves); returns how many were made."""
    made = 0
    while not session.is_terminal():
        if max_moves is not None and made >= max_moves:
            break
        move = greedy_pick_move(session)
        if move is None:
            break
        session.select_at(*move)
        made += 1
    return made
