from __future__ import annotations

import argparse
from typing import Dict, Optional

from .ai import greedy_pick_move
from .config import DEFAULT_COLORS, DEFAULT_HEIGHT, DEFAULT_PALETTE, DEFAULT_WIDTH, GameConfig
from .errors import InvalidConfiguration
from .log import setup_logger
from .session import GameSession


def _symbols(config: GameConfig) -> Dict[str, str]:
    # Digits keep colors that share a first letter (blue/brown) apart
    return {color: str(i) for i, color in enumerate(config.colors)}


def _show(session: GameSession, symbols: Dict[str, str]) -> None:
    print(session.board.pretty(session.preview, symbols))
    s = session.get_score()
    print(f"score {s.score}  tiles-left bonus {s.score_left}  total {s.score_total}  "
          f"({session.cells_remaining} tiles left)")


def _parse_cell(text: str) -> Optional[tuple]:
    sep = ',' if ',' in text else ' '
    try:
        x_s, y_s = [t for t in text.split(sep) if t != '']
        return (int(x_s), int(y_s))
    except ValueError:
        return None


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description='SameGame: clear the board by removing same-colored clusters')
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Number of columns')
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Number of rows')
    parser.add_argument('--colors', type=int, default=DEFAULT_COLORS, help='Number of colors dealt')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--play', action='store_true', help='Play interactively, entering cells as x,y')
    mode.add_argument('--auto', action='store_true', help='Let the greedy player finish the game')
    args = parser.parse_args(argv)

    setup_logger()
    try:
        config = GameConfig(ncolors=args.colors, width=args.width, height=args.height, palette=DEFAULT_PALETTE)
    except InvalidConfiguration as e:
        parser.error(str(e))
    session = GameSession(config, seed=args.seed)
    symbols = _symbols(config)
    legend = '  '.join(f"{sym}={color}" for color, sym in symbols.items())

    print('Initial board:')
    print(legend)
    _show(session, symbols)

    if args.auto:
        while not session.is_terminal():
            move = greedy_pick_move(session)
            if move is None:
                break
            removed = session.select_at(*move)
            print(f"\nremove {removed} at {move}")
            session.clear_preview()
            _show(session, symbols)
        print('\nNo more moves. Final score:', session.get_score().score_total)
        return

    if not args.play:
        removable = session.clusters.removable()
        print(f"\n{len(removable)} removable clusters", end='')
        if removable:
            print(f", largest has {len(removable[0])} tiles", end='')
        print()
        return

    while not session.is_terminal():
        text = input('\nEnter a cell as x,y (q to quit): ').strip()
        if text.lower() in ('q', 'quit'):
            break
        cell = _parse_cell(text)
        if cell is None:
            print('Could not parse. Try again.')
            continue
        size = session.preview_at(*cell)
        if size == 0:
            print('No removable cluster there.')
            continue
        removed = session.select_at(*cell)
        print(f"Removed {removed} tiles.")
        _show(session, symbols)
    if session.is_terminal():
        print('\nNo more moves.')
    print('Final score:', session.get_score().score_total)


if __name__ == '__main__':
    main()
