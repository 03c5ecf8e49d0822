"""
SameGame core Python package.

Pure game logic, kept free of any presentation layer so it can be driven by
the Flask API, the terminal CLI, or tests.
Modules:
- board.py: Board, Color, Coord, EMPTY
- clusters.py: cluster detection (ClusterMap, compute_clusters)
- collapse.py: cluster removal, gravity and column compaction
- scoring.py: Score, ScoreTracker
- session.py: GameSession, GameStatus
- deal.py, config.py, errors.py, ai.py, cli.py, log.py
"""
