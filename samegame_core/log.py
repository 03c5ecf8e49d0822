from __future__ import annotations

import logging
from typing import Optional

from .config import debug_enabled


def setup_logger(name: str = "samegame_core", level: Optional[str] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Level defaults to DEBUG when SAMEGAME_DEBUG is set, INFO otherwise.
    Calling it twice replaces the handler rather than stacking a second one.
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.propagate = False

    if level is None:
        lvl = logging.DEBUG if debug_enabled() else logging.INFO
    else:
        lvl = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(lvl)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger


__all__ = ["setup_logger"]
