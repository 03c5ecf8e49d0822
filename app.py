from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from the repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    DEFAULT_COLORS,
    DEFAULT_PALETTE,
    Board,
    GameConfig,
    GameSession,
    InvalidConfiguration,
    deal_board,
)
from samegame_core.log import setup_logger  # noqa: E402

log = logging.getLogger("samegame_core.app")

app = Flask(__name__)


class BadPayload(ValueError):
    """Malformed request body; reported to the client as a 400."""


# ---------- JSON helpers ----------

def board_to_json(b: Board) -> Dict[str, Any]:
    return {"width": int(b.width), "height": int(b.height), "columns": [list(col) for col in b.columns]}


def board_from_json(obj: Dict[str, Any]) -> Board:
    width = int(obj["width"])
    height = int(obj["height"])
    columns = [[None if c is None else str(c) for c in col] for col in obj["columns"]]
    if len(columns) != width:
        raise InvalidConfiguration(f"expected {width} columns, got {len(columns)}")
    return Board(width=width, height=height, columns=columns)


def state_to_json(s: GameSession) -> Dict[str, Any]:
    return {
        "board": board_to_json(s.board),
        "ncolors": int(s.config.ncolors),
        "palette": list(s.config.palette),
        "score": int(s.tracker.score),
    }


def json_to_state(obj: Dict[str, Any]) -> GameSession:
    board = board_from_json(obj["board"])
    palette = obj.get("palette")
    config = GameConfig(
        ncolors=int(obj.get("ncolors", DEFAULT_COLORS)),
        width=board.width,
        height=board.height,
        palette=tuple(str(p) for p in palette) if palette else DEFAULT_PALETTE,
    )
    unknown = {c for col in board.columns for c in col if c is not None} - set(config.palette)
    if unknown:
        raise InvalidConfiguration(f"board uses colors outside the palette: {sorted(unknown)}")
    return GameSession.restore(config, board, score=int(obj.get("score", 0)))


def score_to_json(s: GameSession) -> Dict[str, int]:
    sc = s.get_score()
    return {"score": sc.score, "scoreLeft": sc.score_left, "scoreTotal": sc.score_total}


def _coords_json(cells) -> List[List[int]]:
    return [[int(x), int(y)] for (x, y) in cells]


def _read_state(body: Dict[str, Any]) -> GameSession:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise BadPayload("state required")
    try:
        return json_to_state(s_in)
    except InvalidConfiguration:
        raise
    except (KeyError, TypeError, ValueError) as e:
        raise BadPayload(f"bad state: {e}")


def _read_cell(body: Dict[str, Any]) -> Tuple[int, int]:
    try:
        return int(body["x"]), int(body["y"])
    except (KeyError, TypeError, ValueError):
        raise BadPayload("x and y must be integers")


def _session_payload(session: GameSession) -> Dict[str, Any]:
    return {
        "state": state_to_json(session),
        "score": score_to_json(session),
        "legalMoves": _coords_json(session.legal_moves()),
        "terminal": session.is_terminal(),
    }


@app.errorhandler(BadPayload)
def _bad_request(e: BadPayload) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


@app.errorhandler(InvalidConfiguration)
def _bad_config(e: InvalidConfiguration) -> Any:
    return jsonify({"ok": False, "error": str(e)}), 400


# ---------- Game API ----------

@app.get("/api/config")
def api_config() -> Any:
    config = GameConfig.from_env()
    return jsonify({
        "ok": True,
        "ncolors": config.ncolors,
        "width": config.width,
        "height": config.height,
        "palette": list(config.palette),
    })


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    defaults = GameConfig.from_env()
    try:
        config = GameConfig(
            ncolors=int(body.get("ncolors", defaults.ncolors)),
            width=int(body.get("width", defaults.width)),
            height=int(body.get("height", defaults.height)),
            palette=tuple(str(p) for p in body.get("palette", defaults.palette)),
        )
        seed = body.get("seed", None)
        seed = int(seed) if seed is not None else None
    except InvalidConfiguration:
        raise
    except (TypeError, ValueError) as e:
        raise BadPayload(f"bad configuration: {e}")
    session = GameSession(config, board=deal_board(config, seed=seed))
    log.debug("new %dx%d game with %d colors (seed=%s)", config.width, config.height, config.ncolors, seed)
    return jsonify({"ok": True, **_session_payload(session)})


@app.post("/api/legal")
def api_legal() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    session = _read_state(body)
    return jsonify({
        "ok": True,
        "legalMoves": _coords_json(session.legal_moves()),
        "terminal": session.is_terminal(),
    })


@app.post("/api/preview")
def api_preview() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    session = _read_state(body)
    x, y = _read_cell(body)
    size = session.preview_at(x, y)
    return jsonify({
        "ok": True,
        "previewSize": size,
        "previewPoints": session.preview_points,
        "cluster": _coords_json(session.preview),
    })


@app.post("/api/select")
def api_select() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    session = _read_state(body)
    x, y = _read_cell(body)
    removed = session.select_at(x, y)
    return jsonify({
        "ok": True,
        "removed": removed,
        "preview": _coords_json(session.preview),
        **_session_payload(session),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    setup_logger()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=debug)
