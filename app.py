from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import (
    Direction,
    GameSession,
    SessionState,
    Tile,
    legal_directions,
    parse_direction,
)
from tilemerge_core.config import configure_logging, env_seed

logger = logging.getLogger(__name__)

app = Flask(__name__)

# One in-process session; the engine is single-threaded and owned by this app.
_session: Optional[GameSession] = None


def get_session() -> GameSession:
    global _session
    if _session is None:
        _session = GameSession(seed=env_seed())
    return _session


def reset_session(seed: Optional[int] = None) -> GameSession:
    global _session
    _session = GameSession(seed=seed if seed is not None else env_seed())
    return _session


def tile_to_json(t: Tile) -> Dict[str, Any]:
    return {
        "id": int(t.id),
        "value": int(t.value),
        "row": int(t.row),
        "col": int(t.col),
        "justCreated": bool(t.just_created),
        "justMerged": bool(t.just_merged),
    }


def state_to_json(s: SessionState) -> Dict[str, Any]:
    return {
        "tiles": [tile_to_json(t) for t in s.tiles],
        "score": int(s.score),
        "isTerminal": bool(s.is_terminal),
    }


def _json_object() -> Optional[Dict[str, Any]]:
    """Request body as a dict; a missing body counts as empty, any other JSON type is None."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _payload(s: SessionState) -> Dict[str, Any]:
    moves = [] if s.is_terminal else [d.value for d in legal_directions(s.tiles)]
    return {"ok": True, "state": state_to_json(s), "legalMoves": moves}


@app.get("/api/state")
def api_state() -> Any:
    return jsonify(_payload(get_session().state))


@app.post("/api/new")
def api_new() -> Any:
    body = _json_object()
    if body is None:
        return jsonify({"ok": False, "error": "request body must be a JSON object"}), 400
    seed = body.get("seed", None)
    if seed is not None:
        try:
            seed = int(seed)
        except (TypeError, ValueError):
            return jsonify({"ok": False, "error": "seed must be an integer"}), 400
        session = reset_session(seed)
    else:
        session = get_session()
    state = session.start_game()
    return jsonify(_payload(state))


@app.post("/api/move")
def api_move() -> Any:
    body = _json_object()
    if body is None:
        return jsonify({"ok": False, "error": "request body must be a JSON object"}), 400
    raw = body.get("direction")
    try:
        direction: Direction = parse_direction(raw)
    except ValueError:
        logger.debug("rejected move request with direction %r", raw)
        return jsonify({"ok": False, "error": f"Unknown direction: {raw!r}"}), 400
    session = get_session()
    before = session.state
    after = session.apply_move(direction)
    payload = _payload(after)
    payload["moved"] = after is not before
    return jsonify(payload)


if __name__ == "__main__":
    configure_logging()
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
