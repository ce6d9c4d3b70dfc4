from __future__ import annotations

import logging
import os
import random
import threading
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from game import Board, Direction, Game, GameState, Settings, move_available, push

logger = logging.getLogger(__name__)

SETTINGS = Settings.from_env()

app = Flask(__name__)

# One game per server process; handlers take the lock so commands run one at a time.
_lock = threading.Lock()
_game = Game(
    random_tiles=SETTINGS.random_tiles,
    rng=random.Random(SETTINGS.seed),
    save_path=SETTINGS.save_file,
)


def board_to_json(b: Board) -> Dict[str, Any]:
    return {"rows": b.rows()}


def _tile(v: Any) -> int:
    # bool is an int subclass
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"tile must be an integer, got {v!r}")
    return v


def board_from_json(obj: Dict[str, Any]) -> Board:
    return Board.from_rows([[_tile(v) for v in row] for row in obj["rows"]])


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {"board": board_to_json(s.board), "score": int(s.score)}


def json_to_state(obj: Dict[str, Any]) -> GameState:
    board = board_from_json(obj["board"])
    if not board.is_valid():
        raise ValueError("board holds a tile that is not a power of two")
    score = obj.get("score", 0)
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"score must be an integer, got {score!r}")
    if score < 0:
        raise ValueError("score must be non-negative")
    return GameState(board=board, score=score)


def get_game() -> Game:
    return _game


def _json_body() -> Optional[Dict[str, Any]]:
    """The request's JSON object, {} when there is no body, None when it is not an object."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _bad_body() -> Any:
    return jsonify({"ok": False, "error": "request body must be a JSON object"}), 400


def _reply(game: Game, ok: bool = True, **extra: Any) -> Any:
    body: Dict[str, Any] = {"ok": ok, "state": game.snapshot()}
    body.update(extra)
    return jsonify(body)


@app.get("/api/state")
def api_state() -> Any:
    with _lock:
        return _reply(get_game())


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    random_tiles = body.get("random", None)
    with _lock:
        game = get_game()
        game.new_game(None if random_tiles is None else bool(random_tiles))
        return _reply(game)


@app.post("/api/move")
def api_move() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    try:
        direction = Direction.parse(body.get("direction", ""))
    except ValueError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    with _lock:
        game = get_game()
        moved = game.move(direction)
        return _reply(game, moved=moved)


@app.post("/api/undo")
def api_undo() -> Any:
    with _lock:
        game = get_game()
        return _reply(game, ok=game.undo())


@app.post("/api/save")
def api_save() -> Any:
    with _lock:
        game = get_game()
        return _reply(game, ok=game.save())


@app.post("/api/load")
def api_load() -> Any:
    with _lock:
        game = get_game()
        return _reply(game, ok=game.load())


@app.post("/api/mode")
def api_mode() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    if "random" not in body:
        return jsonify({"ok": False, "error": "random required"}), 400
    with _lock:
        game = get_game()
        game.set_random_tiles(bool(body["random"]))
        return _reply(game)


@app.post("/api/preview")
def api_preview() -> Any:
    """Pushes a client-supplied state without spawning; nothing on the server changes."""
    body = _json_body()
    if body is None:
        return _bad_body()
    try:
        state = json_to_state(body["state"])
        direction = Direction.parse(body.get("direction", ""))
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad request: {e}"}), 400
    changed = push(state, direction)
    return jsonify({
        "ok": True,
        "changed": changed,
        "state": state_to_json(state),
        "moveAvailable": move_available(state.board),
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG if SETTINGS.debug else logging.INFO)
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    logger.info("serving nc2048 on port %d (save file %s)", port, SETTINGS.save_file)
    app.run(host="0.0.0.0", port=port, debug=debug)
