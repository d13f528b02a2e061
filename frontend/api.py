# frontend/api.py

import logging
from flask import Blueprint, current_app, request, jsonify

from backend.errors import InvalidConfigurationError
from backend.game import GameSession
from backend.utils import encode_visible_state

logger = logging.getLogger(__name__)

api_blueprint = Blueprint("api", __name__)

SESSION_KEY = "minesweeper_session"


def get_session() -> GameSession:
    return current_app.extensions[SESSION_KEY]


def _error(message, status=400):
    logger.debug("Rejected request: %s", message)
    return jsonify({"error": message}), status


def _int_field(data, key, default):
    value = data.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{key} must be a whole number, got {value!r}")
    return value


@api_blueprint.route("/new_game", methods=["POST"])
def new_game():
    data = request.get_json(silent=True) or {}
    current = get_session()
    config = current_app.config["GAME_CONFIG"]

    try:
        session = GameSession(
            rows=_int_field(data, "rows", config.rows),
            cols=_int_field(data, "cols", config.cols),
            num_mines=_int_field(data, "num_mines", config.num_mines),
            seed=config.seed,
            leaderboard=current.leaderboard,
            default_player_name=config.default_player_name,
        )
    except (InvalidConfigurationError, TypeError, ValueError, OverflowError) as exc:
        return _error(str(exc))

    name = data.get("player_name", "")
    if name is not None and not isinstance(name, str):
        return _error("player_name must be a string")
    session.set_player_name(name)
    current_app.extensions[SESSION_KEY] = session
    return jsonify(session.get_state())


@api_blueprint.route("/step", methods=["POST"])
def step():
    data = request.get_json(silent=True) or {}
    action = data.get("action")
    row = data.get("row")
    col = data.get("col")

    if action not in {"reveal", "flag"} or row is None or col is None:
        return _error("Invalid input")

    return jsonify(get_session().step(action, row, col))


@api_blueprint.route("/restart", methods=["POST"])
def restart():
    session = get_session()
    session.restart()
    return jsonify(session.get_state())


@api_blueprint.route("/tick", methods=["POST"])
def tick():
    session = get_session()
    session.tick()
    return jsonify({"elapsed_seconds": session.elapsed_seconds, "game_over": session.game_over})


@api_blueprint.route("/player", methods=["POST"])
def set_player():
    data = request.get_json(silent=True) or {}
    name = data.get("player_name")
    if name is not None and not isinstance(name, str):
        return _error("player_name must be a string")

    session = get_session()
    session.set_player_name(name)
    return jsonify({"player_name": session.player_name})


@api_blueprint.route("/state", methods=["GET"])
def get_state():
    session = get_session()
    state = session.get_state()
    if request.args.get("encoded"):
        state["encoded_board"] = encode_visible_state(state["board"]).tolist()
    return jsonify(state)


@api_blueprint.route("/leaderboard", methods=["GET"])
def leaderboard():
    board = get_session().leaderboard
    best = board.best()
    return jsonify({
        "entries": [entry.to_dict() for entry in board],
        "best": best.to_dict() if best else None,
        "summary": board.summarize(),
        "text": board.format_stats(),
    })
