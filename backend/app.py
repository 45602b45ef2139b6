import os
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from domain.errors import MalformedSnapshotError
from domain.game_state import GameState
from players.variant_registry import get_player_class

load_dotenv()

API_VERSION = "1"
VERSION = "0.1.0"

app = Flask(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

# Board viewers running in a browser call the snake directly
# Allowed origins can be configured via CORS_ALLOWED_ORIGINS env var (comma-separated)
allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
if allowed_origins_env:
    allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
else:
    # sensible defaults for local dev
    allowed_origins = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

CORS(app, resources={r"/*": {"origins": allowed_origins}})

app.config["SNAKE_PLAYER"] = get_player_class(os.getenv("SNAKE_VARIANT"))()


def _player():
    return app.config["SNAKE_PLAYER"]


def _read_game_state() -> GameState:
    payload = request.get_json(silent=True)
    if payload is None:
        raise MalformedSnapshotError("Request body is not valid JSON")
    return GameState.from_request(payload)


def _malformed(route: str, error: MalformedSnapshotError):
    logger.warning(f"{route} rejected malformed snapshot: {error}")
    return jsonify({"error": f"Malformed snapshot: {error}"}), 400


@app.route("/", methods=["GET"])
def index():
    """
    Battlesnake capability and appearance descriptor.
    """
    return jsonify({
        "apiversion": API_VERSION,
        "author": os.getenv("SNAKE_AUTHOR", ""),
        "color": os.getenv("SNAKE_COLOR", "#FF0000"),
        "head": os.getenv("SNAKE_HEAD", "ski"),
        "tail": os.getenv("SNAKE_TAIL", "weight"),
        "version": VERSION,
    })


@app.route("/start", methods=["POST"])
def start():
    try:
        game_state = _read_game_state()
        logger.info(f"START game={game_state.game_id} {game_state!r}")
        return jsonify(_player().start(game_state))

    except MalformedSnapshotError as error:
        return _malformed("/start", error)
    except Exception:
        logger.exception("Error handling /start")
        return jsonify({"error": "Failed to start game"}), 500


@app.route("/move", methods=["POST"])
def move():
    """
    Decide this turn's move.

    Returns:
    - {"move": "up" | "down" | "left" | "right"}
    """
    try:
        game_state = _read_game_state()
        logger.debug(f"/move called with:\n{game_state.print_board()}")

        direction = _player().get_move(game_state)

        logger.info(f"MOVE {direction.value} game={game_state.game_id} turn={game_state.turn}")
        return jsonify({"move": direction.value})

    except MalformedSnapshotError as error:
        return _malformed("/move", error)
    except Exception:
        logger.exception("Error handling /move")
        return jsonify({"error": "Failed to decide move"}), 500


@app.route("/end", methods=["POST"])
def end():
    try:
        game_state = _read_game_state()
        logger.info(f"END game={game_state.game_id} turn={game_state.turn}")
        return jsonify(_player().end(game_state))

    except MalformedSnapshotError as error:
        return _malformed("/end", error)
    except Exception:
        logger.exception("Error handling /end")
        return jsonify({"error": "Failed to end game"}), 500


if __name__ == "__main__":
    app.run(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        debug=bool(os.getenv("FLASK_DEBUG")),
    )
