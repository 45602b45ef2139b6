"""
GameState entity - a read-only snapshot of one turn's board.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .constants import LOW_HEALTH_THRESHOLD, MAX_HEALTH
from .errors import MalformedSnapshotError
from .snake import Position, Snake


class GameState:
    """
    A snapshot of the board at a specific turn, seen from our snake.

    Attributes:
        width, height: board dimensions
        you: our Snake
        opponents: every other Snake on the board (we are never listed here)
        food: list of (x, y) food positions, in feed order
        hazards: list of (x, y) hazard positions
        turn: turn number reported by the engine
        game_id: engine game identifier
    """

    def __init__(
        self,
        width: int,
        height: int,
        you: Snake,
        opponents: Sequence[Snake] = (),
        food: Sequence[Position] = (),
        hazards: Sequence[Position] = (),
        turn: int = 0,
        game_id: Optional[str] = None
    ):
        self.width = width
        self.height = height
        self.you = you
        self.opponents: Tuple[Snake, ...] = tuple(opponents)
        self.food: Tuple[Position, ...] = tuple(tuple(f) for f in food)
        self.hazards: Tuple[Position, ...] = tuple(tuple(h) for h in hazards)
        self.turn = turn
        self.game_id = game_id

    @property
    def health(self) -> int:
        return self.you.health

    @property
    def head(self) -> Position:
        return self.you.head

    @property
    def snakes(self) -> Tuple[Snake, ...]:
        """All snakes on the board, ours first."""
        return (self.you,) + self.opponents

    def is_starving(self) -> bool:
        """Low health with food on the board to go after."""
        return self.health < LOW_HEALTH_THRESHOLD and len(self.food) > 0

    @classmethod
    def from_request(cls, payload: Dict[str, Any]) -> "GameState":
        """
        Build a GameState from a Battlesnake request body.

        Raises:
            MalformedSnapshotError: if a required field is missing, has the
                wrong type, or places anything outside the board.
        """
        if not isinstance(payload, dict):
            raise MalformedSnapshotError("Request body must be a JSON object")

        board = _require(payload, "board", dict)
        width = _require_int(board, "width")
        height = _require_int(board, "height")
        if width <= 0 or height <= 0:
            raise MalformedSnapshotError(f"Board dimensions must be positive, got {width}x{height}")

        raw_you = _require(payload, "you", dict)
        you = _parse_snake(raw_you, width, height)

        # The engine lists every snake on the board, including the requester
        opponents = []
        for raw in _require(board, "snakes", list):
            if not isinstance(raw, dict):
                raise MalformedSnapshotError("Snake entries must be objects")
            if _is_same_snake(raw, raw_you):
                continue
            opponents.append(_parse_snake(raw, width, height))

        food = [_parse_position(p, width, height) for p in _require(board, "food", list)]
        hazards = [_parse_position(p, width, height) for p in board.get("hazards") or []]

        game = payload.get("game") or {}
        turn = payload.get("turn", 0)

        return cls(
            width=width,
            height=height,
            you=you,
            opponents=opponents,
            food=food,
            hazards=hazards,
            turn=turn if isinstance(turn, int) else 0,
            game_id=game.get("id") if isinstance(game, dict) else None,
        )

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = hazard
        S = snake body
        0 = our head, 1,2,3... = opponent heads
        (0,0) at bottom left and x-axis labels at bottom
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for fx, fy in self.food:
            board[fy][fx] = 'F'

        for hx, hy in self.hazards:
            board[hy][hx] = 'H'

        for i, snake in enumerate(self.snakes):
            for pos_idx, (x, y) in enumerate(snake.body):
                if pos_idx == 0:
                    board[y][x] = str(i)
                elif board[y][x] not in '0123456789':
                    board[y][x] = 'S'

        result = []
        # Print rows in reverse order (bottom to top)
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState turn={self.turn}, size={self.width}x{self.height}, "
            f"health={self.health}, opponents={len(self.opponents)}, food={len(self.food)}>"
        )


def _require(container: Dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in container or container[key] is None:
        raise MalformedSnapshotError(f"Missing required field '{key}'")
    value = container[key]
    if not isinstance(value, expected_type):
        raise MalformedSnapshotError(
            f"Field '{key}' must be {expected_type.__name__}, got {type(value).__name__}"
        )
    return value


def _require_int(container: Dict[str, Any], key: str) -> int:
    value = _require(container, key, int)
    if isinstance(value, bool):
        raise MalformedSnapshotError(f"Field '{key}' must be int, got bool")
    return value


def _parse_position(raw: Any, width: int, height: int) -> Position:
    if not isinstance(raw, dict):
        raise MalformedSnapshotError(f"Position must be an object with x and y, got {raw!r}")
    x = _require_int(raw, "x")
    y = _require_int(raw, "y")
    if not (0 <= x < width and 0 <= y < height):
        raise MalformedSnapshotError(f"Position {(x, y)} is outside the {width}x{height} board")
    return (x, y)


def _is_same_snake(raw: Dict[str, Any], raw_you: Dict[str, Any]) -> bool:
    # Without ids on both sides, identical bodies identify the requester
    if raw.get("id") is not None and raw_you.get("id") is not None:
        return raw["id"] == raw_you["id"]
    return raw.get("body") == raw_you.get("body")


def _parse_snake(raw: Dict[str, Any], width: int, height: int) -> Snake:
    body: List[Position] = [_parse_position(p, width, height) for p in _require(raw, "body", list)]
    if not body:
        raise MalformedSnapshotError(f"Snake {raw.get('id')!r} has an empty body")

    length = _require_int(raw, "length")
    if length <= 0:
        raise MalformedSnapshotError(f"Snake {raw.get('id')!r} has non-positive length {length}")

    health = _require_int(raw, "health")
    if not (0 <= health <= MAX_HEALTH):
        raise MalformedSnapshotError(f"Snake {raw.get('id')!r} has health {health} outside 0-{MAX_HEALTH}")

    return Snake(
        snake_id=str(raw.get("id", "")),
        body=body,
        length=length,
        health=health,
    )
