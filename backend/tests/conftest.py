import os
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState  # noqa: E402


def _points(positions):
    return [{"x": x, "y": y} for x, y in positions]


def build_request(
    you,
    width=11,
    height=11,
    health=90,
    length=None,
    opponents=(),
    food=(),
    hazards=(),
    turn=3,
    include_self_in_snakes=True,
):
    """
    Build a Battlesnake move request body.

    you and each opponent are lists of (x, y), head first. Opponents may
    also be (body, length) pairs to report a length different from the body.
    """
    me = {
        "id": "me",
        "name": "me",
        "health": health,
        "body": _points(you),
        "head": {"x": you[0][0], "y": you[0][1]},
        "length": length if length is not None else len(you),
    }

    snakes = [me] if include_self_in_snakes else []
    for i, opponent in enumerate(opponents):
        if isinstance(opponent, tuple) and len(opponent) == 2 and isinstance(opponent[1], int):
            body, opp_length = opponent
        else:
            body, opp_length = opponent, len(opponent)
        snakes.append({
            "id": f"opp-{i}",
            "name": f"opp-{i}",
            "health": 100,
            "body": _points(body),
            "head": {"x": body[0][0], "y": body[0][1]},
            "length": opp_length,
        })

    return {
        "game": {"id": "game-1", "timeout": 500},
        "turn": turn,
        "board": {
            "width": width,
            "height": height,
            "food": _points(food),
            "hazards": _points(hazards),
            "snakes": snakes,
        },
        "you": me,
    }


@pytest.fixture
def make_request():
    return build_request


@pytest.fixture
def make_state():
    def _make_state(*args, **kwargs):
        return GameState.from_request(build_request(*args, **kwargs))
    return _make_state
