"""
Game constants for the Battlesnake agent.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(str, Enum):
    """Cardinal moves, valued by their wire strings."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        return DIRECTION_DELTAS[self]


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = frozenset(Direction)

# y grows upward on the board
DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    UP: (0, 1),
    DOWN: (0, -1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Occupancy grid cell codes; anything negative is impassable
EMPTY = 0
FOOD = 1
SNAKE_BODY = -4
HAZARD = -2
BORDER = -9

MAX_HEALTH = 100

# Heuristic settings
LOW_HEALTH_THRESHOLD = 20
STARVING_FOOD_WEIGHT = 4
