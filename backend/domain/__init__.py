"""
Domain entities for the Battlesnake agent.

This module contains the per-turn board model that is independent of
infrastructure concerns (HTTP, configuration, logging).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_DELTAS, Direction,
    EMPTY, FOOD, SNAKE_BODY, HAZARD, BORDER,
    LOW_HEALTH_THRESHOLD, MAX_HEALTH, STARVING_FOOD_WEIGHT,
)
from .errors import MalformedSnapshotError
from .snake import Position, Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_DELTAS', 'Direction',
    'EMPTY', 'FOOD', 'SNAKE_BODY', 'HAZARD', 'BORDER',
    'LOW_HEALTH_THRESHOLD', 'MAX_HEALTH', 'STARVING_FOOD_WEIGHT',
    'MalformedSnapshotError',
    'Position',
    'Snake',
    'GameState',
]
