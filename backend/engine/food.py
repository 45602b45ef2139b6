"""
Food seeking for a hungry snake.
"""

import logging
from typing import Optional, Sequence

from domain.constants import DOWN, LEFT, RIGHT, UP
from domain.game_state import GameState
from domain.snake import Position
from .candidates import CandidateSet
from .safety import apply_safety_filters

logger = logging.getLogger(__name__)


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def nearest_food(head: Position, food: Sequence[Position]) -> Optional[Position]:
    """Closest food by Manhattan distance; ties go to the first listed."""
    if not food:
        return None
    return min(food, key=lambda f: manhattan_distance(head, f))


def steer_toward(head: Position, target: Position, candidates: CandidateSet) -> CandidateSet:
    """
    Narrow candidates toward target.

    A target on our row or column collapses the set to that one direction
    when it is still allowed. A diagonal target keeps whichever of the two
    toward-target directions are allowed. If no toward-target direction is
    allowed, the set comes back unchanged.
    """
    head_x, head_y = head
    target_x, target_y = target

    horizontal = RIGHT if target_x > head_x else LEFT if target_x < head_x else None
    vertical = UP if target_y > head_y else DOWN if target_y < head_y else None
    toward = [d for d in (horizontal, vertical) if d is not None and d in candidates]

    if not toward:
        return candidates
    return candidates.restricted_to(toward)


def seek_food(game_state: GameState, candidates: CandidateSet) -> CandidateSet:
    """
    Replace the scored candidates with a safety-filtered full set steered
    toward the nearest food.
    """
    candidates = apply_safety_filters(game_state, candidates.reset_for_food_seeking())

    target = nearest_food(game_state.head, game_state.food)
    if target is None:
        return candidates

    steered = steer_toward(game_state.head, target, candidates)
    logger.debug(f"Seeking food at {target} from {game_state.head}: {sorted(d.value for d in steered.directions)}")
    return steered
