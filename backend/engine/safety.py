"""
Safety filters that drop moves leading to immediate death.

Every filter takes the turn's GameState and a CandidateSet and returns a
narrower CandidateSet. Filters only remove directions, so they can run in
any order. Coordinates here are plain board coordinates.
"""

from typing import Callable, Iterable, List

from domain.constants import DIRECTION_DELTAS, DOWN, LEFT, RIGHT, UP, Direction
from domain.game_state import GameState
from domain.snake import Position
from .candidates import CandidateSet

SafetyFilter = Callable[[GameState, CandidateSet], CandidateSet]


def directions_onto(head: Position, cells: Iterable[Position]) -> List[Direction]:
    """Directions whose single step from head lands on one of cells."""
    head_x, head_y = head
    targets = set(cells)
    return [
        direction
        for direction, (dx, dy) in DIRECTION_DELTAS.items()
        if (head_x + dx, head_y + dy) in targets
    ]


def avoid_borders(game_state: GameState, candidates: CandidateSet) -> CandidateSet:
    head_x, head_y = game_state.head
    blocked = []
    if head_x <= 0:
        blocked.append(LEFT)
    if head_x >= game_state.width - 1:
        blocked.append(RIGHT)
    if head_y <= 0:
        blocked.append(DOWN)
    if head_y >= game_state.height - 1:
        blocked.append(UP)
    return candidates.without(*blocked)


def avoid_neck(game_state: GameState, candidates: CandidateSet) -> CandidateSet:
    """Never reverse into the segment right behind the head."""
    neck = game_state.you.neck
    if neck is None:
        return candidates
    return candidates.without(*directions_onto(game_state.head, [neck]))


def avoid_own_body(game_state: GameState, candidates: CandidateSet) -> CandidateSet:
    you = game_state.you
    return candidates.without(*directions_onto(you.head, you.solid_segments()))


def avoid_opponents(game_state: GameState, candidates: CandidateSet) -> CandidateSet:
    cells = [segment for snake in game_state.opponents for segment in snake.solid_segments()]
    return candidates.without(*directions_onto(game_state.head, cells))


def avoid_hazards(game_state: GameState, candidates: CandidateSet) -> CandidateSet:
    return candidates.without(*directions_onto(game_state.head, game_state.hazards))


SAFETY_FILTERS: List[SafetyFilter] = [
    avoid_neck,
    avoid_borders,
    avoid_own_body,
    avoid_opponents,
    avoid_hazards,
]


def apply_safety_filters(game_state: GameState, candidates: CandidateSet) -> CandidateSet:
    for safety_filter in SAFETY_FILTERS:
        candidates = safety_filter(game_state, candidates)
    return candidates
