"""
Move decision for one turn.

decide() runs the whole pipeline: build the occupancy grid, score the four
moves by reachable space, switch to food seeking when hungry, fall back to
the safety filters (then to any move) when nothing qualifies, and pick one
survivor at random.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from domain.constants import Direction
from domain.game_state import GameState
from .candidates import CandidateSet, Stage
from .food import seek_food
from .grid import build_grid
from .reachability import qualifying_directions, score_directions
from .safety import apply_safety_filters, avoid_borders, avoid_neck

logger = logging.getLogger(__name__)


@dataclass
class DecisionTrace:
    """What decide() saw on the way to its move."""
    scores: Dict[Direction, int] = field(default_factory=dict)
    stages: List[CandidateSet] = field(default_factory=list)
    move: Optional[Direction] = None

    @property
    def final(self) -> CandidateSet:
        return self.stages[-1]


def decide_with_trace(game_state: GameState, rng: Optional[random.Random] = None) -> DecisionTrace:
    rng = rng or random
    trace = DecisionTrace()

    grid = build_grid(game_state)
    trace.scores = score_directions(game_state, grid)

    # Reversing onto the neck is never legal, whatever the space behind it
    candidates = avoid_neck(
        game_state,
        CandidateSet.all_moves(Stage.REACHABILITY).restricted_to(
            qualifying_directions(trace.scores, game_state.you.length)
        ),
    )
    trace.stages.append(candidates)

    if game_state.is_starving():
        candidates = seek_food(game_state, candidates)
        trace.stages.append(candidates)

    if not candidates:
        candidates = apply_safety_filters(game_state, CandidateSet.all_moves(Stage.SAFETY_FALLBACK))
        trace.stages.append(candidates)

    if not candidates:
        # Every move looks fatal; at least stay on the board and off the neck
        candidates = avoid_neck(game_state, avoid_borders(game_state, CandidateSet.all_moves(Stage.LAST_RESORT)))
        if not candidates:
            candidates = CandidateSet.all_moves(Stage.LAST_RESORT)
        trace.stages.append(candidates)

    trace.move = rng.choice(candidates.ordered())

    scores = {d.value: s for d, s in trace.scores.items()}
    logger.debug(
        f"Turn {game_state.turn}: scores={scores} "
        f"stage={candidates.stage.value} options={[d.value for d in candidates.ordered()]} "
        f"move={trace.move.value}"
    )
    return trace


def decide(game_state: GameState, rng: Optional[random.Random] = None) -> Direction:
    return decide_with_trace(game_state, rng).move


def on_start(game_state: GameState) -> dict:
    return {}


def on_end(game_state: GameState) -> dict:
    return {}
