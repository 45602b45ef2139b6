"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.constants import Direction, VALID_MOVES
from domain.game_state import GameState
from engine.candidates import CandidateSet
from engine.safety import apply_safety_filters
from .base import Player


class RandomPlayer(Player):
    """
    A baseline that picks any direction surviving the safety filters
    (walls, neck, bodies, hazards), with no look-ahead.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random

    def get_move(self, game_state: GameState) -> Direction:
        valid_moves = apply_safety_filters(game_state, CandidateSet.all_moves()).ordered()

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
