"""
Flood-fill player: the full decision pipeline behind the /move route.
"""

import random
from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState
from engine.decision import decide, on_end, on_start
from .base import Player


class FloodFillPlayer(Player):
    """
    Scores each move by bounded reachable space, seeks food when hungry and
    falls back to the safety filters when nothing has room.
    """

    name = "flood_fill"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    def start(self, game_state: GameState) -> dict:
        return on_start(game_state)

    def get_move(self, game_state: GameState) -> Direction:
        return decide(game_state, self.rng)

    def end(self, game_state: GameState) -> dict:
        return on_end(game_state)
