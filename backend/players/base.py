"""
Base player interface for the Battlesnake agent.
"""

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for move logic.

    A player holds no per-game state; everything it needs arrives in the
    GameState for the current turn.
    """

    name = "base"

    def start(self, game_state: GameState) -> dict:
        """Called when a game begins. The response body is ignored."""
        return {}

    def get_move(self, game_state: GameState) -> Direction:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the board

        Returns:
            One of Direction.UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError

    def end(self, game_state: GameState) -> dict:
        """Called when a game ends. The response body is ignored."""
        return {}
