"""
Player implementations for the Battlesnake agent.

This module contains the player abstraction and the strategies that
decide our snake's move each turn.
"""

from .base import Player
from .random_player import RandomPlayer
from .flood_fill_player import FloodFillPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS, DEFAULT_VARIANT

__all__ = [
    'Player',
    'RandomPlayer',
    'FloodFillPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
    'DEFAULT_VARIANT',
]
