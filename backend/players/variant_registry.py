"""
Registry for player variants.

Maps variant keys (e.g., 'flood_fill', 'random') to player classes. The
active variant is chosen by the SNAKE_VARIANT environment variable.
"""

from typing import Callable, Dict, Optional, Type

from .base import Player


# Lazy imports so a variant is only loaded when selected
def _get_flood_fill_player() -> Type[Player]:
    from .flood_fill_player import FloodFillPlayer
    return FloodFillPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


DEFAULT_VARIANT = "flood_fill"

PLAYER_VARIANT_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "flood_fill": _get_flood_fill_player,
    "random": _get_random_player,
}

# Canonical list of available variant keys
AVAILABLE_VARIANTS = list(PLAYER_VARIANT_LOADERS.keys())


def get_player_class(variant_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given variant key.

    Args:
        variant_key: One of AVAILABLE_VARIANTS. If None or empty, returns the default.

    Raises:
        ValueError: If variant_key is not recognized.
    """
    if not variant_key or variant_key.strip() == "":
        variant_key = DEFAULT_VARIANT

    variant_key = variant_key.strip()

    if variant_key not in PLAYER_VARIANT_LOADERS:
        available = ", ".join(AVAILABLE_VARIANTS)
        raise ValueError(
            f"Unknown player variant '{variant_key}'. Available variants: {available}"
        )

    return PLAYER_VARIANT_LOADERS[variant_key]()


def list_variants() -> list:
    """
    Return metadata about all available player variants.
    """
    return [
        {"key": "flood_fill", "description": "Reachable-space scoring with food seeking under low health"},
        {"key": "random", "description": "Random move among those passing the safety filters"},
    ]
