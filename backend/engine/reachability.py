"""
Bounded flood fill used to score how much open space each move leads to.
"""

from collections import deque
from typing import Dict, List

import numpy as np

from domain.constants import (
    DIRECTION_DELTAS,
    FOOD,
    LOW_HEALTH_THRESHOLD,
    STARVING_FOOD_WEIGHT,
    Direction,
)
from domain.game_state import GameState
from .grid import to_grid


def depth_limit(length: int) -> int:
    """Exploration depth allowed from each entry cell."""
    return 2 * length + 2


def flood_fill(grid: np.ndarray, start_x: int, start_y: int, max_depth: int, starving: bool = False) -> int:
    """
    Count open cells reachable from (start_x, start_y) in grid coordinates.

    The walk is breadth first over an explicit worklist, so every cell is
    counted at its shortest depth and only if that depth is below
    max_depth. Negative cells are walls. Food cells weigh
    STARVING_FOOD_WEIGHT instead of 1 when starving.

    A depth-first walk can claim a cell at a deep path first and then cut
    off what lies beyond it. Counting at the shortest depth avoids that, so
    scores here are at least as high as a depth-first walk would give, and
    opening a cell never lowers them.
    """
    visited = np.zeros(grid.shape, dtype=bool)
    width, height = grid.shape
    total = 0

    queue = deque([(start_x, start_y, 0)])
    while queue:
        x, y, depth = queue.popleft()
        if depth >= max_depth:
            continue
        if not (0 <= x < width and 0 <= y < height):
            continue
        if grid[x, y] < 0 or visited[x, y]:
            continue

        visited[x, y] = True
        total += STARVING_FOOD_WEIGHT if starving and grid[x, y] == FOOD else 1

        for dx, dy in DIRECTION_DELTAS.values():
            queue.append((x + dx, y + dy, depth + 1))

    return total


def score_directions(game_state: GameState, grid: np.ndarray) -> Dict[Direction, int]:
    """
    Flood-fill score for each of the four cells next to our head.

    Each direction explores independently with its own visited set.
    """
    head_x, head_y = to_grid(game_state.head)
    max_depth = depth_limit(game_state.you.length)
    starving = game_state.health < LOW_HEALTH_THRESHOLD

    scores = {}
    for direction, (dx, dy) in DIRECTION_DELTAS.items():
        scores[direction] = flood_fill(grid, head_x + dx, head_y + dy, max_depth, starving)
    return scores


def qualifying_directions(scores: Dict[Direction, int], length: int) -> List[Direction]:
    # Enough room to fit our own body
    return [direction for direction, score in scores.items() if score >= length]
