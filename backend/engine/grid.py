"""
Occupancy grid builder.

The grid is a numpy int8 array of shape (width + 2, height + 2), indexed
grid[x, y] in shifted coordinates: board cell (x, y) lives at
(x + 1, y + 1) and a one-cell BORDER ring surrounds the board.
"""

from typing import Tuple

import numpy as np

from domain.constants import BORDER, EMPTY, FOOD, HAZARD, SNAKE_BODY
from domain.errors import MalformedSnapshotError
from domain.game_state import GameState
from domain.snake import Position

GRID_OFFSET = 1


def to_grid(position: Position) -> Tuple[int, int]:
    x, y = position
    return x + GRID_OFFSET, y + GRID_OFFSET


def build_grid(game_state: GameState) -> np.ndarray:
    """
    Rasterize the board into cell codes.

    Write order is border, food, hazards, snake bodies, so a hazard on a
    food cell stays a hazard. Every snake's tail is left open because it
    vacates when the turn resolves.

    Raises:
        MalformedSnapshotError: if any reported position falls outside the
            board, border ring included.
    """
    grid = np.full((game_state.width + 2, game_state.height + 2), EMPTY, dtype=np.int8)

    grid[0, :] = BORDER
    grid[-1, :] = BORDER
    grid[:, 0] = BORDER
    grid[:, -1] = BORDER

    for position in game_state.food:
        _mark(grid, position, FOOD)

    for position in game_state.hazards:
        _mark(grid, position, HAZARD)

    for snake in game_state.snakes:
        for segment in snake.solid_segments():
            _mark(grid, segment, SNAKE_BODY)

    return grid


def _mark(grid: np.ndarray, position: Position, code: int) -> None:
    gx, gy = to_grid(position)
    if not (GRID_OFFSET <= gx < grid.shape[0] - 1 and GRID_OFFSET <= gy < grid.shape[1] - 1):
        raise MalformedSnapshotError(f"Position {tuple(position)} lies outside the board")
    grid[gx, gy] = code
