"""
Tests for the bounded flood fill.
"""

import numpy as np

from domain import UP, DOWN, LEFT, RIGHT, BORDER, FOOD, HAZARD, SNAKE_BODY
from engine.grid import build_grid, to_grid
from engine.reachability import depth_limit, flood_fill, qualifying_directions, score_directions


def _open_grid(width, height):
    grid = np.zeros((width + 2, height + 2), dtype=np.int8)
    grid[0, :] = grid[-1, :] = grid[:, 0] = grid[:, -1] = BORDER
    return grid


class TestFloodFill:

    def test_depth_limit(self):
        assert depth_limit(1) == 4
        assert depth_limit(3) == 8

    def test_counts_diamond_on_open_board(self):
        """Depth limit 4 reaches every cell within Manhattan distance 3."""
        grid = _open_grid(11, 11)
        assert flood_fill(grid, 6, 6, max_depth=4) == 1 + 4 + 8 + 12

    def test_wall_start_scores_zero(self):
        grid = _open_grid(5, 5)
        assert flood_fill(grid, 0, 3, max_depth=10) == 0

    def test_body_and_hazard_cells_are_impassable(self):
        grid = _open_grid(5, 5)
        grid[3, 3] = SNAKE_BODY
        grid[4, 4] = HAZARD
        assert flood_fill(grid, 3, 3, max_depth=10) == 0
        assert flood_fill(grid, 4, 4, max_depth=10) == 0

    def test_open_area_bounded_by_board(self):
        grid = _open_grid(3, 3)
        assert flood_fill(grid, 1, 1, max_depth=100) == 9

    def test_explores_rightward(self):
        """A corridor that only opens to the right is fully counted."""
        grid = _open_grid(5, 1)
        assert flood_fill(grid, 1, 1, max_depth=10) == 5
        assert flood_fill(grid, 1, 1, max_depth=3) == 3
        assert flood_fill(grid, 2, 1, max_depth=2) == 3

    def test_starving_weights_food(self):
        grid = _open_grid(3, 1)
        grid[3, 1] = FOOD
        assert flood_fill(grid, 1, 1, max_depth=10) == 3
        assert flood_fill(grid, 1, 1, max_depth=10, starving=True) == 2 + 4

    def test_removing_an_obstacle_never_lowers_the_score(self):
        blocked = _open_grid(7, 7)
        blocked[3, 2:7] = SNAKE_BODY
        opened = blocked.copy()
        opened[3, 4] = 0

        for depth in range(1, 12):
            assert flood_fill(opened, 2, 4, depth) >= flood_fill(blocked, 2, 4, depth)

    def test_does_not_modify_grid(self):
        grid = _open_grid(4, 4)
        before = grid.copy()
        flood_fill(grid, 2, 2, max_depth=10)
        assert np.array_equal(grid, before)


class TestScoreDirections:

    def test_open_board_scores_equal(self, make_state):
        state = make_state(you=[(5, 5)], health=100)
        scores = score_directions(state, build_grid(state))
        assert scores == {UP: 25, DOWN: 25, LEFT: 25, RIGHT: 25}

    def test_starving_counts_food_heavier(self, make_state):
        hungry = make_state(you=[(5, 5)], health=10, food=[(5, 7)])
        fed = make_state(you=[(5, 5)], health=50, food=[(5, 7)])

        assert score_directions(hungry, build_grid(hungry))[UP] == 28
        assert score_directions(fed, build_grid(fed))[UP] == 25

    def test_neck_direction_scores_zero(self, make_state):
        state = make_state(you=[(5, 5), (5, 4), (5, 3)])
        assert score_directions(state, build_grid(state))[DOWN] == 0

    def test_wall_direction_scores_zero(self, make_state):
        state = make_state(you=[(0, 5), (1, 5), (2, 5)])
        scores = score_directions(state, build_grid(state))
        assert scores[LEFT] == 0
        assert scores[RIGHT] == 0
        assert scores[UP] > 0

    def test_directions_explore_independently(self, make_state):
        """Cells reached from one entry cell still count for the others."""
        state = make_state(you=[(1, 1)], width=3, height=3, health=100)
        scores = score_directions(state, build_grid(state))
        # Every neighbour reaches the whole open board within depth 4
        assert scores[UP] == scores[RIGHT]
        assert scores[UP] == 9

    def test_grid_cell_of_head_is_shifted(self, make_state):
        state = make_state(you=[(0, 0)], width=1, height=1)
        scores = score_directions(state, build_grid(state))
        assert to_grid(state.head) == (1, 1)
        assert scores == {UP: 0, DOWN: 0, LEFT: 0, RIGHT: 0}


class TestQualifyingDirections:

    def test_threshold_is_inclusive(self):
        scores = {UP: 3, DOWN: 2, LEFT: 0, RIGHT: 10}
        assert qualifying_directions(scores, 3) == [UP, RIGHT]

    def test_nothing_qualifies(self):
        assert qualifying_directions({UP: 1, DOWN: 1, LEFT: 1, RIGHT: 1}, 5) == []
