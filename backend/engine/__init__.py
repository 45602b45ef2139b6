"""
Board evaluation and move selection.
"""

from .candidates import CandidateSet, Stage
from .decision import DecisionTrace, decide, decide_with_trace, on_end, on_start
from .food import manhattan_distance, nearest_food, seek_food, steer_toward
from .grid import build_grid, to_grid
from .reachability import depth_limit, flood_fill, qualifying_directions, score_directions
from .safety import (
    SAFETY_FILTERS,
    apply_safety_filters,
    avoid_borders,
    avoid_hazards,
    avoid_neck,
    avoid_opponents,
    avoid_own_body,
)

__all__ = [
    'CandidateSet', 'Stage',
    'DecisionTrace', 'decide', 'decide_with_trace', 'on_start', 'on_end',
    'manhattan_distance', 'nearest_food', 'seek_food', 'steer_toward',
    'build_grid', 'to_grid',
    'depth_limit', 'flood_fill', 'qualifying_directions', 'score_directions',
    'SAFETY_FILTERS', 'apply_safety_filters', 'avoid_borders', 'avoid_hazards',
    'avoid_neck', 'avoid_opponents', 'avoid_own_body',
]
