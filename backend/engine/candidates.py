"""
Candidate move set for a single turn.

A CandidateSet is an immutable value tagged with the stage that produced
it. Filters only ever narrow it; the single way to get all four directions
back is the explicit reset performed before food seeking.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List

from domain.constants import Direction, VALID_MOVES


class Stage(str, Enum):
    INITIAL = "initial"
    REACHABILITY = "reachability"
    FOOD_SEEKING = "food_seeking"
    SAFETY_FALLBACK = "safety_fallback"
    LAST_RESORT = "last_resort"


@dataclass(frozen=True)
class CandidateSet:
    directions: FrozenSet[Direction] = field(default_factory=lambda: VALID_MOVES)
    stage: Stage = Stage.INITIAL

    @classmethod
    def all_moves(cls, stage: Stage = Stage.INITIAL) -> "CandidateSet":
        return cls(VALID_MOVES, stage)

    def without(self, *directions: Direction) -> "CandidateSet":
        return CandidateSet(self.directions.difference(directions), self.stage)

    def restricted_to(self, directions: Iterable[Direction]) -> "CandidateSet":
        return CandidateSet(self.directions.intersection(directions), self.stage)

    def reset_for_food_seeking(self) -> "CandidateSet":
        return CandidateSet.all_moves(Stage.FOOD_SEEKING)

    def __contains__(self, direction) -> bool:
        return direction in self.directions

    def __len__(self) -> int:
        return len(self.directions)

    def __bool__(self) -> bool:
        return bool(self.directions)

    def ordered(self) -> List[Direction]:
        """Directions in declaration order, so seeded choices are repeatable."""
        return [d for d in Direction if d in self.directions]
