"""
Core data types for the group draw.

A Partition is an ordered list of groups; a group is an ordered list of
participants. Neither carries identity across draws.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class Category(str, Enum):
    """Category used by the stratified strategy (e.g. men's / women's tees)."""
    A = "A"
    B = "B"
    UNSPECIFIED = "unspecified"


class Strategy(str, Enum):
    """Partitioning strategies."""
    UNIFORM_RANDOM = "random"
    GENDER_STRATIFIED = "stratified"
    HANDICAP_BALANCED = "balanced"


@dataclass(frozen=True)
class Participant:
    """
    A registered player.

    skill_rating is a golf-style handicap: lower means stronger.
    None means the rating is unknown.
    """
    id: int
    display_name: str
    skill_rating: Optional[float] = None
    category: Category = Category.UNSPECIFIED

    def __post_init__(self):
        if not self.display_name:
            raise ValueError("Participant display_name must be non-empty")
        # NaN and infinite handicaps count as unknown
        if self.skill_rating is not None and not math.isfinite(self.skill_rating):
            object.__setattr__(self, 'skill_rating', None)

    @property
    def has_rating(self) -> bool:
        return self.skill_rating is not None


Group = List[Participant]
Partition = List[Group]
