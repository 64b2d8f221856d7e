"""
Pydantic models for the teeup web API.

Defines request/response schemas for the REST endpoints.
"""
from pydantic import BaseModel, Field
from typing import List, Optional

from teeup.grouping.models import Category, Strategy
from teeup.utils.constants import DEFAULT_GROUP_SIZE


class ParticipantIn(BaseModel):
    """A player submitted with a draw request."""
    id: Optional[int] = Field(default=None, description="Defaults to the 1-based list position")
    display_name: str = Field(min_length=1)
    skill_rating: Optional[float] = None
    category: Category = Category.UNSPECIFIED


class DrawRequest(BaseModel):
    """Request to draw groups. Give either roster_text or participants."""
    roster_text: Optional[str] = Field(
        default=None,
        description="One player per line: name[, handicap[, category]]"
    )
    participants: Optional[List[ParticipantIn]] = None
    group_size: int = DEFAULT_GROUP_SIZE
    strategy: Strategy = Strategy.UNIFORM_RANDOM
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible draw")
    fold_remainder: bool = Field(
        default=False,
        description="Random strategy only: fold a short last group into the others"
    )


class MemberOut(BaseModel):
    """A player in a drawn group."""
    id: int
    display_name: str
    skill_rating: Optional[float] = None
    category: Category


class GroupOut(BaseModel):
    """A drawn group."""
    name: str
    average_rating: Optional[float] = None
    members: List[MemberOut]


class DrawResponse(BaseModel):
    """Response after a draw."""
    strategy: Strategy
    group_size: int
    total_count: int
    seed: Optional[int] = None
    groups: List[GroupOut]
    report: str


class StrategyInfo(BaseModel):
    """Description of a partitioning strategy."""
    id: str
    name: str
    description: str


class ErrorResponse(BaseModel):
    """Error response."""
    error: str
    detail: Optional[str] = None
