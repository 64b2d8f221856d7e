"""
FastAPI application for the teeup draw API.
"""
from fastapi import FastAPI, HTTPException
from typing import List

from teeup.web.models import (
    DrawRequest, DrawResponse, ParticipantIn, StrategyInfo
)
from teeup.grouping.models import Participant, Strategy
from teeup.grouping.runner import DrawConfig, DrawRunner
from teeup.roster.roster import parse_roster
from teeup.utils.constants import TEAM_NAME_POOL, FALLBACK_GROUP_LABEL

# Create FastAPI app
app = FastAPI(
    title="teeup",
    description="Group draw API for golf outings",
    version="1.0.0"
)

STRATEGY_INFO = [
    StrategyInfo(
        id=Strategy.UNIFORM_RANDOM.value,
        name="Random",
        description="Shuffle everyone and cut into groups"
    ),
    StrategyInfo(
        id=Strategy.GENDER_STRATIFIED.value,
        name="Stratified",
        description="Spread each category evenly across groups"
    ),
    StrategyInfo(
        id=Strategy.HANDICAP_BALANCED.value,
        name="Handicap balanced",
        description="Snake draft by handicap so group averages stay close"
    ),
]


def build_participants(items: List[ParticipantIn]) -> List[Participant]:
    """Convert request players to Participants; missing ids use list position."""
    return [
        Participant(
            id=item.id if item.id is not None else i,
            display_name=item.display_name,
            skill_rating=item.skill_rating,
            category=item.category
        )
        for i, item in enumerate(items, 1)
    ]


# =============================================================================
# REST API Endpoints
# =============================================================================

@app.post("/api/draws", response_model=DrawResponse)
async def create_draw(request: DrawRequest):
    """Draw groups for a roster."""
    if request.roster_text is not None and request.participants is not None:
        raise HTTPException(status_code=400, detail="Give either roster_text or participants, not both")

    if request.roster_text is not None:
        participants = parse_roster(request.roster_text)
    else:
        participants = build_participants(request.participants or [])

    config = DrawConfig(
        group_size=request.group_size,
        strategy=request.strategy,
        seed=request.seed,
        fold_remainder=request.fold_remainder
    )

    try:
        runner = DrawRunner(config)
        result = runner.run(participants)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return DrawResponse(**result.to_dict())


@app.get("/api/strategies")
async def list_strategies():
    """List available partitioning strategies."""
    return {"strategies": [s.model_dump() for s in STRATEGY_INFO]}


@app.get("/api/names")
async def list_names():
    """List the group name pool and the fallback label."""
    return {
        "pool": list(TEAM_NAME_POOL),
        "fallback": FALLBACK_GROUP_LABEL.format(number="N")
    }


@app.get("/")
async def index():
    """Health / basic info endpoint."""
    return {"status": "ok", "service": "teeup", "docs": "/docs"}
