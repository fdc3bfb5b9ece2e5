"""
API Routes for weekly league matchmaking
"""

import logging
from dataclasses import replace
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from league_matcher.config import MatchmakingConfig
from league_matcher.models.conflict_graph import ConflictGraph
from league_matcher.models.team import Team, make_teams
from league_matcher.services.matchmaking import MatchmakingResult, run_matchmaking
from league_matcher.utils.rank_import import RankImportError, parse_conflicts, parse_ranks
from league_matcher.utils.report_formats import render_flat, render_orsa, render_reddit, render_summary

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request / Response Models
# ============================================================================


class TeamIn(BaseModel):
    name: str
    points: float = Field(allow_inf_nan=False)


class EventContext(BaseModel):
    """Week/platform/format used only for the rendered layouts"""

    week: int = Field(1, ge=1)
    platform: str = Field("pcps4", pattern="^(pcps4|xbox)$")
    format: str = Field("3v3", pattern="^(3v3|2v2|1v1)$")
    max_attempts: Optional[int] = Field(None, ge=1)


class MatchmakingRequest(EventContext):
    teams: List[TeamIn]
    history: List[List[str]] = []


class ImportMatchmakingRequest(EventContext):
    """Raw CSV text, as exported from the league sheets"""

    ranks_csv: str
    history_csv: str = ""


class GroupMember(BaseModel):
    name: str
    points: float


class GroupOut(BaseModel):
    group_number: int
    size: int
    average_points: float
    members: List[GroupMember]


class Renderings(BaseModel):
    reddit: str
    orsa: str
    flat: str


class MatchmakingResponse(BaseModel):
    match_count: int
    placed_count: int
    unplaced_count: int
    unplaced: List[str]
    attempts: int
    forced_placement: Optional[str] = None
    summary: str
    groups: List[GroupOut]
    renderings: Renderings


# ============================================================================
# Helpers
# ============================================================================


def _run(teams: List[Team], conflicts: ConflictGraph, body: EventContext) -> MatchmakingResponse:
    config = MatchmakingConfig.from_env()
    if body.max_attempts is not None:
        config = replace(config, max_attempts=body.max_attempts)

    logger.info("Matchmaking request for week %d: %d teams, %d conflicting pairs", body.week, len(teams), len(conflicts))

    result = run_matchmaking(teams, conflicts, config)
    return _to_response(result, body)


def _to_response(result: MatchmakingResult, body: EventContext) -> MatchmakingResponse:
    groups = [
        GroupOut(
            group_number=i,
            size=group.size,
            average_points=group.average_points,
            members=[GroupMember(name=t.name, points=t.points) for t in group.members],
        )
        for i, group in enumerate(result.schedule, start=1)
    ]
    return MatchmakingResponse(
        match_count=len(result.schedule),
        placed_count=result.placed_count,
        unplaced_count=result.unplaced_count,
        unplaced=[t.name for t in result.unplaced],
        attempts=result.attempts,
        forced_placement=result.forced_placement,
        summary=render_summary(len(result.schedule), result.unplaced_count),
        groups=groups,
        renderings=Renderings(
            reddit=render_reddit(result.schedule, body.week, body.platform, body.format),
            orsa=render_orsa(result.schedule, body.week, body.platform, body.format),
            flat=render_flat(result.schedule),
        ),
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.post("/matchmaking/groups", response_model=MatchmakingResponse)
def create_groups(body: MatchmakingRequest):
    """
    Group teams for a league week from JSON input.

    Teams are ranked by points (ties keep request order). Every pair of teams
    listed together in `history` is kept apart where possible.
    """
    try:
        teams = make_teams((t.name, t.points) for t in body.teams)
        return _run(teams, ConflictGraph.from_history(body.history), body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/matchmaking/import", response_model=MatchmakingResponse)
def create_groups_from_csv(body: ImportMatchmakingRequest):
    """
    Group teams for a league week from pasted rank and history CSV text.
    """
    try:
        teams = parse_ranks(body.ranks_csv)
        conflicts = parse_conflicts(body.history_csv)
    except RankImportError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not teams:
        raise HTTPException(status_code=400, detail="No teams found in rank sheet")

    try:
        return _run(teams, conflicts, body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
