"""
Standings, bracket, draft order and scenario search API routes.

The engine is synchronous and CPU bound, so every call runs in the
threadpool.
"""

import logging
from typing import List, Sequence, Tuple
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.concurrency import run_in_threadpool

from ..converters import (
    UnknownTeamError,
    to_games,
    to_playoff_games,
    to_playoff_picks,
    to_selections,
)
from ..dependencies import get_team_catalog, get_team_or_404
from ..schemas import (
    ClinchConditionResponse,
    ClinchConditionsResponse,
    DraftOrderResponse,
    DraftPickResponse,
    EliminationResponse,
    ErrorResponse,
    MagicNumberResponse,
    PlayoffBracketResponse,
    PlayoffRequest,
    ScenarioRequest,
    StandingsRequest,
    StandingsResponse,
    TeamPathResponse,
    TeamPathsResponse,
    TeamStandingResponse,
)
from ...simulator import (
    Conference,
    Game,
    Goal,
    PlayoffGame,
    PlayoffPicks,
    Selections,
    Team,
    TeamStanding,
    build_playoff_bracket,
    calculate_draft_order,
    calculate_league_standings,
    calculate_magic_number,
    calculate_playoff_seedings,
    calculate_team_paths,
    check_elimination,
    get_clinch_conditions,
    seeds_from_standings,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/scenarios",
    tags=["scenarios"],
    responses={400: {"model": ErrorResponse}},
)


def _scenario_inputs(request: ScenarioRequest, teams: Sequence[Team]) -> Tuple[List[Game], Selections]:
    try:
        return to_games(request.games, teams), to_selections(request.selections)
    except UnknownTeamError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


def _playoff_inputs(request: PlayoffRequest, teams: Sequence[Team]) -> Tuple[List[PlayoffGame], PlayoffPicks]:
    try:
        return to_playoff_games(request.playoff_games, teams), to_playoff_picks(request.playoff_picks)
    except UnknownTeamError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )


def _seedings(teams: Sequence[Team], games: List[Game], selections: Selections) -> Tuple[List[TeamStanding], List[TeamStanding]]:
    afc = calculate_playoff_seedings(Conference.AFC, teams, games, selections)
    nfc = calculate_playoff_seedings(Conference.NFC, teams, games, selections)
    return afc, nfc


@router.post("/standings", response_model=StandingsResponse)
async def get_standings(
    request: StandingsRequest,
    teams: Sequence[Team] = Depends(get_team_catalog)
) -> StandingsResponse:
    """
    Compute both conferences' standings from games and selections.
    """
    games, selections = _scenario_inputs(request, teams)
    standings = await run_in_threadpool(
        calculate_league_standings, teams, games, selections, request.include_magic_numbers
    )

    return StandingsResponse(
        afc=[TeamStandingResponse.model_validate(s.to_dict()) for s in standings[Conference.AFC]],
        nfc=[TeamStandingResponse.model_validate(s.to_dict()) for s in standings[Conference.NFC]],
    )


@router.post("/bracket", response_model=PlayoffBracketResponse)
async def get_bracket(
    request: PlayoffRequest,
    teams: Sequence[Team] = Depends(get_team_catalog)
) -> PlayoffBracketResponse:
    """
    Build the playoff bracket from the standings, playoff results and picks.
    """
    games, selections = _scenario_inputs(request, teams)
    playoff_games, picks = _playoff_inputs(request, teams)

    afc, nfc = await run_in_threadpool(_seedings, teams, games, selections)
    bracket = build_playoff_bracket(seeds_from_standings(afc), seeds_from_standings(nfc), playoff_games, picks)

    return PlayoffBracketResponse.model_validate(bracket.to_dict())


@router.post("/draft-order", response_model=DraftOrderResponse)
async def get_draft_order(
    request: PlayoffRequest,
    teams: Sequence[Team] = Depends(get_team_catalog)
) -> DraftOrderResponse:
    """
    Compute the draft order; teams whose playoff exit is still open are left out.
    """
    games, selections = _scenario_inputs(request, teams)
    playoff_games, picks = _playoff_inputs(request, teams)

    afc, nfc = await run_in_threadpool(_seedings, teams, games, selections)
    order = calculate_draft_order(afc, nfc, playoff_games, picks)

    return DraftOrderResponse(
        picks=[DraftPickResponse.model_validate(pick.to_dict()) for pick in order],
        complete=len(order) == len(afc) + len(nfc),
    )


@router.post("/teams/{team_id}/magic-number", response_model=MagicNumberResponse)
async def get_magic_number(
    request: ScenarioRequest,
    goal: Goal = Query(default=Goal.PLAYOFF),
    team: Team = Depends(get_team_or_404),
    teams: Sequence[Team] = Depends(get_team_catalog)
) -> MagicNumberResponse:
    """
    Get a team's magic number for a goal.
    """
    games, selections = _scenario_inputs(request, teams)
    result = await run_in_threadpool(calculate_magic_number, team.id, goal, teams, games, selections)
    return MagicNumberResponse.model_validate(result.to_dict())


@router.post("/teams/{team_id}/paths", response_model=TeamPathsResponse)
async def get_team_paths(
    request: ScenarioRequest,
    goal: Goal = Query(default=Goal.PLAYOFF),
    team: Team = Depends(get_team_or_404),
    teams: Sequence[Team] = Depends(get_team_catalog)
) -> TeamPathsResponse:
    """
    Get the simplest paths for a team to reach a goal.
    """
    games, selections = _scenario_inputs(request, teams)
    paths = await run_in_threadpool(calculate_team_paths, team.id, goal, teams, games, selections)
    logger.info(f"Found {len(paths)} {goal.value} paths for {team.abbreviation}")

    return TeamPathsResponse(
        team_id=team.id,
        goal=goal.value,
        paths=[TeamPathResponse.model_validate(path.to_dict()) for path in paths],
    )


@router.post("/teams/{team_id}/clinch-conditions", response_model=ClinchConditionsResponse)
async def get_team_clinch_conditions(
    request: ScenarioRequest,
    goal: Goal = Query(default=Goal.PLAYOFF),
    team: Team = Depends(get_team_or_404),
    teams: Sequence[Team] = Depends(get_team_catalog)
) -> ClinchConditionsResponse:
    """
    Get the single results that would clinch a goal for a team.
    """
    games, selections = _scenario_inputs(request, teams)
    conditions = await run_in_threadpool(get_clinch_conditions, team.id, goal, teams, games, selections)

    return ClinchConditionsResponse(
        team_id=team.id,
        goal=goal.value,
        conditions=[ClinchConditionResponse.model_validate(c.to_dict()) for c in conditions],
    )


@router.post("/teams/{team_id}/elimination", response_model=EliminationResponse)
async def get_team_elimination(
    request: ScenarioRequest,
    team: Team = Depends(get_team_or_404),
    teams: Sequence[Team] = Depends(get_team_catalog)
) -> EliminationResponse:
    """
    Get a team's elimination status and best/worst possible seeds.
    """
    games, selections = _scenario_inputs(request, teams)
    result = await run_in_threadpool(check_elimination, team.id, teams, games, selections)
    return EliminationResponse.model_validate(result.to_dict())
