"""
Team catalog API routes.
"""

from typing import List, Sequence
from fastapi import APIRouter, Depends

from ..dependencies import get_team_catalog, get_team_or_404
from ..schemas import TeamResponse
from ...simulator import Team


router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", response_model=List[TeamResponse])
async def list_teams(teams: Sequence[Team] = Depends(get_team_catalog)) -> List[TeamResponse]:
    """
    List every team in the catalog.
    """
    return [TeamResponse.model_validate(team.to_dict()) for team in teams]


@router.get("/{team_id}", response_model=TeamResponse)
async def get_team(team: Team = Depends(get_team_or_404)) -> TeamResponse:
    """
    Get a single team by id.
    """
    return TeamResponse.model_validate(team.to_dict())
