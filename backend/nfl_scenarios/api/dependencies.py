"""
Shared FastAPI dependencies.
"""

from typing import Sequence

from fastapi import Depends, HTTPException, status

from ..data import NFL_TEAMS, get_team_by_id
from ..simulator import Team


def get_team_catalog() -> Sequence[Team]:
    """Team catalog handed to every engine call."""
    return NFL_TEAMS


def get_team_or_404(team_id: str, teams: Sequence[Team] = Depends(get_team_catalog)) -> Team:
    team = get_team_by_id(teams, team_id)
    if team is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Team {team_id} not found"
        )
    return team
