"""
Static reference data: the team catalog and season fixture loading.
"""

from .teams import (
    DIVISIONS,
    NFL_TEAMS,
    get_team_by_id,
    get_team_by_abbreviation,
    get_teams_by_conference,
    get_teams_by_division,
)
from .fixtures import FixtureRow, fixture_to_games, reopen_weeks

__all__ = [
    # Teams
    "DIVISIONS",
    "NFL_TEAMS",
    "get_team_by_id",
    "get_team_by_abbreviation",
    "get_teams_by_conference",
    "get_teams_by_division",
    # Fixtures
    "FixtureRow",
    "fixture_to_games",
    "reopen_weeks",
]
