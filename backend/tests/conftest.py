"""
Shared fixtures for the engine and API tests.
"""

import pytest

from nfl_scenarios.data import NFL_TEAMS, fixture_to_games, reopen_weeks

from fixtures.season_2022 import SEASON_2022_GAMES


@pytest.fixture
def teams():
    """The full 32-team catalog."""
    return NFL_TEAMS


@pytest.fixture
def season_2022():
    """Every 2022 regular season game, all final."""
    return fixture_to_games(SEASON_2022_GAMES, NFL_TEAMS)


@pytest.fixture
def week_18_2022(season_2022):
    """The 2022 season as it stood before week 18 kicked off."""
    return reopen_weeks(season_2022, 18)
