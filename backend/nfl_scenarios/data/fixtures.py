"""
Loader for compact season fixtures.

A fixture row is ``(game_id, week, home_abbr, away_abbr, home_score, away_score)``.
Rows carrying both scores become final games; rows without scores are scheduled.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..simulator.models import Game, GameStatus, Team
from .teams import get_team_by_abbreviation

logger = logging.getLogger(__name__)

FixtureRow = Tuple[str, int, str, str, Optional[int], Optional[int]]


def fixture_to_games(rows: Iterable[FixtureRow], teams: Sequence[Team]) -> List[Game]:
    """
    Convert compact fixture rows to Game objects.

    Args:
        rows: Compact fixture rows
        teams: Team catalog used to resolve abbreviations

    Returns:
        Games in fixture order, skipping rows that reference unknown teams
    """
    games = []
    for game_id, week, home_abbr, away_abbr, home_score, away_score in rows:
        home_team = get_team_by_abbreviation(teams, home_abbr)
        away_team = get_team_by_abbreviation(teams, away_abbr)
        if home_team is None or away_team is None:
            logger.warning(f"Skipping fixture game {game_id}: unknown team {home_abbr} or {away_abbr}")
            continue

        played = home_score is not None and away_score is not None
        games.append(Game(
            id=str(game_id),
            week=week,
            home_team=home_team,
            away_team=away_team,
            status=GameStatus.FINAL if played else GameStatus.SCHEDULED,
            home_score=home_score,
            away_score=away_score,
        ))
    return games


def reopen_weeks(games: Iterable[Game], from_week: int) -> List[Game]:
    """Return the games with every game from ``from_week`` on reset to scheduled."""
    reopened = []
    for game in games:
        if game.week >= from_week:
            game = Game(
                id=game.id,
                week=game.week,
                home_team=game.home_team,
                away_team=game.away_team,
            )
        reopened.append(game)
    return reopened
