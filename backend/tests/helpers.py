"""
Helpers for building small hand-made schedules in tests.
"""

import itertools

from nfl_scenarios.data import NFL_TEAMS, get_team_by_abbreviation
from nfl_scenarios.simulator import Game, GameStatus


_ids = itertools.count(1)


def team(abbr):
    return get_team_by_abbreviation(NFL_TEAMS, abbr)


def make_game(home, away, home_score=None, away_score=None, week=1, game_id=None):
    """Build a game between two teams given by abbreviation; final when scores are given."""
    final = home_score is not None and away_score is not None
    return Game(
        id=game_id or f"g{next(_ids)}",
        week=week,
        home_team=team(home),
        away_team=team(away),
        status=GameStatus.FINAL if final else GameStatus.SCHEDULED,
        home_score=home_score,
        away_score=away_score,
    )


def results(abbr, opponents, wins, losses):
    """Final games for one team: ``wins`` home wins then ``losses`` home losses, cycling through opponents."""
    games = []
    cycle = itertools.cycle(opponents)
    for _ in range(wins):
        games.append(make_game(abbr, next(cycle), 27, 20))
    for _ in range(losses):
        games.append(make_game(abbr, next(cycle), 17, 24))
    return games


def abbrs(teams_or_standings):
    """Abbreviations for a list of teams or standings."""
    return [getattr(item, "team", item).abbreviation for item in teams_or_standings]
