"""
Conference standings with scenario data attached.
"""

from typing import Dict, List, Optional, Sequence

from .magic_numbers import calculate_magic_number, get_competitors, is_eliminated
from .models import Conference, Game, Goal, MagicNumbers, Selections, Team, TeamStanding
from .records import calculate_last_five, calculate_streak, calculate_team_records
from .seeding import calculate_playoff_seedings


def _magic_numbers(
    team: Team,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    playoff_competitors: List[Team]
) -> MagicNumbers:
    """
    Magic numbers for every goal.

    The division title implies a playoff spot and the bye implies the
    division, so a search whose answer follows from another goal is skipped.
    """
    def search(goal: Goal, competitors: Optional[List[Team]] = None) -> Optional[int]:
        return calculate_magic_number(team.id, goal, teams, games, selections, competitors).number

    if is_eliminated(team.id, Goal.DIVISION, teams, games, selections):
        return MagicNumbers(playoff=search(Goal.PLAYOFF, playoff_competitors))

    division = search(Goal.DIVISION)
    playoff = 0 if division == 0 else search(Goal.PLAYOFF, playoff_competitors)
    return MagicNumbers(playoff=playoff, division=division, bye=search(Goal.BYE))


def calculate_standings(
    conference: Conference,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    include_magic_numbers: bool = True
) -> List[TeamStanding]:
    """
    Build a conference's standings.

    Seeds and clinch labels come from the current seeding. With
    include_magic_numbers, an unseeded team is only marked eliminated if it
    can no longer reach the playoffs, and every live team gets magic numbers
    for each goal. The magic number search dominates the cost; see
    magic_numbers for its bounds.

    Args:
        conference: Conference to build
        teams: Team catalog
        games: Regular season games
        selections: Hypothetical outcomes for games that are not final
        include_magic_numbers: Run the scenario search for every team

    Returns:
        Standings in seed order, non-qualifiers after the seven seeds
    """
    records = calculate_team_records(teams, games, selections)
    standings = calculate_playoff_seedings(conference, teams, games, selections, records)

    for standing in standings:
        standing.streak = calculate_streak(standing.record)
        standing.last_five = calculate_last_five(standing.record)
        if not include_magic_numbers:
            continue

        team = standing.team
        playoff_competitors = get_competitors(team, Goal.PLAYOFF, teams, games, selections, records)
        standing.is_eliminated = (
            standing.seed is None
            and is_eliminated(team.id, Goal.PLAYOFF, teams, games, selections, playoff_competitors)
        )
        if standing.is_eliminated:
            standing.magic_number = MagicNumbers()
            continue
        standing.magic_number = _magic_numbers(team, teams, games, selections, playoff_competitors)

    return standings


def calculate_league_standings(
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    include_magic_numbers: bool = True
) -> Dict[Conference, List[TeamStanding]]:
    """Standings for both conferences."""
    return {
        conference: calculate_standings(conference, teams, games, selections, include_magic_numbers)
        for conference in Conference
    }
