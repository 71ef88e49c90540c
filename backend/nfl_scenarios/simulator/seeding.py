"""
Conference playoff seeding.

Each division crowns one winner. Division winners take seeds 1-4 ranked by
wild card rules, the best three of the remaining teams take seeds 5-7, and
everyone else is out.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from .models import Clinch, Conference, Game, Selections, Team, TeamRecord, TeamStanding
from .records import calculate_team_records
from .tiebreakers import break_tie

WILD_CARD_SPOTS = 3
PCT_PRECISION = 4


def _group_by_win_pct(teams: Iterable[Team], records: Dict[str, TeamRecord]) -> List[List[Team]]:
    """Bucket teams by win percentage, best first."""
    buckets: Dict[float, List[Team]] = {}
    for team in teams:
        buckets.setdefault(round(records[team.id].win_pct, PCT_PRECISION), []).append(team)
    return [buckets[pct] for pct in sorted(buckets, reverse=True)]


def resolve_wild_card_ties(
    tied_teams: List[Team],
    records: Dict[str, TeamRecord],
    teams: Sequence[Team]
) -> List[Team]:
    """
    Order a wild card tie that may include several teams from one division.

    Same-division teams are ordered among themselves first. Each division's
    best team then goes into the wild card comparison, and the division's
    full order is spliced back in at that team's position.
    """
    by_division: Dict[str, List[Team]] = {}
    for team in tied_teams:
        by_division.setdefault(team.division, []).append(team)

    if all(len(members) == 1 for members in by_division.values()):
        return break_tie(tied_teams, records, is_division_tie=False, teams=teams)

    division_orders = {
        division: break_tie(members, records, is_division_tie=True, teams=teams)
        for division, members in by_division.items()
    }
    leaders = [order[0] for order in division_orders.values()]
    ranked_leaders = break_tie(leaders, records, is_division_tie=False, teams=teams)

    ordered = []
    for leader in ranked_leaders:
        ordered.extend(division_orders[leader.division])
    return ordered


def sort_with_tiebreakers(
    group: Iterable[Team],
    records: Dict[str, TeamRecord],
    teams: Sequence[Team]
) -> List[Team]:
    """Sort cross-division teams by win percentage, resolving ties with wild card rules."""
    ordered = []
    for bucket in _group_by_win_pct(group, records):
        if len(bucket) == 1:
            ordered.extend(bucket)
        else:
            ordered.extend(resolve_wild_card_ties(bucket, records, teams))
    return ordered


def division_winner(
    members: List[Team],
    records: Dict[str, TeamRecord],
    teams: Sequence[Team]
) -> Team:
    """Best team in a division, resolving ties for first with division rules."""
    leaders = _group_by_win_pct(members, records)[0]
    if len(leaders) == 1:
        return leaders[0]
    return break_tie(leaders, records, is_division_tie=True, teams=teams)[0]


def calculate_playoff_seedings(
    conference: Conference,
    teams: Sequence[Team],
    games: Iterable[Game],
    selections: Selections,
    records: Optional[Dict[str, TeamRecord]] = None
) -> List[TeamStanding]:
    """
    Seed one conference.

    Args:
        conference: Conference to seed
        teams: Team catalog
        games: Regular season games
        selections: Hypothetical outcomes for games that are not final
        records: Precomputed records, if the caller already has them

    Returns:
        Standings for every conference team: seeds 1-7 first, then the rest
        in ranked order
    """
    if records is None:
        records = calculate_team_records(teams, games, selections)

    conference_teams = [t for t in teams if t.conference == conference and t.id in records]

    divisions: Dict[str, List[Team]] = {}
    for team in conference_teams:
        divisions.setdefault(team.division, []).append(team)

    winners = []
    pool = []
    for division in sorted(divisions):
        members = divisions[division]
        winner = division_winner(members, records, teams)
        winners.append(winner)
        pool.extend(t for t in members if t.id != winner.id)

    ranked_winners = sort_with_tiebreakers(winners, records, teams)
    ranked_pool = sort_with_tiebreakers(pool, records, teams)
    wild_cards = ranked_pool[:WILD_CARD_SPOTS]

    standings = []
    for seed, team in enumerate(ranked_winners + wild_cards, start=1):
        if seed == 1:
            clinched = Clinch.BYE
        elif seed <= len(ranked_winners):
            clinched = Clinch.DIVISION
        else:
            clinched = Clinch.PLAYOFF
        standings.append(TeamStanding(team=team, record=records[team.id], seed=seed, clinched=clinched))

    for team in ranked_pool[WILD_CARD_SPOTS:]:
        standings.append(TeamStanding(team=team, record=records[team.id], is_eliminated=True))

    return standings
