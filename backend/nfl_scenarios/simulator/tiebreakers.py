"""
Tiebreaker resolution for teams tied on win percentage.

Division ties:
1. Head-to-head (only if every team has met every other member)
2. Division record
3. Common games (at least 4 across the group)
4. Conference record
5. Strength of victory
6. Strength of schedule
7. Conference point ranking
8. Point differential

Wild card ties use the same steps, except conference record runs right after
head-to-head and division record is skipped.

Whenever a step separates the group, each resulting subgroup is resolved again
from the first step. A group no step can separate is ordered by point
differential, then team id.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

from .models import Outcome, Team, TeamRecord

logger = logging.getLogger(__name__)

MIN_COMMON_GAMES = 4
SCORE_PRECISION = 4

Scores = Dict[str, float]
Step = Callable[[List[Team]], Optional[Scores]]


def _pct(wins: float, losses: float, ties: float) -> float:
    total = wins + losses + ties
    if total == 0:
        return 0.0
    return (wins + 0.5 * ties) / total


def head_to_head_pct(group: Sequence[Team], records: Dict[str, TeamRecord]) -> Optional[Scores]:
    """
    Win% of each team in games against the rest of the group.

    Returns None unless every team has played at least as many games against
    the group as there are other members.
    """
    group_ids = {team.id for team in group}
    scores = {}
    for team in group:
        wins = losses = ties = 0
        for result in records[team.id].results:
            if result.opponent_id not in group_ids:
                continue
            if result.outcome == Outcome.WIN:
                wins += 1
            elif result.outcome == Outcome.LOSS:
                losses += 1
            else:
                ties += 1
        if wins + losses + ties < len(group) - 1:
            return None
        scores[team.id] = _pct(wins, losses, ties)
    return scores


def common_opponents(group: Sequence[Team], records: Dict[str, TeamRecord]) -> Set[str]:
    """Opponents every team in the group has played, excluding the group itself."""
    common: Optional[Set[str]] = None
    for team in group:
        opponents = {result.opponent_id for result in records[team.id].results}
        common = opponents if common is None else common & opponents
    group_ids = {team.id for team in group}
    return (common or set()) - group_ids


def common_games_pct(group: Sequence[Team], records: Dict[str, TeamRecord]) -> Optional[Scores]:
    """Win% against common opponents; None if fewer than 4 such games exist in total."""
    opponents = common_opponents(group, records)
    if not opponents:
        return None

    scores = {}
    total_games = 0
    for team in group:
        wins = losses = ties = 0
        for result in records[team.id].results:
            if result.opponent_id not in opponents:
                continue
            if result.outcome == Outcome.WIN:
                wins += 1
            elif result.outcome == Outcome.LOSS:
                losses += 1
            else:
                ties += 1
        total_games += wins + losses + ties
        scores[team.id] = _pct(wins, losses, ties)

    if total_games < MIN_COMMON_GAMES:
        return None
    return scores


def _combined_opponent_pct(team: Team, records: Dict[str, TeamRecord], wins_only: bool) -> float:
    wins = losses = ties = 0
    for result in records[team.id].results:
        if wins_only and result.outcome != Outcome.WIN:
            continue
        opponent = records.get(result.opponent_id)
        if opponent is None:
            continue
        wins += opponent.wins
        losses += opponent.losses
        ties += opponent.ties
    return _pct(wins, losses, ties)


def strength_of_victory(team: Team, records: Dict[str, TeamRecord]) -> float:
    """Combined win% of beaten opponents, counted once per win."""
    return _combined_opponent_pct(team, records, wins_only=True)


def strength_of_schedule(team: Team, records: Dict[str, TeamRecord]) -> float:
    """Combined win% of all opponents, counted once per game."""
    return _combined_opponent_pct(team, records, wins_only=False)


def conference_points_rank(
    team: Team,
    records: Dict[str, TeamRecord],
    teams: Iterable[Team]
) -> int:
    """
    Combined conference rank in points scored and points allowed.

    Teams with equal totals share a rank. Lower is better.
    """
    conference = [records[t.id] for t in teams if t.conference == team.conference and t.id in records]
    record = records[team.id]
    scored_rank = 1 + sum(1 for other in conference if other.points_for > record.points_for)
    allowed_rank = 1 + sum(1 for other in conference if other.points_against < record.points_against)
    return scored_rank + allowed_rank


def _partition(group: List[Team], scores: Scores) -> List[List[Team]]:
    """Split the group into equal-score subgroups, best score first."""
    buckets: Dict[float, List[Team]] = {}
    for team in group:
        buckets.setdefault(round(scores[team.id], SCORE_PRECISION), []).append(team)
    return [buckets[score] for score in sorted(buckets, reverse=True)]


def break_tie(
    tied_teams: List[Team],
    records: Dict[str, TeamRecord],
    is_division_tie: bool,
    teams: Sequence[Team]
) -> List[Team]:
    """
    Order teams tied on win percentage, best first.

    Args:
        tied_teams: Teams tied on win percentage
        records: Records for every team, from calculate_team_records
        is_division_tie: True for a division title tie, False for wild card
            or any other cross-division tie
        teams: Team catalog, used for conference point rankings

    Returns:
        The same teams in a total order that does not depend on input order
    """
    if len(tied_teams) <= 1:
        return list(tied_teams)

    def by_record(attr: str) -> Step:
        return lambda group: {t.id: getattr(records[t.id], attr) for t in group}

    def by_team(fn: Callable[[Team], float]) -> Step:
        return lambda group: {t.id: fn(t) for t in group}

    head_to_head = lambda group: head_to_head_pct(group, records)
    common_games = lambda group: common_games_pct(group, records)
    victory = by_team(lambda t: strength_of_victory(t, records))
    schedule = by_team(lambda t: strength_of_schedule(t, records))
    # negated so that the lowest combined rank scores highest
    points_rank = by_team(lambda t: -conference_points_rank(t, records, teams))
    differential = by_record("point_differential")

    if is_division_tie:
        steps: List[Step] = [
            head_to_head,
            by_record("division_win_pct"),
            common_games,
            by_record("conference_win_pct"),
            victory,
            schedule,
            points_rank,
            differential,
        ]
    else:
        steps = [
            head_to_head,
            by_record("conference_win_pct"),
            common_games,
            victory,
            schedule,
            points_rank,
            differential,
        ]

    def resolve(group: List[Team], step_index: int) -> List[Team]:
        if len(group) <= 1:
            return group

        if step_index >= len(steps):
            logger.debug(f"Tiebreakers exhausted for {[t.abbreviation for t in group]}")
            return sorted(group, key=lambda t: (-records[t.id].point_differential, t.id))

        scores = steps[step_index](group)
        if scores is None:
            return resolve(group, step_index + 1)

        subgroups = _partition(group, scores)
        if len(subgroups) == 1:
            return resolve(group, step_index + 1)

        ordered = []
        for subgroup in subgroups:
            ordered.extend(resolve(subgroup, 0))
        return ordered

    # Canonical starting order keeps partitions stable under permutation
    return resolve(sorted(tied_teams, key=lambda t: t.id), 0)
