"""
Clinch, elimination and magic number calculations.

Only open games (neither final nor already selected) are searched. Clinch
checks play out the team's worst realistic finish, elimination checks its
best one, and the magic number search fixes a handful of results and
checks whether the goal is then guaranteed.

The magic number search is bounded: each combination size is capped at
MAX_COMBINATIONS_PER_LEVEL, so a larger untried combination may exist when
the search comes back empty.

Every candidate combination costs one or two full conference seedings, and
a single search can try up to MAX_COMBINATIONS_PER_LEVEL combinations per
win count times (1 + MAX_COMPETITOR_LOSSES * MAX_COMBINATIONS_PER_LEVEL)
loss combinations. With several weeks still open that is thousands of
seedings per team, so whole-conference standings with magic numbers take
seconds near the end of the season and minutes earlier on. Callers that
only need seeds should skip the search.
"""

import logging
from itertools import combinations, islice
from typing import Dict, Iterable, List, Optional, Sequence, Set

from .models import (
    EliminationResult,
    Game,
    Goal,
    MagicNumberResult,
    MagicNumberScenario,
    PathRequirement,
    RequirementType,
    Selection,
    Selections,
    Team,
    TeamRecord,
)
from .records import calculate_team_records
from .seeding import calculate_playoff_seedings

logger = logging.getLogger(__name__)

MAX_COMBINATIONS_PER_LEVEL = 10
MAX_COMPETITOR_LOSSES = 3
MAX_SCENARIOS = 5


def find_team(teams: Iterable[Team], team_id: str) -> Optional[Team]:
    for team in teams:
        if team.id == team_id:
            return team
    logger.warning(f"Unknown team id {team_id!r}")
    return None


def open_games(games: Iterable[Game], selections: Selections) -> List[Game]:
    """Games that are neither final nor decided by a selection."""
    return [g for g in games if not g.is_final and g.id not in selections]


def conference_open_games(team: Team, games: Iterable[Game], selections: Selections) -> List[Game]:
    """Open games with at least one team from the team's conference."""
    return [
        g for g in open_games(games, selections)
        if g.home_team.conference == team.conference or g.away_team.conference == team.conference
    ]


def win_for(game: Game, winner_id: str) -> Selection:
    return Selection.HOME if game.home_team.id == winner_id else Selection.AWAY


def team_win(team: Team, game: Game) -> PathRequirement:
    return PathRequirement(
        game_id=game.id,
        week=game.week,
        type=RequirementType.WIN,
        team_id=team.id,
        opponent_id=game.opponent_of(team.id).id,
    )


def competitor_loss(game: Game, competitor_ids: Set[str]) -> PathRequirement:
    """The competitor side of the game loses; the home side if both are competitors."""
    loser = game.home_team if game.home_team.id in competitor_ids else game.away_team
    return PathRequirement(
        game_id=game.id,
        week=game.week,
        type=RequirementType.LOSS,
        team_id=loser.id,
        opponent_id=game.opponent_of(loser.id).id,
    )


def requirement_selections(requirements: Iterable[PathRequirement], games: Dict[str, Game]) -> Selections:
    return {req.game_id: win_for(games[req.game_id], req.winner_id) for req in requirements}


def seed_under(team: Team, teams: Sequence[Team], games: Sequence[Game], selections: Selections) -> Optional[int]:
    """Seed the team would hold if the selected results came true."""
    records = calculate_team_records(teams, games, selections)
    for standing in calculate_playoff_seedings(team.conference, teams, games, selections, records):
        if standing.team.id == team.id:
            return standing.seed
    return None


def goal_met(seed: Optional[int], goal: Goal) -> bool:
    return seed is not None and seed <= goal.max_seed


def get_competitors(
    team: Team,
    goal: Goal,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    records: Optional[Dict[str, TeamRecord]] = None
) -> List[Team]:
    """
    Teams that can still take the goal away from the given team.

    Playoff competitors are conference teams whose maximum possible wins
    reach the team's current wins, plus anyone currently seeded. Division
    competitors are the division rivals. Bye competitors are everyone else
    in the conference.
    """
    rivals = [t for t in teams if t.conference == team.conference and t.id != team.id]
    if goal == Goal.DIVISION:
        return [t for t in rivals if t.division == team.division]
    if goal == Goal.BYE:
        return rivals

    if records is None:
        records = calculate_team_records(teams, games, selections)
    remaining: Dict[str, int] = {}
    for game in open_games(games, selections):
        for side in (game.home_team, game.away_team):
            remaining[side.id] = remaining.get(side.id, 0) + 1

    seeded = {
        standing.team.id
        for standing in calculate_playoff_seedings(team.conference, teams, games, selections, records)
        if standing.seed is not None
    }
    current_wins = records[team.id].wins
    return [
        t for t in rivals
        if records[t.id].wins + remaining.get(t.id, 0) >= current_wins or t.id in seeded
    ]


def _worst_case(
    team: Team,
    games: Iterable[Game],
    competitor_ids: Set[str],
    records: Dict[str, TeamRecord],
    stronger_wins: bool
) -> Selections:
    outcomes = {}
    for game in games:
        home, away = game.home_team, game.away_team
        if game.involves(team.id):
            winner = game.opponent_of(team.id)
        elif home.id in competitor_ids and away.id in competitor_ids:
            home_stronger = records[home.id].win_pct >= records[away.id].win_pct
            winner = home if home_stronger == stronger_wins else away
        elif home.id in competitor_ids:
            winner = home
        elif away.id in competitor_ids:
            winner = away
        else:
            winner = home
        outcomes[game.id] = win_for(game, winner.id)
    return outcomes


def _best_case(team: Team, games: Iterable[Game], competitor_ids: Set[str]) -> Selections:
    outcomes = {}
    for game in games:
        home, away = game.home_team, game.away_team
        if game.involves(team.id):
            winner = team
        elif home.id in competitor_ids and away.id in competitor_ids:
            winner = away
        elif home.id in competitor_ids:
            winner = away
        else:
            winner = home
        outcomes[game.id] = win_for(game, winner.id)
    return outcomes


def _worst_case_seeds(
    team: Team,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    competitors: Iterable[Team],
    records: Optional[Dict[str, TeamRecord]] = None
) -> List[Optional[int]]:
    """Seeds in the worst case, once per way of resolving competitor-vs-competitor games."""
    competitor_ids = {c.id for c in competitors}
    remaining = conference_open_games(team, games, selections)
    if records is None:
        records = calculate_team_records(teams, games, selections)
    head_to_head = any(g.home_team.id in competitor_ids and g.away_team.id in competitor_ids for g in remaining)

    seeds = []
    for stronger_wins in ((True, False) if head_to_head else (True,)):
        scenario = dict(selections)
        scenario.update(_worst_case(team, remaining, competitor_ids, records, stronger_wins))
        seeds.append(seed_under(team, teams, games, scenario))
    return seeds


def _best_case_seed(
    team: Team,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    competitors: Iterable[Team]
) -> Optional[int]:
    competitor_ids = {c.id for c in competitors}
    scenario = dict(selections)
    scenario.update(_best_case(team, conference_open_games(team, games, selections), competitor_ids))
    return seed_under(team, teams, games, scenario)


def is_clinched(
    team_id: str,
    goal: Goal,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    fixed: Optional[Selections] = None,
    competitors: Optional[List[Team]] = None,
    records: Optional[Dict[str, TeamRecord]] = None
) -> bool:
    """
    Whether the goal holds even in the team's worst realistic finish.

    Args:
        team_id: Team to check
        goal: Goal to check
        teams: Team catalog
        games: Regular season games
        selections: Hypothetical outcomes already chosen
        fixed: Extra results to hold fixed on top of the selections
        competitors: Precomputed competitors for the goal
        records: Precomputed records used to rank competitors that play each other

    Returns:
        True if every worst case still meets the goal
    """
    team = find_team(teams, team_id)
    if team is None:
        return False

    scenario = dict(selections)
    if fixed:
        scenario.update(fixed)
    if competitors is None:
        competitors = get_competitors(team, goal, teams, games, scenario)

    seeds = _worst_case_seeds(team, teams, games, scenario, competitors, records)
    return all(goal_met(seed, goal) for seed in seeds)


def is_eliminated(
    team_id: str,
    goal: Goal,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    competitors: Optional[List[Team]] = None
) -> bool:
    """Whether the goal is out of reach even in the team's best realistic finish."""
    team = find_team(teams, team_id)
    if team is None:
        return False

    if competitors is None:
        competitors = get_competitors(team, goal, teams, games, selections)
    return not goal_met(_best_case_seed(team, teams, games, selections, competitors), goal)


def check_elimination(
    team_id: str,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections
) -> EliminationResult:
    """
    Elimination status for every goal, with the best and worst seeds still possible.

    Seeds outside the top seven come back as None.
    """
    result = EliminationResult(team_id=team_id)
    team = find_team(teams, team_id)
    if team is None:
        return result

    for goal in (Goal.PLAYOFF, Goal.DIVISION, Goal.BYE):
        if is_eliminated(team_id, goal, teams, games, selections):
            result.eliminated_from.append(goal)

    everyone = [t for t in teams if t.conference == team.conference and t.id != team.id]
    result.best_possible_seed = _best_case_seed(team, teams, games, selections, everyone)
    worst = _worst_case_seeds(team, teams, games, selections, everyone)
    if all(seed is not None for seed in worst):
        result.worst_possible_seed = max(worst)

    result.is_eliminated = Goal.PLAYOFF in result.eliminated_from
    if result.is_eliminated:
        result.reason = "Eliminated from playoff contention"
    elif Goal.DIVISION in result.eliminated_from:
        result.reason = f"Eliminated from {team.division} title race"
    elif Goal.BYE in result.eliminated_from:
        result.reason = "Eliminated from the #1 seed"
    return result


def calculate_magic_number(
    team_id: str,
    goal: Goal,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections,
    competitors: Optional[List[Team]] = None
) -> MagicNumberResult:
    """
    Smallest combination of team wins plus competitor losses that guarantees a goal.

    Wins-only combinations are tried first at each win count, then competitor
    losses are added one at a time up to MAX_COMPETITOR_LOSSES.

    Args:
        team_id: Team to calculate for
        goal: Goal to clinch
        teams: Team catalog
        games: Regular season games
        selections: Hypothetical outcomes already chosen
        competitors: Precomputed competitors for the goal

    Returns:
        MagicNumberResult; number is 0 if clinched and None if eliminated or
        if no combination was found within the search bounds
    """
    result = MagicNumberResult(team_id=team_id, goal=goal)
    team = find_team(teams, team_id)
    if team is None or not games:
        return result

    records = calculate_team_records(teams, games, selections)
    if competitors is None:
        competitors = get_competitors(team, goal, teams, games, selections, records)
    if is_clinched(team_id, goal, teams, games, selections, competitors=competitors, records=records):
        result.number = 0
        return result
    if is_eliminated(team_id, goal, teams, games, selections, competitors=competitors):
        return result

    competitor_ids = {c.id for c in competitors}
    remaining = conference_open_games(team, games, selections)
    team_games = [g for g in remaining if g.involves(team.id)]
    competitor_games = [
        g for g in remaining
        if not g.involves(team.id) and (g.home_team.id in competitor_ids or g.away_team.id in competitor_ids)
    ]
    result.relevant_games = [g.id for g in team_games + competitor_games]
    by_id = {g.id: g for g in remaining}

    def guaranteed(requirements: List[PathRequirement]) -> bool:
        fixed = requirement_selections(requirements, by_id)
        return is_clinched(
            team_id, goal, teams, games, selections, fixed=fixed, competitors=competitors, records=records
        )

    found: List[MagicNumberScenario] = []
    best: Optional[int] = None

    for wins in range(len(team_games) + 1):
        if best is not None and wins >= best:
            break
        for win_combo in islice(combinations(team_games, wins), MAX_COMBINATIONS_PER_LEVEL):
            win_reqs = [team_win(team, g) for g in win_combo]
            if guaranteed(win_reqs):
                found.append(MagicNumberScenario(wins=wins, opponent_losses=0, requirements=win_reqs))
                best = wins if best is None else min(best, wins)
                continue

            for losses in range(1, MAX_COMPETITOR_LOSSES + 1):
                if best is not None and wins + losses >= best:
                    break
                hit = None
                for loss_combo in islice(combinations(competitor_games, losses), MAX_COMBINATIONS_PER_LEVEL):
                    reqs = win_reqs + [competitor_loss(g, competitor_ids) for g in loss_combo]
                    if guaranteed(reqs):
                        hit = MagicNumberScenario(wins=wins, opponent_losses=losses, requirements=reqs)
                        break
                if hit is not None:
                    found.append(hit)
                    best = hit.total if best is None else min(best, hit.total)
                    break

    if best is None:
        logger.debug(f"No {goal.value} clinch found for team {team_id} within search bounds")
        return result

    found.sort(key=lambda s: s.total)
    simplest = found[0]
    result.number = best
    result.wins_needed = simplest.wins
    result.opponent_losses_needed = simplest.opponent_losses
    result.requirements = simplest.requirements
    result.scenarios = [s for s in found if s.total <= best + 1][:MAX_SCENARIOS]
    return result