"""
Paths to the postseason and single-game clinch conditions.

A path is one concrete set of results: the team wins the chosen games, loses
its other open games, and the listed competitors lose. Paths are ranked by
how few results they need, then by the seed they produce.
"""

import logging
from itertools import combinations, islice
from typing import Dict, List, Sequence

from .magic_numbers import (
    competitor_loss,
    conference_open_games,
    find_team,
    get_competitors,
    goal_met,
    is_clinched,
    is_eliminated,
    requirement_selections,
    seed_under,
    team_win,
    win_for,
)
from .models import (
    ClinchCondition,
    Game,
    Goal,
    PathRequirement,
    RequirementType,
    Selections,
    Team,
    TeamPath,
)

logger = logging.getLogger(__name__)

MAX_TOTAL_PATHS = 20
PATH_COMBINATIONS_PER_LEVEL = 10
PATH_MAX_COMPETITOR_LOSSES = 3


def path_type_for_seed(seed: int) -> Goal:
    if seed == 1:
        return Goal.BYE
    if seed <= 4:
        return Goal.DIVISION
    return Goal.PLAYOFF


def describe_requirements(requirements: List[PathRequirement], teams: Sequence[Team]) -> str:
    """Short description such as "Win vs KC + BUF loses"."""
    if not requirements:
        return "Already clinched"

    abbr = {team.id: team.abbreviation for team in teams}
    wins = [r for r in requirements if r.type == RequirementType.WIN]
    losses = [r for r in requirements if r.type == RequirementType.LOSS]

    parts = []
    if len(wins) == 1:
        parts.append(f"Win vs {abbr.get(wins[0].opponent_id, wins[0].opponent_id)}")
    elif wins:
        parts.append(f"Win {len(wins)} games")

    if len(losses) == 1:
        parts.append(f"{abbr.get(losses[0].team_id, losses[0].team_id)} loses")
    elif len(losses) == 2:
        first, second = (abbr.get(r.team_id, r.team_id) for r in losses)
        parts.append(f"{first} and {second} lose")
    elif losses:
        parts.append(f"{len(losses)} competitor losses")

    return " + ".join(parts)


def calculate_team_paths(
    team_id: str,
    goal: Goal,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections
) -> List[TeamPath]:
    """
    Simplest sets of results that land the team a seed meeting the goal.

    Args:
        team_id: Team to find paths for
        goal: Goal the resulting seed has to meet
        teams: Team catalog
        games: Regular season games
        selections: Hypothetical outcomes already chosen

    Returns:
        Up to MAX_TOTAL_PATHS paths, fewest requirements first; empty if the
        team is unknown or eliminated
    """
    team = find_team(teams, team_id)
    if team is None:
        return []

    competitors = get_competitors(team, goal, teams, games, selections)
    if is_eliminated(team_id, goal, teams, games, selections, competitors=competitors):
        return []
    if is_clinched(team_id, goal, teams, games, selections, competitors=competitors):
        seed = seed_under(team, teams, games, selections) or goal.max_seed
        return [TeamPath(path_type=goal, requirements=[], resulting_seed=seed, description="Already clinched")]

    competitor_ids = {c.id for c in competitors}
    remaining = conference_open_games(team, games, selections)
    by_id = {g.id: g for g in remaining}
    team_games = [g for g in remaining if g.involves(team.id)]
    competitor_games = [
        g for g in remaining
        if not g.involves(team.id) and (g.home_team.id in competitor_ids or g.away_team.id in competitor_ids)
    ]

    paths: Dict[str, TeamPath] = {}

    def try_path(requirements: List[PathRequirement], losses_for_team: List[Game]) -> bool:
        scenario = dict(selections)
        scenario.update(requirement_selections(requirements, by_id))
        for game in losses_for_team:
            scenario[game.id] = win_for(game, game.opponent_of(team.id).id)
        seed = seed_under(team, teams, games, scenario)
        if not goal_met(seed, goal):
            return False
        key = "|".join(sorted(r.key for r in requirements))
        if key not in paths:
            paths[key] = TeamPath(
                path_type=path_type_for_seed(seed),
                requirements=requirements,
                resulting_seed=seed,
                description=describe_requirements(requirements, teams),
            )
        return True

    for wins in range(len(team_games) + 1):
        for win_combo in islice(combinations(team_games, wins), PATH_COMBINATIONS_PER_LEVEL):
            if len(paths) >= MAX_TOTAL_PATHS:
                break
            win_reqs = [team_win(team, g) for g in win_combo]
            team_losses = [g for g in team_games if g not in win_combo]
            if try_path(win_reqs, team_losses):
                continue

            for losses in range(1, PATH_MAX_COMPETITOR_LOSSES + 1):
                found = False
                for loss_combo in islice(combinations(competitor_games, losses), PATH_COMBINATIONS_PER_LEVEL):
                    if len(paths) >= MAX_TOTAL_PATHS:
                        break
                    reqs = win_reqs + [competitor_loss(g, competitor_ids) for g in loss_combo]
                    found = try_path(reqs, team_losses) or found
                if found:
                    break

    if not paths:
        logger.debug(f"No {goal.value} path found for team {team_id} within search bounds")

    return sorted(paths.values(), key=lambda p: (len(p.requirements), p.resulting_seed))[:MAX_TOTAL_PATHS]


def get_clinch_conditions(
    team_id: str,
    goal: Goal,
    teams: Sequence[Team],
    games: Sequence[Game],
    selections: Selections
) -> List[ClinchCondition]:
    """
    Single results that clinch the goal outright, plus win-and-loss pairs
    from the team's next open week.

    Returns an empty list for unknown, clinched or eliminated teams.
    """
    team = find_team(teams, team_id)
    if team is None:
        return []

    competitors = get_competitors(team, goal, teams, games, selections)
    if is_clinched(team_id, goal, teams, games, selections, competitors=competitors):
        return []
    if is_eliminated(team_id, goal, teams, games, selections, competitors=competitors):
        return []

    competitor_ids = {c.id for c in competitors}
    remaining = conference_open_games(team, games, selections)
    by_id = {g.id: g for g in remaining}
    abbr = {t.id: t.abbreviation for t in teams}
    team_games = [g for g in remaining if g.involves(team.id)]
    competitor_games = [
        g for g in remaining
        if not g.involves(team.id) and (g.home_team.id in competitor_ids or g.away_team.id in competitor_ids)
    ]

    def clinches(requirements: List[PathRequirement]) -> bool:
        fixed = requirement_selections(requirements, by_id)
        return is_clinched(team_id, goal, teams, games, selections, fixed=fixed, competitors=competitors)

    conditions = []
    winning_games = set()
    for game in team_games:
        req = team_win(team, game)
        if clinches([req]):
            winning_games.add(game.id)
            conditions.append(ClinchCondition(
                type="win",
                description=f"Clinch with win vs {abbr[req.opponent_id]} (Week {game.week})",
                requirements=[req],
            ))

    losing_games = set()
    for game in competitor_games:
        req = competitor_loss(game, competitor_ids)
        if clinches([req]):
            losing_games.add(game.id)
            conditions.append(ClinchCondition(
                type="opponent_loses",
                description=f"Clinch if {abbr[req.team_id]} loses to {abbr[req.opponent_id]} (Week {game.week})",
                requirements=[req],
            ))

    # win-plus-loss pairs are only looked for in the team's next open week
    next_week = min((g.week for g in team_games), default=None)
    for game in team_games:
        if game.id in winning_games or game.week != next_week:
            continue
        win = team_win(team, game)
        for other in competitor_games:
            if other.id in losing_games or other.week != next_week:
                continue
            loss = competitor_loss(other, competitor_ids)
            if clinches([win, loss]):
                conditions.append(ClinchCondition(
                    type="win_and_opponent_loses",
                    description=f"Clinch with win vs {abbr[win.opponent_id]} and {abbr[loss.team_id]} loss",
                    requirements=[win, loss],
                ))

    return conditions
