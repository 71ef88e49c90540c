"""
Record aggregation.

Turns games plus hypothetical selections into per-team records. Final
scores decide a game; otherwise its selection does; otherwise the game is
left out of both teams' records.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .models import (
    CountedGame,
    Game,
    LastFiveGame,
    Outcome,
    Selection,
    Selections,
    Team,
    TeamRecord,
)


# Placeholder scores for projected results so point-based tiebreakers still work
PROJECTED_WIN_SCORE = (24, 17)
PROJECTED_TIE_SCORE = (20, 20)

LAST_FIVE = 5


def game_outcome(game: Game, selections: Selections) -> Optional[Tuple[Outcome, bool]]:
    """
    Determine a game's outcome from the home team's side.

    Args:
        game: The game to evaluate
        selections: Hypothetical outcomes keyed by game id

    Returns:
        (home outcome, projected) or None if the game is undecided
    """
    if game.is_final:
        if game.home_score > game.away_score:
            return Outcome.WIN, False
        if game.home_score < game.away_score:
            return Outcome.LOSS, False
        return Outcome.TIE, False

    selection = selections.get(game.id)
    if selection is None:
        return None
    selection = Selection(selection)
    if selection == Selection.HOME:
        return Outcome.WIN, True
    if selection == Selection.AWAY:
        return Outcome.LOSS, True
    return Outcome.TIE, True


def _flip(outcome: Outcome) -> Outcome:
    if outcome == Outcome.WIN:
        return Outcome.LOSS
    if outcome == Outcome.LOSS:
        return Outcome.WIN
    return Outcome.TIE


def _game_points(game: Game, home_outcome: Outcome, projected: bool) -> Tuple[int, int]:
    """Return (home points, away points), using placeholders for projected results."""
    if not projected:
        return game.home_score, game.away_score
    if home_outcome == Outcome.TIE:
        return PROJECTED_TIE_SCORE
    high, low = PROJECTED_WIN_SCORE
    return (high, low) if home_outcome == Outcome.WIN else (low, high)


def _tally(record: TeamRecord, outcome: Outcome, division: bool, conference: bool) -> None:
    if outcome == Outcome.WIN:
        record.wins += 1
        if division:
            record.division_wins += 1
        if conference:
            record.conference_wins += 1
    elif outcome == Outcome.LOSS:
        record.losses += 1
        if division:
            record.division_losses += 1
        if conference:
            record.conference_losses += 1
    else:
        record.ties += 1
        if division:
            record.division_ties += 1
        if conference:
            record.conference_ties += 1


def calculate_team_records(
    teams: Iterable[Team],
    games: Iterable[Game],
    selections: Selections
) -> Dict[str, TeamRecord]:
    """
    Build a record for every catalog team from the decided games.

    Division games always count as conference games as well.

    Args:
        teams: Team catalog
        games: Regular season games
        selections: Hypothetical outcomes for games that are not final

    Returns:
        Dict mapping team_id -> TeamRecord
    """
    records = {team.id: TeamRecord(team=team) for team in teams}

    for game in games:
        decided = game_outcome(game, selections)
        if decided is None:
            continue
        home_outcome, projected = decided
        home_points, away_points = _game_points(game, home_outcome, projected)
        division = game.is_division_game
        conference = division or game.is_conference_game

        sides = (
            (game.home_team, game.away_team, home_outcome, home_points, away_points),
            (game.away_team, game.home_team, _flip(home_outcome), away_points, home_points),
        )
        for team, opponent, outcome, points_for, points_against in sides:
            record = records.get(team.id)
            if record is None:
                continue
            _tally(record, outcome, division, conference)
            record.points_for += points_for
            record.points_against += points_against
            record.results.append(CountedGame(
                game=game,
                opponent_id=opponent.id,
                outcome=outcome,
                points_for=points_for,
                points_against=points_against,
                projected=projected,
            ))

    return records


def _by_week(record: TeamRecord) -> List[CountedGame]:
    return sorted(record.results, key=lambda r: r.game.week)


def calculate_streak(record: TeamRecord) -> str:
    """Current streak such as "W3" or "L1"; empty when nothing has been counted."""
    results = _by_week(record)
    if not results:
        return ""

    latest = results[-1].outcome
    count = 0
    for result in reversed(results):
        if result.outcome != latest:
            break
        count += 1

    letter = {Outcome.WIN: "W", Outcome.LOSS: "L", Outcome.TIE: "T"}[latest]
    return f"{letter}{count}"


def calculate_last_five(record: TeamRecord) -> List[LastFiveGame]:
    """Last five counted games, most recent first."""
    recent = list(reversed(_by_week(record)))[:LAST_FIVE]
    return [
        LastFiveGame(
            week=result.game.week,
            opponent_id=result.opponent_id,
            result=result.outcome,
            points_for=result.points_for,
            points_against=result.points_against,
            projected=result.projected,
        )
        for result in recent
    ]
