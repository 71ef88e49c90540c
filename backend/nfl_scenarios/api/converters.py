"""
Conversion from API payloads to engine models.
"""

from typing import Dict, List, Sequence

from ..data import get_team_by_id
from ..simulator import (
    Conference,
    ConferencePicks,
    Game,
    GameStatus,
    PlayoffGame,
    PlayoffPicks,
    PlayoffRound,
    Selection,
    Selections,
    Team,
)
from .schemas import ConferencePicksInput, GameInput, PlayoffGameInput, PlayoffPicksInput


class UnknownTeamError(ValueError):
    """Raised when a payload references a team id missing from the catalog."""
    pass


def _lookup(teams: Sequence[Team], team_id: str, game_id: str) -> Team:
    team = get_team_by_id(teams, team_id)
    if team is None:
        raise UnknownTeamError(f"Game {game_id} references unknown team {team_id}")
    return team


def to_games(payload: List[GameInput], teams: Sequence[Team]) -> List[Game]:
    return [
        Game(
            id=game.id,
            week=game.week,
            home_team=_lookup(teams, game.home_team_id, game.id),
            away_team=_lookup(teams, game.away_team_id, game.id),
            status=GameStatus(game.status),
            home_score=game.home_score,
            away_score=game.away_score,
        )
        for game in payload
    ]


def to_playoff_games(payload: List[PlayoffGameInput], teams: Sequence[Team]) -> List[PlayoffGame]:
    return [
        PlayoffGame(
            id=game.id,
            round=PlayoffRound(game.round),
            home_team=_lookup(teams, game.home_team_id, game.id),
            away_team=_lookup(teams, game.away_team_id, game.id),
            conference=Conference(game.conference) if game.conference else None,
            status=GameStatus(game.status),
            home_score=game.home_score,
            away_score=game.away_score,
            winner_id=game.winner_id,
        )
        for game in payload
    ]


def to_selections(payload: Dict[str, str]) -> Selections:
    return {game_id: Selection(value) for game_id, value in payload.items()}


def _conference_picks(payload: ConferencePicksInput) -> ConferencePicks:
    return ConferencePicks(
        wild_card=list(payload.wild_card),
        divisional=list(payload.divisional),
        championship=payload.championship,
    )


def to_playoff_picks(payload: PlayoffPicksInput) -> PlayoffPicks:
    return PlayoffPicks(
        afc=_conference_picks(payload.afc),
        nfc=_conference_picks(payload.nfc),
        super_bowl=payload.super_bowl,
    )
