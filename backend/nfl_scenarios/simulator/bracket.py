"""
Playoff bracket construction.

Each round's matchups come from the previous round's computed winners when
that round is fully decided. An external feed's listed teams are only used
while the previous round is still open, since the feed can lag behind
advancement. External winner ids are matched against the computed matchups
by team id, never against the feed's own team fields. Wild card pairings a
partial feed has not listed yet are filled in from the seeds so a pick can
still decide them.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .models import (
    BracketState,
    Conference,
    ConferencePicks,
    Matchup,
    PlayoffBracket,
    PlayoffGame,
    PlayoffPicks,
    PlayoffRound,
    SuperBowlState,
    Team,
    TeamStanding,
    TeamWithSeed,
)

logger = logging.getLogger(__name__)

WILD_CARD_PAIRINGS = ((2, 7), (3, 6), (4, 5))
WILD_CARD_GAMES = len(WILD_CARD_PAIRINGS)
DIVISIONAL_GAMES = 2

Winners = List[Optional[TeamWithSeed]]


def _find_in_matchup(matchup: Matchup, team_id: Optional[str]) -> Optional[TeamWithSeed]:
    if not team_id:
        return None
    for side in matchup:
        if side is not None and side.team.id == team_id:
            return side
    return None


def _apply_external_winners(
    matchups: List[Matchup],
    games: Iterable[PlayoffGame],
    winners: Winners
) -> None:
    """Place each external winner in whichever computed matchup contains that team."""
    for game in games:
        if not game.winner_id:
            continue
        for index, matchup in enumerate(matchups):
            winner = _find_in_matchup(matchup, game.winner_id)
            if winner is not None:
                winners[index] = winner
                break
        else:
            logger.debug(f"Playoff game {game.id} winner {game.winner_id} not in computed matchups")


def _apply_picks(matchups: List[Matchup], picks: Sequence[Optional[str]], winners: Winners) -> None:
    """Fill undecided matchups from the user's picks, by matchup index."""
    for index, matchup in enumerate(matchups):
        if winners[index] is None and index < len(picks):
            winners[index] = _find_in_matchup(matchup, picks[index])


def _apply_picks_by_team(matchups: List[Matchup], picks: Sequence[Optional[str]], winners: Winners) -> None:
    """Fill undecided matchups from whichever pick names one of their teams."""
    for index, matchup in enumerate(matchups):
        if winners[index] is not None:
            continue
        for pick in picks:
            winner = _find_in_matchup(matchup, pick)
            if winner is not None:
                winners[index] = winner
                break


def _by_seed(entries: Iterable[Optional[TeamWithSeed]]) -> List[TeamWithSeed]:
    return sorted((e for e in entries if e is not None), key=lambda e: e.seed)


def build_conference_bracket(
    seeds: Sequence[TeamWithSeed],
    playoff_games: Iterable[PlayoffGame],
    picks: ConferencePicks
) -> BracketState:
    """
    Build one conference's bracket.

    Args:
        seeds: Seeded teams from the standings
        playoff_games: External playoff games for this conference, any round
        picks: The user's picked winners for this conference

    Returns:
        BracketState with matchups and winners for every round
    """
    rounds: Dict[PlayoffRound, List[PlayoffGame]] = {}
    for game in playoff_games:
        rounds.setdefault(game.round, []).append(game)
    wild_card_games = rounds.get(PlayoffRound.WILD_CARD, [])
    divisional_games = rounds.get(PlayoffRound.DIVISIONAL, [])
    championship_games = rounds.get(PlayoffRound.CHAMPIONSHIP, [])

    by_id = {entry.team.id: entry for entry in seeds}
    by_seed = {entry.seed: entry for entry in seeds}

    def with_seed(team: Team) -> TeamWithSeed:
        # teams missing from the standings get a placeholder seed of 0
        return by_id.get(team.id) or TeamWithSeed(team=team, seed=0)

    def from_game(game: PlayoffGame) -> Matchup:
        return (with_seed(game.home_team), with_seed(game.away_team))

    # Wild card
    if wild_card_games:
        wild_card_matchups = [from_game(game) for game in wild_card_games[:WILD_CARD_GAMES]]
        wild_card_winners: Winners = [
            _find_in_matchup(matchup, game.winner_id)
            for matchup, game in zip(wild_card_matchups, wild_card_games)
        ]
        # seeded pairings the feed has not listed yet
        listed = {side.team.id for matchup in wild_card_matchups for side in matchup}
        for high, low in WILD_CARD_PAIRINGS:
            if len(wild_card_matchups) >= WILD_CARD_GAMES:
                break
            pairing = (by_seed.get(high), by_seed.get(low))
            if any(side is not None and side.team.id in listed for side in pairing):
                continue
            wild_card_matchups.append(pairing)
            wild_card_winners.append(None)
        _apply_picks_by_team(wild_card_matchups, picks.wild_card, wild_card_winners)
    else:
        wild_card_matchups = [(by_seed.get(high), by_seed.get(low)) for high, low in WILD_CARD_PAIRINGS]
        wild_card_winners = [None] * len(wild_card_matchups)
        _apply_picks(wild_card_matchups, picks.wild_card, wild_card_winners)

    # Divisional
    top_seed = by_seed.get(1)
    wild_card_done = (
        len(wild_card_winners) == WILD_CARD_GAMES
        and all(winner is not None for winner in wild_card_winners)
    )
    if wild_card_done and top_seed is not None:
        remaining = _by_seed([top_seed] + wild_card_winners)
        divisional_matchups: List[Matchup] = [
            (remaining[0], remaining[3]),
            (remaining[1], remaining[2]),
        ]
    elif divisional_games:
        divisional_matchups = [from_game(game) for game in divisional_games[:DIVISIONAL_GAMES]]
    else:
        divisional_matchups = [(top_seed, None), (None, None)]

    divisional_winners: Winners = [None] * len(divisional_matchups)
    _apply_external_winners(divisional_matchups, divisional_games, divisional_winners)
    _apply_picks(divisional_matchups, picks.divisional, divisional_winners)

    # Conference championship
    divisional_done = (
        len(divisional_winners) == DIVISIONAL_GAMES
        and all(winner is not None for winner in divisional_winners)
    )
    championship_matchup: Matchup = (None, None)
    if divisional_done:
        finalists = _by_seed(divisional_winners)
        championship_matchup = (finalists[0], finalists[1])
    elif championship_games:
        championship_matchup = from_game(championship_games[0])

    champion = None
    if championship_games:
        champion = _find_in_matchup(championship_matchup, championship_games[0].winner_id)
    if champion is None:
        champion = _find_in_matchup(championship_matchup, picks.championship)

    return BracketState(
        seeds=list(seeds),
        wild_card_matchups=wild_card_matchups,
        wild_card_winners=wild_card_winners,
        divisional_matchups=divisional_matchups,
        divisional_winners=divisional_winners,
        championship_matchup=championship_matchup,
        champion=champion,
    )


def build_playoff_bracket(
    afc_seeds: Sequence[TeamWithSeed],
    nfc_seeds: Sequence[TeamWithSeed],
    playoff_games: Iterable[PlayoffGame],
    picks: PlayoffPicks
) -> PlayoffBracket:
    """
    Build both conference brackets and the Super Bowl.

    Args:
        afc_seeds: AFC seeded teams
        nfc_seeds: NFC seeded teams
        playoff_games: External playoff games for the whole postseason
        picks: The user's picked winners

    Returns:
        PlayoffBracket for both conferences plus the Super Bowl
    """
    playoff_games = list(playoff_games)

    def conference_games(conference: Conference) -> List[PlayoffGame]:
        return [
            game for game in playoff_games
            if game.round != PlayoffRound.SUPER_BOWL and game.conference == conference
        ]

    afc, nfc = (
        build_conference_bracket(seeds, conference_games(conference), picks.for_conference(conference))
        for conference, seeds in ((Conference.AFC, afc_seeds), (Conference.NFC, nfc_seeds))
    )

    finalists: Matchup = (afc.champion, nfc.champion)
    winner = None
    for game in playoff_games:
        if game.round == PlayoffRound.SUPER_BOWL and game.winner_id:
            winner = _find_in_matchup(finalists, game.winner_id)
            break
    if winner is None:
        winner = _find_in_matchup(finalists, picks.super_bowl)

    return PlayoffBracket(
        afc=afc,
        nfc=nfc,
        super_bowl=SuperBowlState(
            afc_champion=afc.champion,
            nfc_champion=nfc.champion,
            winner=winner,
        ),
    )


def seeds_from_standings(standings: Iterable[TeamStanding]) -> List[TeamWithSeed]:
    """Seeded teams from a conference's standings, in seed order."""
    return [
        TeamWithSeed(team=standing.team, seed=standing.seed)
        for standing in standings
        if standing.seed is not None
    ]
