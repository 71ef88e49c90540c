"""
Reverse draft order.

Non-playoff teams pick first, worst record first, with ties going to the team
with the weaker schedule. Playoff teams follow by the round they went out in,
and the Super Bowl winner picks last. Matchups without a known winner are
left out of the order rather than guessed.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .bracket import DIVISIONAL_GAMES, WILD_CARD_GAMES, build_playoff_bracket, seeds_from_standings
from .models import (
    DraftPick,
    Matchup,
    PlayoffGame,
    PlayoffPicks,
    Team,
    TeamRecord,
    TeamStanding,
    TeamWithSeed,
)
from .tiebreakers import strength_of_schedule

REASON_NON_PLAYOFF = "Did not make playoffs"
REASON_WILD_CARD = "Lost in Wild Card"
REASON_DIVISIONAL = "Lost in Divisional"
REASON_CHAMPIONSHIP = "Lost in Conference Championship"
REASON_SUPER_BOWL_LOSS = "Lost Super Bowl"
REASON_SUPER_BOWL_WIN = "Won Super Bowl"


def _record_str(records: Dict[str, TeamRecord], team: Team) -> str:
    record = records.get(team.id)
    return record.record_str if record else "0-0"


def _ordering(records: Dict[str, TeamRecord]) -> Callable[[Team], Tuple[float, float, str]]:
    def key(team: Team) -> Tuple[float, float, str]:
        if team.id not in records:
            return (0.0, 0.0, team.id)
        return (
            round(records[team.id].win_pct, 4),
            round(strength_of_schedule(team, records), 4),
            team.id,
        )
    return key


def _round_block(
    matchups: Sequence[Matchup],
    winners: Sequence[Optional[TeamWithSeed]],
    start: int,
    reason: str,
    records: Dict[str, TeamRecord]
) -> List[DraftPick]:
    """
    Picks for the losers of one playoff round.

    The round owns a fixed block of picks starting at ``start``, one per
    team it eliminates, whether or not its matchups are known yet. When some
    matchups are still undecided, each known loser gets the range of picks
    it could end up with.
    """
    key = _ordering(records)
    losers: List[Team] = []
    undecided: List[List[Team]] = []
    for matchup, winner in zip(matchups, winners):
        sides = [side.team for side in matchup if side is not None]
        if winner is None:
            if sides:
                undecided.append(sides)
            continue
        losers.extend(team for team in sides if team.id != winner.team.id)

    picks = []
    ordered = sorted(losers, key=key)
    for index, team in enumerate(ordered):
        own = key(team)
        surely_before = sum(1 for sides in undecided if all(key(t) < own for t in sides))
        maybe_before = sum(1 for sides in undecided if any(key(t) < own for t in sides))
        pick = start + index + surely_before
        pick_max = start + index + maybe_before
        picks.append(DraftPick(
            team=team,
            pick=pick,
            pick_max=pick_max if pick_max != pick else None,
            record=_record_str(records, team),
            reason=reason,
        ))
    return picks


def calculate_draft_order(
    afc_standings: Iterable[TeamStanding],
    nfc_standings: Iterable[TeamStanding],
    playoff_games: Iterable[PlayoffGame],
    picks: PlayoffPicks
) -> List[DraftPick]:
    """
    Assign draft picks from final standings and playoff results.

    Args:
        afc_standings: AFC standings, with seeds
        nfc_standings: NFC standings, with seeds
        playoff_games: External playoff games
        picks: The user's picked playoff winners

    Returns:
        Draft picks in order; playoff teams whose exit round is still unknown
        are omitted
    """
    afc_standings = list(afc_standings)
    nfc_standings = list(nfc_standings)
    standings = afc_standings + nfc_standings
    records = {standing.team.id: standing.record for standing in standings}
    key = _ordering(records)

    order = []
    non_playoff = sorted((s.team for s in standings if s.seed is None), key=key)
    for index, team in enumerate(non_playoff, start=1):
        order.append(DraftPick(
            team=team,
            pick=index,
            record=_record_str(records, team),
            reason=REASON_NON_PLAYOFF,
        ))

    bracket = build_playoff_bracket(
        seeds_from_standings(afc_standings),
        seeds_from_standings(nfc_standings),
        playoff_games,
        picks,
    )
    afc, nfc, super_bowl = bracket.afc, bracket.nfc, bracket.super_bowl
    rounds = [
        (REASON_WILD_CARD, 2 * WILD_CARD_GAMES,
         afc.wild_card_matchups + nfc.wild_card_matchups,
         afc.wild_card_winners + nfc.wild_card_winners),
        (REASON_DIVISIONAL, 2 * DIVISIONAL_GAMES,
         afc.divisional_matchups + nfc.divisional_matchups,
         afc.divisional_winners + nfc.divisional_winners),
        (REASON_CHAMPIONSHIP, 2,
         [afc.championship_matchup, nfc.championship_matchup],
         [afc.champion, nfc.champion]),
        (REASON_SUPER_BOWL_LOSS, 1,
         [(super_bowl.afc_champion, super_bowl.nfc_champion)],
         [super_bowl.winner]),
    ]

    next_pick = len(non_playoff) + 1
    for reason, block, matchups, winners in rounds:
        order.extend(_round_block(matchups, winners, next_pick, reason, records))
        next_pick += block

    if super_bowl.winner is not None:
        team = super_bowl.winner.team
        order.append(DraftPick(
            team=team,
            pick=next_pick,
            record=_record_str(records, team),
            reason=REASON_SUPER_BOWL_WIN,
        ))

    return order
