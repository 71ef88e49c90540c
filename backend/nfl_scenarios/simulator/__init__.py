"""
NFL standings and scenario engine.

Pure functions over a team catalog, a list of games and hypothetical
selections: records, tiebreakers, seeding, brackets, scenario search and
draft order.
"""

from .models import (
    BracketState,
    Clinch,
    ClinchCondition,
    Conference,
    ConferencePicks,
    DraftPick,
    EliminationResult,
    Game,
    GameStatus,
    Goal,
    MagicNumberResult,
    MagicNumbers,
    Outcome,
    PathRequirement,
    PlayoffBracket,
    PlayoffGame,
    PlayoffPicks,
    PlayoffRound,
    RequirementType,
    Selection,
    Selections,
    Team,
    TeamPath,
    TeamRecord,
    TeamStanding,
    TeamWithSeed,
)
from .records import calculate_team_records, calculate_streak, calculate_last_five, game_outcome
from .tiebreakers import break_tie, strength_of_schedule, strength_of_victory
from .seeding import calculate_playoff_seedings, resolve_wild_card_ties, sort_with_tiebreakers
from .bracket import build_conference_bracket, build_playoff_bracket, seeds_from_standings
from .magic_numbers import calculate_magic_number, check_elimination, is_clinched, is_eliminated
from .scenarios import calculate_team_paths, get_clinch_conditions
from .draft_order import calculate_draft_order
from .standings import calculate_standings, calculate_league_standings

__all__ = [
    # Models
    "BracketState",
    "Clinch",
    "ClinchCondition",
    "Conference",
    "ConferencePicks",
    "DraftPick",
    "EliminationResult",
    "Game",
    "GameStatus",
    "Goal",
    "MagicNumberResult",
    "MagicNumbers",
    "Outcome",
    "PathRequirement",
    "PlayoffBracket",
    "PlayoffGame",
    "PlayoffPicks",
    "PlayoffRound",
    "RequirementType",
    "Selection",
    "Selections",
    "Team",
    "TeamPath",
    "TeamRecord",
    "TeamStanding",
    "TeamWithSeed",
    # Records
    "calculate_team_records",
    "calculate_streak",
    "calculate_last_five",
    "game_outcome",
    # Tiebreakers
    "break_tie",
    "strength_of_schedule",
    "strength_of_victory",
    # Seeding
    "calculate_playoff_seedings",
    "resolve_wild_card_ties",
    "sort_with_tiebreakers",
    # Bracket
    "build_conference_bracket",
    "build_playoff_bracket",
    "seeds_from_standings",
    # Scenario search
    "calculate_magic_number",
    "check_elimination",
    "is_clinched",
    "is_eliminated",
    "calculate_team_paths",
    "get_clinch_conditions",
    # Draft order
    "calculate_draft_order",
    # Standings
    "calculate_standings",
    "calculate_league_standings",
]
