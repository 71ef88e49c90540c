"""
Pydantic schemas for API request/response validation.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field


# ============== Team Schemas ==============

class TeamResponse(BaseModel):
    """A team from the catalog."""
    id: str
    name: str
    abbreviation: str
    location: str
    division: str
    conference: str
    primary_color: str = ""
    secondary_color: str = ""


class TeamWithSeedResponse(BaseModel):
    team: TeamResponse
    seed: int  # 0 for teams missing from the standings


# ============== Game Schemas ==============

class GameInput(BaseModel):
    """A regular season game, final or upcoming."""
    id: str = Field(..., min_length=1, max_length=50)
    week: int = Field(..., ge=1, le=22)
    home_team_id: str
    away_team_id: str
    status: str = Field(default="scheduled", pattern="^(scheduled|in_progress|final)$")
    home_score: Optional[int] = Field(default=None, ge=0)
    away_score: Optional[int] = Field(default=None, ge=0)


class PlayoffGameInput(BaseModel):
    """A postseason game as reported by a score feed."""
    id: str = Field(..., min_length=1, max_length=50)
    round: str = Field(..., pattern="^(wildCard|divisional|championship|superBowl)$")
    conference: Optional[str] = Field(default=None, pattern="^(AFC|NFC)$")
    home_team_id: str
    away_team_id: str
    status: str = Field(default="scheduled", pattern="^(scheduled|in_progress|final)$")
    home_score: Optional[int] = Field(default=None, ge=0)
    away_score: Optional[int] = Field(default=None, ge=0)
    winner_id: Optional[str] = None


class ConferencePicksInput(BaseModel):
    """Picked winners (team ids) for one conference, by matchup index."""
    wild_card: List[Optional[str]] = Field(default_factory=lambda: [None, None, None], max_length=3)
    divisional: List[Optional[str]] = Field(default_factory=lambda: [None, None], max_length=2)
    championship: Optional[str] = None


class PlayoffPicksInput(BaseModel):
    afc: ConferencePicksInput = Field(default_factory=ConferencePicksInput)
    nfc: ConferencePicksInput = Field(default_factory=ConferencePicksInput)
    super_bowl: Optional[str] = None


# ============== Scenario Request Schemas ==============

class ScenarioRequest(BaseModel):
    """Games plus hypothetical outcomes for the games that are not final."""
    games: List[GameInput] = Field(default_factory=list)
    selections: Dict[str, Literal["home", "away", "tie"]] = Field(default_factory=dict)


class StandingsRequest(ScenarioRequest):
    include_magic_numbers: bool = False  # scenario search for every team is slow


class PlayoffRequest(ScenarioRequest):
    playoff_games: List[PlayoffGameInput] = Field(default_factory=list)
    playoff_picks: PlayoffPicksInput = Field(default_factory=PlayoffPicksInput)


# ============== Standings Schemas ==============

class TeamRecordResponse(BaseModel):
    team_id: str
    wins: int
    losses: int
    ties: int
    division_wins: int
    division_losses: int
    division_ties: int
    conference_wins: int
    conference_losses: int
    conference_ties: int
    points_for: int
    points_against: int
    record: str
    division_record: str
    conference_record: str
    win_pct: float


class MagicNumbersResponse(BaseModel):
    playoff: Optional[int] = None
    division: Optional[int] = None
    bye: Optional[int] = None


class LastFiveGameResponse(BaseModel):
    week: int
    opponent_id: str
    result: str
    points_for: int
    points_against: int
    projected: bool


class TeamStandingResponse(BaseModel):
    """A team's place in its conference."""
    team: TeamResponse
    record: TeamRecordResponse
    seed: Optional[int] = None
    clinched: Optional[str] = None  # bye, division, playoff
    is_eliminated: bool
    magic_number: Optional[MagicNumbersResponse] = None
    streak: str
    last_five: List[LastFiveGameResponse]


class StandingsResponse(BaseModel):
    afc: List[TeamStandingResponse]
    nfc: List[TeamStandingResponse]


# ============== Bracket Schemas ==============

class BracketStateResponse(BaseModel):
    """One conference's side of the bracket."""
    seeds: List[TeamWithSeedResponse]
    wild_card_matchups: List[List[Optional[TeamWithSeedResponse]]]
    wild_card_winners: List[Optional[TeamWithSeedResponse]]
    divisional_matchups: List[List[Optional[TeamWithSeedResponse]]]
    divisional_winners: List[Optional[TeamWithSeedResponse]]
    championship_matchup: List[Optional[TeamWithSeedResponse]]
    champion: Optional[TeamWithSeedResponse] = None


class SuperBowlResponse(BaseModel):
    afc_champion: Optional[TeamWithSeedResponse] = None
    nfc_champion: Optional[TeamWithSeedResponse] = None
    winner: Optional[TeamWithSeedResponse] = None


class PlayoffBracketResponse(BaseModel):
    afc: BracketStateResponse
    nfc: BracketStateResponse
    super_bowl: SuperBowlResponse


# ============== Draft Order Schemas ==============

class DraftPickResponse(BaseModel):
    team: TeamResponse
    pick: int
    pick_max: Optional[int] = None
    record: str
    reason: str


class DraftOrderResponse(BaseModel):
    picks: List[DraftPickResponse]
    complete: bool  # every team placed


# ============== Scenario Schemas ==============

class PathRequirementResponse(BaseModel):
    game_id: str
    week: int
    type: str  # win, loss
    team_id: str
    opponent_id: str


class MagicNumberScenarioResponse(BaseModel):
    wins: int
    opponent_losses: int
    total: int
    requirements: List[PathRequirementResponse]


class MagicNumberResponse(BaseModel):
    """Magic number search result for one team and goal."""
    team_id: str
    goal: str
    number: Optional[int] = None
    wins_needed: int
    opponent_losses_needed: int
    requirements: List[PathRequirementResponse]
    relevant_games: List[str]
    scenarios: List[MagicNumberScenarioResponse]


class TeamPathResponse(BaseModel):
    path_type: str
    requirements: List[PathRequirementResponse]
    resulting_seed: int
    description: str


class TeamPathsResponse(BaseModel):
    team_id: str
    goal: str
    paths: List[TeamPathResponse]


class ClinchConditionResponse(BaseModel):
    type: str  # win, opponent_loses, win_and_opponent_loses
    description: str
    requirements: List[PathRequirementResponse]


class ClinchConditionsResponse(BaseModel):
    team_id: str
    goal: str
    conditions: List[ClinchConditionResponse]


class EliminationResponse(BaseModel):
    team_id: str
    is_eliminated: bool
    eliminated_from: List[str]
    reason: str
    best_possible_seed: Optional[int] = None
    worst_possible_seed: Optional[int] = None


# ============== Error Schemas ==============

class ErrorResponse(BaseModel):
    """API error response."""
    detail: str
    code: Optional[str] = None
