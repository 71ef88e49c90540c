"""
Data models for the standings and scenario engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Conference(str, Enum):
    """The two NFL conferences."""

    AFC = "AFC"
    NFC = "NFC"


class GameStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    FINAL = "final"


class Selection(str, Enum):
    """Hypothetical outcome picked for a game that is not final."""

    HOME = "home"
    AWAY = "away"
    TIE = "tie"


class Outcome(str, Enum):
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


class Clinch(str, Enum):
    BYE = "bye"
    DIVISION = "division"
    PLAYOFF = "playoff"


class Goal(str, Enum):
    """Scenario goals, each satisfied by a maximum seed."""

    PLAYOFF = "playoff"
    DIVISION = "division"
    BYE = "bye"

    @property
    def max_seed(self) -> int:
        return {Goal.PLAYOFF: 7, Goal.DIVISION: 4, Goal.BYE: 1}[self]


class PlayoffRound(str, Enum):
    WILD_CARD = "wildCard"
    DIVISIONAL = "divisional"
    CHAMPIONSHIP = "championship"
    SUPER_BOWL = "superBowl"


class RequirementType(str, Enum):
    WIN = "win"
    LOSS = "loss"


# game id -> hypothetical outcome
Selections = Dict[str, Selection]


@dataclass(frozen=True)
class Team:
    """A franchise from the static catalog."""

    id: str
    name: str
    abbreviation: str
    location: str
    division: str
    conference: Conference
    primary_color: str = ""
    secondary_color: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.location} {self.name}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "abbreviation": self.abbreviation,
            "location": self.location,
            "division": self.division,
            "conference": self.conference.value,
            "primary_color": self.primary_color,
            "secondary_color": self.secondary_color,
        }


@dataclass(frozen=True)
class Game:
    """A regular season game, final or still to be played."""

    id: str
    week: int
    home_team: Team
    away_team: Team
    status: GameStatus = GameStatus.SCHEDULED
    home_score: Optional[int] = None
    away_score: Optional[int] = None

    @property
    def is_final(self) -> bool:
        return (
            self.status == GameStatus.FINAL
            and self.home_score is not None
            and self.away_score is not None
        )

    @property
    def is_division_game(self) -> bool:
        return self.home_team.division == self.away_team.division

    @property
    def is_conference_game(self) -> bool:
        return self.home_team.conference == self.away_team.conference

    def involves(self, team_id: str) -> bool:
        return self.home_team.id == team_id or self.away_team.id == team_id

    def opponent_of(self, team_id: str) -> Team:
        return self.away_team if self.home_team.id == team_id else self.home_team

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "week": self.week,
            "home_team_id": self.home_team.id,
            "away_team_id": self.away_team.id,
            "status": self.status.value,
            "home_score": self.home_score,
            "away_score": self.away_score,
        }


@dataclass(frozen=True)
class PlayoffGame:
    """A postseason game as reported by an external feed."""

    id: str
    round: PlayoffRound
    home_team: Team
    away_team: Team
    conference: Optional[Conference] = None
    status: GameStatus = GameStatus.SCHEDULED
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    winner_id: Optional[str] = None

    def involves(self, team_id: str) -> bool:
        return self.home_team.id == team_id or self.away_team.id == team_id


@dataclass(frozen=True)
class CountedGame:
    """One game counted in a team's record, seen from that team's side."""

    game: Game
    opponent_id: str
    outcome: Outcome
    points_for: int
    points_against: int
    projected: bool = False


@dataclass
class TeamRecord:
    """Derived record for one team, rebuilt on every call."""

    team: Team
    wins: int = 0
    losses: int = 0
    ties: int = 0
    division_wins: int = 0
    division_losses: int = 0
    division_ties: int = 0
    conference_wins: int = 0
    conference_losses: int = 0
    conference_ties: int = 0
    points_for: int = 0
    points_against: int = 0
    results: List[CountedGame] = field(default_factory=list)

    @staticmethod
    def _pct(wins: int, losses: int, ties: int) -> float:
        total = wins + losses + ties
        if total == 0:
            return 0.0
        return (wins + 0.5 * ties) / total

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_pct(self) -> float:
        return self._pct(self.wins, self.losses, self.ties)

    @property
    def division_win_pct(self) -> float:
        return self._pct(self.division_wins, self.division_losses, self.division_ties)

    @property
    def conference_win_pct(self) -> float:
        return self._pct(self.conference_wins, self.conference_losses, self.conference_ties)

    @property
    def point_differential(self) -> int:
        return self.points_for - self.points_against

    @property
    def record_str(self) -> str:
        if self.ties:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    @property
    def division_record_str(self) -> str:
        return f"{self.division_wins}-{self.division_losses}-{self.division_ties}"

    @property
    def conference_record_str(self) -> str:
        return f"{self.conference_wins}-{self.conference_losses}-{self.conference_ties}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "team_id": self.team.id,
            "wins": self.wins,
            "losses": self.losses,
            "ties": self.ties,
            "division_wins": self.division_wins,
            "division_losses": self.division_losses,
            "division_ties": self.division_ties,
            "conference_wins": self.conference_wins,
            "conference_losses": self.conference_losses,
            "conference_ties": self.conference_ties,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "record": self.record_str,
            "division_record": self.division_record_str,
            "conference_record": self.conference_record_str,
            "win_pct": self.win_pct,
        }


@dataclass
class LastFiveGame:
    week: int
    opponent_id: str
    result: Outcome
    points_for: int
    points_against: int
    projected: bool

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "opponent_id": self.opponent_id,
            "result": self.result.value,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "projected": self.projected,
        }


@dataclass
class MagicNumbers:
    """Magic numbers per goal. 0 = clinched, None = eliminated or not found."""

    playoff: Optional[int] = None
    division: Optional[int] = None
    bye: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "playoff": self.playoff,
            "division": self.division,
            "bye": self.bye,
        }


@dataclass
class TeamStanding:
    """A team's place in its conference standings."""

    team: Team
    record: TeamRecord
    seed: Optional[int] = None
    clinched: Optional[Clinch] = None
    is_eliminated: bool = False
    magic_number: Optional[MagicNumbers] = None
    streak: str = ""
    last_five: List[LastFiveGame] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "team": self.team.to_dict(),
            "record": self.record.to_dict(),
            "seed": self.seed,
            "clinched": self.clinched.value if self.clinched else None,
            "is_eliminated": self.is_eliminated,
            "magic_number": self.magic_number.to_dict() if self.magic_number else None,
            "streak": self.streak,
            "last_five": [game.to_dict() for game in self.last_five],
        }


@dataclass(frozen=True)
class TeamWithSeed:
    team: Team
    seed: int

    def to_dict(self) -> dict:
        return {"team": self.team.to_dict(), "seed": self.seed}


Matchup = Tuple[Optional[TeamWithSeed], Optional[TeamWithSeed]]


def _matchup_dict(matchup: Matchup) -> List[Optional[dict]]:
    return [side.to_dict() if side else None for side in matchup]


def _winner_dict(winner: Optional[TeamWithSeed]) -> Optional[dict]:
    return winner.to_dict() if winner else None


@dataclass
class BracketState:
    """Matchups and winners for one conference's side of the bracket."""

    seeds: List[TeamWithSeed] = field(default_factory=list)
    wild_card_matchups: List[Matchup] = field(default_factory=list)
    wild_card_winners: List[Optional[TeamWithSeed]] = field(default_factory=list)
    divisional_matchups: List[Matchup] = field(default_factory=list)
    divisional_winners: List[Optional[TeamWithSeed]] = field(default_factory=list)
    championship_matchup: Matchup = (None, None)
    champion: Optional[TeamWithSeed] = None

    def to_dict(self) -> dict:
        return {
            "seeds": [seed.to_dict() for seed in self.seeds],
            "wild_card_matchups": [_matchup_dict(m) for m in self.wild_card_matchups],
            "wild_card_winners": [_winner_dict(w) for w in self.wild_card_winners],
            "divisional_matchups": [_matchup_dict(m) for m in self.divisional_matchups],
            "divisional_winners": [_winner_dict(w) for w in self.divisional_winners],
            "championship_matchup": _matchup_dict(self.championship_matchup),
            "champion": _winner_dict(self.champion),
        }


@dataclass
class SuperBowlState:
    afc_champion: Optional[TeamWithSeed] = None
    nfc_champion: Optional[TeamWithSeed] = None
    winner: Optional[TeamWithSeed] = None

    def to_dict(self) -> dict:
        return {
            "afc_champion": _winner_dict(self.afc_champion),
            "nfc_champion": _winner_dict(self.nfc_champion),
            "winner": _winner_dict(self.winner),
        }


@dataclass
class PlayoffBracket:
    afc: BracketState
    nfc: BracketState
    super_bowl: SuperBowlState

    def to_dict(self) -> dict:
        return {
            "afc": self.afc.to_dict(),
            "nfc": self.nfc.to_dict(),
            "super_bowl": self.super_bowl.to_dict(),
        }


@dataclass
class ConferencePicks:
    """User-picked winners (team ids) for one conference's playoff rounds."""

    wild_card: List[Optional[str]] = field(default_factory=lambda: [None, None, None])
    divisional: List[Optional[str]] = field(default_factory=lambda: [None, None])
    championship: Optional[str] = None


@dataclass
class PlayoffPicks:
    afc: ConferencePicks = field(default_factory=ConferencePicks)
    nfc: ConferencePicks = field(default_factory=ConferencePicks)
    super_bowl: Optional[str] = None

    def for_conference(self, conference: Conference) -> ConferencePicks:
        return self.afc if conference == Conference.AFC else self.nfc


@dataclass
class DraftPick:
    team: Team
    pick: int
    reason: str
    record: str
    pick_max: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "team": self.team.to_dict(),
            "pick": self.pick,
            "pick_max": self.pick_max,
            "record": self.record,
            "reason": self.reason,
        }


@dataclass
class PathRequirement:
    """A single game result a scenario depends on."""

    game_id: str
    week: int
    type: RequirementType
    team_id: str
    opponent_id: str

    @property
    def winner_id(self) -> str:
        return self.team_id if self.type == RequirementType.WIN else self.opponent_id

    @property
    def key(self) -> str:
        # same game result reads the same whichever side it was phrased from
        return f"{self.game_id}:{self.winner_id}"

    def to_dict(self) -> dict:
        return {
            "game_id": self.game_id,
            "week": self.week,
            "type": self.type.value,
            "team_id": self.team_id,
            "opponent_id": self.opponent_id,
        }


@dataclass
class MagicNumberScenario:
    wins: int
    opponent_losses: int
    requirements: List[PathRequirement] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.wins + self.opponent_losses

    def to_dict(self) -> dict:
        return {
            "wins": self.wins,
            "opponent_losses": self.opponent_losses,
            "total": self.total,
            "requirements": [r.to_dict() for r in self.requirements],
        }


@dataclass
class MagicNumberResult:
    """Outcome of the magic number search for one team and goal."""

    team_id: str
    goal: Goal
    number: Optional[int] = None
    wins_needed: int = 0
    opponent_losses_needed: int = 0
    requirements: List[PathRequirement] = field(default_factory=list)
    relevant_games: List[str] = field(default_factory=list)
    scenarios: List[MagicNumberScenario] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "goal": self.goal.value,
            "number": self.number,
            "wins_needed": self.wins_needed,
            "opponent_losses_needed": self.opponent_losses_needed,
            "requirements": [r.to_dict() for r in self.requirements],
            "relevant_games": self.relevant_games,
            "scenarios": [s.to_dict() for s in self.scenarios],
        }


@dataclass
class TeamPath:
    """One concrete set of results that lands the team a qualifying seed."""

    path_type: Goal
    requirements: List[PathRequirement]
    resulting_seed: int
    description: str

    def to_dict(self) -> dict:
        return {
            "path_type": self.path_type.value,
            "requirements": [r.to_dict() for r in self.requirements],
            "resulting_seed": self.resulting_seed,
            "description": self.description,
        }


@dataclass
class ClinchCondition:
    type: str
    description: str
    requirements: List[PathRequirement] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "description": self.description,
            "requirements": [r.to_dict() for r in self.requirements],
        }


@dataclass
class EliminationResult:
    team_id: str
    is_eliminated: bool = False
    eliminated_from: List[Goal] = field(default_factory=list)
    reason: str = ""
    best_possible_seed: Optional[int] = None
    worst_possible_seed: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "is_eliminated": self.is_eliminated,
            "eliminated_from": [goal.value for goal in self.eliminated_from],
            "reason": self.reason,
            "best_possible_seed": self.best_possible_seed,
            "worst_possible_seed": self.worst_possible_seed,
        }
