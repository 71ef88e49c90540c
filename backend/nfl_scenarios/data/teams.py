"""
Static catalog of the 32 NFL teams.

The catalog is plain data. Engine entry points take it as an explicit
argument rather than looking it up globally.
"""

from typing import Iterable, List, Optional, Tuple

from ..simulator.models import Conference, Team


DIVISIONS: Tuple[str, ...] = (
    "AFC East",
    "AFC North",
    "AFC South",
    "AFC West",
    "NFC East",
    "NFC North",
    "NFC South",
    "NFC West",
)


def _team(team_id: str, name: str, abbr: str, location: str, division: str,
          primary: str, secondary: str) -> Team:
    conference = Conference.AFC if division.startswith("AFC") else Conference.NFC
    return Team(
        id=team_id,
        name=name,
        abbreviation=abbr,
        location=location,
        division=division,
        conference=conference,
        primary_color=primary,
        secondary_color=secondary,
    )


NFL_TEAMS: Tuple[Team, ...] = (
    # AFC East
    _team("1", "Bills", "BUF", "Buffalo", "AFC East", "#00338D", "#C60C30"),
    _team("2", "Dolphins", "MIA", "Miami", "AFC East", "#008E97", "#FC4C02"),
    _team("3", "Patriots", "NE", "New England", "AFC East", "#002244", "#C60C30"),
    _team("4", "Jets", "NYJ", "New York", "AFC East", "#125740", "#FFFFFF"),
    # AFC North
    _team("5", "Ravens", "BAL", "Baltimore", "AFC North", "#241773", "#9E7C0C"),
    _team("6", "Bengals", "CIN", "Cincinnati", "AFC North", "#FB4F14", "#000000"),
    _team("7", "Browns", "CLE", "Cleveland", "AFC North", "#311D00", "#FF3C00"),
    _team("8", "Steelers", "PIT", "Pittsburgh", "AFC North", "#FFB612", "#101820"),
    # AFC South
    _team("9", "Texans", "HOU", "Houston", "AFC South", "#03202F", "#A71930"),
    _team("10", "Colts", "IND", "Indianapolis", "AFC South", "#002C5F", "#A2AAAD"),
    _team("11", "Jaguars", "JAX", "Jacksonville", "AFC South", "#006778", "#D7A22A"),
    _team("12", "Titans", "TEN", "Tennessee", "AFC South", "#0C2340", "#4B92DB"),
    # AFC West
    _team("13", "Broncos", "DEN", "Denver", "AFC West", "#FB4F14", "#002244"),
    _team("14", "Chiefs", "KC", "Kansas City", "AFC West", "#E31837", "#FFB81C"),
    _team("15", "Raiders", "LV", "Las Vegas", "AFC West", "#000000", "#A5ACAF"),
    _team("16", "Chargers", "LAC", "Los Angeles", "AFC West", "#0080C6", "#FFC20E"),
    # NFC East
    _team("17", "Cowboys", "DAL", "Dallas", "NFC East", "#003594", "#869397"),
    _team("18", "Giants", "NYG", "New York", "NFC East", "#0B2265", "#A71930"),
    _team("19", "Eagles", "PHI", "Philadelphia", "NFC East", "#004C54", "#A5ACAF"),
    _team("20", "Commanders", "WSH", "Washington", "NFC East", "#5A1414", "#FFB612"),
    # NFC North
    _team("21", "Bears", "CHI", "Chicago", "NFC North", "#0B162A", "#C83803"),
    _team("22", "Lions", "DET", "Detroit", "NFC North", "#0076B6", "#B0B7BC"),
    _team("23", "Packers", "GB", "Green Bay", "NFC North", "#203731", "#FFB612"),
    _team("24", "Vikings", "MIN", "Minnesota", "NFC North", "#4F2683", "#FFC62F"),
    # NFC South
    _team("25", "Falcons", "ATL", "Atlanta", "NFC South", "#A71930", "#000000"),
    _team("26", "Panthers", "CAR", "Carolina", "NFC South", "#0085CA", "#101820"),
    _team("27", "Saints", "NO", "New Orleans", "NFC South", "#D3BC8D", "#101820"),
    _team("28", "Buccaneers", "TB", "Tampa Bay", "NFC South", "#D50A0A", "#FF7900"),
    # NFC West
    _team("29", "Cardinals", "ARI", "Arizona", "NFC West", "#97233F", "#000000"),
    _team("30", "Rams", "LAR", "Los Angeles", "NFC West", "#003594", "#FFA300"),
    _team("31", "49ers", "SF", "San Francisco", "NFC West", "#AA0000", "#B3995D"),
    _team("32", "Seahawks", "SEA", "Seattle", "NFC West", "#002244", "#69BE28"),
)


def get_team_by_id(teams: Iterable[Team], team_id: str) -> Optional[Team]:
    for team in teams:
        if team.id == team_id:
            return team
    return None


def get_team_by_abbreviation(teams: Iterable[Team], abbreviation: str) -> Optional[Team]:
    abbreviation = abbreviation.upper()
    for team in teams:
        if team.abbreviation == abbreviation:
            return team
    return None


def get_teams_by_conference(teams: Iterable[Team], conference: Conference) -> List[Team]:
    return [team for team in teams if team.conference == conference]


def get_teams_by_division(teams: Iterable[Team], division: str) -> List[Team]:
    return [team for team in teams if team.division == division]
