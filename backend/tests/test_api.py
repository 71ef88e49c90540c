"""
Tests for the HTTP API.
"""

import httpx
import pytest
import pytest_asyncio

from nfl_scenarios.api.dependencies import get_team_catalog
from nfl_scenarios.data import NFL_TEAMS
from nfl_scenarios.main import app


def game_payload(games):
    return [
        {
            "id": game.id,
            "week": game.week,
            "home_team_id": game.home_team.id,
            "away_team_id": game.away_team.id,
            "status": game.status.value,
            "home_score": game.home_score,
            "away_score": game.away_score,
        }
        for game in games
    ]


@pytest_asyncio.fixture
async def client():
    """Create an async client bound to the app."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def season_payload(season_2022):
    return {"games": game_payload(season_2022)}


@pytest.fixture
def week_18_payload(week_18_2022):
    return {"games": game_payload(week_18_2022)}


@pytest.fixture
def postseason_picks():
    return {
        "afc": {"wild_card": ["1", "6", "11"], "divisional": ["14", "6"], "championship": "14"},
        "nfc": {"wild_card": ["31", "18", "17"], "divisional": ["19", "31"], "championship": "19"},
        "super_bowl": "14",
    }


class TestMeta:
    """Tests for health and info endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        """Test the health check."""
        response = await client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_root(self, client):
        """Test the root endpoint."""
        response = await client.get("/")
        assert response.json()["docs"] == "/api/docs"


class TestTeamRoutes:
    """Tests for /api/teams."""

    @pytest.mark.asyncio
    async def test_list_teams(self, client):
        """Test listing the catalog."""
        response = await client.get("/api/teams")
        assert response.status_code == 200
        assert len(response.json()) == 32

    @pytest.mark.asyncio
    async def test_get_team(self, client):
        """Test fetching a single team."""
        response = await client.get("/api/teams/14")
        assert response.status_code == 200
        data = response.json()
        assert data["abbreviation"] == "KC"
        assert data["conference"] == "AFC"

    @pytest.mark.asyncio
    async def test_team_not_found(self, client):
        """Test 404 for an unknown team."""
        response = await client.get("/api/teams/99")
        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_catalog_override(self, client):
        """Test that the catalog comes from the dependency."""
        app.dependency_overrides[get_team_catalog] = lambda: NFL_TEAMS[:4]
        try:
            response = await client.get("/api/teams")
        finally:
            app.dependency_overrides.clear()
        assert [team["abbreviation"] for team in response.json()] == ["BUF", "MIA", "NE", "NYJ"]


class TestStandingsRoute:
    """Tests for /api/scenarios/standings."""

    @pytest.mark.asyncio
    async def test_2022_standings(self, client, season_payload):
        """Test the final 2022 standings."""
        response = await client.post("/api/scenarios/standings", json=season_payload)
        assert response.status_code == 200

        data = response.json()
        afc = [s["team"]["abbreviation"] for s in data["afc"][:7]]
        assert afc == ["KC", "BUF", "CIN", "JAX", "LAC", "BAL", "MIA"]
        assert data["afc"][0]["clinched"] == "bye"
        assert data["afc"][0]["record"]["record"] == "14-3"
        assert data["afc"][0]["magic_number"] is None
        assert len(data["nfc"]) == 16

    @pytest.mark.asyncio
    async def test_selection_applied(self, client, week_18_2022, week_18_payload):
        """Test that selections change the standings."""
        jax_ten = next(g for g in week_18_2022 if g.week == 18 and g.involves("11") and g.involves("12"))
        week_18_payload["selections"] = {jax_ten.id: "away" if jax_ten.home_team.id == "11" else "home"}

        response = await client.post("/api/scenarios/standings", json=week_18_payload)
        division_winners = [s["team"]["abbreviation"] for s in response.json()["afc"][:4]]
        assert "TEN" in division_winners

    @pytest.mark.asyncio
    async def test_unknown_team_in_games(self, client):
        """Test 400 when a game names an unknown team."""
        payload = {"games": [{"id": "x", "week": 1, "home_team_id": "14", "away_team_id": "99"}]}
        response = await client.post("/api/scenarios/standings", json=payload)
        assert response.status_code == 400
        assert "unknown team 99" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_bad_selection(self, client):
        """Test 422 for a selection outside home, away and tie."""
        payload = {"games": [], "selections": {"x": "draw"}}
        response = await client.post("/api/scenarios/standings", json=payload)
        assert response.status_code == 422


class TestPlayoffRoutes:
    """Tests for the bracket and draft order routes."""

    @pytest.mark.asyncio
    async def test_bracket_from_picks(self, client, season_payload, postseason_picks):
        """Test a bracket built from picks."""
        season_payload["playoff_picks"] = postseason_picks
        response = await client.post("/api/scenarios/bracket", json=season_payload)
        assert response.status_code == 200

        data = response.json()
        assert data["afc"]["champion"]["team"]["abbreviation"] == "KC"
        assert data["super_bowl"]["winner"]["team"]["abbreviation"] == "KC"
        assert len(data["afc"]["divisional_matchups"]) == 2

    @pytest.mark.asyncio
    async def test_stale_divisional_feed(self, client, season_payload):
        """Test that stale divisional feed teams are replaced by the computed matchups."""
        season_payload["playoff_games"] = [
            {"id": "wc1", "round": "wildCard", "conference": "AFC", "home_team_id": "11", "away_team_id": "16", "winner_id": "11"},
            {"id": "wc2", "round": "wildCard", "conference": "AFC", "home_team_id": "1", "away_team_id": "2", "winner_id": "1"},
            {"id": "wc3", "round": "wildCard", "conference": "AFC", "home_team_id": "6", "away_team_id": "5", "winner_id": "6"},
            {"id": "div1", "round": "divisional", "conference": "AFC", "home_team_id": "1", "away_team_id": "16", "winner_id": "6"},
        ]
        response = await client.post("/api/scenarios/bracket", json=season_payload)
        assert response.status_code == 200

        matchups = response.json()["afc"]["divisional_matchups"]
        pairs = [[side["team"]["abbreviation"] for side in matchup] for matchup in matchups]
        assert pairs == [["KC", "JAX"], ["BUF", "CIN"]]
        assert response.json()["afc"]["divisional_winners"][1]["team"]["abbreviation"] == "CIN"

    @pytest.mark.asyncio
    async def test_bad_round(self, client, season_payload):
        """Test 422 for an unknown playoff round."""
        season_payload["playoff_games"] = [
            {"id": "p1", "round": "quarterfinal", "home_team_id": "1", "away_team_id": "2"},
        ]
        response = await client.post("/api/scenarios/bracket", json=season_payload)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_complete_draft_order(self, client, season_payload, postseason_picks):
        """Test a complete draft order."""
        season_payload["playoff_picks"] = postseason_picks
        response = await client.post("/api/scenarios/draft-order", json=season_payload)
        assert response.status_code == 200

        data = response.json()
        assert data["complete"] is True
        assert len(data["picks"]) == 32
        assert data["picks"][0]["team"]["abbreviation"] == "CHI"
        assert data["picks"][-1]["reason"] == "Won Super Bowl"

    @pytest.mark.asyncio
    async def test_partial_draft_order(self, client, season_payload):
        """Test that an open postseason gives an incomplete order."""
        response = await client.post("/api/scenarios/draft-order", json=season_payload)
        data = response.json()
        assert data["complete"] is False
        assert len(data["picks"]) == 18


class TestTeamScenarioRoutes:
    """Tests for the per-team scenario routes."""

    @pytest.mark.asyncio
    async def test_magic_number(self, client, week_18_payload):
        """Test Jacksonville's division magic number before week 18."""
        response = await client.post("/api/scenarios/teams/11/magic-number?goal=division", json=week_18_payload)
        assert response.status_code == 200

        data = response.json()
        assert data["goal"] == "division"
        assert data["number"] == 1
        assert data["requirements"][0]["opponent_id"] == "12"

    @pytest.mark.asyncio
    async def test_magic_number_unknown_team(self, client, week_18_payload):
        """Test 404 for an unknown team."""
        response = await client.post("/api/scenarios/teams/99/magic-number", json=week_18_payload)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_bad_goal(self, client, week_18_payload):
        """Test 422 for an unknown goal."""
        response = await client.post("/api/scenarios/teams/11/magic-number?goal=title", json=week_18_payload)
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_paths(self, client, week_18_payload):
        """Test Jacksonville's division paths."""
        response = await client.post("/api/scenarios/teams/11/paths?goal=division", json=week_18_payload)
        data = response.json()

        assert data["team_id"] == "11"
        assert data["paths"][0]["description"] == "Win vs TEN"

    @pytest.mark.asyncio
    async def test_clinch_conditions(self, client, week_18_payload):
        """Test Jacksonville's clinch conditions."""
        response = await client.post("/api/scenarios/teams/11/clinch-conditions?goal=division", json=week_18_payload)
        descriptions = [c["description"] for c in response.json()["conditions"]]
        assert "Clinch with win vs TEN (Week 18)" in descriptions

    @pytest.mark.asyncio
    async def test_elimination(self, client, week_18_payload):
        """Test Denver's elimination status."""
        response = await client.post("/api/scenarios/teams/13/elimination", json=week_18_payload)
        data = response.json()

        assert data["is_eliminated"] is True
        assert data["reason"] == "Eliminated from playoff contention"
        assert "playoff" in data["eliminated_from"]
