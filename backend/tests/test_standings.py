"""
Tests for the standings orchestrator.
"""

from nfl_scenarios.simulator import (
    Clinch,
    Conference,
    Goal,
    MagicNumbers,
    calculate_league_standings,
    calculate_magic_number,
    calculate_standings,
)
from helpers import abbrs


class TestStandings:
    """Tests for calculate_standings."""

    def test_final_2022_with_magic_numbers(self, teams, season_2022):
        """Test magic numbers once the 2022 season is over."""
        standings = calculate_standings(Conference.AFC, teams, season_2022, {})
        by_abbr = {s.team.abbreviation: s for s in standings}

        assert by_abbr["KC"].magic_number == MagicNumbers(playoff=0, division=0, bye=0)
        assert by_abbr["BUF"].magic_number == MagicNumbers(playoff=0, division=0, bye=None)
        assert by_abbr["MIA"].magic_number == MagicNumbers(playoff=0, division=None, bye=None)

    def test_unseeded_teams_eliminated(self, teams, season_2022):
        """Test that non-qualifiers are eliminated with empty magic numbers."""
        standings = calculate_standings(Conference.AFC, teams, season_2022, {})
        out = [s for s in standings if s.seed is None]

        assert len(out) == 9
        for standing in out:
            assert standing.is_eliminated
            assert standing.magic_number == MagicNumbers()

    def test_seeded_teams_not_eliminated(self, teams, season_2022):
        """Test that seeded teams are never marked eliminated."""
        standings = calculate_standings(Conference.NFC, teams, season_2022, {})
        assert not any(s.is_eliminated for s in standings if s.seed is not None)

    def test_week_18_magic_numbers(self, teams, week_18_2022):
        """Test that standings agree with the standalone magic number search before week 18."""
        standings = calculate_standings(Conference.AFC, teams, week_18_2022, {})
        by_abbr = {s.team.abbreviation: s for s in standings}

        jax = by_abbr["JAX"].magic_number
        assert jax.division == 1
        assert jax.division == calculate_magic_number("11", Goal.DIVISION, teams, week_18_2022, {}).number

        mia = by_abbr["MIA"].magic_number
        assert not by_abbr["MIA"].is_eliminated
        assert mia.division is None
        assert mia.bye is None
        assert mia.playoff == calculate_magic_number("2", Goal.PLAYOFF, teams, week_18_2022, {}).number

    def test_without_magic_numbers(self, teams, week_18_2022):
        """Test that the scenario search can be skipped."""
        standings = calculate_standings(Conference.AFC, teams, week_18_2022, {}, include_magic_numbers=False)

        assert all(s.magic_number is None for s in standings)
        assert standings[0].clinched == Clinch.BYE

    def test_streak_and_last_five(self, teams, season_2022):
        """Test that streak and last five are filled in."""
        standings = calculate_standings(Conference.AFC, teams, season_2022, {}, include_magic_numbers=False)
        kc = next(s for s in standings if s.team.abbreviation == "KC")

        assert kc.streak == "W5"
        assert len(kc.last_five) == 5

    def test_to_dict(self, teams, season_2022):
        """Test a serialized standing."""
        data = calculate_standings(Conference.AFC, teams, season_2022, {})[0].to_dict()

        assert data["team"]["abbreviation"] == "KC"
        assert data["seed"] == 1
        assert data["clinched"] == "bye"
        assert data["record"]["record"] == "14-3"
        assert data["magic_number"] == {"playoff": 0, "division": 0, "bye": 0}


class TestLeagueStandings:
    """Tests for calculate_league_standings."""

    def test_both_conferences(self, teams, season_2022):
        """Test that both conferences come back in seed order."""
        standings = calculate_league_standings(teams, season_2022, {}, include_magic_numbers=False)

        assert set(standings) == {Conference.AFC, Conference.NFC}
        assert abbrs(standings[Conference.AFC][:7]) == ["KC", "BUF", "CIN", "JAX", "LAC", "BAL", "MIA"]
        assert abbrs(standings[Conference.NFC][:7]) == ["PHI", "SF", "MIN", "TB", "DAL", "NYG", "SEA"]
        assert len(standings[Conference.NFC]) == 16
