"""
Tests for record aggregation.
"""

import pytest

from nfl_scenarios.simulator import (
    Outcome,
    Selection,
    calculate_last_five,
    calculate_streak,
    calculate_team_records,
    game_outcome,
)
from nfl_scenarios.simulator.models import Game, GameStatus
from helpers import make_game, team


class TestGameOutcome:
    """Tests for deciding a single game."""

    def test_final_score_decides(self):
        """Test that a final score decides the game."""
        game = make_game("BUF", "MIA", 31, 10)
        assert game_outcome(game, {}) == (Outcome.WIN, False)

    def test_final_score_ignores_selection(self):
        """Test that selections are ignored for final games."""
        game = make_game("BUF", "MIA", 10, 31)
        assert game_outcome(game, {game.id: Selection.HOME}) == (Outcome.LOSS, False)

    def test_final_tie(self):
        """Test that equal final scores are a tie."""
        game = make_game("HOU", "IND", 20, 20)
        assert game_outcome(game, {}) == (Outcome.TIE, False)

    def test_selection_decides_open_game(self):
        """Test that a selection decides a game that is not final."""
        game = make_game("BUF", "MIA")
        assert game_outcome(game, {game.id: Selection.AWAY}) == (Outcome.LOSS, True)
        assert game_outcome(game, {game.id: "tie"}) == (Outcome.TIE, True)

    def test_undecided_game(self):
        """Test that an open, unselected game has no outcome."""
        assert game_outcome(make_game("BUF", "MIA"), {}) is None

    def test_final_without_scores_is_open(self):
        """Test that a game marked final but missing scores falls back to selections."""
        game = Game(id="x1", week=1, home_team=team("BUF"), away_team=team("MIA"), status=GameStatus.FINAL)
        assert game_outcome(game, {}) is None
        assert game_outcome(game, {"x1": Selection.HOME}) == (Outcome.WIN, True)


class TestCalculateTeamRecords:
    """Tests for calculate_team_records."""

    def test_every_team_has_a_record(self, teams):
        """Test that teams without games still get an empty record."""
        records = calculate_team_records(teams, [], {})
        assert len(records) == 32
        assert records["14"].games_played == 0
        assert records["14"].win_pct == 0.0

    def test_division_and_conference_tallies(self, teams):
        """Test that division games also count as conference games."""
        games = [
            make_game("BUF", "MIA", 24, 17),  # division
            make_game("BUF", "KC", 20, 27),  # conference
            make_game("BUF", "DAL", 20, 20),  # non-conference
        ]
        buf = calculate_team_records(teams, games, {})["1"]

        assert (buf.wins, buf.losses, buf.ties) == (1, 1, 1)
        assert (buf.division_wins, buf.division_losses, buf.division_ties) == (1, 0, 0)
        assert (buf.conference_wins, buf.conference_losses, buf.conference_ties) == (1, 1, 0)
        assert buf.points_for == 64
        assert buf.points_against == 64
        assert buf.record_str == "1-1-1"

    def test_projected_scores(self, teams):
        """Test that selected results use the 24-17 and 20-20 placeholder scores."""
        win = make_game("BUF", "MIA")
        tie = make_game("BUF", "NE")
        records = calculate_team_records(teams, [win, tie], {win.id: Selection.AWAY, tie.id: Selection.TIE})

        buf, mia = records["1"], records["2"]
        assert (buf.points_for, buf.points_against) == (37, 44)
        assert (mia.points_for, mia.points_against) == (24, 17)
        assert all(result.projected for result in buf.results)

    def test_unselected_games_are_excluded(self, teams):
        """Test that open games without a selection are left out of both records."""
        records = calculate_team_records(teams, [make_game("BUF", "MIA")], {})
        assert records["1"].games_played == 0
        assert records["2"].results == []

    def test_counted_games_match_record(self, teams, season_2022):
        """Test that wins + losses + ties equals the counted games for every team."""
        records = calculate_team_records(teams, season_2022, {})
        for record in records.values():
            assert record.wins + record.losses + record.ties == len(record.results)
            counted = sum(1 for g in season_2022 if g.involves(record.team.id))
            assert len(record.results) == counted

    def test_2022_records(self, teams, season_2022):
        """Test a few known 2022 final records."""
        records = calculate_team_records(teams, season_2022, {})
        assert records["14"].record_str == "14-3"
        assert records["1"].record_str == "13-3"
        assert records["18"].record_str == "9-7-1"
        assert records["19"].win_pct == pytest.approx(14 / 17)


class TestStreaks:
    """Tests for streak and last-five summaries."""

    def test_streak(self, teams, season_2022):
        """Test Kansas City's closing five-game win streak."""
        records = calculate_team_records(teams, season_2022, {})
        assert calculate_streak(records["14"]) == "W5"

    def test_streak_empty(self, teams):
        """Test that a team with no games has no streak."""
        records = calculate_team_records(teams, [], {})
        assert calculate_streak(records["1"]) == ""

    def test_last_five_most_recent_first(self, teams, season_2022):
        """Test that the last five games come back newest first."""
        records = calculate_team_records(teams, season_2022, {})
        last_five = calculate_last_five(records["14"])

        assert [game.week for game in last_five] == [18, 17, 16, 15, 14]
        assert all(game.result == Outcome.WIN for game in last_five)
        assert last_five[0].opponent_id == "15"
        assert (last_five[0].points_for, last_five[0].points_against) == (31, 13)
