"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from league_rankings.models import (
    MatchResult,
    Matchday,
    RankingEntry,
    RankingSnapshot,
    TeamStanding,
)


class TestMatchResult:
    """Test cases for MatchResult Pydantic model."""

    def test_valid_match_creation(self):
        """Test creating a valid match result."""
        match = MatchResult(
            home_team="Capitola Seahorses",
            away_team="Aptos FC",
            home_goals=1,
            away_goals=0,
        )

        assert match.home_team == "Capitola Seahorses"
        assert match.away_team == "Aptos FC"
        assert match.home_goals == 1
        assert match.away_goals == 0
        assert match.teams() == ("Capitola Seahorses", "Aptos FC")

    def test_team_names_are_trimmed(self):
        """Test that surrounding whitespace is removed from team names."""
        match = MatchResult(
            home_team="  Team A ", away_team="Team B\t", home_goals=0, away_goals=0
        )

        assert match.home_team == "Team A"
        assert match.away_team == "Team B"

    def test_same_teams_rejected(self):
        """Test that a team cannot play itself."""
        with pytest.raises(ValidationError) as exc_info:
            MatchResult(home_team="Team A", away_team="Team A", home_goals=1, away_goals=1)

        assert "cannot be the same" in str(exc_info.value)

    def test_negative_goals_rejected(self):
        """Test that negative goal counts are rejected."""
        with pytest.raises(ValidationError):
            MatchResult(home_team="Team A", away_team="Team B", home_goals=-1, away_goals=0)

    def test_empty_team_name_rejected(self):
        """Test that blank team names are rejected."""
        with pytest.raises(ValidationError):
            MatchResult(home_team="   ", away_team="Team B", home_goals=0, away_goals=0)

    def test_match_is_immutable(self):
        """Test that a parsed match cannot be changed."""
        match = MatchResult(home_team="Team A", away_team="Team B", home_goals=2, away_goals=0)

        with pytest.raises(ValidationError):
            match.home_goals = 5


class TestMatchday:
    """Test cases for Matchday model."""

    def test_empty_matchday(self):
        """Test a matchday without matches."""
        matchday = Matchday(number=2)

        assert matchday.matches == ()

    def test_matchday_number_must_be_positive(self):
        """Test that matchdays are numbered from 1."""
        with pytest.raises(ValidationError):
            Matchday(number=0)


class TestTeamStanding:
    """Test cases for TeamStanding model."""

    def test_new_standing_is_zeroed(self):
        """Test a newly created standing."""
        standing = TeamStanding(name="Aptos FC")

        assert standing.points == 0
        assert standing.goals_for == 0
        assert standing.goals_against == 0
        assert standing.goal_difference == 0
        assert standing.matches_played == 0

    def test_record_win_draw_loss(self):
        """Test recording matches updates every counter."""
        standing = TeamStanding(name="Aptos FC")

        assert standing.record(2, 0) == 3
        assert standing.record(1, 1) == 1
        assert standing.record(0, 3) == 0

        assert standing.points == 4
        assert standing.goals_for == 3
        assert standing.goals_against == 4
        assert standing.goal_difference == -1
        assert standing.matches_played == 3
        assert (standing.wins, standing.draws, standing.losses) == (1, 1, 1)

    def test_points_per_match(self):
        """Test that a decisive match awards 3 points in total and a draw 2."""
        home, away = TeamStanding(name="A"), TeamStanding(name="B")

        assert home.record(0, 1) + away.record(1, 0) == 3
        assert home.record(2, 2) + away.record(2, 2) == 2

    def test_goal_difference_in_dump(self):
        """Test that the computed goal difference is serialized."""
        standing = TeamStanding(name="Aptos FC", goals_for=5, goals_against=2)

        assert standing.model_dump()["goal_difference"] == 3


class TestRankingSnapshot:
    """Test cases for RankingEntry and RankingSnapshot models."""

    def test_entry_is_copy_of_standing(self):
        """Test that an entry does not follow later changes to the standing."""
        standing = TeamStanding(name="Aptos FC")
        standing.record(2, 1)

        entry = RankingEntry.from_standing(1, standing)
        standing.record(0, 4)

        assert entry.points == 3
        assert entry.goal_difference == 1
        assert entry.goals_for == 2
        assert entry.matches_played == 1
        assert (entry.wins, entry.draws, entry.losses) == (1, 0, 0)

    def test_snapshot_is_immutable(self):
        """Test that an emitted snapshot cannot be changed."""
        snapshot = RankingSnapshot(matchday=1)

        with pytest.raises(ValidationError):
            snapshot.matchday = 2
