"""Unit tests for the match record parser."""

import pytest

from league_rankings.rankings.errors import ParseError
from league_rankings.rankings.parser import is_matchday_delimiter, parse_match_line


class TestParseMatchLine:
    """Test cases for parse_match_line."""

    def test_parse_draw(self):
        """Test parsing a line with multi-word team names."""
        match = parse_match_line("San Jose Earthquakes 3, Santa Cruz Slugs 3")

        assert match.home_team == "San Jose Earthquakes"
        assert match.away_team == "Santa Cruz Slugs"
        assert match.home_goals == 3
        assert match.away_goals == 3

    def test_parse_trims_whitespace(self):
        """Test that extra whitespace around fields is ignored."""
        match = parse_match_line("  Capitola Seahorses   1 ,  Aptos FC 0  \n")

        assert match.home_team == "Capitola Seahorses"
        assert match.away_team == "Aptos FC"
        assert match.home_goals == 1
        assert match.away_goals == 0

    def test_parse_is_deterministic(self):
        """Test that the same line always gives the same result."""
        line = "Felton Lumberjacks 2, Monterey United 0"

        assert parse_match_line(line) == parse_match_line(line)

    def test_parse_team_name_with_digits(self):
        """Test that only the last token of each half is the score."""
        match = parse_match_line("FC 1860 2, Team 2 1")

        assert match.home_team == "FC 1860"
        assert match.home_goals == 2
        assert match.away_team == "Team 2"
        assert match.away_goals == 1

    @pytest.mark.parametrize(
        "line",
        [
            "Team A 1 Team B 2",
            "Team A 1, Team B 2, Team C 3",
            "",
        ],
    )
    def test_wrong_field_count(self, line):
        """Test lines without exactly two comma-separated halves."""
        with pytest.raises(ParseError, match="two comma-separated teams"):
            parse_match_line(line)

    def test_missing_score(self):
        """Test a half without a score."""
        with pytest.raises(ParseError, match="is not a number"):
            parse_match_line("Team A, Team B 2")

    def test_missing_team_name(self):
        """Test a half with only a score."""
        with pytest.raises(ParseError, match="Expected '<team> <score>'"):
            parse_match_line("3, Team B 2")

    def test_non_numeric_score(self):
        """Test a score that is not a number."""
        with pytest.raises(ParseError, match="'two' is not a number"):
            parse_match_line("Team A two, Team B 2")

    def test_negative_score(self):
        """Test that negative scores are rejected."""
        with pytest.raises(ParseError, match="Negative score '-1'"):
            parse_match_line("Team A -1, Team B 2")

    def test_same_team_twice(self):
        """Test that a team cannot play itself."""
        with pytest.raises(ParseError, match="cannot be the same") as exc_info:
            parse_match_line("Team A 1, Team A 2")

        assert exc_info.value.line == "Team A 1, Team A 2"

    def test_parse_error_keeps_line(self):
        """Test the error carries the offending line."""
        with pytest.raises(ParseError) as exc_info:
            parse_match_line("garbage")

        assert exc_info.value.line == "garbage"
        assert exc_info.value.line_number is None


class TestMatchdayDelimiter:
    """Test cases for is_matchday_delimiter."""

    @pytest.mark.parametrize("line", ["---", "-----", "  ---  \n"])
    def test_delimiters(self, line):
        assert is_matchday_delimiter(line)

    @pytest.mark.parametrize("line", ["", "--", "- - -", "Team A 1, Team B 0", "---x"])
    def test_not_delimiters(self, line):
        assert not is_matchday_delimiter(line)
