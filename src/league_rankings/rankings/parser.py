"""Match record parser.

Turns one line of input into a MatchResult. The accepted format is

    <home team> <home goals>, <away team> <away goals>

e.g. ``San Jose Earthquakes 3, Santa Cruz Slugs 3``. Team names may contain
spaces; the score is the last whitespace-separated token of each half.
"""

import re

from pydantic import ValidationError

from ..models import MatchResult
from .errors import ParseError

MATCHDAY_DELIMITER = re.compile(r"^-{3,}$")
SCORE_PATTERN = re.compile(r"^\d+$")
NEGATIVE_SCORE_PATTERN = re.compile(r"^-\d+$")


def is_matchday_delimiter(line: str) -> bool:
    """Check whether a line closes the current matchday (``---``)."""
    return bool(MATCHDAY_DELIMITER.match(line.strip()))


def _parse_score(token: str, line: str) -> int:
    if SCORE_PATTERN.match(token):
        return int(token)
    if NEGATIVE_SCORE_PATTERN.match(token):
        raise ParseError(f"Negative score '{token}' in line: {line!r}", line=line)
    raise ParseError(f"Score '{token}' is not a number in line: {line!r}", line=line)


def _parse_side(side: str, line: str) -> tuple[str, int]:
    """Split ``<team name> <goals>`` at the last whitespace run."""
    fields = side.strip().rsplit(None, 1)
    if len(fields) != 2:
        raise ParseError(
            f"Expected '<team> <score>' but got {side.strip()!r} in line: {line!r}",
            line=line,
        )
    team, score = fields
    return team.strip(), _parse_score(score, line)


def parse_match_line(line: str) -> MatchResult:
    """Parse a single match line.

    Args:
        line: Raw input line, surrounding whitespace is ignored

    Returns:
        MatchResult: The parsed match

    Raises:
        ParseError: If the line has the wrong number of fields, a missing team
            name, a non-numeric or negative score, or the same team twice
    """
    raw = line.strip()
    sides = raw.split(",")
    if len(sides) != 2:
        raise ParseError(
            f"Expected two comma-separated teams, found {len(sides)} field(s) "
            f"in line: {raw!r}",
            line=raw,
        )

    home_team, home_goals = _parse_side(sides[0], raw)
    away_team, away_goals = _parse_side(sides[1], raw)

    try:
        return MatchResult(
            home_team=home_team,
            away_team=away_team,
            home_goals=home_goals,
            away_goals=away_goals,
        )
    except ValidationError as e:
        reason = "; ".join(error["msg"] for error in e.errors())
        raise ParseError(f"Invalid match {raw!r}: {reason}", line=raw) from e
