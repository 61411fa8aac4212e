"""Matchday reader.

Reads a results file and groups the parsed matches into matchdays. In a file
with ``---`` delimiter lines, matchdays end only at a delimiter. In a file
without any, a matchday ends when a match names a team that has already played
in the open matchday. Blank lines are ignored.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Union

from ..models import Matchday, MatchResult
from ..utils.logger import get_logger
from .errors import InputError, ParseError
from .parser import is_matchday_delimiter, parse_match_line

logger = get_logger()


def group_matchdays(lines: Iterable[str]) -> list[Matchday]:
    """Parse lines and group them into ordered matchdays.

    Every line is parsed before the result is returned, so a malformed line
    anywhere in the input fails the whole call. When the input contains at
    least one delimiter line, only delimiters end a matchday; otherwise a
    team appearing twice starts a new one.

    Args:
        lines: Raw input lines in file order

    Returns:
        list[Matchday]: Matchdays numbered from 1 in input order

    Raises:
        ParseError: On the first malformed line, with its 1-based line number
    """
    lines = list(lines)
    delimited = any(is_matchday_delimiter(line) for line in lines)

    matchdays: list[Matchday] = []
    current: list[MatchResult] = []
    teams_in_current: set[str] = set()

    def close_matchday() -> None:
        matchdays.append(Matchday(number=len(matchdays) + 1, matches=tuple(current)))
        current.clear()
        teams_in_current.clear()

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        if is_matchday_delimiter(line):
            close_matchday()
            continue

        try:
            match = parse_match_line(line)
        except ParseError as e:
            e.line_number = line_number
            raise

        # A team never plays twice on the same matchday
        if not delimited and teams_in_current.intersection(match.teams()):
            logger.debug(
                "Implicit matchday boundary",
                extra={"line_number": line_number, "matchday": len(matchdays) + 1},
            )
            close_matchday()

        current.append(match)
        teams_in_current.update(match.teams())

    if current:
        close_matchday()

    return matchdays


def read_matchdays(path: Union[str, Path]) -> list[Matchday]:
    """Read and group the matches of a results file.

    Args:
        path: Path to the results file

    Returns:
        list[Matchday]: Matchdays in file order

    Raises:
        InputError: If the file is missing, unreadable or not UTF-8 text
        ParseError: If any line is malformed
    """
    file_path = Path(path)
    if not file_path.exists():
        raise InputError(f"Input file not found: {file_path}", path=file_path)
    if not file_path.is_file():
        raise InputError(f"Input path is not a file: {file_path}", path=file_path)

    try:
        text = file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise InputError(
            f"Input file is not valid UTF-8 text: {file_path}", path=file_path
        ) from e
    except OSError as e:
        raise InputError(
            f"Cannot read input file {file_path}: {e}", path=file_path
        ) from e

    matchdays = group_matchdays(text.splitlines())
    logger.info(
        "Loaded results file",
        extra={
            "path": str(file_path),
            "matchdays": len(matchdays),
            "matches": sum(len(m.matches) for m in matchdays),
        },
    )
    return matchdays
