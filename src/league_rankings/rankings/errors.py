"""Exceptions raised while reading and ranking a league."""

from pathlib import Path
from typing import Optional, Union


class LeagueRankingsError(Exception):
    """Base exception for league ranking failures."""

    pass


class InputError(LeagueRankingsError):
    """The input file is missing, unreadable or not valid text."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class ParseError(LeagueRankingsError):
    """A line of input is not a valid match record."""

    def __init__(
        self,
        message: str,
        line: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        super().__init__(message)
        self.line = line
        self.line_number = line_number

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            return f"line {self.line_number}: {message}"
        return message
