"""
Utility modules for League Rankings.

This package provides the structured logging infrastructure.
"""

from .logger import LeagueRankingsLogger, get_logger, rankings_logger

__all__ = [
    "get_logger",
    "rankings_logger",
    "LeagueRankingsLogger",
]
