"""
Pydantic models for match results, standings and ranking snapshots.
"""

from .match_result import MatchResult, Matchday
from .standings import RankingEntry, RankingSnapshot, TeamStanding

__all__ = [
    "MatchResult",
    "Matchday",
    "RankingEntry",
    "RankingSnapshot",
    "TeamStanding",
]
