# Rankings module

from .config import RankingConfig
from .engine import (
    StandingsTable,
    apply_match,
    apply_matchday,
    rank_teams,
    ranking_key,
    run_league,
    take_snapshot,
)
from .errors import InputError, LeagueRankingsError, ParseError
from .parser import is_matchday_delimiter, parse_match_line
from .reader import group_matchdays, read_matchdays

__all__ = [
    "RankingConfig",
    "StandingsTable",
    "apply_match",
    "apply_matchday",
    "rank_teams",
    "ranking_key",
    "run_league",
    "take_snapshot",
    "InputError",
    "LeagueRankingsError",
    "ParseError",
    "is_matchday_delimiter",
    "parse_match_line",
    "group_matchdays",
    "read_matchdays",
]
