"""
Standings engine.

Applies matchdays to a StandingsTable and takes a ranking snapshot after
each one. The table is created once per run and passed explicitly to every
call; nothing here keeps module-level state.

Ranking order is points, then goal difference, then goals scored (all
descending), then team name ascending. The name makes the order total, so a
snapshot depends only on the match history.
"""

from collections.abc import Iterable, Iterator
from typing import Optional

from ..models import Matchday, MatchResult, RankingEntry, RankingSnapshot, TeamStanding
from ..utils.logger import get_logger, rankings_logger
from .config import DEFAULT_TOP_N

logger = get_logger()


class StandingsTable:
    """Mapping of team name to TeamStanding, filled as teams appear."""

    def __init__(self) -> None:
        self._standings: dict[str, TeamStanding] = {}

    def get_or_create(self, name: str) -> TeamStanding:
        """Return the standing for a team, inserting a zeroed one if absent."""
        standing = self.get(name)
        if standing is None:
            standing = TeamStanding(name=name)
            self._standings[name] = standing
            logger.debug("New team in table", extra={"team": name})
        return standing

    def get(self, name: str) -> Optional[TeamStanding]:
        return self._standings.get(name)

    def total_points(self) -> int:
        return sum(standing.points for standing in self._standings.values())

    def __contains__(self, name: object) -> bool:
        return name in self._standings

    def __len__(self) -> int:
        return len(self._standings)

    def __iter__(self) -> Iterator[TeamStanding]:
        return iter(self._standings.values())


def ranking_key(standing: TeamStanding) -> tuple[int, int, int, str]:
    """Sort key for the league table, best team first."""
    return (
        -standing.points,
        -standing.goal_difference,
        -standing.goals_for,
        standing.name,
    )


def apply_match(table: StandingsTable, match: MatchResult) -> None:
    """Apply one match result to both teams' standings."""
    home = table.get_or_create(match.home_team)
    away = table.get_or_create(match.away_team)
    home.record(match.home_goals, match.away_goals)
    away.record(match.away_goals, match.home_goals)


def rank_teams(table: StandingsTable) -> list[TeamStanding]:
    """All teams in the table in ranking order."""
    return sorted(table, key=ranking_key)


def take_snapshot(
    table: StandingsTable, matchday: int, top_n: int = DEFAULT_TOP_N
) -> RankingSnapshot:
    """Freeze the top of the table.

    Args:
        table: Current standings
        matchday: Number of the matchday just applied
        top_n: Maximum number of teams in the snapshot

    Returns:
        RankingSnapshot: Copies of the top ``top_n`` standings
    """
    if top_n < 1:
        raise ValueError(f"top_n must be at least 1, got {top_n}")

    leaders = rank_teams(table)[:top_n]
    return RankingSnapshot(
        matchday=matchday,
        entries=tuple(
            RankingEntry.from_standing(position, standing)
            for position, standing in enumerate(leaders, start=1)
        ),
    )


def apply_matchday(
    table: StandingsTable,
    matches: Iterable[MatchResult],
    matchday: int = 1,
    top_n: int = DEFAULT_TOP_N,
) -> RankingSnapshot:
    """Apply all matches of a matchday, then snapshot the table.

    Args:
        table: Standings to update in place
        matches: Matches of the matchday in input order
        matchday: Number of the matchday, used to label the snapshot
        top_n: Maximum number of teams in the snapshot

    Returns:
        RankingSnapshot: Top of the table after the matchday
    """
    match_count = 0
    for match in matches:
        apply_match(table, match)
        match_count += 1

    snapshot = take_snapshot(table, matchday, top_n)
    rankings_logger.log_matchday_applied(snapshot, match_count)
    return snapshot


def run_league(
    matchdays: Iterable[Matchday],
    top_n: int = DEFAULT_TOP_N,
    table: Optional[StandingsTable] = None,
) -> Iterator[RankingSnapshot]:
    """Apply matchdays in order and yield a snapshot after each one.

    Args:
        matchdays: Matchdays in input order
        top_n: Maximum number of teams per snapshot
        table: Table to update, a new empty one when omitted

    Yields:
        RankingSnapshot: One per matchday
    """
    if table is None:
        table = StandingsTable()

    for matchday in matchdays:
        yield apply_matchday(table, matchday.matches, matchday.number, top_n)
