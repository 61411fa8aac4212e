"""Rendering of ranking snapshots.

The plain report is the line format expected by existing result fixtures:

    Matchday 1
    Felton Lumberjacks, 3 pts
    Capitola Seahorses, 3 pts
    San Jose Earthquakes, 1 pt

with one blank line between matchdays. The detailed view adds goal difference,
goals, matches played and the win/draw/loss record.
"""

from rich.table import Table

from ..models import RankingEntry, RankingSnapshot


def pluralize_points(points: int) -> str:
    return "pt" if points == 1 else "pts"


def format_entry(entry: RankingEntry) -> str:
    return f"{entry.name}, {entry.points} {pluralize_points(entry.points)}"


def format_snapshot(snapshot: RankingSnapshot) -> list[str]:
    """Lines of one matchday block, header first."""
    return [f"Matchday {snapshot.matchday}"] + [
        format_entry(entry) for entry in snapshot.entries
    ]


def format_goal_difference(goal_difference: int) -> str:
    return f"{goal_difference:+d}" if goal_difference else "0"


def build_snapshot_table(snapshot: RankingSnapshot) -> Table:
    """Build a rich table with the full statistics of a snapshot."""
    table = Table(
        title=f"Matchday {snapshot.matchday}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Team", style="green", min_width=20)
    table.add_column("Pts", style="bold yellow", justify="right")
    table.add_column("GD", style="cyan", justify="right")
    table.add_column("GF", justify="right")
    table.add_column("GA", justify="right")
    table.add_column("MP", style="dim", justify="right")
    table.add_column("W", justify="right")
    table.add_column("D", justify="right")
    table.add_column("L", justify="right")

    for entry in snapshot.entries:
        table.add_row(
            str(entry.position),
            entry.name,
            str(entry.points),
            format_goal_difference(entry.goal_difference),
            str(entry.goals_for),
            str(entry.goals_against),
            str(entry.matches_played),
            str(entry.wins),
            str(entry.draws),
            str(entry.losses),
        )

    return table
