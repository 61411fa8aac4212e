"""Standings models.

TeamStanding is the running aggregate for one team and is mutated by the
standings engine. RankingEntry and RankingSnapshot are frozen copies taken
after a matchday, so later matchdays never change an emitted snapshot.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .match_result import DRAW_POINTS, LOSS_POINTS, WIN_POINTS


class TeamStanding(BaseModel):
    """Running league statistics for one team.

    Attributes:
        name: Team name, unique within a league
        points: Points earned so far
        goals_for: Goals scored
        goals_against: Goals conceded
        matches_played: Number of matches applied
        wins: Matches won
        draws: Matches drawn
        losses: Matches lost
    """

    name: str = Field(..., min_length=1, description="Team name")
    points: int = Field(default=0, ge=0, description="Points earned")
    goals_for: int = Field(default=0, ge=0, description="Goals scored")
    goals_against: int = Field(default=0, ge=0, description="Goals conceded")
    matches_played: int = Field(default=0, ge=0, description="Matches played")
    wins: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)

    @computed_field
    @property
    def goal_difference(self) -> int:
        """Goals scored minus goals conceded."""
        return self.goals_for - self.goals_against

    def record(self, scored: int, conceded: int) -> int:
        """Apply one match result to this standing.

        Args:
            scored: Goals scored by this team in the match
            conceded: Goals conceded by this team in the match

        Returns:
            int: Points awarded for the match
        """
        if scored > conceded:
            awarded = WIN_POINTS
            self.wins += 1
        elif scored == conceded:
            awarded = DRAW_POINTS
            self.draws += 1
        else:
            awarded = LOSS_POINTS
            self.losses += 1

        self.goals_for += scored
        self.goals_against += conceded
        self.matches_played += 1
        self.points += awarded
        return awarded


class RankingEntry(BaseModel):
    """One ranked team inside a snapshot."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(..., ge=1, description="1-based table position")
    name: str
    points: int
    goal_difference: int
    goals_for: int
    goals_against: int
    matches_played: int
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @classmethod
    def from_standing(cls, position: int, standing: TeamStanding) -> "RankingEntry":
        return cls(
            position=position,
            name=standing.name,
            points=standing.points,
            goal_difference=standing.goal_difference,
            goals_for=standing.goals_for,
            goals_against=standing.goals_against,
            matches_played=standing.matches_played,
            wins=standing.wins,
            draws=standing.draws,
            losses=standing.losses,
        )


class RankingSnapshot(BaseModel):
    """Top of the table frozen after one matchday.

    Attributes:
        matchday: 1-based number of the matchday the snapshot follows
        entries: Ranked teams, best first
    """

    model_config = ConfigDict(frozen=True)

    matchday: int = Field(..., ge=1, description="Matchday number")
    entries: tuple[RankingEntry, ...] = Field(default=(), description="Ranked teams")
