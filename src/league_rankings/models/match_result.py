"""Match result models.

A MatchResult is one played match as read from the input file. Matches are
grouped into Matchday batches which the standings engine applies as a unit.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

WIN_POINTS = 3
DRAW_POINTS = 1
LOSS_POINTS = 0


class MatchResult(BaseModel):
    """Represents one played match.

    Attributes:
        home_team: Name of the home team
        away_team: Name of the away team
        home_goals: Goals scored by the home team
        away_goals: Goals scored by the away team
    """

    model_config = ConfigDict(frozen=True)

    home_team: str = Field(..., min_length=1, description="Name of the home team")
    away_team: str = Field(..., min_length=1, description="Name of the away team")
    home_goals: int = Field(..., ge=0, description="Goals scored by the home team")
    away_goals: int = Field(..., ge=0, description="Goals scored by the away team")

    @field_validator("home_team", "away_team", mode="before")
    @classmethod
    def strip_team_name(cls, v: object) -> object:
        """Trim surrounding whitespace from team names."""
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def validate_teams_different(self) -> "MatchResult":
        """Validate that home and away teams are different."""
        if self.home_team == self.away_team:
            raise ValueError("home_team and away_team cannot be the same")
        return self

    def teams(self) -> tuple[str, str]:
        return self.home_team, self.away_team


class Matchday(BaseModel):
    """An ordered batch of matches applied together before a snapshot is taken."""

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, description="1-based matchday number")
    matches: tuple[MatchResult, ...] = Field(
        default=(), description="Matches in input order"
    )
