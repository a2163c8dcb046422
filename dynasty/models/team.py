# dynasty/models/team.py
from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import Party


class Team(BaseModel):
    """A canonical team name tagged with the party it belongs to."""

    model_config = ConfigDict(frozen=True)

    name: str
    party: Party = Party.OTHER


class TeamRecord(BaseModel):
    """Cumulative win/loss record and scoring totals for one team."""

    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)
    points_for: int = Field(0, ge=0)
    points_against: int = Field(0, ge=0)

    @computed_field  # type: ignore[misc]
    @property
    def games(self) -> int:
        return self.wins + self.losses

    @computed_field  # type: ignore[misc]
    @property
    def point_differential(self) -> int:
        return self.points_for - self.points_against


class StandingsRow(BaseModel):
    """One line of the league table."""

    model_config = ConfigDict(frozen=True)

    rank: int
    team: str
    record: TeamRecord
    streak: int = 0  # signed, see StateStore


class RivalryTally(BaseModel):
    """Head-to-head wins between the two primary parties."""

    primary_a_wins: int = Field(0, ge=0)
    primary_b_wins: int = Field(0, ge=0)

    @property
    def games(self) -> int:
        return self.primary_a_wins + self.primary_b_wins

    def as_tuple(self) -> tuple[int, int]:
        return (self.primary_a_wins, self.primary_b_wins)
