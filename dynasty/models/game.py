from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import GameLabel
from .team import TeamRecord


class GameOutcome(BaseModel):
    """Result of a single reported final score, after state was updated."""

    model_config = ConfigDict(frozen=True)

    winner: str
    loser: str
    winning_score: int = Field(..., ge=0)
    losing_score: int = Field(..., ge=0)
    label: GameLabel
    rivalry_game: bool = False

    # Post-game snapshots
    winner_record: TeamRecord
    loser_record: TeamRecord
    winner_streak: int
    loser_streak: int

    @computed_field  # type: ignore[misc]
    @property
    def margin(self) -> int:
        return self.winning_score - self.losing_score

    @computed_field  # type: ignore[misc]
    @property
    def description(self) -> str:
        """A human-readable one-line summary of the game."""
        return (
            f"{self.winner} {self.winning_score}, {self.loser} {self.losing_score}"
            f" ({self.label.display})"
        )
