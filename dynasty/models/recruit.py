from pydantic import BaseModel, ConfigDict, Field

from .enums import BattleWinner, Party, RecruitStatus


class RecruitEntry(BaseModel):
    """A single recruiting report. Entries are never updated, only appended."""

    model_config = ConfigDict(frozen=True)

    team: str = Field(..., description="Canonical team name.")
    party: Party = Field(Party.OTHER, description="Party the team resolved to.")
    prospect: str = Field(..., description="Prospect name as reported.")
    stars: int = Field(..., description="Scouting grade, usually 1-5.")
    position: str = Field("", description="Upper-cased position, e.g. 'QB'.")
    status: RecruitStatus

    @property
    def prospect_key(self) -> str:
        return self.prospect.strip().lower()


class BattleResult(BaseModel):
    """Reconciled outcome for a prospect both primary parties went after."""

    model_config = ConfigDict(frozen=True)

    prospect: str
    stars: int
    position: str
    winner: BattleWinner
    primary_a_status: RecruitStatus
    primary_b_status: RecruitStatus
