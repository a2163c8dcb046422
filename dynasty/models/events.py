from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from dynasty.models.enums import RecruitStatus


class GameReport(BaseModel):
    """A reported final score, as received from a front end."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    kind: Literal["game"] = "game"
    team_a: str
    score_a: int
    team_b: str
    score_b: int


class RecruitReport(BaseModel):
    """A reported recruiting outcome, as received from a front end."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["recruit"] = "recruit"
    team: str
    prospect: str
    stars: int
    position: str = ""
    status: RecruitStatus


LeagueEvent = Annotated[Union[GameReport, RecruitReport], Field(discriminator="kind")]

# Validates a whole events file (a JSON list) in one pass
event_list_adapter: TypeAdapter[List[LeagueEvent]] = TypeAdapter(List[LeagueEvent])
