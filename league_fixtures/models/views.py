from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .enums import MatchStatus


class _View(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class TeamRef(_View):
    id: str
    name: str


class Scores(_View):
    # Always empty here; live results are filled in by another service
    home: Optional[int] = None
    away: Optional[int] = None


class FixtureView(_View):
    """Fixture as handed to the HTTP layer. Dump with by_alias=True for camelCase."""

    id: str
    legacy_id: str
    match_number: int
    league: str
    date: str
    time: str
    timestamp: int  # Epoch milliseconds
    round: Optional[str] = None
    home_team: TeamRef
    away_team: TeamRef
    venue: str = ""
    status: MatchStatus = MatchStatus.NOT_STARTED
    scores: Scores = Scores()
