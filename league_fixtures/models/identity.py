from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class MatchIdentity(BaseModel):
    """Composite key of a match, as carried inside opaque match identifiers.

    The aliases are the payload keys of identifiers already handed out to
    consumers, so they must not change.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    league_id: StrictStr = Field(..., alias="leagueName")
    match_number: StrictInt = Field(..., alias="matchNumber")
    home_team: StrictStr = Field(..., alias="homeTeam")
    away_team: StrictStr = Field(..., alias="awayTeam")

    def as_tuple(self) -> Tuple[str, int, str, str]:
        return (self.league_id, self.match_number, self.home_team, self.away_team)
