import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from league_fixtures.models.enums import League


class RoundMatch(BaseModel):
    """A match entry in a published round.

    Teams are referenced by season code ("HKR"), provider id or name.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    home_code: str
    away_code: Optional[str] = None  # None marks a bye
    kickoff_local: Optional[str] = None  # "HH:MM", None while TBC
    venue: str = ""
    notes: Optional[str] = None

    @field_validator("kickoff_local")
    @classmethod
    def _blank_kickoff_is_tbc(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()


class SeasonRound(BaseModel):
    model_config = ConfigDict(frozen=True)

    round: int
    matches: List[RoundMatch] = Field(default_factory=list)


class SeasonDefinition(BaseModel):
    """Ordered round definitions for one league season."""

    model_config = ConfigDict(frozen=True)

    league: League
    season: str
    rounds: List[SeasonRound] = Field(default_factory=list)
