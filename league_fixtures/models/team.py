# league_fixtures/models/team.py
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .enums import League


class TeamMeta(BaseModel):
    """Registry entry for a club: provider id, canonical name and home league."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str  # Canonical name
    league: League
    code: Optional[str] = None  # Season-data short code, e.g. "HKR"
    country: Optional[str] = None
    venue: Optional[str] = None
