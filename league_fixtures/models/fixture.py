from datetime import date, datetime, time, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

# Kickoff substituted when the real time is not confirmed yet (UTC time-of-day)
PLACEHOLDER_KICKOFF = time(12, 0)


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are taken to be UTC already; aware ones are converted."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_placeholder_kickoff(
    kickoff_utc: datetime, placeholder: time = PLACEHOLDER_KICKOFF
) -> bool:
    return as_utc(kickoff_utc).time() == placeholder.replace(tzinfo=None)


class SourceFixture(BaseModel):
    """One participant's own declaration of a match, before reconciliation."""

    model_config = ConfigDict(frozen=True)

    round_number: int
    # Position of the match inside its round as declared by the season source
    slot: int = 0
    kickoff_utc: datetime
    venue: str = ""
    home_team: str
    away_team: str
    notes: Optional[str] = None

    @field_validator("kickoff_utc")
    @classmethod
    def _kickoff_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @property
    def date_key(self) -> date:
        return self.kickoff_utc.date()


class FixtureRecord(BaseModel):
    """A single reconciled match in a league's master fixture list."""

    model_config = ConfigDict(frozen=True)

    match_number: int = Field(..., ge=1)
    round_number: int
    kickoff_utc: datetime
    venue: str = ""
    home_team: str  # Canonical name
    away_team: str  # Canonical name
    league_id: str

    @field_validator("kickoff_utc")
    @classmethod
    def _kickoff_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    @computed_field  # type: ignore[misc]
    @property
    def date_key(self) -> date:
        return self.kickoff_utc.date()

    @property
    def uses_placeholder_kickoff(self) -> bool:
        return is_placeholder_kickoff(self.kickoff_utc)

    @property
    def description(self) -> str:
        """A human-readable description of the fixture."""
        return (
            f"{self.league_id} #{self.match_number}: {self.home_team} v {self.away_team} "
            f"({self.kickoff_utc.strftime('%Y-%m-%d %H:%M')} UTC)"
        )
