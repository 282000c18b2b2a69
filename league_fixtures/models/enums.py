from enum import Enum
from typing import Optional


class League(str, Enum):
    NRL = "NRL"
    SUPER_LEAGUE = "Super League"

    @property
    def provider_id(self) -> str:
        """Numeric league id used by the upstream sports data provider."""
        return LEAGUE_PROVIDER_IDS[self]

    @classmethod
    def from_hint(cls, hint: Optional[str]) -> Optional["League"]:
        """Maps a league name, provider id or loose hint ("super", "nrl") to a League."""
        if hint is None:
            return None
        raw = str(hint).strip()
        if not raw:
            return None
        raw_lower = raw.lower()
        for league in cls:
            if raw_lower == league.value.lower() or raw == league.provider_id:
                return league
        if "super" in raw_lower:
            return cls.SUPER_LEAGUE
        if "nrl" in raw_lower:
            return cls.NRL
        return None


LEAGUE_PROVIDER_IDS = {
    League.NRL: "4416",
    League.SUPER_LEAGUE: "4415",
}


class MatchStatus(str, Enum):
    NOT_STARTED = "Not Started"
