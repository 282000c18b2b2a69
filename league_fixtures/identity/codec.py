import base64
import binascii
from typing import Optional

from loguru import logger
from pydantic import ValidationError

from league_fixtures.models.fixture import FixtureRecord
from league_fixtures.models.identity import MatchIdentity

DEFAULT_ID_PREFIX = "local-"


def _to_base64url(value: str) -> str:
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii").rstrip("=")


def _from_base64url(value: str) -> str:
    padded = value + "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")


class MatchIdentityCodec:
    """Mints and reads the opaque and legacy string forms of a MatchIdentity.

    Current form: prefix + base64url(compact JSON of the identity), unpadded.
    Legacy form: prefix + "league-number-home-away", which can only be split
    back apart on a best-effort basis.
    """

    def __init__(self, prefix: str = DEFAULT_ID_PREFIX):
        self.prefix = prefix

    # --- Current scheme ---

    def encode_identity(self, identity: MatchIdentity) -> str:
        payload = identity.model_dump_json(by_alias=True)
        return f"{self.prefix}{_to_base64url(payload)}"

    def encode(
        self, league_id: str, match_number: int, home_team: str, away_team: str
    ) -> str:
        return self.encode_identity(
            MatchIdentity(
                league_id=league_id,
                match_number=match_number,
                home_team=home_team,
                away_team=away_team,
            )
        )

    def decode(self, match_id: Optional[str]) -> Optional[MatchIdentity]:
        """Returns the identity behind an id minted by encode, None for anything else."""
        if not match_id or not match_id.startswith(self.prefix):
            return None
        token = match_id[len(self.prefix) :]
        if not token:
            return None
        try:
            payload = _from_base64url(token)
            identity = MatchIdentity.model_validate_json(payload)
        except (binascii.Error, UnicodeError, ValueError, ValidationError):
            logger.debug(f"Not a current-scheme match id: {match_id}")
            return None

        # Lenient base64 decoding accepts strings encode would never emit
        if self.encode_identity(identity) != match_id:
            logger.debug(f"Match id is not in canonical form: {match_id}")
            return None
        return identity

    # --- Legacy scheme ---

    def legacy_encode(
        self, league_id: str, match_number: int, home_team: str, away_team: str
    ) -> str:
        return f"{self.prefix}{league_id}-{match_number}-{home_team}-{away_team}"

    def legacy_decode(self, match_id: Optional[str]) -> Optional[MatchIdentity]:
        """Splits a legacy id on hyphens: league, number, home (rest), away (last token).

        Team or league names containing hyphens are not split back correctly;
        ids already issued depend on this exact behaviour.
        """
        if not match_id or not match_id.startswith(self.prefix):
            return None
        tokens = match_id[len(self.prefix) :].split("-")
        if len(tokens) < 4:
            return None
        league_id, number, away_team = tokens[0], tokens[1], tokens[-1]
        home_team = "-".join(tokens[2:-1])
        if not (number.isascii() and number.isdigit()):
            return None
        if not league_id or not home_team or not away_team:
            return None
        return MatchIdentity(
            league_id=league_id,
            match_number=int(number),
            home_team=home_team,
            away_team=away_team,
        )

    # --- Records ---

    @staticmethod
    def identity_of(record: FixtureRecord) -> MatchIdentity:
        return MatchIdentity(
            league_id=record.league_id,
            match_number=record.match_number,
            home_team=record.home_team,
            away_team=record.away_team,
        )

    def match_id(self, record: FixtureRecord) -> str:
        return self.encode_identity(self.identity_of(record))

    def legacy_match_id(self, record: FixtureRecord) -> str:
        return self.legacy_encode(
            record.league_id, record.match_number, record.home_team, record.away_team
        )
