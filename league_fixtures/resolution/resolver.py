from typing import List, Optional, Sequence

from loguru import logger

from league_fixtures.identity.codec import MatchIdentityCodec
from league_fixtures.models.fixture import FixtureRecord
from league_fixtures.models.identity import MatchIdentity
from league_fixtures.utils.misc_utils import names_fuzzy_match


class MatchResolver:
    """Finds the fixture behind any match id we have ever handed out.

    Resolution order:
        1. exact match on a fixture's current or legacy id
        2. decoded current-scheme id, fuzzy on team names
        3. decoded legacy id, fuzzy on team names

    The fuzzy steps keep old ids working after canonical team names change.
    "Not found" is a normal outcome and returns None.
    """

    def __init__(self, codec: MatchIdentityCodec):
        self.codec = codec

    def resolve(
        self, match_id: Optional[str], fixtures: Sequence[FixtureRecord]
    ) -> Optional[FixtureRecord]:
        if not match_id:
            return None

        for fixture in fixtures:
            if match_id in (self.codec.match_id(fixture), self.codec.legacy_match_id(fixture)):
                return fixture

        identity = self.codec.decode(match_id)
        if identity is not None:
            found = self._fuzzy_lookup(identity, fixtures)
            if found is not None:
                return found

        legacy_identity = self.codec.legacy_decode(match_id)
        if legacy_identity is not None:
            found = self._fuzzy_lookup(legacy_identity, fixtures)
            if found is not None:
                return found

        logger.debug(f"No fixture found for match id {match_id}")
        return None

    @staticmethod
    def _fuzzy_lookup(
        identity: MatchIdentity, fixtures: Sequence[FixtureRecord]
    ) -> Optional[FixtureRecord]:
        candidates: List[FixtureRecord] = [
            fixture
            for fixture in fixtures
            if fixture.match_number == identity.match_number
            and names_fuzzy_match(fixture.home_team, identity.home_team)
            and names_fuzzy_match(fixture.away_team, identity.away_team)
        ]
        if not candidates:
            return None
        if len(candidates) > 1:
            # Same number and similar names in several leagues: prefer the named league
            for fixture in candidates:
                if names_fuzzy_match(fixture.league_id, identity.league_id):
                    return fixture
        return candidates[0]
