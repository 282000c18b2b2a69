from datetime import date, time
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from league_fixtures.models.enums import League
from league_fixtures.models.fixture import (
    PLACEHOLDER_KICKOFF,
    FixtureRecord,
    SourceFixture,
    is_placeholder_kickoff,
)
from league_fixtures.normalization.canonicalizer import TeamNameCanonicalizer
from league_fixtures.registry.team_registry import TeamRegistry

# (kickoff date, canonical home, canonical away)
DedupKey = Tuple[date, str, str]


class FixtureReconciler:
    """Merges every team's own fixture list into one master list per league.

    Two declarations describe the same match when they share the kickoff
    date and canonical home/away names; the exact kickoff time may differ
    between sources.
    """

    def __init__(
        self,
        canonicalizer: TeamNameCanonicalizer,
        registry: TeamRegistry,
        placeholder: Optional[time] = None,
    ):
        self.canonicalizer = canonicalizer
        self.registry = registry
        self.placeholder = placeholder if placeholder is not None else PLACEHOLDER_KICKOFF

    def should_replace(self, current: SourceFixture, candidate: SourceFixture) -> bool:
        """Confirmed kickoffs beat placeholders; otherwise the earlier kickoff wins."""
        current_placeholder = is_placeholder_kickoff(current.kickoff_utc, self.placeholder)
        candidate_placeholder = is_placeholder_kickoff(
            candidate.kickoff_utc, self.placeholder
        )
        if current_placeholder != candidate_placeholder:
            return current_placeholder and not candidate_placeholder
        return candidate.kickoff_utc < current.kickoff_utc

    def _dedup_key(self, fixture: SourceFixture) -> Optional[DedupKey]:
        home = self.canonicalizer.canonicalize(fixture.home_team)
        away = self.canonicalizer.canonicalize(fixture.away_team)
        if not self.registry.find_by_name(home) or not self.registry.find_by_name(away):
            logger.warning(
                f"Dropping fixture {fixture.home_team} v {fixture.away_team} "
                f"(round {fixture.round_number}): team not in registry."
            )
            return None
        return (fixture.date_key, home, away)

    def reconcile(
        self,
        fixtures_by_team: Mapping[str, Sequence[SourceFixture]],
        league_id: str,
    ) -> List[FixtureRecord]:
        """Builds the deduplicated master list, ordered by kickoff."""
        league = League.from_hint(league_id)
        if league is None:
            logger.warning(f"Unknown league '{league_id}', nothing to reconcile.")
            return []

        # Scan in declared round order; sorted() is stable, so ties keep team order
        declarations = sorted(
            (fixture for fixtures in fixtures_by_team.values() for fixture in fixtures),
            key=lambda fixture: (fixture.round_number, fixture.slot),
        )

        match_numbers: Dict[DedupKey, int] = {}
        chosen: Dict[DedupKey, SourceFixture] = {}
        for fixture in declarations:
            key = self._dedup_key(fixture)
            if key is None:
                continue
            if key not in match_numbers:
                match_numbers[key] = len(match_numbers) + 1
                chosen[key] = fixture
            elif self.should_replace(chosen[key], fixture):
                logger.debug(
                    f"Replacing {key[1]} v {key[2]} kickoff "
                    f"{chosen[key].kickoff_utc.isoformat()} with {fixture.kickoff_utc.isoformat()}"
                )
                chosen[key] = fixture

        master = [
            FixtureRecord(
                match_number=match_numbers[key],
                round_number=fixture.round_number,
                kickoff_utc=fixture.kickoff_utc,
                venue=fixture.venue,
                home_team=key[1],
                away_team=key[2],
                league_id=league.value,
            )
            for key, fixture in chosen.items()
        ]
        master.sort(key=lambda record: (record.kickoff_utc, record.match_number))

        logger.info(
            f"Reconciled {len(declarations)} declarations into {len(master)} "
            f"{league.value} fixtures."
        )
        return master
