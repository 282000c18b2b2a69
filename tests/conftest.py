from datetime import datetime, timezone

import pytest

from league_fixtures.catalog import FixtureCatalog, build_catalog
from league_fixtures.config.settings import AppSettings
from league_fixtures.identity.codec import MatchIdentityCodec
from league_fixtures.models.fixture import FixtureRecord, SourceFixture
from league_fixtures.normalization.canonicalizer import (
    DEFAULT_TEAM_ALIASES,
    TeamNameCanonicalizer,
)
from league_fixtures.reconciliation.reconciler import FixtureReconciler
from league_fixtures.registry.team_registry import TeamRegistry
from league_fixtures.resolution.resolver import MatchResolver


def utc(text: str) -> datetime:
    return datetime.fromisoformat(text.replace("Z", "+00:00")).astimezone(timezone.utc)


def source(home: str, away: str, kickoff: str, round_number: int = 1, slot: int = 0, venue: str = "") -> SourceFixture:
    return SourceFixture(
        round_number=round_number,
        slot=slot,
        kickoff_utc=utc(kickoff),
        venue=venue,
        home_team=home,
        away_team=away,
    )


@pytest.fixture
def app_settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def registry() -> TeamRegistry:
    return TeamRegistry.bundled()


@pytest.fixture
def canonicalizer(registry: TeamRegistry) -> TeamNameCanonicalizer:
    return TeamNameCanonicalizer(
        [team.name for team in registry.teams], DEFAULT_TEAM_ALIASES
    )


@pytest.fixture
def reconciler(canonicalizer: TeamNameCanonicalizer, registry: TeamRegistry) -> FixtureReconciler:
    return FixtureReconciler(canonicalizer, registry)


@pytest.fixture
def codec() -> MatchIdentityCodec:
    return MatchIdentityCodec()


@pytest.fixture
def resolver(codec: MatchIdentityCodec) -> MatchResolver:
    return MatchResolver(codec)


@pytest.fixture
def roosters_v_tigers() -> FixtureRecord:
    return FixtureRecord(
        match_number=7,
        round_number=2,
        kickoff_utc=utc("2026-03-14T08:00:00Z"),
        venue="Allianz Stadium",
        home_team="Sydney Roosters",
        away_team="Wests Tigers",
        league_id="NRL",
    )


@pytest.fixture
def catalog(app_settings: AppSettings) -> FixtureCatalog:
    return build_catalog(app_settings=app_settings)
