from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import unquote

from loguru import logger

from league_fixtures.config.settings import AppSettings
from league_fixtures.config.settings import settings as default_settings
from league_fixtures.identity.codec import MatchIdentityCodec
from league_fixtures.models.enums import League
from league_fixtures.models.fixture import FixtureRecord
from league_fixtures.models.views import FixtureView, TeamRef
from league_fixtures.normalization.canonicalizer import (
    DEFAULT_TEAM_ALIASES,
    TeamNameCanonicalizer,
)
from league_fixtures.reconciliation.reconciler import FixtureReconciler
from league_fixtures.registry.team_registry import TeamIdentifier, TeamRegistry
from league_fixtures.resolution.resolver import MatchResolver
from league_fixtures.season.loader import FixturesByTeam, expand_season, load_season_file
from league_fixtures.season.models import SeasonDefinition
from league_fixtures.season.super_league_2026 import super_league_2026


class FixtureCatalog:
    """Immutable handle over the reconciled master lists of every league.

    Built once by build_catalog(); every method is a read-only lookup, so a
    single instance can be shared by any number of request handlers.
    """

    def __init__(
        self,
        master_fixtures: Mapping[League, Sequence[FixtureRecord]],
        registry: TeamRegistry,
        codec: MatchIdentityCodec,
        resolver: MatchResolver,
    ):
        self.registry = registry
        self.codec = codec
        self.resolver = resolver
        self._master: Mapping[League, Tuple[FixtureRecord, ...]] = MappingProxyType(
            {league: tuple(records) for league, records in master_fixtures.items()}
        )
        self._all_records: Tuple[FixtureRecord, ...] = tuple(
            record for records in self._master.values() for record in records
        )
        self._views: Mapping[Tuple[str, int], FixtureView] = MappingProxyType(
            {
                (record.league_id, record.match_number): self._to_view(record)
                for record in self._all_records
            }
        )

    @property
    def leagues(self) -> List[League]:
        return list(self._master.keys())

    def master_records(self, league: League) -> Tuple[FixtureRecord, ...]:
        return self._master.get(league, ())

    def _team_ref(self, name: str) -> TeamRef:
        team = self.registry.find_by_name(name)
        return TeamRef(id=team.id if team else name, name=name)

    def _to_view(self, record: FixtureRecord) -> FixtureView:
        kickoff = record.kickoff_utc
        return FixtureView(
            id=self.codec.match_id(record),
            legacy_id=self.codec.legacy_match_id(record),
            match_number=record.match_number,
            league=record.league_id,
            date=kickoff.date().isoformat(),
            time=kickoff.strftime("%H:%M:%S"),
            timestamp=int(kickoff.timestamp() * 1000),
            round=f"Round {record.round_number}" if record.round_number else None,
            home_team=self._team_ref(record.home_team),
            away_team=self._team_ref(record.away_team),
            venue=record.venue,
        )

    def _view_of(self, record: FixtureRecord) -> FixtureView:
        return self._views[(record.league_id, record.match_number)]

    def get_master_fixtures(self, league_id: Optional[str]) -> List[FixtureView]:
        """Master fixture list of a league given by name, provider id or hint."""
        league = League.from_hint(league_id)
        if league is None:
            logger.debug(f"Unknown league requested: {league_id}")
            return []
        return [self._view_of(record) for record in self.master_records(league)]

    def get_fixtures_for_team(
        self, team_id: TeamIdentifier, league_hint: Optional[str] = None
    ) -> List[FixtureView]:
        team = self.registry.find(team_id)
        if team is None:
            logger.debug(f"Unknown team requested: {team_id}")
            return []
        league = League.from_hint(league_hint) or team.league
        return [
            self._view_of(record)
            for record in self.master_records(league)
            if team.name in (record.home_team, record.away_team)
        ]

    def find_match_by_id(self, match_id: Optional[str]) -> Optional[FixtureView]:
        """Resolves a current or legacy match id; None when nothing matches."""
        if not match_id:
            return None
        record = self.resolver.resolve(unquote(match_id), self._all_records)
        return self._view_of(record) if record else None

    def search_fixtures(self, query: Optional[str]) -> List[FixtureView]:
        """Case-insensitive substring search over team names, league and venue."""
        if not query:
            return []
        needle = query.lower()
        return [
            view
            for view in (self._view_of(record) for record in self._all_records)
            if needle in view.home_team.name.lower()
            or needle in view.away_team.name.lower()
            or needle in view.league.lower()
            or needle in view.venue.lower()
        ]


def _bundled_seasons(app_settings: AppSettings) -> List[SeasonDefinition]:
    seasons = [super_league_2026()]
    seasons.extend(load_season_file(path) for path in app_settings.season_files)
    return seasons


def build_catalog(
    seasons: Optional[Iterable[SeasonDefinition]] = None,
    registry: Optional[TeamRegistry] = None,
    app_settings: Optional[AppSettings] = None,
    aliases: Optional[Mapping[str, str]] = None,
) -> FixtureCatalog:
    """Reconciles every season source into a FixtureCatalog.

    Args:
        seasons: Season definitions to serve. Defaults to the bundled Super
            League season plus any JSON files listed in settings.season_files.
        registry: Team metadata. Defaults to the bundled clubs.
        app_settings: Defaults to the process settings.
        aliases: Team alias table. Defaults to DEFAULT_TEAM_ALIASES.

    Raises:
        SeasonDataError: a configured season file is unreadable or invalid.
    """
    app_settings = app_settings or default_settings
    registry = registry or TeamRegistry.bundled()
    if seasons is None:
        seasons = _bundled_seasons(app_settings)

    team_names = [team.name for team in registry.teams]
    if aliases is None:
        # Bundled aliases only apply to clubs this registry knows about
        aliases = {
            raw: target
            for raw, target in DEFAULT_TEAM_ALIASES.items()
            if target in team_names
        }
    canonicalizer = TeamNameCanonicalizer(team_names, aliases)
    reconciler = FixtureReconciler(
        canonicalizer, registry, placeholder=app_settings.placeholder_kickoff
    )
    codec = MatchIdentityCodec(prefix=app_settings.match_id_prefix)

    sources: Dict[League, FixturesByTeam] = {}
    for season in seasons:
        if season.season != app_settings.current_season:
            logger.info(
                f"Skipping {season.league.value} {season.season}: "
                f"not the current season ({app_settings.current_season})."
            )
            continue
        # Several definitions of one league are extra sources for the same teams
        league_sources = sources.setdefault(season.league, {})
        expanded = expand_season(season, registry, app_settings.placeholder_kickoff)
        for team_id, fixtures in expanded.items():
            league_sources.setdefault(team_id, []).extend(fixtures)

    master = {
        league: reconciler.reconcile(fixtures_by_team, league.value)
        for league, fixtures_by_team in sources.items()
    }
    catalog = FixtureCatalog(master, registry, codec, MatchResolver(codec))
    logger.success(
        "Fixture catalog built: "
        + ", ".join(f"{league.value}={len(records)}" for league, records in master.items())
    )
    return catalog
