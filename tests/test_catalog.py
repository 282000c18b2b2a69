"""
FixtureCatalog: the read-only surface handed to the HTTP layer.
"""

from datetime import datetime, timezone

from league_fixtures.catalog import build_catalog
from league_fixtures.config.settings import AppSettings
from league_fixtures.models.enums import League
from league_fixtures.season.models import SeasonDefinition
from league_fixtures.season.super_league_2026 import super_league_2026

NRL_PAIRS = [
    ("Brisbane Broncos", "Canberra Raiders"),
    ("Canterbury Bulldogs", "Cronulla Sharks"),
    ("Dolphins", "Gold Coast Titans"),
    ("Manly Sea Eagles", "Melbourne Storm"),
    ("Newcastle Knights", "New Zealand Warriors"),
    ("North Queensland Cowboys", "Parramatta Eels"),
    ("135192", "135189"),  # Sydney Roosters v Wests Tigers
]


def nrl_season(season: str = "2026") -> SeasonDefinition:
    matches = [
        {"date": f"2026-03-{5 + i:02d}", "home_code": home, "away_code": away, "kickoff_local": "09:00", "venue": "Ground"}
        for i, (home, away) in enumerate(NRL_PAIRS)
    ]
    return SeasonDefinition.model_validate(
        {"league": "NRL", "season": season, "rounds": [{"round": 1, "matches": matches}]}
    )


def test_master_fixtures_by_league_name_id_or_hint(catalog) -> None:
    by_name = catalog.get_master_fixtures("Super League")
    assert len(by_name) == 175
    assert catalog.get_master_fixtures("4415") == by_name
    assert catalog.get_master_fixtures("super") == by_name
    assert catalog.get_master_fixtures("Premier League") == []
    assert catalog.get_master_fixtures(None) == []
    # Only the Super League season is bundled
    assert catalog.get_master_fixtures("NRL") == []


def test_fixture_view_shape(catalog) -> None:
    opener = catalog.get_master_fixtures("Super League")[0]

    assert opener.id == catalog.codec.encode("Super League", 1, "York Knights", "Hull Kingston Rovers")
    assert opener.legacy_id == "local-Super League-1-York Knights-Hull Kingston Rovers"
    assert opener.date == "2026-02-12"
    assert opener.time == "20:00:00"
    assert opener.timestamp == int(datetime(2026, 2, 12, 20, tzinfo=timezone.utc).timestamp() * 1000)
    assert opener.round == "Round 1"
    assert opener.home_team.id == "137405"
    assert opener.away_team.id == "135215"
    assert opener.venue == "LNER Community Stadium"

    payload = opener.model_dump(by_alias=True)
    assert payload["legacyId"] == opener.legacy_id
    assert payload["matchNumber"] == 1
    assert payload["homeTeam"] == {"id": "137405", "name": "York Knights"}
    assert payload["scores"] == {"home": None, "away": None}
    assert payload["status"] == "Not Started"


def test_find_match_by_current_and_legacy_ids(catalog) -> None:
    opener = catalog.get_master_fixtures("Super League")[0]

    assert catalog.find_match_by_id(opener.id) == opener
    assert catalog.find_match_by_id(opener.legacy_id) == opener
    assert catalog.find_match_by_id("local-Super%20League-1-York%20Knights-Hull%20Kingston%20Rovers") == opener
    assert catalog.find_match_by_id("local-Super League-1-York-Hull Kingston") == opener


def test_find_match_by_id_not_found(catalog) -> None:
    assert catalog.find_match_by_id("local-Super League-999-York Knights-Hull Kingston Rovers") is None
    assert catalog.find_match_by_id("1234567") is None
    assert catalog.find_match_by_id("") is None


def test_fixtures_for_team(catalog) -> None:
    york = catalog.get_fixtures_for_team("137405")
    assert len(york) == 25
    assert all("York Knights" in (v.home_team.name, v.away_team.name) for v in york)
    assert [v.timestamp for v in york] == sorted(v.timestamp for v in york)

    assert catalog.get_fixtures_for_team("YORK") == york
    assert catalog.get_fixtures_for_team("York Knights", "Super League") == york
    assert catalog.get_fixtures_for_team("137405", "NRL") == []
    assert catalog.get_fixtures_for_team("999999") == []


def test_search_fixtures(catalog) -> None:
    assert len(catalog.search_fixtures("Magic Weekend")) == 7
    assert len(catalog.search_fixtures("york")) == 25
    assert catalog.search_fixtures("") == []
    assert catalog.search_fixtures("Lakers") == []


def test_extra_season_sources_and_scenario_ids(app_settings) -> None:
    catalog = build_catalog(seasons=[super_league_2026(), nrl_season()], app_settings=app_settings)

    nrl = catalog.get_master_fixtures("NRL")
    assert len(nrl) == 7
    assert set(catalog.leagues) == {League.NRL, League.SUPER_LEAGUE}

    roosters = catalog.find_match_by_id("local-NRL-7-Sydney Roosters-Wests Tigers")
    assert roosters is not None
    assert roosters.match_number == 7
    assert roosters.id == catalog.codec.encode("NRL", 7, "Sydney Roosters", "Wests Tigers")
    assert catalog.find_match_by_id(roosters.id) == roosters
    assert len(catalog.get_fixtures_for_team("Wests Tigers")) == 1


def test_non_current_seasons_are_skipped(app_settings) -> None:
    catalog = build_catalog(seasons=[nrl_season("2025")], app_settings=app_settings)
    assert catalog.get_master_fixtures("NRL") == []
    assert catalog.leagues == []


def test_custom_prefix_from_settings() -> None:
    app_settings = AppSettings(_env_file=None, match_id_prefix="sl-")
    catalog = build_catalog(app_settings=app_settings)
    opener = catalog.get_master_fixtures("Super League")[0]
    assert opener.id.startswith("sl-")
    assert opener.legacy_id.startswith("sl-Super League-1-")
    assert catalog.find_match_by_id(opener.id) == opener
