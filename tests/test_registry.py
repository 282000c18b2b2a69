"""
Team registry lookups.
"""

import pytest

from league_fixtures.models.enums import League
from league_fixtures.models.team import TeamMeta
from league_fixtures.registry.team_registry import TeamRegistry


def test_bundled_registry_covers_both_leagues(registry) -> None:
    assert len(registry.teams_in_league(League.NRL)) == 17
    assert len(registry.teams_in_league(League.SUPER_LEAGUE)) == 14


@pytest.mark.parametrize("identifier", ["135215", 135215, "HKR", "hkr", "Hull Kingston Rovers", "hull-kingston-rovers"])
def test_find_by_id_code_or_name(registry, identifier) -> None:
    assert registry.find(identifier).name == "Hull Kingston Rovers"


def test_find_unknown_returns_none(registry) -> None:
    assert registry.find("Leeds United") is None
    assert registry.find("") is None
    assert registry.find(None) is None
    assert registry.find_by_name(None) is None
    assert registry.find_by_code("ZZZ") is None


def test_resolve_identifier(registry) -> None:
    assert registry.resolve_identifier("York Knights") == "137405"
    assert registry.resolve_identifier("135192") == "135192"
    assert registry.resolve_identifier("unknown-club") == "unknown-club"
    assert registry.resolve_identifier(None) is None
    assert registry.resolve_identifier("  ") is None


def test_duplicate_ids_are_rejected() -> None:
    team = TeamMeta(id="1", name="A", league=League.NRL)
    with pytest.raises(ValueError):
        TeamRegistry([team, TeamMeta(id="1", name="B", league=League.NRL)])


def test_league_from_hint() -> None:
    assert League.from_hint("NRL") is League.NRL
    assert League.from_hint("nrl premiership") is League.NRL
    assert League.from_hint("4415") is League.SUPER_LEAGUE
    assert League.from_hint("Betfred Super League") is League.SUPER_LEAGUE
    assert League.from_hint("Premier League") is None
    assert League.from_hint(None) is None
    assert League.SUPER_LEAGUE.provider_id == "4415"
