"""
Settings loading and validation.
"""

from datetime import time

import pytest
from pydantic import ValidationError

from league_fixtures.config.settings import AppSettings, load_settings


def test_defaults(app_settings) -> None:
    assert app_settings.match_id_prefix == "local-"
    assert app_settings.placeholder_kickoff == time(12, 0)
    assert app_settings.current_season == "2026"
    assert app_settings.season_files == []


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("FIXTURES_MATCH_ID_PREFIX", "rl-")
    monkeypatch.setenv("FIXTURES_PLACEHOLDER_KICKOFF", "00:00")
    app_settings = AppSettings(_env_file=None)
    assert app_settings.match_id_prefix == "rl-"
    assert app_settings.placeholder_kickoff == time(0, 0)


def test_prefix_must_be_url_safe() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, match_id_prefix="local /")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, match_id_prefix="")


def test_invalid_log_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("FIXTURES_LOG_LEVEL", "chatty")
    assert load_settings().log_level == "INFO"
    monkeypatch.setenv("FIXTURES_LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"
