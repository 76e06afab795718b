"""Tests for YAML config and store selection."""

from __future__ import annotations

import os

import pytest

from core.config import (
    STORE_SQLITE, STORE_SUPABASE, get_database_path, get_store_settings, load_config,
    popup_qss, QSS_POPUP_DARK, QSS_POPUP_LIGHT, save_config,
)
from core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("ALFAIATARIA_DATA_DIR", str(tmp_path))
    for var in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "ALFAIATARIA_STORE"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


def test_missing_config_file_is_empty():
    assert load_config() == {}


def test_save_and_load_round_trip(isolated_env):
    save_config({"theme": "dark", "store": "sqlite"})
    assert os.path.exists(isolated_env / "config.yaml")
    assert load_config() == {"theme": "dark", "store": "sqlite"}


def test_default_database_path_in_data_dir(isolated_env):
    assert get_database_path({}) == os.path.abspath(isolated_env / "alfaiataria.db")
    assert get_database_path({"database_path": "x/y.db"}) == os.path.abspath("x/y.db")


def test_sqlite_when_nothing_configured(isolated_env):
    settings = get_store_settings({})
    assert settings.kind == STORE_SQLITE
    assert settings.database_path.endswith("alfaiataria.db")


def test_supabase_from_config_file():
    settings = get_store_settings({"supabase_url": "https://abc.supabase.co", "supabase_key": "k",
                                   "request_timeout": 4})
    assert settings.kind == STORE_SUPABASE
    assert settings.supabase_url == "https://abc.supabase.co"
    assert settings.request_timeout == 4.0


def test_environment_overrides_file(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "env-key")
    settings = get_store_settings({"supabase_url": "https://file.supabase.co", "supabase_key": "file"})
    assert settings.supabase_url == "https://env.supabase.co"
    assert settings.supabase_key == "env-key"


def test_explicit_sqlite_wins_over_credentials(monkeypatch):
    monkeypatch.setenv("ALFAIATARIA_STORE", "sqlite")
    settings = get_store_settings({"supabase_url": "https://abc.supabase.co", "supabase_key": "k"})
    assert settings.kind == STORE_SQLITE


def test_supabase_without_key_is_config_error():
    with pytest.raises(ConfigError):
        get_store_settings({"store": "supabase", "supabase_url": "https://abc.supabase.co"})


def test_unknown_store_is_config_error():
    with pytest.raises(ConfigError):
        get_store_settings({"store": "mongodb"})


def test_bad_timeout_is_config_error():
    with pytest.raises(ConfigError):
        get_store_settings({"request_timeout": "rápido"})


def test_popup_qss_follows_theme():
    assert popup_qss("dark") == QSS_POPUP_DARK
    assert popup_qss("light") == QSS_POPUP_LIGHT
    save_config({"theme": "dark"})
    assert popup_qss() == QSS_POPUP_DARK
