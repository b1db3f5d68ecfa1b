"""Tests for backend.config: defaults, env vars, overrides and masking."""

import pytest

from backend import config


def test_defaults():
    settings = config.get_config()
    assert settings["generator_url"] == ""
    assert settings["max_assets"] == 8
    assert settings["sources_per_asset"] == 3


def test_env_var_overrides_default(monkeypatch):
    monkeypatch.setenv("MAX_ASSETS", "5")
    monkeypatch.setenv("GENERATOR_URL", "https://gen.example.test")
    settings = config.get_config()
    assert settings["max_assets"] == 5
    assert settings["generator_url"] == "https://gen.example.test"


def test_empty_env_var_ignored(monkeypatch):
    monkeypatch.setenv("ASSET_SOURCES_LIMIT", "")
    assert config.get_config()["sources_per_asset"] == 3


def test_update_config_coerces_to_default_type():
    settings = config.update_config({"max_assets": "4"})
    assert settings["max_assets"] == 4


def test_update_config_ignores_unknown_keys():
    settings = config.update_config({"colour": "blue"})
    assert "colour" not in settings


def test_update_config_rejects_bad_int():
    with pytest.raises(ValueError):
        config.update_config({"max_assets": "many"})


def test_override_beats_env(monkeypatch):
    monkeypatch.setenv("MAX_ASSETS", "5")
    config.update_config({"max_assets": 2})
    assert config.get_config()["max_assets"] == 2


def test_reset_config_drops_overrides():
    config.update_config({"max_assets": 2})
    config.reset_config()
    assert config.get_config()["max_assets"] == 8


def test_public_config_masks_api_key():
    config.update_config({"generator_api_key": "secret"})
    assert config.public_config()["generator_api_key"] == "***"
    assert config.get_config()["generator_api_key"] == "secret"


def test_public_config_empty_key_stays_empty():
    assert config.public_config()["generator_api_key"] == ""


@pytest.mark.parametrize("value", [0, -3, 9, 20])
def test_update_config_rejects_max_assets_out_of_range(value):
    with pytest.raises(ValueError):
        config.update_config({"max_assets": value})
    assert config.get_config()["max_assets"] == 8


def test_update_config_is_all_or_nothing():
    with pytest.raises(ValueError):
        config.update_config({"proxy_timeout": 10, "max_assets": 99})
    assert config.get_config()["proxy_timeout"] == 30


def test_update_config_rejects_zero_sources_per_asset():
    with pytest.raises(ValueError):
        config.update_config({"sources_per_asset": 0})


def test_malformed_env_var_is_ignored(monkeypatch, caplog):
    monkeypatch.setenv("MAX_ASSETS", "lots")
    with caplog.at_level("WARNING", logger="backend.config"):
        settings = config.get_config()
    assert settings["max_assets"] == 8
    assert "MAX_ASSETS" in caplog.text


def test_out_of_range_env_var_is_ignored(monkeypatch):
    monkeypatch.setenv("MAX_ASSETS", "50")
    assert config.get_config()["max_assets"] == 8
