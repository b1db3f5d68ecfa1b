import pytest

from backend import config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Drop settings overrides and generator env vars before every test."""
    for env_var in ("GENERATOR_URL", "GENERATOR_API_KEY", "GENERATOR_TIMEOUT",
                    "ASSET_SOURCES_LIMIT", "MAX_ASSETS", "PROXY_TIMEOUT"):
        monkeypatch.delenv(env_var, raising=False)
    config.reset_config()
    yield
    config.reset_config()
