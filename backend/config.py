"""App configuration: defaults merged with environment variables.

The `.env` file is loaded by backend.app before the first read. PATCH
/api/settings layers in-process overrides on top (not persisted).
"""

import logging
import os
from typing import Any

from blueprint_forge.banks import DEFAULT_BANKS
from blueprint_forge.pipeline.assets import MAX_ASSETS

logger = logging.getLogger(__name__)

_CONFIG_DEFAULTS: dict[str, Any] = {
    "generator_url": "",
    "generator_api_key": "",
    "generator_timeout": 120,
    "sources_per_asset": 3,
    "max_assets": MAX_ASSETS,
    "proxy_timeout": 30,
}

_ENV_VARS: dict[str, str] = {
    "generator_url": "GENERATOR_URL",
    "generator_api_key": "GENERATOR_API_KEY",
    "generator_timeout": "GENERATOR_TIMEOUT",
    "sources_per_asset": "ASSET_SOURCES_LIMIT",
    "max_assets": "MAX_ASSETS",
    "proxy_timeout": "PROXY_TIMEOUT",
}

# Inclusive bounds for integer settings.
_BOUNDS: dict[str, tuple[int, int]] = {
    "generator_timeout": (1, 600),
    "sources_per_asset": (1, len(DEFAULT_BANKS)),
    "max_assets": (1, MAX_ASSETS),
    "proxy_timeout": (1, 300),
}

_overrides: dict[str, Any] = {}


def _coerce(key: str, value: Any) -> Any:
    """Cast a raw value to the type of its default. Out-of-range ints raise ValueError."""
    default = _CONFIG_DEFAULTS[key]
    if isinstance(default, int):
        number = int(value)
        low, high = _BOUNDS[key]
        if not low <= number <= high:
            raise ValueError(f"{key} must be between {low} and {high}, got {number}")
        return number
    return str(value)


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with env vars and overrides.

    An env var that does not coerce is logged and ignored.
    """
    config = dict(_CONFIG_DEFAULTS)
    for key, env_var in _ENV_VARS.items():
        raw = os.getenv(env_var)
        if not raw:
            continue
        try:
            config[key] = _coerce(key, raw)
        except ValueError as e:
            logger.warning(f"Ignoring {env_var}={raw!r}: {e}")
    config.update(_overrides)
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge known fields into the in-process overrides. Returns full config.

    All fields are validated before any is applied.
    """
    coerced = {key: _coerce(key, value) for key, value in fields.items() if key in _CONFIG_DEFAULTS}
    _overrides.update(coerced)
    return get_config()


def reset_config() -> None:
    """Drop every in-process override (used in tests)."""
    _overrides.clear()


def public_config() -> dict[str, Any]:
    """Config as shown to the browser: the API key is masked."""
    config = get_config()
    config["generator_api_key"] = "***" if config["generator_api_key"] else ""
    return config
