"""SDK event settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``BEACON_``, nested via ``__``)
2. YAML config file (``config_path`` field or ``BEACON_CONFIG_PATH`` env var)
3. Defaults defined here
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Sub-config models
# ---------------------------------------------------------------------------


class BlockExplorerSettings(BaseSettings):
    """Base URLs used to build transaction links, per network type."""

    model_config = SettingsConfigDict(
        env_prefix="BEACON_BLOCK_EXPLORER__",
        case_sensitive=False,
    )

    mainnet: str = "https://tzkt.io"
    testnet: str = "https://ghostnet.tzkt.io"


class MetricsSettings(BaseSettings):
    """Prometheus metrics settings."""

    model_config = SettingsConfigDict(
        env_prefix="BEACON_METRICS__",
        case_sensitive=False,
    )

    enabled: bool = True
    prefix: str = "beacon"


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}


class BeaconSettings(BaseSettings):
    """Top-level event settings.

    ``disable_default_events`` replaces every default alert/toast with a
    logging-only handler when a client is built.
    """

    model_config = SettingsConfigDict(
        env_prefix="BEACON_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    config_path: str = ""
    disable_default_events: bool = False
    log_level: str = "INFO"

    success_toast_timer: float = Field(default=5.0, gt=0, description="Seconds a success toast stays open")
    rate_limit_alert_timer: float = Field(default=3.0, gt=0)
    connected_alert_timer: float = Field(default=1.5, gt=0)
    shorten_length: int = Field(default=6, ge=1)

    block_explorer: BlockExplorerSettings = Field(default_factory=BlockExplorerSettings)
    metrics: MetricsSettings = Field(default_factory=MetricsSettings)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        yaml_data = _load_yaml(config_path)
        for key, val in yaml_data.items():
            if key not in values or values[key] is None:
                values[key] = val
            elif isinstance(val, dict) and isinstance(values.get(key), dict):
                values[key] = {**val, **values[key]}
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct settings loading defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))


def configure_logging(settings: BeaconSettings) -> None:
    """Apply ``settings.log_level`` to the package logger."""
    logging.getLogger("beacon_events").setLevel(settings.log_level)
