"""Tests for the settings system."""

from __future__ import annotations

import logging
import textwrap
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from beacon_events.config.settings import (
    BeaconSettings,
    BlockExplorerSettings,
    MetricsSettings,
    _load_yaml,
    configure_logging,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestDefaults:
    def test_top_level_defaults(self) -> None:
        cfg = BeaconSettings(_env_file=None)
        assert cfg.disable_default_events is False
        assert cfg.log_level == "INFO"
        assert cfg.success_toast_timer == 5.0
        assert cfg.rate_limit_alert_timer == 3.0
        assert cfg.connected_alert_timer == 1.5
        assert cfg.shorten_length == 6

    def test_block_explorer_defaults(self) -> None:
        cfg = BlockExplorerSettings()
        assert cfg.mainnet == "https://tzkt.io"
        assert cfg.testnet == "https://ghostnet.tzkt.io"

    def test_metrics_defaults(self) -> None:
        cfg = MetricsSettings()
        assert cfg.enabled is True
        assert cfg.prefix == "beacon"


class TestEnvironment:
    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BEACON_DISABLE_DEFAULT_EVENTS", "true")
        monkeypatch.setenv("BEACON_SUCCESS_TOAST_TIMER", "8")
        cfg = BeaconSettings()
        assert cfg.disable_default_events is True
        assert cfg.success_toast_timer == 8.0

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BEACON_BLOCK_EXPLORER__MAINNET", "https://better-call.dev")
        cfg = BeaconSettings()
        assert cfg.block_explorer.mainnet == "https://better-call.dev"

    def test_log_level_normalised(self) -> None:
        assert BeaconSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            BeaconSettings(log_level="chatty")

    def test_timer_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            BeaconSettings(success_toast_timer=0)


class TestYaml:
    def test_load_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "missing.yaml") == {}

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        assert _load_yaml(path) == {}

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "beacon.yaml"
        path.write_text(
            textwrap.dedent(
                """\
                disable_default_events: true
                rate_limit_alert_timer: 10
                block_explorer:
                  testnet: https://testnet.example
                """
            ),
            encoding="utf-8",
        )
        cfg = BeaconSettings.from_yaml(path)
        assert cfg.disable_default_events is True
        assert cfg.rate_limit_alert_timer == 10.0
        assert cfg.block_explorer.testnet == "https://testnet.example"

    def test_env_wins_over_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "beacon.yaml"
        path.write_text("log_level: WARNING\n", encoding="utf-8")
        monkeypatch.setenv("BEACON_LOG_LEVEL", "ERROR")
        cfg = BeaconSettings.from_yaml(path)
        assert cfg.log_level == "ERROR"


class TestConfigureLogging:
    def test_sets_package_level(self) -> None:
        logger = logging.getLogger("beacon_events")
        previous = logger.level
        try:
            configure_logging(BeaconSettings(log_level="WARNING"))
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(previous)
