"""Shared test fixtures for the beacon-events test suite."""

from __future__ import annotations

import pytest

from beacon_events.config.settings import BeaconSettings
from beacon_events.events.catalog import BeaconEvent
from beacon_events.events.defaults import DefaultEventHandlers
from beacon_events.types import (
    AccountInfo,
    ConnectionContext,
    Network,
    NetworkType,
    Origin,
    P2PPairingRequest,
    PermissionScope,
)
from beacon_events.ui.presenter import LoggingPresenter


@pytest.fixture
def settings() -> BeaconSettings:
    """Settings with defaults only (no env, no YAML)."""
    return BeaconSettings(_env_file=None)


@pytest.fixture
def presenter() -> LoggingPresenter:
    return LoggingPresenter()


@pytest.fixture
def default_handlers(presenter, settings) -> DefaultEventHandlers:
    return DefaultEventHandlers(presenter, settings=settings)


@pytest.fixture
def recording_defaults():
    """A default set whose handlers only record ``(event, data)`` into ``calls``."""
    calls: list[tuple[BeaconEvent, object]] = []

    def make(event: BeaconEvent):
        def handler(data, buttons=None):
            calls.append((event, data))

        return handler

    mapping = {event: make(event) for event in BeaconEvent}
    return mapping, calls


@pytest.fixture
def network() -> Network:
    return Network(type=NetworkType.MAINNET)


@pytest.fixture
def account(network) -> AccountInfo:
    return AccountInfo(
        account_identifier="acc-1",
        sender_id="sender-1",
        origin=Origin.P2P,
        address="tz1VSUr8wwNhLAzempoch5d6hLRiTh8Cjcjb",
        public_key="edpkuBknW28nW72KG6RoHtYW7p12T6GKc7nAbwYX5m8Wd9sDVC9yav",
        network=network,
        scopes=(PermissionScope.SIGN, PermissionScope.OPERATION_REQUEST),
    )


@pytest.fixture
def connection_context() -> ConnectionContext:
    return ConnectionContext(origin=Origin.P2P, id="peer-1")


@pytest.fixture
def p2p_request() -> P2PPairingRequest:
    return P2PPairingRequest(
        id="3f1c2b0e-0000-4000-8000-000000000001",
        name="Example dApp",
        public_key="a1b2c3",
        version="3",
        relay_server="beacon-node-1.example.com",
    )
