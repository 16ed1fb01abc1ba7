"""Events — typed event catalog and per-client dispatch registry.

Provides:
- ``BeaconEvent`` — the closed set of SDK events
- ``BeaconEventHandler`` — per-client subscriber table with fire-and-forget emit
- ``DefaultEventHandlers`` — the alert/toast handler installed for every event
"""

from __future__ import annotations

from beacon_events.events.catalog import EVENT_PAYLOAD_TYPES, BeaconEvent, RequestSentInfo
from beacon_events.events.defaults import DefaultEventHandlers
from beacon_events.events.dispatcher import BeaconEventHandler
from beacon_events.events.handler import BeaconEventHandlerFunction, EventOverride

__all__ = [
    "EVENT_PAYLOAD_TYPES",
    "BeaconEvent",
    "BeaconEventHandler",
    "BeaconEventHandlerFunction",
    "DefaultEventHandlers",
    "EventOverride",
    "RequestSentInfo",
]
