"""Handler contract shared by default and user-supplied subscribers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from beacon_events.ui.presenter import AlertButton

P = TypeVar("P")

#: A subscriber for an event whose payload type is ``P``.  It receives the
#: payload and the optional buttons the producer attached, and either returns
#: immediately or returns an awaitable that the dispatcher schedules.
BeaconEventHandlerFunction = Callable[[P, list[AlertButton] | None], Awaitable[None] | None]

AnyHandler = BeaconEventHandlerFunction[Any]


@dataclass(frozen=True)
class EventOverride(Generic[P]):
    """Replacement handler for one event, used in construction-time overrides."""

    handler: BeaconEventHandlerFunction[P]
