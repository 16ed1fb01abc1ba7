"""Client — owns the event registry of one SDK connection.

Each :class:`BeaconClient` builds its own :class:`BeaconEventHandler`; two
clients in one process never share subscribers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from beacon_events.config.settings import BeaconSettings
from beacon_events.events.catalog import BeaconEvent
from beacon_events.events.defaults import DefaultEventHandlers
from beacon_events.events.dispatcher import BeaconEventHandler
from beacon_events.metrics.collector import EventMetrics
from beacon_events.ui.presenter import LoggingPresenter

if TYPE_CHECKING:
    from collections.abc import Mapping

    from beacon_events.events.handler import AnyHandler, EventOverride
    from beacon_events.types import AccountInfo
    from beacon_events.ui.presenter import AlertButton, Presenter

logger = logging.getLogger(__name__)


class BeaconClient:
    """An SDK client with its own event registry.

    Args:
        name: Application name shown to wallets.
        settings: Event settings; loaded from the environment when omitted.
        event_handlers: Per-event replacement handlers applied at construction.
        disable_default_events: Replace every default alert/toast with a
            logging-only handler.  Falls back to
            ``settings.disable_default_events``.
        presenter: UI receiving default alerts/toasts (headless when omitted).
        metrics: Dispatch counters; created when ``settings.metrics.enabled``.
    """

    def __init__(
        self,
        name: str,
        *,
        settings: BeaconSettings | None = None,
        event_handlers: Mapping[BeaconEvent, EventOverride[Any] | AnyHandler | None] | None = None,
        disable_default_events: bool | None = None,
        presenter: Presenter | None = None,
        metrics: EventMetrics | None = None,
    ) -> None:
        self.name = name
        self._settings = settings or BeaconSettings()
        self._presenter = presenter or LoggingPresenter()
        if metrics is None and self._settings.metrics.enabled:
            metrics = EventMetrics(prefix=self._settings.metrics.prefix)
        self._metrics = metrics
        self._active_account: AccountInfo | None = None

        override_all = (
            self._settings.disable_default_events
            if disable_default_events is None
            else disable_default_events
        )
        defaults = DefaultEventHandlers(self._presenter, settings=self._settings)
        self._events = BeaconEventHandler(
            event_handlers,
            override_all,
            defaults=defaults.as_mapping(),
            metrics=self._metrics,
        )
        logger.debug("Client %s created (default events disabled: %s)", name, override_all)

    @property
    def events(self) -> BeaconEventHandler:
        """The client's event registry."""
        return self._events

    @property
    def metrics(self) -> EventMetrics | None:
        return self._metrics

    def subscribe_to_event(self, event: BeaconEvent, handler: AnyHandler) -> None:
        """Add *handler* to the subscribers of *event* (after the existing ones)."""
        self._events.on(event, handler)  # type: ignore[call-overload]

    async def emit(
        self,
        event: BeaconEvent,
        data: Any = None,
        buttons: list[AlertButton] | None = None,
    ) -> None:
        """Producer entry point; see :meth:`BeaconEventHandler.emit`."""
        await self._events.emit(event, data, buttons)

    def get_active_account(self) -> AccountInfo | None:
        return self._active_account

    async def set_active_account(self, account: AccountInfo | None = None) -> None:
        """Store the active account and emit ``ACTIVE_ACCOUNT_SET``."""
        self._active_account = account
        await self._events.emit(BeaconEvent.ACTIVE_ACCOUNT_SET, account)

    async def close(self) -> None:
        """Wait for listener tasks still running."""
        await self._events.drain()
