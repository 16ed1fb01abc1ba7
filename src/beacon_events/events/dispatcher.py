"""Event dispatcher — per-event subscriber lists with fire-and-forget emission.

Every :class:`BeaconEvent` always has an entry in the table.  ``emit`` calls
the subscribers of one event in registration order and returns as soon as all
of them have been *started*.  A coroutine subscriber is started eagerly: it
runs up to its first suspension before the next subscriber is called, then
continues as a task on the current loop and is not awaited.  A failing subscriber is logged and counted,
never re-raised, and stays subscribed.
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
import threading
from typing import TYPE_CHECKING, Any, Literal, overload

from beacon_events.errors.sdk_errors import InvalidEventError
from beacon_events.events.catalog import BeaconEvent
from beacon_events.events.defaults import DefaultEventHandlers
from beacon_events.events.handler import EventOverride
from beacon_events.ui.presenter import LoggingPresenter

if TYPE_CHECKING:
    from collections.abc import Mapping

    from beacon_events.events.catalog import (
        BroadcastRequestSuccess,
        MessageEvent,
        NoPayloadEvent,
        OperationRequestSuccess,
        PairInit,
        PairSuccess,
        PeerInfoEvent,
        PermissionRequestSuccess,
        RequestErrorEvent,
        RequestSentEvent,
        RequestSentInfo,
        SignRequestSuccess,
    )
    from beacon_events.events.handler import AnyHandler, BeaconEventHandlerFunction
    from beacon_events.metrics.collector import EventMetrics
    from beacon_events.types import (
        AccountInfo,
        AcknowledgeResponse,
        ErrorResponse,
        P2PPairingRequest,
        Transport,
    )
    from beacon_events.ui.presenter import AlertButton

logger = logging.getLogger(__name__)


def _to_event(event: BeaconEvent | str) -> BeaconEvent:
    try:
        return BeaconEvent(event)
    except ValueError:
        msg = f"Unknown event: {event!r}"
        raise InvalidEventError(msg) from None


def _check_handler(event: BeaconEvent, handler: Any) -> None:
    if not callable(handler):
        msg = f"Handler for {event} is not callable: {handler!r}"
        raise InvalidEventError(msg)


def _trace_handler(event: BeaconEvent) -> AnyHandler:
    """Handler installed by ``set_all_handlers()``: logs and does nothing else."""

    def trace(data: Any, buttons: list[AlertButton] | None = None) -> None:
        if buttons:
            logger.info("%s %r %r", event, data, buttons)
        else:
            logger.info("%s %r", event, data)

    return trace


class BeaconEventHandler:
    """Owns the event → subscriber-list table of one client.

    Construction seeds every event with its default handler, then applies
    ``set_all_handlers()`` when *override_all* is set, then the per-event
    *events_to_override*, so an individual override always wins over the
    blanket one.

    Args:
        events_to_override: Replacement handler per event; replaces (not
            extends) that event's list.
        override_all: Drop every default in favour of a logging-only handler.
        defaults: One handler per event.  When omitted, the default
            alert/toast handlers are built on a :class:`LoggingPresenter`.
        metrics: Optional dispatch counters.

    Raises:
        InvalidEventError: If *defaults* misses an event, or an override
            targets an unknown event or is not callable.
    """

    def __init__(
        self,
        events_to_override: Mapping[BeaconEvent, EventOverride[Any] | AnyHandler | None] | None = None,
        override_all: bool = False,
        *,
        defaults: Mapping[BeaconEvent, AnyHandler] | None = None,
        metrics: EventMetrics | None = None,
    ) -> None:
        if defaults is None:
            defaults = DefaultEventHandlers(LoggingPresenter()).as_mapping()

        missing = [event.value for event in BeaconEvent if event not in defaults]
        if missing:
            msg = f"Default handler set is missing events: {', '.join(missing)}"
            raise InvalidEventError(msg)

        self._lock = threading.Lock()
        self._metrics = metrics
        self._pending: set[asyncio.Future[Any]] = set()
        self._callback_map: dict[BeaconEvent, list[AnyHandler]] = {}
        for event in BeaconEvent:
            _check_handler(event, defaults[event])
            self._callback_map[event] = [defaults[event]]

        if override_all:
            self.set_all_handlers()
        self.override_defaults(events_to_override or {})

    # -- Subscription --

    @overload
    def on(self, event: RequestSentEvent, handler: BeaconEventHandlerFunction[RequestSentInfo]) -> None: ...
    @overload
    def on(self, event: RequestErrorEvent, handler: BeaconEventHandlerFunction[ErrorResponse]) -> None: ...
    @overload
    def on(
        self,
        event: Literal[BeaconEvent.PERMISSION_REQUEST_SUCCESS],
        handler: BeaconEventHandlerFunction[PermissionRequestSuccess],
    ) -> None: ...
    @overload
    def on(
        self,
        event: Literal[BeaconEvent.OPERATION_REQUEST_SUCCESS],
        handler: BeaconEventHandlerFunction[OperationRequestSuccess],
    ) -> None: ...
    @overload
    def on(
        self,
        event: Literal[BeaconEvent.SIGN_REQUEST_SUCCESS],
        handler: BeaconEventHandlerFunction[SignRequestSuccess],
    ) -> None: ...
    @overload
    def on(
        self,
        event: Literal[BeaconEvent.BROADCAST_REQUEST_SUCCESS],
        handler: BeaconEventHandlerFunction[BroadcastRequestSuccess],
    ) -> None: ...
    @overload
    def on(
        self,
        event: Literal[BeaconEvent.ACKNOWLEDGE_RECEIVED],
        handler: BeaconEventHandlerFunction[AcknowledgeResponse],
    ) -> None: ...
    @overload
    def on(self, event: NoPayloadEvent, handler: BeaconEventHandlerFunction[None]) -> None: ...
    @overload
    def on(
        self,
        event: Literal[BeaconEvent.ACTIVE_ACCOUNT_SET],
        handler: BeaconEventHandlerFunction[AccountInfo | None],
    ) -> None: ...
    @overload
    def on(
        self,
        event: Literal[BeaconEvent.ACTIVE_TRANSPORT_SET],
        handler: BeaconEventHandlerFunction[Transport],
    ) -> None: ...
    @overload
    def on(
        self, event: Literal[BeaconEvent.PAIR_INIT], handler: BeaconEventHandlerFunction[PairInit]
    ) -> None: ...
    @overload
    def on(
        self, event: Literal[BeaconEvent.PAIR_SUCCESS], handler: BeaconEventHandlerFunction[PairSuccess]
    ) -> None: ...
    @overload
    def on(self, event: PeerInfoEvent, handler: BeaconEventHandlerFunction[P2PPairingRequest]) -> None: ...
    @overload
    def on(self, event: MessageEvent, handler: BeaconEventHandlerFunction[str]) -> None: ...

    def on(self, event: BeaconEvent | str, handler: AnyHandler) -> None:
        """Append *handler* to the subscribers of *event*.

        Existing subscribers are kept and nothing is deduplicated; the new
        handler only sees emissions made after this call.
        """
        resolved = _to_event(event)
        _check_handler(resolved, handler)
        with self._lock:
            self._callback_map[resolved].append(handler)

    def override_defaults(
        self,
        events_to_override: Mapping[BeaconEvent, EventOverride[Any] | AnyHandler | None],
    ) -> None:
        """Replace the subscriber list of each listed event with its single handler.

        Events not listed keep their current list, and so do events whose
        override is ``None``.  Used to disable individual default alerts/toasts.
        """
        resolved: dict[BeaconEvent, AnyHandler] = {}
        for key, override in events_to_override.items():
            event = _to_event(key)
            handler = override.handler if isinstance(override, EventOverride) else override
            if handler is None:
                continue
            _check_handler(event, handler)
            resolved[event] = handler
        with self._lock:
            for event, handler in resolved.items():
                self._callback_map[event] = [handler]

    def set_all_handlers(self, handler: AnyHandler | None = None) -> None:
        """Set every event's subscriber list to one handler.

        Without *handler*, each event gets a handler that only logs the event
        and its payload, which silences all default alerts and toasts.
        """
        if handler is not None and not callable(handler):
            msg = f"Catch-all handler is not callable: {handler!r}"
            raise InvalidEventError(msg)
        with self._lock:
            for event in BeaconEvent:
                self._callback_map[event] = [handler if handler is not None else _trace_handler(event)]

    def listeners(self, event: BeaconEvent | str) -> tuple[AnyHandler, ...]:
        """Return a snapshot of the subscribers of *event*, in call order."""
        resolved = _to_event(event)
        with self._lock:
            return tuple(self._callback_map[resolved])

    # -- Emission --

    async def emit(
        self,
        event: BeaconEvent | str,
        data: Any = None,
        buttons: list[AlertButton] | None = None,
    ) -> None:
        """Invoke every subscriber of *event* with ``(data, buttons)``.

        Returns once each subscriber has been called; coroutines they return
        run up to their first ``await`` in call order and are then left
        running as tasks.  Events without subscribers
        (or outside the catalog) are a no-op.
        """
        with self._lock:
            listeners = tuple(self._callback_map.get(event, ()))
        if self._metrics is not None:
            self._metrics.record_emit(str(event))
        for listener in listeners:
            self._invoke(event, listener, data, buttons)

    async def drain(self) -> None:
        """Wait until every listener task started by ``emit`` has finished.

        Tasks started while draining (listeners that emit) are waited for too.
        """
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    @property
    def pending(self) -> int:
        """Number of listener tasks still running."""
        return len(self._pending)

    def _invoke(
        self,
        event: BeaconEvent | str,
        listener: AnyHandler,
        data: Any,
        buttons: list[AlertButton] | None,
    ) -> None:
        if self._metrics is not None:
            self._metrics.record_invocation(str(event))
        try:
            result = listener(data, buttons)
        except Exception:
            logger.exception("Error handling event %s", event)
            self._record_failure(event)
            return
        if inspect.iscoroutine(result):
            task = asyncio.Task(result, loop=asyncio.get_running_loop(), eager_start=True)
        elif inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
        else:
            return
        self._pending.add(task)
        task.add_done_callback(functools.partial(self._listener_done, event))

    def _listener_done(self, event: BeaconEvent | str, task: asyncio.Future[Any]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Error handling event %s", event, exc_info=exc)
            self._record_failure(event)

    def _record_failure(self, event: BeaconEvent | str) -> None:
        if self._metrics is not None:
            self._metrics.record_failure(str(event))
