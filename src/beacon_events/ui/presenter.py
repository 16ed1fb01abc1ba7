"""Presentation-layer contract used by the default event handlers.

The SDK core never draws anything itself: default handlers describe an alert
or toast with :class:`AlertConfig` / :class:`ToastConfig` and hand it to a
:class:`Presenter`.  A GUI embeds its own presenter; :class:`LoggingPresenter`
is the headless one used when none is supplied.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from beacon_events.types import NetworkType

logger = logging.getLogger(__name__)

ButtonStyle = Literal["solid", "outline"]
ToastState = Literal["prepare", "loading", "acknowledge", "finished"]


@dataclass(frozen=True)
class AlertButton:
    """A user-facing action attached to an alert."""

    text: str
    style: ButtonStyle = "solid"
    action_callback: Callable[[], Awaitable[None] | None] | None = None


@dataclass(frozen=True)
class PairingPayload:
    """Sync codes rendered as QR codes / deep links in a pairing alert."""

    p2p_sync_code: str
    postmessage_sync_code: str
    preferred_network: NetworkType


@dataclass(frozen=True)
class AlertConfig:
    """Everything needed to render one alert dialog."""

    title: str
    body: str = ""
    timer: float | None = None
    buttons: list[AlertButton] | None = None
    pairing_payload: PairingPayload | None = None
    close_button_callback: Callable[[], Any] | None = None


@dataclass(frozen=True)
class ToastAction:
    """A labelled row in a toast, optionally clickable."""

    text: str
    action_text: str
    action_callback: Callable[[], Awaitable[None]] | None = None


@dataclass(frozen=True)
class ToastConfig:
    """Everything needed to render one toast banner.

    ``{{wallet}}`` in ``body`` is replaced by the presenter with the wallet
    name taken from ``request_sent_info`` when it is known.
    """

    body: str
    timer: float | None = None
    force_new: bool = False
    state: ToastState = "prepare"
    actions: list[ToastAction] = field(default_factory=list)
    request_sent_info: Any = None


@runtime_checkable
class Presenter(Protocol):
    """Side effects the default handlers need from the embedding UI."""

    async def open_alert(self, config: AlertConfig) -> None: ...

    async def close_alerts(self) -> None: ...

    async def open_toast(self, config: ToastConfig) -> None: ...

    async def close_toast(self) -> None: ...

    async def open_url(self, url: str) -> None: ...

    async def copy_to_clipboard(self, text: str) -> None: ...


class LoggingPresenter:
    """Headless presenter: logs every request and records it in ``history``.

    ``history`` holds the last *history_size* ``(method_name, argument)``
    tuples in call order; older calls are dropped.
    """

    def __init__(self, *, history_size: int = 100) -> None:
        self._history: deque[tuple[str, Any]] = deque(maxlen=history_size)

    @property
    def history(self) -> list[tuple[str, Any]]:
        return list(self._history)

    def calls(self, method: str) -> list[Any]:
        """Return the arguments of every recorded call to *method*."""
        return [arg for name, arg in self.history if name == method]

    async def open_alert(self, config: AlertConfig) -> None:
        logger.info("Alert %r: %s", config.title, config.body)
        self._history.append(("open_alert", config))

    async def close_alerts(self) -> None:
        logger.debug("Closing alerts")
        self._history.append(("close_alerts", None))

    async def open_toast(self, config: ToastConfig) -> None:
        logger.info("Toast [%s]: %s", config.state, config.body)
        self._history.append(("open_toast", config))

    async def close_toast(self) -> None:
        logger.debug("Closing toast")
        self._history.append(("close_toast", None))

    async def open_url(self, url: str) -> None:
        logger.info("Open URL: %s", url)
        self._history.append(("open_url", url))

    async def copy_to_clipboard(self, text: str) -> None:
        logger.info("Copied to clipboard: %s", text)
        self._history.append(("copy_to_clipboard", text))
