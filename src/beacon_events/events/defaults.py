"""Default event handlers — one alert or toast per event.

Each handler only describes what to show and delegates the side effect to a
:class:`~beacon_events.ui.presenter.Presenter`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from beacon_events.config.settings import BeaconSettings
from beacon_events.errors.beacon_errors import BeaconError, UnknownBeaconError
from beacon_events.events.catalog import BeaconEvent
from beacon_events.serializer import Serializer
from beacon_events.types import NetworkType
from beacon_events.ui.presenter import (
    AlertButton,
    AlertConfig,
    PairingPayload,
    ToastAction,
    ToastConfig,
)
from beacon_events.utils.strings import shorten_string

if TYPE_CHECKING:
    from beacon_events.events.catalog import (
        BroadcastRequestSuccess,
        OperationRequestSuccess,
        PairInit,
        PermissionRequestSuccess,
        RequestSentInfo,
        SignRequestSuccess,
    )
    from beacon_events.events.handler import AnyHandler
    from beacon_events.types import AcknowledgeResponse, ErrorResponse, P2PPairingRequest
    from beacon_events.ui.presenter import Presenter

logger = logging.getLogger(__name__)

_DONE_BUTTON = AlertButton(text="Done", style="outline")
_PAIRING_TITLE = "Choose your preferred wallet"


class DefaultEventHandlers:
    """The baseline subscriber for every event.

    Args:
        presenter: Receives the alerts/toasts to show.
        serializer: Encodes pairing requests for QR codes.
        settings: Supplies toast/alert timers and the shortening length.
    """

    def __init__(
        self,
        presenter: Presenter,
        *,
        serializer: Serializer | None = None,
        settings: BeaconSettings | None = None,
    ) -> None:
        self._presenter = presenter
        self._serializer = serializer or Serializer()
        self._settings = settings or BeaconSettings()

    def as_mapping(self) -> dict[BeaconEvent, AnyHandler]:
        """Return one handler per :class:`BeaconEvent`."""
        return {
            BeaconEvent.PERMISSION_REQUEST_SENT: self.show_sent_toast,
            BeaconEvent.PERMISSION_REQUEST_SUCCESS: self.show_permission_success_toast,
            BeaconEvent.PERMISSION_REQUEST_ERROR: self.show_error_alert,
            BeaconEvent.OPERATION_REQUEST_SENT: self.show_sent_toast,
            BeaconEvent.OPERATION_REQUEST_SUCCESS: self.show_operation_success_toast,
            BeaconEvent.OPERATION_REQUEST_ERROR: self.show_error_alert,
            BeaconEvent.SIGN_REQUEST_SENT: self.show_sent_toast,
            BeaconEvent.SIGN_REQUEST_SUCCESS: self.show_sign_success_toast,
            BeaconEvent.SIGN_REQUEST_ERROR: self.show_error_alert,
            BeaconEvent.BROADCAST_REQUEST_SENT: self.show_sent_toast,
            BeaconEvent.BROADCAST_REQUEST_SUCCESS: self.show_broadcast_success_toast,
            BeaconEvent.BROADCAST_REQUEST_ERROR: self.show_error_alert,
            BeaconEvent.ACKNOWLEDGE_RECEIVED: self.show_acknowledged_toast,
            BeaconEvent.LOCAL_RATE_LIMIT_REACHED: self.show_rate_limit_reached,
            BeaconEvent.NO_PERMISSIONS: self.show_no_permission_alert,
            BeaconEvent.ACTIVE_ACCOUNT_SET: self.ignore,
            BeaconEvent.ACTIVE_TRANSPORT_SET: self.ignore,
            BeaconEvent.PAIR_INIT: self.show_pair_alert,
            BeaconEvent.PAIR_SUCCESS: self.show_extension_connected,
            BeaconEvent.P2P_CHANNEL_CONNECT_SUCCESS: self.show_p2p_connected_alert,
            BeaconEvent.P2P_LISTEN_FOR_CHANNEL_OPEN: self.show_qr_alert,
            BeaconEvent.CHANNEL_CLOSED: self.show_channel_closed_alert,
            BeaconEvent.INTERNAL_ERROR: self.show_internal_error_alert,
            BeaconEvent.UNKNOWN: self.ignore,
        }

    def _shorten(self, text: str) -> str:
        return shorten_string(text, keep=self._settings.shorten_length)

    async def _open_toast_logged(self, config: ToastConfig) -> None:
        # Toast rendering problems must not turn into listener failures.
        try:
            await self._presenter.open_toast(config)
        except Exception:
            logger.exception("Could not open toast %r", config.body)

    # -- Request lifecycle --

    async def show_sent_toast(self, info: RequestSentInfo, buttons: list[AlertButton] | None = None) -> None:
        """Loading toast with "cancel" and "reset connection" actions."""

        async def cancel() -> None:
            await self._presenter.close_toast()

        async def reset() -> None:
            await self._presenter.close_toast()
            if info.reset_callback is not None:
                logger.debug("Reset callback invoked for %s", info.wallet_name)
                await info.reset_callback()

        await self._open_toast_logged(
            ToastConfig(
                body="Request sent to {{wallet}}",
                request_sent_info=info,
                force_new=True,
                state="loading",
                actions=[
                    ToastAction(
                        text="Did you make a mistake?",
                        action_text="Cancel Request",
                        action_callback=cancel,
                    ),
                    ToastAction(
                        text="Wallet not receiving request?",
                        action_text="Reset Connection",
                        action_callback=reset,
                    ),
                ],
            )
        )

    async def show_acknowledged_toast(
        self, _message: AcknowledgeResponse, buttons: list[AlertButton] | None = None
    ) -> None:
        await self._open_toast_logged(ToastConfig(body="Awaiting confirmation in {{wallet}}"))

    async def show_error_alert(self, error: ErrorResponse, buttons: list[AlertButton] | None = None) -> None:
        """Close the pending toast and explain the wallet's error."""
        beacon_error: BeaconError = (
            BeaconError.get_error(error.error_type, error.error_data)
            if error.error_type
            else UnknownBeaconError()
        )
        await self._presenter.close_toast()
        await self._presenter.open_alert(
            AlertConfig(
                title=beacon_error.title,
                body=beacon_error.full_description,
                buttons=buttons,
            )
        )

    async def show_no_permission_alert(self, _data: None = None, buttons: list[AlertButton] | None = None) -> None:
        await self._presenter.open_alert(
            AlertConfig(
                title="No Permission",
                body="Please allow the wallet to handle this type of request.",
            )
        )

    async def show_rate_limit_reached(self, _data: None = None, buttons: list[AlertButton] | None = None) -> None:
        try:
            await self._presenter.open_alert(
                AlertConfig(
                    title="Error",
                    body="Rate limit reached. Please slow down",
                    buttons=[_DONE_BUTTON],
                    timer=self._settings.rate_limit_alert_timer,
                )
            )
        except Exception:
            logger.exception("Could not open rate limit alert")

    # -- Success toasts --

    async def show_permission_success_toast(
        self, data: PermissionRequestSuccess, buttons: list[AlertButton] | None = None
    ) -> None:
        output = data.output
        await self._presenter.open_toast(
            ToastConfig(
                body="{{wallet}} has granted permission",
                timer=self._settings.success_toast_timer,
                state="finished",
                actions=[
                    ToastAction(text="Address", action_text=self._shorten(output.address)),
                    ToastAction(text="Network", action_text=str(output.network.type)),
                    ToastAction(
                        text="Permissions",
                        action_text=", ".join(str(scope) for scope in output.scopes),
                    ),
                ],
            )
        )

    async def show_operation_success_toast(
        self, data: OperationRequestSuccess, buttons: list[AlertButton] | None = None
    ) -> None:
        tx_hash = data.output.transaction_hash

        async def open_explorer() -> None:
            link = await data.block_explorer.get_transaction_link(tx_hash, data.account.network)
            await self._presenter.open_url(link)
            await self._presenter.close_toast()

        await self._presenter.open_toast(
            ToastConfig(
                body="{{wallet}} successfully submitted operation",
                timer=self._settings.success_toast_timer,
                state="finished",
                actions=[
                    ToastAction(
                        text=self._shorten(tx_hash),
                        action_text="Open Blockexplorer",
                        action_callback=open_explorer,
                    )
                ],
            )
        )

    async def show_sign_success_toast(
        self, data: SignRequestSuccess, buttons: list[AlertButton] | None = None
    ) -> None:
        signature = data.output.signature

        async def copy_signature() -> None:
            try:
                await self._presenter.copy_to_clipboard(signature)
            except Exception:
                logger.exception("Could not copy signature to clipboard")
            await self._presenter.close_toast()

        await self._presenter.open_toast(
            ToastConfig(
                body="{{wallet}} successfully signed payload",
                timer=self._settings.success_toast_timer,
                state="finished",
                actions=[
                    ToastAction(
                        text=f"Signature: {self._shorten(signature)}",
                        action_text="Copy to clipboard",
                        action_callback=copy_signature,
                    )
                ],
            )
        )

    async def show_broadcast_success_toast(
        self, data: BroadcastRequestSuccess, buttons: list[AlertButton] | None = None
    ) -> None:
        tx_hash = data.output.transaction_hash

        async def open_explorer() -> None:
            link = await data.block_explorer.get_transaction_link(tx_hash, data.network)
            await self._presenter.open_url(link)
            await self._presenter.close_toast()

        await self._presenter.open_toast(
            ToastConfig(
                body="{{wallet}} successfully injected operation",
                timer=self._settings.success_toast_timer,
                state="finished",
                actions=[
                    ToastAction(
                        text=self._shorten(tx_hash),
                        action_text="Open Blockexplorer",
                        action_callback=open_explorer,
                    )
                ],
            )
        )

    # -- Pairing / channel --

    async def show_qr_alert(self, data: P2PPairingRequest, buttons: list[AlertButton] | None = None) -> None:
        """Pairing alert for a P2P request only; both sync codes carry it."""
        code = await self._serializer.serialize(data)
        await self._presenter.open_alert(
            AlertConfig(
                title=_PAIRING_TITLE,
                pairing_payload=PairingPayload(
                    p2p_sync_code=code,
                    postmessage_sync_code=code,
                    preferred_network=NetworkType.MAINNET,
                ),
            )
        )

    async def show_pair_alert(self, data: PairInit, buttons: list[AlertButton] | None = None) -> None:
        p2p_code = await self._serializer.serialize(data.p2p_peer_info)
        postmessage_code = await self._serializer.serialize(data.postmessage_peer_info)
        await self._presenter.open_alert(
            AlertConfig(
                title=_PAIRING_TITLE,
                pairing_payload=PairingPayload(
                    p2p_sync_code=p2p_code,
                    postmessage_sync_code=postmessage_code,
                    preferred_network=data.preferred_network,
                ),
                close_button_callback=data.aborted_handler,
            )
        )

    async def show_p2p_connected_alert(self, _data: Any = None, buttons: list[AlertButton] | None = None) -> None:
        await self._presenter.open_alert(
            AlertConfig(
                title="Success",
                body="A wallet has been paired over the beacon network.",
                buttons=[_DONE_BUTTON],
                timer=self._settings.connected_alert_timer,
            )
        )

    async def show_extension_connected(self, _data: Any = None, buttons: list[AlertButton] | None = None) -> None:
        await self._presenter.close_alerts()

    async def show_channel_closed_alert(self, _data: Any = None, buttons: list[AlertButton] | None = None) -> None:
        await self._presenter.open_alert(
            AlertConfig(
                title="Channel closed",
                body="Your peer has closed the connection.",
                buttons=[_DONE_BUTTON],
                timer=self._settings.connected_alert_timer,
            )
        )

    async def show_internal_error_alert(self, data: str, buttons: list[AlertButton] | None = None) -> None:
        await self._presenter.open_alert(
            AlertConfig(title="Internal Error", body=f"{data}", buttons=[_DONE_BUTTON])
        )

    async def ignore(self, _data: Any = None, buttons: list[AlertButton] | None = None) -> None:
        """No-op default for events with nothing to show."""
