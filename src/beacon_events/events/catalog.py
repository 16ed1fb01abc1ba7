"""Event catalog: the closed set of SDK events and the payload each carries.

The kind→payload pairing is a static contract.  The dispatcher does not
validate payloads when emitting; producers are responsible for passing the
payload type listed in :data:`EVENT_PAYLOAD_TYPES`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import NoneType
from typing import TYPE_CHECKING, Literal

from beacon_events.types import (
    AccountInfo,
    AcknowledgeResponse,
    BroadcastResponseOutput,
    ConnectionContext,
    ErrorResponse,
    ExtendedP2PPairingResponse,
    ExtendedPostMessagePairingResponse,
    Network,
    NetworkType,
    OperationResponseOutput,
    P2PPairingRequest,
    PermissionResponseOutput,
    PostMessagePairingRequest,
    SignPayloadResponseOutput,
    Transport,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from beacon_events.utils.block_explorer import BlockExplorer


class BeaconEvent(enum.StrEnum):
    """The different events that can be emitted by the SDK."""

    PERMISSION_REQUEST_SENT = "PERMISSION_REQUEST_SENT"
    PERMISSION_REQUEST_SUCCESS = "PERMISSION_REQUEST_SUCCESS"
    PERMISSION_REQUEST_ERROR = "PERMISSION_REQUEST_ERROR"
    OPERATION_REQUEST_SENT = "OPERATION_REQUEST_SENT"
    OPERATION_REQUEST_SUCCESS = "OPERATION_REQUEST_SUCCESS"
    OPERATION_REQUEST_ERROR = "OPERATION_REQUEST_ERROR"
    SIGN_REQUEST_SENT = "SIGN_REQUEST_SENT"
    SIGN_REQUEST_SUCCESS = "SIGN_REQUEST_SUCCESS"
    SIGN_REQUEST_ERROR = "SIGN_REQUEST_ERROR"
    BROADCAST_REQUEST_SENT = "BROADCAST_REQUEST_SENT"
    BROADCAST_REQUEST_SUCCESS = "BROADCAST_REQUEST_SUCCESS"
    BROADCAST_REQUEST_ERROR = "BROADCAST_REQUEST_ERROR"

    ACKNOWLEDGE_RECEIVED = "ACKNOWLEDGE_RECEIVED"
    LOCAL_RATE_LIMIT_REACHED = "LOCAL_RATE_LIMIT_REACHED"
    NO_PERMISSIONS = "NO_PERMISSIONS"

    ACTIVE_ACCOUNT_SET = "ACTIVE_ACCOUNT_SET"
    ACTIVE_TRANSPORT_SET = "ACTIVE_TRANSPORT_SET"

    PAIR_INIT = "PAIR_INIT"
    PAIR_SUCCESS = "PAIR_SUCCESS"
    CHANNEL_CLOSED = "CHANNEL_CLOSED"

    P2P_CHANNEL_CONNECT_SUCCESS = "P2P_CHANNEL_CONNECT_SUCCESS"
    P2P_LISTEN_FOR_CHANNEL_OPEN = "P2P_LISTEN_FOR_CHANNEL_OPEN"

    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN = "UNKNOWN"


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RequestSentInfo:
    """Payload of every ``*_REQUEST_SENT`` event."""

    wallet_name: str
    reset_callback: Callable[[], Awaitable[None]] | None = None
    wallet_icon: str | None = None


@dataclass(frozen=True)
class PermissionRequestSuccess:
    account: AccountInfo
    output: PermissionResponseOutput
    block_explorer: BlockExplorer
    connection_context: ConnectionContext


@dataclass(frozen=True)
class OperationRequestSuccess:
    account: AccountInfo
    output: OperationResponseOutput
    block_explorer: BlockExplorer
    connection_context: ConnectionContext


@dataclass(frozen=True)
class SignRequestSuccess:
    output: SignPayloadResponseOutput
    connection_context: ConnectionContext


@dataclass(frozen=True)
class BroadcastRequestSuccess:
    network: Network
    output: BroadcastResponseOutput
    block_explorer: BlockExplorer
    connection_context: ConnectionContext


@dataclass(frozen=True)
class PairInit:
    """Payload of ``PAIR_INIT``: both ways a wallet can pair with the dApp."""

    p2p_peer_info: P2PPairingRequest
    postmessage_peer_info: PostMessagePairingRequest
    preferred_network: NetworkType = NetworkType.MAINNET
    aborted_handler: Callable[[], None] | None = None


PairSuccess = ExtendedPostMessagePairingResponse | ExtendedP2PPairingResponse

EVENT_PAYLOAD_TYPES: dict[BeaconEvent, object] = {
    BeaconEvent.PERMISSION_REQUEST_SENT: RequestSentInfo,
    BeaconEvent.PERMISSION_REQUEST_SUCCESS: PermissionRequestSuccess,
    BeaconEvent.PERMISSION_REQUEST_ERROR: ErrorResponse,
    BeaconEvent.OPERATION_REQUEST_SENT: RequestSentInfo,
    BeaconEvent.OPERATION_REQUEST_SUCCESS: OperationRequestSuccess,
    BeaconEvent.OPERATION_REQUEST_ERROR: ErrorResponse,
    BeaconEvent.SIGN_REQUEST_SENT: RequestSentInfo,
    BeaconEvent.SIGN_REQUEST_SUCCESS: SignRequestSuccess,
    BeaconEvent.SIGN_REQUEST_ERROR: ErrorResponse,
    BeaconEvent.BROADCAST_REQUEST_SENT: RequestSentInfo,
    BeaconEvent.BROADCAST_REQUEST_SUCCESS: BroadcastRequestSuccess,
    BeaconEvent.BROADCAST_REQUEST_ERROR: ErrorResponse,
    BeaconEvent.ACKNOWLEDGE_RECEIVED: AcknowledgeResponse,
    BeaconEvent.LOCAL_RATE_LIMIT_REACHED: NoneType,
    BeaconEvent.NO_PERMISSIONS: NoneType,
    BeaconEvent.ACTIVE_ACCOUNT_SET: AccountInfo | None,
    BeaconEvent.ACTIVE_TRANSPORT_SET: Transport,
    BeaconEvent.PAIR_INIT: PairInit,
    BeaconEvent.PAIR_SUCCESS: PairSuccess,
    BeaconEvent.P2P_CHANNEL_CONNECT_SUCCESS: P2PPairingRequest,
    BeaconEvent.P2P_LISTEN_FOR_CHANNEL_OPEN: P2PPairingRequest,
    BeaconEvent.CHANNEL_CLOSED: str,
    BeaconEvent.INTERNAL_ERROR: str,
    BeaconEvent.UNKNOWN: NoneType,
}

# ---------------------------------------------------------------------------
# Event groups sharing one payload type (used for typed registration)
# ---------------------------------------------------------------------------

RequestSentEvent = Literal[
    BeaconEvent.PERMISSION_REQUEST_SENT,
    BeaconEvent.OPERATION_REQUEST_SENT,
    BeaconEvent.SIGN_REQUEST_SENT,
    BeaconEvent.BROADCAST_REQUEST_SENT,
]
RequestErrorEvent = Literal[
    BeaconEvent.PERMISSION_REQUEST_ERROR,
    BeaconEvent.OPERATION_REQUEST_ERROR,
    BeaconEvent.SIGN_REQUEST_ERROR,
    BeaconEvent.BROADCAST_REQUEST_ERROR,
]
NoPayloadEvent = Literal[
    BeaconEvent.LOCAL_RATE_LIMIT_REACHED,
    BeaconEvent.NO_PERMISSIONS,
    BeaconEvent.UNKNOWN,
]
PeerInfoEvent = Literal[
    BeaconEvent.P2P_CHANNEL_CONNECT_SUCCESS,
    BeaconEvent.P2P_LISTEN_FOR_CHANNEL_OPEN,
]
MessageEvent = Literal[BeaconEvent.CHANNEL_CLOSED, BeaconEvent.INTERNAL_ERROR]
