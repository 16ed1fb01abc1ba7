"""Domain value types exchanged between a dApp and a wallet.

These are the building blocks of event payloads: accounts, networks,
request outputs and pairing requests/responses.
"""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass
from typing import Any


class NetworkType(enum.StrEnum):
    """Network a request targets."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    CUSTOM = "custom"


class PermissionScope(enum.StrEnum):
    """Permissions a dApp can request from a wallet."""

    SIGN = "sign"
    OPERATION_REQUEST = "operation_request"
    THRESHOLD = "threshold"


class Origin(enum.StrEnum):
    """Channel a message arrived on."""

    WEBSITE = "website"
    EXTENSION = "extension"
    P2P = "p2p"


class TransportType(enum.StrEnum):
    """Kind of transport connecting dApp and wallet."""

    CHROME_MESSAGE = "chrome_message"
    POST_MESSAGE = "post_message"
    LEDGER = "ledger"
    P2P = "p2p"


class TransportStatus(enum.StrEnum):
    """Connection state of a transport."""

    NOT_CONNECTED = "NOT_CONNECTED"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"


@dataclass(frozen=True)
class Network:
    """A network definition; ``name`` and ``rpc_url`` are set for custom networks."""

    type: NetworkType = NetworkType.MAINNET
    name: str | None = None
    rpc_url: str | None = None


@dataclass(frozen=True)
class ConnectionContext:
    """Where a response came from."""

    origin: Origin
    id: str


@dataclass(frozen=True)
class AccountInfo:
    """An account the dApp has permissions for."""

    account_identifier: str
    sender_id: str
    origin: Origin
    address: str
    public_key: str
    network: Network
    scopes: tuple[PermissionScope, ...] = ()
    connected_at: int = 0


@dataclass(frozen=True)
class Transport:
    """Snapshot of the transport made active."""

    type: TransportType
    status: TransportStatus = TransportStatus.NOT_CONNECTED


# ---------------------------------------------------------------------------
# Request outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PermissionResponseOutput:
    """Result of a granted permission request."""

    address: str
    public_key: str
    network: Network
    scopes: tuple[PermissionScope, ...] = ()


@dataclass(frozen=True)
class OperationResponseOutput:
    """Result of an operation request (the injected operation hash)."""

    transaction_hash: str


@dataclass(frozen=True)
class SignPayloadResponseOutput:
    """Result of a sign-payload request."""

    signature: str


@dataclass(frozen=True)
class BroadcastResponseOutput:
    """Result of a broadcast request."""

    transaction_hash: str


@dataclass(frozen=True)
class AcknowledgeResponse:
    """Wallet acknowledged that a request was received."""

    id: str
    sender_id: str
    version: str = "2"


# ---------------------------------------------------------------------------
# Pairing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class P2PPairingRequest:
    """Peer info a dApp publishes so a wallet can open a P2P channel."""

    id: str
    name: str
    public_key: str
    version: str
    relay_server: str
    icon: str | None = None
    app_url: str | None = None
    type: str = "p2p-pairing-request"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (camelCase keys, ``None`` fields dropped)."""
        return _camel_dict(asdict(self))


@dataclass(frozen=True)
class PostMessagePairingRequest:
    """Peer info offered to browser-extension wallets."""

    id: str
    name: str
    public_key: str
    version: str
    icon: str | None = None
    app_url: str | None = None
    type: str = "postmessage-pairing-request"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (camelCase keys, ``None`` fields dropped)."""
        return _camel_dict(asdict(self))


@dataclass(frozen=True)
class ExtendedP2PPairingResponse:
    """A wallet answered over the P2P relay."""

    id: str
    name: str
    public_key: str
    version: str
    sender_id: str
    relay_server: str = ""
    icon: str | None = None
    app_url: str | None = None
    extension_id: str | None = None
    type: str = "p2p-pairing-response"


@dataclass(frozen=True)
class ExtendedPostMessagePairingResponse:
    """A browser-extension wallet answered."""

    id: str
    name: str
    public_key: str
    version: str
    sender_id: str
    extension_id: str = ""
    icon: str | None = None
    app_url: str | None = None
    type: str = "postmessage-pairing-response"


@dataclass(frozen=True)
class ErrorResponse:
    """A wallet rejected a request.

    ``error_type`` is a :class:`~beacon_events.errors.beacon_errors.BeaconErrorType`
    value; ``None`` when the wallet sent no type.
    """

    error_type: str | None = None
    error_data: Any = None
    id: str = ""


def _camel_dict(data: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        head, *rest = key.split("_")
        out[head + "".join(part.title() for part in rest)] = value
    return out
