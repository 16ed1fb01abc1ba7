"""Pairing-payload codec: compact JSON wrapped in Base58Check."""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from beacon_events.errors.sdk_errors import SerializerError
from beacon_events.utils.encoding import base58check_decode, base58check_encode


class Serializer:
    """Encode pairing requests into the string shown in QR codes and links."""

    async def serialize(self, message: Any) -> str:
        """Serialize *message* (dataclass, dict or JSON-able value).

        Dataclasses exposing ``to_dict()`` use it, so wire keys stay camelCase.
        """
        if hasattr(message, "to_dict"):
            message = message.to_dict()
        elif dataclasses.is_dataclass(message) and not isinstance(message, type):
            message = dataclasses.asdict(message)
        text = json.dumps(message, separators=(",", ":"))
        return base58check_encode(text.encode("utf-8"))

    async def deserialize(self, encoded: str) -> Any:
        """Decode a string produced by :meth:`serialize`.

        Raises:
            SerializerError: If *encoded* is not valid Base58Check-wrapped JSON.
        """
        try:
            raw = base58check_decode(encoded)
            return json.loads(raw.decode("utf-8"))
        except (ValueError, UnicodeDecodeError) as exc:
            msg = f"Cannot deserialize payload: {exc}"
            raise SerializerError(msg) from exc
