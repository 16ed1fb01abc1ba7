"""Tests for Base58Check encoding and the pairing serializer."""

from __future__ import annotations

import pytest

from beacon_events.errors.sdk_errors import SerializerError
from beacon_events.serializer import Serializer
from beacon_events.utils.encoding import (
    base58_decode,
    base58_encode,
    base58check_decode,
    base58check_encode,
)


class TestBase58:
    def test_known_vector(self) -> None:
        assert base58_encode(b"hello world") == "StV1DL6CwTryKyV"
        assert base58_decode("StV1DL6CwTryKyV") == b"hello world"

    def test_leading_zeros_preserved(self) -> None:
        encoded = base58_encode(b"\x00\x00\x01")
        assert encoded.startswith("11")
        assert base58_decode(encoded) == b"\x00\x00\x01"

    def test_empty(self) -> None:
        assert base58_encode(b"") == ""
        assert base58_decode("") == b""

    def test_invalid_character(self) -> None:
        with pytest.raises(ValueError, match="Invalid Base58"):
            base58_decode("0OIl")


class TestBase58Check:
    def test_roundtrip(self) -> None:
        assert base58check_decode(base58check_encode(b"\x00beacon")) == b"\x00beacon"

    def test_checksum_mismatch(self) -> None:
        encoded = base58check_encode(b"payload")
        tampered = encoded[:-1] + ("2" if encoded[-1] != "2" else "3")
        with pytest.raises(ValueError, match="checksum"):
            base58check_decode(tampered)

    def test_too_short(self) -> None:
        with pytest.raises(ValueError, match="too short"):
            base58check_decode("1")


class TestSerializer:
    @pytest.mark.asyncio
    async def test_pairing_request_uses_wire_keys(self, p2p_request) -> None:
        serializer = Serializer()
        decoded = await serializer.deserialize(await serializer.serialize(p2p_request))
        assert decoded == {
            "id": p2p_request.id,
            "name": "Example dApp",
            "publicKey": "a1b2c3",
            "version": "3",
            "relayServer": "beacon-node-1.example.com",
            "type": "p2p-pairing-request",
        }

    @pytest.mark.asyncio
    async def test_plain_values(self) -> None:
        serializer = Serializer()
        assert await serializer.deserialize(await serializer.serialize({"a": [1, 2]})) == {"a": [1, 2]}

    @pytest.mark.asyncio
    async def test_deserialize_garbage(self) -> None:
        with pytest.raises(SerializerError):
            await Serializer().deserialize("not-base58!")

    @pytest.mark.asyncio
    async def test_deserialize_non_json(self) -> None:
        with pytest.raises(SerializerError):
            await Serializer().deserialize(base58check_encode(b"\xff\xfe"))
