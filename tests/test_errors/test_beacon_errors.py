"""Tests for SDK error classes and wallet error descriptors."""

from __future__ import annotations

import pytest

from beacon_events.errors.beacon_errors import (
    AbortedBeaconError,
    BeaconError,
    BeaconErrorType,
    NotGrantedBeaconError,
    TransactionInvalidBeaconError,
    UnknownBeaconError,
)
from beacon_events.errors.sdk_errors import BeaconSDKError, InvalidEventError, SerializerError

# ---------------------------------------------------------------------------
# BeaconSDKError base class
# ---------------------------------------------------------------------------


class TestBeaconSDKError:
    def test_default_attributes(self) -> None:
        err = BeaconSDKError("something broke")
        assert str(err) == "something broke"
        assert err.message == "something broke"
        assert err.code == "beacon-sdk-error"

    def test_invalid_event(self) -> None:
        err = InvalidEventError("Unknown event: 'X'")
        assert isinstance(err, BeaconSDKError)
        assert err.code == "invalid-event"

    def test_serializer_error(self) -> None:
        with pytest.raises(BeaconSDKError, match="bad"):
            raise SerializerError("bad payload")


# ---------------------------------------------------------------------------
# Wallet error descriptors
# ---------------------------------------------------------------------------


class TestBeaconError:
    def test_every_type_resolves(self) -> None:
        for error_type in BeaconErrorType:
            err = BeaconError.get_error(error_type)
            assert err.error_type is error_type
            assert err.title
            assert err.description

    def test_resolves_from_string(self) -> None:
        err = BeaconError.get_error("NOT_GRANTED_ERROR")
        assert isinstance(err, NotGrantedBeaconError)
        assert err.title == "Permission Not Granted"
        assert err.code == "not_granted_error"

    def test_unknown_type_falls_back(self) -> None:
        err = BeaconError.get_error("SOMETHING_NEW")
        assert isinstance(err, UnknownBeaconError)
        assert err.title == "Error"

    def test_data_kept(self) -> None:
        err = BeaconError.get_error(BeaconErrorType.ABORTED_ERROR, {"reason": "user"})
        assert isinstance(err, AbortedBeaconError)
        assert err.data == {"reason": "user"}
        assert err.full_description == err.description

    def test_transaction_invalid_details(self) -> None:
        err = TransactionInvalidBeaconError(["proto.alpha.balance_too_low"])
        assert "balance_too_low" in err.full_description
        assert TransactionInvalidBeaconError().full_description == err.description

    def test_is_sdk_error(self) -> None:
        assert isinstance(UnknownBeaconError(), BeaconSDKError)
