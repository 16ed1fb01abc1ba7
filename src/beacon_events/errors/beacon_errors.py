"""Wallet-side error descriptors carried in ``*_REQUEST_ERROR`` payloads.

A wallet answers a failed request with an error type string; the default
error handler turns it into a title/description pair for the alert.
"""

from __future__ import annotations

import enum
from typing import Any, ClassVar

from beacon_events.errors.sdk_errors import BeaconSDKError


class BeaconErrorType(enum.StrEnum):
    """Error types a wallet may return."""

    BROADCAST_ERROR = "BROADCAST_ERROR"
    NETWORK_NOT_SUPPORTED = "NETWORK_NOT_SUPPORTED"
    NO_ADDRESS_ERROR = "NO_ADDRESS_ERROR"
    NO_PRIVATE_KEY_FOUND_ERROR = "NO_PRIVATE_KEY_FOUND_ERROR"
    NOT_GRANTED_ERROR = "NOT_GRANTED_ERROR"
    PARAMETERS_INVALID_ERROR = "PARAMETERS_INVALID_ERROR"
    TOO_MANY_OPERATIONS = "TOO_MANY_OPERATIONS"
    TRANSACTION_INVALID_ERROR = "TRANSACTION_INVALID_ERROR"
    SIGNATURE_TYPE_NOT_SUPPORTED = "SIGNATURE_TYPE_NOT_SUPPORTED"
    ABORTED_ERROR = "ABORTED_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class BeaconError(BeaconSDKError):
    """Base class for errors reported by the wallet.

    Subclasses set ``error_type``, ``title`` and ``description``.
    """

    error_type: ClassVar[BeaconErrorType] = BeaconErrorType.UNKNOWN_ERROR
    title: ClassVar[str] = "Error"
    description: ClassVar[str] = (
        "An unknown error occured. Please try again or report it to a developer."
    )

    def __init__(self, data: Any = None) -> None:
        super().__init__(self.description, code=self.error_type.value.lower())
        self.data = data

    @property
    def full_description(self) -> str:
        """Description shown to the user, including any wallet-supplied detail."""
        return self.description

    @classmethod
    def get_error(cls, error_type: BeaconErrorType | str, data: Any = None) -> BeaconError:
        """Build the error matching *error_type*.

        Unrecognised types resolve to :class:`UnknownBeaconError`.
        """
        try:
            resolved = BeaconErrorType(error_type)
        except ValueError:
            return UnknownBeaconError(data)
        return _ERRORS.get(resolved, UnknownBeaconError)(data)


class BroadcastBeaconError(BeaconError):
    error_type = BeaconErrorType.BROADCAST_ERROR
    title = "Broadcast Error"
    description = "The transaction could not be broadcast to the network. Please try again."


class NetworkNotSupportedBeaconError(BeaconError):
    error_type = BeaconErrorType.NETWORK_NOT_SUPPORTED
    title = "Network Error"
    description = "The wallet does not support this network. Please select another one."


class NoAddressBeaconError(BeaconError):
    error_type = BeaconErrorType.NO_ADDRESS_ERROR
    title = "No Address"
    description = (
        "The wallet does not have an account set up. "
        "Please make sure to set up your wallet and try again."
    )


class NoPrivateKeyBeaconError(BeaconError):
    error_type = BeaconErrorType.NO_PRIVATE_KEY_FOUND_ERROR
    title = "Account Not Found"
    description = (
        "The account you are trying to interact with is not available. "
        "Please make sure to add the account to your wallet and try again."
    )


class NotGrantedBeaconError(BeaconError):
    error_type = BeaconErrorType.NOT_GRANTED_ERROR
    title = "Permission Not Granted"
    description = (
        "You do not have the necessary permissions to perform this action. "
        "Please initiate another permission request and give the necessary permissions."
    )


class ParametersInvalidBeaconError(BeaconError):
    error_type = BeaconErrorType.PARAMETERS_INVALID_ERROR
    title = "Parameters Invalid"
    description = (
        "Some of the parameters you provided are invalid and the request could not be "
        "completed. Please check your inputs and try again."
    )


class TooManyOperationsBeaconError(BeaconError):
    error_type = BeaconErrorType.TOO_MANY_OPERATIONS
    title = "Too Many Operations"
    description = (
        "The request contains too many transactions. "
        "Please include fewer operations and try again."
    )


class TransactionInvalidBeaconError(BeaconError):
    error_type = BeaconErrorType.TRANSACTION_INVALID_ERROR
    title = "Transaction Invalid"
    description = "The transaction is invalid and the node did not accept it."

    @property
    def full_description(self) -> str:
        if self.data is None:
            return self.description
        return f"{self.description} Details: {self.data}"


class SignatureTypeNotSupportedBeaconError(BeaconError):
    error_type = BeaconErrorType.SIGNATURE_TYPE_NOT_SUPPORTED
    title = "Signature Type Not Supported"
    description = "The wallet is not able to sign payloads of this type."


class AbortedBeaconError(BeaconError):
    error_type = BeaconErrorType.ABORTED_ERROR
    title = "Aborted"
    description = "The action was aborted by the user."


class UnknownBeaconError(BeaconError):
    error_type = BeaconErrorType.UNKNOWN_ERROR


_ERRORS: dict[BeaconErrorType, type[BeaconError]] = {
    cls.error_type: cls
    for cls in (
        BroadcastBeaconError,
        NetworkNotSupportedBeaconError,
        NoAddressBeaconError,
        NoPrivateKeyBeaconError,
        NotGrantedBeaconError,
        ParametersInvalidBeaconError,
        TooManyOperationsBeaconError,
        TransactionInvalidBeaconError,
        SignatureTypeNotSupportedBeaconError,
        AbortedBeaconError,
        UnknownBeaconError,
    )
}
