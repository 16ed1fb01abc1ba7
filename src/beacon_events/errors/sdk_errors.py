"""BeaconSDKError — base exception class for all beacon-events errors."""

from __future__ import annotations


class BeaconSDKError(Exception):
    """Base error for all SDK operations.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code string.
    """

    def __init__(self, message: str, *, code: str = "beacon-sdk-error") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidEventError(BeaconSDKError):
    """A handler was registered against something that is not a catalog event.

    Raised at configuration time (``on``, overrides, default-set seeding),
    never by ``emit``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, code="invalid-event")


class SerializerError(BeaconSDKError):
    """A pairing payload could not be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="serializer-error")
