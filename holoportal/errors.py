"""Exceptions raised by the device portal client."""

from __future__ import annotations


class PortalError(Exception):
    pass


class UnsupportedDeviceError(PortalError):
    """The connected device does not expose the requested feature."""


class TransportError(PortalError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecordingError(PortalError):
    """The device refused to hand back a perception simulation recording."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason
