"""Async client for the HoloLens perception simulation recording portal API."""

from __future__ import annotations

from .device import DeviceInfo, DevicePlatform, is_hololens, require_hololens
from .errors import PortalError, RecordingError, TransportError, UnsupportedDeviceError
from .schemas import RecordingStatus, StartRecordingOptions
from .services.network import PortalSession
from .services.recording import RecordingClient, try_parse_error_shape
from .settings import PortalSettings, get_settings

__all__ = [
    "DeviceInfo",
    "DevicePlatform",
    "PortalError",
    "PortalSession",
    "PortalSettings",
    "RecordingClient",
    "RecordingError",
    "RecordingStatus",
    "StartRecordingOptions",
    "TransportError",
    "UnsupportedDeviceError",
    "get_settings",
    "is_hololens",
    "require_hololens",
    "try_parse_error_shape",
]
