"""Device capability checks shared by the HoloLens-only APIs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import UnsupportedDeviceError

HOLOGRAPHIC_FAMILY = "Windows.Holographic"


class DevicePlatform(str, Enum):
    HOLOLENS = "HoloLens"
    MOBILE = "Mobile"
    DESKTOP = "Desktop"
    XBOX = "Xbox"
    IOT_RASPBERRY_PI3 = "IoTRaspberryPi3"
    VIRTUAL_MACHINE = "VirtualMachine"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str | None) -> "DevicePlatform":
        for member in cls:
            if value and member.value.lower() == value.lower():
                return member
        return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class DeviceInfo:
    """Platform and OS family the portal reported for the connected device."""

    platform: DevicePlatform = DevicePlatform.UNKNOWN
    device_family: str = ""


def is_hololens(platform: DevicePlatform, device_family: str) -> bool:
    # The HoloLens emulator reports itself as a VM running the holographic family.
    if platform == DevicePlatform.HOLOLENS:
        return True
    return platform == DevicePlatform.VIRTUAL_MACHINE and device_family == HOLOGRAPHIC_FAMILY


def require_hololens(device: DeviceInfo) -> None:
    if not is_hololens(device.platform, device.device_family):
        raise UnsupportedDeviceError("This method is only supported on HoloLens.")
