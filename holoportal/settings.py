"""Portal connection settings resolved from the environment."""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, Field

from .device import DeviceInfo, DevicePlatform


class PortalSettings(BaseModel):
    base_url: str = Field(default=os.getenv("PORTAL_URL", "https://127.0.0.1"))
    timeout: float = Field(default=float(os.getenv("PORTAL_TIMEOUT", "30")))
    # Device portal ships a self-signed certificate.
    verify_tls: bool = Field(
        default=os.getenv("PORTAL_VERIFY_TLS", "false").lower() in {"1", "true", "yes"}
    )
    platform: str = Field(default=os.getenv("PORTAL_PLATFORM", DevicePlatform.HOLOLENS.value))
    device_family: str = Field(
        default=os.getenv("PORTAL_DEVICE_FAMILY", "Windows.Holographic")
    )

    def device_info(self) -> DeviceInfo:
        return DeviceInfo(
            platform=DevicePlatform.parse(self.platform),
            device_family=self.device_family,
        )


@lru_cache()
def get_settings() -> PortalSettings:
    return PortalSettings()
