from holoportal.device import DevicePlatform
from holoportal.settings import PortalSettings, get_settings


def test_device_info_from_settings():
    settings = PortalSettings(platform="VirtualMachine", device_family="Windows.Holographic")
    info = settings.device_info()
    assert info.platform is DevicePlatform.VIRTUAL_MACHINE
    assert info.device_family == "Windows.Holographic"


def test_settings_defaults_and_cache():
    get_settings.cache_clear()  # type: ignore
    first = get_settings()
    assert first is get_settings()
    assert first.timeout > 0
    assert isinstance(first.verify_tls, bool)
    get_settings.cache_clear()  # type: ignore
