"""
Device stubs for home-facade.

Each device implements the DeviceService capability by emitting a status
notification instead of talking to hardware.

Default order (used by HomeFacade when no devices are given):
    1. AirConditioningService
    2. LightService
    3. TVService
"""

from typing import List

from home_facade.core.service import DeviceService
from home_facade.devices.air_conditioning import AirConditioningService
from home_facade.devices.light import LightService
from home_facade.devices.tv import TVService

DEFAULT_DEVICE_ORDER = (
    AirConditioningService,
    LightService,
    TVService,
)


def default_devices() -> List[DeviceService]:
    """
    Create fresh instances of the default devices.

    Returns:
        One instance of each default device, in DEFAULT_DEVICE_ORDER
    """
    return [device_cls() for device_cls in DEFAULT_DEVICE_ORDER]


__all__ = [
    "AirConditioningService",
    "LightService",
    "TVService",
    "DEFAULT_DEVICE_ORDER",
    "default_devices",
]
