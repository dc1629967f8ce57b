"""
home-facade: a Facade over simulated home devices.

This library provides:
- A DeviceService capability (activate / deactivate)
- Stub light, TV and air conditioning devices
- HomeFacade, which switches every device on or off in one call
- An injectable NotificationSink for device status messages
"""

from home_facade.core.notifications import Notification, NotificationSink, console_handler
from home_facade.core.service import DeviceService
from home_facade.core.facade import BulkResult, HomeFacade
from home_facade.devices import (
    AirConditioningService,
    LightService,
    TVService,
    default_devices,
)
from home_facade.client import HomeClient

__version__ = "0.1.0"

__all__ = [
    "Notification",
    "NotificationSink",
    "console_handler",
    "DeviceService",
    "BulkResult",
    "HomeFacade",
    "AirConditioningService",
    "LightService",
    "TVService",
    "default_devices",
    "HomeClient",
]
