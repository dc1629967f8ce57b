"""
Core components of home-facade.

This package contains:
- notifications: Notification dataclass and NotificationSink dispatcher
- service: DeviceService base class
- facade: HomeFacade coordinator and BulkResult
"""

from home_facade.core.notifications import Notification, NotificationSink, console_handler
from home_facade.core.service import DeviceService
from home_facade.core.facade import BulkResult, HomeFacade

__all__ = [
    "Notification",
    "NotificationSink",
    "console_handler",
    "DeviceService",
    "BulkResult",
    "HomeFacade",
]
