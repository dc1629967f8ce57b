"""
Base class for device services.

A device service is anything the facade can switch on and off.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from home_facade.core.notifications import Notification, NotificationSink

logger = logging.getLogger(__name__)


class DeviceService(ABC):
    """
    Base class for device services.

    A device:
    - Is attached to a NotificationSink by its owner
    - Reports every activation and deactivation as a notification
    - Holds no on/off state; repeated calls emit repeated notifications
    """

    # None until attach(); subclasses need not call super().__init__()
    _sink: Optional[NotificationSink] = None

    @property
    @abstractmethod
    def id(self) -> str:
        """Unique identifier for this device."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name used in status messages."""
        pass

    @abstractmethod
    def activate(self) -> None:
        """Turn the device on."""
        pass

    @abstractmethod
    def deactivate(self) -> None:
        """Turn the device off."""
        pass

    def attach(self, sink: NotificationSink) -> None:
        """
        Attach the device to a notification sink.

        Args:
            sink: Sink that receives this device's notifications
        """
        self._sink = sink

    @property
    def is_attached(self) -> bool:
        return self._sink is not None

    def message_for(self, state: str) -> str:
        """
        Render the status line for a state.

        Override to customize the wording for a device.

        Args:
            state: "on" or "off"

        Returns:
            The status message
        """
        return f"The {self.name} is now turned {state}!"

    def _notify(self, state: str) -> None:
        """
        Emit a notification for the given state.

        Raises:
            RuntimeError: If the device has not been attached to a sink
        """
        if self._sink is None:
            raise RuntimeError(f"Device '{self.id}' is not attached to a notification sink")

        logger.debug(f"Device {self.id} turned {state}")
        self._sink.emit(
            Notification(
                device_id=self.id,
                device_name=self.name,
                state=state,
                message=self.message_for(state),
            )
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
