"""
Notification sink for device status messages.

Devices never write to the console directly. They emit notifications on a
sink, and the sink dispatches them synchronously to its handlers.
"""

import logging
import sys
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, UTC
from typing import Callable, Deque, List, Optional, TextIO

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    """Get current UTC time (for default factory)."""
    return datetime.now(UTC)


@dataclass
class Notification:
    """
    A status message emitted by a device.

    Attributes:
        device_id: ID of the emitting device (e.g., "light")
        device_name: Human-readable device name (e.g., "light", "TV")
        state: "on" or "off"
        message: The rendered status line
        timestamp: When the notification was emitted
    """

    device_id: str
    device_name: str
    state: str
    message: str
    timestamp: datetime = field(default_factory=_utc_now)


NotificationHandler = Callable[[Notification], None]


class NotificationSink:
    """
    Simple, synchronous dispatcher for device notifications.

    Handlers are wrapped in try/except so one bad subscriber cannot break a device call.
    """

    HISTORY_SIZE = 100  # Number of notifications to keep in history

    def __init__(self) -> None:
        """Initialize an empty sink."""
        self._handlers: List[NotificationHandler] = []
        self._history: Deque[Notification] = deque(maxlen=self.HISTORY_SIZE)

    def subscribe(self, handler: NotificationHandler) -> None:
        """
        Subscribe a handler to all notifications.

        Handlers are called in subscription order.

        Args:
            handler: Callable that receives Notification objects
        """
        self._handlers.append(handler)
        logger.debug(f"Subscribed handler {_handler_name(handler)}")

    def unsubscribe(self, handler: NotificationHandler) -> None:
        """
        Remove every registration of a handler.

        Args:
            handler: The handler to unsubscribe
        """
        self._handlers = [h for h in self._handlers if h != handler]
        logger.debug(f"Unsubscribed handler {_handler_name(handler)}")

    def emit(self, notification: Notification) -> None:
        """
        Record a notification and deliver it to every handler.

        Args:
            notification: The notification to emit
        """
        logger.debug(f"Emitting notification from {notification.device_id}: {notification.state}")
        self._history.append(notification)

        for handler in self._handlers:
            try:
                handler(notification)
            except Exception as e:
                logger.error(
                    f"Error in notification handler {_handler_name(handler)} "
                    f"for device {notification.device_id}: {e}",
                    exc_info=True,
                )

    @property
    def history(self) -> List[Notification]:
        """Emitted notifications, oldest first."""
        return list(self._history)

    def messages(self) -> List[str]:
        """Get the message text of every recorded notification, in emission order."""
        return [n.message for n in self._history]

    def clear_history(self) -> None:
        """Forget recorded notifications."""
        self._history.clear()


def console_handler(stream: Optional[TextIO] = None) -> NotificationHandler:
    """
    Build a handler that writes each message on its own line.

    Args:
        stream: Target stream (None = sys.stdout at the time of each write)

    Returns:
        A handler suitable for NotificationSink.subscribe
    """

    def write_to_console(notification: Notification) -> None:
        target = stream if stream is not None else sys.stdout
        target.write(notification.message + "\n")

    return write_to_console


def _handler_name(handler: NotificationHandler) -> str:
    return getattr(handler, "__name__", repr(handler))
