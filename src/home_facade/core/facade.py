"""
HomeFacade: one entry point for switching every device on or off.

The facade owns its devices, not their behavior.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from home_facade.core.notifications import NotificationSink
from home_facade.core.service import DeviceService
from home_facade.devices import default_devices

logger = logging.getLogger(__name__)


@dataclass
class BulkResult:
    """Outcome of a bulk operation across all owned devices."""

    operation: str
    succeeded: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    def summary(self) -> str:
        """One-line description, e.g. "activate: 2/3 devices succeeded (failed: tv)"."""
        text = f"{self.operation}: {len(self.succeeded)}/{self.total} devices succeeded"
        if self.failed:
            text += f" (failed: {', '.join(self.failed)})"
        return text


class HomeFacade:
    """
    Coordinates a fixed, ordered set of device services.

    Responsibilities:
    - Own one instance of each device for its whole lifetime
    - Attach every device to a single notification sink
    - Run activate/deactivate across all devices in declaration order
    - Isolate per-device failures so one device cannot abort the batch

    Devices cannot be added or removed after construction.
    """

    def __init__(
        self,
        sink: Optional[NotificationSink] = None,
        devices: Optional[Iterable[DeviceService]] = None,
    ) -> None:
        """
        Initialize the facade.

        Args:
            sink: Sink for device notifications (None = a new NotificationSink)
            devices: Devices to own, in the order bulk operations visit them
                (None = default_devices())

        Raises:
            TypeError: If a device does not implement DeviceService
            ValueError: If two devices share an ID, or a device already
                belongs to another facade
        """
        if devices is None:
            devices = default_devices()
        devices = tuple(devices)

        seen = set()
        for device in devices:
            if not isinstance(device, DeviceService):
                raise TypeError(f"{device!r} is not a DeviceService")
            if device.id in seen:
                raise ValueError(f"Device with id '{device.id}' already exists")
            if device.is_attached:
                raise ValueError(f"Device '{device.id}' is already owned by another facade")
            seen.add(device.id)

        self._sink = sink if sink is not None else NotificationSink()
        self._devices: Tuple[DeviceService, ...] = devices

        for device in self._devices:
            device.attach(self._sink)

        logger.info(f"Created facade with devices: {[d.id for d in self._devices]}")

    @property
    def devices(self) -> Tuple[DeviceService, ...]:
        """Owned devices, in bulk-operation order."""
        return self._devices

    @property
    def sink(self) -> NotificationSink:
        return self._sink

    def activate_all(self) -> BulkResult:
        """
        Activate every device in order.

        Returns:
            Result listing which devices succeeded and which failed
        """
        return self._run("activate")

    def deactivate_all(self) -> BulkResult:
        """
        Deactivate every device in order.

        Returns:
            Result listing which devices succeeded and which failed
        """
        return self._run("deactivate")

    def _run(self, operation: str) -> BulkResult:
        result = BulkResult(operation=operation)

        for device in self._devices:
            try:
                getattr(device, operation)()
            except Exception as e:
                logger.error(
                    f"Error during {operation} of device {device.id}: {e}",
                    exc_info=True,
                )
                result.failed[device.id] = str(e)
            else:
                result.succeeded.append(device.id)

        if result.ok:
            logger.info(result.summary())
        else:
            logger.warning(result.summary())

        return result
