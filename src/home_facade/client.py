"""
Client and demonstration entry point.

Run with: python -m home_facade
"""

from typing import Iterable, Optional, TextIO
import logging

from home_facade.core.facade import BulkResult, HomeFacade
from home_facade.core.notifications import NotificationSink, console_handler
from home_facade.core.service import DeviceService

logger = logging.getLogger(__name__)


class HomeClient:
    """
    Caller of the facade.

    Holds a reference to a HomeFacade without owning it; several clients
    may share one facade.
    """

    def __init__(self, facade: HomeFacade) -> None:
        self._facade = facade

    @property
    def facade(self) -> HomeFacade:
        return self._facade

    def activate_all(self) -> BulkResult:
        """Switch every device on."""
        return self._facade.activate_all()

    def deactivate_all(self) -> BulkResult:
        """Switch every device off."""
        return self._facade.deactivate_all()


def main(
    stream: Optional[TextIO] = None,
    devices: Optional[Iterable[DeviceService]] = None,
) -> int:
    """
    Wire the home together and run both bulk operations.

    Args:
        stream: Where status lines are written (None = sys.stdout)
        devices: Devices for the facade (None = the default devices)

    Returns:
        Process exit code (0 when every device call succeeded)
    """
    sink = NotificationSink()
    sink.subscribe(console_handler(stream))

    facade = HomeFacade(sink=sink, devices=devices)
    client = HomeClient(facade)

    results = [client.activate_all(), client.deactivate_all()]

    if all(r.ok for r in results):
        return 0

    logger.warning(f"Demo finished with failures: {[r.summary() for r in results]}")
    return 1
