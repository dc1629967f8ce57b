"""TV device stub."""

from home_facade.core.service import DeviceService


class TVService(DeviceService):
    """Stub television that reports its on/off transitions."""

    @property
    def id(self) -> str:
        return "tv"

    @property
    def name(self) -> str:
        return "TV"

    def activate(self) -> None:
        self._notify("on")

    def deactivate(self) -> None:
        self._notify("off")
