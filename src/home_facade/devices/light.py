"""Light device stub."""

from home_facade.core.service import DeviceService


class LightService(DeviceService):
    """Stub light that reports its on/off transitions."""

    @property
    def id(self) -> str:
        return "light"

    @property
    def name(self) -> str:
        return "light"

    def activate(self) -> None:
        self._notify("on")

    def deactivate(self) -> None:
        self._notify("off")
