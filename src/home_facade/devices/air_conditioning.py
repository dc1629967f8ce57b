"""
Air conditioning device stub.

Messages use the short form "air condition", e.g.
"The air condition is now turned on!".
"""

from home_facade.core.service import DeviceService


class AirConditioningService(DeviceService):
    """Stub air conditioner that reports its on/off transitions."""

    @property
    def id(self) -> str:
        return "air_conditioning"

    @property
    def name(self) -> str:
        return "air condition"

    def activate(self) -> None:
        self._notify("on")

    def deactivate(self) -> None:
        self._notify("off")
