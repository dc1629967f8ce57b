#!/usr/bin/env python3
"""
Demo of extending the facade with a custom device.

This example demonstrates:
1. Writing a new DeviceService
2. Handing the facade an explicit device order
3. Per-device failure isolation in bulk operations

Run with: python -m examples.custom_device_demo
"""

import logging

from home_facade import (
    AirConditioningService,
    DeviceService,
    HomeFacade,
    LightService,
    NotificationSink,
    TVService,
    console_handler,
)


class CoffeeMachineService(DeviceService):
    """A fourth device with its own wording."""

    @property
    def id(self) -> str:
        return "coffee_machine"

    @property
    def name(self) -> str:
        return "coffee machine"

    def activate(self) -> None:
        self._notify("on")

    def deactivate(self) -> None:
        self._notify("off")

    def message_for(self, state: str) -> str:
        if state == "on":
            return "The coffee machine is now turned on! Brewing..."
        return super().message_for(state)


class GarageDoorService(DeviceService):
    """A device that is always offline."""

    @property
    def id(self) -> str:
        return "garage_door"

    @property
    def name(self) -> str:
        return "garage door"

    def activate(self) -> None:
        raise ConnectionError("garage door controller unreachable")

    def deactivate(self) -> None:
        raise ConnectionError("garage door controller unreachable")


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Custom Device Demo")
    print("=" * 60)

    sink = NotificationSink()
    sink.subscribe(console_handler())

    # 1. Four devices, custom one last
    print("\n1. Facade with a fourth device")
    facade = HomeFacade(
        sink=sink,
        devices=[
            AirConditioningService(),
            LightService(),
            TVService(),
            CoffeeMachineService(),
        ],
    )
    facade.activate_all()
    facade.deactivate_all()

    # 2. A failing device does not stop the others
    print("\n2. Facade with an unreachable device")
    facade = HomeFacade(
        sink=sink,
        devices=[LightService(), GarageDoorService(), TVService()],
    )
    result = facade.activate_all()
    print(f"   -> {result.summary()}")
    for device_id, error in result.failed.items():
        print(f"   -> {device_id}: {error}")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
