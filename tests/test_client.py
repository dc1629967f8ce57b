"""Tests for HomeClient and the demo entry point."""

import io
import logging

from home_facade import (
    DeviceService,
    HomeClient,
    HomeFacade,
    LightService,
    NotificationSink,
    TVService,
)
from home_facade.client import main


EXPECTED_TRANSCRIPT = (
    "The air condition is now turned on!\n"
    "The light is now turned on!\n"
    "The TV is now turned on!\n"
    "The air condition is now turned off!\n"
    "The light is now turned off!\n"
    "The TV is now turned off!\n"
)


class UnreachableDoorbellService(DeviceService):
    """Device whose controller never answers."""

    @property
    def id(self) -> str:
        return "doorbell"

    @property
    def name(self) -> str:
        return "doorbell"

    def activate(self) -> None:
        raise ConnectionError("doorbell offline")

    def deactivate(self) -> None:
        raise ConnectionError("doorbell offline")


def test_client_forwards_to_facade():
    """Test that client calls reach the facade."""
    sink = NotificationSink()
    facade = HomeFacade(sink=sink)
    client = HomeClient(facade)

    on = client.activate_all()
    off = client.deactivate_all()

    assert on.operation == "activate"
    assert off.operation == "deactivate"
    assert len(sink.messages()) == 6


def test_clients_share_facade():
    """Test that two clients can drive the same facade."""
    sink = NotificationSink()
    facade = HomeFacade(sink=sink)

    HomeClient(facade).activate_all()
    HomeClient(facade).deactivate_all()

    assert HomeClient(facade).facade is facade
    assert len(sink.messages()) == 6


def test_main_transcript():
    """Test the demo writes the full transcript and exits cleanly."""
    stream = io.StringIO()

    exit_code = main(stream)

    assert exit_code == 0
    assert stream.getvalue() == EXPECTED_TRANSCRIPT


def test_main_defaults_to_stdout(capsys):
    """Test that the demo prints to stdout when no stream is given."""
    assert main() == 0
    assert capsys.readouterr().out == EXPECTED_TRANSCRIPT


def test_main_custom_devices():
    """Test that main runs the devices it is given, in order."""
    stream = io.StringIO()

    exit_code = main(stream, devices=[TVService(), LightService()])

    assert exit_code == 0
    assert stream.getvalue() == (
        "The TV is now turned on!\n"
        "The light is now turned on!\n"
        "The TV is now turned off!\n"
        "The light is now turned off!\n"
    )


def test_main_reports_failure(caplog):
    """Test that a failing device gives exit code 1 and the others still run."""
    stream = io.StringIO()

    with caplog.at_level(logging.WARNING, logger="home_facade"):
        exit_code = main(stream, devices=[LightService(), UnreachableDoorbellService()])

    assert exit_code == 1
    assert stream.getvalue() == (
        "The light is now turned on!\n"
        "The light is now turned off!\n"
    )
    assert "Demo finished with failures" in caplog.text
    assert "doorbell offline" in caplog.text
