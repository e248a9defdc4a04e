"""Pytest fixtures for tests.

The fake sysfs tree mirrors what the usbled driver exposes:

    <tmp>/sys/devices/<name>/{red,green,blue}
    <tmp>/sys/bus/usb/drivers/usbled/<name> -> ../../../../devices/<name>
"""

from pathlib import Path

import pytest

from gaudy_leds.devices import LedArray, find_led_devices

LED_NAMES = ("1-1.1:1.0", "1-1.2:1.0", "1-1.3:1.0")


class RecordingSink:
    """ChannelSink that writes synchronously and remembers every write."""

    def __init__(self, write_through: bool = True):
        self.write_through = write_through
        self.writes: list[tuple[str, str]] = []
        self.closed = False
        self.drained = None

    def submit(self, path: Path, text: str) -> None:
        self.writes.append((path.name, text))
        if self.write_through:
            path.write_text(text)

    def flush(self, timeout=None) -> bool:
        return True

    def close(self, drain: bool = False, timeout: float = 1.0) -> None:
        self.closed = True
        self.drained = drain


def read_channels(device_dir: Path) -> tuple[int, int, int]:
    """Read back the raw values stored in a fake device directory."""
    return tuple(int((device_dir / channel).read_text().strip()) for channel in ("red", "green", "blue"))


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config and log files out of the real home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def driver_dir(tmp_path):
    """Empty usbled driver directory with the entries the kernel always adds."""
    driver = tmp_path / "sys" / "bus" / "usb" / "drivers" / "usbled"
    driver.mkdir(parents=True)
    for name in ("bind", "unbind", "uevent", "new_id"):
        (driver / name).write_text("")

    module = tmp_path / "sys" / "module" / "usbled"
    module.mkdir(parents=True)
    (driver / "module").symlink_to(module, target_is_directory=True)
    return driver


@pytest.fixture
def make_led(driver_dir):
    """Factory binding a fake LED to the driver; returns the device directory."""
    devices_root = driver_dir.parents[3] / "devices"

    def _make_led(name: str, rgb: tuple[int, int, int] = (0, 0, 0)) -> Path:
        device = devices_root / name
        device.mkdir(parents=True)
        for channel, value in zip(("red", "green", "blue"), rgb):
            (device / channel).write_text(f"{value}\n")
        (driver_dir / name).symlink_to(device, target_is_directory=True)
        return device

    return _make_led


@pytest.fixture
def fake_leds(driver_dir, make_led):
    """Three LEDs bound to the driver; returns their device directories in discovery order."""
    return [make_led(name) for name in LED_NAMES]


@pytest.fixture
def sinks():
    """RecordingSinks handed out by recording_array, in array order."""
    return []


@pytest.fixture
def recording_array(driver_dir, fake_leds, sinks):
    """LedArray over the fake LEDs whose writes land synchronously."""
    def factory(address):
        sink = RecordingSink()
        sinks.append(sink)
        return sink

    return LedArray.from_addresses(find_led_devices(driver_dir), writer_factory=factory)
