"""Tests for LedService against a fake usbled sysfs tree."""

import pytest

from conftest import read_channels
from gaudy_leds.core import AnimationScheduler, SchedulerState
from gaudy_leds.exceptions import DeviceUnavailable, InvalidColorSpec
from gaudy_leds.services import LedService


@pytest.fixture
def service(recording_array):
    return LedService(recording_array)


def values(fake_leds):
    return [read_channels(device) for device in fake_leds]


@pytest.mark.integration
class TestLedService:
    """Test each command operation end to end through the channel files."""

    def test_identify(self, service, fake_leds):
        assert service.identify() == ["red", "green", "blue"]
        assert values(fake_leds) == [(64, 0, 0), (0, 32, 0), (0, 0, 64)]

    def test_all(self, service, fake_leds):
        service.all("orange")
        assert values(fake_leds) == [(64, 41, 0)] * 3

    def test_set_positional(self, service, fake_leds):
        service.set(["red", "#0000ff"])
        assert values(fake_leds) == [(64, 0, 0), (0, 0, 64), (0, 0, 0)]

    def test_set_with_no_colors_turns_off(self, service, fake_leds):
        service.all("white")
        service.set([])
        assert values(fake_leds) == [(0, 0, 0)] * 3

    def test_set_extra_colors_ignored(self, service, fake_leds, caplog):
        service.set(["red", "red", "red", "blue"])
        assert values(fake_leds) == [(64, 0, 0)] * 3
        assert "ignoring the extra ones" in caplog.text

    def test_invalid_color_writes_nothing(self, service, sinks):
        with pytest.raises(InvalidColorSpec):
            service.set(["red", "not-a-color"])
        assert all(sink.writes == [] for sink in sinks)

    def test_raw(self, service, fake_leds):
        service.raw(1, 2, 3)
        assert values(fake_leds) == [(1, 2, 3)] * 3

    def test_progress(self, service, fake_leds):
        service.progress(100, "lime")
        assert values(fake_leds) == [(0, 64, 0)] * 3
        service.progress(0, "lime")
        assert values(fake_leds) == [(0, 0, 0)] * 3

    def test_rainbow(self, service, fake_leds):
        service.rainbow()
        assert values(fake_leds) == [(64, 0, 0), (0, 64, 0), (0, 0, 64)]

    def test_gradient(self, service, fake_leds):
        service.gradient("red", "blue")
        assert values(fake_leds) == [(64, 0, 0), (32, 0, 32), (0, 0, 64)]

    def test_read(self, service, fake_leds):
        service.raw(5, 6, 7)
        readings, collector = service.read()

        assert [r.rgb for r in readings] == [(5, 6, 7)] * 3
        assert all(r.ok for r in readings)
        assert not collector.has_errors

    def test_read_continues_past_unavailable_device(self, service, fake_leds):
        (fake_leds[1] / "green").unlink()
        readings, collector = service.read()

        assert readings[0].ok
        assert not readings[1].ok
        assert isinstance(readings[1].error, DeviceUnavailable)
        assert readings[2].ok
        assert collector.error_count == 1
        assert "read LED 1" in collector.get_summary()

    def test_sweep_unknown_pattern(self, service):
        with pytest.raises(ValueError, match="Unknown sweep pattern"):
            service.sweep("sparkle")

    def test_sweep_invalid_color(self, service):
        with pytest.raises(InvalidColorSpec):
            service.sweep("progress", color="nope")

    def test_sweep_runs_scheduler(self, service, sinks):
        scheduler = service.sweep("rainbow", tick_interval_ms=1, max_ticks=4)
        assert scheduler.wait(timeout=2)
        assert scheduler.state is SchedulerState.IDLE
        assert scheduler.ticks == 4
        assert len(sinks[0].writes) == 4 * 3

    def test_sweep_uses_given_scheduler(self, service, recording_array):
        scheduler = AnimationScheduler(recording_array)
        assert service.sweep("progress", tick_interval_ms=1, max_ticks=1, scheduler=scheduler) is scheduler
        assert scheduler.wait(timeout=2)
