"""Tests for the threaded ChannelWriter."""

import logging
import threading
import time

import pytest

from gaudy_leds.devices import ChannelWriter


@pytest.fixture
def writer():
    writer = ChannelWriter("led0", queue_size=4)
    yield writer
    writer.close()


@pytest.mark.unit
class TestChannelWriter:
    """Test fire-and-forget write dispatch."""

    def test_worker_starts_lazily(self, writer, tmp_path):
        assert not writer.is_running
        writer.submit(tmp_path / "red", "12")
        assert writer.is_running

    def test_writes_land_after_flush(self, writer, tmp_path):
        target = tmp_path / "red"
        writer.submit(target, "12")
        writer.submit(target, "40")

        assert writer.flush(timeout=2)
        assert target.read_text() == "40"

    def test_flush_without_writes(self, writer):
        assert writer.flush(timeout=0.1)

    def test_full_writer_drops_new_channel(self, tmp_path, caplog):
        started = threading.Event()
        release = threading.Event()

        def blocking_write(path, text):
            started.set()
            release.wait(2)

        writer = ChannelWriter("led0", queue_size=1)
        writer._write = blocking_write

        try:
            writer.submit(tmp_path / "red", "1")
            assert started.wait(2)
            writer.submit(tmp_path / "red", "2")  # only pending file
            writer.submit(tmp_path / "red", "3")  # replaces it
            with caplog.at_level(logging.WARNING):
                writer.submit(tmp_path / "green", "4")

            assert writer.superseded == 1
            assert writer.dropped == 1
            assert "Writer for led0 is full" in caplog.text
        finally:
            release.set()
            writer.close(drain=True, timeout=2)

    def test_slow_device_ends_on_latest_value(self, tmp_path):
        """A device slower than the caller still ends on the last value submitted."""
        written = []

        def slow_write(path, text):
            time.sleep(0.02)
            path.write_text(text)
            written.append(text)

        writer = ChannelWriter("led0", queue_size=4)
        writer._write = slow_write
        target = tmp_path / "red"

        try:
            for value in range(30):
                writer.submit(target, str(value))
            assert writer.flush(timeout=5)
        finally:
            writer.close()

        assert target.read_text() == "29"
        assert written[-1] == "29"
        assert writer.dropped == 0
        assert writer.superseded + len(written) == 30

    def test_frame_lands_whole_on_slow_device(self, tmp_path):
        """Every channel of the last frame is written, none are dropped."""
        def slow_write(path, text):
            time.sleep(0.01)
            path.write_text(text)

        writer = ChannelWriter("led0", queue_size=3)
        writer._write = slow_write

        try:
            for value in range(10):
                for channel in ("red", "green", "blue"):
                    writer.submit(tmp_path / channel, str(value))
            assert writer.flush(timeout=5)
        finally:
            writer.close()

        assert [(tmp_path / c).read_text() for c in ("red", "green", "blue")] == ["9", "9", "9"]
        assert writer.dropped == 0

    def test_flush_after_close_returns(self, tmp_path):
        release = threading.Event()

        def blocking_write(path, text):
            release.wait(2)

        writer = ChannelWriter("led0")
        writer._write = blocking_write
        writer.submit(tmp_path / "red", "1")
        writer.submit(tmp_path / "green", "2")

        writer.close(drain=False, timeout=0.05)
        release.set()

        assert writer.flush(timeout=2)
        assert writer.flush()

    def test_failed_write_is_logged_not_raised(self, writer, tmp_path, caplog):
        target = tmp_path / "unplugged" / "red"
        with caplog.at_level(logging.WARNING):
            writer.submit(target, "5")
            assert writer.flush(timeout=2)

        assert "write LED channel" in caplog.text
        assert not target.exists()

    def test_writer_survives_failure(self, writer, tmp_path):
        writer.submit(tmp_path / "unplugged" / "red", "5")
        writer.submit(tmp_path / "red", "6")
        assert writer.flush(timeout=2)
        assert (tmp_path / "red").read_text() == "6"

    def test_close_drains(self, tmp_path):
        writer = ChannelWriter("led0")
        target = tmp_path / "green"
        writer.submit(target, "33")
        writer.close(drain=True, timeout=2)

        assert target.read_text() == "33"
        assert not writer.is_running

    def test_submit_after_close_is_dropped(self, writer, tmp_path):
        writer.close()
        writer.submit(tmp_path / "red", "1")
        assert writer.dropped == 1
        assert not (tmp_path / "red").exists()

    def test_close_is_idempotent(self, writer, tmp_path):
        writer.submit(tmp_path / "red", "1")
        writer.close(drain=True)
        writer.close()
        assert not writer.is_running

    def test_context_manager_drains(self, tmp_path):
        target = tmp_path / "blue"
        with ChannelWriter("led0") as writer:
            writer.submit(target, "9")
        assert target.read_text() == "9"
