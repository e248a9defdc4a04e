"""Fire-and-forget channel writer backed by a worker thread.

Reads of usbled attributes are served from kernel memory, but each write
turns into a blocking USB control transfer. Writes are therefore handed to a
per-device worker thread so a slow device never stalls the caller or the
other devices in the same frame.
"""

import logging
import threading
from pathlib import Path
from typing import Optional

from gaudy_leds.exceptions import handle_errors

logger = logging.getLogger(__name__)


class ChannelWriter:
    """
    Pending writes for one LED device, latest value wins.

    At most one write per channel file is pending. Submitting to a file that
    already has a pending write replaces its value, so a slow device skips
    stale frames and always ends on the last value submitted. Pending files
    are written in the order they first became pending.

    `submit` never blocks. Write failures are logged by the worker and never
    reach the caller. There are no retries.

    The worker thread is started lazily on the first submit.
    """

    def __init__(self, name: str, queue_size: int = 64):
        """
        Initialize channel writer.

        Args:
            name: Device name used in log messages and the thread name
            queue_size: Maximum number of distinct channel files with a pending write
        """
        self.name = name
        self._max_pending = queue_size
        self._pending: dict[Path, str] = {}
        self._condition = threading.Condition()
        self._in_flight = False
        self._stopping = False
        self._closed = False
        self._thread: Optional[threading.Thread] = None
        self._dropped = 0
        self._superseded = 0

    @property
    def dropped(self) -> int:
        """Number of writes rejected because the writer was closed or full."""
        return self._dropped

    @property
    def superseded(self) -> int:
        """Number of pending writes replaced by a newer value before being written."""
        return self._superseded

    @property
    def is_running(self) -> bool:
        """Check if the worker thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def submit(self, path: Path, text: str) -> None:
        """Make text the pending value for path and return immediately."""
        with self._condition:
            if self._closed:
                self._dropped += 1
                reason = "is closed"
            elif path not in self._pending and len(self._pending) >= self._max_pending:
                self._dropped += 1
                reason = "is full"
            else:
                if path in self._pending:
                    self._superseded += 1
                self._pending[path] = text
                self._condition.notify_all()
                reason = None

        if reason is not None:
            logger.warning(f"Writer for {self.name} {reason}, dropping write to {path.name}")
            return

        self._ensure_started()

    def flush(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until no write is pending or in progress.

        Returns immediately once the writer is closed, since nothing pending
        will be written after that.

        Args:
            timeout: Maximum seconds to wait (None = no limit)

        Returns:
            True if everything was written, False on timeout
        """
        with self._condition:
            return self._condition.wait_for(self._is_idle, timeout)

    def close(self, drain: bool = False, timeout: float = 1.0) -> None:
        """
        Stop the worker thread.

        Args:
            drain: Wait (up to timeout) for pending writes before stopping
            timeout: Seconds to wait for draining and for the thread to exit
        """
        if drain and not self.flush(timeout):
            logger.warning(f"Timed out flushing writes for {self.name}")

        with self._condition:
            if self._pending:
                logger.debug(f"Discarding {len(self._pending)} pending writes for {self.name}")
                self._pending.clear()
            self._closed = True
            self._stopping = True
            self._condition.notify_all()

        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=timeout)

        logger.debug(f"ChannelWriter for {self.name} stopped")

    def _is_idle(self) -> bool:
        return not self._pending and not self._in_flight

    def _ensure_started(self) -> None:
        with self._condition:
            if self._thread is not None or self._stopping:
                return
            self._thread = threading.Thread(
                target=self._run, name=f"led-writer-{self.name}", daemon=True
            )
            self._thread.start()
        logger.debug(f"ChannelWriter for {self.name} started")

    def _run(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._pending or self._stopping)
                if self._stopping:
                    return
                path = next(iter(self._pending))
                text = self._pending.pop(path)
                self._in_flight = True

            try:
                self._write(path, text)
            finally:
                with self._condition:
                    self._in_flight = False
                    self._condition.notify_all()

    @handle_errors(operation_name="write LED channel", re_raise=False, log_level=logging.WARNING)
    def _write(self, path: Path, text: str) -> None:
        path.write_text(text, encoding="ascii")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close(drain=exc_type is None)
