"""Periodic animation driver for LED arrays."""

import logging
import threading
import time
from enum import Enum
from typing import Optional

from gaudy_leds.devices import LedArray
from gaudy_leds.patterns import PatternFn

logger = logging.getLogger(__name__)

PHASE_PERIOD = 360
PHASE_STEP = 1


class SchedulerState(Enum):
    """Lifecycle of an AnimationScheduler."""

    IDLE = "idle"        # No timer active
    RUNNING = "running"  # Timer active, phase advancing


class AnimationScheduler:
    """
    Drives a pattern function on a fixed tick and pushes frames to an LedArray.

    Each tick computes `pattern_fn(phase)`, writes it with `LedArray.set_all`,
    then advances the phase by one and wraps it at 360. The phase is an
    integer, so it returns to exactly 0 every 360 ticks.

    The timer runs in a daemon thread. `stop()` may be called at any time
    from any thread; it does not wait for device writes already dispatched.
    `step()` runs ticks synchronously on the calling thread for
    deterministic use.
    """

    def __init__(self, array: LedArray):
        """
        Initialize the scheduler.

        Args:
            array: LEDs that receive every frame
        """
        self._array = array
        self._lock = threading.RLock()
        self._state = SchedulerState.IDLE
        self._pattern: Optional[PatternFn] = None
        self._phase = 0
        self._ticks = 0
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self.error: Optional[Exception] = None

    @property
    def state(self) -> SchedulerState:
        with self._lock:
            return self._state

    @property
    def is_running(self) -> bool:
        return self.state is SchedulerState.RUNNING

    @property
    def phase(self) -> int:
        """Phase the next tick will render, in [0, 360)."""
        with self._lock:
            return self._phase

    @property
    def ticks(self) -> int:
        """Ticks rendered since the last start()."""
        with self._lock:
            return self._ticks

    def start(
        self,
        pattern_fn: PatternFn,
        tick_interval_ms: float = 10,
        max_ticks: Optional[int] = None,
    ) -> None:
        """
        Start animating: IDLE -> RUNNING.

        Args:
            pattern_fn: Maps a phase to a frame for the whole array
            tick_interval_ms: Time between ticks in milliseconds
            max_ticks: Stop on its own after this many ticks (None = run until stop())

        Raises:
            ValueError: If tick_interval_ms is not positive
        """
        if tick_interval_ms <= 0:
            raise ValueError(f"tick_interval_ms must be positive, got {tick_interval_ms}")

        with self._lock:
            if self._state is SchedulerState.RUNNING:
                logger.warning("AnimationScheduler is already running")
                return

            self._pattern = pattern_fn
            self._phase = 0
            self._ticks = 0
            self.error = None
            self._stop_event = threading.Event()
            self._state = SchedulerState.RUNNING
            self._thread = threading.Thread(
                target=self._run,
                args=(self._stop_event, tick_interval_ms / 1000, max_ticks),
                name="led-animation",
                daemon=True,
            )
            self._thread.start()

        logger.info(
            f"Animation started: interval={tick_interval_ms}ms, "
            f"max_ticks={max_ticks if max_ticks is not None else 'unlimited'}"
        )

    def stop(self, timeout: float = 1.0) -> None:
        """
        Stop animating: RUNNING -> IDLE. Safe to call repeatedly or when idle.

        Args:
            timeout: Seconds to wait for the timer thread to exit
        """
        with self._lock:
            if self._state is SchedulerState.IDLE:
                return
            self._stop_event.set()
            self._state = SchedulerState.IDLE
            thread = self._thread

        if thread and thread is not threading.current_thread() and thread.is_alive():
            thread.join(timeout=timeout)

        logger.info(f"Animation stopped after {self.ticks} ticks")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the animation stops.

        Returns:
            True if the scheduler is idle, False if timeout expired first
        """
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        return not self.is_running

    def tick(self) -> None:
        """Render the current phase and advance it."""
        with self._lock:
            if self._pattern is None:
                raise RuntimeError("No pattern loaded; call start() or step() first")

            frame = self._pattern(self._phase)
            self._array.set_all(frame)

            self._phase += PHASE_STEP
            if self._phase >= PHASE_PERIOD:
                self._phase -= PHASE_PERIOD
            self._ticks += 1

    def step(self, pattern_fn: Optional[PatternFn] = None, count: int = 1) -> None:
        """
        Run ticks synchronously while idle.

        Args:
            pattern_fn: Pattern to load first (keeps the current phase); None reuses the loaded one
            count: Number of ticks to run

        Raises:
            RuntimeError: If the timer thread is running
        """
        with self._lock:
            if self._state is SchedulerState.RUNNING:
                raise RuntimeError("Cannot step while the animation is running")
            if pattern_fn is not None:
                self._pattern = pattern_fn
            for _ in range(count):
                self.tick()

    def _run(self, stop_event: threading.Event, interval: float, max_ticks: Optional[int]) -> None:
        """Timer loop; ticks are scheduled against a monotonic clock."""
        next_tick = time.monotonic()

        try:
            while not stop_event.is_set():
                try:
                    self.tick()
                except Exception as e:
                    logger.error(f"Error rendering animation frame: {e}", exc_info=True)
                    self.error = e
                    break

                if max_ticks is not None and self.ticks >= max_ticks:
                    logger.debug(f"Reached max_ticks={max_ticks}")
                    break

                next_tick += interval
                delay = next_tick - time.monotonic()
                if delay < 0:
                    # Running behind; don't try to catch up with a burst of frames
                    next_tick = time.monotonic()
                    delay = 0
                stop_event.wait(delay)
        finally:
            with self._lock:
                if self._stop_event is stop_event:
                    self._state = SchedulerState.IDLE

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
