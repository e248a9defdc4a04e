"""Service exposing one operation per LED command."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from gaudy_leds import patterns
from gaudy_leds.colors import parse
from gaudy_leds.core import AnimationScheduler
from gaudy_leds.devices import LedArray
from gaudy_leds.exceptions import DeviceUnavailable, ErrorCollector, collect_errors
from gaudy_leds.models import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedReading:
    """Result of reading one LED: raw device units, or the error that prevented it."""

    index: int
    name: str
    rgb: Optional[tuple[int, int, int]] = None
    error: Optional[DeviceUnavailable] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LedService:
    """
    Command operations over an LedArray.

    Color arguments accept anything `colors.parse` does. They are all parsed
    before any device is written, so an InvalidColorSpec leaves every LED
    untouched.
    """

    def __init__(self, array: LedArray):
        """
        Initialize the LED service.

        Args:
            array: The LEDs to drive, in logical order
        """
        self.array = array

    def identify(self) -> list[str]:
        """Give every LED a distinct named color; returns the names in array order."""
        names = patterns.identify_names(len(self.array))
        self.array.set_all(patterns.identify(len(self.array)))
        logger.info(f"Identify colors: {', '.join(names)}")
        return names

    def read(self) -> tuple[list[LedReading], ErrorCollector]:
        """
        Read every LED's channels.

        A device that can't be read is reported and the remaining devices are
        still read.

        Returns:
            One reading per LED, plus the collector holding any failures
        """
        collector = collect_errors("read LEDs")
        readings: list[LedReading] = []

        for index, device in enumerate(self.array):
            rgb = None
            with collector.try_operation(f"read LED {index} ({device.name})"):
                rgb = device.read_rgb()

            if rgb is not None:
                readings.append(LedReading(index, device.name, rgb=rgb))
            else:
                readings.append(LedReading(index, device.name, error=collector.errors[-1][1]))

        return readings, collector

    def all(self, color: Color | str) -> None:
        """Set every LED to one color."""
        self.array.set_all(patterns.solid(len(self.array), parse(color)))

    def set(self, colors: Sequence[Color | str]) -> None:
        """Set LEDs positionally; LEDs without a color are turned off."""
        parsed = [parse(color) for color in colors]
        if len(parsed) > len(self.array):
            logger.warning(f"{len(parsed)} colors given for {len(self.array)} LEDs, ignoring the extra ones")
        self.array.set_all(patterns.positional(len(self.array), parsed))

    def raw(self, r: int, g: int, b: int) -> None:
        """Write raw device units to every LED."""
        self.array.set_raw_all(r, g, b)

    def progress(self, percent: float, color: Color | str) -> None:
        """Show a progress bar across the array."""
        self.array.set_all(patterns.progress(len(self.array), percent, parse(color)))

    def rainbow(self, phase: float = 0) -> None:
        """Show one rainbow frame."""
        self.array.set_all(patterns.rainbow(len(self.array), phase))

    def gradient(self, start: Color | str, end: Color | str) -> None:
        """Blend from start on the first LED to end on the last."""
        self.array.set_all(patterns.gradient_frame(len(self.array), parse(start), parse(end)))

    def sweep(
        self,
        name: str,
        tick_interval_ms: float = 10,
        max_ticks: Optional[int] = None,
        color: Color | str | None = None,
        scheduler: Optional[AnimationScheduler] = None,
    ) -> AnimationScheduler:
        """
        Start an animated pattern.

        Args:
            name: Sweep pattern name (see patterns.SWEEP_PATTERNS)
            tick_interval_ms: Time between frames
            max_ticks: Stop after this many frames (None = until stopped)
            color: Color for patterns that take one (progress)
            scheduler: Scheduler to use (default: a new one for this array)

        Returns:
            The running scheduler; call stop() on it to end the animation

        Raises:
            ValueError: If name is not a known sweep pattern
        """
        factory = patterns.SWEEP_PATTERNS.get(name)
        if factory is None:
            known = ", ".join(sorted(patterns.SWEEP_PATTERNS))
            raise ValueError(f"Unknown sweep pattern {name!r} (known: {known})")

        pattern_fn = factory(len(self.array), parse(color) if color is not None else None)
        scheduler = scheduler or AnimationScheduler(self.array)
        scheduler.start(pattern_fn, tick_interval_ms=tick_interval_ms, max_ticks=max_ticks)
        logger.info(f"Sweep '{name}' running on {len(self.array)} LEDs")
        return scheduler
