"""Animated patterns driven by a phase in [0, 360)."""

from collections.abc import Callable

from gaudy_leds.colors import COLORS
from gaudy_leds.models import Color

from .frames import Frame, progress, rainbow

PatternFn = Callable[[int], Frame]


def progress_sweep_percent(phase: float) -> float:
    """Map phase to a bar level: rising 0->100 over [0, 180), falling 100->0 over [180, 360)."""
    if phase < 180:
        return phase / 180 * 100
    return 100 - ((phase - 180) / 180) * 100


def rainbow_sweep(n: int, color: Color | None = None) -> PatternFn:
    """Rotating rainbow. `color` is accepted for a uniform factory signature and ignored."""
    def frame(phase: int) -> Frame:
        return rainbow(n, phase)
    return frame


def progress_sweep(n: int, color: Color | None = None) -> PatternFn:
    """Progress bar that fills and drains once per phase cycle (default color white)."""
    bar_color = color or COLORS.WHITE

    def frame(phase: int) -> Frame:
        return progress(n, progress_sweep_percent(phase), bar_color)
    return frame


SWEEP_PATTERNS: dict[str, Callable[[int, Color | None], PatternFn]] = {
    "rainbow": rainbow_sweep,
    "progress": progress_sweep,
}
