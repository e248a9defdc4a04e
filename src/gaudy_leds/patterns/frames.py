"""Static frame patterns.

Every function takes the array length n and returns a frame: a list of n
colors, one per array index. Nothing here touches a device.
"""

from collections.abc import Sequence

from gaudy_leds.colors import COLORS, IDENTIFY_PALETTE, NAMED_COLORS
from gaudy_leds.models import Color, gradient, hsv, mix

Frame = list[Color]


def solid(n: int, color: Color) -> Frame:
    """Every slot gets the same color."""
    return [color] * n


def identify_names(n: int) -> list[str]:
    """Names of the identify colors for n LEDs; the palette repeats past its end."""
    return [IDENTIFY_PALETTE[i % len(IDENTIFY_PALETTE)] for i in range(n)]


def identify(n: int) -> Frame:
    """A distinct, nameable color per slot so users can tell LEDs apart."""
    return [NAMED_COLORS[name] for name in identify_names(n)]


def positional(n: int, colors: Sequence[Color], fill: Color = COLORS.BLACK) -> Frame:
    """Slot i gets colors[i]; slots past the end of colors get fill. Extra colors are ignored."""
    return [colors[i] if i < len(colors) else fill for i in range(n)]


def rainbow(n: int, phase: float) -> Frame:
    """Spread the hue circle across the array, starting at hue `phase` on slot 0."""
    return [hsv((phase + 360 * i / n) % 360, 1.0, 1.0) for i in range(n)]


def progress(n: int, percent: float, color: Color) -> Frame:
    """
    Render a progress bar of `percent` (0-100) across the array.

    Slot i covers [i/n, (i+1)/n) of the bar. It is black when the fraction
    is strictly below the slot start, full `color` when strictly above the
    slot end, and a black-to-color mix otherwise. A fraction exactly on a
    slot edge therefore lands in the mixed branch.
    """
    fraction = percent / 100
    black = COLORS.BLACK
    frame: Frame = []

    for i in range(n):
        empty_at = i / n
        full_at = (i + 1) / n
        if fraction < empty_at:
            frame.append(black)
        elif fraction > full_at:
            frame.append(color)
        else:
            frame.append(mix(black, color, (fraction - empty_at) / (full_at - empty_at)))

    return frame


def gradient_frame(n: int, start: Color, end: Color) -> Frame:
    """Blend from start on slot 0 to end on the last slot."""
    return gradient(start, end, n)
