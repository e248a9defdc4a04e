"""Named colors and color-argument parsing.

This module is the single source of truth for color names. Names follow the
CSS color keywords, so 'green' is the darker CSS green (0, 128, 0) and 'lime'
is pure green.

`parse` is the one entry point for turning user input into a Color:

```python
from gaudy_leds.colors import parse

parse("orange")          # named color
parse("#ff8000")         # hex triple, '#' optional, 3 or 6 digits
parse("rgb(255, 128, 0)")
parse("hsv(30, 1, 1)")
parse(Color(r=1, g=0.5, b=0))   # returned unchanged
```
"""

from gaudy_leds.exceptions import InvalidColorSpec
from gaudy_leds.models import Color


class COLORS:
    """Named color constants (CSS keyword values)."""

    BLACK: Color = Color.from_rgb255(0, 0, 0)
    WHITE: Color = Color.from_rgb255(255, 255, 255)
    RED: Color = Color.from_rgb255(255, 0, 0)
    LIME: Color = Color.from_rgb255(0, 255, 0)
    GREEN: Color = Color.from_rgb255(0, 128, 0)
    BLUE: Color = Color.from_rgb255(0, 0, 255)
    YELLOW: Color = Color.from_rgb255(255, 255, 0)
    CYAN: Color = Color.from_rgb255(0, 255, 255)
    MAGENTA: Color = Color.from_rgb255(255, 0, 255)
    PURPLE: Color = Color.from_rgb255(128, 0, 128)
    ORANGE: Color = Color.from_rgb255(255, 165, 0)
    BROWN: Color = Color.from_rgb255(165, 42, 42)
    PINK: Color = Color.from_rgb255(255, 192, 203)

    GREY: Color = Color.from_rgb255(128, 128, 128)
    SILVER: Color = Color.from_rgb255(192, 192, 192)
    MAROON: Color = Color.from_rgb255(128, 0, 0)
    OLIVE: Color = Color.from_rgb255(128, 128, 0)
    NAVY: Color = Color.from_rgb255(0, 0, 128)
    TEAL: Color = Color.from_rgb255(0, 128, 128)
    INDIGO: Color = Color.from_rgb255(75, 0, 130)
    VIOLET: Color = Color.from_rgb255(238, 130, 238)
    GOLD: Color = Color.from_rgb255(255, 215, 0)
    CORAL: Color = Color.from_rgb255(255, 127, 80)
    SALMON: Color = Color.from_rgb255(250, 128, 114)
    TURQUOISE: Color = Color.from_rgb255(64, 224, 208)
    CHARTREUSE: Color = Color.from_rgb255(127, 255, 0)
    CRIMSON: Color = Color.from_rgb255(220, 20, 60)
    TOMATO: Color = Color.from_rgb255(255, 99, 71)


NAMED_COLORS: dict[str, Color] = {
    name.lower(): value
    for name, value in vars(COLORS).items()
    if isinstance(value, Color)
}
NAMED_COLORS.update({
    "aqua": COLORS.CYAN,
    "fuchsia": COLORS.MAGENTA,
    "gray": COLORS.GREY,
    "off": COLORS.BLACK,
})

# Order used by the identify command; keep it stable, users match LEDs by it.
IDENTIFY_PALETTE: tuple[str, ...] = (
    "red", "green", "blue", "yellow", "purple", "white", "cyan",
    "orange", "brown", "pink",
)


def parse(spec: Color | str) -> Color:
    """Parse a color argument.

    Raises:
        InvalidColorSpec: If spec is not a Color, a known name, a hex
            triple, or rgb()/hsv() notation
    """
    if isinstance(spec, Color):
        return spec
    if not isinstance(spec, str):
        raise InvalidColorSpec(spec, f"unsupported type {type(spec).__name__}")

    key = "".join(spec.split()).lower()
    if not key:
        raise InvalidColorSpec(spec, "empty string")

    named = NAMED_COLORS.get(key)
    if named is not None:
        return named

    try:
        if key.startswith(("rgb(", "hsv(")):
            return Color.from_functional(key)
        return Color.from_hex(key)
    except ValueError as e:
        raise InvalidColorSpec(spec, str(e)) from e


__all__ = ["COLORS", "IDENTIFY_PALETTE", "NAMED_COLORS", "parse"]
