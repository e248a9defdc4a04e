"""Normalized color model and color math."""

import colorsys
import math
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_HEX_RE = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$")
_RGB_RE = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$")
_NUMBER = r"([-+]?(?:\d+\.?\d*|\.\d+))"
_HSV_RE = re.compile(rf"^hsv\(\s*{_NUMBER}\s*,\s*{_NUMBER}\s*,\s*{_NUMBER}\s*\)$")


class Color(BaseModel):
    """Normalized RGB color, each channel in [0, 1].

    Out-of-range channel values are clamped on construction, so every Color
    is always displayable. NaN and infinities are rejected.

    The model is frozen so colors are hashable and compare by value.
    """

    model_config = ConfigDict(frozen=True)

    r: float = Field(description="Red (0-1)")
    g: float = Field(description="Green (0-1)")
    b: float = Field(description="Blue (0-1)")

    @field_validator("r", "g", "b")
    @classmethod
    def clamp_channel(cls, v: float) -> float:
        """Clamp channel values into [0, 1]."""
        if not math.isfinite(v):
            raise ValueError("color channels must be finite numbers")
        return min(1.0, max(0.0, v))

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0.0, g=0.0, b=0.0)

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from standard 8-bit channel values."""
        return cls(r=r / 255, g=g / 255, b=b / 255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a color from '#rgb' or '#rrggbb' (the '#' is optional).

        Raises:
            ValueError: If value is not a hex triple
        """
        match = _HEX_RE.match(value.strip().lower())
        if not match:
            raise ValueError(f"not a hex color: {value!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return cls.from_rgb255(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_functional(cls, value: str) -> "Color":
        """Create a color from 'rgb(r, g, b)' (0-255) or 'hsv(h, s, v)' (s, v in 0-1).

        Raises:
            ValueError: If value uses neither notation or is out of range
        """
        text = value.strip().lower()

        match = _RGB_RE.match(text)
        if match:
            channels = [int(part) for part in match.groups()]
            if any(c > 255 for c in channels):
                raise ValueError(f"rgb() channels must be 0-255: {value!r}")
            return cls.from_rgb255(*channels)

        match = _HSV_RE.match(text)
        if match:
            hue, saturation, value_ = (float(part) for part in match.groups())
            if not (0.0 <= saturation <= 1.0 and 0.0 <= value_ <= 1.0):
                raise ValueError(f"hsv() saturation and value must be 0-1: {value!r}")
            return hsv(hue, saturation, value_)

        raise ValueError(f"not an rgb() or hsv() color: {value!r}")

    def to_rgb_tuple(self) -> tuple[float, float, float]:
        """Convert to a normalized (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    def to_device_units(self, scale: int) -> tuple[int, int, int]:
        """Map to integer device units with floor(channel * scale).

        Results are clamped to 0..scale.

        Example:
            >>> Color(r=1.0, g=0.5, b=0.0).to_device_units(64)
            (64, 32, 0)
        """
        return tuple(
            min(scale, max(0, math.floor(channel * scale)))
            for channel in self.to_rgb_tuple()
        )

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        r, g, b = (round(channel * 255) for channel in self.to_rgb_tuple())
        return f"#{r:02X}{g:02X}{b:02X}"


def hsv(hue: float, saturation: float, value: float) -> Color:
    """Convert HSV to a Color.

    Args:
        hue: Hue in degrees; taken modulo 360, so any real value is accepted
        saturation: Saturation (0-1)
        value: Value/brightness (0-1)
    """
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360, saturation, value)
    return Color(r=r, g=g, b=b)


def mix(a: Color, b: Color, ratio: float) -> Color:
    """Linearly interpolate from a (ratio 0) to b (ratio 1).

    The ratio is not clamped: callers pass [0, 1]. A ratio outside that
    range extrapolates, and the result saturates at the channel limits
    because Color clamps on construction. Mixing a color with itself returns
    it unchanged for any ratio, infinite ones included.
    """
    if a == b:
        return a
    return Color(
        r=a.r + (b.r - a.r) * ratio,
        g=a.g + (b.g - a.g) * ratio,
        b=a.b + (b.b - a.b) * ratio,
    )


def gradient(start: Color, end: Color, n: int) -> list[Color]:
    """Return n evenly spaced colors from start to end, both inclusive.

    n == 0 gives an empty list and n == 1 gives [start]. The endpoints are
    returned as-is rather than recomputed.
    """
    if n <= 0:
        return []
    if n == 1:
        return [start]

    steps = n - 1
    return [start] + [mix(start, end, i / steps) for i in range(1, steps)] + [end]
