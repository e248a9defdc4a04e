"""gaudy-leds: drive USB RGB LEDs handled by the Linux usbled driver."""

__version__ = "0.1.0"

from .core import AnimationScheduler
from .devices import LedArray, LedDevice
from .models import Color

__all__ = [
    "AnimationScheduler",
    "Color",
    "LedArray",
    "LedDevice",
]
