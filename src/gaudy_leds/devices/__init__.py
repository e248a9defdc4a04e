"""LED device access: discovery, single devices, arrays and write dispatch."""

from .array import LedArray
from .discovery import find_led_devices
from .led import SCALE, LedDevice
from .protocols import ChannelSink
from .writer import ChannelWriter

__all__ = [
    "SCALE",
    "ChannelSink",
    "ChannelWriter",
    "LedArray",
    "LedDevice",
    "find_led_devices",
]
