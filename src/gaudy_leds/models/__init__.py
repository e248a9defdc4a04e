"""Data models for gaudy-leds."""

from .address import DeviceAddress
from .color import Color, gradient, hsv, mix
from .config import AppConfig
from .enums import Channel

__all__ = [
    "AppConfig",
    "Channel",
    "Color",
    "DeviceAddress",
    # Color math
    "gradient",
    "hsv",
    "mix",
]
