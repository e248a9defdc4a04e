"""Enumerations for gaudy-leds."""

from enum import Enum


class Channel(str, Enum):
    """LED color channels; values are the sysfs attribute file names."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
