"""CLI commands for gaudy-leds."""

from .config import config
from .leds import LED_COMMANDS
from .list import list_group

__all__ = ["LED_COMMANDS", "config", "list_group"]
