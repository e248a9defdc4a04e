"""Generic utility modules for gaudy-leds."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
