"""Application services."""

from .led_service import LedReading, LedService

__all__ = ["LedReading", "LedService"]
