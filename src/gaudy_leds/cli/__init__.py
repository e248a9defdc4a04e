"""Command-line interface for gaudy-leds."""
