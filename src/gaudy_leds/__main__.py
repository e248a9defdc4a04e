"""Main entry point for gaudy-leds."""

from gaudy_leds.cli.main import cli

if __name__ == "__main__":
    cli()
