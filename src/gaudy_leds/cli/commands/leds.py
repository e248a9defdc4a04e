"""LED command implementations."""

import logging
import sys
from typing import Optional

import click

from gaudy_leds.cli.context import CliState, fail, led_service, pass_state
from gaudy_leds.colors import parse
from gaudy_leds.exceptions import ErrorContext
from gaudy_leds.patterns import SWEEP_PATTERNS

logger = logging.getLogger(__name__)


@click.command(name="identify")
@pass_state
def identify(state: CliState):
    """Set each LED to a unique color and list them."""
    with led_service(state) as service:
        names = service.identify()

    click.echo(f"Found {len(names)} usbled devices.")
    click.echo("They are set to the following colors:")
    for index, name in enumerate(names):
        click.echo(f"  [{index}] {name}")
    click.echo("\nTo drive them in a different order, pass --order.")
    click.echo("For example, if you see green, blue, red from left to right:")
    click.echo("  gaudy-leds --order 1,2,0 rainbow")


@click.command(name="read")
@pass_state
def read(state: CliState):
    """Show the raw RGB values of all LEDs."""
    with led_service(state) as service:
        readings, collector = service.read()

    for reading in readings:
        if reading.ok:
            r, g, b = reading.rgb
            click.echo(f"[{reading.index}] {reading.name}: {r} {g} {b}")
        else:
            click.echo(f"[{reading.index}] {reading.name}: unavailable")

    if collector.has_errors:
        click.echo(f"\n{collector.get_summary()}", err=True)
        sys.exit(1)


@click.command(name="all")
@click.argument("color")
@pass_state
def all_(state: CliState, color: str):
    """Set all LEDs to a single color."""
    with led_service(state) as service:
        service.all(color)


@click.command(name="set")
@click.argument("colors", nargs=-1)
@pass_state
def set_(state: CliState, colors: tuple[str, ...]):
    """Set LEDs to COLORS in order; LEDs without a color are turned off."""
    with led_service(state) as service:
        service.set(list(colors))


@click.command(name="raw")
@click.argument("r", type=int)
@click.argument("g", type=int)
@click.argument("b", type=int)
@pass_state
def raw(state: CliState, r: int, g: int, b: int):
    """Set all LEDs using raw, unscaled device values (0-64)."""
    with led_service(state) as service:
        service.raw(r, g, b)


@click.command(name="progress")
@click.argument("percent", type=float)
@click.argument("color", default="white")
@pass_state
def progress(state: CliState, percent: float, color: str):
    """Show PERCENT (0-100) as a progress bar across the LEDs."""
    with led_service(state) as service:
        service.progress(percent, color)


@click.command(name="rainbow")
@click.option("--phase", type=float, default=0.0, show_default=True, help="Hue of the first LED in degrees")
@pass_state
def rainbow(state: CliState, phase: float):
    """Set the LEDs to a rainbow in the defined order."""
    with led_service(state) as service:
        service.rainbow(phase)


@click.command(name="gradient")
@click.argument("c1")
@click.argument("c2")
@pass_state
def gradient(state: CliState, c1: str, c2: str):
    """Set the LEDs to a gradient between two colors."""
    with led_service(state) as service:
        service.gradient(c1, c2)


@click.command(name="sweep")
@click.argument("what", type=click.Choice(sorted(SWEEP_PATTERNS), case_sensitive=False))
@click.option(
    "--interval-ms",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Milliseconds between frames (default: from config, normally 10)",
)
@click.option("--ticks", type=click.IntRange(min=1), default=None, help="Stop after this many frames")
@click.option("--color", default=None, help="Bar color for 'progress' (default: from config)")
@pass_state
def sweep(state: CliState, what: str, interval_ms: Optional[float], ticks: Optional[int], color: Optional[str]):
    """
    Animate a pattern across the LEDs until Ctrl+C.

    \b
    Patterns:
      rainbow   rotating rainbow
      progress  bar that fills then drains
    """
    what = what.lower()
    interval_ms = interval_ms or state.config.tick_interval_ms
    if what == "progress" and color is None:
        color = state.config.sweep_color

    with led_service(state) as service:
        # Parse up front so a bad color fails before anything is started
        sweep_color = parse(color) if color is not None else None

        with ErrorContext(f"run {what} sweep", logger_instance=logger):
            scheduler = service.sweep(what, tick_interval_ms=interval_ms, max_ticks=ticks, color=sweep_color)
            if ticks is None:
                click.echo(f"Running {what} sweep, press Ctrl+C to stop...")
            try:
                while not scheduler.wait(timeout=0.1):
                    pass
            except KeyboardInterrupt:
                click.echo("\nStopping...", err=True)
            finally:
                scheduler.stop()

        if scheduler.error is not None:
            fail(scheduler.error, state.log_path)


LED_COMMANDS = [identify, read, all_, set_, raw, progress, rainbow, gradient, sweep]
