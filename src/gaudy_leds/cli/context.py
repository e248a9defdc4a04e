"""Shared state and helpers for CLI commands."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional

import click

from gaudy_leds.devices import LedArray, find_led_devices
from gaudy_leds.exceptions import GaudyLedsError, NoDevicesFound, format_error_for_display
from gaudy_leds.models import AppConfig
from gaudy_leds.services import LedService

logger = logging.getLogger(__name__)

# Seconds to wait for queued LED writes before the process exits
EXIT_FLUSH_TIMEOUT = 2.0


@dataclass
class CliState:
    """Options shared by every subcommand, stored on the click context."""

    config: AppConfig
    config_path: Path
    log_path: Optional[Path] = None
    order: Optional[list[int]] = None
    driver_path: Optional[Path] = None

    @property
    def effective_driver_path(self) -> Path:
        return self.driver_path or self.config.driver_path


pass_state = click.make_pass_decorator(CliState)


def fail(error: Exception, log_path: Optional[Path] = None) -> NoReturn:
    """Show an error without a traceback and exit with status 1."""
    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    sys.exit(1)


def parse_order(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[list[int]]:
    """Click callback turning '2,0,1' into [2, 0, 1]."""
    if value is None:
        return None
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter("expected comma-separated LED indices, e.g. 2,0,1")


def build_array(state: CliState) -> LedArray:
    """
    Discover LEDs and build the array in the requested order.

    Raises:
        NoDevicesFound: If nothing is bound to the driver
        OrderMismatch: If --order doesn't fit the discovered devices
    """
    driver_path = state.effective_driver_path
    addresses = find_led_devices(driver_path)
    if not addresses:
        raise NoDevicesFound(driver_path)

    return LedArray.from_addresses(
        addresses,
        order=state.order,
        queue_size=state.config.write_queue_size,
    )


@contextmanager
def led_service(state: CliState) -> Iterator[LedService]:
    """
    Yield an LedService for the discovered LEDs.

    Queued writes are flushed before returning so they land before the
    process exits. GaudyLedsErrors are shown to the user and end the
    command with exit status 1.
    """
    array = None
    try:
        array = build_array(state)
        yield LedService(array)
    except GaudyLedsError as e:
        logger.error(f"Command failed: {e.technical_message}")
        fail(e, state.log_path)
    finally:
        if array is not None:
            array.close(drain=True, timeout=EXIT_FLUSH_TIMEOUT)
