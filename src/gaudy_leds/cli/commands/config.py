"""
Config command group.

Commands:
    - config show                 # Display configuration
    - config path                 # Print the config file location
    - config set --option VALUE   # Update configuration and save
    - config reset                # Restore defaults (asks first)
"""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from gaudy_leds.cli.context import CliState, fail, pass_state
from gaudy_leds.colors import parse
from gaudy_leds.exceptions import GaudyLedsError, wrap_pydantic_error
from gaudy_leds.models import AppConfig


@click.group(name="config")
def config():
    """Show or change gaudy-leds settings."""
    pass


@config.command(name="show")
@click.option("--field", "field_name", default=None, help="Show a single field")
@pass_state
def show(state: CliState, field_name: Optional[str]):
    """Display configuration values."""
    values = state.config.model_dump(mode="json")

    if field_name is not None:
        if field_name not in values:
            raise click.BadParameter(
                f"unknown field {field_name!r} (known: {', '.join(values)})", param_hint="--field"
            )
        click.echo(values[field_name])
        return

    click.echo(f"Configuration ({state.config_path}):\n")
    for name, value in values.items():
        description = AppConfig.model_fields[name].description or ""
        click.echo(f"  {name} = {value}")
        if description:
            click.echo(f"      {description}")


@config.command(name="path")
@pass_state
def path(state: CliState):
    """Print the location of the config file."""
    click.echo(str(state.config_path))


@config.command(name="set")
@click.option("--driver-path", type=click.Path(path_type=Path), default=None, help="Sysfs directory of the usbled driver")
@click.option("--tick-interval-ms", type=int, default=None, help="Milliseconds between sweep frames")
@click.option("--write-queue-size", type=int, default=None, help="Channel files per LED with a pending write")
@click.option("--sweep-color", default=None, help="Bar color for 'sweep progress'")
@pass_state
def set_values(
    state: CliState,
    driver_path: Optional[Path],
    tick_interval_ms: Optional[int],
    write_queue_size: Optional[int],
    sweep_color: Optional[str],
):
    """Update configuration values and save them."""
    updates = {
        "driver_path": driver_path,
        "tick_interval_ms": tick_interval_ms,
        "write_queue_size": write_queue_size,
        "sweep_color": sweep_color,
    }
    updates = {name: value for name, value in updates.items() if value is not None}

    if not updates:
        click.echo("Nothing to change. Run 'gaudy-leds config set --help' for options.")
        return

    try:
        if "sweep_color" in updates:
            parse(updates["sweep_color"])
        merged = state.config.model_dump()
        merged.update(updates)
        new_config = AppConfig.model_validate(merged)
    except ValidationError as e:
        fail(wrap_pydantic_error(e, str(state.config_path)), state.log_path)
    except GaudyLedsError as e:
        fail(e, state.log_path)

    new_config.save(state.config_path)
    state.config = new_config

    for name, value in updates.items():
        click.echo(f"[OK] {name} = {value}")
    click.echo(f"\nSaved to {state.config_path}")


@config.command(name="reset")
@click.confirmation_option(prompt="Reset all settings to their defaults?")
@pass_state
def reset(state: CliState):
    """Restore default settings."""
    state.config = AppConfig()
    state.config.save(state.config_path)
    click.echo(f"[OK] Defaults saved to {state.config_path}")
