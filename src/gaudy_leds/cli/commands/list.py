"""List command implementations."""

import click

from gaudy_leds.cli.context import CliState, pass_state
from gaudy_leds.colors import IDENTIFY_PALETTE, NAMED_COLORS
from gaudy_leds.devices import SCALE, find_led_devices


@click.group(name="list")
def list_group():
    """List connected LEDs and known color names."""
    pass


@list_group.command(name="devices")
@pass_state
def list_devices(state: CliState):
    """List LEDs bound to the usbled driver, in discovery order."""
    driver_path = state.effective_driver_path
    addresses = find_led_devices(driver_path)

    if not addresses:
        click.echo(f"No usbled devices found under {driver_path}.")
        click.echo("\nNote: the 'usbled' kernel module must be loaded (modprobe usbled).")
        return

    click.echo(f"usbled devices under {driver_path}:\n")
    for index, address in enumerate(addresses):
        click.echo(f"  [{index}] {address.name}")
        click.echo(f"      {address.syspath}")


@list_group.command(name="colors")
def list_colors():
    """List color names accepted by color arguments."""
    click.echo("Named colors:\n")
    for name in sorted(NAMED_COLORS):
        r, g, b = NAMED_COLORS[name].to_device_units(SCALE)
        click.echo(f"  {name:<12} {NAMED_COLORS[name].to_hex()}  device units ({r}, {g}, {b})")

    click.echo(f"\nIdentify order: {', '.join(IDENTIFY_PALETTE)}")
    click.echo("\nAlso accepted: '#rgb', '#rrggbb', 'rgb(255, 128, 0)', 'hsv(30, 1, 1)'")
