"""Discovery of LEDs bound to the usbled kernel driver."""

import logging
from pathlib import Path

from gaudy_leds.models import Channel, DeviceAddress

logger = logging.getLogger(__name__)


def _is_led_directory(path: Path) -> bool:
    return path.is_dir() and all((path / channel.value).is_file() for channel in Channel)


def find_led_devices(driver_path: Path) -> list[DeviceAddress]:
    """
    List the devices bound to the driver at driver_path.

    The kernel exposes each bound USB interface as a symlink inside the
    driver's sysfs directory (e.g. /sys/bus/usb/drivers/usbled/1-1.2:1.0).
    Entries without red/green/blue attributes (bind, unbind, module, ...)
    are skipped. Results are sorted by interface name so the discovery
    order is stable across runs.

    Args:
        driver_path: The driver's sysfs directory

    Returns:
        Device addresses in discovery order (empty if the driver isn't loaded)
    """
    if not driver_path.is_dir():
        logger.warning(f"Driver directory not found: {driver_path}")
        return []

    addresses = [
        DeviceAddress(syspath=entry.resolve())
        for entry in sorted(driver_path.iterdir(), key=lambda p: p.name)
        if _is_led_directory(entry)
    ]

    logger.info(f"Found {len(addresses)} usbled devices under {driver_path}")
    for address in addresses:
        logger.debug(f"  {address.name}: {address.syspath}")
    return addresses
