"""Single usbled LED device."""

import logging

from gaudy_leds.exceptions import DeviceUnavailable
from gaudy_leds.models import Channel, Color, DeviceAddress

from .protocols import ChannelSink

logger = logging.getLogger(__name__)

# usbled accepts up to 255, but the hardware saturates at 64.
SCALE = 64


class LedDevice:
    """
    One addressable RGB LED.

    Nothing is cached: every read goes to the channel file and every write is
    an independent command handed to the device's ChannelSink. Another
    process changing the LED in between is tolerated, not prevented.

    Reads are synchronous; the driver answers them from kernel memory.
    Writes are fire-and-forget; see ChannelWriter.
    """

    def __init__(self, address: DeviceAddress, writer: ChannelSink):
        """
        Initialize LED device.

        Args:
            address: Address of the device's sysfs directory
            writer: Sink that performs the channel writes
        """
        self.address = address
        self.writer = writer

    @property
    def name(self) -> str:
        return self.address.name

    def get_channel(self, channel: Channel | str) -> int:
        """
        Read one channel in device units.

        Raises:
            DeviceUnavailable: If the channel file can't be read or doesn't hold an integer
        """
        channel = Channel(channel)
        path = self.address.channel_path(channel)
        try:
            return int(path.read_text(encoding="ascii").strip(), 10)
        except (OSError, ValueError) as e:
            raise DeviceUnavailable(self.address.syspath, channel.value, str(e)) from e

    def set_channel(self, channel: Channel | str, value: int) -> None:
        """Dispatch a write of one channel; returns without waiting for it."""
        path = self.address.channel_path(channel)
        self.writer.submit(path, str(value))

    def read_rgb(self) -> tuple[int, int, int]:
        """Read all three channels in device units."""
        return (
            self.get_channel(Channel.RED),
            self.get_channel(Channel.GREEN),
            self.get_channel(Channel.BLUE),
        )

    def set_raw_rgb(self, r: int, g: int, b: int) -> None:
        """Write raw device-unit values; out-of-range values are passed through as-is."""
        self.set_channel(Channel.RED, r)
        self.set_channel(Channel.GREEN, g)
        self.set_channel(Channel.BLUE, b)

    def set_color(self, color: Color) -> None:
        """Write a normalized color, scaled to 0..SCALE device units."""
        r, g, b = color.to_device_units(SCALE)
        logger.debug(f"{self.name}: set_color -> ({r}, {g}, {b})")
        self.set_raw_rgb(r, g, b)

    def __repr__(self) -> str:
        return f"LedDevice({str(self.address)!r})"
