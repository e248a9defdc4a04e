"""Ordered collection of LED devices."""

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Optional

from gaudy_leds.exceptions import LengthMismatch, OrderMismatch
from gaudy_leds.models import Color, DeviceAddress

from .led import LedDevice
from .protocols import ChannelSink
from .writer import ChannelWriter

logger = logging.getLogger(__name__)

WriterFactory = Callable[[DeviceAddress], ChannelSink]


def _default_writer_factory(queue_size: int) -> WriterFactory:
    return lambda address: ChannelWriter(address.name, queue_size=queue_size)


class LedArray:
    """
    Ordered, read-only sequence of LedDevice.

    Index 0..N-1 is the logical order used by every pattern. It is either the
    discovery order or an explicit permutation passed to `from_addresses`,
    so pattern code never depends on how devices were enumerated.
    """

    def __init__(self, devices: Sequence[LedDevice]):
        self._devices: tuple[LedDevice, ...] = tuple(devices)

    @classmethod
    def from_addresses(
        cls,
        addresses: Sequence[DeviceAddress],
        order: Optional[Sequence[int]] = None,
        writer_factory: Optional[WriterFactory] = None,
        queue_size: int = 64,
    ) -> "LedArray":
        """
        Build an array with one LedDevice per address.

        Args:
            addresses: Device addresses in discovery order
            order: Optional permutation; array slot i becomes discovery device order[i]
            writer_factory: Creates the write sink for each device
                            (default: one ChannelWriter thread per device)
            queue_size: Pending-file limit for the default writers

        Raises:
            OrderMismatch: If order has the wrong length or is not a permutation
        """
        addresses = list(addresses)

        if order is not None:
            order = list(order)
            if len(order) != len(addresses):
                raise OrderMismatch(expected=len(addresses), actual=len(order))
            if sorted(order) != list(range(len(addresses))):
                raise OrderMismatch(
                    expected=len(addresses),
                    actual=len(order),
                    reason=f"Order {order} is not a permutation of 0..{len(addresses) - 1}",
                )
            addresses = [addresses[i] for i in order]

        factory = writer_factory or _default_writer_factory(queue_size)
        devices = [LedDevice(address, factory(address)) for address in addresses]
        logger.info(f"LedArray built with {len(devices)} devices")
        return cls(devices)

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[LedDevice]:
        return iter(self._devices)

    def __getitem__(self, index: int) -> LedDevice:
        return self._devices[index]

    @property
    def devices(self) -> tuple[LedDevice, ...]:
        return self._devices

    def set_all(self, frame: Sequence[Color]) -> None:
        """
        Apply one color per device, in index order.

        Writes are only dispatched in that order; which LED changes first
        physically is up to the write workers.

        Raises:
            LengthMismatch: If the frame length differs from the array length
        """
        if len(frame) != len(self._devices):
            raise LengthMismatch(expected=len(self._devices), actual=len(frame))

        for device, color in zip(self._devices, frame):
            device.set_color(color)

    def set_raw_all(self, r: int, g: int, b: int) -> None:
        """Write the same raw device-unit values to every device."""
        for device in self._devices:
            device.set_raw_rgb(r, g, b)

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for every device's pending writes. Returns False if any timed out."""
        return all([device.writer.flush(timeout) for device in self._devices])

    def close(self, drain: bool = False, timeout: float = 1.0) -> None:
        """Close every device's writer."""
        for device in self._devices:
            device.writer.close(drain=drain, timeout=timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close(drain=exc_type is None)
