"""Device-related exceptions.

This module defines exceptions for LED device errors:
- DeviceError: Base class for device errors
- DeviceUnavailable: A channel file could not be read
- NoDevicesFound: Discovery found nothing bound to the driver
- ArrayContractError: Frame/order sizes disagree with the LED array
"""

from pathlib import Path

from .base import GaudyLedsError


class DeviceError(GaudyLedsError):
    """LED device access failed."""

    def __init__(self, user_message: str, device_path: Path | str | None = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            device_path: Sysfs path of the device involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.device_path = device_path


class DeviceUnavailable(DeviceError):
    """Reading a channel file of a device failed."""

    def __init__(self, device_path: Path | str, channel: str, original_error: str | None = None):
        """
        Initialize device-unavailable error.

        Args:
            device_path: Sysfs path of the device
            channel: Channel name that could not be read
            original_error: The underlying OS or parse error
        """
        user_msg = f"Could not read {channel} from LED at {device_path}"
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            device_path=device_path,
            recoverable=True,
            recovery_hint="The device may have been unplugged. Run 'gaudy-leds list devices' to see connected LEDs.",
        )
        self.channel = channel


class NoDevicesFound(DeviceError):
    """No device is bound to the usbled driver."""

    def __init__(self, driver_path: Path | str):
        """
        Initialize no-devices error.

        Args:
            driver_path: Driver directory that was scanned
        """
        super().__init__(
            user_message="No usbled LED devices found.",
            technical_message=f"No devices bound under {driver_path}",
            device_path=driver_path,
            recoverable=True,
            recovery_hint=(
                "Plug in an LED and check that the 'usbled' kernel module is loaded "
                "(modprobe usbled). Use --driver-path if the driver lives elsewhere."
            ),
        )


class ArrayContractError(GaudyLedsError, ValueError):
    """Sizes passed to an LED array disagree with the array itself.

    These indicate programming errors rather than user errors.
    """

    def __init__(self, user_message: str, expected: int, actual: int):
        super().__init__(
            user_message=user_message,
            technical_message=f"{user_message} (expected {expected}, got {actual})",
        )
        self.expected = expected
        self.actual = actual


class LengthMismatch(ArrayContractError):
    """A frame does not have one color per LED."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"Frame has {actual} colors for {expected} LEDs", expected=expected, actual=actual
        )


class OrderMismatch(ArrayContractError):
    """An explicit device order is not a permutation of the discovered devices."""

    def __init__(self, expected: int, actual: int, reason: str | None = None):
        message = reason or f"Order lists {actual} positions for {expected} LEDs"
        super().__init__(message, expected=expected, actual=actual)
