"""Device address model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .enums import Channel


class DeviceAddress(BaseModel):
    """Stable address of one LED device bound to the usbled driver.

    Holding an address grants read/write access to the device's three
    channel files; nothing else about the device is known here.
    """

    model_config = ConfigDict(frozen=True)

    syspath: Path = Field(description="Sysfs directory holding the red/green/blue attributes")

    @property
    def name(self) -> str:
        """Short device name, e.g. the USB interface id '1-1.2:1.0'."""
        return self.syspath.name

    def channel_path(self, channel: Channel | str) -> Path:
        """Path of the attribute file for one channel."""
        return self.syspath / Channel(channel).value

    def __str__(self) -> str:
        return str(self.syspath)
