"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from gaudy_leds.utils.persistence import PydanticPersistence

DEFAULT_DRIVER_PATH = Path("/sys/bus/usb/drivers/usbled")


def default_config_path() -> Path:
    """Location of the config file (~/.gaudy-leds/config.json)."""
    return Path.home() / ".gaudy-leds" / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    driver_path: Path = Field(
        default=DEFAULT_DRIVER_PATH,
        description="Sysfs directory of the usbled driver; every bound device appears under it",
    )
    tick_interval_ms: int = Field(
        default=10, ge=1, description="Milliseconds between sweep animation frames"
    )
    write_queue_size: int = Field(
        default=64,
        ge=1,
        description="Channel files per LED that may have a pending write; the latest value per file wins",
    )
    sweep_color: str = Field(
        default="white", description="Color used by 'sweep progress'"
    )

    @field_serializer("driver_path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.gaudy-leds/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or default_config_path(), cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or default_config_path())
