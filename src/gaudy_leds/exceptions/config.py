"""Errors loading or validating ~/.gaudy-leds/config.json."""

from typing import Any

from .base import GaudyLedsError

_RESET_HINT = "Run 'gaudy-leds config reset' to restore the defaults."


class ConfigurationError(GaudyLedsError):
    """The config file can't be used."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is empty, unreadable or not valid JSON."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Config file that failed to load
            parse_error: Parser or OS error text
        """
        lowered = parse_error.lower()
        if "trailing comma" in lowered:
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Remove the comma after the last entry in {file_path}."
        elif "empty" in lowered:
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} or run 'gaudy-leds config reset'."
        else:
            user_msg = "Configuration file has invalid syntax"
            recovery = f"Fix the JSON in {file_path}. {_RESET_HINT}"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Could not load {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A config value is out of range or of the wrong type."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Args:
            field: Name of the offending field ("multiple fields" if several)
            value: The rejected value
            error_msg: Validation message
            file_path: Config file the value came from, if any
        """
        hints = [f"Change '{field}' with 'gaudy-leds config set' or edit the file."]
        if file_path:
            hints.append(f"Config file: {file_path}")
        if "driver_path" in field:
            hints.append("The usbled driver normally lives at /sys/bus/usb/drivers/usbled")
        elif "interval" in field:
            hints.append("The tick interval is in milliseconds and must be at least 1")
        hints.append(_RESET_HINT)

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hints),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
