"""Color parsing exceptions."""

from .base import GaudyLedsError


class InvalidColorSpec(GaudyLedsError):
    """A color argument could not be parsed."""

    def __init__(self, spec: object, reason: str | None = None):
        """
        Initialize invalid color error.

        Args:
            spec: The value that failed to parse
            reason: Why it failed (optional, goes to the log)
        """
        user_msg = f"Unrecognized color: {spec!r}"
        tech_msg = user_msg if reason is None else f"{user_msg} ({reason})"
        recovery = (
            "Use a color name (e.g. 'red', 'orange'), a hex value such as "
            "'#ff8000', 'rgb(255, 128, 0)' or 'hsv(30, 1, 1)'. "
            "Run 'gaudy-leds list colors' to list the color names."
        )

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=recovery,
        )
        self.spec = spec
