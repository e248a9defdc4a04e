"""Root of the gaudy-leds exception tree."""

from typing import Optional


class GaudyLedsError(Exception):
    """
    Base exception for all gaudy-leds errors.

    Every error carries two messages: `user_message` is what the CLI prints,
    `technical_message` is what goes to the log (paths, OS errors, raw
    values). `recovery_hint` tells the user what to try next, and
    `recoverable` marks errors that leave the LEDs in a usable state.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
