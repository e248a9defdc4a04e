"""Device I/O protocols."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ChannelSink(Protocol):
    """Protocol for dispatching channel writes to a device."""

    def submit(self, path: Path, text: str) -> None:
        """
        Queue a write of text to path and return immediately.

        No completion handle is returned and failures are not reported to the
        caller; implementations log them instead.
        """
        ...

    def flush(self, timeout: float | None = None) -> bool:
        """Wait until pending writes are done. Returns False on timeout."""
        ...

    def close(self, drain: bool = False, timeout: float = 1.0) -> None:
        """Stop accepting writes and release resources."""
        ...
