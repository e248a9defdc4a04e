"""Pure pattern functions that compute per-LED frames."""

from .frames import (
    Frame,
    gradient_frame,
    identify,
    identify_names,
    positional,
    progress,
    rainbow,
    solid,
)
from .sweep import (
    SWEEP_PATTERNS,
    PatternFn,
    progress_sweep,
    progress_sweep_percent,
    rainbow_sweep,
)

__all__ = [
    "Frame",
    "PatternFn",
    "SWEEP_PATTERNS",
    "gradient_frame",
    "identify",
    "identify_names",
    "positional",
    "progress",
    "progress_sweep",
    "progress_sweep_percent",
    "rainbow",
    "rainbow_sweep",
    "solid",
]
