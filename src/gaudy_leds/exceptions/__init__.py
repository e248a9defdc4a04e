"""
Custom exception hierarchy for gaudy-leds.

## Exception Hierarchy

```
GaudyLedsError (base)
├── InvalidColorSpec
├── DeviceError
│   ├── DeviceUnavailable
│   └── NoDevicesFound
├── ArrayContractError (also ValueError)
│   ├── LengthMismatch
│   └── OrderMismatch
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `GaudyLedsError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

There is no write-failure exception: LED writes are fire-and-forget and the
write worker only logs failures.

See `gaudy_leds.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import GaudyLedsError
from .color import InvalidColorSpec
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import (
    ArrayContractError,
    DeviceError,
    DeviceUnavailable,
    LengthMismatch,
    NoDevicesFound,
    OrderMismatch,
)
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "GaudyLedsError",
    # Color
    "InvalidColorSpec",
    # Devices
    "ArrayContractError",
    "DeviceError",
    "DeviceUnavailable",
    "LengthMismatch",
    "NoDevicesFound",
    "OrderMismatch",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
