"""
Error handling helpers shared by devices, services and the CLI.

| Situation | Helper |
|-----------|--------|
| Worker-thread write that must never raise | `@handle_errors(operation_name="write LED channel", re_raise=False)` |
| One sub-operation per LED, report failures together | `collector = collect_errors("read LEDs")` |
| Long-running block that should log how it ended | `with ErrorContext("run rainbow sweep"): ...` |
| Turning any exception into CLI text | `format_error_for_display(e)` |

OSError and ValueError from sysfs and JSON files are translated into
GaudyLedsError subclasses close to where they happen; the CLI only ever
shows `user_message` plus `recovery_hint`.
"""

import logging
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from .base import GaudyLedsError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _describe(error: BaseException) -> str:
    if isinstance(error, GaudyLedsError):
        return error.technical_message
    return f"{type(error).__name__}: {error}"


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Any = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR,
) -> Callable:
    """
    Log any exception raised by the decorated function.

    Args:
        operation_name: What the function does, used in the log line
        user_notification: Called with a short message when an error occurs
        fallback_value: Returned instead when re_raise is False
        re_raise: Propagate the exception after logging
        log_level: Level of the log line; tracebacks are attached from ERROR up
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                app_error = isinstance(e, GaudyLedsError)
                logger.log(
                    log_level,
                    f"Failed to {operation_name}: {_describe(e)}",
                    exc_info=not app_error and log_level >= logging.ERROR,
                )
                if user_notification:
                    user_notification(e.get_full_message() if app_error else f"Error: {e}")
                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


class ErrorContext:
    """
    Log the start, end or failure of a block.

    KeyboardInterrupt is logged as an interruption and always propagates.

    Example:
        ```python
        with ErrorContext("run rainbow sweep", logger_instance=logger):
            scheduler = service.sweep("rainbow")
            scheduler.wait()
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True,
    ):
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        if issubclass(exc_type, KeyboardInterrupt):
            self.logger.info(f"Interrupted: {self.operation}")
            return False

        self.error = exc_val
        self.logger.error(
            f"Failed to {self.operation}: {_describe(exc_val)}",
            exc_info=not isinstance(exc_val, GaudyLedsError),
        )
        return not self.re_raise


def _field_name(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> GaudyLedsError:
    """
    Translate a pydantic ValidationError raised while loading a config file.

    JSON syntax problems become ConfigFileInvalidError; bad values become
    ConfigValidationError naming the field (or every field, if several).
    """
    from pydantic import ValidationError

    if not isinstance(error, ValidationError):
        return ConfigValidationError("unknown", None, str(error), file_path)

    errors = error.errors()
    syntax = [e for e in errors if e.get("type") == "json_invalid"]
    if syntax:
        detail = syntax[0].get("ctx", {}).get("error") or syntax[0].get("msg", str(error))
        return ConfigFileInvalidError(file_path, detail)

    if len(errors) == 1:
        only = errors[0]
        return ConfigValidationError(
            _field_name(only), only.get("input"), only.get("msg", "invalid value"), file_path
        )

    lines = [f"  - {_field_name(e)}: {e.get('msg', 'invalid value')}" for e in errors]
    return ConfigValidationError(
        "multiple fields",
        None,
        f"{len(errors)} invalid values:\n" + "\n".join(lines),
        file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for showing error to a user."""
    if isinstance(error, GaudyLedsError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Start collecting failures of a batch operation.

    Example:
        ```python
        collector = collect_errors("read LEDs")
        for index, device in enumerate(array):
            with collector.try_operation(f"read LED {index}"):
                rgb = device.read_rgb()
        if collector.has_errors:
            click.echo(collector.get_summary(), err=True)
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Records which sub-operations of a batch failed so the rest can continue.

    Only GaudyLedsError is collected. Anything else is a bug and propagates.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, GaudyLedsError]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def try_operation(self, sub_operation: str) -> "_Attempt":
        """Context manager that records the outcome of one sub-operation."""
        return _Attempt(self, sub_operation)

    def get_summary(self) -> str:
        """One line per failure, or a success line if nothing failed."""
        if not self.errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        lines = [f"Failed {self.error_count} of {total} operations:"]
        lines += [f"  - {sub_op}: {error.user_message}" for sub_op, error in self.errors]
        return "\n".join(lines)


class _Attempt:
    def __init__(self, collector: ErrorCollector, sub_operation: str):
        self.collector = collector
        self.sub_operation = sub_operation

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.collector.success_count += 1
            return False

        if not issubclass(exc_type, GaudyLedsError):
            return False

        logger.warning(
            f"{self.collector.operation}: {self.sub_operation} failed: {exc_val.technical_message}"
        )
        self.collector.errors.append((self.sub_operation, exc_val))
        return True
