"""Logging setup for custom reports.

Every module logs through a child of the ``custom_reports`` logger obtained
with get_logger(). The CLI calls setup_logging() once to attach a file
handler and, when verbose, a stderr handler.
"""

import logging
import sys
import time
from enum import Enum
from pathlib import Path

DEFAULT_LOG_FILE = "custom_reports.log"
PACKAGE_LOGGER = "custom_reports"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Ledger fields that can identify people or places; masked in log context
SENSITIVE_FIELDS = frozenset({"payee", "payees", "notes", "account_number", "token"})


def _render_context(context: dict[str, object]) -> str:
    """Render context as ``key=value`` pairs, masking sensitive fields."""
    parts = []
    for key, value in context.items():
        if key.lower() in SENSITIVE_FIELDS:
            value = "***"
        elif isinstance(value, Enum):
            value = value.value
        parts.append(f"{key}={value}")
    return ", ".join(parts)


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    console_output: bool = True,
) -> logging.Logger:
    """Configure the package logger.

    Replaces any handlers from a previous call, so the CLI can be invoked
    repeatedly in one process.

    Args:
        level: Log level name; unknown names fall back to INFO.
        log_file: Log file path, DEFAULT_LOG_FILE when None.
        console_output: Also log to stderr.

    Returns:
        The ``custom_reports`` logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [
        logging.FileHandler(Path(log_file or DEFAULT_LOG_FILE), encoding="utf-8")
    ]
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module under the package logger.

    Args:
        name: Module name (typically __name__).
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


class LogContext:
    """Logs the start, duration and failure of an operation.

    Exceptions are logged and re-raised.

    Example:
        with LogContext(logger, "custom report", interval=ReportInterval.MONTHLY):
            ...
    """

    def __init__(self, logger: logging.Logger, operation: str, **context: object):
        """Initialize log context.

        Args:
            logger: Logger to write to.
            operation: Name of the operation.
            **context: Values describing the operation.
        """
        self.logger = logger
        self.operation = operation
        self.context = context
        self.elapsed: float | None = None
        self._started = 0.0

    def __enter__(self) -> "LogContext":
        self._started = time.perf_counter()
        self.logger.debug(f"Starting {self.operation}: {_render_context(self.context)}")
        return self

    def __exit__(
        self,
        exc_type: type | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> bool:
        self.elapsed = time.perf_counter() - self._started
        if exc_type is not None:
            self.logger.error(
                f"{self.operation} failed after {self.elapsed * 1000:.1f} ms: "
                f"{exc_type.__name__}: {exc_val}",
                exc_info=True,
            )
        else:
            self.logger.debug(f"Completed {self.operation} in {self.elapsed * 1000:.1f} ms")
        return False
