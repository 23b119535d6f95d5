"""Exceptions raised by custom reports."""


class ReportError(Exception):
    """Base class for report configuration and filtering errors."""

    pass


class ConfigError(ReportError):
    """Exception raised for configuration errors.

    Attributes:
        key: Configuration key that failed validation, if known.
    """

    def __init__(self, message: str, key: str | None = None):
        self.key = key
        super().__init__(f"{key}: {message}" if key else message)


class ConditionError(ReportError):
    """Exception raised when a filter condition cannot be translated."""

    pass
