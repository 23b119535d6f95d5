"""Sanitization utilities for safe spreadsheet output."""

from typing import Optional


# Characters that trigger formula execution in spreadsheet applications
# when they appear at the start of a cell value
_FORMULA_CHARS = ("=", "+", "-", "@", "\t", "\r", "\n", "|")


def sanitize_for_csv(value: Optional[str]) -> Optional[str]:
    """Sanitize a text value for CSV/Excel output.

    Group names come from user-maintained ledgers, so a name such as
    "=HYPERLINK(...)" is prefixed with a single quote to keep spreadsheet
    applications from evaluating it.

    Args:
        value: String value to sanitize, or None.

    Returns:
        Sanitized string, or None if input was None.
    """
    if not value:
        return value

    if value.startswith(_FORMULA_CHARS):
        return "'" + value

    return value
