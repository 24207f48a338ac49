"""Enumerations for i18ntables type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum

__all__ = ["WriteStatus"]


class WriteStatus(StrEnum):
    """Outcome of persisting one locale table.

    StrEnum provides automatic string conversion: str(WriteStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Table serialized and written to its destination."""

    ERROR = "error"
    """Directory creation or file write failed."""
