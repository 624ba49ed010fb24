"""
Exception types raised by the strict parsing helpers.

The public formatting functions never let these escape; they are caught
and turned into fallback values by core.error_handler.handle_error.
"""


class FormatError(ValueError):
    """Base class for input that cannot be formatted."""

    def __init__(self, message: str, value=None) -> None:
        super().__init__(message)
        self.value = value


class InvalidInstantError(FormatError):
    """Value cannot be resolved to a point in time."""


class InvalidAmountError(FormatError):
    """Value contains no parseable amount."""
