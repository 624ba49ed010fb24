"""
Core utilities package.

This package provides essential utilities for the library,
including logging setup, error types and the central error handler.
"""

from .logger import setup_logger
from .errors import FormatError, InvalidInstantError, InvalidAmountError
from .error_handler import handle_error

__all__ = [
    'setup_logger',
    'FormatError',
    'InvalidInstantError',
    'InvalidAmountError',
    'handle_error',
]
