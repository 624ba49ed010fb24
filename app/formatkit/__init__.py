"""
formatkit: token-based date patterns, currency truncation and string helpers.
"""

from .utils import (
    expand_date_format,
    format_currency,
    left_pad,
    ordinal_suffix,
    pluralize,
    right_pad,
)

__version__ = "1.0.0"

__all__ = [
    'expand_date_format',
    'format_currency',
    'left_pad',
    'right_pad',
    'pluralize',
    'ordinal_suffix',
    '__version__',
]
