"""
Utility functions package.

Exposes the date pattern and currency formatters, padding and
inflection primitives, and small string/list helpers.
"""

from .formatters import (
    DATE_TOKENS,
    ScanMode,
    expand_date_format,
    format_currency,
    parse_amount,
    parse_instant,
    sanitize_amount,
)
from .padding import left_pad, right_pad
from .inflection import ordinal_suffix, pluralize
from .strings import (
    email_regex,
    is_valid_email,
    random_string,
    strip_all_non_numeric,
    strip_all_whitespace,
    to_text,
    uc_words,
)
from .arrays import chunk, inclusive_range, parse_int, parse_ints, unique_strings
from .debounce import debounce

__all__ = [
    'DATE_TOKENS',
    'ScanMode',
    'expand_date_format',
    'format_currency',
    'parse_amount',
    'parse_instant',
    'sanitize_amount',
    'left_pad',
    'right_pad',
    'ordinal_suffix',
    'pluralize',
    'email_regex',
    'is_valid_email',
    'random_string',
    'strip_all_non_numeric',
    'strip_all_whitespace',
    'to_text',
    'uc_words',
    'chunk',
    'inclusive_range',
    'parse_int',
    'parse_ints',
    'unique_strings',
    'debounce',
]
