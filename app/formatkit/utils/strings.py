"""
Small string helpers.

- to_text: text conversion shared by padding and ordinal helpers.
- strip_all_whitespace / strip_all_non_numeric: character class filters.
- email_regex / is_valid_email: loose e-mail shape check.
- uc_words: capitalize the first letter of each word.
- random_string: random alphanumeric string.
"""

import random
import re
import string
from typing import Any, Optional
from formatkit.config.settings import Settings

WHITESPACE_RE = re.compile(r"\s+")
NON_DIGIT_RE = re.compile(r"[^0-9]")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
WORD_START_RE = re.compile(r"^([a-z])|\s+([a-z])")

RANDOM_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


def to_text(value: Any) -> str:
    """
    Convert a value to its display text.

    Integral floats render without a fractional part (5.0 -> "5") and
    booleans as "true"/"false"; everything else goes through str().
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def strip_all_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub("", text)


def strip_all_non_numeric(text: str) -> str:
    return NON_DIGIT_RE.sub("", text)


def email_regex() -> re.Pattern:
    return EMAIL_RE


def is_valid_email(text: str) -> bool:
    return isinstance(text, str) and EMAIL_RE.match(text) is not None


def uc_words(text: Any) -> str:
    """
    Upper-case a lowercase letter at the start of the text or after whitespace.

    Example:
      uc_words("hello world") -> "Hello World"
      uc_words("hello WORLD") -> "Hello WORLD"
    """
    return WORD_START_RE.sub(lambda match: match.group(0).upper(), to_text(text))


def random_string(length: Optional[int] = None) -> str:
    """
    Build a random string of ASCII letters and digits.

    A missing or non-integer length falls back to Settings.RANDOM_STRING_LENGTH.
    Not suitable for secrets.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        length = Settings.RANDOM_STRING_LENGTH
    return "".join(random.choices(RANDOM_ALPHABET, k=max(length, 0)))
