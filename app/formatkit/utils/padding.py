"""
Left/right padding helpers used for zero-padded date fields.
"""

from typing import Any
from .strings import to_text


def _fill_for(text: str, fill_char: Any, target_len: int) -> str:
    # The fill string is repeated as a whole, so a multi-character fill overshoots target_len
    if len(text) >= target_len:
        return ""
    return to_text(fill_char or "0") * (target_len - len(text))


def left_pad(value: Any, fill_char: Any = "0", target_len: int = 2) -> str:
    """
    Pad the text form of ``value`` on the left up to ``target_len``.

    Example:
      left_pad(5) -> "05"
      left_pad("5", "0", 3) -> "005"
      left_pad("123", "0", 2) -> "123"
    """
    text = to_text(value)
    return _fill_for(text, fill_char, target_len) + text


def right_pad(value: Any, fill_char: Any = "0", target_len: int = 2) -> str:
    """
    Pad the text form of ``value`` on the right up to ``target_len``.

    Example:
      right_pad("5", "0", 3) -> "500"
    """
    text = to_text(value)
    return text + _fill_for(text, fill_char, target_len)
