"""
English plural/possessive and ordinal suffix helpers.
"""

from typing import Any
from .strings import to_text

ORDINAL_SUFFIXES = {"1": "st", "2": "nd", "3": "rd"}
TEEN_ENDINGS = {"11", "12", "13"}


def pluralize(word: Any, possessive: bool = False) -> str:
    """
    Pluralize a word or make it possessive.

    - Non-string input returns "" (degenerate case, not an error).
    - Words ending in "s" get a bare apostrophe in both modes.
    - Possessive adds "'s"; otherwise "y" becomes "ies" and anything else gets "s".

    Example:
      pluralize("cat") -> "cats"
      pluralize("cat", True) -> "cat's"
      pluralize("boss") -> "boss'"
      pluralize("city") -> "cities"
    """
    if not isinstance(word, str):
        return ""

    word = word.strip()
    if not word:
        return word

    last = word[-1].lower()
    if last == "s":
        return word + "'"
    if possessive:
        return word + "'s"
    if last == "y":
        return word[:-1] + "ies"
    return word + "s"


def ordinal_suffix(number: Any) -> str:
    """
    Append an ordinal suffix to a number.

    Example:
      ordinal_suffix(1) -> "1st"
      ordinal_suffix(11) -> "11th"
      ordinal_suffix(22) -> "22nd"
      ordinal_suffix(113) -> "113th"
    """
    text = to_text(number)
    if text[-2:] in TEEN_ENDINGS:
        return text + "th"
    return text + ORDINAL_SUFFIXES.get(text[-1:], "th")
