"""
List helpers: ranges, integer parsing, de-duplication and chunking.
"""

import re
from typing import Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")


def inclusive_range(start: int, end: int) -> List[int]:
    """Integers from start to end, both included; empty when end < start."""
    return list(range(start, end + 1))


def parse_int(value) -> Optional[int]:
    """
    Parse the leading integer of a value.

    Example:
      parse_int("12px") -> 12
      parse_int(" -3") -> -3
      parse_int("px") -> None
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else None


def parse_ints(values: Iterable) -> List[Optional[int]]:
    return [parse_int(value) for value in values]


def unique_strings(values: Iterable[str]) -> List[str]:
    """Drop repeated values, keeping the first occurrence order."""
    return list(dict.fromkeys(values))


def chunk(values: Sequence[T], size: int) -> List[Sequence[T]]:
    """
    Split a sequence into consecutive slices of ``size`` items.

    The last slice holds the remainder.

    Raises:
        ValueError: If size is smaller than 1
    """
    if size < 1:
        raise ValueError(f"Chunk size must be at least 1, got {size}")
    return [values[i:i + size] for i in range(0, len(values), size)]
