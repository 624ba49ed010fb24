"""
Utility functions for date/time and numeric formatting.

- parse_instant: resolve a date-like value to an aware datetime in server timezone.
- expand_date_format: render a datetime through the token pattern language.
- sanitize_amount / parse_amount: strict steps of the currency pipeline.
- format_currency: truncate to 2 decimals without rounding, fixed 2-decimal display.
"""

import logging
import math
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Optional, Union
from formatkit.config.settings import Settings
from formatkit.core.error_handler import handle_error
from formatkit.core.errors import InvalidAmountError, InvalidInstantError
from .padding import left_pad

DateLike = Union[datetime, date, str, int, float]

MONTH_ABBR = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
              'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')
MONTH_NAMES = ('January', 'February', 'March', 'April', 'May', 'June', 'July',
               'August', 'September', 'October', 'November', 'December')


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


# Token -> field extractor, built once at import
DATE_TOKENS: "MappingProxyType[str, Callable[[datetime], str]]" = MappingProxyType({
    'd': lambda dt: left_pad(dt.day),
    'm': lambda dt: left_pad(dt.month),
    'Y': lambda dt: str(dt.year),
    'H': lambda dt: left_pad(dt.hour),
    'h': lambda dt: left_pad(_hour12(dt)),
    'i': lambda dt: left_pad(dt.minute),
    's': lambda dt: left_pad(dt.second),
    'j': lambda dt: str(dt.day),
    'n': lambda dt: str(dt.month),
    'y': lambda dt: str(dt.year)[-2:],
    'G': lambda dt: str(dt.hour),
    'g': lambda dt: str(_hour12(dt)),
    'A': lambda dt: 'AM' if dt.hour < 12 else 'PM',
    'a': lambda dt: 'am' if dt.hour < 12 else 'pm',
    'M': lambda dt: MONTH_ABBR[dt.month - 1],
    'F': lambda dt: MONTH_NAMES[dt.month - 1],
})

LITERAL_OPEN = '['
LITERAL_CLOSE = ']'

CURRENCY_FALLBACK = "0.00"
AMOUNT_STRIP_RE = re.compile(r"[^0-9.]")


class ScanMode(Enum):
    """State of the left-to-right pattern scan."""
    TOKEN = "token"
    LITERAL = "literal"


def parse_instant(instant: DateLike, tz=None) -> datetime:
    """
    Resolve a date-like value to an aware datetime in the server timezone.

    - Accepts datetime, date (midnight), ISO-8601 strings with or without
      timezone (a 'Z' suffix means UTC) and int/float epoch milliseconds.
    - If input is naive (no tzinfo), it is interpreted in the target timezone.
    - If input is aware, it is converted to the target timezone.

    Args:
        instant: Value to resolve
        tz: Target timezone (default: Settings.SERVER_TZ; None is the host's local time)

    Returns:
        Timezone-aware datetime

    Raises:
        InvalidInstantError: If the value cannot be resolved to a point in time
    """
    tz = tz or Settings.SERVER_TZ

    if isinstance(instant, datetime):
        dt = instant
    elif isinstance(instant, date):
        dt = datetime(instant.year, instant.month, instant.day)
    elif isinstance(instant, bool):
        raise InvalidInstantError(f"Boolean is not an instant: {instant!r}", instant)
    elif isinstance(instant, (int, float)):
        if not math.isfinite(instant):
            raise InvalidInstantError(f"Non-finite timestamp: {instant!r}", instant)
        try:
            dt = datetime.fromtimestamp(instant / 1000, tz)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInstantError(f"Timestamp out of range: {instant!r}", instant) from e
    elif isinstance(instant, str):
        # Normalize 'Z' (Zulu/UTC) suffix to '+00:00' for fromisoformat compatibility
        s = instant.strip()
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(s)
        except ValueError as e:
            raise InvalidInstantError(f"Unparseable datetime string: {instant!r}", instant) from e
    else:
        raise InvalidInstantError(f"Unsupported instant type: {type(instant).__name__}", instant)

    # Attach/convert timezone
    if tz is None:
        # Host local time with the offset in effect at this instant
        try:
            return dt.astimezone()
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInstantError(f"Instant outside host time range: {instant!r}", instant) from e
    if dt.tzinfo is None:
        # pytz-style timezone (has .localize) vs zoneinfo (no .localize)
        if hasattr(tz, "localize"):
            return tz.localize(dt)
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def expand_date_format(instant: DateLike, pattern: Optional[str]) -> str:
    """
    Format a date-like value with a token pattern.

    Pattern characters found in DATE_TOKENS are replaced by the matching
    field; any other character is copied. Text inside ``[...]`` is copied
    verbatim and the brackets are dropped. An unmatched ``[`` makes the
    rest of the pattern literal.

    If the instant cannot be resolved, every token renders
    Settings.INVALID_DATE_TEXT. Never raises.

    Example:
      expand_date_format("2023-04-15T14:30:05", "Y-m-d H:i:s") -> "2023-04-15 14:30:05"
      expand_date_format("2023-04-15T14:30:05", "[Literal] d/m/Y") -> "Literal 15/04/2023"
    """
    try:
        dt = parse_instant(instant)
    except InvalidInstantError as e:
        dt = handle_error(e, "while resolving instant for date pattern")

    pattern = "" if pattern is None else str(pattern)

    result = []
    mode = ScanMode.TOKEN
    for ch in pattern:
        if ch == LITERAL_OPEN:
            mode = ScanMode.LITERAL
        elif ch == LITERAL_CLOSE:
            mode = ScanMode.TOKEN
        elif mode is ScanMode.LITERAL:
            result.append(ch)
        elif ch in DATE_TOKENS:
            result.append(Settings.INVALID_DATE_TEXT if dt is None else DATE_TOKENS[ch](dt))
        else:
            result.append(ch)

    return "".join(result)


def _amount_text(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float, Decimal)) and not isinstance(raw, bool):
        # Fixed-point text so 1e-05 becomes 0.00001 rather than "1e-05"
        try:
            return format(Decimal(str(raw)), "f")
        except InvalidOperation:
            return str(raw)
    return str(raw)


def sanitize_amount(raw: Any) -> str:
    """
    Reduce a raw value to digits with at most one '.' and 2 fractional digits.

    Only the first '.' is a decimal separator; later dots are dropped and
    the fraction is truncated, never rounded.

    Example:
      sanitize_amount("$1,234.5678") -> "1234.56"
      sanitize_amount("1.2.3.4") -> "1.23"
    """
    value = AMOUNT_STRIP_RE.sub("", _amount_text(raw))

    parts = value.split(".")
    if len(parts) > 2:
        parts = [parts[0], "".join(parts[1:])]

    if len(parts) > 1:
        parts[1] = parts[1][:2]

    return ".".join(parts)


def parse_amount(raw: Any) -> float:
    """
    Sanitize and parse a raw value as a float truncated to 2 decimals.

    Raises:
        InvalidAmountError: If no finite number remains after sanitizing
    """
    buffer = sanitize_amount(raw)
    try:
        value = float(buffer)
    except ValueError as e:
        raise InvalidAmountError(f"No amount in {raw!r}", raw) from e
    if not math.isfinite(value):
        raise InvalidAmountError(f"Amount out of range in {raw!r}", raw)
    return value


def format_currency(raw: Any) -> str:
    """
    Format a raw value for display with exactly 2 decimals, truncating extra digits.

    Returns "0.00" when nothing parseable remains. Never raises.

    Example:
      format_currency("1234.5678") -> "1234.56"
      format_currency("12.3") -> "12.30"
      format_currency("abc") -> "0.00"
    """
    try:
        value = parse_amount(raw)
    except InvalidAmountError as e:
        return handle_error(e, "in currency formatting", CURRENCY_FALLBACK, logging.DEBUG)
    return f"{value:.2f}"
