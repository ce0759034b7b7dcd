# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - Identifier parsing for path/body ids
# - Lenient boolean coercion for flags sent by the front-end
# - "Today" in the salon's timezone
# =============================================================================

from datetime import date, datetime, time, timezone
from typing import Any
from zoneinfo import ZoneInfo

from app.config import settings

_TRUE_STRINGS = {"true", "1", "sim", "yes", "on"}


# =============================================================================
# Identifier Utilities
# =============================================================================

def parse_id(value: Any) -> int | None:
    """
    Parse a positive integer identifier.

    Accepts ints and digit strings; anything else (including bools,
    zero and negatives) returns None.

    Example:
        parse_id("42")   # 42
        parse_id(" 7 ")  # 7
        parse_id("abc")  # None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float) and value.is_integer():
        return int(value) if value > 0 else None
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit() and int(text) > 0:
            return int(text)
    return None


def coerce_bool(value: Any) -> bool:
    """
    Coerce a flag from a JSON body to a bool.

    Strings are matched against common truthy spellings ("true", "1", "sim"),
    so "false" and "0" are False.
    """
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def is_blank(value: Any) -> bool:
    """True for None, non-strings that are falsy, and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


# =============================================================================
# Date Utilities
# =============================================================================

def today() -> date:
    """Current date in the salon's configured timezone."""
    return datetime.now(ZoneInfo(settings.SALON_TIMEZONE)).date()


def utc_now_iso() -> str:
    """Current UTC timestamp as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def parse_date(value: Any) -> date | None:
    """
    Parse a stored date value ("YYYY-MM-DD" or a full ISO timestamp).

    Returns None for empty or malformed values, including a date followed
    by anything that isn't a valid time part ("2024-01-10junk").
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def parse_time(value: Any) -> time | None:
    """
    Parse a wall-clock time ("HH:MM" or "HH:MM:SS").

    Returns None for empty or malformed values and for times carrying
    a UTC offset.

    Example:
        parse_time("09:30")     # time(9, 30)
        parse_time("25:99")     # None
    """
    if isinstance(value, time):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = time.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        return None
    return parsed
