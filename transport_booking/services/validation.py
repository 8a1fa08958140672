import math
import re
from datetime import datetime
from typing import Optional, Union

MIN_PASSWORD_LENGTH = 6

# signed 32-bit INT column
MAX_PASSENGERS = 2**31 - 1


def missing(*values) -> bool:
    """True when any value is absent: None, empty string, zero or False."""
    return any(not v for v in values)


def password_problem(password: str) -> Optional[str]:
    """Returns the rejection message for a weak password, None when it passes."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    has_upper = re.search(r"[A-Z]", password) is not None
    has_lower = re.search(r"[a-z]", password) is not None
    has_digit = re.search(r"[0-9]", password) is not None
    if not (has_upper and has_lower and has_digit):
        return "Password must contain uppercase, lowercase, and numbers"
    return None


def parse_passengers(value: Union[int, float, str, None]) -> Optional[int]:
    """
    Accepts numbers or numeric strings ("2", " 3 ", "2.0").
    Returns None unless the value is a whole number between 1 and MAX_PASSENGERS.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    if not 0 < number <= MAX_PASSENGERS:
        return None
    return int(number)


def parse_iso_datetime(dt: Optional[str]) -> Optional[datetime]:
    """
    Accepts ISO8601 strings like:
      2026-01-19T12:34
      2026-01-19T12:34:56Z
      2026-01-19 12:34:56
    Any offset is dropped (wall-clock time as submitted). None if unparseable.
    """
    if not dt:
        return None
    s = dt.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError:
        return None
    return parsed.replace(tzinfo=None)
