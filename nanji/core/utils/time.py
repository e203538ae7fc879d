"""
Time Utilities

Parsing of user-supplied wall-clock times and small helpers around the
current UTC instant and how instants are displayed.

Accepted time formats (24h):
    - H:MM   e.g. "9:00"
    - HH:MM  e.g. "09:00", "23:59", "00:00"

Hours run 00-23, minutes 00-59. Anything else ("24:00", "9:7", "9::00",
"９:００" with full-width digits) is rejected with InvalidTimeFormatError.
"""

import re
from datetime import datetime, timezone, tzinfo

from nanji.core.exceptions import InvalidTimeFormatError
from nanji.core.schemas import TimeOfDay


# ASCII digits only; \d would also match other Unicode digits
TIME_PATTERN = re.compile(r"(?P<hour>[01]?[0-9]|2[0-3]):(?P<minute>[0-5][0-9])")

DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def is_valid_time(text: str) -> bool:
    """Check whether ``text`` is a valid H:MM or HH:MM time."""
    return TIME_PATTERN.fullmatch(text) is not None


def parse_time_of_day(text: str) -> TimeOfDay:
    """
    Parse an H:MM or HH:MM string.

    Args:
        text: Time string, e.g. "9:00" or "20:30"

    Returns:
        TimeOfDay: Validated hour and minute

    Raises:
        InvalidTimeFormatError: If the string is not a valid 24h time

    Examples:
        >>> parse_time_of_day("9:05")
        TimeOfDay(hour=9, minute=5)

        >>> parse_time_of_day("24:00")
        Traceback (most recent call last):
        ...
        nanji.core.exceptions.InvalidTimeFormatError: invalid time format: '24:00'. ...
    """
    match = TIME_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidTimeFormatError(text)

    return TimeOfDay(hour=int(match.group("hour")), minute=int(match.group("minute")))


def current_utc_datetime() -> datetime:
    """
    Get current UTC datetime.

    Returns:
        datetime: Current time as timezone-aware datetime in UTC
    """
    return datetime.now(timezone.utc)


def format_local(instant: datetime, zone: tzinfo) -> str:
    """
    Render an instant as wall-clock time in ``zone``.

    Args:
        instant: Timezone-aware datetime
        zone: tzinfo to project into

    Returns:
        str: "YYYY-MM-DD HH:MM"

    Example:
        >>> format_local(datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc), ZoneInfo("Asia/Tokyo"))
        '2024-01-01 09:00'
    """
    return instant.astimezone(zone).strftime(DISPLAY_FORMAT)
