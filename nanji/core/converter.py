"""
Instant Converter

Turns "HH:MM today in zone Z" into an absolute UTC instant.

"Today" is the current calendar date *in Z*, not in the machine's local zone:
at 23:30 UTC on Jan 1, "9:00 in Asia/Tokyo" means 9:00 on Jan 2 JST.

Pinning a civil time to a zone has three outcomes:

    single      exactly one UTC offset applies -> use it
    ambiguous   the time occurs twice (fall-back fold) -> take the earlier
                instant
    nonexistent the time is skipped (spring-forward gap) -> refuse; the
                caller gets NonexistentLocalTimeError and no nearby time is
                substituted

resolve_local_time() returns that outcome as a LocalTimeResolution so the
policy lives in one place (convert_to_utc) and can be tested on its own.
"""

from datetime import date, datetime, timezone, tzinfo
from typing import Optional

from dateutil import tz as dateutil_tz

from nanji.core.exceptions import NonexistentLocalTimeError
from nanji.core.logging import get_logger
from nanji.core.schemas import LocalTimeResolution, TimeOfDay
from nanji.core.utils.time import current_utc_datetime

logger = get_logger(__name__)


def zone_name(zone: tzinfo) -> str:
    """Best-effort display name for a tzinfo."""
    return getattr(zone, "key", None) or str(zone)


def today_in_zone(zone: tzinfo, now: Optional[datetime] = None) -> date:
    """
    Current calendar date in ``zone``.

    Args:
        zone: tzinfo to project into
        now: Reference instant (defaults to the current UTC time)

    Returns:
        date: The date a wall clock in ``zone`` shows at ``now``
    """
    if now is None:
        now = current_utc_datetime()
    return now.astimezone(zone).date()


def resolve_local_time(civil: datetime, zone: tzinfo) -> LocalTimeResolution:
    """
    Classify a naive civil datetime against the offset rules of ``zone``.

    Args:
        civil: Naive datetime (tzinfo is ignored if present)
        zone: tzinfo with PEP 495 fold support (e.g. ZoneInfo)

    Returns:
        LocalTimeResolution: single, ambiguous (both candidates), or
        nonexistent (no candidates)
    """
    civil = civil.replace(tzinfo=None, fold=0)
    wall = civil.replace(tzinfo=zone)
    name = zone_name(zone)

    if not dateutil_tz.datetime_exists(wall):
        return LocalTimeResolution(kind="nonexistent", civil=civil, zone_name=name)

    # fold=0 is the first occurrence, fold=1 the repeat (PEP 495)
    first = wall.replace(fold=0).astimezone(timezone.utc)
    second = wall.replace(fold=1).astimezone(timezone.utc)

    if dateutil_tz.datetime_ambiguous(wall) and first != second:
        earliest, latest = min(first, second), max(first, second)
        return LocalTimeResolution(
            kind="ambiguous", civil=civil, zone_name=name, earliest=earliest, latest=latest
        )

    return LocalTimeResolution(
        kind="single", civil=civil, zone_name=name, earliest=first, latest=first
    )


def convert_to_utc(time: TimeOfDay, zone: tzinfo, now: Optional[datetime] = None) -> datetime:
    """
    Convert a wall-clock time today in ``zone`` to a UTC instant.

    Args:
        time: Validated hour and minute
        zone: Target zone (e.g. ZoneInfo("Asia/Tokyo"))
        now: Reference instant used to find "today" (defaults to now)

    Returns:
        datetime: Timezone-aware instant in UTC

    Raises:
        NonexistentLocalTimeError: If the time falls in a DST gap

    Examples:
        >>> ref = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        >>> convert_to_utc(TimeOfDay(hour=9, minute=10), ZoneInfo("Asia/Tokyo"), now=ref)
        datetime.datetime(2024, 1, 15, 0, 10, tzinfo=datetime.timezone.utc)

        >>> # 1:30 occurs twice on 2024-11-03 in Chicago; CDT (the earlier) wins
        >>> ref = datetime(2024, 11, 3, 12, 0, tzinfo=timezone.utc)
        >>> convert_to_utc(TimeOfDay(hour=1, minute=30), ZoneInfo("America/Chicago"), now=ref)
        datetime.datetime(2024, 11, 3, 6, 30, tzinfo=datetime.timezone.utc)
    """
    day = today_in_zone(zone, now)
    civil = datetime(day.year, day.month, day.day, time.hour, time.minute)
    resolution = resolve_local_time(civil, zone)

    if resolution.kind == "nonexistent":
        logger.debug(f"{civil} falls in a DST gap in {resolution.zone_name}")
        raise NonexistentLocalTimeError(civil, resolution.zone_name)

    if resolution.kind == "ambiguous":
        logger.debug(
            f"{civil} is ambiguous in {resolution.zone_name}; "
            f"using {resolution.earliest.isoformat()} over {resolution.latest.isoformat()}"
        )

    return resolution.earliest
