"""
Zone Registry

Thin wrapper over the IANA timezone database provided by ``zoneinfo``
(system tzdata, or the ``tzdata`` package where the OS has none).

Lookups are by canonical name and are case-sensitive: "Asia/Tokyo" resolves,
"asia/tokyo" does not, even on case-insensitive file systems. Unknown names
return None instead of raising.

Example:
    >>> registry = ZoneRegistry()
    >>> registry.get_zone("Asia/Tokyo")
    zoneinfo.ZoneInfo(key='Asia/Tokyo')
    >>> registry.get_zone("Mars/Olympus") is None
    True
"""

from functools import lru_cache
from typing import FrozenSet, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from nanji.core.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def _known_zone_names() -> FrozenSet[str]:
    # Walks the tz database on disk; cached for the life of the process
    return frozenset(available_timezones())


class ZoneRegistry:
    """
    Registry of IANA zones.

    Example:
        >>> registry = ZoneRegistry()
        >>> "America/Chicago" in registry.list_zones()
        True
    """

    def has_zone(self, name: str) -> bool:
        """Check whether ``name`` is a known canonical zone name."""
        return name in _known_zone_names()

    def get_zone(self, name: str) -> Optional[ZoneInfo]:
        """
        Get the zone for a canonical IANA name.

        Args:
            name: Canonical name, e.g. "America/Los_Angeles"

        Returns:
            ZoneInfo for the zone, or None if the name is unknown
        """
        if not self.has_zone(name):
            logger.debug(f"Zone '{name}' not found in tz database")
            return None

        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            logger.debug(f"Zone '{name}' listed but failed to load: {e}")
            return None

    def list_zones(self) -> List[str]:
        """Return every known zone name, sorted."""
        return sorted(_known_zone_names())
