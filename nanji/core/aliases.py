"""
Alias Resolver

Maps short, user-friendly zone names ("tokyo", "ny") to canonical IANA names
and back.

The table is the built-in aliases overlaid with the user's [aliases] from
config.toml. Keys are lowercased before insertion, so lookups are
case-insensitive; values are stored exactly as written. A user entry replaces
a built-in entry with the same (lowercased) key.

Inverse lookups are deterministic. A zone's label is its smallest user alias,
or, when the user gave it none, its smallest remaining built-in alias.

Example:
    >>> resolver = AliasResolver(ZoneConfig(aliases={"Home": "America/Chicago"}))
    >>> resolver.normalize("TOKYO")
    'Asia/Tokyo'
    >>> resolver.label_for("America/Los_Angeles")
    'california'
    >>> resolver.label_for("America/Chicago")
    'home'
"""

from typing import Dict, Mapping, Optional
from zoneinfo import ZoneInfo

from nanji.core.config import ZoneConfig
from nanji.core.logging import get_logger
from nanji.core.registry import ZoneRegistry

logger = get_logger(__name__)


DEFAULT_ALIASES: Mapping[str, str] = {
    "tokyo": "Asia/Tokyo",
    "dallas": "America/Chicago",
    "california": "America/Los_Angeles",
    "losangeles": "America/Los_Angeles",
    "los_angeles": "America/Los_Angeles",
    "la": "America/Los_Angeles",
    "newyork": "America/New_York",
    "new_york": "America/New_York",
    "ny": "America/New_York",
}


def build_alias_table(overrides: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Merge the built-in aliases with user overrides.

    Args:
        overrides: User alias -> canonical mapping (config wins on collision)

    Returns:
        Dict keyed by lowercase alias
    """
    table = {key.lower(): value for key, value in DEFAULT_ALIASES.items()}
    for key, value in (overrides or {}).items():
        table[key.lower()] = value
    return table


class AliasResolver:
    """
    Case-insensitive alias lookup over a merged alias table.

    Attributes:
        table: lowercase alias -> canonical name
        registry: ZoneRegistry used for canonical fallback in resolve()
    """

    def __init__(self, config: Optional[ZoneConfig] = None, registry: Optional[ZoneRegistry] = None):
        config = config or ZoneConfig()
        self.registry = registry or ZoneRegistry()
        self.table: Dict[str, str] = build_alias_table(config.aliases)

        # User aliases label a zone first; built-ins only fill the gaps.
        # Sorted walks make the first key seen per zone the smallest.
        user_keys = {key.lower() for key in config.aliases}
        self._labels: Dict[str, str] = {}
        for key in sorted(user_keys):
            self._labels.setdefault(self.table[key], key)
        for key in sorted(DEFAULT_ALIASES):
            if key not in user_keys:
                self._labels.setdefault(self.table[key], key)

        logger.debug(f"Alias table built with {len(self.table)} entries")

    def normalize(self, raw: str) -> Optional[str]:
        """
        Look up an alias.

        Args:
            raw: Name as typed by the user (any case)

        Returns:
            The canonical IANA name, or None if ``raw`` is not an alias
        """
        return self.table.get(raw.lower())

    def label_for(self, canonical: str) -> Optional[str]:
        """
        Inverse lookup: the alias to display for a canonical zone.

        Args:
            canonical: Canonical IANA name (exact case)

        Returns:
            The preferred alias key for ``canonical``, or None
        """
        return self._labels.get(canonical)

    def canonical_name(self, raw: str) -> str:
        """Alias target for ``raw``, or ``raw`` itself if it is not an alias."""
        canonical = self.normalize(raw)
        return canonical if canonical is not None else raw

    def resolve(self, raw: str) -> Optional[ZoneInfo]:
        """
        Resolve a user-supplied name to a zone.

        Tries the alias table first, then treats the name as a canonical IANA
        identifier.

        Args:
            raw: Alias or canonical name

        Returns:
            ZoneInfo, or None if the name resolves to nothing known
        """
        return self.registry.get_zone(self.canonical_name(raw))
