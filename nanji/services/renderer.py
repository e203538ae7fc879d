"""
Zone Listing Renderer

Prints one instant as wall-clock time across many zones:

    ────────────────────────────
    America/Chicago: 2024-01-15 18:10
    Asia/Tokyo     : 2024-01-16 09:10
    ────────────────────────────

The label column is as wide as the longest label printed in that call.
In LabelMode.ALIAS the label is the zone's alias (user aliases first, then
built-ins) and falls back to the canonical name.

Which zones to print is decided by select_zones(): an ordered list of lazily
evaluated sources (command line, then config file); the first one yielding a
non-empty list wins, and None means "every zone in the registry".
"""

import sys
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Sequence, TextIO

from nanji.core.aliases import AliasResolver
from nanji.core.logging import get_logger
from nanji.core.registry import ZoneRegistry
from nanji.core.schemas import LabelMode, RenderEntry
from nanji.core.utils.time import format_local

logger = get_logger(__name__)

SEPARATOR = "────────────────────────────"

ZoneSource = Callable[[], Optional[Sequence[str]]]


# ============================================
# Zone Selection
# ============================================

def split_zone_list(value: Optional[str]) -> List[str]:
    """
    Split a comma-separated zone list, trimming blanks.

    Example:
        >>> split_zone_list(" tokyo, ,Asia/Seoul ")
        ['tokyo', 'Asia/Seoul']
    """
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def select_zones(sources: Iterable[ZoneSource]) -> Optional[List[str]]:
    """
    Pick the zone list from the first source that yields one.

    Sources are called in order and only until one returns a non-empty list.

    Args:
        sources: Callables returning a list of zone names or None

    Returns:
        The winning list, or None if every source was empty
    """
    for source in sources:
        zones = source()
        if zones:
            return list(zones)
    return None


# ============================================
# Labels
# ============================================

def label_for_zone(canonical: str, mode: LabelMode, resolver: AliasResolver) -> str:
    """Label for a resolved zone under ``mode``."""
    if mode == LabelMode.ALIAS:
        return resolver.label_for(canonical) or canonical
    return canonical


def build_entry(raw: str, mode: LabelMode, resolver: AliasResolver) -> RenderEntry:
    """
    Resolve one user-supplied name into a RenderEntry.

    Unresolvable names keep the user's spelling as their label.
    """
    zone = resolver.resolve(raw)
    if zone is None:
        return RenderEntry(label=raw, zone=None, raw=raw)

    canonical = zone.key
    return RenderEntry(label=label_for_zone(canonical, mode, resolver), zone=canonical, raw=raw)


# ============================================
# Output
# ============================================

def _write_lines(instant: datetime, entries: Sequence[RenderEntry], registry: ZoneRegistry,
                 out: TextIO) -> List[RenderEntry]:
    rows = []
    for entry in entries:
        zone = registry.get_zone(entry.zone)
        if zone is None:
            logger.warning(f"timezone data for '{entry.zone}' could not be loaded (skipped)")
            continue
        rows.append((entry, format_local(instant, zone)))

    width = max((len(entry.label) for entry, _ in rows), default=0)

    print(SEPARATOR, file=out)
    for entry, local in rows:
        print(f"{entry.label:<{width}}: {local}", file=out)
    print(SEPARATOR, file=out)

    return [entry for entry, _ in rows]


def render_all(
    instant: datetime,
    mode: LabelMode,
    resolver: AliasResolver,
    registry: Optional[ZoneRegistry] = None,
    out: Optional[TextIO] = None,
) -> List[RenderEntry]:
    """
    Print ``instant`` in every zone of the registry.

    Args:
        instant: Timezone-aware instant
        mode: Canonical or alias labels
        resolver: Alias resolver used for alias labels
        registry: Zone registry to enumerate (defaults to the resolver's)
        out: Output stream (defaults to stdout)

    Returns:
        The entries that were printed
    """
    registry = registry or resolver.registry
    if out is None:
        out = sys.stdout

    entries = [
        RenderEntry(label=label_for_zone(name, mode, resolver), zone=name, raw=name)
        for name in registry.list_zones()
    ]
    return _write_lines(instant, entries, registry, out)


def render_selected(
    instant: datetime,
    raw_names: Sequence[str],
    mode: LabelMode,
    resolver: AliasResolver,
    out: Optional[TextIO] = None,
) -> List[RenderEntry]:
    """
    Print ``instant`` in each of the user-supplied zones, in order.

    Names that resolve neither as aliases nor as IANA zones are skipped with
    a warning; the rest are still printed.

    Args:
        instant: Timezone-aware instant
        raw_names: Zone names as supplied (aliases or canonical names)
        mode: Canonical or alias labels
        resolver: Alias resolver
        out: Output stream (defaults to stdout)

    Returns:
        The entries that were printed
    """
    if out is None:
        out = sys.stdout

    entries = []
    for raw in raw_names:
        entry = build_entry(raw, mode, resolver)
        if not entry.resolved:
            logger.warning(f"unknown timezone: '{entry.raw}' (skipped)")
            continue
        entries.append(entry)

    return _write_lines(instant, entries, resolver.registry, out)
