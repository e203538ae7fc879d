"""
Command flows behind the CLI.

    show  - no --base/--time: print the current instant
    base  - --base and --time: convert "TIME today in BASE" to UTC, print it

Both pick their zones the same way: --zones, then the config file's zone
list, then every zone in the registry.

Each flow returns a process exit status. Domain errors (malformed time,
unknown base zone, DST gap) are caught here, logged, and turned into exit
status 1; nothing is rendered in that case. Other errors propagate.
"""

from datetime import datetime
from typing import Optional, TextIO

from nanji.core.aliases import AliasResolver
from nanji.core.config import ZoneConfig
from nanji.core.converter import convert_to_utc
from nanji.core.exceptions import NanjiInputError, UnknownTimezoneError
from nanji.core.logging import get_logger
from nanji.core.schemas import LabelMode
from nanji.core.utils.time import current_utc_datetime, parse_time_of_day
from nanji.services.renderer import render_all, render_selected, select_zones, split_zone_list

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class CommandContext:
    """
    Everything a command needs, built once per process.

    Attributes:
        config: Loaded config file contents
        resolver: Alias resolver built from ``config``
        out: Stream for the rendered listing (None means stdout)
    """

    def __init__(self, config: Optional[ZoneConfig] = None, resolver: Optional[AliasResolver] = None,
                 out: Optional[TextIO] = None):
        self.config = config or ZoneConfig()
        self.resolver = resolver or AliasResolver(self.config)
        self.out = out


def render_instant(instant: datetime, zones_arg: Optional[str], mode: LabelMode, ctx: CommandContext) -> None:
    """Render ``instant`` across the zones chosen by precedence."""
    zones = select_zones([
        lambda: split_zone_list(zones_arg),
        lambda: ctx.config.zones,
    ])

    if zones is None:
        logger.debug("No zone list given; rendering every known zone")
        render_all(instant, mode, ctx.resolver, out=ctx.out)
    else:
        render_selected(instant, zones, mode, ctx.resolver, out=ctx.out)


def run_show(zones_arg: Optional[str], mode: LabelMode, ctx: CommandContext,
             now: Optional[datetime] = None) -> int:
    """
    Print the current time across zones.

    Args:
        zones_arg: Raw --zones value (comma-separated) or None
        mode: Label mode
        ctx: Command context
        now: Instant to show (defaults to now)

    Returns:
        Exit status
    """
    instant = now or current_utc_datetime()
    render_instant(instant, zones_arg, mode, ctx)
    return EXIT_OK


def run_base(base: str, time_text: str, zones_arg: Optional[str], mode: LabelMode, ctx: CommandContext,
             now: Optional[datetime] = None) -> int:
    """
    Convert TIME in BASE to UTC and print it across zones.

    Args:
        base: Base zone (alias or IANA name)
        time_text: Base local time, H:MM or HH:MM
        zones_arg: Raw --zones value or None
        mode: Label mode
        ctx: Command context
        now: Reference instant used to find "today" in BASE

    Returns:
        Exit status (1 on malformed time, unknown zone, or DST gap)
    """
    try:
        time = parse_time_of_day(time_text)

        zone = ctx.resolver.resolve(base)
        if zone is None:
            raise UnknownTimezoneError(base)

        instant = convert_to_utc(time, zone, now=now)
    except NanjiInputError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    logger.debug(f"{time} in {zone.key} -> {instant.isoformat()}")
    render_instant(instant, zones_arg, mode, ctx)
    return EXIT_OK
