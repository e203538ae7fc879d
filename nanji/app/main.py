#!/usr/bin/env python3
"""
nanji: show the time in multiple timezones.

Usage examples:
  nanji                                   # now, in every zone (or config zones)
  nanji --zones tokyo,America/Chicago     # now, in two zones
  nanji -b tokyo -t 9:10                  # 9:10 today in Tokyo, everywhere
  nanji -b dallas -t 20:30 -z tokyo,ny -a # ... labeled with aliases

Environment:
  NANJI_LOG_LEVEL    diagnostic verbosity (default WARNING)
  NANJI_CONFIG_FILE  path to config.toml (default ~/.config/nanji/config.toml)
"""

import argparse
import sys
from typing import List, Optional

from nanji.app.commands import CommandContext, run_base, run_show
from nanji.core.config import find_config_path, get_settings, load_zone_config
from nanji.core.logging import setup_logging
from nanji.core.schemas import LabelMode


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="nanji",
        description="Show current times in Japan, US, and other major cities.",
    )
    p.add_argument("-b", "--base", help="Base timezone (alias or IANA name), e.g. tokyo or Asia/Tokyo")
    p.add_argument("-t", "--time", help="Base local time in H:MM or HH:MM (24h), e.g. 9:00 or 20:30")
    p.add_argument("-z", "--zones", help="Comma-separated list of zones (e.g. tokyo,dallas)")
    p.add_argument(
        "-a", "--alias", action="store_true",
        help='Use alias names for labels (e.g. "tokyo") instead of canonical IANA names',
    )
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = build_parser()
    args = p.parse_args(argv)

    # --base and --time only make sense together
    if args.base is not None and args.time is None:
        p.error("the following arguments are required: -t/--time (when -b/--base is given)")
    if args.time is not None and args.base is None:
        p.error("the following arguments are required: -b/--base (when -t/--time is given)")

    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    settings = get_settings()
    setup_logging(log_level=settings.log_level)

    config = load_zone_config(find_config_path(settings))
    ctx = CommandContext(config=config)
    mode = LabelMode.ALIAS if args.alias else LabelMode.CANONICAL

    if args.base is not None:
        return run_base(args.base, args.time, args.zones, mode, ctx)
    return run_show(args.zones, mode, ctx)


if __name__ == "__main__":
    sys.exit(main())
