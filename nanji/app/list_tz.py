#!/usr/bin/env python3
"""
Print every timezone name nanji knows about, one per line, sorted.

Handy for finding the canonical name to put in --zones or config.toml:
  nanji-list-tz | grep -i tokyo
"""

import sys
from typing import Optional, TextIO

from nanji.core.registry import ZoneRegistry


def main(out: Optional[TextIO] = None) -> int:
    if out is None:
        out = sys.stdout
    for name in ZoneRegistry().list_zones():
        print(name, file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
