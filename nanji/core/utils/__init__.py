"""
Core Utilities Package

Modules:
    - time: Time-of-day parsing and display helpers
"""

from nanji.core.utils.time import parse_time_of_day, current_utc_datetime, format_local

__all__ = ["parse_time_of_day", "current_utc_datetime", "format_local"]
