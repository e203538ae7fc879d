"""
Error types raised by the core.

All of them derive from NanjiInputError, a ValueError subclass: each one
describes input that cannot be turned into a zoned instant. The command layer
catches NanjiInputError and turns the message into a diagnostic plus a
non-zero exit status; any other exception propagates.
"""

from datetime import datetime


class NanjiInputError(ValueError):
    """Base class for user input that cannot be converted."""


class InvalidTimeFormatError(NanjiInputError):
    """The base time is not H:MM or HH:MM (00-23:00-59)."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"invalid time format: '{text}'. expected H:MM or HH:MM (00-23:00-59)"
        )


class UnknownTimezoneError(NanjiInputError):
    """A name resolved neither as an alias nor as a canonical IANA zone."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown base timezone: '{name}'. Try IANA name like 'Asia/Tokyo'")


class NonexistentLocalTimeError(NanjiInputError):
    """The requested wall-clock time is skipped by a daylight-saving transition."""

    def __init__(self, civil: datetime, zone_name: str):
        self.civil = civil
        self.zone_name = zone_name
        super().__init__(
            f"{civil:%Y-%m-%d %H:%M} does not exist in {zone_name} "
            f"due to a daylight-saving (DST) transition"
        )
