"""
Data Schemas

Pydantic models for the values passed between the parser, the converter and
the renderer.

Models:
    - TimeOfDay: A validated hour/minute pair
    - LocalTimeResolution: Outcome of pinning a civil time to a zone
    - RenderEntry: A label plus the zone it resolved to (if any)
    - LabelMode: Canonical IANA labels or alias labels

The "instant" handed from the converter to the renderer is a plain
timezone-aware datetime in UTC; datetimes are already immutable.
"""

from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ============================================
# Time of Day
# ============================================

class TimeOfDay(BaseModel):
    """
    A wall-clock time with minute precision.

    Always built through nanji.core.utils.time.parse_time_of_day (or direct
    validation); out-of-range values are rejected by the field constraints.

    Attributes:
        hour: Hour of day, 0-23
        minute: Minute of hour, 0-59

    Example:
        >>> TimeOfDay(hour=9, minute=10)
        TimeOfDay(hour=9, minute=10)
    """

    model_config = ConfigDict(frozen=True)

    hour: int = Field(..., ge=0, le=23, description="Hour of day (24h)")
    minute: int = Field(..., ge=0, le=59, description="Minute of hour")

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


# ============================================
# DST Resolution Result
# ============================================

ResolutionKind = Literal["single", "ambiguous", "nonexistent"]


class LocalTimeResolution(BaseModel):
    """
    Result of resolving a civil (zone-naive) datetime against a zone's rules.

    Attributes:
        kind: "single" when exactly one offset applies, "ambiguous" when the
            time falls in a fall-back fold, "nonexistent" when it falls in a
            spring-forward gap
        civil: The naive datetime that was resolved
        zone_name: IANA name of the zone
        earliest: First matching UTC instant (None for a gap)
        latest: Last matching UTC instant (same as earliest unless ambiguous)
    """

    model_config = ConfigDict(frozen=True)

    kind: ResolutionKind
    civil: datetime
    zone_name: str
    earliest: Optional[datetime] = None
    latest: Optional[datetime] = None

    @model_validator(mode="after")
    def check_candidates(self) -> "LocalTimeResolution":
        """A gap has no candidates; the other kinds have both ends set."""
        if self.kind == "nonexistent":
            if self.earliest is not None or self.latest is not None:
                raise ValueError("a nonexistent local time has no UTC candidates")
        elif self.earliest is None or self.latest is None:
            raise ValueError(f"a {self.kind} resolution needs both UTC candidates")
        return self

    @property
    def exists(self) -> bool:
        return self.kind != "nonexistent"


# ============================================
# Rendering
# ============================================

class LabelMode(str, Enum):
    """How zones are labeled in the rendered listing."""

    CANONICAL = "canonical"
    ALIAS = "alias"


class RenderEntry(BaseModel):
    """
    One line of a zone listing.

    The label is picked independently of whether the zone resolved, so an
    unresolvable entry can still be reported under the name the user typed.

    Attributes:
        label: Text shown in the left column
        zone: Canonical IANA name, or None if the entry did not resolve
        raw: The name as the user supplied it
    """

    model_config = ConfigDict(frozen=True)

    label: str
    zone: Optional[str] = None
    raw: str

    @property
    def resolved(self) -> bool:
        return self.zone is not None
