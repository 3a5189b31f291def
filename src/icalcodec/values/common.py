"""Common types and constants shared across value codecs.

This module contains the text layouts, property and parameter names, and
timezone helpers used throughout the values layer.

Reference: RFC 5545, Sections 3.2.19, 3.3.4, 3.3.5
"""

from __future__ import annotations

import re
from datetime import UTC, tzinfo
from enum import StrEnum

# =============================================================================
# Text layouts
# =============================================================================

# Encoding templates, formatted with a datetime as the only argument.
# Years are always four digits.
DATE_FORMAT = "{0.year:04d}{0.month:02d}{0.day:02d}"
DATE_TIME_FORMAT = DATE_FORMAT + "T{0.hour:02d}{0.minute:02d}{0.second:02d}"
UTC_DATE_TIME_FORMAT = DATE_TIME_FORMAT + "Z"

# Parsing patterns, ASCII digits only
DATE_PATTERN = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")
DATE_TIME_PATTERN = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})T([0-9]{2})([0-9]{2})([0-9]{2})")
UTC_DATE_TIME_PATTERN = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})T([0-9]{2})([0-9]{2})([0-9]{2})Z")

DATE_LENGTH = 8
UTC_SUFFIX = "Z"

UTC_ZONE_NAME = "UTC"
LOCAL_ZONE_NAME = "Local"


class PropertyName(StrEnum):
    """Property names reported to the document serializer.

    Reference: RFC 5545, Sections 3.8.5.1 and 3.8.5.2
    """

    EXCEPTION_DATE_TIMES = "EXDATE"
    RECURRENCE_DATE_TIMES = "RDATE"


class ParameterName(StrEnum):
    """Property parameter names understood by the value codecs.

    Reference: RFC 5545, Section 3.2.19
    """

    TIME_ZONE_ID = "TZID"


# Parameter block attached to a single property occurrence
Params = dict[str, str]


# =============================================================================
# Timezone helpers
# =============================================================================


def is_utc(zone: tzinfo | None) -> bool:
    """True if zone is UTC, either as datetime.UTC or a zone named "UTC"."""
    if zone is None:
        return False
    return zone is UTC or zone_name(zone) == UTC_ZONE_NAME


def is_local(zone: tzinfo | None) -> bool:
    """True if zone stands for the ambient local system zone (naive datetime)."""
    return zone is None


def zone_name(zone: tzinfo | None) -> str:
    """Get the canonical name of a zone.

    Returns:
        "UTC" for datetime.UTC, the IANA key for zoneinfo zones,
        LOCAL_ZONE_NAME for the ambient local zone, otherwise an empty
        string (fixed offsets and other zones without an IANA key)
    """
    if zone is None:
        return LOCAL_ZONE_NAME

    if zone is UTC:
        return UTC_ZONE_NAME

    # ZoneInfo.from_file() creates zones with key None
    if hasattr(zone, "key"):
        return zone.key or ""

    return ""
