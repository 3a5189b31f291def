"""Value codecs for iCalendar property values.

This package contains the date-time value and list codecs and the generic
comma-separated list codec they build on.

Reference: RFC 5545, Section 3.3
"""

from .common import ParameterName, Params, PropertyName
from .date_time import (
    DateTimeList,
    DateTimeValue,
    ExceptionDateTimeList,
    FullDayDateTimeValue,
    RecurrenceDateTimeList,
)
from .text_list import decode_text_list, encode_text_list

__all__ = [
    # Common types
    "ParameterName",
    "Params",
    "PropertyName",
    # Date-time values
    "DateTimeValue",
    "FullDayDateTimeValue",
    # Date-time lists
    "DateTimeList",
    "ExceptionDateTimeList",
    "RecurrenceDateTimeList",
    # List codec
    "encode_text_list",
    "decode_text_list",
]
