"""pyICalCodec: iCalendar (RFC 5545) date-time value codecs.

This library converts between Python datetimes and the DATE / DATE-TIME
text encodings of iCalendar properties, including the TZID parameter that
accompanies non-UTC values and the EXDATE / RDATE date-time lists.
"""

from __future__ import annotations

from .exceptions import ICalEncodeError, ICalError, ICalParseError, ICalValidationError, ICalValueError
from .values import (
    DateTimeList,
    DateTimeValue,
    ExceptionDateTimeList,
    FullDayDateTimeValue,
    ParameterName,
    Params,
    PropertyName,
    RecurrenceDateTimeList,
    decode_text_list,
    encode_text_list,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Values
    "DateTimeValue",
    "FullDayDateTimeValue",
    "DateTimeList",
    "ExceptionDateTimeList",
    "RecurrenceDateTimeList",
    # List codec
    "encode_text_list",
    "decode_text_list",
    # Names
    "ParameterName",
    "Params",
    "PropertyName",
    # Exceptions
    "ICalError",
    "ICalValueError",
    "ICalParseError",
    "ICalValidationError",
    "ICalEncodeError",
]
