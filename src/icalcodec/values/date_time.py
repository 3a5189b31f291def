"""iCalendar DATE / DATE-TIME value codecs.

This module contains the codecs for single date-time values and for the
comma-separated date-time lists carried by EXDATE and RDATE:

Classes:
    - DateTimeValue: One instant plus its timezone identity
    - FullDayDateTimeValue: Same storage, encoded at date granularity
    - DateTimeList: Ordered list of DateTimeValue sharing one parameter block
    - ExceptionDateTimeList: DateTimeList reported as EXDATE
    - RecurrenceDateTimeList: DateTimeList reported as RDATE

Decoding is a two-pass protocol. The value token alone cannot name a
timezone, so decode_value() parses the text (anchoring non-UTC text to UTC)
and decode_params() then re-reads the same wall-clock time in the zone named
by the TZID parameter:

    >>> value = DateTimeValue()
    >>> value.decode_value("20240315T143000")
    >>> value.decode_params({"TZID": "Europe/Copenhagen"})
    >>> value.native_time.isoformat()
    '2024-03-15T14:30:00+01:00'

Reference: RFC 5545, Sections 3.3.4, 3.3.5, 3.8.5.1, 3.8.5.2
"""

from __future__ import annotations

import logging
import re
import zoneinfo
from datetime import UTC, datetime, tzinfo

from ..exceptions import ICalEncodeError, ICalError, ICalParseError, ICalValidationError
from .common import (
    DATE_FORMAT,
    DATE_LENGTH,
    DATE_PATTERN,
    DATE_TIME_FORMAT,
    DATE_TIME_PATTERN,
    UTC_DATE_TIME_FORMAT,
    UTC_DATE_TIME_PATTERN,
    UTC_SUFFIX,
    UTC_ZONE_NAME,
    ParameterName,
    Params,
    PropertyName,
    is_local,
    is_utc,
    zone_name,
)
from .text_list import decode_text_list, encode_text_list

_LOGGER = logging.getLogger(__name__)

# Decode target before any value has been decoded
ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)


# =============================================================================
# Parsing helpers
# =============================================================================


def _parse_layout(pattern: re.Pattern[str], text: str, zone: tzinfo) -> datetime:
    """Parse text against one layout pattern.

    Args:
        pattern: Compiled layout pattern (date, date-time or UTC date-time)
        text: Text to parse
        zone: Zone the parsed wall-clock time is anchored to

    Returns:
        Aware datetime in zone

    Raises:
        ValueError: If text does not match the pattern or a field is out of range
    """
    if not (match := pattern.fullmatch(text)):
        raise ValueError(f"{text!r} does not match layout {pattern.pattern!r}")

    # Date-only matches leave hour/minute/second at midnight
    fields = [int(group) for group in match.groups()]
    return datetime(*fields, tzinfo=zone)  # type: ignore[misc]


def resolve_zone(name: str) -> tzinfo:
    """Resolve a canonical zone name to a tzinfo.

    "UTC" resolves to datetime.UTC so that resolved UTC values encode with
    the trailing Z. Other names are looked up in the IANA database.

    Raises:
        zoneinfo.ZoneInfoNotFoundError: If no zone with that name exists
        ValueError: If name is not a valid zone key
        OSError: If name is a zone directory such as "America"
    """
    if name == UTC_ZONE_NAME:
        return UTC

    return zoneinfo.ZoneInfo(name)


# =============================================================================
# Single values
# =============================================================================


class DateTimeValue:
    """A date-time value: one instant plus its timezone identity.

    The zone identity is the tzinfo of the stored datetime:
    - datetime.UTC: encodes with a trailing Z and no parameters
    - zoneinfo.ZoneInfo: encodes as local time plus a TZID parameter
    - None (naive datetime): the ambient local zone, rejected by validate_value()

    The instant is truncated to whole seconds on construction.

    Attributes:
        native_time: The stored datetime
    """

    _time: datetime

    def __init__(self, moment: datetime | None = None) -> None:
        """Initialize DateTimeValue.

        Args:
            moment: Instant to hold. Defaults to the zero instant
                    0001-01-01T00:00:00Z, used as a decode target.
        """
        if moment is None:
            moment = ZERO_TIME

        self._time = moment.replace(microsecond=0)

    @property
    def native_time(self) -> datetime:
        """The stored datetime."""
        return self._time

    @property
    def zone(self) -> tzinfo | None:
        """Zone of the stored datetime, None for the ambient local zone."""
        return self._time.tzinfo

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimeValue):
            return NotImplemented

        if is_local(self.zone) and is_local(other.zone):
            return self._time == other._time

        try:
            return self._time.astimezone(UTC) == other._time.astimezone(UTC)
        except (OverflowError, ValueError):
            # Out of range after conversion, aware comparison does not convert
            return self._time == other._time

    __hash__ = None  # type: ignore[assignment]

    def encode_value(self) -> str:
        """Encode as YYYYMMDDTHHMMSSZ for UTC, otherwise YYYYMMDDTHHMMSS.

        Non-UTC values are encoded as wall-clock time in their own zone; the
        zone itself travels in the TZID parameter (see encode_params()).
        """
        if is_utc(self.zone):
            return UTC_DATE_TIME_FORMAT.format(self._time)

        return DATE_TIME_FORMAT.format(self._time)

    def decode_value(self, text: str) -> None:
        """Decode a DATE, DATE-TIME or UTC DATE-TIME text token.

        Layout selection:
            - Trailing "Z": UTC date-time (YYYYMMDDTHHMMSSZ)
            - Length 8: date only (YYYYMMDD), time set to midnight
            - Otherwise: local date-time (YYYYMMDDTHHMMSS)

        Date-only and local date-time text is anchored to UTC until a TZID
        parameter says otherwise (see decode_params()). The value is left
        unchanged if parsing fails.

        Args:
            text: Text token of the property value

        Raises:
            ICalParseError: If text does not match the selected layout
        """
        if text.endswith(UTC_SUFFIX):
            pattern = UTC_DATE_TIME_PATTERN
        elif len(text) == DATE_LENGTH:
            pattern = DATE_PATTERN
        else:
            pattern = DATE_TIME_PATTERN

        try:
            parsed = _parse_layout(pattern, text, UTC)
        except ValueError as err:
            raise ICalParseError("decode_value", f"unable to parse datetime value {text!r}", self, err) from err

        self._time = parsed
        _LOGGER.debug("Decoded datetime value %r as %s", text, parsed.isoformat())

    def encode_params(self) -> Params:
        """Encode the parameter block.

        Returns:
            {} for UTC values, otherwise {"TZID": <canonical zone name>}
        """
        if is_utc(self.zone):
            return {}

        return {ParameterName.TIME_ZONE_ID: zone_name(self.zone)}

    def decode_params(self, params: Params) -> None:
        """Apply a parameter block to an already decoded value.

        Without a TZID parameter this does nothing. With one, the named zone
        is resolved and the value's local text form (YYYYMMDDTHHMMSS) is
        parsed again in that zone, replacing the stored instant.

        Args:
            params: Parameter block of the property occurrence

        Raises:
            ICalParseError: If the zone cannot be resolved or the local text
                            form cannot be parsed in it
        """
        if (name := params.get(ParameterName.TIME_ZONE_ID)) is None:
            return

        try:
            zone = resolve_zone(name)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as err:
            raise ICalParseError("decode_params", f"unable to parse timezone {name!r}", self, err) from err

        local_text = DATE_TIME_FORMAT.format(self._time)

        try:
            parsed = _parse_layout(DATE_TIME_PATTERN, local_text, zone)
        except ValueError as err:
            raise ICalParseError(
                "decode_params", f"unable to parse datetime value {local_text!r} in {name}", self, err
            ) from err

        self._time = parsed
        _LOGGER.debug("Resolved timezone %s for datetime value %s", name, local_text)

    def validate_value(self) -> None:
        """Validate the value against calendar rules.

        Raises:
            ICalValidationError: If the zone is the ambient local zone or has
                                 no canonical name
        """
        if is_local(self.zone):
            msg = "datetime zone may not be Local, please use UTC or an explicit zone"
            raise ICalValidationError("validate_value", msg, self)

        if not zone_name(self.zone):
            raise ICalValidationError("validate_value", "datetime zone must have a valid name", self)

    def __str__(self) -> str:
        try:
            return self.encode_value()
        except ICalError as err:
            # A structurally valid instant always formats
            raise AssertionError(f"unable to encode {self!r}") from err

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._time.isoformat()}, zone={zone_name(self.zone)!r})"


class FullDayDateTimeValue(DateTimeValue):
    """A date-time value encoded at date granularity.

    Shares decoding, validation and parameter handling with DateTimeValue.
    Encodes as YYYYMMDD, with a trailing Z for UTC values even though no
    time component is present.
    """

    def encode_value(self) -> str:
        value = DATE_FORMAT.format(self._time)
        if is_utc(self.zone):
            value += UTC_SUFFIX
        return value


# =============================================================================
# Lists
# =============================================================================


class DateTimeList(list[DateTimeValue]):
    """Ordered list of date-time values encoded as one comma-separated value.

    A property occurrence has a single parameter block, so a list only
    carries the parameters of its first element. Lists whose members span
    several zones lose that information when encoded.

    Decoding appends as it goes: if a token fails, the values decoded before
    it stay in the list.

    Example:
        >>> dates = DateTimeList(
        ...     DateTimeValue(datetime(2024, 1, 1, tzinfo=UTC)),
        ...     DateTimeValue(datetime(2024, 1, 2, tzinfo=UTC)),
        ... )
        >>> dates.encode_value()
        '20240101T000000Z,20240102T000000Z'
    """

    def __init__(self, *values: DateTimeValue) -> None:
        super().__init__(values)

    def encode_value(self) -> str:
        """Encode all values and join them with the list codec.

        Raises:
            ICalEncodeError: If a value cannot be encoded (names the index)
        """
        encoded: list[str] = []

        for index, value in enumerate(self):
            try:
                encoded.append(value.encode_value())
            except ICalError as err:
                raise ICalEncodeError(
                    "encode_value", f"unable to encode datetime at index {index}", self, err
                ) from err

        return encode_text_list(encoded)

    def decode_value(self, text: str) -> None:
        """Split text with the list codec and append each decoded value.

        Raises:
            ICalParseError: If text is not a validly escaped list, or a token
                            fails to decode (names index and token)
        """
        try:
            tokens = decode_text_list(text)
        except ICalParseError as err:
            raise ICalParseError("decode_value", "unable to decode datetime list as CSV", self, err) from err

        for index, token in enumerate(tokens):
            value = DateTimeValue()

            try:
                value.decode_value(token)
            except ICalParseError as err:
                raise ICalParseError(
                    "decode_value", f"unable to decode datetime {token!r} at index {index}", self, err
                ) from err

            self.append(value)

    def encode_params(self) -> Params:
        """Parameters of the first value, {} for an empty list."""
        if not self:
            return {}

        return self[0].encode_params()

    def decode_params(self, params: Params) -> None:
        """Apply the same parameter block to every value in order.

        Stops at the first failure. Values before it keep their new zone,
        values after it are left unchanged.

        Raises:
            ICalParseError: If a value rejects the parameters (names the index)
        """
        for index, value in enumerate(self):
            try:
                value.decode_params(params)
            except ICalParseError as err:
                raise ICalParseError(
                    "decode_params", f"unable to decode datetime params for index {index}", self, err
                ) from err

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(value) for value in self)})"


class ExceptionDateTimeList(DateTimeList):
    """Exception dates (EXDATE) excluded from a recurrence set.

    Reference: RFC 5545, Section 3.8.5.1
    """

    def encode_name(self) -> PropertyName:
        return PropertyName.EXCEPTION_DATE_TIMES


class RecurrenceDateTimeList(DateTimeList):
    """Recurrence dates (RDATE) added to a recurrence set.

    Reference: RFC 5545, Section 3.8.5.2
    """

    def encode_name(self) -> PropertyName:
        return PropertyName.RECURRENCE_DATE_TIMES
