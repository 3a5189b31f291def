"""Shared test fixtures for pyICalCodec tests."""

from __future__ import annotations

import zoneinfo
from datetime import UTC, datetime, timedelta, tzinfo

import pytest


class NamelessZone(tzinfo):
    """Fixed-offset zone that reports no name."""

    def utcoffset(self, dt: datetime | None) -> timedelta:
        return timedelta(hours=2)

    def dst(self, dt: datetime | None) -> timedelta:
        return timedelta(0)

    def tzname(self, dt: datetime | None) -> str | None:
        return None


@pytest.fixture
def copenhagen() -> zoneinfo.ZoneInfo:
    """Europe/Copenhagen zone (UTC+1 in winter, UTC+2 in summer)."""
    return zoneinfo.ZoneInfo("Europe/Copenhagen")


@pytest.fixture
def new_york() -> zoneinfo.ZoneInfo:
    """America/New_York zone (UTC-5 in winter, UTC-4 in summer)."""
    return zoneinfo.ZoneInfo("America/New_York")


@pytest.fixture
def nameless_zone() -> NamelessZone:
    """Zone without a canonical name."""
    return NamelessZone()


@pytest.fixture
def new_year_utc() -> datetime:
    """2024-01-01T00:00:00Z."""
    return datetime(2024, 1, 1, tzinfo=UTC)
