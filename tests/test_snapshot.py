"""Tests for the ReadableTime snapshot and get_readable_time()."""

from __future__ import annotations

import datetime as _datetime
import os
import re

import pytest

from readable_time import (
    ClockError,
    ClockReading,
    FixedClock,
    InvalidHourError,
    NameLookupError,
    OffsetError,
    ReadableTime,
    UtcOffset,
    ValidationError,
    get_readable_time,
)

posix_only = pytest.mark.skipif(os.name != "posix", reason="POSIX clock only")


class TestReadableTimeConstruction:
    """Tests for building snapshots from fields."""

    def test_fields(self) -> None:
        """Fields are stored and derived values computed."""
        t = ReadableTime(2024, 1, 15, 15, 45, 30)
        assert (t.year, t.month, t.day) == (2024, 1, 15)
        assert (t.hour_24, t.hour_12, t.minute, t.second) == (15, 3, 45, 30)
        assert t.weekday == 1
        assert t.weekday_name == "Mon"
        assert t.month_name == "Jan"
        assert t.time_period == "PM"
        assert t.utc_offset.is_utc
        assert t.epoch_seconds == 1_705_333_530

    def test_defaults_to_midnight(self) -> None:
        """Time fields default to midnight."""
        t = ReadableTime(2024, 1, 1)
        assert (t.hour_24, t.hour_12, t.time_period) == (0, 12, "AM")

    def test_offset_shifts_epoch(self) -> None:
        """Epoch seconds account for the offset."""
        t = ReadableTime(2025, 11, 30, 7, 14, 0, offset=UtcOffset.from_hours(5, 45))
        assert t.epoch_seconds == 1_764_466_140
        assert t.weekday == 0

    def test_time_zone_defaults_to_offset_text(self) -> None:
        """Without a zone name the offset text is used."""
        t = ReadableTime(2024, 1, 1, offset=UtcOffset.from_hours(-5))
        assert t.time_zone == "-0500"
        named = ReadableTime(2024, 1, 1, offset=UtcOffset.from_hours(-5), time_zone="EST")
        assert named.time_zone == "EST"

    def test_leap_day(self) -> None:
        """February 29 is accepted in leap years only."""
        assert ReadableTime(2000, 2, 29).day == 29
        assert ReadableTime(2024, 2, 29).day == 29
        with pytest.raises(ValidationError):
            ReadableTime(1900, 2, 29)
        with pytest.raises(ValidationError):
            ReadableTime(2023, 2, 29)

    @pytest.mark.parametrize(
        "args",
        [
            (2024, 0, 1),
            (2024, 13, 1),
            (2024, 4, 31),
            (2024, 1, 0),
            (0, 1, 1),
            (10_000, 1, 1),
            (2024, 1, 1, 24),
            (2024, 1, 1, 0, 60),
            (2024, 1, 1, 0, 0, 60),
            (2024, 1, 1, -1),
        ],
    )
    def test_rejects_out_of_range(self, args: tuple) -> None:
        """Out-of-range fields raise ValidationError."""
        with pytest.raises(ValidationError):
            ReadableTime(*args)

    def test_rejects_non_offset(self) -> None:
        """offset must be a UtcOffset."""
        with pytest.raises(ValidationError):
            ReadableTime(2024, 1, 1, offset=3_600)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        """Fields cannot be reassigned."""
        t = ReadableTime(2024, 1, 15)
        with pytest.raises(AttributeError):
            t.year = 2025  # type: ignore[misc]
        with pytest.raises(AttributeError):
            t.extra = 1  # type: ignore[attr-defined]


class TestFromEpoch:
    """Tests for ReadableTime.from_epoch."""

    def test_epoch_zero(self) -> None:
        """Epoch 0 is 1970-01-01 00:00:00 UTC."""
        t = ReadableTime.from_epoch(0)
        assert t.get_timef() == "1970-01-01 00:00:00"
        assert t.weekday_name == "Thu"

    def test_integer_offset(self) -> None:
        """An integer offset is accepted as seconds."""
        t = ReadableTime.from_epoch(0, -18_000)
        assert t.get_timef() == "1969-12-31 19:00:00"
        assert t.utc_offset == UtcOffset.from_hours(-5)

    def test_round_trips_through_fields(self) -> None:
        """Rebuilding from the fields gives an equal snapshot."""
        offset = UtcOffset.from_hours(9)
        t = ReadableTime.from_epoch(1_234_567_890, offset)
        rebuilt = ReadableTime(
            t.year, t.month, t.day, t.hour_24, t.minute, t.second, offset=offset
        )
        assert rebuilt == t
        assert rebuilt.epoch_seconds == 1_234_567_890

    @pytest.mark.parametrize("epoch", [0, 951_782_400, 1_705_333_500, 1_764_466_140])
    @pytest.mark.parametrize("offset", [0, 19_800, -36_000])
    def test_matches_stdlib(self, epoch: int, offset: int) -> None:
        """Fields agree with datetime.fromtimestamp at the same offset."""
        tz = _datetime.timezone(_datetime.timedelta(seconds=offset))
        dt = _datetime.datetime.fromtimestamp(epoch, tz)
        t = ReadableTime.from_epoch(epoch, offset)
        assert t.get_timef() == dt.strftime("%Y-%m-%d %H:%M:%S")
        assert t.weekday_name == dt.strftime("%a")
        assert t.month_name == dt.strftime("%b")
        assert str(t.utc_offset) == dt.strftime("%z")

    def test_out_of_range(self) -> None:
        """Instants outside years 1-9999 raise ValidationError."""
        with pytest.raises(ValidationError):
            ReadableTime.from_epoch(253_402_300_800)
        with pytest.raises(ValidationError):
            ReadableTime.from_epoch(-62_135_596_801)

    def test_bad_offset(self) -> None:
        """Offsets of a day or more raise OffsetError."""
        with pytest.raises(OffsetError):
            ReadableTime.from_epoch(0, 86_400)

    def test_rejects_float_epoch(self) -> None:
        """Epoch seconds must be an integer."""
        with pytest.raises(ValidationError):
            ReadableTime.from_epoch(1.5)  # type: ignore[arg-type]


class TestFormattingMethods:
    """Tests for the get_*timef methods and static helpers."""

    def test_get_timef(self) -> None:
        """get_timef returns the basic form."""
        t = ReadableTime(2025, 1, 1, 3, 4, 5)
        assert t.get_timef() == "2025-01-01 03:04:05"
        assert str(t) == "2025-01-01 03:04:05"

    def test_get_ptimef(self) -> None:
        """get_ptimef returns the pretty form."""
        assert ReadableTime(2024, 1, 15, 15, 45).get_ptimef() == "Mon Jan 15 2024 03:45 PM"

    def test_get_extended_ptimef(self, kathmandu_clock: FixedClock) -> None:
        """get_extended_ptimef includes seconds and offset."""
        t = get_readable_time(kathmandu_clock)
        assert t.get_extended_ptimef() == "Sun Nov 30 07:14:00 +0545 2025"

    def test_static_helpers(self) -> None:
        """weekstr, monthstr and get_time_period work without a snapshot."""
        assert ReadableTime.weekstr(3) == "Wed"
        assert ReadableTime.monthstr(11) == "Nov"
        assert ReadableTime.get_time_period(0) == "AM"
        assert ReadableTime.get_time_period(23) == "PM"
        with pytest.raises(NameLookupError):
            ReadableTime.weekstr(7)
        with pytest.raises(NameLookupError):
            ReadableTime.monthstr(0)
        with pytest.raises(InvalidHourError):
            ReadableTime.get_time_period(24)

    def test_repr(self) -> None:
        """repr() shows fields, offset and zone."""
        t = ReadableTime(2024, 1, 15, 15, 45, 0, time_zone="UTC")
        assert repr(t) == (
            "ReadableTime(2024, 1, 15, 15, 45, 0, "
            "offset=UtcOffset(0), time_zone='UTC')"
        )


class TestComparison:
    """Tests for equality, hashing and ordering."""

    def test_equal_snapshots(self) -> None:
        """Snapshots of the same instant and offset are equal."""
        a = ReadableTime.from_epoch(1_705_333_500)
        b = ReadableTime(2024, 1, 15, 15, 45, 0)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_zone_name_ignored(self) -> None:
        """Zone names do not affect equality."""
        a = ReadableTime.from_epoch(0, 0, "UTC")
        b = ReadableTime.from_epoch(0, 0, "GMT")
        assert a == b

    def test_different_offsets_unequal(self) -> None:
        """The same instant at different offsets compares unequal."""
        assert ReadableTime.from_epoch(0, 0) != ReadableTime.from_epoch(0, 3_600)

    def test_ordering(self) -> None:
        """Snapshots order by instant."""
        early = ReadableTime.from_epoch(100)
        late = ReadableTime.from_epoch(200)
        assert early < late
        assert early <= late
        assert late > early
        assert late >= early
        assert sorted([late, early]) == [early, late]

    def test_other_types(self) -> None:
        """Comparison with other types is not equal."""
        assert ReadableTime.from_epoch(0) != 0


class TestGetReadableTime:
    """Tests for get_readable_time()."""

    def test_fixed_clock(self, utc_clock: FixedClock) -> None:
        """Fields come from the injected clock."""
        t = get_readable_time(utc_clock)
        assert t.get_timef() == "2024-01-15 15:45:00"
        assert t.time_zone == "UTC"
        assert t.epoch_seconds == 1_705_333_500

    def test_now_is_same_as_get_readable_time(self, utc_clock: FixedClock) -> None:
        """ReadableTime.now and get_readable_time agree."""
        assert ReadableTime.now(utc_clock) == get_readable_time(utc_clock)

    def test_bad_offset_is_clock_error(self) -> None:
        """An impossible offset in a reading is a clock failure."""
        with pytest.raises(ClockError):
            get_readable_time(FixedClock(0, offset_seconds=90_000))

    def test_clock_errors_propagate(self) -> None:
        """Errors raised by the clock reach the caller."""

        class BrokenClock:
            def read(self) -> ClockReading:
                raise ClockError("no clock")

        with pytest.raises(ClockError, match="no clock"):
            get_readable_time(BrokenClock())

    @posix_only
    def test_system_clock(self) -> None:
        """The default clock yields consistent fields."""
        t = get_readable_time()
        assert re.match(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$", t.get_timef())
        assert 1 <= t.hour_12 <= 12
        assert t == ReadableTime.from_epoch(t.epoch_seconds, t.utc_offset)

    @posix_only
    def test_consecutive_snapshots(self) -> None:
        """Two quick snapshots are the same or consecutive seconds."""
        first = get_readable_time()
        second = get_readable_time()
        assert 0 <= second.epoch_seconds - first.epoch_seconds <= 1
        if second.epoch_seconds == first.epoch_seconds:
            assert second.second == first.second
        else:
            assert second.second == (first.second + 1) % 60
