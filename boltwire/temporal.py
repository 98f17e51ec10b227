"""Dates, times, date-times and durations of the PackStream format."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from .errors import ConversionError
from .scalars import BoltInteger
from .structure import BoltStruct
from .text import BoltString
from .wire import register

_EPOCH = datetime(1970, 1, 1)
_EPOCH_ORDINAL = _EPOCH.toordinal()
_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MICRO = 1_000
_SECONDS_PER_DAY = 86_400
_SECONDS_PER_MONTH = 2_629_800
_ONE_SECOND = timedelta(seconds=1)


def _seconds_and_nanos(value: datetime) -> tuple[int, int]:
    """Split a wall-clock datetime into seconds since the epoch and nanoseconds."""
    delta = value.replace(tzinfo=None) - _EPOCH
    seconds = delta.days * _SECONDS_PER_DAY + delta.seconds
    return seconds, delta.microseconds * _NANOS_PER_MICRO


def _naive_from(seconds: int, nanoseconds: int) -> datetime:
    """Build a naive datetime; a leap-second nanosecond count rolls over."""
    if not 0 <= nanoseconds < 2 * _NANOS_PER_SECOND:
        raise ConversionError(f"invalid number of nanoseconds {nanoseconds}")
    try:
        return _EPOCH + timedelta(
            seconds=seconds, microseconds=nanoseconds // _NANOS_PER_MICRO
        )
    except OverflowError as exc:
        raise ConversionError(f"{seconds} seconds is out of range") from exc


def _offset_seconds(offset) -> int:
    """Turn a tzinfo or timedelta into whole seconds east of UTC."""
    if isinstance(offset, tzinfo):
        offset = offset.utcoffset(None)
    if not isinstance(offset, timedelta):
        raise ValueError("a fixed UTC offset is required")
    return offset // _ONE_SECOND


def _fixed_offset(seconds: int) -> timezone:
    if not -_SECONDS_PER_DAY < seconds < _SECONDS_PER_DAY:
        raise ConversionError(f"invalid timezone offset {seconds}")
    return timezone(timedelta(seconds=seconds))


def _time_of_day(nanoseconds: int) -> time:
    if not 0 <= nanoseconds < _SECONDS_PER_DAY * _NANOS_PER_SECOND:
        raise ConversionError(f"invalid time of day of {nanoseconds} nanoseconds")
    seconds, nanos = divmod(nanoseconds, _NANOS_PER_SECOND)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return time(hours, minutes, secs, nanos // _NANOS_PER_MICRO)


def _nanos_since_midnight(value: time) -> int:
    seconds = value.hour * 3600 + value.minute * 60 + value.second
    return seconds * _NANOS_PER_SECOND + value.microsecond * _NANOS_PER_MICRO


@register
@dataclass(frozen=True)
class BoltDate(BoltStruct, marker=0xB1, signature=0x44):
    """A calendar date, as days since 1970-01-01."""

    days: BoltInteger

    @classmethod
    def from_date(cls, value: date) -> BoltDate:
        return cls(BoltInteger(value.toordinal() - _EPOCH_ORDINAL))

    def to_date(self) -> date:
        try:
            return date.fromordinal(_EPOCH_ORDINAL + self.days.value)
        except (ValueError, OverflowError) as exc:
            raise ConversionError(f"{self.days.value} days is out of range") from exc


@register
@dataclass(frozen=True)
class BoltDateTime(BoltStruct, marker=0xB3, signature=0x46):
    """A date-time with a fixed offset; seconds count local wall-clock time."""

    seconds: BoltInteger
    nanoseconds: BoltInteger
    tz_offset_seconds: BoltInteger

    @classmethod
    def from_datetime(cls, value: datetime) -> BoltDateTime:
        offset = value.utcoffset()
        if offset is None:
            raise ValueError("an aware datetime is required")
        seconds, nanos = _seconds_and_nanos(value)
        return cls(
            BoltInteger(seconds),
            BoltInteger(nanos),
            BoltInteger(_offset_seconds(offset)),
        )

    def to_datetime(self) -> datetime:
        zone = _fixed_offset(self.tz_offset_seconds.value)
        local = _naive_from(self.seconds.value, self.nanoseconds.value)
        return local.replace(tzinfo=zone)


@register
@dataclass(frozen=True)
class BoltLocalDateTime(BoltStruct, marker=0xB2, signature=0x64):
    """A date-time without any timezone."""

    seconds: BoltInteger
    nanoseconds: BoltInteger

    @classmethod
    def from_datetime(cls, value: datetime) -> BoltLocalDateTime:
        seconds, nanos = _seconds_and_nanos(value)
        return cls(BoltInteger(seconds), BoltInteger(nanos))

    def to_datetime(self) -> datetime:
        return _naive_from(self.seconds.value, self.nanoseconds.value)


@register
@dataclass(frozen=True)
class BoltDateTimeZoneId(BoltStruct, marker=0xB3, signature=0x66):
    """A date-time paired with the name of its timezone."""

    seconds: BoltInteger
    nanoseconds: BoltInteger
    tz_id: BoltString

    @classmethod
    def from_datetime(cls, value: datetime, tz_id: str) -> BoltDateTimeZoneId:
        seconds, nanos = _seconds_and_nanos(value)
        return cls(BoltInteger(seconds), BoltInteger(nanos), BoltString(str(tz_id)))

    def to_datetime(self) -> tuple[datetime, str]:
        moment = _naive_from(self.seconds.value, self.nanoseconds.value)
        return moment, self.tz_id.value


@register
@dataclass(frozen=True)
class BoltDuration(BoltStruct, marker=0xB4, signature=0x45):
    """A duration in months, days, seconds and nanoseconds."""

    months: BoltInteger
    days: BoltInteger
    seconds: BoltInteger
    nanoseconds: BoltInteger

    @classmethod
    def from_timedelta(cls, value: timedelta) -> BoltDuration:
        seconds = value.days * _SECONDS_PER_DAY + value.seconds
        return cls(
            BoltInteger(0),
            BoltInteger(0),
            BoltInteger(seconds),
            BoltInteger(value.microseconds * _NANOS_PER_MICRO),
        )

    def to_timedelta(self) -> timedelta:
        """Return the duration, counting a month as 2,629,800 seconds."""
        seconds = (
            self.seconds.value
            + self.days.value * _SECONDS_PER_DAY
            + self.months.value * _SECONDS_PER_MONTH
        )
        try:
            return timedelta(
                seconds=seconds,
                microseconds=self.nanoseconds.value // _NANOS_PER_MICRO,
            )
        except OverflowError as exc:
            raise ConversionError("duration is out of range") from exc


@register
@dataclass(frozen=True)
class BoltTime(BoltStruct, marker=0xB2, signature=0x54):
    """A time of day with a fixed offset from UTC."""

    nanoseconds: BoltInteger
    tz_offset_seconds: BoltInteger

    @classmethod
    def from_time(cls, value: time, offset=None) -> BoltTime:
        """Encode ``value``; ``offset`` is a timedelta or tzinfo, else value's own."""
        if offset is None:
            offset = value.utcoffset()
        return cls(
            BoltInteger(_nanos_since_midnight(value)),
            BoltInteger(_offset_seconds(offset)),
        )

    def to_time(self) -> tuple[time, timezone]:
        zone = _fixed_offset(self.tz_offset_seconds.value)
        return _time_of_day(self.nanoseconds.value), zone


@register
@dataclass(frozen=True)
class BoltLocalTime(BoltStruct, marker=0xB1, signature=0x74):
    """A time of day without any timezone."""

    nanoseconds: BoltInteger

    @classmethod
    def from_time(cls, value: time) -> BoltLocalTime:
        return cls(BoltInteger(_nanos_since_midnight(value)))

    def to_time(self) -> time:
        return _time_of_day(self.nanoseconds.value)