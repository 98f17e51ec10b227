"""Encoding of Python and Bolt values and decoding of complete messages."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from . import graph as _graph  # noqa: F401  (registers the graph structures)
from .containers import BoltList, BoltMap
from .errors import DeserializationError
from .scalars import BoltBoolean, BoltFloat, BoltInteger, BoltNull
from .temporal import (
    BoltDate,
    BoltDateTime,
    BoltDuration,
    BoltLocalDateTime,
    BoltLocalTime,
    BoltTime,
)
from .text import BoltBytes, BoltString
from .version import Version
from .wire import ByteReader, decode


def _to_bolt(value):
    """Wrap a plain Python value in its Bolt type; Bolt values pass through."""
    if value is None:
        return BoltNull()
    if isinstance(value, bool):
        return BoltBoolean(value)
    if isinstance(value, int):
        return BoltInteger(value)
    if isinstance(value, float):
        return BoltFloat(value)
    if isinstance(value, str):
        return BoltString(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BoltBytes(bytes(value))
    if isinstance(value, datetime):
        if value.utcoffset() is None:
            return BoltLocalDateTime.from_datetime(value)
        return BoltDateTime.from_datetime(value)
    if isinstance(value, date):
        return BoltDate.from_date(value)
    if isinstance(value, time):
        if value.utcoffset() is None:
            return BoltLocalTime.from_time(value)
        return BoltTime.from_time(value)
    if isinstance(value, timedelta):
        return BoltDuration.from_timedelta(value)
    if isinstance(value, (list, tuple)):
        return BoltList([_to_bolt(item) for item in value])
    if isinstance(value, dict):
        return BoltMap({key: _to_bolt(item) for key, item in value.items()})
    if callable(getattr(value, "to_bytes", None)):
        return value
    raise TypeError(f"{type(value).__name__} cannot be encoded")


def encode(value, version=Version.V4_1) -> bytes:
    """Encode a Bolt value, or a plain Python value, to its wire bytes."""
    return _to_bolt(value).to_bytes(version)


def loads(data, version=Version.V4_1):
    """Decode exactly one Bolt value from ``data``."""
    reader = ByteReader(data)
    value = decode(version, reader)
    if len(reader):
        raise DeserializationError(f"{len(reader)} bytes left after the value")
    return value