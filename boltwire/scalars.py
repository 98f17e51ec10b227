"""Null, boolean, integer and float values of the PackStream format."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .errors import InvalidTypeMarkerError
from .wire import ByteReader, register

NULL = 0xC0
FALSE = 0xC2
TRUE = 0xC3
FLOAT = 0xC1
INT_8 = 0xC8
INT_16 = 0xC9
INT_32 = 0xCA
INT_64 = 0xCB

_INT_MARKERS = frozenset({INT_8, INT_16, INT_32, INT_64})


def _is_tiny_int(marker: int | None) -> bool:
    return marker is not None and (marker <= 0x7F or marker >= 0xF0)


@register
@dataclass(frozen=True)
class BoltNull:
    """The null value."""

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        return reader.peek() == NULL

    @classmethod
    def parse(cls, version, reader: ByteReader) -> BoltNull:
        marker = reader.read_u8()
        if marker != NULL:
            raise InvalidTypeMarkerError(f"invalid null marker {marker}")
        return cls()

    def to_bytes(self, version) -> bytes:
        return bytes([NULL])


@register
@dataclass(frozen=True)
class BoltBoolean:
    """A boolean value."""

    value: bool

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        return reader.peek() in (TRUE, FALSE)

    @classmethod
    def parse(cls, version, reader: ByteReader) -> BoltBoolean:
        marker = reader.read_u8()
        if marker == TRUE:
            return cls(True)
        if marker == FALSE:
            return cls(False)
        raise InvalidTypeMarkerError("invalid boolean marker")

    def to_bytes(self, version) -> bytes:
        return bytes([TRUE if self.value else FALSE])


@register
@dataclass(frozen=True)
class BoltInteger:
    """A signed 64-bit integer, encoded in the fewest bytes that hold it."""

    value: int

    def __add__(self, other):
        if not isinstance(other, BoltInteger):
            return NotImplemented
        return BoltInteger(self.value + other.value)

    def __sub__(self, other):
        if not isinstance(other, BoltInteger):
            return NotImplemented
        return BoltInteger(self.value - other.value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        marker = reader.peek()
        return _is_tiny_int(marker) or marker in _INT_MARKERS

    @classmethod
    def parse(cls, version, reader: ByteReader) -> BoltInteger:
        marker = reader.read_u8()
        if _is_tiny_int(marker):
            return cls(marker - 0x100 if marker >= 0x80 else marker)
        if marker == INT_8:
            return cls(reader.read_i8())
        if marker == INT_16:
            return cls(reader.read_i16())
        if marker == INT_32:
            return cls(reader.read_i32())
        if marker == INT_64:
            return cls(reader.read_i64())
        raise InvalidTypeMarkerError("invalid integer marker")

    def to_bytes(self, version) -> bytes:
        value = self.value
        if -16 <= value <= 127:
            return struct.pack(">b", value)
        if -128 <= value <= -17:
            return struct.pack(">Bb", INT_8, value)
        if -32_768 <= value <= 32_767:
            return struct.pack(">Bh", INT_16, value)
        if -2_147_483_648 <= value <= 2_147_483_647:
            return struct.pack(">Bi", INT_32, value)
        if -9_223_372_036_854_775_808 <= value <= 9_223_372_036_854_775_807:
            return struct.pack(">Bq", INT_64, value)
        raise OverflowError(f"integer {value} does not fit in 64 bits")


@register
@dataclass(frozen=True)
class BoltFloat:
    """A 64-bit IEEE 754 floating point value."""

    value: float

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        return reader.peek() == FLOAT

    @classmethod
    def parse(cls, version, reader: ByteReader) -> BoltFloat:
        marker = reader.read_u8()
        if marker != FLOAT:
            raise InvalidTypeMarkerError(f"invalid float marker {marker}")
        return cls(reader.read_f64())

    def to_bytes(self, version) -> bytes:
        return struct.pack(">Bd", FLOAT, self.value)