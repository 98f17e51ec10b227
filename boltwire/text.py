"""String and byte-array values of the PackStream format."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .errors import (
    BytesTooBigError,
    DeserializationError,
    InvalidTypeMarkerError,
    StringTooLongError,
)
from .wire import ByteReader, register

STRING_TINY = 0x80
STRING_SMALL = 0xD0
STRING_MEDIUM = 0xD1
STRING_LARGE = 0xD2

BYTES_SMALL = 0xCC
BYTES_MEDIUM = 0xCD
BYTES_LARGE = 0xCE

_STRING_MAX = 4_294_967_295
_BYTES_MAX = 2_147_483_648


@register
@dataclass(frozen=True)
class BoltString:
    """A UTF-8 string; its length on the wire counts encoded bytes."""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        marker = reader.peek()
        if marker is None:
            return False
        return (
            STRING_TINY <= marker <= STRING_TINY | 0x0F
            or marker in (STRING_SMALL, STRING_MEDIUM, STRING_LARGE)
        )

    @classmethod
    def parse(cls, version, reader: ByteReader) -> BoltString:
        marker = reader.read_u8()
        if STRING_TINY <= marker <= STRING_TINY | 0x0F:
            length = marker & 0x0F
        elif marker == STRING_SMALL:
            length = reader.read_u8()
        elif marker == STRING_MEDIUM:
            length = reader.read_u16()
        elif marker == STRING_LARGE:
            length = reader.read_u32()
        else:
            raise InvalidTypeMarkerError(f"invalid string marker {marker}")
        raw = reader.read(length)
        try:
            return cls(raw.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise DeserializationError(str(exc)) from exc

    def to_bytes(self, version) -> bytes:
        encoded = self.value.encode("utf-8")
        length = len(encoded)
        if length <= 15:
            header = bytes([STRING_TINY | length])
        elif length <= 255:
            header = struct.pack(">BB", STRING_SMALL, length)
        elif length <= 65_535:
            header = struct.pack(">BH", STRING_MEDIUM, length)
        elif length <= _STRING_MAX:
            header = struct.pack(">BI", STRING_LARGE, length)
        else:
            raise StringTooLongError(f"string of {length} bytes is too long")
        return header + encoded


@register
@dataclass(frozen=True)
class BoltBytes:
    """A raw byte array."""

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            object.__setattr__(self, "value", bytes(self.value))

    def __len__(self) -> int:
        return len(self.value)

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        return reader.peek() in (BYTES_SMALL, BYTES_MEDIUM, BYTES_LARGE)

    @classmethod
    def parse(cls, version, reader: ByteReader) -> BoltBytes:
        marker = reader.read_u8()
        if marker == BYTES_SMALL:
            size = reader.read_u8()
        elif marker == BYTES_MEDIUM:
            size = reader.read_u16()
        elif marker == BYTES_LARGE:
            size = reader.read_u32()
        else:
            raise InvalidTypeMarkerError(f"invalid bytes marker {marker}")
        return cls(reader.read(size))

    def to_bytes(self, version) -> bytes:
        size = len(self.value)
        if size <= 255:
            header = struct.pack(">BB", BYTES_SMALL, size)
        elif size <= 65_535:
            header = struct.pack(">BH", BYTES_MEDIUM, size)
        elif size <= _BYTES_MAX:
            header = struct.pack(">BI", BYTES_LARGE, size)
        else:
            raise BytesTooBigError(f"byte array of {size} bytes is too big")
        return header + self.value