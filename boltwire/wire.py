"""A cursor over encoded bytes and dispatch of values to their Bolt types."""

from __future__ import annotations

import struct
from typing import Any

from .errors import DeserializationError, UnknownTypeError

_U8 = struct.Struct(">B")
_U16 = struct.Struct(">H")
_U32 = struct.Struct(">I")
_I8 = struct.Struct(">b")
_I16 = struct.Struct(">h")
_I32 = struct.Struct(">i")
_I64 = struct.Struct(">q")
_F64 = struct.Struct(">d")


class ByteReader:
    """Consumes big-endian values from the front of a byte string."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data) -> None:
        self._data = bytes(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def __repr__(self) -> str:
        return f"ByteReader({self._rest()!r})"

    def _rest(self) -> bytes:
        return self._data[self._pos:]

    def peek(self, offset: int = 0) -> int | None:
        """Return the byte ``offset`` places ahead without consuming it, or None."""
        index = self._pos + offset
        if offset < 0 or index >= len(self._data):
            return None
        return self._data[index]

    def read(self, size: int) -> bytes:
        """Consume and return the next ``size`` bytes."""
        if size < 0:
            raise ValueError(f"cannot read a negative number of bytes: {size}")
        if size > len(self):
            raise DeserializationError(
                f"need {size} bytes but only {len(self)} remain"
            )
        chunk = self._data[self._pos:self._pos + size]
        self._pos += size
        return chunk

    def _unpack(self, layout: struct.Struct) -> Any:
        return layout.unpack(self.read(layout.size))[0]

    def read_u8(self) -> int:
        return self._unpack(_U8)

    def read_u16(self) -> int:
        return self._unpack(_U16)

    def read_u32(self) -> int:
        return self._unpack(_U32)

    def read_i8(self) -> int:
        return self._unpack(_I8)

    def read_i16(self) -> int:
        return self._unpack(_I16)

    def read_i32(self) -> int:
        return self._unpack(_I32)

    def read_i64(self) -> int:
        return self._unpack(_I64)

    def read_f64(self) -> float:
        return self._unpack(_F64)


_TYPES: list[type] = []


def register(cls):
    """Make a Bolt type known to :func:`decode`; usable as a class decorator."""
    if cls not in _TYPES:
        _TYPES.append(cls)
    return cls


def decode(version, reader: ByteReader):
    """Decode the next value of whichever registered type claims the input."""
    for cls in _TYPES:
        if cls.can_parse(version, reader):
            return cls.parse(version, reader)
    shown = ", ".join(f"0x{byte:02X}" for byte in reader._rest())
    raise UnknownTypeError(f"[{shown}]")