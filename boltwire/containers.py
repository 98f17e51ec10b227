"""List and map values of the PackStream format."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from .errors import (
    ConversionError,
    InvalidTypeMarkerError,
    ListTooLongError,
    MapTooBigError,
)
from .text import BoltString
from .wire import ByteReader, decode, register

LIST_TINY = 0x90
LIST_SMALL = 0xD4
LIST_MEDIUM = 0xD5
LIST_LARGE = 0xD6

MAP_TINY = 0xA0
MAP_SMALL = 0xD8
MAP_MEDIUM = 0xD9
MAP_LARGE = 0xDA

_LIST_MAX = 2_147_483_648
_MAP_MAX = 4_294_967_295


def _has_marker(reader: ByteReader, tiny: int, sized: tuple[int, ...]) -> bool:
    marker = reader.peek()
    if marker is None:
        return False
    return tiny <= marker <= tiny | 0x0F or marker in sized


def _read_size(reader: ByteReader, tiny: int, small: int, medium: int,
               large: int, kind: str) -> int:
    marker = reader.read_u8()
    if tiny <= marker <= tiny | 0x0F:
        return marker & 0x0F
    if marker == small:
        return reader.read_u8()
    if marker == medium:
        return reader.read_u16()
    if marker == large:
        return reader.read_u32()
    raise InvalidTypeMarkerError(f"invalid {kind} marker {marker}")


def _header(length: int, tiny: int, small: int, medium: int, large: int) -> bytes:
    if length <= 15:
        return bytes([tiny | length])
    if length <= 255:
        return struct.pack(">BB", small, length)
    if length <= 65_535:
        return struct.pack(">BH", medium, length)
    return struct.pack(">BI", large, length)


@register
@dataclass
class BoltList:
    """An ordered sequence of Bolt values."""

    value: list = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.value, list):
            self.value = list(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.value)

    def __getitem__(self, index):
        return self.value[index]

    def push(self, value) -> None:
        """Append a Bolt value."""
        self.value.append(value)

    def get(self, index: int):
        """Return the element at ``index``, or None when there is none."""
        if 0 <= index < len(self.value):
            return self.value[index]
        return None

    def to_strings(self) -> list[str]:
        """Return the elements as Python strings; every element must be a string."""
        result = []
        for item in self.value:
            if not isinstance(item, BoltString):
                raise ConversionError(
                    f"{type(item).__name__} cannot be turned into a string"
                )
            result.append(item.value)
        return result

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        return _has_marker(reader, LIST_TINY, (LIST_SMALL, LIST_MEDIUM, LIST_LARGE))

    @classmethod
    def parse(cls, version, reader: ByteReader) -> BoltList:
        size = _read_size(reader, LIST_TINY, LIST_SMALL, LIST_MEDIUM,
                          LIST_LARGE, "list")
        return cls([decode(version, reader) for _ in range(size)])

    def to_bytes(self, version) -> bytes:
        length = len(self.value)
        if length > _LIST_MAX:
            raise ListTooLongError(f"list of {length} elements is too long")
        body = b"".join(item.to_bytes(version) for item in self.value)
        return _header(length, LIST_TINY, LIST_SMALL, LIST_MEDIUM, LIST_LARGE) + body


def _as_key(key) -> BoltString:
    if isinstance(key, BoltString):
        return key
    if isinstance(key, str):
        return BoltString(key)
    raise TypeError(f"map keys must be strings, not {type(key).__name__}")


@register
@dataclass
class BoltMap:
    """A mapping from strings to Bolt values."""

    value: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.value = {_as_key(key): item for key, item in dict(self.value).items()}

    def __len__(self) -> int:
        return len(self.value)

    def put(self, key, value) -> None:
        """Set ``key`` (a str or BoltString) to a Bolt value."""
        self.value[_as_key(key)] = value

    def get(self, key):
        """Return the value stored under ``key``, or None when it is absent."""
        return self.value.get(_as_key(key))

    @classmethod
    def from_pairs(cls, pairs: Iterable) -> BoltMap:
        """Build a map from (key, value) pairs; later keys win."""
        bolt_map = cls()
        for key, item in pairs:
            bolt_map.put(key, item)
        return bolt_map

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        return _has_marker(reader, MAP_TINY, (MAP_SMALL, MAP_MEDIUM, MAP_LARGE))

    @classmethod
    def parse(cls, version, reader: ByteReader) -> BoltMap:
        size = _read_size(reader, MAP_TINY, MAP_SMALL, MAP_MEDIUM,
                          MAP_LARGE, "map")
        bolt_map = cls()
        for _ in range(size):
            key = BoltString.parse(version, reader)
            bolt_map.put(key, decode(version, reader))
        return bolt_map

    def to_bytes(self, version) -> bytes:
        length = len(self.value)
        if length > _MAP_MAX:
            raise MapTooBigError(f"map of {length} entries is too big")
        body = b"".join(
            key.to_bytes(version) + item.to_bytes(version)
            for key, item in self.value.items()
        )
        return _header(length, MAP_TINY, MAP_SMALL, MAP_MEDIUM, MAP_LARGE) + body