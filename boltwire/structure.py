"""Tagged structures: a marker byte, an optional signature byte, then fields."""

from __future__ import annotations

import dataclasses
from typing import ClassVar

from .errors import InvalidTypeMarkerError
from .wire import ByteReader


class BoltStruct:
    """Base for values laid out as a marker, an optional signature and fields.

    Subclasses are dataclasses that name their layout in the class statement,
    e.g. ``class Point(BoltStruct, marker=0xB3, signature=0x58)``. Every field
    is encoded and decoded, in declaration order, by the Bolt type it is
    annotated with.
    """

    struct_marker: ClassVar[int]
    struct_signature: ClassVar[int | None] = None

    def __init_subclass__(cls, marker=None, signature=None, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if marker is None:
            if not hasattr(cls, "struct_marker"):
                raise TypeError(f"{cls.__name__}: a structure needs a marker")
            return
        for name, byte in (("marker", marker), ("signature", signature)):
            if byte is not None and not 0 <= byte <= 0xFF:
                raise ValueError(f"{cls.__name__}: {name} {byte} is not a byte")
        cls.struct_marker = marker
        cls.struct_signature = signature

    @classmethod
    def can_parse(cls, version, reader: ByteReader) -> bool:
        if reader.peek() != cls.struct_marker:
            return False
        return cls.struct_signature is None or reader.peek(1) == cls.struct_signature

    @classmethod
    def parse(cls, version, reader: ByteReader):
        marker = reader.read_u8()
        if marker != cls.struct_marker:
            raise InvalidTypeMarkerError(
                f"invalid {cls.__name__} marker {marker}"
            )
        if cls.struct_signature is not None:
            signature = reader.read_u8()
            if signature != cls.struct_signature:
                raise InvalidTypeMarkerError(
                    f"invalid {cls.__name__} signature {signature}"
                )
        values = {name: kind.parse(version, reader) for name, kind in _layout(cls)}
        return cls(**values)

    def to_bytes(self, version) -> bytes:
        header = bytes([self.struct_marker])
        if self.struct_signature is not None:
            header += bytes([self.struct_signature])
        body = b"".join(
            getattr(self, name).to_bytes(version) for name, _ in _layout(type(self))
        )
        return header + body


_LAYOUTS: dict[type, tuple[tuple[str, type], ...]] = {}


def _resolve(cls: type, annotation: str):
    """Look up a string annotation by name in the namespace of cls's module."""
    namespace = getattr(cls.__init__, "__globals__", {})
    head, *rest = annotation.strip().split(".")
    if head not in namespace:
        raise TypeError(f"{cls.__name__}: cannot resolve annotation {annotation!r}")
    kind = namespace[head]
    for part in rest:
        kind = getattr(kind, part)
    return kind


def _layout(cls: type) -> tuple[tuple[str, type], ...]:
    """Return the (name, Bolt type) pairs of a structure's fields, in order."""
    cached = _LAYOUTS.get(cls)
    if cached is not None:
        return cached
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a dataclass")
    layout = []
    for field in dataclasses.fields(cls):
        if not field.init:
            continue
        kind = field.type
        if isinstance(kind, str):
            kind = _resolve(cls, kind)
        if not callable(getattr(kind, "parse", None)):
            raise TypeError(
                f"{cls.__name__}.{field.name}: {kind!r} is not a Bolt type"
            )
        layout.append((field.name, kind))
    result = tuple(layout)
    _LAYOUTS[cls] = result
    return result