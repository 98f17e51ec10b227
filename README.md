# boltwire

`boltwire` reads and writes the values of the Bolt PackStream format, the
binary encoding that graph database servers speak on the wire. It uses only
the standard library.

## What it covers

- Scalars (`boltwire.scalars`): `BoltNull`, `BoltBoolean`, `BoltInteger`,
  `BoltFloat`
- Text and binary (`boltwire.text`): `BoltString`, `BoltBytes`
- Containers (`boltwire.containers`): `BoltList`, `BoltMap`
- Graph structures (`boltwire.graph`): `BoltNode`, `BoltRelation`,
  `BoltUnboundedRelation`, `BoltPath`, `BoltPoint2D`, `BoltPoint3D`
- Temporal values (`boltwire.temporal`): `BoltDate`, `BoltTime`,
  `BoltLocalTime`, `BoltDateTime`, `BoltLocalDateTime`,
  `BoltDateTimeZoneId`, `BoltDuration`
- Protocol versions (`boltwire.version`): `Version.V4_1` and `Version.V4`

Integers are written in the smallest of the tiny, 8, 16, 32 and 64-bit forms
that holds them. Strings (counted in UTF-8 bytes), byte arrays, lists and
maps pick a tiny, small, medium or large header by their length.

## Encoding and decoding

Every value type has `to_bytes(version)` and the class methods
`can_parse(version, reader)` and `parse(version, reader)`, where `reader` is a
`boltwire.wire.ByteReader` over the input. The module `boltwire.codec` offers
two functions that work for values of any type:

- `encode(value, version=Version.V4_1)` returns the wire bytes of a Bolt
  value. Plain Python values are wrapped first: `None`, `bool`, `int`,
  `float`, `str`, `bytes`/`bytearray`/`memoryview`, `date`, `datetime`
  (naive as a local date-time, aware as a date-time with offset), `time`
  (naive as a local time, aware as a time with offset), `timedelta`,
  lists and tuples, and dicts with string keys.
- `loads(data, version=Version.V4_1)` decodes exactly one value and raises
  `DeserializationError` if bytes are left over.

```python
from boltwire.version import Version
from boltwire.scalars import BoltInteger
from boltwire.text import BoltString
from boltwire.codec import encode, loads

assert BoltInteger(42).to_bytes(Version.V4_1) == b"\x2a"
assert BoltString("a").to_bytes(Version.V4_1) == b"\x81\x61"

data = encode("hello", Version.V4_1)
assert loads(data, Version.V4_1) == BoltString("hello")
```

Decoding looks at the marker byte (and, for structures, the signature byte)
to choose the type, and raises `UnknownTypeError` when no type matches.
`BoltList` and `BoltMap` decode their elements the same way. Importing
`boltwire.codec` makes every type above known to the decoder.

## Nodes, relationships and paths

`BoltNode`, `BoltRelation` and `BoltUnboundedRelation` have `get(key)`,
which returns the property under `key` or `None`. `BoltPath` has
`path_nodes()`, `path_rels()` and `path_ids()`, which return the nodes,
relationships and integer ids it holds. `BoltMap.get`, `BoltMap.put` and
`BoltMap.from_pairs` accept plain strings or `BoltString` keys;
`BoltList.to_strings()` returns the elements as Python strings.

## Temporal values

The temporal types convert to and from the standard `datetime` types:

```python
import datetime
from boltwire.temporal import BoltDate
from boltwire.version import Version

date = BoltDate.from_date(datetime.date(2010, 1, 1))
assert date.to_bytes(Version.V4_1) == bytes([0xB1, 0x44, 0xC9, 0x39, 0x12])
assert date.to_date() == datetime.date(2010, 1, 1)
```

- `BoltDateTime.from_datetime` needs an aware `datetime`; `to_datetime`
  returns one with a fixed `timezone` offset.
- `BoltDateTimeZoneId.from_datetime(value, tz_id)` stores a timezone name;
  `to_datetime` returns a `(naive datetime, name)` pair.
- `BoltTime.from_time(value, offset=None)` takes the offset as a
  `timedelta` or `tzinfo`, else from the time itself; `to_time` returns a
  `(time, timezone)` pair.
- `BoltDuration.to_timedelta` counts a month as 2,629,800 seconds.

Python's date and time types hold microseconds, so nanoseconds below a
microsecond are dropped when converting to them.

## Custom structures

`boltwire.structure.BoltStruct` is the base of every structure. A
subclass is a dataclass that names its marker and optional signature in the
class statement; each field is encoded and decoded, in order, by the Bolt
type it is annotated with. Pass the class to `boltwire.wire.register` to make
it known to the decoder.

```python
from dataclasses import dataclass
from boltwire.structure import BoltStruct
from boltwire.scalars import BoltInteger
from boltwire.wire import register

@register
@dataclass
class Pair(BoltStruct, marker=0xB2, signature=0x01):
    left: BoltInteger
    right: BoltInteger
```

## Version negotiation

```python
from boltwire.version import Version

assert Version.parse(bytes([0, 0, 1, 4])) is Version.V4_1
assert Version.parse(bytes([0, 0, 0, 4])) is Version.V4
assert len(Version.supported_versions()) == 16
```

An unknown version raises `UnsupportedVersionError`; input that is not
four bytes long raises `ValueError`.

## Errors

Errors about the data derive from `BoltError` in `boltwire.errors`: bad
markers (`InvalidTypeMarkerError`, `UnknownTypeError`), truncated input or
invalid UTF-8 (`DeserializationError`), failed conversions
(`ConversionError`), unsupported versions (`UnsupportedVersionError`) and
strings, byte arrays, lists or maps too large for the format. An integer
outside the 64-bit range raises `OverflowError`, and a value `encode` cannot
wrap raises `TypeError`.

## What it does not do

This package is the value codec only. It does not open connections to a
server, perform the handshake over a socket, frame or exchange protocol
messages, or run queries and transactions.