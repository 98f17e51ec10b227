import pytest

from boltwire.errors import DeserializationError, InvalidTypeMarkerError
from boltwire.scalars import (
    FALSE,
    INT_8,
    INT_16,
    INT_32,
    INT_64,
    TRUE,
    BoltBoolean,
    BoltFloat,
    BoltInteger,
    BoltNull,
)
from boltwire.version import Version
from boltwire.wire import ByteReader

V = Version.V4_1


def test_should_serialize_null():
    assert BoltNull().to_bytes(V) == bytes([0xC0])


def test_null_round_trip():
    reader = ByteReader(BoltNull().to_bytes(V))
    assert BoltNull.can_parse(V, reader)
    assert BoltNull.parse(V, reader) == BoltNull()
    assert len(reader) == 0


def test_should_serialize_boolean():
    assert BoltBoolean(True).to_bytes(V) == bytes([0xC3])
    assert BoltBoolean(False).to_bytes(V) == bytes([0xC2])


def test_should_deserialize_boolean():
    assert BoltBoolean.parse(V, ByteReader(bytes([TRUE]))).value is True
    assert BoltBoolean.parse(V, ByteReader(bytes([FALSE]))).value is False


def test_boolean_invalid_marker():
    with pytest.raises(InvalidTypeMarkerError, match="invalid boolean marker"):
        BoltBoolean.parse(V, ByteReader(bytes([0xC0])))


def test_should_serialize_integer():
    assert BoltInteger(42).to_bytes(V) == bytes([0x2A])
    assert BoltInteger(-127).to_bytes(V) == bytes([INT_8, 0x81])
    assert BoltInteger(129).to_bytes(V) == bytes([INT_16, 0x00, 0x81])
    assert BoltInteger(32_768).to_bytes(V) == bytes([INT_32, 0x00, 0x00, 0x80, 0x00])
    assert BoltInteger(2_147_483_648).to_bytes(V) == bytes(
        [INT_64, 0x00, 0x00, 0x00, 0x00, 0x80, 0x00, 0x00, 0x00]
    )


def test_should_deserialize_integer():
    def parse(raw):
        return BoltInteger.parse(V, ByteReader(bytes(raw))).value

    assert parse([0x2A]) == 42
    assert parse([INT_8, 0x81]) == -127
    assert parse([INT_16, 0x00, 0x81]) == 129
    assert parse([INT_32, 0x00, 0x00, 0x80, 0x00]) == 32_768
    assert parse([INT_64, 0x00, 0x00, 0x00, 0x00, 0x80, 0x00, 0x00, 0x00]) == 2_147_483_648


@pytest.mark.parametrize(
    "value, marker",
    [
        (-17, INT_8),
        (-128, INT_8),
        (128, INT_16),
        (-129, INT_16),
        (32_767, INT_16),
        (-32_768, INT_16),
        (-32_769, INT_32),
        (2_147_483_647, INT_32),
        (-2_147_483_648, INT_32),
        (-2_147_483_649, INT_64),
        (9_223_372_036_854_775_807, INT_64),
        (-9_223_372_036_854_775_808, INT_64),
    ],
)
def test_integer_boundaries_round_trip(value, marker):
    encoded = BoltInteger(value).to_bytes(V)
    assert encoded[0] == marker
    reader = ByteReader(encoded)
    assert BoltInteger.parse(V, reader) == BoltInteger(value)
    assert len(reader) == 0


@pytest.mark.parametrize("value", [-16, -1, 0, 127])
def test_tiny_integers_take_one_byte(value):
    encoded = BoltInteger(value).to_bytes(V)
    assert len(encoded) == 1
    assert BoltInteger.parse(V, ByteReader(encoded)).value == value


def test_integer_out_of_range_raises():
    with pytest.raises(OverflowError):
        BoltInteger(9_223_372_036_854_775_808).to_bytes(V)


def test_integer_invalid_marker():
    with pytest.raises(InvalidTypeMarkerError, match="invalid integer marker"):
        BoltInteger.parse(V, ByteReader(bytes([0xC1])))


def test_integer_truncated_input():
    with pytest.raises(DeserializationError):
        BoltInteger.parse(V, ByteReader(bytes([INT_32, 0x00])))


def test_integer_arithmetic():
    assert BoltInteger(40) + BoltInteger(2) == BoltInteger(42)
    assert BoltInteger(40) - BoltInteger(2) == BoltInteger(38)
    assert int(BoltInteger(19)) == 19


def test_integer_can_parse():
    assert BoltInteger.can_parse(V, ByteReader(bytes([0xF0])))
    assert BoltInteger.can_parse(V, ByteReader(bytes([INT_64])))
    assert not BoltInteger.can_parse(V, ByteReader(bytes([0xC0])))
    assert not BoltInteger.can_parse(V, ByteReader(b""))


def test_should_serialize_float():
    assert BoltFloat(1.23).to_bytes(V) == bytes(
        [0xC1, 0x3F, 0xF3, 0xAE, 0x14, 0x7A, 0xE1, 0x47, 0xAE]
    )
    assert BoltFloat(-1.23).to_bytes(V) == bytes(
        [0xC1, 0xBF, 0xF3, 0xAE, 0x14, 0x7A, 0xE1, 0x47, 0xAE]
    )


def test_should_deserialize_float():
    positive = ByteReader(bytes([0xC1, 0x3F, 0xF3, 0xAE, 0x14, 0x7A, 0xE1, 0x47, 0xAE]))
    assert BoltFloat.parse(V, positive).value == 1.23
    negative = ByteReader(bytes([0xC1, 0xBF, 0xF3, 0xAE, 0x14, 0x7A, 0xE1, 0x47, 0xAE]))
    assert BoltFloat.parse(V, negative).value == -1.23


def test_float_invalid_marker():
    with pytest.raises(InvalidTypeMarkerError):
        BoltFloat.parse(V, ByteReader(bytes([0xC0] + [0] * 8)))


def test_can_parse_distinguishes_scalars():
    null_reader = ByteReader(bytes([0xC0]))
    assert BoltNull.can_parse(V, null_reader)
    assert not BoltBoolean.can_parse(V, null_reader)
    assert not BoltFloat.can_parse(V, null_reader)
    assert BoltFloat.can_parse(V, ByteReader(bytes([0xC1])))