"""Exceptions raised while encoding or decoding Bolt values."""


class BoltError(Exception):
    """Base class for every error raised by this package."""


class UnknownTypeError(BoltError):
    """The input does not start with the marker of any known type."""


class InvalidTypeMarkerError(BoltError):
    """A type was asked to parse input that carries another type's marker."""


class DeserializationError(BoltError):
    """The input is truncated or holds data that cannot be decoded."""


class ConversionError(BoltError):
    """A Bolt value cannot be turned into the requested Python value."""


class UnsupportedVersionError(BoltError):
    """The server agreed on a protocol version this package cannot speak."""


class BytesTooBigError(BoltError):
    """A byte array is too large to be encoded."""


class ListTooLongError(BoltError):
    """A list has too many elements to be encoded."""


class MapTooBigError(BoltError):
    """A map has too many entries to be encoded."""


class StringTooLongError(BoltError):
    """A string is too long to be encoded."""