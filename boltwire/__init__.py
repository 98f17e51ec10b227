"""Encoding and decoding of Bolt PackStream values and protocol versions."""

__version__ = "0.1.0"