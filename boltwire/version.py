"""Bolt protocol versions and the handshake bytes that announce them."""

from __future__ import annotations

import enum

from .errors import UnsupportedVersionError

_HANDSHAKE_SLOTS = 4


class Version(enum.Enum):
    """A Bolt protocol version; the value is its handshake number."""

    V4_1 = 0x0104
    V4 = 0x0004

    @staticmethod
    def supported_versions() -> bytes:
        """Return the 16 handshake bytes proposing the supported versions."""
        proposals = [member.value for member in Version]
        proposals += [0] * (_HANDSHAKE_SLOTS - len(proposals))
        return b"".join(number.to_bytes(4, "big") for number in proposals)

    @staticmethod
    def parse(version_bytes) -> Version:
        """Decode the 4-byte version the server answered with."""
        raw = bytes(version_bytes)
        if len(raw) != 4:
            raise ValueError(f"expected 4 version bytes, got {len(raw)}")
        number = int.from_bytes(raw, "big")
        try:
            return Version(number)
        except ValueError:
            raise UnsupportedVersionError(
                f"version {number} is not supported"
            ) from None