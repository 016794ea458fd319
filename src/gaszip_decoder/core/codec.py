"""
Low-level byte helpers: hex <-> bytes and big-endian uint16 reads.
"""

from __future__ import annotations

import binascii
import re

from gaszip_decoder.core.errors import InvalidHexEncoding

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def hex_to_bytes(s: str) -> bytes:
    """
    Convert a hex string (optionally 0x-prefixed) to bytes.

    Raises:
        InvalidHexEncoding: if the input is not a string, has odd length
            after the prefix, or contains non-hex characters
    """
    if not isinstance(s, str):
        raise InvalidHexEncoding(f"Expected hex string, got {type(s).__name__}")

    h = s[2:] if s[:2] in ("0x", "0X") else s
    if len(h) % 2 != 0:
        raise InvalidHexEncoding(f"Invalid hex length: {len(h)} characters")
    if not _HEX_RE.fullmatch(h):
        raise InvalidHexEncoding(f"Invalid hex characters in {s!r}")
    return bytes.fromhex(h)


def bytes_to_hex(data: bytes) -> str:
    """Lowercase, 0x-prefixed hex. Empty input gives "0x"."""
    return "0x" + binascii.hexlify(bytes(data)).decode("ascii")


def read_uint16_be(data: bytes, offset: int) -> int:
    # caller guarantees offset + 1 < len(data)
    return (data[offset] << 8) | data[offset + 1]


def read_uint16_sequence(data: bytes) -> tuple[int, ...]:
    """Parse an even-length region as consecutive big-endian uint16 values."""
    return tuple(read_uint16_be(data, i) for i in range(0, len(data) - 1, 2))
