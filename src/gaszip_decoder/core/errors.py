"""
Error taxonomy for calldata decoding.

Every failure raised by the decoder is a DecodeError subclass carrying a
DecodeErrorKind, so batch callers can branch on ``err.kind`` instead of
matching message text. An unrecognized prefix byte is NOT an error: it
decodes to an UNKNOWN payload.
"""

from __future__ import annotations

from enum import Enum


class DecodeErrorKind(str, Enum):
    INVALID_HEX_ENCODING = "InvalidHexEncoding"
    EMPTY_CALLDATA = "EmptyCalldata"
    ADDRESS_LENGTH_MISMATCH = "AddressLengthMismatch"
    MALFORMED_CHAIN_TAIL = "MalformedChainTail"


class DecodeError(Exception):
    """
    Base class for all calldata decoding failures.

    Abstract: only the subclasses below are raised, each with its own kind.
    """

    kind: DecodeErrorKind

    def __init__(self, *args: object) -> None:
        if type(self) is DecodeError:
            raise TypeError("DecodeError is abstract, raise one of its subclasses")
        super().__init__(*args)

    def __str__(self) -> str:
        return self.args[0] if self.args else self.kind.value


class InvalidHexEncoding(DecodeError):
    """Input is not 0x-prefixed, even-length hex."""

    kind = DecodeErrorKind.INVALID_HEX_ENCODING


class EmptyCalldata(DecodeError):
    """Calldata contains zero bytes."""

    kind = DecodeErrorKind.EMPTY_CALLDATA


class AddressLengthMismatch(DecodeError):
    """Address region is shorter than (or differs from) the family's fixed length."""

    kind = DecodeErrorKind.ADDRESS_LENGTH_MISMATCH


class MalformedChainTail(DecodeError):
    """Trailing chain-id region of a fixed-length format has an odd byte count."""

    kind = DecodeErrorKind.MALFORMED_CHAIN_TAIL
