"""
Address family encoders: raw destination bytes -> human-readable address.

  - EVM     20 bytes, hex
  - MOVE    32 bytes, hex (Aptos / Sui / Fuel style)
  - INITIA  20 bytes, hex + bech32 with hrp "init"
  - BASE58  variable length, hex + Bitcoin-alphabet base58 (Solana when 32 bytes)
  - XRP     variable length, Ripple-alphabet base58

The text encodings are best-effort: a failure leaves the text field as None
and keeps the hex form. Only the EVM/MOVE length checks are fatal.
"""

from __future__ import annotations

import logging

import base58
from bech32 import bech32_encode, convertbits

from gaszip_decoder.core.codec import bytes_to_hex
from gaszip_decoder.core.errors import AddressLengthMismatch
from gaszip_decoder.core.models import (
    Base58Destination,
    Destination,
    EvmDestination,
    InitiaDestination,
    MoveDestination,
    PayloadKind,
    XrpDestination,
)

logger = logging.getLogger("gaszip_decoder.address")

EVM_ADDRESS_LENGTH = 20
MOVE_ADDRESS_LENGTH = 32
INITIA_ADDRESS_LENGTH = 20
SOLANA_ADDRESS_LENGTH = 32

INITIA_HRP = "init"


def encode_base58(data: bytes) -> str | None:
    """Standard (Bitcoin alphabet) base58, or None if encoding fails."""
    try:
        return base58.b58encode(bytes(data)).decode("ascii")
    except Exception as e:
        logger.debug(f"base58 encoding failed for {len(data)} bytes: {e}")
        return None


def encode_xrp(data: bytes) -> str | None:
    """Ripple-alphabet base58, or None if encoding fails."""
    try:
        return base58.b58encode(bytes(data), alphabet=base58.RIPPLE_ALPHABET).decode("ascii")
    except Exception as e:
        logger.debug(f"XRP base58 encoding failed for {len(data)} bytes: {e}")
        return None


def encode_initia(data: bytes, hrp: str = INITIA_HRP) -> str | None:
    """Bech32 with the given human-readable prefix, or None if encoding fails."""
    try:
        words = convertbits(list(data), 8, 5)
        if words is None:
            return None
        return bech32_encode(hrp, words)
    except Exception as e:
        logger.debug(f"bech32 encoding failed for {len(data)} bytes: {e}")
        return None


def build_destination(kind: PayloadKind, address: bytes) -> Destination | None:
    """
    Build the destination payload for a decoded address.

    Args:
        kind: address family resolved from the prefix byte
        address: raw address bytes produced by the splitter

    Returns:
        The family-specific destination, or None for SELF / UNKNOWN.

    Raises:
        AddressLengthMismatch: if an EVM or MOVE address is not exactly
            20 / 32 bytes
    """
    if kind is PayloadKind.EVM:
        _require_length(kind, address, EVM_ADDRESS_LENGTH)
        return EvmDestination(evm=bytes_to_hex(address))

    if kind is PayloadKind.MOVE:
        _require_length(kind, address, MOVE_ADDRESS_LENGTH)
        return MoveDestination(move=bytes_to_hex(address))

    if kind is PayloadKind.INITIA:
        return InitiaDestination(
            initia_hex=bytes_to_hex(address),
            initia=encode_initia(address),
        )

    if kind is PayloadKind.BASE58:
        return Base58Destination(
            base58_hex=bytes_to_hex(address),
            base58=encode_base58(address),
            solana_like=len(address) == SOLANA_ADDRESS_LENGTH,
        )

    if kind is PayloadKind.XRP:
        return XrpDestination(
            xrp_hex=bytes_to_hex(address),
            xrp=encode_xrp(address),
        )

    return None


def _require_length(kind: PayloadKind, address: bytes, expected: int) -> None:
    if len(address) != expected:
        raise AddressLengthMismatch(
            f"{kind.value} address must be {expected} bytes, got {len(address)}"
        )
