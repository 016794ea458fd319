"""
Split a calldata body into address bytes and the trailing chain-id list.

Chain ids are 2-byte big-endian shorts appended after the address. For
fixed-length families the boundary is known. For variable-length families
(0x03 when not Solana-shaped, and 0x05 XRP) the boundary is found by
scanning the tail backward:

    - a trailing short is accepted if it is a registered chain id, or if
      no chain id has been accepted yet
    - the scan stops at the first unregistered short after that
    - at least one byte is always left for the address

This is a best-effort split, not a proof. An address whose last two bytes
happen to equal a registered id loses them to the chain list, and an
unregistered chain id after the first one ends the scan early and is left
in the address. The wire format carries no length field, so both cases
decode to a valid-looking but wrong result.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from gaszip_decoder.core.address import SOLANA_ADDRESS_LENGTH
from gaszip_decoder.core.chains import GASZIP_CHAINS, ChainRegistry
from gaszip_decoder.core.codec import read_uint16_be, read_uint16_sequence
from gaszip_decoder.core.errors import AddressLengthMismatch, MalformedChainTail

logger = logging.getLogger("gaszip_decoder.splitter")

PREFIX_SELF = 0x01
PREFIX_EVM = 0x02
PREFIX_BASE58 = 0x03
PREFIX_MOVE = 0x04
PREFIX_XRP = 0x05
PREFIX_INITIA = 0x06

# Address length in bytes for the fixed-length families
FIXED_ADDRESS_LENGTHS: dict[int, int] = {
    PREFIX_SELF: 0,
    PREFIX_EVM: 20,
    PREFIX_MOVE: 32,
    PREFIX_INITIA: 20,
}

VARIABLE_LENGTH_PREFIXES = frozenset({PREFIX_BASE58, PREFIX_XRP})


class SplitResult(NamedTuple):
    address: bytes
    chain_ids: tuple[int, ...]


def split_address_and_chains(
    prefix: int,
    body: bytes,
    registry: ChainRegistry = GASZIP_CHAINS,
) -> SplitResult:
    """
    Separate the address bytes from the chain-id tail.

    Args:
        prefix: calldata prefix byte, one of 0x01..0x06
        body: calldata bytes after the prefix
        registry: chain registry consulted by the variable-length heuristic

    Raises:
        AddressLengthMismatch: body shorter than a fixed-length address
        MalformedChainTail: odd-length tail after a fixed-length address
        ValueError: prefix outside 0x01..0x06
    """
    body = bytes(body)

    fixed_len = FIXED_ADDRESS_LENGTHS.get(prefix)
    if fixed_len is not None:
        return _split_fixed(body, fixed_len)

    if prefix not in VARIABLE_LENGTH_PREFIXES:
        raise ValueError(f"No address layout for prefix 0x{prefix:02x}")

    # Solana-shaped base58 payloads are parsed deterministically
    if (
        prefix == PREFIX_BASE58
        and len(body) >= SOLANA_ADDRESS_LENGTH
        and (len(body) - SOLANA_ADDRESS_LENGTH) % 2 == 0
    ):
        return SplitResult(
            address=body[:SOLANA_ADDRESS_LENGTH],
            chain_ids=read_uint16_sequence(body[SOLANA_ADDRESS_LENGTH:]),
        )

    return _split_heuristic(body, registry)


def _split_fixed(body: bytes, fixed_len: int) -> SplitResult:
    if len(body) < fixed_len:
        raise AddressLengthMismatch(
            f"Calldata too short for expected address length: "
            f"{len(body)} bytes, need {fixed_len}"
        )

    address = body[:fixed_len]
    tail = body[fixed_len:]
    logger.debug(f"bodyLen={len(body)} fixedLen={fixed_len} tailLen={len(tail)}")

    if len(tail) % 2 != 0:
        raise MalformedChainTail(
            f"Chain IDs tail must be a multiple of 2 bytes, got {len(tail)}"
        )
    return SplitResult(address=address, chain_ids=read_uint16_sequence(tail))


def _split_heuristic(body: bytes, registry: ChainRegistry) -> SplitResult:
    end = len(body)
    chain_ids_rev: list[int] = []

    while end - 2 >= 1:
        value = read_uint16_be(body, end - 2)
        if value not in registry and chain_ids_rev:
            break
        chain_ids_rev.append(value)
        end -= 2

    logger.debug(
        f"heuristic split: bodyLen={len(body)} addressLen={end} chains={len(chain_ids_rev)}"
    )
    chain_ids_rev.reverse()
    return SplitResult(address=body[:end], chain_ids=tuple(chain_ids_rev))
