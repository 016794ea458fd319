"""
Gas.zip deposit calldata decoder.

Calldata layout:
    prefix (1 byte) | address (0..n bytes) | chain ids (2 bytes each, big-endian)

Prefixes:
  - 0x01  SELF    no destination bytes, funds go to the sender
  - 0x02  EVM     20-byte address
  - 0x03  BASE58  base58-family address bytes (Solana when 32 bytes)
  - 0x04  MOVE    32-byte address (Aptos / Sui / Fuel)
  - 0x05  XRP     XRP-ledger account bytes (Ripple base58 alphabet)
  - 0x06  INITIA  20-byte address, shown as bech32 "init1..."

Any other prefix decodes to UNKNOWN with the body kept as leftover bytes.

Usage:
    from gaszip_decoder import decode_calldata

    decoded = decode_calldata("0x02" + "11" * 20 + "0036")
    decoded.destination.evm      # '0x1111111111111111111111111111111111111111'
    decoded.chain_ids[0].name    # 'Base Mainnet'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gaszip_decoder.core.address import build_destination
from gaszip_decoder.core.chains import GASZIP_CHAINS, ChainRegistry
from gaszip_decoder.core.codec import bytes_to_hex, hex_to_bytes
from gaszip_decoder.core.errors import EmptyCalldata, InvalidHexEncoding
from gaszip_decoder.core.models import ChainIdEntry, DecodedPayload, PayloadKind
from gaszip_decoder.core.splitter import split_address_and_chains

logger = logging.getLogger("gaszip_decoder.decoder")

PREFIX_KINDS: dict[int, PayloadKind] = {
    0x01: PayloadKind.SELF,
    0x02: PayloadKind.EVM,
    0x03: PayloadKind.BASE58,
    0x04: PayloadKind.MOVE,
    0x05: PayloadKind.XRP,
    0x06: PayloadKind.INITIA,
}


def decode_calldata(
    calldata: str,
    registry: ChainRegistry = GASZIP_CHAINS,
) -> DecodedPayload:
    """
    Decode one Gas.zip deposit calldata hex string.

    Args:
        calldata: 0x-prefixed, even-length hex string
        registry: chain registry used to annotate chain ids

    Returns:
        DecodedPayload: the decoded destination and chain list

    Raises:
        InvalidHexEncoding: malformed hex input
        EmptyCalldata: no bytes after the 0x prefix
        AddressLengthMismatch: address region too short for its family
        MalformedChainTail: odd-length chain-id tail
    """
    if not isinstance(calldata, str) or not calldata.startswith("0x") or len(calldata) % 2 != 0:
        raise InvalidHexEncoding("Expected 0x-prefixed even-length hex string")
    logger.debug(f"inputLenHexChars={len(calldata) - 2}")

    data = hex_to_bytes(calldata)
    if len(data) < 1:
        raise EmptyCalldata("Empty calldata")

    prefix = data[0]
    body = data[1:]
    prefix_hex = f"0x{prefix:02x}"

    kind = PREFIX_KINDS.get(prefix)
    if kind is None:
        logger.debug(f"Unrecognized prefix {prefix_hex}, keeping {len(body)} body bytes")
        return DecodedPayload(
            kind=PayloadKind.UNKNOWN,
            raw=calldata,
            prefix=prefix_hex,
            leftover_hex=bytes_to_hex(body),
        )

    address, chain_ids = split_address_and_chains(prefix, body, registry)

    return DecodedPayload(
        kind=kind,
        raw=calldata,
        prefix=prefix_hex,
        destination=build_destination(kind, address),
        chain_ids=annotate_chain_ids(chain_ids, registry),
    )


def annotate_chain_ids(
    chain_ids: Iterable[int],
    registry: ChainRegistry = GASZIP_CHAINS,
) -> tuple[ChainIdEntry, ...]:
    """Attach registry name / native id to each chain id. Unknown ids keep only the id."""
    entries = []
    for chain_id in chain_ids:
        info = registry.lookup(chain_id)
        if info is None:
            entries.append(ChainIdEntry(id=chain_id))
        else:
            entries.append(ChainIdEntry(id=chain_id, name=info.name, native_id=info.native_id))
    return tuple(entries)
