"""
Result models for decoded Gas.zip deposit calldata.
All models are frozen: a DecodedPayload is never modified after decoding.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class PayloadKind(str, Enum):
    """Destination-address family selected by the calldata prefix byte."""
    SELF = "SELF"
    EVM = "EVM"
    BASE58 = "BASE58"
    MOVE = "MOVE"
    XRP = "XRP"
    INITIA = "INITIA"
    UNKNOWN = "UNKNOWN"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ChainIdEntry(_Frozen):
    """A destination chain id, annotated from the registry when known."""
    id: int
    name: str | None = None
    native_id: int | None = None

    @property
    def known(self) -> bool:
        return self.name is not None

    def to_json(self) -> dict[str, Any]:
        """Compact form used in CSV exports: absent fields are omitted."""
        out: dict[str, Any] = {"id": self.id}
        if self.name is not None:
            out["name"] = self.name
        if self.native_id is not None:
            out["nativeId"] = self.native_id
        return out


class EvmDestination(_Frozen):
    evm: str  # 20 bytes, 0x-hex


class MoveDestination(_Frozen):
    move: str  # 32 bytes, 0x-hex (MOVE / FUEL)


class InitiaDestination(_Frozen):
    initia_hex: str
    initia: str | None = None  # bech32, hrp "init"


class Base58Destination(_Frozen):
    base58_hex: str
    base58: str | None = None
    solana_like: bool = False


class XrpDestination(_Frozen):
    xrp_hex: str
    xrp: str | None = None  # Ripple-alphabet base58


Destination = Union[
    EvmDestination,
    MoveDestination,
    InitiaDestination,
    Base58Destination,
    XrpDestination,
]


class DecodedPayload(_Frozen):
    """
    Fully decoded deposit calldata.

    Fields:
        kind:         address family selected by the prefix byte
        raw:          the input calldata, echoed back
        prefix:       prefix byte as "0x"-prefixed hex (e.g. "0x02")
        destination:  family-specific address payload (None for SELF / UNKNOWN)
        chain_ids:    destination chains in calldata order (duplicates allowed)
        leftover_hex: undecoded bytes; only set for UNKNOWN prefixes
    """
    kind: PayloadKind
    raw: str
    prefix: str
    destination: Destination | None = None
    chain_ids: tuple[ChainIdEntry, ...] = ()
    leftover_hex: str | None = None

    @property
    def leftover(self) -> bytes:
        if not self.leftover_hex:
            return b""
        return bytes.fromhex(self.leftover_hex[2:])

    @property
    def chain_id_values(self) -> list[int]:
        return [entry.id for entry in self.chain_ids]
