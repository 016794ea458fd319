"""core module init"""
from gaszip_decoder.core.address import (
    build_destination,
    encode_base58,
    encode_initia,
    encode_xrp,
)
from gaszip_decoder.core.chains import GASZIP_CHAINS, ChainInfo, ChainRegistry
from gaszip_decoder.core.codec import (
    bytes_to_hex,
    hex_to_bytes,
    read_uint16_be,
    read_uint16_sequence,
)
from gaszip_decoder.core.decoder import annotate_chain_ids, decode_calldata
from gaszip_decoder.core.errors import (
    AddressLengthMismatch,
    DecodeError,
    DecodeErrorKind,
    EmptyCalldata,
    InvalidHexEncoding,
    MalformedChainTail,
)
from gaszip_decoder.core.models import (
    Base58Destination,
    ChainIdEntry,
    DecodedPayload,
    EvmDestination,
    InitiaDestination,
    MoveDestination,
    PayloadKind,
    XrpDestination,
)
from gaszip_decoder.core.splitter import SplitResult, split_address_and_chains

__all__ = [
    "AddressLengthMismatch",
    "Base58Destination",
    "ChainIdEntry",
    "ChainInfo",
    "ChainRegistry",
    "DecodeError",
    "DecodeErrorKind",
    "DecodedPayload",
    "EmptyCalldata",
    "EvmDestination",
    "GASZIP_CHAINS",
    "InitiaDestination",
    "InvalidHexEncoding",
    "MalformedChainTail",
    "MoveDestination",
    "PayloadKind",
    "SplitResult",
    "XrpDestination",
    "annotate_chain_ids",
    "build_destination",
    "bytes_to_hex",
    "decode_calldata",
    "encode_base58",
    "encode_initia",
    "encode_xrp",
    "hex_to_bytes",
    "read_uint16_be",
    "read_uint16_sequence",
    "split_address_and_chains",
]
