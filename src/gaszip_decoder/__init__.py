"""
gaszip-decoder: decode Gas.zip cross-chain deposit calldata.

Usage:
    from gaszip_decoder import decode_calldata, GASZIP_CHAINS
    from gaszip_decoder.stream import HypersyncClient, FetchConfig, export_transactions
"""

from gaszip_decoder.core.chains import GASZIP_CHAINS, ChainInfo, ChainRegistry
from gaszip_decoder.core.decoder import decode_calldata
from gaszip_decoder.core.errors import DecodeError, DecodeErrorKind
from gaszip_decoder.core.models import ChainIdEntry, DecodedPayload, PayloadKind

__version__ = "0.1.0"
__all__ = [
    "GASZIP_CHAINS",
    "ChainIdEntry",
    "ChainInfo",
    "ChainRegistry",
    "DecodeError",
    "DecodeErrorKind",
    "DecodedPayload",
    "PayloadKind",
    "decode_calldata",
]
