
from fastapi import APIRouter, HTTPException

from gaszip_decoder.api.models import ChainResponse, DecodeRequest
from gaszip_decoder.core.chains import GASZIP_CHAINS
from gaszip_decoder.core.decoder import decode_calldata
from gaszip_decoder.core.models import DecodedPayload

router = APIRouter(tags=["Gas.zip Decoder"])


@router.post("/decode", response_model=DecodedPayload)
async def decode(req: DecodeRequest):
    """
    Decode Gas.zip deposit calldata.

    Decode failures are returned as HTTP 400 with the error kind.
    Unknown prefixes are not failures: they decode to kind UNKNOWN.
    """
    return decode_calldata(req.calldata)


@router.get("/chains", response_model=list[ChainResponse])
async def list_chains():
    """List every chain in the Gas.zip registry, sorted by protocol id."""
    return [
        ChainResponse(id=chain_id, name=info.name, native_id=info.native_id)
        for chain_id, info in GASZIP_CHAINS.items()
    ]


@router.get("/chains/{chain_id}", response_model=ChainResponse)
async def get_chain(chain_id: int):
    """Look up one protocol chain id."""
    info = GASZIP_CHAINS.lookup(chain_id)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown chain id {chain_id}")
    return ChainResponse(id=chain_id, name=info.name, native_id=info.native_id)
