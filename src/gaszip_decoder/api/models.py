from pydantic import BaseModel, Field


class DecodeRequest(BaseModel):
    """Request model for decoding one deposit calldata."""

    calldata: str = Field(..., description="0x-prefixed calldata hex of the deposit transaction")


class ChainResponse(BaseModel):
    """Response model for one chain registry entry."""

    id: int = Field(..., description="Gas.zip protocol chain id")
    name: str = Field(..., description="Display name of the chain")
    native_id: int = Field(..., description="Public chain id of the network")
