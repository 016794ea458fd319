"""
API module for the Gas.zip decoder.

Provides FastAPI routes and models exposing the decoder and chain registry
as a REST API. Run with: uvicorn gaszip_decoder.api.server:app
"""

from gaszip_decoder.api.models import ChainResponse, DecodeRequest

__all__ = [
    "ChainResponse",
    "DecodeRequest",
]
