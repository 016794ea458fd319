from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gaszip_decoder import __version__
from gaszip_decoder.api.routes import router
from gaszip_decoder.core.errors import DecodeError

app = FastAPI(
    title="Gas.zip Decoder API",
    description="REST API wrapping the Gas.zip deposit calldata decoder",
    version=__version__,
)

# Allow CORS for easy frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routes
app.include_router(router)


@app.exception_handler(DecodeError)
async def decode_error_handler(request: Request, exc: DecodeError):
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "kind": exc.kind.value},
    )


@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok"}
