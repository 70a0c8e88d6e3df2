"""
FastAPI web application serving normalized video metadata.

Fetches player responses from the upstream player endpoint and translates
them into the stable public video document.
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from companion.web.rate_limit import config, limiter
from companion.web.video_routes import install_error_handlers
from companion.web.video_routes import router as video_router
from companion.youtube.assembler import VideoAssembler
from companion.youtube.encryption import encrypt_query
from companion.youtube.innertube import InnertubeClient
from companion.youtube.localize import UrlLocalizer

# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _build_assembler() -> VideoAssembler:
    """
    Wire the assembler with the upstream client and URL localizer.

    The encryptor is only attached when query encryption is enabled, so a
    missing ENCRYPTION_SECRET cannot affect plain deployments.
    """
    encryptor = encrypt_query if config.ENCRYPT_QUERY_PARAMS else None
    return VideoAssembler(
        config,
        player_client=InnertubeClient(config),
        localizer=UrlLocalizer.from_config(config, encryptor=encryptor),
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    FastAPI lifespan context manager.

    Handles startup logging and cleanup.
    """
    logger.info("Application started")
    if config.PO_TOKEN_ENABLED and _app.state.token_minter is None:
        logger.warning("PO tokens are enabled but no token minter is ready yet")

    yield

    logger.info("Application shutdown")


# Initialize FastAPI app
app = FastAPI(
    title="Video Companion",
    description="Normalized video metadata from upstream player responses",
    version="1.0.0",
    lifespan=lifespan
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
install_error_handlers(app)

# CORS middleware (configurable via environment variable)
allowed_origins = config.WEB_ALLOWED_ORIGINS.split(",") if config.WEB_ALLOWED_ORIGINS != "*" else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Store config and collaborators in app state for access in routes
app.state.config = config
app.state.assembler = _build_assembler()
# Replaced by the token minting job once it holds a valid token
app.state.token_minter = None

app.include_router(video_router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "video-companion"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.WEB_PORT)
