"""API route for normalized video metadata.

Provides:
- GET /api/v1/videos/{video_id}?local=<bool>

Every response, including errors, carries a permissive CORS header and a
JSON body. Errors use the ``{"error": ...}`` shape rather than FastAPI's
``{"detail": ...}``.
"""

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from companion.errors import CompanionError, InvalidVideoIdError
from companion.web.rate_limit import config, limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/videos", tags=["videos"])

CORS_HEADERS = {"access-control-allow-origin": "*"}


def _request_origin(request: Request) -> str:
    return f"{request.url.scheme}://{request.url.netloc}"


@router.get("")
@router.get("/")
async def missing_video_id():
    """Reject requests that do not name a video."""
    raise InvalidVideoIdError("Video ID is required")


@router.get("/{video_id}")
@limiter.limit(config.WEB_RATE_LIMIT)
async def get_video(request: Request, video_id: str, local: bool = False):
    """
    Return the normalized metadata document for one video.

    Args:
        video_id: 11-character video id.
        local: Rewrite media URLs to route through this server.

    Returns:
        JSONResponse with the NormalizedVideo document.
    """
    assembler = request.app.state.assembler
    token_minter = getattr(request.app.state, "token_minter", None)

    video = await assembler.get_video(
        video_id,
        _request_origin(request),
        local=local,
        token_minter=token_minter,
    )
    return JSONResponse(video.to_json_dict(), headers=CORS_HEADERS)


async def companion_error_handler(_request: Request, exc: CompanionError) -> JSONResponse:
    """Render a CompanionError as its JSON error body."""
    return JSONResponse(exc.to_dict(), status_code=exc.status_code, headers=CORS_HEADERS)


async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render invalid query or path parameters as a 400 error body."""
    fields = ", ".join(
        str(error["loc"][-1]) for error in exc.errors() if error.get("loc")
    )
    message = f"Invalid request parameter: {fields}" if fields else "Invalid request parameters"
    return JSONResponse({"error": message}, status_code=400, headers=CORS_HEADERS)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log and hide unexpected failures."""
    logger.exception(f"Unhandled error serving {request.url.path}", exc_info=exc)
    return JSONResponse(
        {"error": "Internal server error"}, status_code=500, headers=CORS_HEADERS
    )


def install_error_handlers(app: FastAPI) -> None:
    """Register the JSON error handlers used by the video routes."""
    app.add_exception_handler(CompanionError, companion_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
