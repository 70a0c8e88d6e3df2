"""Error taxonomy for the video endpoint.

Each error knows the HTTP status it maps to and how to render itself as the
``{"error": ...}`` body the public contract promises. Malformed upstream
fields are deliberately absent from this module: converters degrade to
defaults instead of raising.
"""

from typing import Optional


class CompanionError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidVideoIdError(CompanionError):
    """Video id is missing or malformed. Never retried."""

    status_code = 400


class DependencyNotReadyError(CompanionError):
    """The token minter is required but not initialized yet. Retry later."""

    status_code = 503


class VideoUnplayableError(CompanionError):
    """Upstream playability status is not OK."""

    status_code = 400

    def __init__(self, reason: Optional[str] = None, status: Optional[str] = None):
        super().__init__("Video unavailable")
        self.reason = reason
        self.status = status

    def to_dict(self) -> dict:
        return {"error": self.message, "reason": self.reason}


class UpstreamFetchError(CompanionError):
    """The upstream player endpoint failed or returned something unusable."""

    status_code = 502


class UpstreamTimeoutError(UpstreamFetchError):
    """The upstream player endpoint did not answer in time."""

    status_code = 504
