"""Client for the upstream (innertube) player endpoint."""

import logging
from typing import Optional

import httpx

from companion.config import Config
from companion.errors import UpstreamFetchError, UpstreamTimeoutError

logger = logging.getLogger(__name__)


class InnertubeClient:
    """Fetch raw player responses for a video.

    Example:
        client = InnertubeClient(Config())
        raw = await client.fetch_player_response("dQw4w9WgXcQ")
    """

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize the client.

        Args:
            config: Application configuration with INNERTUBE_* settings.
            transport: Optional httpx transport, e.g. a MockTransport in tests.
        """
        self.config = config
        self.transport = transport

    def _build_payload(self, video_id: str) -> dict:
        return {
            "videoId": video_id,
            "context": {
                "client": {
                    "clientName": self.config.INNERTUBE_CLIENT_NAME,
                    "clientVersion": self.config.INNERTUBE_CLIENT_VERSION,
                    "hl": self.config.INNERTUBE_HL,
                    "gl": self.config.INNERTUBE_GL,
                }
            },
            "contentCheckOk": True,
            "racyCheckOk": True,
        }

    async def fetch_player_response(self, video_id: str) -> dict:
        """Fetch and decode the player response for ``video_id``.

        Raises:
            UpstreamTimeoutError: If the endpoint does not answer in time.
            UpstreamFetchError: On HTTP errors or a body that is not a JSON object.
        """
        logger.info(f"Fetching player response for {video_id}")
        try:
            async with httpx.AsyncClient(
                timeout=self.config.UPSTREAM_TIMEOUT, transport=self.transport
            ) as client:
                response = await client.post(
                    self.config.INNERTUBE_API_URL,
                    params={"prettyPrint": "false"},
                    json=self._build_payload(video_id),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError("Upstream player request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.error(f"Upstream player error for {video_id}: {e.response.status_code}")
            raise UpstreamFetchError(
                f"Upstream player request failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Upstream player request for {video_id} failed: {e}")
            raise UpstreamFetchError("Upstream player request failed") from e
        except ValueError as e:
            raise UpstreamFetchError("Upstream player response is not valid JSON") from e

        if not isinstance(data, dict):
            raise UpstreamFetchError("Upstream player response is not a JSON object")
        return data
