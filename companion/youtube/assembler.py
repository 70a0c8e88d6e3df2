"""Assemble the public video document from a player response.

Pipeline for one request:

1. validate the video id
2. check the token minter when proof-of-origin tokens are required
3. fetch the raw player response
4. stop with the upstream reason unless playability is OK
5. run every converter independently against the raw response
6. merge the results into a fully defaulted NormalizedVideo
7. stamp fetch and availability times
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from companion.config import Config
from companion.errors import (
    DependencyNotReadyError,
    InvalidVideoIdError,
    VideoUnplayableError,
)
from companion.schemas import Captions, NormalizedVideo

from .captions import audio_tracks, convert_captions, raw_caption_tracks
from .formats import (
    convert_adaptive_format,
    convert_format_stream,
    raw_adaptive_format,
    raw_format,
)
from .formatting import description_to_html, parse_publish_date, relative_time_string
from .localize import UrlLocalizer
from .player_response import PlayerResponse
from .storyboards import decode_storyboards, parse_player_storyboards
from .thumbnails import generate_author_thumbnails, generate_thumbnails, map_video_thumbnails
from .validation import validate_video_id
from .video_info import VideoInfo, build_video_info

logger = logging.getLogger(__name__)

PLAYABLE_STATUS = "OK"


def _text(value: Any, default: str = "") -> str:
    """Coerce an upstream scalar to str, falling back to ``default`` when empty."""
    if value is None or value == "" or isinstance(value, (dict, list)):
        return default
    return str(value)


def _flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    return value is True or value == "true"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _dicts(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class VideoAssembler:
    """Turn raw player responses into NormalizedVideo documents.

    Example:
        assembler = VideoAssembler(config, InnertubeClient(config), UrlLocalizer.from_config(config))
        video = await assembler.get_video("dQw4w9WgXcQ", "https://companion.example")
    """

    def __init__(
        self,
        config: Config,
        player_client=None,
        localizer: Optional[UrlLocalizer] = None,
        info_builder: Callable[[Any], VideoInfo] = build_video_info,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Initialize the assembler.

        Args:
            config: Application configuration.
            player_client: Object with an async ``fetch_player_response(video_id)``.
                Only needed by :meth:`get_video`.
            localizer: URL localizer for ``local`` requests.
            info_builder: Derives the normalized-info view from the raw response.
            clock: Returns the current instant; replaced in tests.
        """
        self.config = config
        self.player_client = player_client
        self.localizer = localizer or UrlLocalizer(base_path=config.BASE_PATH)
        self.info_builder = info_builder
        self.clock = clock

    async def get_video(
        self,
        video_id: Optional[str],
        base_url: str,
        local: bool = False,
        token_minter=None,
    ) -> NormalizedVideo:
        """Validate, fetch and normalize one video.

        Raises:
            InvalidVideoIdError: If the id is missing or malformed.
            DependencyNotReadyError: If PO tokens are enabled and no minter is ready.
            VideoUnplayableError: If upstream reports the video as not playable.
            UpstreamFetchError: Propagated from the player client.
        """
        if not video_id:
            raise InvalidVideoIdError("Video ID is required")
        if not validate_video_id(video_id):
            raise InvalidVideoIdError("Invalid video ID format")

        if self.config.PO_TOKEN_ENABLED and not token_minter:
            logger.warning(f"Token minter not ready, rejecting request for {video_id}")
            raise DependencyNotReadyError(
                "The token minter is not ready yet. Please try again in a moment."
            )

        raw = await self.player_client.fetch_player_response(video_id)
        info = self.info_builder(raw)
        return self.assemble(raw, info, video_id, base_url, local=local)

    def check_playability(self, info: VideoInfo, video_id: str) -> None:
        status = info.playability_status.get("status")
        if status != PLAYABLE_STATUS:
            reason = info.playability_status.get("reason")
            logger.warning(f"Video {video_id} is not playable ({status}): {reason}")
            raise VideoUnplayableError(reason=reason, status=status)

    def _convert_streams(self, info: VideoInfo, local: bool) -> tuple[list[dict], list[dict]]:
        streaming_data = info.streaming_data or {}

        format_streams = [convert_format_stream(fmt) for fmt in _dicts(streaming_data.get("formats"))]
        adaptive_streams = [
            convert_adaptive_format(fmt) for fmt in _dicts(streaming_data.get("adaptive_formats"))
        ]
        if local:
            for stream in format_streams + adaptive_streams:
                stream["url"] = self.localizer.localize(stream["url"])
        return format_streams, adaptive_streams

    def assemble(
        self,
        raw: Any,
        info: VideoInfo,
        video_id: str,
        base_url: str,
        local: bool = False,
    ) -> NormalizedVideo:
        """Build the document from an already fetched response.

        Raises:
            VideoUnplayableError: If playability is not OK. Nothing else is computed.
        """
        self.check_playability(info, video_id)

        response = PlayerResponse(raw)
        details = response.video_details
        microformat = response.microformat
        now = self.clock()

        published = 0
        published_text = ""
        publish_date = parse_publish_date(response.publish_date)
        if publish_date is not None:
            published = int(publish_date.timestamp())
            published_text = relative_time_string(publish_date, now)

        format_streams, adaptive_streams = self._convert_streams(info, local)
        caption_info = info.captions or {}
        keywords = details.get("keywords")
        timestamp = int(now.timestamp())

        video = NormalizedVideo(
            status=_text(response.playability_status.get("status"), PLAYABLE_STATUS),
            id=_text(details.get("videoId"), video_id),
            title=_text(details.get("title")),
            length_seconds=_text(details.get("lengthSeconds"), "0"),
            keywords=[k for k in keywords if isinstance(k, str)] if isinstance(keywords, list) else [],
            channel_title=_text(details.get("author")),
            channel_id=_text(details.get("channelId")),
            description=_text(details.get("shortDescription")),
            description_html=description_to_html(_text(details.get("shortDescription"))),
            published=published,
            published_text=published_text,
            thumbnail=map_video_thumbnails(response.thumbnails),
            video_thumbnails=[t.to_dict() for t in generate_thumbnails(video_id, base_url)],
            author_thumbnails=generate_author_thumbnails(info.basic_info.get("channel_id")),
            allow_ratings=_flag(details.get("allowRatings"), True),
            view_count=_text(details.get("viewCount"), "0"),
            is_private=_flag(details.get("isPrivate"), False),
            is_unplugged_corpus=_flag(details.get("isUnpluggedCorpus"), False),
            is_live_content=_flag(details.get("isLiveContent"), False),
            storyboards=[level.to_dict() for level in decode_storyboards(response.storyboard_spec, video_id)],
            player_storyboards=parse_player_storyboards(info.storyboards, video_id),
            captions=Captions(caption_tracks=raw_caption_tracks(response.caption_tracks)),
            caption_links=[
                track.to_dict()
                for track in convert_captions(caption_info.get("caption_tracks"), video_id)
            ],
            audio_tracks=[
                track.to_dict()
                for track in audio_tracks(response.audio_tracks, response.caption_tracks)
            ],
            default_video_language=_text(microformat.get("defaultLanguage"), "English"),
            default_video_language_code=_text(microformat.get("defaultLanguage"), "en"),
            fetched_ts=timestamp,
            expires_in_seconds=_text(response.streaming_data.get("expiresInSeconds"), "21540"),
            formats=[raw_format(fmt) for fmt in response.formats],
            format_streams=format_streams,
            is_gcr=False,
            adaptive_formats=[raw_adaptive_format(fmt) for fmt in response.adaptive_formats],
            adaptive_format_streams=adaptive_streams,
            recommended_videos=[],
            available_at=timestamp,
        )
        logger.info(
            f"Assembled video {video_id}: {len(video.formats)} formats, "
            f"{len(video.adaptive_formats)} adaptive formats, {len(video.storyboards)} storyboard levels"
        )
        return video
