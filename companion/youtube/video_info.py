"""Normalized-info view of a player response.

The cleaned converters read snake_case records rather than the raw upstream
shape. This module derives that view: playability, basic details, streaming
formats, caption tracks and the structured storyboard board list.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional

from .player_response import PlayerResponse, dig, extract_text

logger = logging.getLogger(__name__)

# raw camelCase key -> normalized snake_case key
_FORMAT_FIELDS = {
    "itag": "itag",
    "url": "url",
    "mimeType": "mime_type",
    "bitrate": "bitrate",
    "averageBitrate": "average_bitrate",
    "width": "width",
    "height": "height",
    "fps": "fps",
    "quality": "quality",
    "qualityLabel": "quality_label",
    "projectionType": "projection_type",
    "contentLength": "content_length",
    "lastModified": "last_modified",
    "approxDurationMs": "approx_duration_ms",
    "audioQuality": "audio_quality",
    "audioSampleRate": "audio_sample_rate",
    "audioChannels": "audio_channels",
}

_COLOR_INFO_FIELDS = {
    "primaries": "primaries",
    "transferCharacteristics": "transfer_characteristics",
    "matrixCoefficients": "matrix_coefficients",
}


@dataclass
class VideoInfo:
    """Snake_case view consumed by the cleaned converters."""

    playability_status: dict = field(default_factory=dict)
    basic_info: dict = field(default_factory=dict)
    streaming_data: Optional[dict] = None
    captions: Optional[dict] = None
    storyboards: Optional[dict] = None


def _normalize_range(value) -> Optional[dict]:
    if not isinstance(value, dict):
        return None
    return {"start": value.get("start"), "end": value.get("end")}


def normalize_format(fmt: dict) -> dict:
    """Rename one raw streaming format to snake_case keys."""
    result = {
        target: fmt[source]
        for source, target in _FORMAT_FIELDS.items()
        if fmt.get(source) is not None
    }
    init_range = _normalize_range(fmt.get("initRange"))
    if init_range:
        result["init_range"] = init_range
    index_range = _normalize_range(fmt.get("indexRange"))
    if index_range:
        result["index_range"] = index_range

    color_info = fmt.get("colorInfo")
    if isinstance(color_info, dict):
        result["color_info"] = {
            target: color_info[source]
            for source, target in _COLOR_INFO_FIELDS.items()
            if source in color_info
        }
    return result


def build_storyboard_boards(spec: Optional[str]) -> Optional[dict]:
    """Parse a storyboard spec into the structured board list.

    Every ``|``-separated field after the template is a board. Returns None
    when there is no spec.
    """
    if not spec:
        return None

    parts = spec.split("|")
    template = parts[0]
    boards = []
    for level, part in enumerate(parts[1:]):
        fields = part.split("#")
        if len(fields) < 8:
            continue
        width, height, count, columns, rows, interval, name, sigh = fields[:8]
        try:
            width, height, count = int(width), int(height), int(count)
            columns, rows, interval = int(columns), int(rows), int(interval)
        except ValueError:
            continue

        template_url = template.replace("$L", str(level)).replace("$N", name)
        if sigh:
            separator = "&" if "?" in template_url else "?"
            template_url = f"{template_url}{separator}sigh={sigh}"

        tiles = columns * rows
        boards.append({
            "template_url": template_url,
            "thumbnail_width": width,
            "thumbnail_height": height,
            "thumbnail_count": count,
            "interval": interval,
            "columns": columns,
            "rows": rows,
            "storyboard_count": math.ceil(count / tiles) if tiles > 0 else 1,
        })
    return {"type": "PlayerStoryboardSpec", "boards": boards}


def build_video_info(raw) -> VideoInfo:
    """Derive the normalized-info view from a raw player response."""
    response = PlayerResponse(raw)
    status = response.playability_status
    details = response.video_details

    reason = status.get("reason") or extract_text(
        dig(status, "errorScreen", "playerErrorMessageRenderer", "reason")
    )

    info = VideoInfo(
        playability_status={"status": status.get("status"), "reason": reason},
        basic_info={
            "id": details.get("videoId"),
            "title": details.get("title"),
            "channel_id": details.get("channelId"),
            "author": details.get("author"),
            "duration": details.get("lengthSeconds"),
            "view_count": details.get("viewCount"),
            "is_live_content": details.get("isLiveContent"),
        },
    )

    if response.streaming_data:
        info.streaming_data = {
            "expires_in_seconds": response.streaming_data.get("expiresInSeconds"),
            "formats": [normalize_format(fmt) for fmt in response.formats],
            "adaptive_formats": [normalize_format(fmt) for fmt in response.adaptive_formats],
        }

    if response.caption_tracklist:
        info.captions = {
            "caption_tracks": [
                {
                    "base_url": track.get("baseUrl"),
                    "name": {"text": extract_text(track.get("name"))},
                    "language_code": track.get("languageCode"),
                    "vss_id": track.get("vssId"),
                    "is_translatable": track.get("isTranslatable"),
                }
                for track in response.caption_tracks
            ]
        }

    info.storyboards = build_storyboard_boards(response.storyboard_spec)
    logger.debug(f"Built video info for {info.basic_info.get('id')}")
    return info
