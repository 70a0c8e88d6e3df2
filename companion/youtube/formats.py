"""Stream format conversion.

Two independent representations are produced from upstream stream data:

* cleaned records (``convert_format_stream``/``convert_adaptive_format``)
  read the snake_case normalized-info view and emit a language-neutral
  schema with stringified numerics;
* passthrough records (``raw_format``/``raw_adaptive_format``) read the raw
  ``streamingData`` entries and keep upstream field names and value types,
  adding only defaults and the derived ``qualityOrdinal``.

The two only share :func:`parse_mime_type`.
"""

import re

VIDEO_CONTAINER_PATTERN = re.compile(r"^video/(\w+)")
MEDIA_CONTAINER_PATTERN = re.compile(r"^(?:video|audio)/(\w+)")
CODECS_PATTERN = re.compile(r'codecs="([^"]+)"')

DEFAULT_PROJECTION_TYPE = "RECTANGULAR"
QUALITY_ORDINAL_PREFIX = "QUALITY_ORDINAL_"
QUALITY_ORDINAL_UNKNOWN = QUALITY_ORDINAL_PREFIX + "UNKNOWN"

# Upstream fields copied verbatim into both passthrough shapes
_PASSTHROUGH_FIELDS = (
    "itag",
    "url",
    "mimeType",
    "bitrate",
    "lastModified",
    "contentLength",
    "quality",
    "fps",
    "qualityLabel",
    "averageBitrate",
    "approxDurationMs",
)


def parse_mime_type(mime_type, container_pattern=MEDIA_CONTAINER_PATTERN) -> tuple[str | None, str | None]:
    """Split a mime string into (container, encoding).

    Examples:
        >>> parse_mime_type('video/mp4; codecs="avc1.640028"')
        ('mp4', 'avc1.640028')
        >>> parse_mime_type('audio/webm; codecs="opus,foo"')
        ('webm', 'opus')
    """
    if not isinstance(mime_type, str):
        return None, None

    container = None
    match = container_pattern.match(mime_type)
    if match:
        container = match.group(1)

    encoding = None
    match = CODECS_PATTERN.search(mime_type)
    if match:
        encoding = match.group(1).split(",")[0].strip()

    return container, encoding


def _byte_range(value) -> str | None:
    if not isinstance(value, dict):
        return None
    return f"{value.get('start')}-{value.get('end')}"


def _stream_url(fmt: dict) -> str:
    url = fmt.get("url")
    return url if isinstance(url, str) else ""


def _apply_common_fields(result: dict, fmt: dict, container_pattern) -> None:
    if fmt.get("fps"):
        result["fps"] = fmt["fps"]
    if fmt.get("width") and fmt.get("height"):
        result["size"] = f"{fmt['width']}x{fmt['height']}"
    if fmt.get("quality_label"):
        result["qualityLabel"] = fmt["quality_label"]
        result["resolution"] = fmt["quality_label"]

    container, encoding = parse_mime_type(fmt.get("mime_type"), container_pattern)
    if container:
        result["container"] = container
    if encoding:
        result["encoding"] = encoding


def convert_format_stream(fmt: dict) -> dict:
    """Convert a combined (video+audio) format from the normalized-info view."""
    result = {
        "url": _stream_url(fmt),
        "itag": str(fmt.get("itag") or "0"),
        "type": fmt.get("mime_type") or "",
        "quality": fmt.get("quality") or "medium",
        "bitrate": str(fmt.get("bitrate") or "0"),
    }
    _apply_common_fields(result, fmt, VIDEO_CONTAINER_PATTERN)
    return result


def convert_adaptive_format(fmt: dict) -> dict:
    """Convert an adaptive (video-only or audio-only) format from the normalized-info view."""
    result = {
        "bitrate": str(fmt.get("bitrate") or "0"),
        "url": _stream_url(fmt),
        "itag": str(fmt.get("itag") or "0"),
        "type": fmt.get("mime_type") or "",
        "projectionType": fmt.get("projection_type") or DEFAULT_PROJECTION_TYPE,
    }

    init = _byte_range(fmt.get("init_range"))
    if init:
        result["init"] = init
    index = _byte_range(fmt.get("index_range"))
    if index:
        result["index"] = index
    if fmt.get("content_length"):
        result["clen"] = str(fmt["content_length"])
    if fmt.get("last_modified"):
        result["lmt"] = str(fmt["last_modified"])

    _apply_common_fields(result, fmt, MEDIA_CONTAINER_PATTERN)

    if fmt.get("audio_quality"):
        result["audioQuality"] = fmt["audio_quality"]
    if fmt.get("audio_sample_rate"):
        try:
            result["audioSampleRate"] = int(fmt["audio_sample_rate"])
        except (TypeError, ValueError):
            pass
    if fmt.get("audio_channels"):
        result["audioChannels"] = fmt["audio_channels"]
    if fmt.get("color_info"):
        result["colorInfo"] = fmt["color_info"]

    return result


def quality_ordinal(quality_label) -> str | None:
    """Derive the coarse quality category from a label such as ``720p60``.

    The first run of digits is dropped and the first ``p`` upper-cased.
    """
    if not isinstance(quality_label, str) or not quality_label:
        return None
    label = re.sub(r"\d+", "", quality_label, count=1).replace("p", "P", 1)
    return QUALITY_ORDINAL_PREFIX + label


def _passthrough_base(fmt: dict) -> dict:
    result = {key: fmt[key] for key in _PASSTHROUGH_FIELDS if key in fmt}
    result["width"] = fmt.get("width") or 0
    result["height"] = fmt.get("height") or 0
    result["projectionType"] = fmt.get("projectionType") or DEFAULT_PROJECTION_TYPE

    for key in ("audioQuality", "audioSampleRate", "audioChannels"):
        if fmt.get(key):
            result[key] = fmt[key]
    return result


def raw_format(fmt: dict) -> dict:
    """Upstream-fidelity record for a combined format."""
    result = _passthrough_base(fmt)
    ordinal = quality_ordinal(fmt.get("qualityLabel"))
    if ordinal:
        result["qualityOrdinal"] = ordinal
    return result


def raw_adaptive_format(fmt: dict) -> dict:
    """Upstream-fidelity record for an adaptive format."""
    result = _passthrough_base(fmt)

    for key in ("initRange", "indexRange"):
        value = fmt.get(key)
        if isinstance(value, dict):
            result[key] = {"start": value.get("start"), "end": value.get("end")}

    if fmt.get("colorInfo"):
        result["colorInfo"] = fmt["colorInfo"]
    if fmt.get("highReplication"):
        result["highReplication"] = fmt["highReplication"]
    if fmt.get("loudnessDb") is not None:
        result["loudnessDb"] = fmt["loudnessDb"]

    result["qualityOrdinal"] = quality_ordinal(fmt.get("qualityLabel")) or QUALITY_ORDINAL_UNKNOWN
    return result
