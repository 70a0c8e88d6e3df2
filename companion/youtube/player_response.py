"""Safe accessors over the upstream player response.

The player response is an untyped, loosely versioned document. Nothing in it
is guaranteed to be present, so every path the service depends on is read
through exactly one accessor here. Accessors never raise: a missing key or a
value of the wrong type yields an empty dict, an empty list or None.
"""

from typing import Any


def dig(data: Any, *path: str, default: Any = None) -> Any:
    """Walk nested dicts along ``path``, returning ``default`` on any miss.

    Examples:
        >>> dig({"a": {"b": 1}}, "a", "b")
        1
        >>> dig({"a": []}, "a", "b", default=0)
        0
    """
    current = data
    for key in path:
        if not isinstance(current, dict):
            return default
        current = current.get(key)
        if current is None:
            return default
    return current


def extract_text(value: Any) -> str | None:
    """Read a display string from ``simpleText``/``runs``/``text`` shapes."""
    if isinstance(value, str):
        return value or None
    if not isinstance(value, dict):
        return None
    if value.get("simpleText"):
        return value["simpleText"]
    runs = value.get("runs")
    if isinstance(runs, list):
        text = "".join(run.get("text", "") for run in runs if isinstance(run, dict))
        return text or None
    if value.get("text"):
        return value["text"]
    return None


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


class PlayerResponse:
    """Read-only view of a raw player response.

    Example:
        response = PlayerResponse(raw)
        response.playability_status.get("status")  # "OK"
        response.storyboard_spec  # "https://...|48#27#100#10#10#0#default#rs$..."
    """

    STORYBOARD_SPEC_RENDERER = "playerStoryboardSpecRenderer"

    def __init__(self, raw: Any):
        self.raw = _as_dict(raw)

    @property
    def video_details(self) -> dict:
        return _as_dict(self.raw.get("videoDetails"))

    @property
    def microformat(self) -> dict:
        return _as_dict(dig(self.raw, "microformat", "playerMicroformatRenderer"))

    @property
    def playability_status(self) -> dict:
        return _as_dict(self.raw.get("playabilityStatus"))

    @property
    def streaming_data(self) -> dict:
        return _as_dict(self.raw.get("streamingData"))

    @property
    def formats(self) -> list[dict]:
        return _as_list(self.streaming_data.get("formats"))

    @property
    def adaptive_formats(self) -> list[dict]:
        return _as_list(self.streaming_data.get("adaptiveFormats"))

    @property
    def caption_tracklist(self) -> dict:
        return _as_dict(dig(self.raw, "captions", "playerCaptionsTracklistRenderer"))

    @property
    def caption_tracks(self) -> list[dict]:
        return _as_list(self.caption_tracklist.get("captionTracks"))

    @property
    def audio_tracks(self) -> list[dict] | None:
        """Explicit audio track list, or None when upstream omits it."""
        tracks = self.caption_tracklist.get("audioTracks")
        if not isinstance(tracks, list):
            return None
        return _as_list(tracks)

    @property
    def storyboard_spec(self) -> str | None:
        """Spec string of the recognized storyboard renderer.

        Live streams use a different renderer whose spec has another grammar;
        those are reported as None.
        """
        spec = dig(self.raw, "storyboards", self.STORYBOARD_SPEC_RENDERER, "spec")
        return spec if isinstance(spec, str) and spec else None

    @property
    def thumbnails(self) -> list[dict]:
        return _as_list(dig(self.video_details, "thumbnail", "thumbnails"))

    @property
    def publish_date(self) -> str | None:
        value = self.microformat.get("publishDate")
        return value if isinstance(value, str) and value else None
