"""Video id validation."""

import re

VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{11}")


def validate_video_id(video_id) -> bool:
    """Check that ``video_id`` is an 11-character YouTube video id."""
    return isinstance(video_id, str) and bool(VIDEO_ID_PATTERN.fullmatch(video_id))
