"""Thumbnail descriptors for videos and channels."""

from .models import Thumbnail

# (quality, file name, width, height), in output order
VIDEO_THUMBNAIL_VARIANTS = [
    ("maxres", "maxres.jpg", 1280, 720),
    ("maxresdefault", "maxresdefault.jpg", 1280, 720),
    ("sddefault", "sddefault.jpg", 640, 480),
    ("high", "hqdefault.jpg", 480, 360),
    ("medium", "mqdefault.jpg", 320, 180),
    ("default", "default.jpg", 120, 90),
    ("start", "1.jpg", 120, 90),
    ("middle", "2.jpg", 120, 90),
    ("end", "3.jpg", 120, 90),
]

AUTHOR_THUMBNAIL_SIZES = [32, 48, 76, 100, 176, 512]
AUTHOR_THUMBNAIL_URL = "https://yt3.ggpht.com/a/default-user=s{size}-c-k-c0x00ffffff-no-rj"


def generate_thumbnails(video_id: str, base_url: str) -> list[Thumbnail]:
    """Build the fixed set of nine thumbnails served under ``{base_url}/vi/``."""
    return [
        Thumbnail(
            quality=quality,
            url=f"{base_url}/vi/{video_id}/{file_name}",
            width=width,
            height=height,
        )
        for quality, file_name, width, height in VIDEO_THUMBNAIL_VARIANTS
    ]


def generate_author_thumbnails(channel_id: str | None) -> list[dict]:
    """Square default avatars for a channel; empty when the channel is unknown."""
    if not channel_id:
        return []
    return [
        {"url": AUTHOR_THUMBNAIL_URL.format(size=size), "width": size, "height": size}
        for size in AUTHOR_THUMBNAIL_SIZES
    ]


def map_video_thumbnails(thumbnails: list[dict]) -> list[dict]:
    """Pass upstream ``videoDetails`` thumbnails through as url/width/height."""
    return [
        {
            "url": thumb.get("url"),
            "width": thumb.get("width"),
            "height": thumb.get("height"),
        }
        for thumb in thumbnails
    ]
