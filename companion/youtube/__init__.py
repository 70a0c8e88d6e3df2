"""Translation of upstream player responses into the public video document."""

from .assembler import VideoAssembler
from .innertube import InnertubeClient
from .localize import UrlLocalizer
from .models import AudioTrack, CaptionTrack, StoryboardLevel, Thumbnail
from .player_response import PlayerResponse
from .video_info import VideoInfo, build_video_info

__all__ = [
    "VideoAssembler",
    "InnertubeClient",
    "UrlLocalizer",
    "PlayerResponse",
    "VideoInfo",
    "build_video_info",
    "AudioTrack",
    "CaptionTrack",
    "StoryboardLevel",
    "Thumbnail",
]
