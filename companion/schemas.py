from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing snake_case fields under camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class Captions(CamelModel):
    caption_tracks: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Upstream-fidelity caption tracks (baseUrl, name, vssId, languageCode, isTranslatable)"
    )


class NormalizedVideo(CamelModel):
    """Public video document. Every key is always present.

    Bitrates, content lengths, view counts and lengths stay decimal strings so
    clients never lose precision.
    """

    status: str = Field(default="OK", description="Upstream playability status")
    id: str = Field(default="", description="Video id")
    title: str = Field(default="")
    length_seconds: str = Field(default="0", description="Duration in seconds, as a decimal string")
    keywords: List[str] = Field(default_factory=list)
    channel_title: str = Field(default="")
    channel_id: str = Field(default="")
    description: str = Field(default="")
    description_html: str = Field(default="", description="Escaped description with links")
    published: int = Field(default=0, description="Publish time, epoch seconds")
    published_text: str = Field(default="", description="Relative publish time, e.g. '2 weeks ago'")
    thumbnail: List[Dict[str, Any]] = Field(
        default_factory=list, description="Upstream thumbnails (url, width, height)"
    )
    video_thumbnails: List[Dict[str, Any]] = Field(
        default_factory=list, description="Locally served thumbnails by quality"
    )
    author_thumbnails: List[Dict[str, Any]] = Field(default_factory=list)
    allow_ratings: bool = Field(default=True)
    view_count: str = Field(default="0", description="View count, as a decimal string")
    is_private: bool = Field(default=False)
    is_unplugged_corpus: bool = Field(default=False)
    is_live_content: bool = Field(default=False)
    storyboards: List[Dict[str, Any]] = Field(
        default_factory=list, description="Storyboard levels decoded from the spec string"
    )
    player_storyboards: List[Dict[str, Any]] = Field(
        default_factory=list, description="Storyboards from the structured board list"
    )
    captions: Captions = Field(default_factory=Captions)
    caption_links: List[Dict[str, Any]] = Field(
        default_factory=list, description="Caption tracks routed through the local captions endpoint"
    )
    audio_tracks: List[Dict[str, Any]] = Field(default_factory=list)
    default_video_language: str = Field(default="English")
    default_video_language_code: str = Field(default="en")
    fetched_ts: int = Field(default=0, alias="fetchedTS", description="Fetch time, epoch seconds")
    expires_in_seconds: str = Field(default="21540")
    formats: List[Dict[str, Any]] = Field(
        default_factory=list, description="Upstream-fidelity combined formats"
    )
    format_streams: List[Dict[str, Any]] = Field(
        default_factory=list, description="Cleaned combined formats"
    )
    is_gcr: bool = Field(default=False, alias="isGCR")
    adaptive_formats: List[Dict[str, Any]] = Field(
        default_factory=list, description="Upstream-fidelity adaptive formats"
    )
    adaptive_format_streams: List[Dict[str, Any]] = Field(
        default_factory=list, description="Cleaned adaptive formats"
    )
    recommended_videos: List[Dict[str, Any]] = Field(
        default_factory=list, description="Reserved; related videos are not resolved"
    )
    available_at: int = Field(default=0, description="Time the document was produced, epoch seconds")
