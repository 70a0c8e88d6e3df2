"""Data classes for entities derived from a player response."""

from dataclasses import dataclass, field


@dataclass
class Thumbnail:
    """A synthesized thumbnail URL for one quality tag."""

    quality: str
    url: str
    width: int
    height: int

    def to_dict(self) -> dict:
        return {
            "quality": self.quality,
            "url": self.url,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class StoryboardLevel:
    """One zoom level of a storyboard grid.

    Dimension fields keep the verbatim tokens of the spec string.
    """

    width: str
    height: str
    thumbs_count: str
    columns: str
    rows: str
    interval: str
    storyboard_count: int
    urls: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "thumbsCount": self.thumbs_count,
            "columns": self.columns,
            "rows": self.rows,
            "interval": self.interval,
            "storyboardCount": self.storyboard_count,
            "url": list(self.urls),
        }


@dataclass
class CaptionTrack:
    """A caption track routed through the local captions endpoint."""

    label: str
    language_code: str
    url: str

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "language_code": self.language_code,
            "url": self.url,
        }


@dataclass
class AudioTrack:
    """A distinct dubbed-audio language."""

    language_name: str | None
    language_code: str | None

    def to_dict(self) -> dict:
        return {
            "languageName": self.language_name,
            "languageCode": self.language_code,
        }
