"""Caption and audio track mapping."""

import logging
from urllib.parse import quote

from .models import AudioTrack, CaptionTrack
from .player_response import extract_text

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def convert_captions(caption_tracks, video_id: str) -> list[CaptionTrack]:
    """Map caption tracks from the normalized-info view to local caption links.

    Args:
        caption_tracks: ``captions.caption_tracks`` of the info view.
        video_id: Video the captions belong to.

    Returns:
        CaptionTrack list whose URLs point at the local captions endpoint.
    """
    if not isinstance(caption_tracks, list):
        return []

    captions = []
    for track in caption_tracks:
        if not isinstance(track, dict):
            continue
        name = extract_text(track.get("name"))
        language_code = track.get("language_code")
        captions.append(
            CaptionTrack(
                label=name or language_code or "Unknown",
                language_code=language_code or "en",
                url=(
                    f"/api/v1/captions/{video_id}"
                    f"?label={quote(name or language_code or '', safe=_URI_COMPONENT_SAFE)}"
                ),
            )
        )
    return captions


def raw_caption_tracks(caption_tracks: list[dict]) -> list[dict]:
    """Upstream-fidelity caption list from ``playerCaptionsTracklistRenderer``."""
    tracks = []
    for track in caption_tracks:
        is_translatable = track.get("isTranslatable")
        tracks.append({
            "baseUrl": track.get("baseUrl"),
            "name": extract_text(track.get("name")) or track.get("languageCode"),
            "vssId": track.get("vssId") or "",
            "languageCode": track.get("languageCode"),
            "isTranslatable": True if is_translatable is None else is_translatable,
        })
    return tracks


def audio_tracks(explicit_tracks: list[dict] | None, caption_tracks: list[dict]) -> list[AudioTrack]:
    """List distinct audio languages.

    The explicit upstream audio track list wins whenever it is present, even
    when empty. Otherwise languages are derived from the caption tracks,
    deduplicated by language code in first-seen order.
    """
    if explicit_tracks is not None:
        return [
            AudioTrack(
                language_name=track.get("displayName") or track.get("id"),
                language_code=track.get("id"),
            )
            for track in explicit_tracks
        ]

    seen = set()
    tracks = []
    for track in caption_tracks:
        language_code = track.get("languageCode")
        if language_code in seen:
            continue
        seen.add(language_code)
        tracks.append(
            AudioTrack(
                language_name=extract_text(track.get("name")) or language_code,
                language_code=language_code,
            )
        )
    if tracks:
        logger.debug(f"Derived {len(tracks)} audio tracks from caption languages")
    return tracks
