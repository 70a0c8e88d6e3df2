"""Storyboard decoding.

Upstream describes scrub-preview storyboards in a compact string::

    <template>|<unused>|<unused>|w#h#count#cols#rows#interval#name#sigh|...

Field 0 is a URL template holding a ``$L`` (level index) and a ``$N`` (name)
placeholder; every field from index 3 onward describes one zoom level.
All knowledge of that grammar lives in :func:`parse_storyboard_spec`.
"""

import logging
import math
from dataclasses import dataclass, field

from .models import StoryboardLevel

logger = logging.getLogger(__name__)

LEVEL_INDEX_PLACEHOLDER = "$L"
NAME_PLACEHOLDER = "$N"
FIRST_LEVEL_FIELD = 3
LEVEL_SUBFIELDS = 8


@dataclass
class StoryboardSpec:
    """Result of parsing a storyboard spec string."""

    template: str
    # (spec field index, "#"-split subfields) for every level field
    levels: list[tuple[int, list[str]]] = field(default_factory=list)


def parse_storyboard_spec(spec) -> StoryboardSpec | None:
    """Split a storyboard spec string into its template and level fields.

    Returns None when the spec is absent or not in the recognized format.
    """
    if not isinstance(spec, str) or not spec:
        return None

    parts = spec.split("|")
    template = parts[0]
    if not template:
        return None

    levels = [
        (index, parts[index].split("#"))
        for index in range(FIRST_LEVEL_FIELD, len(parts))
    ]
    return StoryboardSpec(template=template, levels=levels)


def _build_level(template: str, index: int, subfields: list[str]) -> StoryboardLevel | None:
    width, height, count, columns, rows, interval, name, sigh = subfields[:LEVEL_SUBFIELDS]

    try:
        tiles_per_board = int(columns) * int(rows)
        total = int(count)
    except ValueError:
        logger.debug(f"Skipping storyboard level {index}: non-numeric dimensions")
        return None
    if tiles_per_board <= 0:
        logger.debug(f"Skipping storyboard level {index}: empty grid")
        return None

    storyboard_count = math.ceil(total / tiles_per_board)
    level_url = template.replace(LEVEL_INDEX_PLACEHOLDER, str(index - FIRST_LEVEL_FIELD), 1)
    level_url = level_url.replace(NAME_PLACEHOLDER, name, 1)

    urls = []
    for board in range(storyboard_count):
        url = f"{level_url}{board}"
        if sigh:
            url += f"&sigh={sigh}"
        urls.append(url)

    return StoryboardLevel(
        width=width,
        height=height,
        thumbs_count=count,
        columns=columns,
        rows=rows,
        interval=interval,
        storyboard_count=storyboard_count,
        urls=urls,
    )


def decode_storyboards(spec, video_id: str) -> list[StoryboardLevel]:
    """Expand a storyboard spec string into levels with per-board URLs.

    Args:
        spec: Raw spec string from the player response (may be None).
        video_id: Video the storyboards belong to, used for logging only.

    Returns:
        One StoryboardLevel per well-formed level field; an empty list when
        the spec is missing or unsupported. Malformed levels are skipped.
    """
    parsed = parse_storyboard_spec(spec)
    if parsed is None:
        return []

    levels = []
    for index, subfields in parsed.levels:
        if len(subfields) < LEVEL_SUBFIELDS:
            logger.debug(
                f"Skipping storyboard level {index} for {video_id}: "
                f"{len(subfields)} of {LEVEL_SUBFIELDS} fields"
            )
            continue
        level = _build_level(parsed.template, index, subfields)
        if level is not None:
            levels.append(level)
    return levels


def parse_player_storyboards(storyboards, video_id: str) -> list[dict]:
    """Describe boards from the structured storyboard view.

    This representation is independent of :func:`decode_storyboards`: it
    reads the already-structured board list, not the spec string.
    """
    if not isinstance(storyboards, dict):
        return []
    if storyboards.get("type") != "PlayerStoryboardSpec" or not storyboards.get("boards"):
        return []

    result = []
    for board in storyboards["boards"]:
        if not isinstance(board, dict) or not board.get("template_url"):
            continue
        result.append({
            "url": (
                f"/api/v1/storyboards/{video_id}"
                f"?width={board.get('thumbnail_width')}&height={board.get('thumbnail_height')}"
            ),
            "templateUrl": board["template_url"],
            "width": board.get("thumbnail_width") or 0,
            "height": board.get("thumbnail_height") or 0,
            "count": board.get("thumbnail_count") or 0,
            "interval": board.get("interval") or 0,
            "storyboardWidth": board.get("columns") or 0,
            "storyboardHeight": board.get("rows") or 0,
            "storyboardCount": board.get("storyboard_count") or 1,
        })
    return result
