"""Display helpers for descriptions and publish dates."""

import re
from datetime import datetime, timezone
from typing import Optional

# URLs and hashtags are linked in one pass so a "#" inside a URL stays part of it.
# Hashtags are ASCII word characters only.
LINK_PATTERN = re.compile(r"(?P<url>https?://[^\s]+)|#(?P<tag>(?a:\w+))")
SCHEME_PATTERN = re.compile(r"^https?://")

# (unit name, length in seconds), largest first
_TIME_UNITS = [
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
]


def _link(match: re.Match) -> str:
    url = match.group("url")
    if url:
        return f'<a href="{url}">{SCHEME_PATTERN.sub("", url)}</a>'
    tag = match.group("tag")
    return f'<a href="/hashtag/{tag}">#{tag}</a>'


def description_to_html(description: Optional[str]) -> str:
    """Escape a plain-text description and turn URLs and hashtags into links.

    Escaping happens first so the anchors inserted afterwards are neither
    escaped again nor mixed up with markup from the description itself.

    Examples:
        >>> description_to_html("<b> #tag")
        '&lt;b&gt; <a href="/hashtag/tag">#tag</a>'
    """
    if not description:
        return ""

    html = (
        description.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
    return LINK_PATTERN.sub(_link, html)


def relative_time_string(date: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago ``date`` was, e.g. ``"3 weeks ago"``.

    Months are 30 days and years 365 days; the result is for display only.
    Dates in the future read as "just now".
    """
    now = now or datetime.now(timezone.utc)
    elapsed = int((now - date).total_seconds())

    for unit, seconds in _TIME_UNITS:
        amount = elapsed // seconds
        if amount > 0:
            return f"{amount} {unit}{'s' if amount > 1 else ''} ago"
    return "just now"


def parse_publish_date(value) -> Optional[datetime]:
    """Parse an ISO-8601 publish date; date-only values are UTC midnight.

    Returns None when the value is missing or unparseable.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
