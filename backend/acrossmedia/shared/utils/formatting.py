"""
Display formatting for video metadata.

    format_duration("PT1H2M3S")  → "1:02:03"
    format_duration("PT5M9S")    → "5:09"
    format_views(1500)           → "1.5K"
    format_views(2000000)        → "2M"
"""

import re
from typing import Union

# YouTube reports durations as ISO-8601 "PT#H#M#S" with optional parts
_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


def format_duration(duration: str | None) -> str:
    """
    Convert a "PT#H#M#S" duration to "H:MM:SS", or "M:SS" without hours.

    Minutes are zero-padded only when hours are shown; seconds always
    have two digits. Anything that does not match renders as "0:00".
    """
    if not duration:
        return "0:00"

    match = _DURATION_PATTERN.search(duration)
    if not match:
        return "0:00"

    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def _compact(value: float, suffix: str) -> str:
    text = f"{value:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text}{suffix}"


def format_views(views: Union[int, str, None]) -> str:
    """
    Render a raw view count for display.

    ≥ 1,000,000 → "{n/1e6:.1f}M", ≥ 1,000 → "{n/1e3:.1f}K", else the
    integer itself; a trailing ".0" is dropped. Unparseable input is "0".
    """
    try:
        count = int(views)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return "0"

    if count >= 1_000_000:
        return _compact(count / 1_000_000, "M")
    if count >= 1_000:
        return _compact(count / 1_000, "K")
    return str(count)
