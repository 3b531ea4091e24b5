"""
Formatting utilities for display.

Used by the API, the CLI and the pace calculator itself.
All formatters truncate fractional seconds, they never round.
"""

import math
import re

_CLOCK_RE = re.compile(r"^\s*(\d+)(?::(\d{1,2}))(?::(\d{1,2}))?\s*$")


def format_pace(seconds_per_km: float) -> str:
    """
    Format pace as 'M:SS'.

    Args:
        seconds_per_km: Pace in seconds per km (e.g., 285.0)

    Returns:
        Formatted string (e.g., '4:45')
    """
    minutes = math.floor(seconds_per_km / 60)
    seconds = math.floor(seconds_per_km % 60)

    return f"{minutes}:{seconds:02d}"


def format_clock(seconds: float) -> str:
    """
    Format elapsed time as 'HH:MM:SS'.

    Hours are not wrapped at 24.

    Args:
        seconds: Elapsed time in seconds (e.g., 1500.7)

    Returns:
        Formatted string (e.g., '00:25:00')
    """
    total = math.floor(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)

    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def parse_clock(text: str) -> int:
    """Parse clock text to whole seconds.

    Formats:
        "00:25:00" → 1500
        "1:02:40"  → 3760
        "52:05"    → 3125

    Raises:
        ValueError: If the text is not a valid clock value
    """
    m = _CLOCK_RE.match(text or "")
    if not m:
        raise ValueError(f"Invalid time: {text!r} (expected HH:MM:SS or MM:SS)")

    first, second, third = m.groups()
    if third is None:
        hours, minutes, secs = 0, int(first), int(second)
        if secs >= 60:
            raise ValueError(f"Invalid time: {text!r} (seconds must be < 60)")
    else:
        hours, minutes, secs = int(first), int(second), int(third)
        if minutes >= 60 or secs >= 60:
            raise ValueError(f"Invalid time: {text!r} (minutes and seconds must be < 60)")

    return hours * 3600 + minutes * 60 + secs
