"""Human-readable durations."""

from __future__ import annotations


def format_time(seconds: float) -> str:
    """Format seconds as ``M:SS``, or ``H:MM:SS`` from one hour on.

    Fractions are truncated and negative values are treated as zero.
    """

    total = max(int(seconds), 0)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
