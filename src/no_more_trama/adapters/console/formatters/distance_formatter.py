"""Formatter for distances."""

import math


def format_distance(meters: float) -> str:
    """Format a distance as "350m away" or "1.2km away"."""
    if meters < 1000:
        return f"{math.floor(meters + 0.5)}m away"
    return f"{meters / 1000:.1f}km away"
