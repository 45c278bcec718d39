"""Formatter for departure rows."""

import math
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from no_more_trama.adapters.config.app_config import AppConfig
from no_more_trama.domain.contracts.departure_formatter import DepartureFormatterProtocol
from no_more_trama.domain.models.departure import Departure

URGENT_MINUTES = 2
SOON_MINUTES = 5

# Checked in order; the first matching group wins
_TRANSPORT_TYPE_MARKERS = (
    ("tram", ("tram", "str")),
    ("bus", ("bus", "nfb")),
    ("train", ("train", "zug", "ic", "ir", "re", "s")),
)


class DepartureFormatter(DepartureFormatterProtocol):
    """Formatter for departure times and line badges based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone settings.
        """
        self.config = config

    def minutes_until(self, departure: Departure, now: datetime | None = None) -> int:
        """Whole minutes until departure, rounded half up, 0 for departures in the past."""
        now = now or datetime.now(UTC)
        diff_minutes = (departure.time - now).total_seconds() / 60
        return max(0, math.floor(diff_minutes + 0.5))

    def transport_type(self, category: str | None) -> str:
        """Classify a category (e.g. "T", "B", "S", "IR") as tram, bus, train or default."""
        if not category:
            return "default"

        cat = category.lower()
        for transport_type, markers in _TRANSPORT_TYPE_MARKERS:
            if any(marker in cat for marker in markers):
                return transport_type
        return "default"

    def urgency(self, minutes: int) -> str:
        """Return 'urgent', 'soon' or an empty string."""
        if minutes <= URGENT_MINUTES:
            return "urgent"
        if minutes <= SOON_MINUTES:
            return "soon"
        return ""

    def format_clock(self, time: datetime, seconds: bool = False) -> str:
        """Format time as HH:MM (or HH:MM:SS) in the configured timezone."""
        pattern = "%H:%M:%S" if seconds else "%H:%M"
        return time.astimezone(ZoneInfo(self.config.timezone)).strftime(pattern)
