"""Protocol for departure formatting."""

from datetime import datetime
from typing import Protocol

from no_more_trama.domain.models.departure import Departure


class DepartureFormatterProtocol(Protocol):
    """Protocol for turning departures into display values."""

    def minutes_until(self, departure: Departure, now: datetime | None = None) -> int:
        """Whole minutes until the departure, never negative."""
        ...

    def transport_type(self, category: str | None) -> str:
        """Classify a category into tram, bus, train or default."""
        ...

    def urgency(self, minutes: int) -> str:
        """Urgency class for a departure leaving in ``minutes``."""
        ...

    def format_clock(self, time: datetime, seconds: bool = False) -> str:
        """Format a time of day in the display timezone."""
        ...
