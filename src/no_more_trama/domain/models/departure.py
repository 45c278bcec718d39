"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Departure:
    """Represents a single row of a stationboard."""

    time: datetime
    category: str
    number: str | None
    destination: str
    operator: str | None = None
    platform: str | None = None
    delay_minutes: int | None = None

    @property
    def line(self) -> str:
        """Line label shown on the badge (e.g. "4", "S12", falls back to category)."""
        return self.number or self.category
