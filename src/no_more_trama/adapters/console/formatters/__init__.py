"""Formatters for console output."""

from no_more_trama.adapters.console.formatters.departure_formatter import DepartureFormatter
from no_more_trama.adapters.console.formatters.distance_formatter import format_distance

__all__ = ["DepartureFormatter", "format_distance"]
