"""Console presentation adapters."""

from no_more_trama.adapters.console.formatters import DepartureFormatter, format_distance
from no_more_trama.adapters.console.renderer import ConsoleRenderer

__all__ = ["ConsoleRenderer", "DepartureFormatter", "format_distance"]
