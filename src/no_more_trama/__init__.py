"""No More Trama - public transport departures near you."""

__version__ = "0.1.0"
