"""Errors raised while resolving stations and departures."""

from no_more_trama.domain.models.error_details import ErrorDetails


class TransportApiError(Exception):
    """The transport API could not be reached or answered with an error."""

    def __init__(self, details: ErrorDetails) -> None:
        super().__init__(details.reason)
        self.details = details


class InvalidQueryError(ValueError):
    """A station search or nearby lookup was given unusable input."""


class NoStationSelectedError(Exception):
    """Departures were requested before a station was selected."""


class RouteUnavailableError(Exception):
    """No stop information could be found for a departure."""
