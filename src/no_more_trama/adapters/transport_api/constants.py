"""Constants for the Swiss public transport API adapter.

API Documentation: https://transport.opendata.ch/docs.html

No authentication required.
"""

DEFAULT_BASE_URL = "https://transport.opendata.ch/v1"

# Endpoints, relative to the base URL
LOCATIONS_PATH = "/locations"  # GET /locations?query=... or ?x=<lat>&y=<lon>
STATIONBOARD_PATH = "/stationboard"  # GET /stationboard?station=...&limit=...
CONNECTIONS_PATH = "/connections"  # GET /connections?from=...&to=...&limit=...

LOCATION_TYPE_STATION = "station"

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
