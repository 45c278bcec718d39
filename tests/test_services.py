"""Tests for application services."""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from no_more_trama.application.services import (
    DepartureBoardService,
    RouteInfoService,
    StationLookupService,
)
from no_more_trama.domain.exceptions import (
    InvalidQueryError,
    NoStationSelectedError,
    RouteUnavailableError,
)
from no_more_trama.domain.models import (
    Connection,
    ConnectionSection,
    Coordinate,
    Departure,
    DepartureSession,
    PassStop,
    RankedStation,
    Station,
)

ZURICH_HB = Coordinate(latitude=47.378177, longitude=8.540192)
CENTRAL = Station(id="8587349", name="Zürich, Central", coordinate=Coordinate(47.376888, 8.544111))
BELLEVUE = Station(id="8588078", name="Zürich, Bellevue", coordinate=Coordinate(47.366939, 8.545049))
HB = Station(id="8503000", name="Zürich HB", coordinate=ZURICH_HB)


class MockStationRepository:
    """Mock station repository for testing."""

    def __init__(self, stations: list[Station]) -> None:
        """Initialize with a list of stations to return."""
        self.stations = stations
        self.queries: list[str] = []

    async def find_stations_near(self, coordinate: Coordinate) -> list[Station]:  # noqa: ARG002
        """Return the configured stations."""
        return self.stations

    async def search_stations(self, query: str) -> list[Station]:
        """Record the query and return the configured stations."""
        self.queries.append(query)
        return self.stations


class MockDepartureRepository:
    """Mock departure repository for testing."""

    def __init__(self, departures: list[Departure]) -> None:
        """Initialize with a list of departures to return."""
        self.departures = departures
        self.calls: list[tuple[str, int]] = []

    async def get_stationboard(self, station: str, limit: int = 6) -> list[Departure]:
        """Record the call and return the configured departures."""
        self.calls.append((station, limit))
        return self.departures[:limit]


class MockConnectionRepository:
    """Mock connection repository for testing."""

    def __init__(self, connection: Connection | None) -> None:
        """Initialize with the connection to return."""
        self.connection = connection
        self.calls: list[tuple[str, str]] = []

    async def find_connection(self, from_station: str, to_station: str) -> Connection | None:
        """Record the call and return the configured connection."""
        self.calls.append((from_station, to_station))
        return self.connection


@pytest.fixture
def sample_departures() -> list[Departure]:
    """Create sample departures for testing."""
    now = datetime.now(UTC)
    return [
        Departure(
            time=now + timedelta(minutes=2),
            category="T",
            number="4",
            destination="Zürich, Bahnhof Tiefenbrunnen",
            operator="VBZ",
        ),
        Departure(
            time=now + timedelta(minutes=6),
            category="B",
            number="31",
            destination="Zürich, Hegibachplatz",
            operator="VBZ",
        ),
    ]


class TestStationLookupService:
    """Tests for StationLookupService."""

    @pytest.mark.asyncio
    async def test_when_finding_nearby_then_ranked_and_stored_in_session(self) -> None:
        """Given raw stations, when finding nearby, then the session holds them ranked."""
        repo = MockStationRepository([BELLEVUE, CENTRAL, HB, Station(id="x", name="Unknown")])
        service = StationLookupService(repo)
        session = DepartureSession(search_radius_meters=500)

        result = await service.find_nearby(session, ZURICH_HB)

        assert [s.name for s in result] == ["Zürich HB", "Zürich, Central"]
        assert session.nearby_stations == result
        assert session.user_location == ZURICH_HB

    @pytest.mark.asyncio
    async def test_when_radius_given_then_it_overrides_session_radius(self) -> None:
        """Given an explicit radius, when finding nearby, then it is used and remembered."""
        service = StationLookupService(MockStationRepository([BELLEVUE, CENTRAL, HB]))
        session = DepartureSession(search_radius_meters=50)

        result = await service.find_nearby(session, ZURICH_HB, radius_meters=2000)

        assert len(result) == 3
        assert session.search_radius_meters == 2000

    @pytest.mark.asyncio
    async def test_when_no_station_in_radius_then_empty(self) -> None:
        """Given stations outside the radius, when finding nearby, then the result is empty."""
        service = StationLookupService(MockStationRepository([BELLEVUE]))
        session = DepartureSession(search_radius_meters=50)

        assert await service.find_nearby(session, ZURICH_HB) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("radius", [0.0, -10.0, float("nan"), float("inf")])
    async def test_when_radius_unusable_then_raises_before_lookup(self, radius: float) -> None:
        """Given an unusable radius, when finding nearby, then nothing is fetched or ranked."""
        repo = MockStationRepository([BELLEVUE, CENTRAL, HB])
        repo.find_stations_near = AsyncMock(return_value=[BELLEVUE])
        service = StationLookupService(repo)
        session = DepartureSession()

        with pytest.raises(InvalidQueryError, match="Search radius"):
            await service.find_nearby(session, ZURICH_HB, radius_meters=radius)

        repo.find_stations_near.assert_not_awaited()
        assert session.search_radius_meters == 1000.0
        assert session.nearby_stations == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "origin",
        [Coordinate(200.0, 8.54), Coordinate(47.37, -181.0), Coordinate(float("nan"), 8.54)],
    )
    async def test_when_origin_invalid_then_raises(self, origin: Coordinate) -> None:
        """Given an impossible origin, when finding nearby, then InvalidQueryError is raised."""
        service = StationLookupService(MockStationRepository([CENTRAL]))
        session = DepartureSession()

        with pytest.raises(InvalidQueryError, match="valid latitude and longitude"):
            await service.find_nearby(session, origin)

        assert session.user_location is None
        assert session.nearby_stations == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", " ", "Z", "  Z  "])
    async def test_when_query_too_short_then_raises(self, query: str) -> None:
        """Given a query shorter than two characters, when searching, then it is rejected."""
        repo = MockStationRepository([HB])
        service = StationLookupService(repo)

        with pytest.raises(InvalidQueryError, match="at least 2 characters"):
            await service.search(query)
        assert repo.queries == []

    @pytest.mark.asyncio
    async def test_when_searching_then_query_is_stripped(self) -> None:
        """Given a padded query, when searching, then the repository gets it stripped."""
        repo = MockStationRepository([HB])
        service = StationLookupService(repo)

        await service.search("  Zürich HB ")

        assert repo.queries == ["Zürich HB"]

    @pytest.mark.asyncio
    async def test_when_search_and_select_then_first_match_is_current(self) -> None:
        """Given several matches, when searching and selecting, then the first is current."""
        service = StationLookupService(MockStationRepository([CENTRAL, HB]))
        session = DepartureSession()

        station = await service.search_and_select(session, "Central")

        assert station == CENTRAL
        assert session.current_station == CENTRAL

    @pytest.mark.asyncio
    async def test_when_search_finds_nothing_then_session_unchanged(self) -> None:
        """Given no match, when searching and selecting, then None and no current station."""
        service = StationLookupService(MockStationRepository([]))
        session = DepartureSession()

        assert await service.search_and_select(session, "Nowhere") is None
        assert session.current_station is None

    @pytest.mark.asyncio
    async def test_when_selecting_nearby_then_it_becomes_current(self) -> None:
        """Given nearby stations, when selecting one by index, then it is the current station."""
        service = StationLookupService(MockStationRepository([CENTRAL, HB]))
        session = DepartureSession()
        await service.find_nearby(session, ZURICH_HB)

        selected = service.select_nearby(session, 1)

        assert isinstance(selected, RankedStation)
        assert selected.name == "Zürich, Central"
        assert session.current_station == selected

    @pytest.mark.parametrize("index", [-1, 0, 3])
    def test_when_selecting_invalid_index_then_raises(self, index: int) -> None:
        """Given no nearby station at the index, when selecting, then IndexError is raised."""
        service = StationLookupService(MockStationRepository([]))

        with pytest.raises(IndexError):
            service.select_nearby(DepartureSession(), index)


class TestDepartureBoardService:
    """Tests for DepartureBoardService."""

    @pytest.mark.asyncio
    async def test_when_loading_then_uses_station_name_and_limit(
        self, sample_departures: list[Departure]
    ) -> None:
        """Given a current station, when loading, then its name and the limit are used."""
        repo = MockDepartureRepository(sample_departures)
        service = DepartureBoardService(repo, limit=6)
        session = DepartureSession(current_station=CENTRAL)

        departures = await service.load_departures(session)

        assert repo.calls == [("Zürich, Central", 6)]
        assert departures == sample_departures
        assert session.departures == sample_departures
        assert session.last_updated is not None

    @pytest.mark.asyncio
    async def test_when_limit_given_then_it_overrides_default(
        self, sample_departures: list[Departure]
    ) -> None:
        """Given an explicit limit, when loading, then it is passed to the repository."""
        repo = MockDepartureRepository(sample_departures)
        service = DepartureBoardService(repo, limit=6)
        session = DepartureSession(current_station=CENTRAL)

        departures = await service.load_departures(session, limit=1)

        assert repo.calls == [("Zürich, Central", 1)]
        assert len(departures) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -3])
    async def test_when_limit_not_positive_then_raises(
        self, sample_departures: list[Departure], limit: int
    ) -> None:
        """Given a zero or negative limit, when loading, then it is rejected, not defaulted."""
        repo = MockDepartureRepository(sample_departures)
        service = DepartureBoardService(repo, limit=6)

        with pytest.raises(ValueError, match="limit must be at least 1"):
            await service.load_departures(DepartureSession(current_station=CENTRAL), limit=limit)

        assert repo.calls == []

    @pytest.mark.asyncio
    async def test_when_no_station_then_raises(self) -> None:
        """Given no current station, when loading, then NoStationSelectedError is raised."""
        service = DepartureBoardService(MockDepartureRepository([]))

        with pytest.raises(NoStationSelectedError):
            await service.load_departures(DepartureSession())

    @pytest.mark.asyncio
    async def test_when_refreshing_without_station_then_noop(self) -> None:
        """Given no current station, when refreshing, then nothing is fetched."""
        repo = MockDepartureRepository([])
        service = DepartureBoardService(repo)

        assert await service.refresh(DepartureSession()) is None
        assert repo.calls == []

    @pytest.mark.asyncio
    async def test_when_clearing_station_then_board_is_reset(
        self, sample_departures: list[Departure]
    ) -> None:
        """Given a loaded board, when changing station, then station and departures are cleared."""
        service = DepartureBoardService(MockDepartureRepository(sample_departures))
        session = DepartureSession(current_station=CENTRAL)
        await service.load_departures(session)

        service.clear_station(session)

        assert session.current_station is None
        assert session.departures == []
        assert session.last_updated is None


class TestRouteInfoService:
    """Tests for RouteInfoService."""

    @staticmethod
    def _connection(pass_list: list[PassStop] | None) -> Connection:
        start = datetime(2024, 1, 15, 14, 30, tzinfo=UTC)
        return Connection(
            sections=[
                ConnectionSection(
                    departure_time=start,
                    arrival_time=start + timedelta(minutes=4, seconds=40),
                    pass_list=pass_list,
                )
            ]
        )

    @pytest.mark.asyncio
    async def test_when_route_found_then_stops_marked_and_measured(
        self, sample_departures: list[Departure]
    ) -> None:
        """Given a connection, when building route info, then stops carry current flag and distance."""
        repo = MockConnectionRepository(
            self._connection([PassStop(station=CENTRAL), PassStop(station=BELLEVUE)])
        )
        service = RouteInfoService(repo)
        session = DepartureSession(current_station=CENTRAL, user_location=ZURICH_HB)

        route = await service.route_for_departure(session, sample_departures[0])

        assert repo.calls == [("Zürich, Central", "Zürich, Bahnhof Tiefenbrunnen")]
        assert route.title == "4 → Zürich, Bahnhof Tiefenbrunnen"
        assert route.stop_count == 2
        assert route.duration_minutes == 5
        assert route.stops[0].is_current is True
        assert route.stops[1].is_current is False
        assert route.stops[1].distance_meters == pytest.approx(1300, abs=50)

    @pytest.mark.asyncio
    async def test_when_user_location_unknown_then_no_distances(
        self, sample_departures: list[Departure]
    ) -> None:
        """Given no user location, when building route info, then stops have no distance."""
        service = RouteInfoService(MockConnectionRepository(self._connection([PassStop(BELLEVUE)])))
        session = DepartureSession(current_station=CENTRAL)

        route = await service.route_for_departure(session, sample_departures[0])

        assert route.stops[0].distance_meters is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "connection",
        [None, Connection(sections=[]), Connection(sections=[ConnectionSection(None, None, None)])],
    )
    async def test_when_no_stop_information_then_raises(
        self, connection: Connection | None, sample_departures: list[Departure]
    ) -> None:
        """Given no usable connection, when building route info, then RouteUnavailableError."""
        service = RouteInfoService(MockConnectionRepository(connection))
        session = DepartureSession(current_station=CENTRAL)

        with pytest.raises(RouteUnavailableError):
            await service.route_for_departure(session, sample_departures[0])

    @pytest.mark.asyncio
    async def test_when_no_station_then_raises(self, sample_departures: list[Departure]) -> None:
        """Given no current station, when building route info, then NoStationSelectedError."""
        service = RouteInfoService(MockConnectionRepository(None))

        with pytest.raises(NoStationSelectedError):
            await service.route_for_departure(DepartureSession(), sample_departures[0])
