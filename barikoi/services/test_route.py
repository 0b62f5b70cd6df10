"""
Unit tests for RouteService

Covers coordinate encoding, profile checks, the navigation type/profile
matrix and waypoint limits and ordering.
"""

import json

import pytest

from ..conftest import TEST_API_KEY
from ..exceptions import BarikoiValidationError
from .route import RouteService

POINTS = [
    {"longitude": 90.3572, "latitude": 23.8067},
    {"longitude": 90.3680, "latitude": 23.8100},
]


class TestRouteService:
    """Test suite for RouteService class."""

    @pytest.fixture
    def service(self, client):
        return RouteService(client)

    # Route overview and detailed route

    @pytest.mark.asyncio
    async def test_route_overview(self, service, mockApi):
        """Test coordinates are encoded into the path, dood!"""
        await service.routeOverview(POINTS)

        request = mockApi.lastRequest
        assert request.method == "GET"
        assert request.url.path.endswith("/route/90.3572,23.8067;90.368,23.81")
        assert mockApi.lastQuery == {"profile": "car", "geometries": "polyline", "api_key": TEST_API_KEY}

    @pytest.mark.asyncio
    async def test_detailed_encodes_booleans(self, service, mockApi):
        """Test steps and alternatives are sent as true/false, dood!"""
        await service.detailed(POINTS, {"profile": "foot", "steps": True, "alternatives": False})

        assert mockApi.lastQuery["profile"] == "foot"
        assert mockApi.lastQuery["steps"] == "true"
        assert mockApi.lastQuery["alternatives"] == "false"

    @pytest.mark.asyncio
    async def test_invalid_route_profile(self, service, mockApi):
        """Test profile outside car/foot is rejected, dood!"""
        with pytest.raises(BarikoiValidationError, match="Accepted values are: car, foot"):
            await service.routeOverview(POINTS, {"profile": "motorcycle"})

        assert mockApi.requests == []

    @pytest.mark.asyncio
    async def test_route_rejects_bad_point(self, service, mockApi):
        """Test out-of-range point is rejected before sending, dood!"""
        points = [POINTS[0], {"longitude": 200, "latitude": 23.8}]

        with pytest.raises(BarikoiValidationError, match="Invalid latitude or longitude"):
            await service.routeOverview(points)

        assert mockApi.requests == []

    @pytest.mark.asyncio
    async def test_route_needs_two_points(self, service, mockApi):
        """Test single point route is rejected, dood!"""
        with pytest.raises(BarikoiValidationError):
            await service.routeOverview(POINTS[:1])

        assert mockApi.requests == []

    @pytest.mark.asyncio
    async def test_distance_shortcut(self, service, mockApi):
        """Test distance builds a two-point route, dood!"""
        await service.distance(90.3572, 23.8067, 90.368, 23.81)

        assert mockApi.lastRequest.url.path.endswith("/route/90.3572,23.8067;90.368,23.81")

    # Navigation

    @pytest.mark.asyncio
    async def test_calculate_route_defaults(self, service, mockApi):
        """Test default type vh and profile motorcycle, dood!"""
        await service.calculateRoute(23.791645, 90.365588, 23.784715, 90.367630)

        request = mockApi.lastRequest
        assert request.method == "POST"
        assert request.url.path.endswith("/routing")
        assert mockApi.lastQuery == {"type": "vh", "profile": "motorcycle", "key": TEST_API_KEY}
        assert mockApi.lastJson == {
            "data": {
                "start": {"latitude": 23.791645, "longitude": 90.365588},
                "destination": {"latitude": 23.784715, "longitude": 90.367630},
            }
        }

    @pytest.mark.asyncio
    async def test_calculate_route_unsupported_combination(self, service, mockApi):
        """Test vh with car reports the supported profiles, dood!"""
        with pytest.raises(BarikoiValidationError) as excInfo:
            await service.calculateRoute(23.79, 90.36, 23.78, 90.36, {"type": "vh", "profile": "car"})

        error = excInfo.value
        assert error.errorCode == "unsupported_combination"
        assert error.details["supported_profiles"] == ["motorcycle"]
        assert error.details["type"] == "vh"
        assert error.details["profile"] == "car"
        assert mockApi.requests == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("profile", ["bike", "motorcycle", "car"])
    async def test_calculate_route_gh_profiles(self, service, mockApi, profile):
        """Test gh accepts every navigation profile, dood!"""
        await service.calculateRoute(23.79, 90.36, 23.78, 90.36, {"type": "gh", "profile": profile})

        assert mockApi.lastQuery["profile"] == profile

    @pytest.mark.asyncio
    async def test_calculate_route_invalid_type(self, service, mockApi):
        """Test unknown routing type, dood!"""
        with pytest.raises(BarikoiValidationError) as excInfo:
            await service.calculateRoute(23.79, 90.36, 23.78, 90.36, {"type": "xx"})

        assert excInfo.value.errorCode == "invalid_type"
        assert excInfo.value.details["supported_types"] == ["vh", "gh"]

    @pytest.mark.asyncio
    async def test_calculate_route_invalid_profile(self, service, mockApi):
        """Test unknown navigation profile, dood!"""
        with pytest.raises(BarikoiValidationError) as excInfo:
            await service.calculateRoute(23.79, 90.36, 23.78, 90.36, {"type": "gh", "profile": "foot"})

        assert excInfo.value.errorCode == "invalid_profile"

    @pytest.mark.asyncio
    async def test_calculate_route_country_code(self, service, mockApi):
        """Test country code is passed in the query, dood!"""
        await service.calculateRoute(23.79, 90.36, 23.78, 90.36, {"country_code": "bgd"})

        assert mockApi.lastQuery["country_code"] == "bgd"

    # Optimized route

    @pytest.mark.asyncio
    async def test_optimized_route_sorts_waypoints(self, service, mockApi):
        """Test waypoints are sent ordered by id with key in the body, dood!"""
        waypoints = [
            {"id": 3, "point": "23.80,90.37"},
            {"id": 1, "point": "23.81,90.36"},
            {"id": 2, "point": "23.82,90.35"},
        ]

        await service.optimizedRoute("23.79,90.36", "23.78,90.37", waypoints)

        body = mockApi.lastJson
        assert [wp["id"] for wp in body["waypoints"]] == [1, 2, 3]
        assert body["source"] == "23.79,90.36"
        assert body["destination"] == "23.78,90.37"
        assert body["profile"] == "car"
        assert body["api_key"] == TEST_API_KEY
        assert "api_key" not in mockApi.lastQuery

    @pytest.mark.asyncio
    async def test_optimized_route_too_many_waypoints(self, service, mockApi):
        """Test 51 waypoints are rejected with counts in details, dood!"""
        waypoints = [{"id": i, "point": "23.80,90.37"} for i in range(51)]

        with pytest.raises(BarikoiValidationError) as excInfo:
            await service.optimizedRoute("23.79,90.36", "23.78,90.37", waypoints)

        error = excInfo.value
        assert error.errorCode == "too_many_waypoints"
        assert error.statusCode == 400
        assert error.details["provided"] == 51
        assert error.details["maximum"] == 50
        assert mockApi.requests == []

    @pytest.mark.asyncio
    async def test_optimized_route_fifty_waypoints(self, service, mockApi):
        """Test exactly 50 waypoints are accepted, dood!"""
        waypoints = [{"id": i, "point": "23.80,90.37"} for i in range(50)]

        await service.optimizedRoute("23.79,90.36", "23.78,90.37", waypoints)

        assert len(mockApi.lastJson["waypoints"]) == 50

    @pytest.mark.asyncio
    async def test_optimized_route_invalid_profile(self, service, mockApi):
        """Test foot is not an optimized route profile, dood!"""
        with pytest.raises(BarikoiValidationError) as excInfo:
            await service.optimizedRoute("23.79,90.36", "23.78,90.37", [], {"profile": "foot"})

        assert excInfo.value.errorCode == "invalid_profile"
        assert mockApi.requests == []

    # Location optimization and map matching

    @pytest.mark.asyncio
    async def test_optimize(self, service, mockApi):
        """Test points are JSON-encoded in a form body, dood!"""
        await service.optimize(POINTS)

        form = mockApi.lastForm
        assert mockApi.lastRequest.url.path.endswith("/route/location/optimize")
        assert json.loads(form["points"]) == POINTS
        assert form["profile"] == "car"

    @pytest.mark.asyncio
    async def test_match(self, service, mockApi):
        """Test GPS trace is encoded into the match path, dood!"""
        await service.match(POINTS)

        assert mockApi.lastRequest.url.path.endswith("/match/90.3572,23.8067;90.368,23.81")
        assert mockApi.lastQuery["geometries"] == "polyline"
