"""
Unit tests for the Barikoi facade
"""

import asyncio

import pytest

from .barikoi import Barikoi
from .conftest import TEST_API_KEY, TEST_BASE_URL
from .constants import ENV_API_KEY, ENV_BASE_URL, ErrorKind
from .exceptions import BarikoiApiError, BarikoiValidationError
from .services import AdministrativeService, GeofenceService, LocationService, RouteService


class TestBarikoi:
    """Test suite for Barikoi facade."""

    @pytest.fixture
    def barikoi(self, transport):
        return Barikoi(TEST_API_KEY, TEST_BASE_URL, transport=transport)

    def test_services_are_memoized(self, barikoi):
        """Test each service is created once and shares the client, dood!"""
        assert isinstance(barikoi.location(), LocationService)
        assert isinstance(barikoi.route(), RouteService)
        assert isinstance(barikoi.administrative(), AdministrativeService)
        assert isinstance(barikoi.geofence(), GeofenceService)

        assert barikoi.location() is barikoi.location()
        assert barikoi.route() is barikoi.route()
        assert barikoi.route().client is barikoi.client
        assert barikoi.geofence().client is barikoi.client

    def test_explicit_key_overrides_environment(self, monkeypatch):
        """Test explicit key is used over BARIKOI_API_KEY, dood!"""
        monkeypatch.setenv(ENV_API_KEY, "env_key")

        assert Barikoi().client.apiKey == "env_key"
        assert Barikoi("explicit_key").client.apiKey == "explicit_key"

    @pytest.mark.asyncio
    async def test_explicit_settings_used_on_the_wire(self, transport, mockApi, monkeypatch):
        """Test explicit key and base URL reach the outgoing request, dood!"""
        monkeypatch.setenv(ENV_API_KEY, "env_key")
        monkeypatch.setenv(ENV_BASE_URL, "https://env.barikoi.xyz/v2/api")

        barikoi = Barikoi("k", "https://x.test/v2/api", transport=transport)
        await barikoi.administrative().getDivisions()

        request = mockApi.lastRequest
        assert request.url.host == "x.test"
        assert request.url.path == "/v2/api/divisions"
        assert mockApi.lastQuery["api_key"] == "k"

    @pytest.mark.asyncio
    async def test_reverse_geocode_success(self, barikoi, mockApi):
        """Test successful reverse geocoding through the facade, dood!"""
        mockApi.respond(200, json={"place": {"address": "Mirpur 10, Dhaka"}, "status": 200})

        result = await barikoi.reverseGeocode(90.3572, 23.8067)

        assert result.status == 200
        assert result.place["address"] == "Mirpur 10, Dhaka"

    @pytest.mark.asyncio
    async def test_auth_failure(self, barikoi, mockApi):
        """Test 401 surfaces as AUTH_FAILED, dood!"""
        mockApi.respond(401, json={"message": "Invalid API key"})

        with pytest.raises(BarikoiApiError) as excInfo:
            await barikoi.autocomplete("Mirpur")

        assert excInfo.value.category == ErrorKind.AUTH_FAILED
        assert "Authentication Failed" in str(excInfo.value)

    @pytest.mark.asyncio
    async def test_place_details_alias(self, barikoi, mockApi):
        """Test placeDetails is the same as getPlaceDetails, dood!"""
        await barikoi.placeDetails("BKOI2017")

        assert mockApi.lastQuery["place_code"] == "BKOI2017"

    @pytest.mark.asyncio
    async def test_calculate_route_dict_form(self, barikoi, mockApi):
        """Test start/destination mapping is unpacked, dood!"""
        await barikoi.calculateRoute(
            {
                "start": {"longitude": 90.365588, "latitude": 23.791645},
                "destination": {"longitude": 90.367630, "latitude": 23.784715},
            },
            {"type": "gh", "profile": "car"},
        )

        assert mockApi.lastJson["data"]["start"] == {"latitude": 23.791645, "longitude": 90.365588}
        assert mockApi.lastQuery["profile"] == "car"

    @pytest.mark.asyncio
    async def test_calculate_route_missing_destination(self, barikoi, mockApi):
        """Test missing destination is rejected, dood!"""
        with pytest.raises(BarikoiValidationError, match="destination"):
            await barikoi.calculateRoute({"start": {"longitude": 90.36, "latitude": 23.79}})

        assert mockApi.requests == []

    @pytest.mark.asyncio
    async def test_calculate_route_checks_coordinates_first(self, barikoi, mockApi):
        """Test out-of-range point wins over an invalid profile, dood!"""
        with pytest.raises(BarikoiValidationError, match="Invalid latitude or longitude") as excInfo:
            await barikoi.calculateRoute(
                {
                    "start": {"longitude": 90.36, "latitude": 23.79},
                    "destination": {"longitude": 190.0, "latitude": 23.78},
                },
                {"type": "gh", "profile": "foot"},
            )

        assert excInfo.value.errorCode is None
        assert '"destination"' in str(excInfo.value)
        assert mockApi.requests == []

    @pytest.mark.asyncio
    async def test_detailed_navigation(self, barikoi, mockApi):
        """Test positional navigation shortcut, dood!"""
        await barikoi.detailedNavigation(23.791645, 90.365588, 23.784715, 90.367630)

        assert mockApi.lastRequest.url.path.endswith("/routing")
        assert mockApi.lastQuery["type"] == "vh"

    @pytest.mark.asyncio
    async def test_check_nearby_shortcut(self, barikoi, mockApi):
        """Test geofence shortcut default radius, dood!"""
        await barikoi.checkNearby(23.8067, 90.3572, 23.8068, 90.3573)

        assert mockApi.lastQuery["radius"] == "50"

    @pytest.mark.asyncio
    async def test_concurrent_calls_share_client(self, barikoi, mockApi):
        """Test concurrent calls go through one client, dood!"""
        await asyncio.gather(
            barikoi.getPlaceDetails("A"),
            barikoi.route().routeOverview(
                [{"longitude": 90.35, "latitude": 23.80}, {"longitude": 90.36, "latitude": 23.81}]
            ),
            barikoi.administrative().getDivisions(),
        )

        assert len(mockApi.requests) == 3

    @pytest.mark.asyncio
    async def test_async_context_manager(self, transport):
        """Test facade closes its client on exit, dood!"""
        async with Barikoi(TEST_API_KEY, TEST_BASE_URL, transport=transport) as barikoi:
            await barikoi.getPlaceDetails("A")
            httpClient = barikoi.client._httpClient

        assert httpClient.is_closed
