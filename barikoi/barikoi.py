"""
Barikoi Facade

Single entry point bundling every service over one shared BarikoiClient.
"""

import logging
import threading
from typing import Any, Dict, Mapping, Optional, Sequence

from .client import BarikoiClient
from .constants import DEFAULT_GEOFENCE_RADIUS, DEFAULT_NEARBY_DISTANCE_KM, DEFAULT_NEARBY_LIMIT
from .exceptions import BarikoiValidationError
from .models import ApiResponse, Point, Waypoint
from .services import AdministrativeService, GeofenceService, LocationService, RouteService
from .services.validation import validateCoordinate

logger = logging.getLogger(__name__)


class Barikoi:
    """Barikoi API facade, dood!

    Services are created on first use and then reused. All of them share the
    same client, so closing the facade closes every service's connection.

    Example:
        >>> async with Barikoi("your_api_key") as barikoi:
        ...     place = await barikoi.reverseGeocode(90.3572, 23.8067)
        ...     route = await barikoi.route().routeOverview(
        ...         [{"longitude": 90.3572, "latitude": 23.8067}, {"longitude": 90.3680, "latitude": 23.8100}]
        ...     )
    """

    def __init__(self, apiKey: Optional[str] = None, baseUrl: Optional[str] = None, **clientKwargs: Any) -> None:
        """Initialize the facade.

        Args:
            apiKey: API key, falls back to BARIKOI_API_KEY / config file
            baseUrl: Base URL override
            **clientKwargs: Passed to BarikoiClient (``timeout``, ``configPath``,
                ``settings``, ``transport``)
        """
        self.client = BarikoiClient(apiKey, baseUrl, **clientKwargs)

        self._lock = threading.Lock()
        self._location: Optional[LocationService] = None
        self._route: Optional[RouteService] = None
        self._administrative: Optional[AdministrativeService] = None
        self._geofence: Optional[GeofenceService] = None

    async def __aenter__(self) -> "Barikoi":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared HTTP client"""
        await self.client.aclose()

    def location(self) -> LocationService:
        if self._location is None:
            with self._lock:
                if self._location is None:
                    self._location = LocationService(self.client)
        return self._location

    def route(self) -> RouteService:
        if self._route is None:
            with self._lock:
                if self._route is None:
                    self._route = RouteService(self.client)
        return self._route

    def administrative(self) -> AdministrativeService:
        if self._administrative is None:
            with self._lock:
                if self._administrative is None:
                    self._administrative = AdministrativeService(self.client)
        return self._administrative

    def geofence(self) -> GeofenceService:
        if self._geofence is None:
            with self._lock:
                if self._geofence is None:
                    self._geofence = GeofenceService(self.client)
        return self._geofence

    # Location shortcuts

    async def reverseGeocode(
        self, longitude: float, latitude: float, options: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        return await self.location().reverseGeocode(longitude, latitude, options)

    async def autocomplete(self, query: str, options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.location().autocomplete(query, options)

    async def geocode(self, address: str, options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.location().geocode(address, options)

    async def searchPlace(self, query: str, options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.location().searchPlace(query, options)

    async def getPlaceDetails(self, placeCode: str, options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.location().getPlaceDetails(placeCode, options)

    placeDetails = getPlaceDetails

    async def nearby(
        self,
        longitude: float,
        latitude: float,
        distance: float = DEFAULT_NEARBY_DISTANCE_KM,
        limit: int = DEFAULT_NEARBY_LIMIT,
        options: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        return await self.location().nearby(longitude, latitude, distance, limit, options)

    async def nearbyWithCategory(
        self,
        longitude: float,
        latitude: float,
        category: str,
        distance: float = DEFAULT_NEARBY_DISTANCE_KM,
        limit: int = DEFAULT_NEARBY_LIMIT,
    ) -> ApiResponse:
        return await self.location().nearbyWithCategory(longitude, latitude, category, distance, limit)

    async def nearbyWithTypes(
        self,
        longitude: float,
        latitude: float,
        types: Sequence[str],
        distance: float = DEFAULT_NEARBY_DISTANCE_KM,
        limit: int = DEFAULT_NEARBY_LIMIT,
    ) -> ApiResponse:
        return await self.location().nearbyWithTypes(longitude, latitude, types, distance, limit)

    async def snapToRoad(self, latitude: float, longitude: float) -> ApiResponse:
        return await self.location().snapToRoad(latitude, longitude)

    async def pointInPolygon(self, longitude: float, latitude: float, polygon: Sequence[Any]) -> ApiResponse:
        return await self.location().pointInPolygon(longitude, latitude, polygon)

    # Route shortcuts

    async def routeOverview(self, points: Sequence[Point], options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.route().routeOverview(points, options)

    async def detailed(self, points: Sequence[Point], options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.route().detailed(points, options)

    async def calculateRoute(
        self, startDestination: Mapping[str, Mapping[str, float]], options: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        """Calculate navigation route from a start/destination mapping, dood!

        Args:
            startDestination: ``{"start": {"longitude", "latitude"},
                "destination": {"longitude", "latitude"}}``
            options: ``type``, ``profile``, ``country_code``

        Raises:
            BarikoiValidationError: If ``start`` or ``destination`` is missing,
                lacks coordinates or is out of range (checked before type and
                profile), or on any routing check failure
        """
        for key in ("start", "destination"):
            point = startDestination.get(key)
            if not isinstance(point, Mapping) or "longitude" not in point or "latitude" not in point:
                raise BarikoiValidationError(f"'{key}' must contain 'longitude' and 'latitude' keys")

        start = startDestination["start"]
        destination = startDestination["destination"]
        validateCoordinate(start["longitude"], start["latitude"], label="start")
        validateCoordinate(destination["longitude"], destination["latitude"], label="destination")

        return await self.route().calculateRoute(
            start["latitude"],
            start["longitude"],
            destination["latitude"],
            destination["longitude"],
            options,
        )

    async def detailedNavigation(
        self,
        startLatitude: float,
        startLongitude: float,
        destinationLatitude: float,
        destinationLongitude: float,
        options: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """Navigation route with turn-by-turn instructions (positional coordinates)"""
        return await self.route().calculateRoute(
            startLatitude, startLongitude, destinationLatitude, destinationLongitude, options
        )

    async def optimizedRoute(
        self,
        source: str,
        destination: str,
        waypoints: Optional[Sequence[Waypoint]] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        return await self.route().optimizedRoute(source, destination, waypoints, options)

    # Geofence shortcuts

    async def checkNearby(
        self,
        destinationLatitude: float,
        destinationLongitude: float,
        currentLatitude: float,
        currentLongitude: float,
        radius: float = DEFAULT_GEOFENCE_RADIUS,
    ) -> ApiResponse:
        return await self.geofence().checkNearby(
            destinationLatitude, destinationLongitude, currentLatitude, currentLongitude, radius
        )
