"""
Route Service

Route overview, turn-by-turn routing, navigation with vehicle profiles,
waypoint optimization and map matching.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from ..client import BarikoiClient
from ..constants import (
    DEFAULT_GEOMETRIES,
    ENDPOINT_NAVIGATION,
    ENDPOINT_ROUTE,
    ENDPOINT_ROUTE_LOCATION_OPTIMIZE,
    ENDPOINT_ROUTE_MATCH,
    ENDPOINT_ROUTE_OPTIMIZED,
    MAX_WAYPOINTS,
    NAVIGATION_PROFILES,
    NAVIGATION_TYPE_SUPPORT,
    OPTIMIZED_ROUTE_PROFILES,
    ROUTE_PROFILES,
    Endpoint,
    RouteProfile,
    RouteType,
)
from ..exceptions import BarikoiValidationError
from ..models import ApiResponse, Point, Waypoint
from .validation import encodeBooleans, encodeCoordinates, validateCoordinate, validatePoints

logger = logging.getLogger(__name__)


class RouteService:
    """Routing endpoints, dood!

    All pre-flight checks raise BarikoiValidationError before any request is
    sent. Checks of calculateRoute and optimizedRoute additionally fill
    ``errorCode`` and ``details`` on the raised error, e.g.::

        {
            "status": 400,
            "error": "unsupported_combination",
            "message": "Profile 'car' not supported for type 'vh'",
            "type": "vh",
            "profile": "car",
            "supported_profiles": ["motorcycle"],
        }
    """

    PROFILE_CAR = RouteProfile.CAR
    PROFILE_FOOT = RouteProfile.FOOT

    def __init__(self, client: BarikoiClient):
        self.client = client

    def _validateProfile(self, options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Default ``profile`` to car and check it is car or foot.

        Returns:
            Copy of options with ``profile`` set
        """
        result = dict(options or {})
        profile = result.setdefault("profile", str(RouteProfile.CAR))

        if profile not in ROUTE_PROFILES:
            raise BarikoiValidationError(
                f"Invalid profile '{profile}'. Accepted values are: {', '.join(ROUTE_PROFILES)}"
            )

        return result

    async def _getRoute(self, endpoint: Endpoint, validPoints: List[Point], params: Dict[str, Any]) -> ApiResponse:
        if len(validPoints) < 2:
            raise BarikoiValidationError("At least two points are required to build a route")

        params.setdefault("geometries", DEFAULT_GEOMETRIES)
        return await self.client.request(
            endpoint,
            params=encodeBooleans(params),
            coordinates=encodeCoordinates(validPoints),
        )

    async def routeOverview(self, points: Sequence[Point], options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Get simple route between two or more points.

        Args:
            points: Route points, e.g. ``[{"longitude": 90.3572, "latitude": 23.8067}, ...]``
            options: ``profile`` ("car" by default, or "foot"), ``geometries``
                ("polyline" by default, or "geojson")

        Returns:
            Route response with geometry, distance and duration

        Raises:
            BarikoiValidationError: On invalid points or profile
        """
        validPoints = validatePoints(points)
        params = self._validateProfile(options)
        return await self._getRoute(ENDPOINT_ROUTE, validPoints, params)

    async def detailed(self, points: Sequence[Point], options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Get route with turn-by-turn instructions.

        Args:
            points: Route points
            options: ``profile``, ``alternatives`` (bool), ``steps`` (bool),
                ``overview``, ``geometries``
        """
        validPoints = validatePoints(points)
        params = self._validateProfile(options)
        return await self._getRoute(ENDPOINT_ROUTE, validPoints, params)

    async def distance(
        self,
        fromLongitude: float,
        fromLatitude: float,
        toLongitude: float,
        toLatitude: float,
        options: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """Route overview between two coordinates"""
        points = [
            Point(longitude=fromLongitude, latitude=fromLatitude),
            Point(longitude=toLongitude, latitude=toLatitude),
        ]
        return await self.routeOverview(points, options)

    async def directions(
        self,
        fromLongitude: float,
        fromLatitude: float,
        toLongitude: float,
        toLatitude: float,
        options: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """Detailed route between two coordinates"""
        points = [
            Point(longitude=fromLongitude, latitude=fromLatitude),
            Point(longitude=toLongitude, latitude=toLatitude),
        ]
        return await self.detailed(points, options)

    async def calculateRoute(
        self,
        startLatitude: float,
        startLongitude: float,
        destinationLatitude: float,
        destinationLongitude: float,
        options: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """Calculate navigation route with vehicle profile, dood!

        Type "vh" supports only the motorcycle profile, type "gh" supports
        bike, motorcycle and car.

        Args:
            startLatitude: Start latitude
            startLongitude: Start longitude
            destinationLatitude: Destination latitude
            destinationLongitude: Destination longitude
            options: ``type`` ("vh" by default, or "gh"), ``profile``
                ("motorcycle" by default, "bike" or "car"), ``country_code``
                (ISO alpha-3, e.g. "bgd")

        Returns:
            Navigation response (with a ``trip`` object)

        Raises:
            BarikoiValidationError: With errorCode ``invalid_type``,
                ``invalid_profile`` or ``unsupported_combination``, or on
                out-of-range coordinates

        Example:
            >>> route = await routeService.calculateRoute(
            ...     23.791645, 90.365588, 23.784715, 90.367630, {"type": "gh", "profile": "car"}
            ... )
        """
        options = options or {}
        routeType = options.get("type", str(RouteType.VH))
        profile = options.get("profile", str(RouteProfile.MOTORCYCLE))
        validTypes = [str(t) for t in NAVIGATION_TYPE_SUPPORT]

        if routeType not in validTypes:
            raise BarikoiValidationError.fromDetails(
                {
                    "status": 400,
                    "error": "invalid_type",
                    "message": f"Type '{routeType}' is not valid",
                    "supported_types": validTypes,
                }
            )

        if profile not in NAVIGATION_PROFILES:
            raise BarikoiValidationError.fromDetails(
                {
                    "status": 400,
                    "error": "invalid_profile",
                    "message": f"Profile '{profile}' is not valid",
                    "supported_profiles": [str(p) for p in NAVIGATION_PROFILES],
                }
            )

        supportedProfiles = [str(p) for p in NAVIGATION_TYPE_SUPPORT[routeType]]
        if profile not in supportedProfiles:
            raise BarikoiValidationError.fromDetails(
                {
                    "status": 400,
                    "error": "unsupported_combination",
                    "message": f"Profile '{profile}' not supported for type '{routeType}'",
                    "type": routeType,
                    "profile": profile,
                    "supported_profiles": supportedProfiles,
                }
            )

        validateCoordinate(startLongitude, startLatitude, label="start")
        validateCoordinate(destinationLongitude, destinationLatitude, label="destination")

        query: Dict[str, Any] = {"type": routeType, "profile": profile}
        if "country_code" in options:
            query["country_code"] = options["country_code"]

        data = {
            "data": {
                "start": {"latitude": startLatitude, "longitude": startLongitude},
                "destination": {"latitude": destinationLatitude, "longitude": destinationLongitude},
            }
        }

        return await self.client.postJson(ENDPOINT_NAVIGATION, data, params=query)

    async def optimizedRoute(
        self,
        source: str,
        destination: str,
        waypoints: Optional[Sequence[Waypoint]] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """Route from source to destination through up to 50 waypoints.

        Waypoints are sorted by ``id`` before sending. The API key is sent
        inside the JSON body for this endpoint.

        Args:
            source: Start as "lat,lng"
            destination: End as "lat,lng"
            waypoints: ``[{"id": 1, "point": "lat,lng"}, ...]``
            options: ``profile`` ("car" by default, "bike" or "motorcycle")

        Raises:
            BarikoiValidationError: With errorCode ``too_many_waypoints`` or
                ``invalid_profile``
        """
        waypoints = list(waypoints or [])
        options = dict(options or {})

        if len(waypoints) > MAX_WAYPOINTS:
            raise BarikoiValidationError.fromDetails(
                {
                    "status": 400,
                    "error": "too_many_waypoints",
                    "message": f"Maximum {MAX_WAYPOINTS} waypoints allowed, {len(waypoints)} provided",
                    "provided": len(waypoints),
                    "maximum": MAX_WAYPOINTS,
                }
            )

        profile = options.pop("profile", str(RouteProfile.CAR))
        if profile not in OPTIMIZED_ROUTE_PROFILES:
            raise BarikoiValidationError.fromDetails(
                {
                    "status": 400,
                    "error": "invalid_profile",
                    "message": f"Profile '{profile}' is not valid",
                    "supported_profiles": [str(p) for p in OPTIMIZED_ROUTE_PROFILES],
                }
            )

        for waypoint in waypoints:
            if "id" not in waypoint or "point" not in waypoint:
                raise BarikoiValidationError("Each waypoint must contain 'id' and 'point' keys")

        sortedWaypoints: List[Dict[str, Any]] = [
            {"id": wp["id"], "point": wp["point"]} for wp in sorted(waypoints, key=lambda wp: wp["id"])
        ]

        body: Dict[str, Any] = {
            "source": source,
            "destination": destination,
            "profile": profile,
        }
        if sortedWaypoints:
            body["waypoints"] = sortedWaypoints
        body.update(options)

        return await self.client.postJsonWithKeyInBody(ENDPOINT_ROUTE_OPTIMIZED, body)

    async def optimize(self, points: Sequence[Point], options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Optimize visiting order of points (form POST, points JSON-encoded).

        Args:
            points: Points to visit
            options: ``profile`` ("car" by default, or "foot")
        """
        validPoints = validatePoints(points)
        data = self._validateProfile(options)
        data["points"] = json.dumps(validPoints)

        return await self.client.request(ENDPOINT_ROUTE_LOCATION_OPTIMIZE, data=encodeBooleans(data))

    async def match(self, points: Sequence[Point], options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Map a GPS trace onto the road network.

        Args:
            points: GPS trace, in recording order
            options: ``radiuses``, ``timestamps``, ``geometries`` ("polyline" by default)
        """
        return await self._getRoute(ENDPOINT_ROUTE_MATCH, validatePoints(points), dict(options or {}))
