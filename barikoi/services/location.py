"""
Location Service

Geocoding, reverse geocoding, search, nearby places and point-level helpers
(snap to road, point in polygon).
"""

import json
import logging
from typing import Any, Dict, Optional, Sequence

from ..client import BarikoiClient
from ..constants import (
    AUTOCOMPLETE_OPTIONS,
    DEFAULT_NEARBY_DISTANCE_KM,
    DEFAULT_NEARBY_LIMIT,
    ENDPOINT_AUTOCOMPLETE,
    ENDPOINT_NEARBY,
    ENDPOINT_NEARBY_CATEGORY,
    ENDPOINT_NEARBY_TYPES,
    ENDPOINT_PLACE_DETAILS,
    ENDPOINT_POINT_IN_POLYGON,
    ENDPOINT_REVERSE_GEOCODE,
    ENDPOINT_RUPANTOR_GEOCODE,
    ENDPOINT_SEARCH_PLACE,
    ENDPOINT_SNAP_TO_ROAD,
)
from ..exceptions import BarikoiValidationError
from ..models import ApiResponse
from .validation import checkAllowedOptions, encodeBooleans, formatPathNumber, validateCoordinate

logger = logging.getLogger(__name__)


class LocationService:
    """Geocoding, search and place lookups, dood!

    Example:
        >>> location = LocationService(BarikoiClient("your_api_key"))
        >>> place = await location.reverseGeocode(90.3572, 23.8067, {"district": True})
        >>> print(place.place["address"])
    """

    def __init__(self, client: BarikoiClient):
        self.client = client

    async def reverseGeocode(
        self, longitude: float, latitude: float, options: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        """Convert coordinates to address.

        Args:
            longitude: Longitude (-180 to 180)
            latitude: Latitude (-90 to 90)
            options: Extra fields to request, e.g. ``district``, ``post_code``,
                ``country``, ``sub_district``, ``union``, ``pauroshova``,
                ``location_type``, ``division``, ``address``, ``area``,
                ``bangla``, ``thana``. Booleans are sent as "true"/"false".

        Returns:
            Reverse geocoding response

        Raises:
            BarikoiValidationError: If the coordinate is out of range
        """
        validateCoordinate(longitude, latitude)

        params: Dict[str, Any] = {"longitude": longitude, "latitude": latitude}
        params.update(options or {})

        return await self.client.request(ENDPOINT_REVERSE_GEOCODE, params=encodeBooleans(params))

    async def autocomplete(self, query: str, options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Get place suggestions as user types.

        Args:
            query: Partial place name
            options: Only ``bangla``, ``city``, ``area`` and ``sub_area`` are accepted

        Raises:
            BarikoiValidationError: On any other option key
        """
        options = options or {}
        checkAllowedOptions(options, AUTOCOMPLETE_OPTIONS, "autocomplete")

        params: Dict[str, Any] = {"q": query}
        params.update(options)

        return await self.client.request(ENDPOINT_AUTOCOMPLETE, params=encodeBooleans(params))

    async def geocode(self, address: str, options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Convert address to coordinates with the Rupantor engine, dood!

        Sent as a form POST. Boolean options (``thana``, ``district``,
        ``bangla``) are sent as "yes"/"no", unlike every other endpoint.

        Args:
            address: Free-form address
            options: Rupantor flags

        Returns:
            Geocoding response
        """
        data: Dict[str, Any] = {"q": address}
        data.update(options or {})

        return await self.client.request(ENDPOINT_RUPANTOR_GEOCODE, data=encodeBooleans(data, ("yes", "no")))

    async def searchPlace(self, query: str, options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Search places by name or category"""
        params: Dict[str, Any] = {"q": query}
        params.update(options or {})

        return await self.client.request(ENDPOINT_SEARCH_PLACE, params=encodeBooleans(params))

    async def getPlaceDetails(self, placeCode: str, options: Optional[Dict[str, Any]] = None) -> ApiResponse:
        """Get details of a place by its place code.

        Args:
            placeCode: Barikoi place code (e.g. from searchPlace results)
            options: Optional ``session_id`` (as returned by searchPlace)
        """
        if not placeCode:
            raise BarikoiValidationError("Place code cannot be empty")

        params: Dict[str, Any] = {"place_code": placeCode}
        params.update(options or {})

        return await self.client.request(ENDPOINT_PLACE_DETAILS, params=params)

    async def nearby(
        self,
        longitude: float,
        latitude: float,
        distance: float = DEFAULT_NEARBY_DISTANCE_KM,
        limit: int = DEFAULT_NEARBY_LIMIT,
        options: Optional[Dict[str, Any]] = None,
    ) -> ApiResponse:
        """Find places around a coordinate.

        Distance and limit go into the URL path: ``/search/nearby/{distance}/{limit}``.

        Args:
            longitude: Longitude
            latitude: Latitude
            distance: Radius in kilometers (0.5 = 500 meters)
            limit: Maximum number of places
            options: Extra query parameters
        """
        params: Dict[str, Any] = {"longitude": longitude, "latitude": latitude}
        params.update(options or {})

        return await self.client.request(
            ENDPOINT_NEARBY,
            params=encodeBooleans(params),
            distance=formatPathNumber(distance),
            limit=formatPathNumber(limit),
        )

    async def nearbyWithCategory(
        self,
        longitude: float,
        latitude: float,
        category: str,
        distance: float = DEFAULT_NEARBY_DISTANCE_KM,
        limit: int = DEFAULT_NEARBY_LIMIT,
    ) -> ApiResponse:
        """Find places of a single category around a coordinate.

        Args:
            longitude: Longitude
            latitude: Latitude
            category: Place category (e.g. "Bank", "Hospital")
            distance: Radius in kilometers
            limit: Maximum number of places
        """
        if not category:
            raise BarikoiValidationError("Category cannot be empty")

        return await self.client.request(
            ENDPOINT_NEARBY_CATEGORY,
            params={"longitude": longitude, "latitude": latitude, "ptype": category},
            distance=formatPathNumber(distance),
            limit=formatPathNumber(limit),
        )

    async def nearbyWithTypes(
        self,
        longitude: float,
        latitude: float,
        types: Sequence[str],
        distance: float = DEFAULT_NEARBY_DISTANCE_KM,
        limit: int = DEFAULT_NEARBY_LIMIT,
    ) -> ApiResponse:
        """Find places of several types around a coordinate.

        Args:
            types: Place types, sent comma-separated (e.g. ["School", "Hospital"])
        """
        if isinstance(types, str):
            types = [types]
        if not types:
            raise BarikoiValidationError("At least one place type is required")

        return await self.client.request(
            ENDPOINT_NEARBY_TYPES,
            params={"longitude": longitude, "latitude": latitude, "q": ",".join(types)},
            distance=formatPathNumber(distance),
            limit=formatPathNumber(limit),
        )

    async def snapToRoad(self, latitude: float, longitude: float) -> ApiResponse:
        """Snap a GPS coordinate to the nearest road.

        Note the latitude-first argument order, matching the ``point=lat,lon``
        parameter. The coordinate is not range-checked locally.
        """
        return await self.client.request(ENDPOINT_SNAP_TO_ROAD, params={"point": f"{latitude},{longitude}"})

    async def pointInPolygon(self, longitude: float, latitude: float, polygon: Sequence[Any]) -> ApiResponse:
        """Check whether a coordinate lies inside a polygon.

        Args:
            longitude: Longitude of the point
            latitude: Latitude of the point
            polygon: Polygon vertices, e.g. ``[[90.36, 23.80], [90.37, 23.80], ...]``,
                sent JSON-encoded
        """
        if not polygon:
            raise BarikoiValidationError("Polygon must contain at least one vertex")

        return await self.client.request(
            ENDPOINT_POINT_IN_POLYGON,
            data={"longitude": longitude, "latitude": latitude, "polygon": json.dumps(list(polygon))},
        )
