"""
Geofence Service

Proximity checks and management of stored geofence points.
"""

import logging
from typing import Any, Dict, Optional

from ..client import BarikoiClient
from ..constants import (
    DEFAULT_GEOFENCE_RADIUS,
    ENDPOINT_CHECK_NEARBY,
    ENDPOINT_GEOFENCE_CHECK,
    ENDPOINT_GEOFENCE_DELETE_POINT,
    ENDPOINT_GEOFENCE_POINT,
    ENDPOINT_GEOFENCE_POINTS,
    ENDPOINT_GEOFENCE_SET_POINT,
    ENDPOINT_GEOFENCE_UPDATE_POINT,
)
from ..exceptions import BarikoiValidationError
from ..models import ApiResponse
from .validation import validateCoordinate

logger = logging.getLogger(__name__)


def _validateRadius(radius: Any) -> None:
    if isinstance(radius, bool) or not isinstance(radius, (int, float)) or radius <= 0:
        raise BarikoiValidationError(f"Radius must be a positive number, got {radius!r}")


class GeofenceService:
    """Geofencing endpoints, dood!"""

    def __init__(self, client: BarikoiClient):
        self.client = client

    async def checkNearby(
        self,
        destinationLatitude: float,
        destinationLongitude: float,
        currentLatitude: float,
        currentLongitude: float,
        radius: float = DEFAULT_GEOFENCE_RADIUS,
    ) -> ApiResponse:
        """Check whether the current position is within radius of a destination.

        Args:
            destinationLatitude: Destination latitude
            destinationLongitude: Destination longitude
            currentLatitude: Current latitude
            currentLongitude: Current longitude
            radius: Radius in meters, must be positive (default: 50)

        Returns:
            Response with a ``message`` of "Inside geofence" or "Outside geofence"

        Raises:
            BarikoiValidationError: On out-of-range coordinates or a non-positive radius
        """
        validateCoordinate(destinationLongitude, destinationLatitude, label="destination")
        validateCoordinate(currentLongitude, currentLatitude, label="current")
        _validateRadius(radius)

        return await self.client.request(
            ENDPOINT_CHECK_NEARBY,
            params={
                "destination_latitude": destinationLatitude,
                "destination_longitude": destinationLongitude,
                "current_latitude": currentLatitude,
                "current_longitude": currentLongitude,
                "radius": radius,
            },
        )

    async def setPoint(self, name: str, longitude: float, latitude: float, radius: float) -> ApiResponse:
        """Store a new geofence point.

        Args:
            name: Point name
            longitude: Longitude of the center
            latitude: Latitude of the center
            radius: Radius in meters
        """
        validateCoordinate(longitude, latitude)
        _validateRadius(radius)

        return await self.client.request(
            ENDPOINT_GEOFENCE_SET_POINT,
            data={"name": name, "longitude": longitude, "latitude": latitude, "radius": radius},
        )

    async def getPoints(self) -> ApiResponse:
        return await self.client.request(ENDPOINT_GEOFENCE_POINTS)

    async def getPoint(self, pointId: str) -> ApiResponse:
        return await self.client.request(ENDPOINT_GEOFENCE_POINT, pointId=pointId)

    async def updatePoint(
        self,
        pointId: str,
        name: Optional[str] = None,
        longitude: Optional[float] = None,
        latitude: Optional[float] = None,
        radius: Optional[float] = None,
    ) -> ApiResponse:
        """Update fields of a stored geofence point.

        Only the given fields are sent.

        Raises:
            BarikoiValidationError: If no field is given or a value is invalid
        """
        fields: Dict[str, Any] = {
            key: value
            for key, value in (("name", name), ("longitude", longitude), ("latitude", latitude), ("radius", radius))
            if value is not None
        }
        if not fields:
            raise BarikoiValidationError("At least one of name, longitude, latitude or radius is required")

        if longitude is not None or latitude is not None:
            # Range-check whichever half is given, the other half with a neutral value
            validateCoordinate(longitude if longitude is not None else 0, latitude if latitude is not None else 0)
        if radius is not None:
            _validateRadius(radius)

        return await self.client.request(ENDPOINT_GEOFENCE_UPDATE_POINT, data=fields, pointId=pointId)

    async def deletePoint(self, pointId: str) -> ApiResponse:
        logger.debug(f"Deleting geofence point {pointId}")
        return await self.client.request(ENDPOINT_GEOFENCE_DELETE_POINT, pointId=pointId)

    async def checkGeofence(self, longitude: float, latitude: float) -> ApiResponse:
        """Find stored geofences containing a coordinate"""
        validateCoordinate(longitude, latitude)
        return await self.client.request(ENDPOINT_GEOFENCE_CHECK, params={"longitude": longitude, "latitude": latitude})
