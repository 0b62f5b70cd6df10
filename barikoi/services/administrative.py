"""
Administrative Service

Administrative boundaries of Bangladesh: divisions, districts, thanas, wards,
zones and city corporations.
"""

import logging
from typing import Any, Dict, Optional

from ..client import BarikoiClient
from ..constants import (
    ENDPOINT_AREAS,
    ENDPOINT_CITY_AREAS,
    ENDPOINT_CITY_CORPORATION,
    ENDPOINT_DISTRICTS,
    ENDPOINT_DIVISIONS,
    ENDPOINT_SUBDISTRICTS,
    ENDPOINT_THANAS,
    ENDPOINT_UNIONS,
    ENDPOINT_WARD,
    ENDPOINT_WARD_GEOMETRY,
    ENDPOINT_WARD_GEOMETRY_ALL,
    ENDPOINT_WARD_ZONE,
    ENDPOINT_ZONE,
    ENDPOINT_ZONE_GEOMETRY,
    ENDPOINT_ZONES,
)
from ..models import ApiResponse
from .validation import validateCoordinate

logger = logging.getLogger(__name__)


def _filters(**values: Optional[Any]) -> Dict[str, Any]:
    """Drop filters that were not given"""
    return {key: value for key, value in values.items() if value is not None}


class AdministrativeService:
    """Administrative boundary lookups, dood!

    Example:
        >>> admin = AdministrativeService(BarikoiClient("your_api_key"))
        >>> districts = await admin.getDistricts(division="Dhaka")
    """

    def __init__(self, client: BarikoiClient):
        self.client = client

    async def getDivisions(self) -> ApiResponse:
        return await self.client.request(ENDPOINT_DIVISIONS)

    async def getDistricts(self, division: Optional[str] = None) -> ApiResponse:
        """Get districts, optionally of a single division"""
        return await self.client.request(ENDPOINT_DISTRICTS, params=_filters(division=division))

    async def getSubdistricts(self, district: Optional[str] = None) -> ApiResponse:
        return await self.client.request(ENDPOINT_SUBDISTRICTS, params=_filters(district=district))

    async def getThanas(self, district: Optional[str] = None) -> ApiResponse:
        return await self.client.request(ENDPOINT_THANAS, params=_filters(district=district))

    async def getUnions(self, subdistrict: Optional[str] = None) -> ApiResponse:
        return await self.client.request(ENDPOINT_UNIONS, params=_filters(subdistrict=subdistrict))

    async def getAreas(self, city: Optional[str] = None) -> ApiResponse:
        return await self.client.request(ENDPOINT_AREAS, params=_filters(city=city))

    async def getCityWithAreas(self, city: Optional[str] = None) -> ApiResponse:
        """Get cities together with their areas"""
        return await self.client.request(ENDPOINT_CITY_AREAS, params=_filters(city=city))

    async def getWardAndZone(self, longitude: float, latitude: float) -> ApiResponse:
        """Get ward and zone containing a coordinate.

        Args:
            longitude: Longitude
            latitude: Latitude

        Raises:
            BarikoiValidationError: If the coordinate is out of range
        """
        validateCoordinate(longitude, latitude)
        return await self.client.request(ENDPOINT_WARD_ZONE, params={"longitude": longitude, "latitude": latitude})

    async def getWard(self, longitude: float, latitude: float) -> ApiResponse:
        validateCoordinate(longitude, latitude)
        return await self.client.request(ENDPOINT_WARD, params={"longitude": longitude, "latitude": latitude})

    async def getAllWardGeometry(self) -> ApiResponse:
        return await self.client.request(ENDPOINT_WARD_GEOMETRY_ALL)

    async def getWardGeometry(self, wardId: int) -> ApiResponse:
        """Get geometry of a single ward"""
        return await self.client.request(ENDPOINT_WARD_GEOMETRY, wardId=wardId)

    async def getAllZones(self) -> ApiResponse:
        return await self.client.request(ENDPOINT_ZONES)

    async def getZone(self, longitude: float, latitude: float) -> ApiResponse:
        validateCoordinate(longitude, latitude)
        return await self.client.request(ENDPOINT_ZONE, params={"longitude": longitude, "latitude": latitude})

    async def getZoneGeometry(self, zoneId: int) -> ApiResponse:
        return await self.client.request(ENDPOINT_ZONE_GEOMETRY, zoneId=zoneId)

    async def getCityCorporation(self, longitude: float, latitude: float) -> ApiResponse:
        """Get city corporation (DNCC/DSCC) containing a coordinate.

        Coordinates go into the URL path: ``/search/dncc/{longitude}/{latitude}``.
        """
        validateCoordinate(longitude, latitude)
        return await self.client.request(ENDPOINT_CITY_CORPORATION, longitude=longitude, latitude=latitude)
