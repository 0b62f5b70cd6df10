"""
Barikoi API Constants

This module contains all constants, enums and endpoint descriptors for the Barikoi API.
"""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any, Dict, Final, List, Optional

VERSION: Final[str] = "0.1.0"

# API Configuration
API_BASE_URL: Final[str] = "https://barikoi.xyz/v2/api"
DEFAULT_TIMEOUT: Final[int] = 60

# Environment variables
ENV_API_KEY: Final[str] = "BARIKOI_API_KEY"
ENV_BASE_URL: Final[str] = "BARIKOI_BASE_URL"
ENV_TIMEOUT: Final[str] = "BARIKOI_TIMEOUT"

# HTTP Methods
HTTP_GET: Final[str] = "GET"
HTTP_POST: Final[str] = "POST"
HTTP_DELETE: Final[str] = "DELETE"

# Content Types
CONTENT_TYPE_JSON: Final[str] = "application/json"

# Authentication
API_KEY_PARAM: Final[str] = "api_key"
# The navigation routing endpoint wants the key as `key` in the query string
API_KEY_QUERY_PARAM: Final[str] = "key"

# API Limits
MAX_WAYPOINTS: Final[int] = 50
MIN_LONGITUDE: Final[float] = -180.0
MAX_LONGITUDE: Final[float] = 180.0
MIN_LATITUDE: Final[float] = -90.0
MAX_LATITUDE: Final[float] = 90.0

# Defaults
DEFAULT_NEARBY_DISTANCE_KM: Final[float] = 0.5
DEFAULT_NEARBY_LIMIT: Final[int] = 10
DEFAULT_GEOFENCE_RADIUS: Final[float] = 50
DEFAULT_GEOMETRIES: Final[str] = "polyline"

# Messages
DEFAULT_API_ERROR_MESSAGE: Final[str] = "Unknown API error"
DEFAULT_VALIDATION_MESSAGE: Final[str] = "Validation failed"


class ErrorKind(StrEnum):
    """Category of an API error, derived from the HTTP status code"""

    BAD_REQUEST = "bad_request"
    AUTH_FAILED = "auth_failed"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class RouteProfile(StrEnum):
    """Transportation profile accepted by the routing endpoints"""

    CAR = "car"
    FOOT = "foot"
    BIKE = "bike"
    MOTORCYCLE = "motorcycle"


class RouteType(StrEnum):
    """Routing engine used by the navigation endpoint"""

    VH = "vh"
    GH = "gh"


# /route and /route/location/optimize
ROUTE_PROFILES: Final[List[str]] = [RouteProfile.CAR, RouteProfile.FOOT]
# /route/optimized
OPTIMIZED_ROUTE_PROFILES: Final[List[str]] = [RouteProfile.CAR, RouteProfile.BIKE, RouteProfile.MOTORCYCLE]
# /routing
NAVIGATION_PROFILES: Final[List[str]] = [RouteProfile.BIKE, RouteProfile.MOTORCYCLE, RouteProfile.CAR]
NAVIGATION_TYPE_SUPPORT: Final[Dict[str, List[str]]] = {
    RouteType.VH: [RouteProfile.MOTORCYCLE],
    RouteType.GH: [RouteProfile.MOTORCYCLE, RouteProfile.CAR, RouteProfile.BIKE],
}

AUTOCOMPLETE_OPTIONS: Final[frozenset] = frozenset({"bangla", "city", "area", "sub_area"})


@dataclass(frozen=True)
class Endpoint:
    """Describes a single API operation.

    Attributes:
        method: HTTP method
        path: Path relative to the host, may contain ``str.format`` placeholders
        host: Host/prefix override, ``None`` means the client's base URL
    """

    method: str
    path: str
    host: Optional[str] = None

    def bind(self, **pathArgs: Any) -> "Endpoint":
        """Return copy of the endpoint with path placeholders substituted"""
        if not pathArgs:
            return self
        return replace(self, path=self.path.format(**pathArgs))


# Location endpoints
ENDPOINT_REVERSE_GEOCODE: Final[Endpoint] = Endpoint(HTTP_GET, "/search/reverse/geocode")
ENDPOINT_AUTOCOMPLETE: Final[Endpoint] = Endpoint(HTTP_GET, "/search/autocomplete/place")
ENDPOINT_RUPANTOR_GEOCODE: Final[Endpoint] = Endpoint(HTTP_POST, "/search/rupantor/geocode")
ENDPOINT_SEARCH_PLACE: Final[Endpoint] = Endpoint(HTTP_GET, "/search-place")
ENDPOINT_PLACE_DETAILS: Final[Endpoint] = Endpoint(HTTP_GET, "/places")
ENDPOINT_NEARBY: Final[Endpoint] = Endpoint(HTTP_GET, "/search/nearby/{distance}/{limit}")
ENDPOINT_NEARBY_CATEGORY: Final[Endpoint] = Endpoint(HTTP_GET, "/search/nearby/category/{distance}/{limit}")
ENDPOINT_NEARBY_TYPES: Final[Endpoint] = Endpoint(HTTP_GET, "/search/nearby/multi/type/{distance}/{limit}")
ENDPOINT_SNAP_TO_ROAD: Final[Endpoint] = Endpoint(HTTP_GET, "/routing/nearest")
ENDPOINT_POINT_IN_POLYGON: Final[Endpoint] = Endpoint(HTTP_POST, "/point/polygon")

# Route endpoints
ENDPOINT_ROUTE: Final[Endpoint] = Endpoint(HTTP_GET, "/route/{coordinates}")
ENDPOINT_NAVIGATION: Final[Endpoint] = Endpoint(HTTP_POST, "/routing")
ENDPOINT_ROUTE_OPTIMIZED: Final[Endpoint] = Endpoint(HTTP_POST, "/route/optimized")
ENDPOINT_ROUTE_LOCATION_OPTIMIZE: Final[Endpoint] = Endpoint(HTTP_POST, "/route/location/optimize")
ENDPOINT_ROUTE_MATCH: Final[Endpoint] = Endpoint(HTTP_GET, "/match/{coordinates}")

# Administrative endpoints
ENDPOINT_DIVISIONS: Final[Endpoint] = Endpoint(HTTP_GET, "/divisions")
ENDPOINT_DISTRICTS: Final[Endpoint] = Endpoint(HTTP_GET, "/districts")
ENDPOINT_SUBDISTRICTS: Final[Endpoint] = Endpoint(HTTP_GET, "/subdistricts")
ENDPOINT_THANAS: Final[Endpoint] = Endpoint(HTTP_GET, "/thanas")
ENDPOINT_UNIONS: Final[Endpoint] = Endpoint(HTTP_GET, "/unions")
ENDPOINT_AREAS: Final[Endpoint] = Endpoint(HTTP_GET, "/areas")
ENDPOINT_CITY_AREAS: Final[Endpoint] = Endpoint(HTTP_GET, "/city/areas")
ENDPOINT_WARD_ZONE: Final[Endpoint] = Endpoint(HTTP_GET, "/ward-zone")
ENDPOINT_WARD: Final[Endpoint] = Endpoint(HTTP_GET, "/ward")
ENDPOINT_WARD_GEOMETRY_ALL: Final[Endpoint] = Endpoint(HTTP_GET, "/ward/geometry")
ENDPOINT_WARD_GEOMETRY: Final[Endpoint] = Endpoint(HTTP_GET, "/ward/geometry/{wardId}")
ENDPOINT_ZONES: Final[Endpoint] = Endpoint(HTTP_GET, "/zones")
ENDPOINT_ZONE: Final[Endpoint] = Endpoint(HTTP_GET, "/zone")
ENDPOINT_ZONE_GEOMETRY: Final[Endpoint] = Endpoint(HTTP_GET, "/zone/geometry/{zoneId}")
ENDPOINT_CITY_CORPORATION: Final[Endpoint] = Endpoint(HTTP_GET, "/search/dncc/{longitude}/{latitude}")

# Geofence endpoints
ENDPOINT_CHECK_NEARBY: Final[Endpoint] = Endpoint(HTTP_GET, "/check/nearby")
ENDPOINT_GEOFENCE_SET_POINT: Final[Endpoint] = Endpoint(HTTP_POST, "/geofence/point")
ENDPOINT_GEOFENCE_POINTS: Final[Endpoint] = Endpoint(HTTP_GET, "/geofence/points")
ENDPOINT_GEOFENCE_POINT: Final[Endpoint] = Endpoint(HTTP_GET, "/geofence/point/{pointId}")
ENDPOINT_GEOFENCE_UPDATE_POINT: Final[Endpoint] = Endpoint(HTTP_POST, "/geofence/point/{pointId}")
ENDPOINT_GEOFENCE_DELETE_POINT: Final[Endpoint] = Endpoint(HTTP_DELETE, "/geofence/point/{pointId}")
ENDPOINT_GEOFENCE_CHECK: Final[Endpoint] = Endpoint(HTTP_GET, "/geofence/check")
