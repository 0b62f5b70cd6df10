"""
Barikoi Client Library

An async Python client for the Barikoi geolocation API (Bangladesh maps):
geocoding, place search, routing, administrative boundaries and geofencing.

Basic usage:
    >>> from barikoi import Barikoi
    >>>
    >>> async with Barikoi("your_api_key") as barikoi:
    ...     place = await barikoi.reverseGeocode(90.3572, 23.8067, {"district": True})
    ...     print(place.place["address"])

The API key may also come from the BARIKOI_API_KEY environment variable or a
TOML file with a ``[barikoi]`` table.
"""

from .barikoi import Barikoi
from .client import BarikoiClient
from .config import BarikoiSettings, resolveSettings
from .constants import (
    API_BASE_URL,
    DEFAULT_TIMEOUT,
    MAX_WAYPOINTS,
    VERSION,
    Endpoint,
    ErrorKind,
    RouteProfile,
    RouteType,
)
from .exceptions import (
    BarikoiApiError,
    BarikoiConfigurationError,
    BarikoiError,
    BarikoiNetworkError,
    BarikoiValidationError,
    parseApiError,
)
from .models import ApiResponse, ListResult, NavigationEndpoints, Point, RecordResult, Waypoint
from .services import AdministrativeService, GeofenceService, LocationService, RouteService

__version__ = VERSION

# Public API
__all__ = [
    # Facade and transport
    "Barikoi",
    "BarikoiClient",
    "BarikoiSettings",
    "resolveSettings",
    # Services
    "AdministrativeService",
    "GeofenceService",
    "LocationService",
    "RouteService",
    # Constants
    "API_BASE_URL",
    "DEFAULT_TIMEOUT",
    "MAX_WAYPOINTS",
    "Endpoint",
    "ErrorKind",
    "RouteProfile",
    "RouteType",
    # Exceptions
    "BarikoiError",
    "BarikoiApiError",
    "BarikoiValidationError",
    "BarikoiNetworkError",
    "BarikoiConfigurationError",
    "parseApiError",
    # Models
    "ApiResponse",
    "ListResult",
    "RecordResult",
    "Point",
    "Waypoint",
    "NavigationEndpoints",
]
