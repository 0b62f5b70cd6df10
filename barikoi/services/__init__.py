"""
Barikoi API services, one class per endpoint group.
"""

from .administrative import AdministrativeService
from .geofence import GeofenceService
from .location import LocationService
from .route import RouteService

__all__ = [
    "AdministrativeService",
    "GeofenceService",
    "LocationService",
    "RouteService",
]
