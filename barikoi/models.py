"""
Barikoi API Data Models

This module defines TypedDict request shapes and the two response containers
returned by every API call.
"""

from typing import Any, TypedDict, Union


class Point(TypedDict):
    """Geographic coordinate, dood!"""

    longitude: float  # -180 to 180
    latitude: float  # -90 to 90


class Waypoint(TypedDict):
    """Intermediate stop of an optimized route"""

    id: int  # Ordering key, waypoints are sent sorted by it
    point: str  # "lat,lng"


class NavigationEndpoints(TypedDict):
    """Start and destination of a navigation route"""

    start: Point
    destination: Point


class ListResult(list):
    """Response whose JSON body was an array, dood!"""

    isList = True


class RecordResult(dict):
    """Response whose JSON body was an object.

    Top-level keys are also readable as attributes:

        >>> result = RecordResult({"status": 200})
        >>> result.status
        200
    """

    isList = False

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"Response has no field '{name}'") from None


ApiResponse = Union[ListResult, RecordResult]
