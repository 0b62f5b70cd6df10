"""
Input validation and parameter shaping shared by the Barikoi services.
"""

from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from ..constants import MAX_LATITUDE, MAX_LONGITUDE, MIN_LATITUDE, MIN_LONGITUDE
from ..exceptions import BarikoiValidationError
from ..models import Point


def isValidCoordinate(longitude: Any, latitude: Any) -> bool:
    """Check that both values are numbers inside the WGS84 ranges"""
    if isinstance(longitude, bool) or isinstance(latitude, bool):
        return False
    if not isinstance(longitude, Real) or not isinstance(latitude, Real):
        return False
    return MIN_LONGITUDE <= longitude <= MAX_LONGITUDE and MIN_LATITUDE <= latitude <= MAX_LATITUDE


def validateCoordinate(longitude: Any, latitude: Any, label: Optional[str] = None) -> None:
    """Raise BarikoiValidationError if the coordinate is out of range, dood!

    Args:
        longitude: Longitude, -180 to 180
        latitude: Latitude, -90 to 90
        label: Optional name of the coordinate used in the message (e.g. "destination")
    """
    if isValidCoordinate(longitude, latitude):
        return

    prefix = f'"{label}" ' if label else ""
    raise BarikoiValidationError(
        f"Invalid latitude or longitude: {prefix}latitude must be between -90 and 90, "
        f"longitude between -180 and 180 (got latitude={latitude}, longitude={longitude})."
    )


def validatePoints(points: Iterable[Mapping[str, Any]]) -> List[Point]:
    """Validate a sequence of ``{"longitude", "latitude"}`` mappings.

    Returns:
        Points as a list, in input order
    """
    result: List[Point] = []
    for index, point in enumerate(points):
        if not isinstance(point, Mapping) or "longitude" not in point or "latitude" not in point:
            raise BarikoiValidationError(
                f"Invalid point #{index}: each point must contain 'longitude' and 'latitude' keys."
            )
        validateCoordinate(point["longitude"], point["latitude"], label=f"point #{index}")
        result.append(Point(longitude=point["longitude"], latitude=point["latitude"]))
    return result


def encodeCoordinates(points: Iterable[Point]) -> str:
    """Encode points into the ``lon,lat;lon,lat`` path segment used by routing"""
    return ";".join(f"{point['longitude']},{point['latitude']}" for point in points)


def encodeBooleans(options: Mapping[str, Any], values: Tuple[str, str] = ("true", "false")) -> Dict[str, Any]:
    """Replace boolean option values with endpoint-specific strings.

    Args:
        options: Request options
        values: Strings used for ``True`` and ``False``

    Returns:
        New dict, non-boolean values untouched
    """
    trueValue, falseValue = values
    return {
        key: (trueValue if value else falseValue) if isinstance(value, bool) else value
        for key, value in options.items()
    }


def checkAllowedOptions(options: Mapping[str, Any], allowed: Iterable[str], operation: str) -> None:
    """Reject option keys outside of the allow-list"""
    allowedSet = set(allowed)
    unsupported = sorted(key for key in options if key not in allowedSet)
    if unsupported:
        raise BarikoiValidationError(
            f"Unsupported option(s) for {operation}: {', '.join(unsupported)}. "
            f"Allowed options are: {', '.join(sorted(allowedSet))}."
        )


def formatPathNumber(value: float) -> str:
    """Render a number for a URL path segment without a trailing ``.0``"""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise BarikoiValidationError(f"Expected a number, got {value!r}")
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
