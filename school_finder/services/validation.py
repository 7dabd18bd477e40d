import math
from typing import Any, Optional

from school_finder.core.errors import SchoolValidationError
from school_finder.services.domain import Coordinate, NewSchool


"""Input validation for school records and reference coordinates.

Every function here runs before the store is touched and raises
SchoolValidationError with a message that is safe to return to the caller.
- validation
"""

INVALID_COORDINATE = "invalid or missing coordinate"

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_number(value: Any) -> Optional[float]:
    """Parse a JSON number or numeric text into a finite float, else None. - parse_number"""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _parse_in_range(field: str, value: Any, bounds: tuple) -> float:
    number = parse_number(value)
    if number is None:
        raise SchoolValidationError(f"{field} must be a valid number")
    low, high = bounds
    if not low <= number <= high:
        raise SchoolValidationError(f"{field} must be between {low:g} and {high:g}")
    return number


def validate_new_school(name: Any, address: Any, latitude: Any, longitude: Any) -> NewSchool:
    """Check and normalize the four fields of a new school. - validate_new_school

    Missing or blank fields are reported together; coordinates are then parsed
    and range checked one at a time.
    """
    fields = {"name": name, "address": address, "latitude": latitude, "longitude": longitude}
    missing = [key for key, value in fields.items() if _is_blank(value)]
    if missing:
        raise SchoolValidationError("Missing required field(s): " + ", ".join(missing))

    if not isinstance(name, str) or not isinstance(address, str):
        raise SchoolValidationError("name and address must be text")

    return NewSchool(
        name=name.strip(),
        address=address.strip(),
        latitude=_parse_in_range("latitude", latitude, LATITUDE_RANGE),
        longitude=_parse_in_range("longitude", longitude, LONGITUDE_RANGE),
    )


def parse_reference(latitude: Optional[str], longitude: Optional[str]) -> Optional[Coordinate]:
    """Return the reference coordinate, None when neither part is given. - parse_reference

    Supplying only one part, or a part that is not a finite number, raises
    SchoolValidationError("invalid or missing coordinate").
    """
    if latitude is None and longitude is None:
        return None
    lat = parse_number(latitude)
    lon = parse_number(longitude)
    if lat is None or lon is None:
        raise SchoolValidationError(INVALID_COORDINATE)
    return Coordinate(latitude=lat, longitude=lon)
