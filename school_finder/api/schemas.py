from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

from school_finder.services.domain import RankedSchool, School


"""Pydantic request schemas and the wire serializers for responses. - schemas"""


class SchoolCreate(BaseModel):
    """Request body for /addSchool. Coordinates may be numbers or numeric text. - school_create"""
    name: Any = None
    address: Any = None
    latitude: Any = None
    longitude: Any = None


def serialize_school(school: School, distance: Optional[float] = None) -> Dict[str, Any]:
    """Produce the JSON representation of a stored school. - serialize_school"""
    data: Dict[str, Any] = {
        "id": school.id,
        "name": school.name,
        "address": school.address,
        "latitude": school.latitude,
        "longitude": school.longitude,
        "created_at": school.created_at.isoformat() if school.created_at else None,
    }
    if distance is not None:
        data["distance"] = distance
    return data


def serialize_listing_item(item: Union[School, RankedSchool]) -> Dict[str, Any]:
    """Serialize either a plain or a ranked school. - serialize_listing_item"""
    if isinstance(item, RankedSchool):
        return serialize_school(item.school, distance=item.distance)
    return serialize_school(item)


def success_response(**payload: Any) -> Dict[str, Any]:
    """Wrap a payload in the success envelope. - success_response"""
    return {"success": True, **payload}


def error_response(message: str) -> Dict[str, Any]:
    """Build the failure envelope. - error_response"""
    return {"success": False, "error": message}
