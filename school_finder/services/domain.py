from dataclasses import dataclass
from datetime import datetime
from typing import Optional


"""Domain records passed between the store, the services and the API layer.

These carry no transport or persistence concerns; the API layer serializes
them explicitly and the store maps them to and from table rows.
- domain
"""


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees. - coordinate"""
    latitude: float
    longitude: float


@dataclass(frozen=True)
class NewSchool:
    """Validated input for a school that has not been stored yet. - new_school"""
    name: str
    address: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class School:
    """A stored school record. - school"""
    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class RankedSchool:
    """A school together with its distance from a reference coordinate. - ranked_school"""
    school: School
    distance: float
