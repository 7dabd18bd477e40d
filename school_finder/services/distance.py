from math import sqrt
from typing import Iterable, List

from school_finder.services.domain import Coordinate, RankedSchool, School


"""Distance utilities.

Distances are planar Euclidean on raw degree values, not geodesic: one degree
of longitude counts the same as one degree of latitude everywhere.
- planar_distance: sqrt of summed squared lat/lon differences
- rank_by_distance: order schools from a reference coordinate

- distance
"""

DISTANCE_DECIMALS = 2


def planar_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute the planar Euclidean distance between two coordinates in degrees. - planar"""
    dlat = lat1 - lat2
    dlon = lon1 - lon2
    return sqrt(dlat ** 2 + dlon ** 2)


def rank_by_distance(schools: Iterable[School], reference: Coordinate) -> List[RankedSchool]:
    """Return schools ordered by ascending distance from reference. - rank_by_distance

    Sorting uses the unrounded distance and is stable, so equal distances keep
    the input order. The attached distance is rounded to two decimals.
    """
    measured = [
        (planar_distance(s.latitude, s.longitude, reference.latitude, reference.longitude), s)
        for s in schools
    ]
    # sort by distance asc
    measured.sort(key=lambda pair: pair[0])
    return [RankedSchool(school=s, distance=round(d, DISTANCE_DECIMALS)) for d, s in measured]
