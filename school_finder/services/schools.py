import logging
from typing import Any, List, Optional, Union

from school_finder.services.distance import rank_by_distance
from school_finder.services.domain import Coordinate, RankedSchool, School
from school_finder.services.store import SchoolStore
from school_finder.services.validation import validate_new_school


"""School operations: add one record, list records ranked by proximity.

Both take the store explicitly. Validation happens before any store call;
StoreError from the store propagates to the caller unchanged.
- schools
"""

logger = logging.getLogger(__name__)


async def add_school(
    store: SchoolStore,
    name: Any,
    address: Any,
    latitude: Any,
    longitude: Any,
) -> School:
    """Validate and persist one school, returning the stored record. - add_school"""
    new_school = validate_new_school(name, address, latitude, longitude)
    school = await store.add(new_school)
    logger.info("Added school id=%s name=%r", school.id, school.name)
    return school


async def list_schools(
    store: SchoolStore,
    reference: Optional[Coordinate] = None,
) -> Union[List[School], List[RankedSchool]]:
    """Fetch all schools, ranked by distance when a reference is given. - list_schools

    Without a reference the store order is returned as is.
    """
    schools = await store.list_all()
    if reference is None:
        return schools
    return rank_by_distance(schools, reference)
