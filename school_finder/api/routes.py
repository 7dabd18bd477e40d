import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from school_finder.api import schemas
from school_finder.core.errors import SchoolValidationError, StoreError
from school_finder.services.schools import add_school, list_schools
from school_finder.services.store import SchoolStore
from school_finder.services.validation import parse_reference


"""API routes for adding and listing schools. - api, routes"""

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> SchoolStore:
    """Return the store attached to the running application. - get_store"""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(status_code=500, detail="Record store is not available")
    return store


@router.post("/addSchool", status_code=201)
async def add_school_route(
    req: schemas.SchoolCreate,
    store: SchoolStore = Depends(get_store),
):
    """Validate and store a new school. - add_school"""
    try:
        school = await add_school(store, req.name, req.address, req.latitude, req.longitude)
    except SchoolValidationError as exc:
        logger.info("Rejected school: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except StoreError as exc:
        logger.exception("Failed to add school")
        raise HTTPException(status_code=500, detail="Failed to add school") from exc

    return schemas.success_response(
        message="School added successfully",
        data=schemas.serialize_school(school),
    )


@router.get("/listSchools")
async def list_schools_route(
    latitude: Optional[str] = None,
    longitude: Optional[str] = None,
    store: SchoolStore = Depends(get_store),
):
    """List schools, ordered by distance when latitude and longitude are given. - list_schools"""
    try:
        reference = parse_reference(latitude, longitude)
    except SchoolValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        items = await list_schools(store, reference)
    except StoreError as exc:
        logger.exception("Failed to fetch schools")
        raise HTTPException(status_code=500, detail="Failed to fetch schools") from exc

    data = [schemas.serialize_listing_item(item) for item in items]
    return schemas.success_response(count=len(data), data=data)


@router.get("/health", tags=["health"])
async def health(request: Request):
    """Report store connectivity. Always answers 200. - health"""
    store: Optional[SchoolStore] = getattr(request.app.state, "store", None)
    connected = store is not None and await store.ping()
    return {
        "status": "ok",
        "store": "connected" if connected else "disconnected",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
