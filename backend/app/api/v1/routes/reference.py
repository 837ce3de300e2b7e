from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query

from app.api.v1.schemas.common import pagination
from app.api.v1.schemas.reference import (
    AirlineOut,
    AirlinePage,
    AirportOut,
    AirportPage,
    AirportWithIncidents,
    RouteEnriched,
    RouteOut,
    RoutePage,
)
from app.core.config import settings
from app.core.deps import get_store
from app.storage.reference_store import ReferenceStore

router = APIRouter(prefix="/v1", tags=["reference"])

RouteSort = Literal["reliability_index", "avg_delay", "otp_percent", "weather_risk", "peak_hour_factor"]


@router.get("/airlines", response_model=AirlinePage)
def list_airlines(
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
    offset: int = Query(0, ge=0),
    store: ReferenceStore = Depends(get_store),
):
    rows, total = store.list_airlines(limit=limit, offset=offset)
    return AirlinePage(
        data=[AirlineOut.model_validate(r) for r in rows],
        pagination=pagination(total=total, limit=limit, offset=offset, returned=len(rows)),
    )


@router.get("/airports", response_model=AirportPage)
def list_airports(
    search: Optional[str] = Query(None, description="Matches IATA, name, city or country"),
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
    offset: int = Query(0, ge=0),
    store: ReferenceStore = Depends(get_store),
):
    rows, total = store.list_airports(search=search, limit=limit, offset=offset)
    incidents = store.active_incident_counts([r.iata for r in rows])

    return AirportPage(
        data=[
            AirportWithIncidents(
                **AirportOut.model_validate(r).model_dump(),
                active_incidents=incidents.get(r.iata, 0),
            )
            for r in rows
        ],
        pagination=pagination(total=total, limit=limit, offset=offset, returned=len(rows)),
    )


@router.get("/routes", response_model=RoutePage)
def list_routes(
    airline: Optional[str] = Query(None),
    origin: Optional[str] = Query(None),
    destination: Optional[str] = Query(None),
    sort_by: RouteSort = Query("reliability_index"),
    order: Literal["asc", "desc"] = Query("desc"),
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
    offset: int = Query(0, ge=0),
    store: ReferenceStore = Depends(get_store),
):
    rows, total = store.list_routes(
        airline=airline,
        origin=origin,
        destination=destination,
        sort_by=sort_by,
        order=order,
        limit=limit,
        offset=offset,
    )
    airports = store.airports_by_iata([r.origin_iata for r in rows] + [r.dest_iata for r in rows])

    data: list[RouteEnriched] = []
    for r in rows:
        org = airports.get(r.origin_iata)
        dst = airports.get(r.dest_iata)
        data.append(
            RouteEnriched(
                **RouteOut.model_validate(r).model_dump(),
                origin_city=(org.city if org else None) or r.origin_iata,
                origin_name=(org.name if org else None) or r.origin_iata,
                dest_city=(dst.city if dst else None) or r.dest_iata,
                dest_name=(dst.name if dst else None) or r.dest_iata,
            )
        )

    return RoutePage(
        data=data,
        pagination=pagination(total=total, limit=limit, offset=offset, returned=len(rows)),
    )
