from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse, Response

from app.api.v1.schemas.reference import AirlineOut, AirportOut, FlightOut, IncidentOut, RouteOut
from app.core.deps import get_store
from app.reports.export import report_to_csv
from app.scoring.v1.delay_stats import delay_rate_label
from app.storage.reference_store import ReferenceStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["reports"])

REPORT_TYPES = ("flight", "airport", "route", "summary")


def _dump(schema, row) -> Optional[dict]:
    if row is None:
        return None
    return schema.model_validate(row).model_dump(mode="json")


def _generated_at() -> str:
    return datetime.now(timezone.utc).isoformat()


def flight_report(store: ReferenceStore, flight_id: str) -> dict[str, Any]:
    flight = store.get_flight(flight_id)
    if flight is None:
        raise HTTPException(status_code=404, detail="Flight not found")

    return {
        "title": f"Flight Report: {flight.callsign}",
        "generated_at": _generated_at(),
        "flight": _dump(FlightOut, flight),
        "airline": _dump(AirlineOut, store.get_airline(flight.airline_iata)),
        "departure": _dump(AirportOut, store.get_airport(flight.departure_iata)),
        "arrival": _dump(AirportOut, store.get_airport(flight.arrival_iata)),
    }


def airport_report(store: ReferenceStore, iata: str) -> dict[str, Any]:
    airport = store.get_airport(iata)
    if airport is None:
        raise HTTPException(status_code=404, detail="Airport not found")

    return {
        "title": f"Airport Report: {airport.name}",
        "generated_at": _generated_at(),
        "airport": _dump(AirportOut, airport),
        "incidents": [_dump(IncidentOut, i) for i in store.incidents(airport_iata=iata, limit=10)],
        "routes": [_dump(RouteOut, r) for r in store.routes_touching(iata, 20)],
        "recent_flight_count": store.count_flights(airport_iata=iata),
    }


def route_report(store: ReferenceStore, route_id: str) -> dict[str, Any]:
    try:
        rid = int(route_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Route id must be an integer")

    route = store.get_route(rid)
    if route is None:
        raise HTTPException(status_code=404, detail="Route not found")

    flights = store.recent_flights(
        departure_iata=route.origin_iata,
        arrival_iata=route.dest_iata,
        airline_iata=route.airline_iata,
        limit=20,
    )

    return {
        "title": f"Route Report: {route.origin_iata} → {route.dest_iata}",
        "generated_at": _generated_at(),
        "route": _dump(RouteOut, route),
        "origin": _dump(AirportOut, store.get_airport(route.origin_iata)),
        "destination": _dump(AirportOut, store.get_airport(route.dest_iata)),
        "recent_flights": [_dump(FlightOut, f) for f in flights],
    }


def summary_report(store: ReferenceStore) -> dict[str, Any]:
    total = store.count_flights()
    active = store.count_flights(status="active")
    delayed = store.count_flights(status="delayed")

    return {
        "title": "Aviation Reliability Summary Report",
        "generated_at": _generated_at(),
        "overview": {
            "total_flights": total,
            "active_flights": active,
            "delayed_flights": delayed,
            "delay_rate": delay_rate_label(total, delayed),
        },
        "top_airports": [_dump(AirportOut, a) for a in store.airports_by_otp(10)],
        "airlines": [_dump(AirlineOut, a) for a in store.airlines_by_otp()],
        "top_routes": [_dump(RouteOut, r) for r in store.routes_ordered("reliability_index", 10)],
        "active_incidents": [_dump(IncidentOut, i) for i in store.incidents(resolved=False, limit=10)],
    }


@router.get("/reports")
def get_report(
    type: Optional[str] = Query(None, description="flight / airport / route / summary"),
    id: Optional[str] = Query(None, description="Flight id, airport IATA or route id"),
    format: Literal["json", "csv"] = Query("json"),
    store: ReferenceStore = Depends(get_store),
):
    if type not in REPORT_TYPES:
        raise HTTPException(status_code=400, detail="Invalid type. Use: flight, airport, route, or summary")
    if type != "summary" and not id:
        raise HTTPException(status_code=400, detail=f"id is required for {type} reports")

    if type == "flight":
        report = flight_report(store, id)
    elif type == "airport":
        report = airport_report(store, id)
    elif type == "route":
        report = route_report(store, id)
    else:
        report = summary_report(store)

    logger.info("Generated %s report id=%s format=%s", type, id, format)

    if format == "csv":
        return Response(
            content=report_to_csv(report),
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{type}-report.csv"'},
        )
    return JSONResponse(content=report)
