from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.v1.schemas.common import pagination
from app.api.v1.schemas.reference import (
    AirlineOut,
    AirportOut,
    FlightDetail,
    FlightEnriched,
    FlightOut,
    FlightPage,
    RouteOut,
)
from app.core.config import settings
from app.core.deps import get_store
from app.scoring.v1.flight_explanation import explain_flight_delay
from app.storage.reference_store import ReferenceStore, airport_ref, route_ref

router = APIRouter(prefix="/v1", tags=["flights"])


@router.get("/flights", response_model=FlightPage)
def list_flights(
    status: Optional[str] = Query(None, description="scheduled / active / landed / delayed"),
    airline: Optional[str] = Query(None, description="Airline IATA code"),
    departure: Optional[str] = Query(None, description="Departure airport IATA code"),
    arrival: Optional[str] = Query(None, description="Arrival airport IATA code"),
    limit: int = Query(settings.default_page_limit, ge=1, le=settings.max_page_limit),
    offset: int = Query(0, ge=0),
    store: ReferenceStore = Depends(get_store),
):
    flights, total = store.list_flights(
        status=status,
        airline=airline,
        departure=departure,
        arrival=arrival,
        limit=limit,
        offset=offset,
    )

    airlines = store.airlines_by_iata([f.airline_iata for f in flights])
    airports = store.airports_by_iata(
        [f.departure_iata for f in flights] + [f.arrival_iata for f in flights]
    )

    data: list[FlightEnriched] = []
    for f in flights:
        al = airlines.get(f.airline_iata)
        dep = airports.get(f.departure_iata)
        arr = airports.get(f.arrival_iata)
        data.append(
            FlightEnriched(
                **FlightOut.model_validate(f).model_dump(),
                airline_name=(al.name if al else None) or f.airline_iata,
                departure_city=(dep.city if dep else None) or f.departure_iata,
                departure_name=(dep.name if dep else None) or f.departure_iata,
                arrival_city=(arr.city if arr else None) or f.arrival_iata,
                arrival_name=(arr.name if arr else None) or f.arrival_iata,
            )
        )

    return FlightPage(
        data=data,
        pagination=pagination(total=total, limit=limit, offset=offset, returned=len(flights)),
    )


@router.get("/flights/{flight_id}", response_model=FlightDetail)
def get_flight(flight_id: str, store: ReferenceStore = Depends(get_store)):
    flight = store.get_flight(flight_id)
    if flight is None:
        raise HTTPException(status_code=404, detail="Flight not found")

    airline = store.get_airline(flight.airline_iata)
    departure = store.get_airport(flight.departure_iata)
    arrival = store.get_airport(flight.arrival_iata)
    route = store.find_route(
        origin_iata=flight.departure_iata,
        dest_iata=flight.arrival_iata,
        airline_iata=flight.airline_iata,
    )

    history = store.recent_flights(
        departure_iata=flight.departure_iata,
        arrival_iata=flight.arrival_iata,
        airline_iata=flight.airline_iata,
        limit=settings.flight_history_limit,
        exclude_id=flight.id,
    )

    explanation = explain_flight_delay(
        reliability_score=float(flight.reliability_score),
        delay_minutes=flight.delay_minutes,
        route=route_ref(route),
        departure_airport=airport_ref(departure),
        arrival_airport=airport_ref(arrival),
    )

    return FlightDetail(
        flight=FlightOut.model_validate(flight),
        airline=AirlineOut.model_validate(airline) if airline else None,
        departure=AirportOut.model_validate(departure) if departure else None,
        arrival=AirportOut.model_validate(arrival) if arrival else None,
        route=RouteOut.model_validate(route) if route else None,
        history=[FlightOut.model_validate(h) for h in history],
        explanation=explanation,
    )
