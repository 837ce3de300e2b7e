from __future__ import annotations

from typing import Any, Optional, Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from app.models.airline import Airline
from app.models.airport import Airport
from app.models.flight import Flight
from app.models.incident import Incident
from app.models.route import Route
from app.scoring.v1.delay_prediction import (
    AirlineRef,
    AirportRef,
    HistoricalFlight,
    RouteRef,
)

ROUTE_SORT_COLUMNS = {
    "reliability_index": Route.reliability_index,
    "avg_delay": Route.avg_delay,
    "otp_percent": Route.otp_percent,
    "weather_risk": Route.weather_risk,
    "peak_hour_factor": Route.peak_hour_factor,
}


def airline_ref(row: Optional[Airline]) -> Optional[AirlineRef]:
    if row is None:
        return None
    return AirlineRef(iata=row.iata, otp_percent=float(row.otp_percent), name=row.name)


def airport_ref(row: Optional[Airport]) -> Optional[AirportRef]:
    if row is None:
        return None
    return AirportRef(
        iata=row.iata,
        otp_percent=float(row.otp_percent),
        avg_delay_minutes=float(row.avg_delay or 0.0),
        name=row.name,
    )


def route_ref(row: Optional[Route]) -> Optional[RouteRef]:
    if row is None:
        return None
    return RouteRef(
        origin_iata=row.origin_iata,
        dest_iata=row.dest_iata,
        airline_iata=row.airline_iata,
        weather_risk_factor=float(row.weather_risk),
        avg_delay_minutes=float(row.avg_delay),
        peak_hour_factor=float(row.peak_hour_factor if row.peak_hour_factor is not None else 1.0),
    )


class ReferenceStore:
    """
    Read-only access to airlines, airports, routes, flights and incidents.
    One instance per request, wrapping that request's Session.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- lookups ---

    def get_airline(self, iata: str) -> Optional[Airline]:
        return self.db.get(Airline, iata)

    def get_airport(self, iata: str) -> Optional[Airport]:
        return self.db.get(Airport, iata)

    def get_flight(self, flight_id: str) -> Optional[Flight]:
        return self.db.get(Flight, flight_id)

    def get_route(self, route_id: int) -> Optional[Route]:
        return self.db.get(Route, route_id)

    def find_route(self, *, origin_iata: str, dest_iata: str, airline_iata: str) -> Optional[Route]:
        stmt = (
            select(Route)
            .where(
                Route.origin_iata == origin_iata,
                Route.dest_iata == dest_iata,
                Route.airline_iata == airline_iata,
            )
            .order_by(Route.id)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def recent_flights(
        self,
        *,
        departure_iata: str,
        arrival_iata: str,
        airline_iata: str,
        limit: int,
        exclude_id: Optional[str] = None,
    ) -> list[Flight]:
        stmt = select(Flight).where(
            Flight.departure_iata == departure_iata,
            Flight.arrival_iata == arrival_iata,
            Flight.airline_iata == airline_iata,
        )
        if exclude_id is not None:
            stmt = stmt.where(Flight.id != exclude_id)
        stmt = stmt.order_by(Flight.scheduled_departure.desc()).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def historical_sample(
        self,
        *,
        origin_iata: str,
        dest_iata: str,
        airline_iata: str,
        limit: int,
    ) -> list[HistoricalFlight]:
        flights = self.recent_flights(
            departure_iata=origin_iata,
            arrival_iata=dest_iata,
            airline_iata=airline_iata,
            limit=limit,
        )
        return [
            HistoricalFlight(delay_minutes=float(f.delay_minutes) if f.delay_minutes is not None else None)
            for f in flights
        ]

    # --- filtered lists (rows, total) ---

    def list_airlines(self, *, limit: int, offset: int) -> tuple[list[Airline], int]:
        stmt = select(Airline).order_by(Airline.otp_percent.desc()).limit(limit).offset(offset)
        rows = list(self.db.execute(stmt).scalars().all())
        total = self.db.execute(select(func.count()).select_from(Airline)).scalar_one()
        return rows, int(total)

    def list_airports(self, *, search: Optional[str], limit: int, offset: int) -> tuple[list[Airport], int]:
        conditions = []
        if search:
            pattern = f"%{search.lower()}%"
            conditions.append(
                or_(
                    func.lower(Airport.iata).like(pattern),
                    func.lower(Airport.name).like(pattern),
                    func.lower(Airport.city).like(pattern),
                    func.lower(Airport.country).like(pattern),
                )
            )

        stmt = (
            select(Airport)
            .where(*conditions)
            .order_by(Airport.total_flights.desc())
            .limit(limit)
            .offset(offset)
        )
        rows = list(self.db.execute(stmt).scalars().all())
        total = self.db.execute(select(func.count()).select_from(Airport).where(*conditions)).scalar_one()
        return rows, int(total)

    def list_routes(
        self,
        *,
        airline: Optional[str],
        origin: Optional[str],
        destination: Optional[str],
        sort_by: str,
        order: str,
        limit: int,
        offset: int,
    ) -> tuple[list[Route], int]:
        conditions = []
        if airline:
            conditions.append(Route.airline_iata == airline)
        if origin:
            conditions.append(Route.origin_iata == origin)
        if destination:
            conditions.append(Route.dest_iata == destination)

        col = ROUTE_SORT_COLUMNS[sort_by]
        stmt = (
            select(Route)
            .where(*conditions)
            .order_by(col.asc() if order == "asc" else col.desc(), Route.id)
            .limit(limit)
            .offset(offset)
        )
        rows = list(self.db.execute(stmt).scalars().all())
        total = self.db.execute(select(func.count()).select_from(Route).where(*conditions)).scalar_one()
        return rows, int(total)

    def list_flights(
        self,
        *,
        status: Optional[str],
        airline: Optional[str],
        departure: Optional[str],
        arrival: Optional[str],
        limit: int,
        offset: int,
    ) -> tuple[list[Flight], int]:
        conditions = []
        if status:
            conditions.append(Flight.status == status)
        if airline:
            conditions.append(Flight.airline_iata == airline)
        if departure:
            conditions.append(Flight.departure_iata == departure)
        if arrival:
            conditions.append(Flight.arrival_iata == arrival)

        stmt = (
            select(Flight)
            .where(*conditions)
            .order_by(Flight.scheduled_departure.desc())
            .limit(limit)
            .offset(offset)
        )
        rows = list(self.db.execute(stmt).scalars().all())
        total = self.db.execute(select(func.count()).select_from(Flight).where(*conditions)).scalar_one()
        return rows, int(total)

    # --- analytics / report queries ---

    def airlines_by_otp(self, limit: Optional[int] = None) -> list[Airline]:
        stmt = select(Airline).order_by(Airline.otp_percent.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def airports_by_otp(self, limit: int) -> list[Airport]:
        stmt = select(Airport).order_by(Airport.otp_percent.desc()).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def routes_ordered(self, column: str, limit: int) -> list[Route]:
        stmt = select(Route).order_by(ROUTE_SORT_COLUMNS[column].desc(), Route.id).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def routes_touching(self, iata: str, limit: int) -> list[Route]:
        stmt = (
            select(Route)
            .where(or_(Route.origin_iata == iata, Route.dest_iata == iata))
            .order_by(Route.id)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def flight_status_counts(self) -> dict[str, int]:
        stmt = select(Flight.status, func.count(Flight.id)).group_by(Flight.status)
        return {status: int(n) for status, n in self.db.execute(stmt).all()}

    def count_flights(self, *, status: Optional[str] = None, airport_iata: Optional[str] = None) -> int:
        stmt = select(func.count()).select_from(Flight)
        if status:
            stmt = stmt.where(Flight.status == status)
        if airport_iata:
            stmt = stmt.where(or_(Flight.departure_iata == airport_iata, Flight.arrival_iata == airport_iata))
        return int(self.db.execute(stmt).scalar_one())

    def delayed_flight_rows(self) -> Sequence[Any]:
        stmt = select(Flight.scheduled_departure, Flight.delay_minutes).where(Flight.delay_minutes.is_not(None))
        return self.db.execute(stmt).all()

    def incidents(
        self,
        *,
        airport_iata: Optional[str] = None,
        resolved: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> list[Incident]:
        stmt = select(Incident)
        if airport_iata:
            stmt = stmt.where(Incident.airport_iata == airport_iata)
        if resolved is not None:
            stmt = stmt.where(Incident.resolved.is_(resolved))
        stmt = stmt.order_by(Incident.date.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def active_incident_counts(self, airport_iatas: Sequence[str]) -> dict[str, int]:
        if not airport_iatas:
            return {}
        stmt = (
            select(Incident.airport_iata, func.count(Incident.id))
            .where(Incident.airport_iata.in_(list(airport_iatas)), Incident.resolved.is_(False))
            .group_by(Incident.airport_iata)
        )
        return {iata: int(n) for iata, n in self.db.execute(stmt).all()}

    def airports_by_iata(self, iatas: Sequence[str]) -> dict[str, Airport]:
        if not iatas:
            return {}
        stmt = select(Airport).where(Airport.iata.in_(set(iatas)))
        return {a.iata: a for a in self.db.execute(stmt).scalars().all()}

    def airlines_by_iata(self, iatas: Sequence[str]) -> dict[str, Airline]:
        if not iatas:
            return {}
        stmt = select(Airline).where(Airline.iata.in_(set(iatas)))
        return {a.iata: a for a in self.db.execute(stmt).scalars().all()}
