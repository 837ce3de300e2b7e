from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from app.api.v1.schemas.common import Pagination


class AirlineOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    iata: str
    icao: Optional[str] = None
    name: str
    country: Optional[str] = None
    otp_percent: float
    avg_delay: float
    fleet_size: Optional[int] = None
    logo_url: Optional[str] = None


class AirportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    iata: str
    icao: Optional[str] = None
    name: str
    city: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    otp_percent: float
    avg_delay: float
    total_flights: int
    risk_score: Optional[float] = None
    wiki_link: Optional[str] = None
    cluster_tag: Optional[str] = None
    timezone: Optional[str] = None


class AirportWithIncidents(AirportOut):
    active_incidents: int = 0


class RouteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    origin_iata: str
    dest_iata: str
    airline_iata: str
    airline_name: Optional[str] = None
    otp_percent: float
    avg_delay: float
    weather_risk: float
    peak_hour_factor: float
    reliability_index: float


class RouteEnriched(RouteOut):
    origin_city: str
    origin_name: str
    dest_city: str
    dest_name: str


class FlightOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    icao24: Optional[str] = None
    callsign: str
    airline_iata: str
    departure_iata: str
    arrival_iata: str
    scheduled_departure: datetime
    actual_departure: Optional[datetime] = None
    scheduled_arrival: Optional[datetime] = None
    actual_arrival: Optional[datetime] = None
    delay_minutes: Optional[int] = None
    altitude: Optional[float] = None
    velocity: Optional[float] = None
    true_track: Optional[float] = None
    reliability_score: float
    status: str
    turnaround_estimate: Optional[int] = None
    coordinates: Optional[dict[str, Any]] = None


class FlightEnriched(FlightOut):
    airline_name: str
    departure_city: str
    departure_name: str
    arrival_city: str
    arrival_name: str


class IncidentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    airport_iata: str
    date: datetime
    type: str
    impact_level: int
    description: str
    resolved: bool


class AirlinePage(BaseModel):
    data: list[AirlineOut]
    pagination: Pagination


class AirportPage(BaseModel):
    data: list[AirportWithIncidents]
    pagination: Pagination


class RoutePage(BaseModel):
    data: list[RouteEnriched]
    pagination: Pagination


class FlightPage(BaseModel):
    data: list[FlightEnriched]
    pagination: Pagination


class FlightDetail(BaseModel):
    flight: FlightOut
    airline: Optional[AirlineOut] = None
    departure: Optional[AirportOut] = None
    arrival: Optional[AirportOut] = None
    route: Optional[RouteOut] = None
    history: list[FlightOut]
    explanation: str
