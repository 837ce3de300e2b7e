from pydantic import BaseModel

from app.api.v1.schemas.reference import AirlineOut, AirportOut, IncidentOut, RouteOut


class DelayDistributionOut(BaseModel):
    on_time: int
    minor: int
    moderate: int
    severe: int


class HourBucketOut(BaseModel):
    hour: str
    count: int
    total_delay: float
    avg_delay: float


class AnalyticsResponse(BaseModel):
    airlines: list[AirlineOut]
    airports: list[AirportOut]
    delayed_routes: list[RouteOut]
    reliable_routes: list[RouteOut]
    flight_stats: dict[str, int]
    delay_distribution: DelayDistributionOut
    peak_hour_analysis: list[HourBucketOut]
    active_incidents: list[IncidentOut]
