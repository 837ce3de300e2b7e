from fastapi import APIRouter, Depends

from app.api.v1.schemas.analytics import AnalyticsResponse, DelayDistributionOut, HourBucketOut
from app.api.v1.schemas.reference import AirlineOut, AirportOut, IncidentOut, RouteOut
from app.core.deps import get_store
from app.scoring.v1.delay_stats import delay_distribution, peak_hour_analysis
from app.storage.reference_store import ReferenceStore

router = APIRouter(prefix="/v1", tags=["analytics"])


@router.get("/analytics", response_model=AnalyticsResponse)
def get_analytics(store: ReferenceStore = Depends(get_store)):
    delayed = store.delayed_flight_rows()

    dist = delay_distribution(row.delay_minutes for row in delayed)
    hours = peak_hour_analysis((row.scheduled_departure, row.delay_minutes) for row in delayed)

    return AnalyticsResponse(
        airlines=[AirlineOut.model_validate(a) for a in store.airlines_by_otp()],
        airports=[AirportOut.model_validate(a) for a in store.airports_by_otp(20)],
        delayed_routes=[RouteOut.model_validate(r) for r in store.routes_ordered("avg_delay", 10)],
        reliable_routes=[RouteOut.model_validate(r) for r in store.routes_ordered("reliability_index", 10)],
        flight_stats=store.flight_status_counts(),
        delay_distribution=DelayDistributionOut(**dist.__dict__),
        peak_hour_analysis=[HourBucketOut(**h.__dict__) for h in hours],
        active_incidents=[IncidentOut.model_validate(i) for i in store.incidents(resolved=False)],
    )
