from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import pytz
from fastapi import APIRouter, Depends

from app.api.v1.schemas.prediction import FactorOut, PredictionRequest, PredictionResponse
from app.core.config import settings
from app.core.deps import get_store
from app.models.airport import Airport
from app.scoring.v1.delay_prediction import PredictionInput, predict_delay
from app.storage.reference_store import ReferenceStore, airline_ref, airport_ref, route_ref

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["predictions"])


def localize_departure(ts: Optional[datetime], origin: Optional[Airport]) -> Optional[datetime]:
    """
    Aware timestamps are shifted into the origin airport's timezone (UTC when
    unknown). Naive timestamps are taken as already local.
    """
    if ts is None or ts.tzinfo is None:
        return ts

    tz = pytz.UTC
    if origin is not None and origin.timezone:
        try:
            tz = pytz.timezone(origin.timezone)
        except pytz.UnknownTimeZoneError:
            logger.warning("Unknown timezone %r on airport %s; using UTC", origin.timezone, origin.iata)
    return ts.astimezone(tz)


@router.post("/predict-delay", response_model=PredictionResponse)
def post_predict_delay(
    body: PredictionRequest,
    store: ReferenceStore = Depends(get_store),
):
    airline = store.get_airline(body.airline_iata)
    origin = store.get_airport(body.origin_iata)
    dest = store.get_airport(body.dest_iata)
    route = store.find_route(
        origin_iata=body.origin_iata,
        dest_iata=body.dest_iata,
        airline_iata=body.airline_iata,
    )
    historical = store.historical_sample(
        origin_iata=body.origin_iata,
        dest_iata=body.dest_iata,
        airline_iata=body.airline_iata,
        limit=settings.history_sample_limit,
    )

    result = predict_delay(
        prediction_input=PredictionInput(
            origin_iata=body.origin_iata,
            dest_iata=body.dest_iata,
            airline_iata=body.airline_iata,
            scheduled_departure=localize_departure(body.scheduled_departure, origin),
            turnaround_minutes=body.turnaround_minutes,
        ),
        airline=airline_ref(airline),
        origin_airport=airport_ref(origin),
        dest_airport=airport_ref(dest),
        route=route_ref(route),
        historical=historical,
    )

    logger.info(
        "Predicted %s-%s/%s score=%.1f delay=%d confidence=%.2f history=%d",
        body.origin_iata,
        body.dest_iata,
        body.airline_iata,
        result.reliability_score,
        result.predicted_delay_minutes,
        result.confidence,
        len(historical),
    )

    return PredictionResponse(
        reliability_score=result.reliability_score,
        predicted_delay_minutes=result.predicted_delay_minutes,
        confidence=result.confidence,
        factors=[
            FactorOut(name=f.name, value=f.value, impact=f.impact, description=f.description)
            for f in result.factors
        ],
        explanation=result.explanation,
    )
