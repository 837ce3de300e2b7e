from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class PredictionRequest(BaseModel):
    origin_iata: str = Field(..., min_length=1, description="Origin airport IATA code")
    dest_iata: str = Field(..., min_length=1, description="Destination airport IATA code")
    airline_iata: str = Field(..., min_length=1, description="Operating carrier IATA code")

    scheduled_departure: Optional[datetime] = Field(
        None, description="ISO datetime; aware values are shifted to the origin airport's timezone"
    )
    turnaround_minutes: Optional[float] = Field(None, gt=0)


class FactorOut(BaseModel):
    name: str
    value: float
    impact: Literal["positive", "negative", "neutral"]
    description: str


class PredictionResponse(BaseModel):
    reliability_score: float = Field(..., ge=0, le=100)
    predicted_delay_minutes: int = Field(..., ge=0)
    confidence: float = Field(..., ge=0.6, le=0.95)
    factors: list[FactorOut]
    explanation: str
