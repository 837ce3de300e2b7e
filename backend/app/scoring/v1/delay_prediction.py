from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional, Sequence

logger = logging.getLogger(__name__)

Impact = Literal["positive", "negative", "neutral"]

# Most-recent-first flights on the same origin/destination/airline triple.
HISTORY_SAMPLE_LIMIT = 50


@dataclass(frozen=True)
class AirlineRef:
    iata: str
    otp_percent: float
    name: Optional[str] = None


@dataclass(frozen=True)
class AirportRef:
    iata: str
    otp_percent: float
    avg_delay_minutes: float
    name: str


@dataclass(frozen=True)
class RouteRef:
    origin_iata: str
    dest_iata: str
    airline_iata: str
    weather_risk_factor: float
    avg_delay_minutes: float
    peak_hour_factor: float = 1.0


@dataclass(frozen=True)
class HistoricalFlight:
    delay_minutes: Optional[float]


@dataclass(frozen=True)
class PredictionInput:
    origin_iata: str
    dest_iata: str
    airline_iata: str
    scheduled_departure: Optional[datetime] = None
    turnaround_minutes: Optional[float] = None


@dataclass(frozen=True)
class FactorExplanation:
    name: str
    value: float
    impact: Impact
    description: str


@dataclass(frozen=True)
class PredictionResult:
    reliability_score: float
    predicted_delay_minutes: int
    confidence: float
    factors: list[FactorExplanation] = field(default_factory=list)
    explanation: str = ""


@dataclass(frozen=True)
class ScoringDefaults:
    airline_otp: float = 75.0
    airport_otp: float = 75.0
    weather_risk: float = 0.2
    avg_historical_delay: float = 15.0


DEFAULTS = ScoringDefaults()


@dataclass(frozen=True)
class ResolvedFactors:
    """
    Every input the formulas read, after the defaulting policy has been applied.
    """
    airline_otp: float
    origin_otp: float
    dest_otp: float
    airport_otp: float
    weather_risk: float
    time_of_day_factor: float
    turnaround_factor: float
    avg_historical_delay: float


def round_half_up(value: float, ndigits: int = 0) -> float:
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def format_fixed(value: float, digits: int) -> str:
    """Fixed-point text with ties rounded away from zero."""
    magnitude = round_half_up(abs(value), digits)
    sign = "-" if value < 0 and magnitude != 0 else ""
    return f"{sign}{magnitude:.{digits}f}"


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def time_of_day_factor(scheduled_departure: Optional[datetime]) -> float:
    """
    Peak (07-09, 17-20) -> 1.3, night (22-05) -> 0.8, otherwise 1.0.

    The hour is read as given; callers localize the timestamp beforehand.
    """
    if scheduled_departure is None:
        return 1.0
    hour = scheduled_departure.hour
    if 7 <= hour <= 9 or 17 <= hour <= 20:
        return 1.3
    if hour >= 22 or hour <= 5:
        return 0.8
    return 1.0


def turnaround_factor(turnaround_minutes: Optional[float]) -> float:
    if not turnaround_minutes:
        return 1.0
    if turnaround_minutes < 30:
        return 0.7
    if turnaround_minutes < 45:
        return 0.85
    if turnaround_minutes > 90:
        return 1.1
    return 1.0


def average_historical_delay(
    historical: Sequence[HistoricalFlight],
    route: Optional[RouteRef],
    defaults: ScoringDefaults = DEFAULTS,
) -> float:
    if historical:
        return sum((f.delay_minutes or 0.0) for f in historical) / len(historical)
    if route is not None:
        return route.avg_delay_minutes
    return defaults.avg_historical_delay


def resolve_factors(
    *,
    prediction_input: PredictionInput,
    airline: Optional[AirlineRef] = None,
    origin_airport: Optional[AirportRef] = None,
    dest_airport: Optional[AirportRef] = None,
    route: Optional[RouteRef] = None,
    historical: Sequence[HistoricalFlight] = (),
    defaults: ScoringDefaults = DEFAULTS,
) -> ResolvedFactors:
    airline_otp = airline.otp_percent if airline is not None else defaults.airline_otp
    origin_otp = origin_airport.otp_percent if origin_airport is not None else defaults.airport_otp
    dest_otp = dest_airport.otp_percent if dest_airport is not None else defaults.airport_otp

    return ResolvedFactors(
        airline_otp=airline_otp,
        origin_otp=origin_otp,
        dest_otp=dest_otp,
        airport_otp=(origin_otp + dest_otp) / 2,
        weather_risk=route.weather_risk_factor if route is not None else defaults.weather_risk,
        time_of_day_factor=time_of_day_factor(prediction_input.scheduled_departure),
        turnaround_factor=turnaround_factor(prediction_input.turnaround_minutes),
        avg_historical_delay=average_historical_delay(historical, route, defaults),
    )


def reliability_score(f: ResolvedFactors) -> float:
    """
    score = 0.5*airline_otp + 0.3*airport_otp - 0.2*weather_risk*100
          + 0.1*turnaround_factor*100 - 0.05*(time_of_day_factor - 1)*100

    Clamped to [0, 100], not rounded.
    """
    score = (
        0.5 * f.airline_otp
        + 0.3 * f.airport_otp
        - 0.2 * f.weather_risk * 100
        + 0.1 * f.turnaround_factor * 100
        - 0.05 * (f.time_of_day_factor - 1) * 100
    )
    return clamp(score, 0.0, 100.0)


def predicted_delay_minutes(f: ResolvedFactors) -> int:
    weather_impact = f.weather_risk * 20
    peak_hour_impact = (f.time_of_day_factor - 1) * 15
    turnaround_impact = (1 - f.turnaround_factor) * 10
    otp_impact = ((100 - f.airport_otp) / 100) * 10

    delay = (
        f.avg_historical_delay * 0.5
        + weather_impact
        + peak_hour_impact
        + turnaround_impact
        + otp_impact
    )
    return max(0, int(round_half_up(delay)))


def confidence(
    *,
    route_present: bool,
    sample_size: int,
    airline_present: bool,
    both_airports_present: bool,
) -> float:
    value = 0.6
    if route_present:
        value += 0.1
    if sample_size >= 10:
        value += 0.15
    elif sample_size >= 5:
        value += 0.1
    if airline_present:
        value += 0.05
    if both_airports_present:
        value += 0.1
    return min(0.95, value)


def _impact(positive: bool, negative: bool) -> Impact:
    if positive:
        return "positive"
    if negative:
        return "negative"
    return "neutral"


def build_factors(
    f: ResolvedFactors,
    *,
    prediction_input: PredictionInput,
    airline: Optional[AirlineRef] = None,
) -> list[FactorExplanation]:
    carrier = (airline.name if airline is not None else None) or prediction_input.airline_iata

    factors = [
        FactorExplanation(
            name="Airline OTP",
            value=f.airline_otp,
            impact=_impact(f.airline_otp >= 80, f.airline_otp < 70),
            description=f"{carrier} has {format_fixed(f.airline_otp, 1)}% on-time performance",
        ),
        FactorExplanation(
            name="Airport OTP",
            value=f.airport_otp,
            impact=_impact(f.airport_otp >= 75, f.airport_otp < 70),
            description=f"Combined airport on-time rate: {format_fixed(f.airport_otp, 1)}%",
        ),
        FactorExplanation(
            name="Weather Risk",
            value=f.weather_risk * 100,
            impact=_impact(f.weather_risk < 0.2, f.weather_risk > 0.35),
            description=f"Weather risk factor: {format_fixed(f.weather_risk * 100, 0)}%",
        ),
        FactorExplanation(
            name="Time of Day",
            value=f.time_of_day_factor * 100 - 100,
            impact=_impact(f.time_of_day_factor <= 1, f.time_of_day_factor > 1.2),
            description=(
                "Peak hour departure increases delay risk"
                if f.time_of_day_factor > 1
                else "Off-peak departure time"
            ),
        ),
    ]

    turnaround = prediction_input.turnaround_minutes
    if turnaround:
        factors.append(
            FactorExplanation(
                name="Turnaround",
                value=turnaround,
                impact=_impact(f.turnaround_factor >= 1, f.turnaround_factor < 0.8),
                description=f"{turnaround:g} min turnaround time",
            )
        )

    return factors


def generate_explanation(score: float, delay: int, factors: Sequence[FactorExplanation]) -> str:
    if score >= 80:
        parts = [f"High reliability expected ({format_fixed(score, 1)} score)."]
    elif score >= 70:
        parts = [f"Moderate reliability expected ({format_fixed(score, 1)} score)."]
    else:
        parts = [f"Lower reliability predicted ({format_fixed(score, 1)} score)."]

    if delay <= 10:
        parts.append("On-time arrival is likely.")
    elif delay <= 30:
        parts.append(f"Minor delay of ~{delay} minutes expected.")
    else:
        parts.append(f"Significant delay of ~{delay} minutes predicted.")

    negative = [x.name.lower() for x in factors if x.impact == "negative"]
    positive = [x.name.lower() for x in factors if x.impact == "positive"]
    if negative:
        parts.append(f"Risk factors: {', '.join(negative)}.")
    if positive:
        parts.append(f"Favorable factors: {', '.join(positive)}.")

    return " ".join(parts).strip()


def predict_delay(
    *,
    prediction_input: PredictionInput,
    airline: Optional[AirlineRef] = None,
    origin_airport: Optional[AirportRef] = None,
    dest_airport: Optional[AirportRef] = None,
    route: Optional[RouteRef] = None,
    historical: Sequence[HistoricalFlight] = (),
) -> PredictionResult:
    """
    Estimate reliability and delay for one origin/destination/airline triple.

    Pure: reference data is resolved by the caller, absent references fall
    back to DEFAULTS.
    """
    f = resolve_factors(
        prediction_input=prediction_input,
        airline=airline,
        origin_airport=origin_airport,
        dest_airport=dest_airport,
        route=route,
        historical=historical,
    )
    logger.debug("Resolved factors for %s-%s/%s: %s",
                 prediction_input.origin_iata, prediction_input.dest_iata, prediction_input.airline_iata, f)

    score = reliability_score(f)
    delay = predicted_delay_minutes(f)
    conf = confidence(
        route_present=route is not None,
        sample_size=len(historical),
        airline_present=airline is not None,
        both_airports_present=origin_airport is not None and dest_airport is not None,
    )

    factors = build_factors(f, prediction_input=prediction_input, airline=airline)

    return PredictionResult(
        reliability_score=round_half_up(score, 1),
        predicted_delay_minutes=delay,
        confidence=round_half_up(conf, 2),
        factors=factors,
        explanation=generate_explanation(score, delay, factors),
    )
