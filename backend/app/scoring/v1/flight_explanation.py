from __future__ import annotations

from typing import Optional

from app.scoring.v1.delay_prediction import AirportRef, RouteRef, format_fixed

NO_FACTORS_TEXT = "This flight has typical conditions with no significant delay factors identified."


def explain_flight_delay(
    *,
    reliability_score: float,
    delay_minutes: Optional[float] = None,
    route: Optional[RouteRef] = None,
    departure_airport: Optional[AirportRef] = None,
    arrival_airport: Optional[AirportRef] = None,
) -> str:
    """
    Narrative for an already-recorded flight. Each rule contributes one
    sentence; order is fixed. delay_minutes is accepted for callers that pass
    the whole flight but does not drive any rule.
    """
    sentences: list[str] = []

    if route is not None:
        if route.weather_risk_factor > 0.3:
            sentences.append(
                f"Elevated weather risk ({format_fixed(route.weather_risk_factor * 100, 0)}%) may impact flight times."
            )
        if route.peak_hour_factor > 1.2:
            sentences.append(f"Peak hour congestion expected (factor: {format_fixed(route.peak_hour_factor, 1)}x).")
        if route.avg_delay_minutes > 15:
            sentences.append(
                f"This route has a historical average delay of {format_fixed(route.avg_delay_minutes, 0)} minutes."
            )

    if departure_airport is not None and departure_airport.otp_percent < 75:
        sentences.append(
            f"{departure_airport.name} has below-average on-time performance "
            f"({format_fixed(departure_airport.otp_percent, 1)}%)."
        )

    if arrival_airport is not None and arrival_airport.avg_delay_minutes > 15:
        sentences.append(
            f"Arrival airport typically experiences {format_fixed(arrival_airport.avg_delay_minutes, 0)} min average delays."
        )

    if reliability_score > 80:
        sentences.append(
            f"High reliability score ({format_fixed(reliability_score, 1)}) indicates good chance of on-time arrival."
        )
    elif reliability_score < 70:
        sentences.append(f"Lower reliability score ({format_fixed(reliability_score, 1)}) suggests potential delays.")

    if not sentences:
        return NO_FACTORS_TEXT
    return " ".join(sentences)
