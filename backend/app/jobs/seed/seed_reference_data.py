"""
Seed job: static reference data + a handful of synthetic recent flights.

Writes (in FK-free order): airlines, airports, routes, incidents, flights.
Unless keep_existing is set, all five tables are cleared first.

Usage:
  seed_reference_data(db, now=datetime.now(timezone.utc), flights_seed=42)
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.jobs.seed.reference_data import (
    AIRLINES,
    AIRPORTS,
    FLIGHT_STATUSES,
    FLIGHT_TEMPLATES,
    INCIDENTS,
    ROUTES,
)
from app.models.airline import Airline
from app.models.airport import Airport
from app.models.flight import Flight
from app.models.incident import Incident
from app.models.job_runs import JobRun
from app.models.route import Route

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedResult:
    airlines: int
    airports: int
    routes: int
    incidents: int
    flights: int


def _start_job(db: Session, job_name: str, meta: dict) -> uuid.UUID:
    run_id = uuid.uuid4()
    jr = JobRun(run_id=run_id, job_name=job_name, status="running", meta=meta)
    db.add(jr)
    db.commit()
    return run_id


def _finish_job(db: Session, run_id: uuid.UUID, status: str, meta_updates: dict):
    jr = db.get(JobRun, run_id)
    jr.status = status
    jr.ended_at = datetime.now(timezone.utc)
    jr.meta = {**(jr.meta or {}), **meta_updates}
    db.commit()


def generate_flights(*, now: datetime, rng: random.Random) -> list[dict]:
    """
    One flight per template, departures spaced 30 min apart going back from
    now, 4h block time. Status cycles scheduled/active/landed/delayed.
    """
    airports = {a["iata"]: a for a in AIRPORTS}
    flights: list[dict] = []

    for index, (icao24, callsign, airline, frm, to) in enumerate(FLIGHT_TEMPLATES):
        departure = now - timedelta(minutes=30 * index)
        arrival = departure + timedelta(hours=4)
        status = FLIGHT_STATUSES[index % len(FLIGHT_STATUSES)]

        if status == "delayed":
            delay = rng.randint(15, 74)
        else:
            delay = rng.randint(0, 29) if rng.random() > 0.7 else 0

        origin = airports[frm]
        dest = airports[to]

        if status == "landed":
            progress = 1.0
        elif status == "active":
            progress = rng.random() * 0.8 + 0.1
        else:
            progress = 0.0

        flights.append(
            {
                "icao24": icao24,
                "callsign": callsign,
                "airline_iata": airline,
                "departure_iata": frm,
                "arrival_iata": to,
                "scheduled_departure": departure,
                "actual_departure": departure + timedelta(minutes=delay) if status != "scheduled" else None,
                "scheduled_arrival": arrival,
                "actual_arrival": arrival + timedelta(minutes=delay) if status == "landed" else None,
                "delay_minutes": delay if delay > 0 else None,
                "altitude": 35000 + rng.random() * 5000 if status == "active" else None,
                "velocity": 450 + rng.random() * 100 if status == "active" else None,
                "true_track": rng.random() * 360 if status == "active" else None,
                "reliability_score": 70 + rng.random() * 25,
                "status": status,
                "turnaround_estimate": 45 + rng.randint(0, 29),
                "coordinates": {
                    "lat": origin["latitude"] + (dest["latitude"] - origin["latitude"]) * progress,
                    "lng": origin["longitude"] + (dest["longitude"] - origin["longitude"]) * progress,
                    "origin": {"lat": origin["latitude"], "lng": origin["longitude"]},
                    "destination": {"lat": dest["latitude"], "lng": dest["longitude"]},
                },
            }
        )

    return flights


def _clear(db: Session) -> None:
    for model in (Flight, Incident, Route, Airport, Airline):
        db.execute(delete(model))


def seed_reference_data(
    db: Session,
    *,
    now: Optional[datetime] = None,
    flights_seed: Optional[int] = None,
    keep_existing: bool = False,
) -> SeedResult:
    now = now or datetime.now(timezone.utc)
    rng = random.Random(flights_seed)

    run_id = _start_job(
        db,
        "seed_reference_data",
        {"now": now.isoformat(), "flights_seed": flights_seed, "keep_existing": keep_existing},
    )

    try:
        if not keep_existing:
            logger.info("Clearing existing reference data")
            _clear(db)

        airline_names = {a["iata"]: a["name"] for a in AIRLINES}

        db.add_all(Airline(**a) for a in AIRLINES)
        db.add_all(Airport(**a) for a in AIRPORTS)
        db.add_all(
            Route(
                origin_iata=org,
                dest_iata=dst,
                airline_iata=al,
                airline_name=airline_names.get(al),
                otp_percent=otp,
                avg_delay=avg_delay,
                weather_risk=weather,
                peak_hour_factor=peak,
                reliability_index=index,
            )
            for org, dst, al, otp, avg_delay, weather, peak, index in ROUTES
        )
        db.add_all(Incident(**i) for i in INCIDENTS)

        flights = generate_flights(now=now, rng=rng)
        db.add_all(Flight(**f) for f in flights)

        db.commit()

        result = SeedResult(
            airlines=len(AIRLINES),
            airports=len(AIRPORTS),
            routes=len(ROUTES),
            incidents=len(INCIDENTS),
            flights=len(flights),
        )
        logger.info("Seeded %s", result)
        _finish_job(db, run_id, "success", {"result": result.__dict__})
        return result

    except Exception as e:
        db.rollback()
        _finish_job(db, run_id, "fail", {"error": repr(e)})
        raise
