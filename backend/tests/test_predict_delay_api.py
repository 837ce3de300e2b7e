"""
Tests for POST /v1/predict-delay.

Covers request validation, reference lookups feeding the engine, the
historical sample cap and departure-time localization.
"""
from datetime import datetime, timedelta, timezone

import pytest

from app.api.v1.routes.predictions import localize_departure
from app.models.airport import Airport
from factories import add_airline, add_airport, add_flight, add_route

BODY = {"origin_iata": "ATL", "dest_iata": "JFK", "airline_iata": "DL"}


@pytest.mark.parametrize("missing", ["origin_iata", "dest_iata", "airline_iata"])
def test_missing_required_field_is_rejected(client, missing):
    body = {k: v for k, v in BODY.items() if k != missing}
    resp = client.post("/v1/predict-delay", json=body)
    assert resp.status_code == 422


def test_empty_required_field_is_rejected(client):
    resp = client.post("/v1/predict-delay", json={**BODY, "airline_iata": ""})
    assert resp.status_code == 422


def test_non_positive_turnaround_is_rejected(client):
    resp = client.post("/v1/predict-delay", json={**BODY, "turnaround_minutes": 0})
    assert resp.status_code == 422


def test_unknown_codes_use_defaults(client):
    """With an empty store every reference is absent, so the baseline values come back."""
    resp = client.post("/v1/predict-delay", json={"origin_iata": "XXX", "dest_iata": "YYY", "airline_iata": "ZZ"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["reliability_score"] == 66.0
    assert data["predicted_delay_minutes"] == 14
    assert data["confidence"] == 0.6
    assert len(data["factors"]) == 4
    assert data["factors"][0]["description"] == "ZZ has 75.0% on-time performance"


def test_references_feed_prediction(client, db):
    add_airline(db, "DL", "Delta Air Lines", 82.1)
    add_airport(db, "ATL", 77.8)
    add_airport(db, "JFK", 74.2)
    add_route(db, "ATL", "JFK", "DL", weather=0.22, avg_delay=10.8)
    db.commit()

    resp = client.post("/v1/predict-delay", json={**BODY, "turnaround_minutes": 50})
    assert resp.status_code == 200
    data = resp.json()

    # route + airline + both airports, no history
    assert data["confidence"] == 0.85
    # 10.8*0.5 + 4.4 + 0 + 0 + 2.4
    assert data["predicted_delay_minutes"] == 12
    assert data["reliability_score"] == pytest.approx(69.45, abs=0.051)
    assert [f["name"] for f in data["factors"]] == [
        "Airline OTP", "Airport OTP", "Weather Risk", "Time of Day", "Turnaround",
    ]
    assert data["factors"][0]["description"] == "Delta Air Lines has 82.1% on-time performance"
    assert data["factors"][4]["impact"] == "positive"
    assert data["explanation"].startswith("Lower reliability predicted (69.")


def test_history_sample_is_capped(client, db):
    add_route(db, "ATL", "JFK", "DL")
    start = datetime(2026, 1, 1, 12, 0)
    # 60 flights; the 50 most recent have 20 min delay, the 10 oldest 200 min
    for i in range(60):
        delay = 200 if i < 10 else 20
        add_flight(db, "ATL", "JFK", "DL", start + timedelta(hours=i), delay=delay)
    db.commit()

    data = client.post("/v1/predict-delay", json=BODY).json()
    # 20*0.5 + 4.4 + 0 + 0 + 2.5 = 16.9
    assert data["predicted_delay_minutes"] == 17
    assert data["confidence"] == 0.85


def test_aware_departure_is_localized_to_origin_timezone(client, db):
    add_airport(db, "JFK", 74.2, tz="America/New_York")
    db.commit()

    # 13:00 UTC is 08:00 in New York in January: peak hour
    body = {"origin_iata": "JFK", "dest_iata": "LAX", "airline_iata": "AA",
            "scheduled_departure": "2026-01-10T13:00:00Z"}
    tod = client.post("/v1/predict-delay", json=body).json()["factors"][3]
    assert tod["impact"] == "negative"
    assert tod["value"] == pytest.approx(30.0)


def test_naive_departure_is_used_as_given(client, db):
    add_airport(db, "JFK", 74.2, tz="America/New_York")
    db.commit()

    body = {"origin_iata": "JFK", "dest_iata": "LAX", "airline_iata": "AA",
            "scheduled_departure": "2026-01-10T13:00:00"}
    tod = client.post("/v1/predict-delay", json=body).json()["factors"][3]
    assert tod["impact"] == "positive"
    assert tod["value"] == pytest.approx(0.0)


def test_localize_departure_falls_back_to_utc():
    ts = datetime(2026, 1, 10, 8, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert localize_departure(ts, None).hour == 13

    unknown = Airport(iata="QQQ", name="Q", otp_percent=75.0, avg_delay=0.0, total_flights=0, timezone="Mars/Olympus")
    assert localize_departure(ts, unknown).hour == 13

    assert localize_departure(None, None) is None
    naive = datetime(2026, 1, 10, 8, 0)
    assert localize_departure(naive, unknown) is naive
