"""
Tests for GET /v1/flights and GET /v1/flights/{flight_id} against the seeded dataset.
"""
from datetime import datetime, timedelta

from sqlalchemy import select

from app.models.flight import Flight
from factories import add_flight


def _flight_id(db, callsign):
    return db.execute(select(Flight.id).where(Flight.callsign == callsign)).scalar_one()


def test_list_flights_newest_first_and_enriched(seeded_client):
    resp = seeded_client.get("/v1/flights")
    assert resp.status_code == 200
    data = resp.json()

    assert data["pagination"] == {"total": 10, "limit": 50, "offset": 0, "has_more": False}
    first = data["data"][0]
    assert first["callsign"] == "AAL123"
    assert first["airline_name"] == "American Airlines"
    assert first["departure_city"] == "New York"
    assert first["arrival_name"] == "Los Angeles International Airport"


def test_list_flights_filters(seeded_client):
    delayed = seeded_client.get("/v1/flights", params={"status": "delayed"}).json()
    assert delayed["pagination"]["total"] == 2
    assert all(f["status"] == "delayed" for f in delayed["data"])
    assert all(f["delay_minutes"] >= 15 for f in delayed["data"])

    delta = seeded_client.get("/v1/flights", params={"airline": "DL"}).json()
    assert {f["callsign"] for f in delta["data"]} == {"DAL789", "DAL505"}

    frankfurt = seeded_client.get("/v1/flights", params={"departure": "FRA", "arrival": "CDG"}).json()
    assert [f["callsign"] for f in frankfurt["data"]] == ["DLH707"]


def test_list_flights_pagination(seeded_client):
    page = seeded_client.get("/v1/flights", params={"limit": 3, "offset": 6}).json()
    assert len(page["data"]) == 3
    assert page["pagination"]["has_more"] is True

    last = seeded_client.get("/v1/flights", params={"limit": 3, "offset": 9}).json()
    assert len(last["data"]) == 1
    assert last["pagination"]["has_more"] is False


def test_list_flights_rejects_bad_limit(seeded_client):
    assert seeded_client.get("/v1/flights", params={"limit": 0}).status_code == 422


def test_flight_detail_with_explanation(seeded_client, seeded_db):
    flight_id = _flight_id(seeded_db, "AAL123")
    resp = seeded_client.get(f"/v1/flights/{flight_id}")
    assert resp.status_code == 200
    data = resp.json()

    assert data["flight"]["id"] == flight_id
    assert data["airline"]["iata"] == "AA"
    assert data["departure"]["iata"] == "JFK"
    assert data["arrival"]["iata"] == "LAX"
    assert data["route"]["reliability_index"] == 72.8
    assert data["history"] == []

    explanation = data["explanation"]
    assert "Elevated weather risk" not in explanation
    assert "Peak hour congestion expected (factor: 1.3x)." in explanation
    assert "This route has a historical average delay of 16 minutes." in explanation
    assert "John F. Kennedy International Airport has below-average on-time performance (74.2%)." in explanation
    assert "Arrival airport typically experiences 15 min average delays." in explanation


def test_flight_detail_history_excludes_the_flight(client, db):
    base = datetime(2026, 1, 1, 9, 0)
    flights = [add_flight(db, "LHR", "FRA", "BA", base + timedelta(days=i), delay=i) for i in range(4)]
    db.commit()

    data = client.get(f"/v1/flights/{flights[1].id}").json()
    history_ids = [h["id"] for h in data["history"]]
    assert flights[1].id not in history_ids
    assert history_ids == [flights[3].id, flights[2].id, flights[0].id]
    assert data["route"] is None and data["airline"] is None


def test_flight_not_found(seeded_client):
    resp = seeded_client.get("/v1/flights/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Flight not found"
