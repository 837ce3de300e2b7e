"""
Tests for GET /v1/analytics and GET /v1/reports.
"""
from datetime import datetime

from sqlalchemy import func, select

from app.models.flight import Flight
from app.models.route import Route
from factories import add_flight


def test_analytics_dashboard_shape(seeded_client, seeded_db):
    resp = seeded_client.get("/v1/analytics")
    assert resp.status_code == 200
    data = resp.json()

    assert [a["iata"] for a in data["airlines"]][:2] == ["DL", "LH"]
    assert len(data["airports"]) == 10
    assert data["airports"][0]["iata"] == "FRA"
    assert (data["delayed_routes"][0]["origin_iata"], data["delayed_routes"][0]["dest_iata"]) == ("DEN", "ORD")
    assert (data["reliable_routes"][0]["origin_iata"], data["reliable_routes"][0]["dest_iata"]) == ("FRA", "CDG")
    assert len(data["delayed_routes"]) == 10
    assert data["flight_stats"] == {"scheduled": 3, "active": 3, "landed": 2, "delayed": 2}
    assert [i["airport_iata"] for i in data["active_incidents"]] == ["LAX"]

    with_delay = seeded_db.execute(
        select(func.count()).select_from(Flight).where(Flight.delay_minutes.is_not(None))
    ).scalar_one()
    assert sum(data["delay_distribution"].values()) == with_delay
    assert sum(h["count"] for h in data["peak_hour_analysis"]) == with_delay


def test_analytics_buckets_recorded_delays(client, db):
    add_flight(db, "JFK", "LAX", "AA", datetime(2026, 1, 1, 8, 0), delay=10)
    add_flight(db, "JFK", "LAX", "AA", datetime(2026, 1, 2, 8, 30), delay=20)
    add_flight(db, "JFK", "LAX", "AA", datetime(2026, 1, 3, 17, 0), delay=45)
    add_flight(db, "JFK", "LAX", "AA", datetime(2026, 1, 4, 17, 15), delay=90)
    add_flight(db, "JFK", "LAX", "AA", datetime(2026, 1, 5, 6, 0), delay=None)
    db.commit()

    data = client.get("/v1/analytics").json()
    assert data["delay_distribution"] == {"on_time": 1, "minor": 1, "moderate": 1, "severe": 1}
    assert data["peak_hour_analysis"] == [
        {"hour": "08", "count": 2, "total_delay": 30.0, "avg_delay": 15.0},
        {"hour": "17", "count": 2, "total_delay": 135.0, "avg_delay": 67.5},
    ]
    assert data["airlines"] == []
    assert data["flight_stats"] == {"landed": 5}


def test_summary_report_json(seeded_client):
    resp = seeded_client.get("/v1/reports", params={"type": "summary"})
    assert resp.status_code == 200
    data = resp.json()

    assert data["title"] == "Aviation Reliability Summary Report"
    assert data["overview"] == {
        "total_flights": 10,
        "active_flights": 3,
        "delayed_flights": 2,
        "delay_rate": "20.0%",
    }
    assert data["top_airports"][0]["iata"] == "FRA"
    assert len(data["airlines"]) == 5
    assert len(data["active_incidents"]) == 1
    assert "generated_at" in data


def test_summary_report_csv(seeded_client):
    resp = seeded_client.get("/v1/reports", params={"type": "summary", "format": "csv"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert resp.headers["content-disposition"] == 'attachment; filename="summary-report.csv"'

    header, values = resp.text.split("\n", 1)
    assert header.startswith("title,generated_at,overview_total_flights,overview_active_flights")
    assert values.startswith('"Aviation Reliability Summary Report",')
    assert '"20.0%"' in values


def test_airport_report(seeded_client):
    data = seeded_client.get("/v1/reports", params={"type": "airport", "id": "LAX"}).json()
    assert data["title"] == "Airport Report: Los Angeles International Airport"
    assert len(data["incidents"]) == 1
    assert len(data["routes"]) == 5
    assert data["recent_flight_count"] == 3


def test_route_report(seeded_client, seeded_db):
    route_id = seeded_db.execute(
        select(Route.id).where(Route.origin_iata == "FRA", Route.dest_iata == "CDG")
    ).scalar_one()

    data = seeded_client.get("/v1/reports", params={"type": "route", "id": str(route_id)}).json()
    assert data["title"] == "Route Report: FRA → CDG"
    assert data["origin"]["city"] == "Frankfurt"
    assert [f["callsign"] for f in data["recent_flights"]] == ["DLH707"]


def test_flight_report(seeded_client, seeded_db):
    flight_id = seeded_db.execute(select(Flight.id).where(Flight.callsign == "BAW101")).scalar_one()

    data = seeded_client.get("/v1/reports", params={"type": "flight", "id": flight_id}).json()
    assert data["title"] == "Flight Report: BAW101"
    assert data["airline"]["name"] == "British Airways"
    assert data["departure"]["iata"] == "LHR"


def test_report_errors(seeded_client):
    invalid = seeded_client.get("/v1/reports", params={"type": "weekly"})
    assert invalid.status_code == 400
    assert invalid.json()["detail"] == "Invalid type. Use: flight, airport, route, or summary"

    assert seeded_client.get("/v1/reports").status_code == 400
    assert seeded_client.get("/v1/reports", params={"type": "airport"}).status_code == 400
    assert seeded_client.get("/v1/reports", params={"type": "route", "id": "abc"}).status_code == 400

    assert seeded_client.get("/v1/reports", params={"type": "airport", "id": "XXX"}).status_code == 404
    assert seeded_client.get("/v1/reports", params={"type": "route", "id": "99999"}).status_code == 404
    assert seeded_client.get("/v1/reports", params={"type": "flight", "id": "missing"}).status_code == 404

    assert seeded_client.get("/v1/reports", params={"type": "summary", "format": "xml"}).status_code == 422
