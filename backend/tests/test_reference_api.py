"""
Tests for the airline, airport and route listings.
"""
from unittest.mock import patch

from sqlalchemy.exc import OperationalError


def test_health(client):
    assert client.get("/v1/health").json() == {"status": "ok"}


def test_airlines_ordered_by_otp(seeded_client):
    data = seeded_client.get("/v1/airlines", params={"limit": 2}).json()
    assert [a["iata"] for a in data["data"]] == ["DL", "LH"]
    assert data["pagination"] == {"total": 5, "limit": 2, "offset": 0, "has_more": True}


def test_airports_ordered_by_traffic_with_incident_counts(seeded_client):
    data = seeded_client.get("/v1/airports").json()
    assert data["data"][0]["iata"] == "ATL"
    assert data["pagination"]["total"] == 10

    incidents = {a["iata"]: a["active_incidents"] for a in data["data"]}
    assert incidents["LAX"] == 1
    assert incidents["JFK"] == 0


def test_airport_search_is_case_insensitive(seeded_client):
    by_city = seeded_client.get("/v1/airports", params={"search": "london"}).json()
    assert [a["iata"] for a in by_city["data"]] == ["LHR"]

    by_country = seeded_client.get("/v1/airports", params={"search": "GERMANY"}).json()
    assert [a["iata"] for a in by_country["data"]] == ["FRA"]

    by_code = seeded_client.get("/v1/airports", params={"search": "sfo"}).json()
    assert by_code["pagination"]["total"] == 1


def test_routes_default_sort_and_enrichment(seeded_client):
    data = seeded_client.get("/v1/routes", params={"limit": 1}).json()
    top = data["data"][0]
    assert (top["origin_iata"], top["dest_iata"]) == ("FRA", "CDG")
    assert top["origin_city"] == "Frankfurt"
    assert top["dest_name"] == "Charles de Gaulle Airport"
    assert data["pagination"]["total"] == 20


def test_routes_filters_and_ascending_sort(seeded_client):
    data = seeded_client.get(
        "/v1/routes", params={"origin": "ATL", "sort_by": "avg_delay", "order": "asc"}
    ).json()
    assert [r["dest_iata"] for r in data["data"]] == ["JFK", "DFW", "LAX"]

    ba = seeded_client.get("/v1/routes", params={"airline": "BA", "destination": "JFK"}).json()
    assert [(r["origin_iata"], r["dest_iata"]) for r in ba["data"]] == [("LHR", "JFK")]


def test_routes_reject_unknown_sort(seeded_client):
    assert seeded_client.get("/v1/routes", params={"sort_by": "id; drop table"}).status_code == 422


def test_database_failure_returns_503(client):
    err = OperationalError("SELECT 1", {}, Exception("connection refused"))
    with patch("app.storage.reference_store.ReferenceStore.list_airlines", side_effect=err):
        resp = client.get("/v1/airlines")
    assert resp.status_code == 503
    assert resp.json()["error"] == "Database unavailable"
