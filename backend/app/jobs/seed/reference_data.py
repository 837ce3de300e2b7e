"""
Static reference dataset: carriers, hub airports, routes and incidents.
"""

from datetime import datetime, timezone

AIRLINES = [
    {"iata": "AA", "icao": "AAL", "name": "American Airlines", "country": "USA", "otp_percent": 78.5, "avg_delay": 12.3, "fleet_size": 950},
    {"iata": "UA", "icao": "UAL", "name": "United Airlines", "country": "USA", "otp_percent": 76.2, "avg_delay": 14.1, "fleet_size": 850},
    {"iata": "DL", "icao": "DAL", "name": "Delta Air Lines", "country": "USA", "otp_percent": 82.1, "avg_delay": 9.8, "fleet_size": 900},
    {"iata": "LH", "icao": "DLH", "name": "Lufthansa", "country": "Germany", "otp_percent": 79.8, "avg_delay": 11.2, "fleet_size": 350},
    {"iata": "BA", "icao": "BAW", "name": "British Airways", "country": "UK", "otp_percent": 77.4, "avg_delay": 13.5, "fleet_size": 280},
]

AIRPORTS = [
    {"iata": "JFK", "icao": "KJFK", "name": "John F. Kennedy International Airport", "city": "New York", "country": "USA", "latitude": 40.6413, "longitude": -73.7781, "otp_percent": 74.2, "avg_delay": 18.5, "total_flights": 1250, "risk_score": 35.5, "cluster_tag": "hub", "timezone": "America/New_York"},
    {"iata": "LAX", "icao": "KLAX", "name": "Los Angeles International Airport", "city": "Los Angeles", "country": "USA", "latitude": 33.9425, "longitude": -118.4081, "otp_percent": 76.8, "avg_delay": 15.2, "total_flights": 1450, "risk_score": 28.3, "cluster_tag": "hub", "timezone": "America/Los_Angeles"},
    {"iata": "ORD", "icao": "KORD", "name": "O'Hare International Airport", "city": "Chicago", "country": "USA", "latitude": 41.9742, "longitude": -87.9073, "otp_percent": 71.5, "avg_delay": 22.1, "total_flights": 1380, "risk_score": 42.8, "cluster_tag": "hub", "timezone": "America/Chicago"},
    {"iata": "LHR", "icao": "EGLL", "name": "Heathrow Airport", "city": "London", "country": "UK", "latitude": 51.4700, "longitude": -0.4543, "otp_percent": 78.3, "avg_delay": 14.8, "total_flights": 1320, "risk_score": 31.2, "cluster_tag": "hub", "timezone": "Europe/London"},
    {"iata": "FRA", "icao": "EDDF", "name": "Frankfurt Airport", "city": "Frankfurt", "country": "Germany", "latitude": 50.0379, "longitude": 8.5622, "otp_percent": 80.1, "avg_delay": 12.5, "total_flights": 1180, "risk_score": 25.6, "cluster_tag": "hub", "timezone": "Europe/Berlin"},
    {"iata": "DFW", "icao": "KDFW", "name": "Dallas/Fort Worth International Airport", "city": "Dallas", "country": "USA", "latitude": 32.8998, "longitude": -97.0403, "otp_percent": 79.5, "avg_delay": 13.2, "total_flights": 1420, "risk_score": 27.4, "cluster_tag": "hub", "timezone": "America/Chicago"},
    {"iata": "ATL", "icao": "KATL", "name": "Hartsfield-Jackson Atlanta International Airport", "city": "Atlanta", "country": "USA", "latitude": 33.6407, "longitude": -84.4277, "otp_percent": 77.8, "avg_delay": 14.5, "total_flights": 2500, "risk_score": 32.1, "cluster_tag": "mega-hub", "timezone": "America/New_York"},
    {"iata": "DEN", "icao": "KDEN", "name": "Denver International Airport", "city": "Denver", "country": "USA", "latitude": 39.8561, "longitude": -104.6737, "otp_percent": 75.2, "avg_delay": 16.8, "total_flights": 1650, "risk_score": 38.2, "cluster_tag": "hub", "timezone": "America/Denver"},
    {"iata": "CDG", "icao": "LFPG", "name": "Charles de Gaulle Airport", "city": "Paris", "country": "France", "latitude": 49.0097, "longitude": 2.5479, "otp_percent": 76.5, "avg_delay": 15.8, "total_flights": 1280, "risk_score": 33.5, "cluster_tag": "hub", "timezone": "Europe/Paris"},
    {"iata": "SFO", "icao": "KSFO", "name": "San Francisco International Airport", "city": "San Francisco", "country": "USA", "latitude": 37.6213, "longitude": -122.3790, "otp_percent": 73.8, "avg_delay": 19.2, "total_flights": 1150, "risk_score": 41.5, "cluster_tag": "hub", "timezone": "America/Los_Angeles"},
]

# (origin, dest, airline, otp_percent, avg_delay, weather_risk, peak_hour_factor, reliability_index)
ROUTES = [
    ("JFK", "LAX", "AA", 75.5, 16.2, 0.25, 1.3, 72.8),
    ("JFK", "LHR", "BA", 78.2, 14.5, 0.35, 1.1, 74.5),
    ("LAX", "ORD", "UA", 72.8, 18.5, 0.30, 1.4, 68.2),
    ("ORD", "DFW", "AA", 74.1, 17.2, 0.28, 1.2, 70.5),
    ("ATL", "JFK", "DL", 81.5, 10.8, 0.22, 1.1, 79.2),
    ("FRA", "JFK", "LH", 80.2, 12.1, 0.32, 1.0, 77.8),
    ("LHR", "FRA", "BA", 82.5, 9.5, 0.20, 0.9, 81.2),
    ("DEN", "LAX", "UA", 76.8, 14.8, 0.35, 1.2, 72.5),
    ("SFO", "JFK", "DL", 73.2, 19.5, 0.40, 1.3, 67.8),
    ("CDG", "LHR", "BA", 84.1, 8.2, 0.18, 0.8, 83.5),
    ("ATL", "LAX", "DL", 79.5, 12.5, 0.25, 1.1, 76.8),
    ("ORD", "LHR", "AA", 76.2, 15.8, 0.38, 1.2, 71.5),
    ("DFW", "FRA", "LH", 78.8, 13.2, 0.30, 1.0, 75.2),
    ("SFO", "CDG", "UA", 74.5, 17.5, 0.42, 1.1, 69.8),
    ("JFK", "CDG", "DL", 77.8, 14.2, 0.28, 1.0, 74.2),
    ("LAX", "ATL", "AA", 78.2, 13.8, 0.22, 1.2, 75.5),
    ("DEN", "ORD", "UA", 71.5, 20.2, 0.45, 1.4, 65.8),
    ("LHR", "JFK", "BA", 79.5, 13.5, 0.32, 1.1, 75.8),
    ("FRA", "CDG", "LH", 85.2, 7.5, 0.15, 0.8, 84.8),
    ("ATL", "DFW", "DL", 80.8, 11.2, 0.20, 1.0, 78.5),
]

INCIDENTS = [
    {"airport_iata": "JFK", "date": datetime(2026, 1, 5, 14, 30, tzinfo=timezone.utc), "type": "WEATHER", "impact_level": 3, "description": "Heavy snowfall causing delays of 30-60 minutes", "resolved": True},
    {"airport_iata": "ORD", "date": datetime(2026, 1, 4, 8, 15, tzinfo=timezone.utc), "type": "ATC", "impact_level": 2, "description": "Air traffic control staff shortage, minor delays", "resolved": True},
    {"airport_iata": "LAX", "date": datetime(2026, 1, 6, 16, 45, tzinfo=timezone.utc), "type": "MECHANICAL", "impact_level": 4, "description": "Runway 25L temporarily closed for maintenance", "resolved": False},
    {"airport_iata": "LHR", "date": datetime(2026, 1, 3, 10, 0, tzinfo=timezone.utc), "type": "SECURITY", "impact_level": 3, "description": "Security screening delays due to system update", "resolved": True},
    {"airport_iata": "DEN", "date": datetime(2026, 1, 5, 22, 0, tzinfo=timezone.utc), "type": "WEATHER", "impact_level": 4, "description": "Thunderstorms in approach path, ground stop in effect", "resolved": True},
]

# (icao24, callsign, airline, from, to)
FLIGHT_TEMPLATES = [
    ("a0b1c2", "AAL123", "AA", "JFK", "LAX"),
    ("b1c2d3", "UAL456", "UA", "LAX", "ORD"),
    ("c2d3e4", "DAL789", "DL", "ATL", "JFK"),
    ("d3e4f5", "BAW101", "BA", "LHR", "JFK"),
    ("e4f5g6", "DLH202", "LH", "FRA", "JFK"),
    ("f5g6h7", "AAL303", "AA", "DFW", "LAX"),
    ("g6h7i8", "UAL404", "UA", "DEN", "SFO"),
    ("h7i8j9", "DAL505", "DL", "ATL", "CDG"),
    ("i8j9k0", "BAW606", "BA", "LHR", "FRA"),
    ("j9k0l1", "DLH707", "LH", "FRA", "CDG"),
]

FLIGHT_STATUSES = ("scheduled", "active", "landed", "delayed")
