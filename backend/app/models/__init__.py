from app.models.airline import Airline
from app.models.airport import Airport
from app.models.flight import Flight
from app.models.incident import Incident
from app.models.job_runs import JobRun
from app.models.route import Route

__all__ = ["Airline", "Airport", "Flight", "Incident", "JobRun", "Route"]
