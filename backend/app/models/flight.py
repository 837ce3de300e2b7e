import uuid
from sqlalchemy import JSON, Column, DateTime, Float, Integer, Text
from app.core.db import Base

class Flight(Base):
    __tablename__ = "flights"

    id = Column(Text, primary_key=True, default=lambda: uuid.uuid4().hex)
    icao24 = Column(Text, nullable=True)
    callsign = Column(Text, nullable=False)

    airline_iata = Column(Text, nullable=False, index=True)
    departure_iata = Column(Text, nullable=False, index=True)
    arrival_iata = Column(Text, nullable=False, index=True)

    scheduled_departure = Column(DateTime(timezone=True), nullable=False, index=True)
    actual_departure = Column(DateTime(timezone=True), nullable=True)
    scheduled_arrival = Column(DateTime(timezone=True), nullable=True)
    actual_arrival = Column(DateTime(timezone=True), nullable=True)

    delay_minutes = Column(Integer, nullable=True)

    altitude = Column(Float, nullable=True)
    velocity = Column(Float, nullable=True)
    true_track = Column(Float, nullable=True)

    reliability_score = Column(Float, nullable=False)
    status = Column(Text, nullable=False, index=True)   # scheduled / active / landed / delayed
    turnaround_estimate = Column(Integer, nullable=True)

    coordinates = Column(JSON, nullable=True)
