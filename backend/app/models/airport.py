from sqlalchemy import Column, Float, Integer, Text
from app.core.db import Base

class Airport(Base):
    __tablename__ = "airports"

    iata = Column(Text, primary_key=True)
    icao = Column(Text, nullable=True)
    name = Column(Text, nullable=False)
    city = Column(Text, nullable=True)
    country = Column(Text, nullable=True)

    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    otp_percent = Column(Float, nullable=False, index=True)
    avg_delay = Column(Float, nullable=False, default=0.0)
    total_flights = Column(Integer, nullable=False, default=0, index=True)
    risk_score = Column(Float, nullable=True)

    wiki_link = Column(Text, nullable=True)
    cluster_tag = Column(Text, nullable=True)
    timezone = Column(Text, nullable=True)   # IANA name, e.g. America/New_York
