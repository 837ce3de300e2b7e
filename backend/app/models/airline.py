from sqlalchemy import Column, Float, Integer, Text
from app.core.db import Base

class Airline(Base):
    __tablename__ = "airlines"

    iata = Column(Text, primary_key=True)
    icao = Column(Text, nullable=True)
    name = Column(Text, nullable=False)
    country = Column(Text, nullable=True)

    otp_percent = Column(Float, nullable=False, index=True)
    avg_delay = Column(Float, nullable=False, default=0.0)

    fleet_size = Column(Integer, nullable=True)
    logo_url = Column(Text, nullable=True)
