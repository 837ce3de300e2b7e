from sqlalchemy import Column, Float, Integer, Text
from app.core.db import Base

class Route(Base):
    __tablename__ = "routes"

    id = Column(Integer, primary_key=True, autoincrement=True)

    origin_iata = Column(Text, nullable=False, index=True)
    dest_iata = Column(Text, nullable=False, index=True)
    airline_iata = Column(Text, nullable=False, index=True)
    airline_name = Column(Text, nullable=True)

    otp_percent = Column(Float, nullable=False)
    avg_delay = Column(Float, nullable=False)
    weather_risk = Column(Float, nullable=False)       # 0..1
    peak_hour_factor = Column(Float, nullable=False, default=1.0)
    reliability_index = Column(Float, nullable=False, index=True)
