from sqlalchemy import Boolean, Column, DateTime, Integer, Text
from app.core.db import Base

class Incident(Base):
    __tablename__ = "incidents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    airport_iata = Column(Text, nullable=False, index=True)

    date = Column(DateTime(timezone=True), nullable=False, index=True)
    type = Column(Text, nullable=False)   # WEATHER / ATC / MECHANICAL / SECURITY
    impact_level = Column(Integer, nullable=False)
    description = Column(Text, nullable=False)

    resolved = Column(Boolean, nullable=False, default=False, index=True)
