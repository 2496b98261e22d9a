"""
Temperature reading model for raw sensor samples
"""

from sqlalchemy import Column, DateTime, Float, Index, Integer, Text
from src.database.connection import Base

class TemperatureReading(Base):
    """A single accepted temperature sample"""

    __tablename__ = "temperature_readings"

    id = Column(Integer, primary_key=True)
    device_id = Column(Text, nullable=False)
    temp_f = Column(Float)
    timestamp = Column(DateTime)

    # No foreign key: readings may reference devices that are not registered yet
    __table_args__ = (
        Index("idx_temperature_readings_device_id", "device_id"),
    )

    def __repr__(self):
        return f"<TemperatureReading(device_id={self.device_id}, temp_f={self.temp_f}, timestamp={self.timestamp})>"
