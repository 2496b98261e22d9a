"""
Device model for temperature sensors
"""

from sqlalchemy import Column, Text
from src.database.connection import Base

class Device(Base):
    """Device model representing a sensor, keyed by its MAC address"""

    __tablename__ = "devices"

    id = Column(Text, primary_key=True, nullable=False)
    name = Column(Text)

    def __repr__(self):
        return f"<Device(id={self.id}, name={self.name})>"
