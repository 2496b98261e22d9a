"""
Temperature Pydantic schemas
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from typing import List, Optional
from datetime import datetime
import math
import struct

def to_float32(value: float) -> float:
    """Round a float to the nearest IEEE-754 single precision value"""
    return struct.unpack("f", struct.pack("f", value))[0]

class TemperatureRequest(BaseModel):
    """Reading posted by a sensor"""
    mac: StrictStr = Field(..., description="Device MAC address")
    temperature: float = Field(..., description="Temperature in Fahrenheit")

    @field_validator("temperature", mode="before")
    @classmethod
    def require_number(cls, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("temperature must be a number")
        return value

    @field_validator("temperature")
    @classmethod
    def single_precision(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("temperature must be finite")
        try:
            rounded = to_float32(value)
        except OverflowError:
            raise ValueError("temperature out of single precision range")
        # Some interpreters pack oversized values as inf instead of raising
        if not math.isfinite(rounded):
            raise ValueError("temperature out of single precision range")
        return rounded

class TemperatureReadingResponse(BaseModel):
    """One reading in a device history"""
    model_config = ConfigDict(from_attributes=True)

    temp_f: float
    timestamp: datetime

class TempTable(BaseModel):
    """Column-per-device history table, rows aligned by index"""
    headers: List[str]
    rows: List[List[Optional[TemperatureReadingResponse]]]
