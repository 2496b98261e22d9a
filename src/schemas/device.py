"""
Device Pydantic schemas
"""

from pydantic import BaseModel, ConfigDict, Field

class DeviceResponse(BaseModel):
    """Resolved device; name falls back to the id when the device is unregistered"""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str = Field(..., description="Device MAC address")
    name: str = Field(..., description="Human readable device label")

    @classmethod
    def synthesized(cls, device_id: str) -> "DeviceResponse":
        """Device stand-in for an id with no devices row"""
        return cls(id=device_id, name=device_id)
