"""
Temperature ingestion endpoint
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
import structlog

from src.database.store import Store, get_store
from src.schemas.temperature import TemperatureRequest

logger = structlog.get_logger(__name__)
router = APIRouter()

MIN_TEMP_F = -67.0
MAX_TEMP_F = 257.0

def in_valid_range(temp_f: float) -> bool:
    """Whether temp_f is a physically plausible sensor reading"""
    return MIN_TEMP_F <= temp_f <= MAX_TEMP_F

async def raw_body(request: Request) -> bytes:
    """Request body as sent, whatever Content-Type the sensor declared"""
    return await request.body()

@router.post("/temperature", response_class=PlainTextResponse)
def add_temperature(body: bytes = Depends(raw_body), store: Store = Depends(get_store)):
    """Record a temperature reading posted by a sensor"""

    try:
        reading = TemperatureRequest.model_validate_json(body)
    except ValidationError as e:
        logger.error("failed to decode temperature request", error=str(e))
        return PlainTextResponse("", status_code=400)

    device = store.resolve_device(reading.mac)

    # Sensors occasionally report garbage; drop it without asking for a retry
    if not in_valid_range(reading.temperature):
        logger.error("temperature outside of valid range", device=device.name, temp=reading.temperature)
        return PlainTextResponse("", status_code=200)

    try:
        store.append_reading(reading.mac, reading.temperature)
    except SQLAlchemyError as e:
        # Sensors cannot act on a server error, so the response stays 200
        logger.error("failed to save temperature reading", device=device.name, temp=reading.temperature, error=str(e))
        return PlainTextResponse("OK", status_code=200)

    logger.info("New reading", device=device.name, temp=reading.temperature)
    return PlainTextResponse("OK", status_code=200)
