"""
Store: persistence of devices and temperature readings

Wraps the SQLAlchemy engine, bootstraps the schema on construction and
keeps an in-memory cache of resolved devices.
"""

from collections import OrderedDict
from datetime import datetime
from typing import Dict, List
import threading

from fastapi import Request
from sqlalchemy import desc, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
import structlog

from src.database.connection import Base, create_session_factory
from src.models import Device, TemperatureReading
from src.schemas.device import DeviceResponse
from src.schemas.temperature import TemperatureReadingResponse

logger = structlog.get_logger(__name__)

class StoreError(RuntimeError):
    """Unrecoverable backend failure while reading from the store"""

class DeviceCache:
    """Device lookups keyed by id; entries live for the whole process"""

    def __init__(self):
        self._lock = threading.Lock()
        self._devices: Dict[str, DeviceResponse] = {}

    def get(self, device_id: str):
        with self._lock:
            return self._devices.get(device_id)

    def add(self, device: DeviceResponse) -> DeviceResponse:
        """Insert device unless the id is already cached; returns the cached entry"""
        with self._lock:
            return self._devices.setdefault(device.id, device)

    def __contains__(self, device_id: str) -> bool:
        with self._lock:
            return device_id in self._devices

    def __len__(self) -> int:
        with self._lock:
            return len(self._devices)

class Store:
    """Typed access to the devices and temperature_readings tables"""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = create_session_factory(engine)
        self.cache = DeviceCache()
        self._run_migrations()

    def _run_migrations(self):
        """Create tables and indexes that do not exist yet"""
        logger.info("Running db migrations")
        for table in Base.metadata.sorted_tables:
            try:
                # checkfirst keeps re-launches against an existing file a no-op
                table.create(bind=self.engine, checkfirst=True)
            except SQLAlchemyError as e:
                logger.error("Migration failed", stmt=f"CREATE TABLE {table.name}", error=str(e))
                raise
            logger.info("Ran migration", stmt=f"CREATE TABLE {table.name}")
        logger.info("Database migrations complete")

    def resolve_device(self, device_id: str) -> DeviceResponse:
        """Return the device for device_id, synthesizing one named after the id if unregistered"""
        cached = self.cache.get(device_id)
        if cached is not None:
            return cached

        try:
            with self.SessionLocal() as session:
                row = session.execute(
                    select(Device.id, Device.name).where(Device.id == device_id)
                ).first()
        except SQLAlchemyError as e:
            logger.error("Device lookup failed", device=device_id, error=str(e))
            raise StoreError(f"device lookup failed for {device_id!r}") from e

        if row is None:
            device = DeviceResponse.synthesized(device_id)
        else:
            device = DeviceResponse(id=row.id, name=row.name if row.name is not None else row.id)

        return self.cache.add(device)

    def append_reading(self, device_id: str, temp_f: float) -> TemperatureReading:
        """Insert a reading stamped with the current time; backend errors propagate"""
        now = datetime.now()
        reading = TemperatureReading(device_id=device_id, temp_f=temp_f, timestamp=now)
        with self.SessionLocal() as session:
            session.add(reading)
            session.commit()
        return reading

    def load_history(self) -> Dict[str, List[TemperatureReadingResponse]]:
        """Readings of registered devices grouped by device name, newest first"""
        device_name = func.coalesce(Device.name, Device.id).label("device_name")
        query = (
            select(device_name, TemperatureReading.temp_f, TemperatureReading.timestamp)
            .select_from(Device)
            .join(TemperatureReading, Device.id == TemperatureReading.device_id)
            .order_by(desc(TemperatureReading.timestamp), desc(TemperatureReading.id))
        )

        try:
            with self.SessionLocal() as session:
                rows = session.execute(query).all()
        except SQLAlchemyError as e:
            logger.error("Loading temperature history failed", error=str(e))
            raise StoreError("loading temperature history failed") from e

        history: Dict[str, List[TemperatureReadingResponse]] = OrderedDict()
        for row in rows:
            history.setdefault(row.device_name, []).append(
                TemperatureReadingResponse(temp_f=row.temp_f, timestamp=row.timestamp)
            )
        return history

def get_store(request: Request) -> Store:
    """Get the process-wide store created at application startup"""
    return request.app.state.store
