import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.main import app
from src.database.connection import create_db_engine
from src.database.store import Store, get_store
from src.models import Device, TemperatureReading

@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "weather-station.db")

@pytest.fixture
def store(db_path):
    engine = create_db_engine(db_path)
    yield Store(engine)
    engine.dispose()

@pytest.fixture
def client(store):
    """Test client wired to a store on a temporary database file"""
    app.dependency_overrides[get_store] = lambda: store
    # Server errors are checked through their 500 responses
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()

@pytest.fixture
def add_device(store):
    """Insert a devices row out-of-band, as an administrator would"""
    def _add(device_id, name):
        with store.SessionLocal() as session:
            session.add(Device(id=device_id, name=name))
            session.commit()
    return _add

@pytest.fixture
def reading_rows(store):
    """Fetch every stored reading as (device_id, temp_f) tuples"""
    def _rows():
        with store.SessionLocal() as session:
            return [
                (row.device_id, row.temp_f)
                for row in session.execute(
                    select(TemperatureReading.device_id, TemperatureReading.temp_f)
                    .order_by(TemperatureReading.id)
                )
            ]
    return _rows

@pytest.fixture
def device_count(store):
    def _count():
        with store.SessionLocal() as session:
            return session.execute(select(func.count()).select_from(Device)).scalar_one()
    return _count
