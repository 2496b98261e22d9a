#!/usr/bin/env python3
"""
Register a sensor device or rename an existing one

Devices are never created by the ingestion path; this script is the
out-of-band way to give a MAC address a human readable name.
"""

import argparse
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.config import settings
from src.database.connection import create_db_engine
from src.database.store import Store
from src.models.device import Device

def register_device(store: Store, device_id: str, name: str) -> bool:
    """Insert or rename device_id; returns True when a new row was created"""
    session = store.SessionLocal()
    try:
        existing = session.get(Device, device_id)
        if existing:
            existing.name = name
            created = False
        else:
            session.add(Device(id=device_id, name=name))
            created = True
        session.commit()
        return created
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Register a temperature sensor")
    parser.add_argument("mac", help="Device MAC address, stored exactly as given")
    parser.add_argument("name", help="Human readable device name")
    parser.add_argument("--db", default=settings.db_path, help="SQLite database file")
    args = parser.parse_args(argv)

    engine = create_db_engine(args.db)
    try:
        store = Store(engine)
        created = register_device(store, args.mac, args.name)
    except Exception as e:
        print(f"❌ Error registering device: {e}")
        return 1
    finally:
        engine.dispose()

    if created:
        print(f"✅ Registered {args.mac} as {args.name!r}")
    else:
        print(f"✅ Renamed {args.mac} to {args.name!r}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
