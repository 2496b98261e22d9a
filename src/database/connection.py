"""
Database engine creation and session management
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
import structlog

logger = structlog.get_logger(__name__)

# Create base class for models
Base = declarative_base()

def create_db_engine(db_path: str, echo: bool = False) -> Engine:
    """Create an engine for the SQLite file at db_path, creating its directory if needed"""
    directory = os.path.dirname(os.path.abspath(db_path))
    os.makedirs(directory, exist_ok=True)

    engine = create_engine(
        f"sqlite:///{db_path}",
        connect_args={"check_same_thread": False},
        pool_pre_ping=True,
        echo=echo
    )
    logger.info("Database engine created", path=db_path)
    return engine

def create_session_factory(engine: Engine) -> sessionmaker:
    """Create session factory bound to engine"""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
