"""
Weather Station - FastAPI Application
Main entry point for the ingestion and history server
"""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn
import structlog
import logging
from contextlib import asynccontextmanager

from src.database.connection import create_db_engine
from src.database.store import Store
from src.api.routes import health, history, temperature
from src.core.config import settings

logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Weather Station", port=settings.api_port, db=settings.db_path)
    # Startup: one engine and one store for the whole process
    engine = create_db_engine(settings.db_path, echo=settings.debug)
    app.state.store = Store(engine)
    yield
    # Shutdown
    engine.dispose()
    logger.info("Shutting down Weather Station")

# Create FastAPI application
app = FastAPI(
    title="Weather Station",
    description="Temperature telemetry ingestion and history",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(temperature.router, tags=["temperature"])
app.include_router(history.router, tags=["history"])

@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Plain text 404 for unmatched routes"""
    if exc.status_code == 404:
        return PlainTextResponse("404 Not Found", status_code=404)
    return await http_exception_handler(request, exc)

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error("Unhandled exception", exc_info=exc, path=request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
