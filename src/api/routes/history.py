"""
Temperature history page
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from src.core.config import settings
from src.database.store import Store, get_store
from src.services.temp_table import build_history_view

router = APIRouter()
templates = Jinja2Templates(directory=settings.templates_dir)

def format_date(value: datetime) -> str:
    """Format a reading timestamp as 2006-01-02 03:04:05 PM"""
    return value.strftime("%Y-%m-%d %I:%M:%S %p")

templates.env.filters["format_date"] = format_date

@router.get("/", response_class=HTMLResponse)
def temperature_history(request: Request, store: Store = Depends(get_store)):
    """Render every device's readings as a table, newest first"""
    table = build_history_view(store)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"headers": table.headers, "rows": table.rows}
    )
