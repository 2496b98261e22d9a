"""
History view builder: pivots per-device histories into a table
"""

from typing import Dict, List, Optional

from src.database.store import Store
from src.schemas.temperature import TempTable, TemperatureReadingResponse

def make_temp_table(history: Dict[str, List[TemperatureReadingResponse]]) -> TempTable:
    """
    Build a column-per-device table from readings grouped by device name.

    Columns are sorted by name. Row r holds the r-th newest reading of each
    device, or None where a device has fewer readings. Cells in one row are
    aligned by position, not by time.
    """
    headers = sorted(history)
    row_count = max((len(readings) for readings in history.values()), default=0)

    rows: List[List[Optional[TemperatureReadingResponse]]] = []
    for i in range(row_count):
        row = []
        for header in headers:
            readings = history[header]
            row.append(readings[i] if i < len(readings) else None)
        rows.append(row)

    return TempTable(headers=headers, rows=rows)

def build_history_view(store: Store) -> TempTable:
    """Load all readings from store and pivot them"""
    return make_temp_table(store.load_history())
