from __future__ import annotations
from typing import Any, Dict, List, Optional

import pandas as pd


def forecast_hours_frame(data: Optional[Dict[str, Any]]) -> pd.DataFrame:
    """Flatten ``forecast.forecastday[].hour[]`` of a forecast body into one row per hour.

    Nested hour fields are expanded with dotted names (``condition.text``).
    Adds ``location_name`` and ``date`` columns. Empty frame when the body has
    no forecast section.
    """
    if not data:
        return pd.DataFrame()
    days = (data.get('forecast') or {}).get('forecastday') or []
    location_name = (data.get('location') or {}).get('name')
    rows: List[Dict[str, Any]] = []
    for day in days:
        for hour in day.get('hour', []):
            rows.append({'location_name': location_name, 'date': day.get('date'), **hour})
    if not rows:
        return pd.DataFrame()
    df = pd.json_normalize(rows)
    if 'time' in df.columns:
        df['time'] = pd.to_datetime(df['time'])
    return df


def write_parquet(df: pd.DataFrame, path: str) -> None:
    df.to_parquet(path, index=False)
