"""Export hourly forecast rows for a location to a parquet file.

Usage (example):
    python scripts/export_forecast.py --q Paris --days 3 --out paris.parquet
"""
from __future__ import annotations
import argparse
import logging
import os

from dotenv import load_dotenv

from placeweather.export import forecast_hours_frame, write_parquet
from weatherclient.client import WeatherClient
from weatherclient.config import WeatherSettings

load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))

logger = logging.getLogger("weather.export")
logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--q', required=True, help='Location query (city, "lat,lon", postcode, ...)')
    parser.add_argument('--days', type=int, default=3, help='Forecast days (1-14)')
    parser.add_argument('--out', required=True, help='Output parquet path')
    args = parser.parse_args()

    settings = WeatherSettings.from_env()
    settings.endpoint = '/v1/forecast.json'

    with WeatherClient(settings.api_key, settings) as client:
        client.set_arguments({'q': args.q, 'days': args.days, 'aqi': 'no', 'alerts': 'no'})
        data = client.send_request()

    df = forecast_hours_frame(data)
    if df.empty:
        logger.warning(f"No forecast hours returned for {args.q}; nothing written")
        return
    write_parquet(df, args.out)
    logger.info(f"Wrote {len(df)} forecast hours for {args.q} to {args.out}")


if __name__ == "__main__":
    main()
