"""Fetch current weather for a place and optionally store it.

Usage (example):
    python scripts/fetch_weather.py --name Paris --country France --save
    python scripts/fetch_weather.py --place-id 3 --save

Reads WEATHER_API_KEY (or KEY_VAULT_NAME) from the environment / .env.
With --save, the place and its weather are written to the places container
configured by STORAGE_ACCOUNT_NAME / STORAGE_CONTAINER_PLACES.
"""
from __future__ import annotations
import argparse
import json
import logging
import os

from dotenv import load_dotenv

from placestore.config import PlaceStoreConfig
from placestore.models import Place
from placestore.store import PlaceStore
from placeweather.service import refresh_place_weather
from weatherclient.client import WeatherClient
from weatherclient.config import WeatherSettings
from weatherclient.errors import WeatherError

load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))

logger = logging.getLogger("weather.fetch")
logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))


def parse_args(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--name', help='Place name, e.g. Paris')
    parser.add_argument('--country', help='Country, e.g. France')
    parser.add_argument('--lang', help='Language for condition text (e.g. fr)')
    parser.add_argument('--aqi', choices=['yes', 'no'], default='no')
    parser.add_argument('--place-id', type=int, help='Refresh an existing stored place (requires --save)')
    parser.add_argument('--save', action='store_true', help='Persist the place and its weather')
    args = parser.parse_args(argv)
    if args.place_id is not None:
        if not args.save:
            parser.error('--place-id requires --save')
    elif not (args.name and args.country):
        parser.error('--name and --country are required unless --place-id is given')
    return parser, args


def main(argv=None):
    parser, args = parse_args(argv)

    settings = WeatherSettings.from_env()
    store = PlaceStore.from_config(PlaceStoreConfig.from_env()) if args.save else None

    if args.place_id is not None:
        place = store.get(args.place_id)
        if place is None:
            parser.error(f"No stored place with id {args.place_id}")
    else:
        place = Place(name=args.name, country=args.country)

    extra = {'aqi': args.aqi}
    if args.lang:
        extra['lang'] = args.lang

    try:
        with WeatherClient(settings.api_key, settings) as client:
            weather = refresh_place_weather(client, place, **extra)
    except WeatherError as e:
        logger.error(f"Weather refresh failed for {place.name},{place.country}: {e}")
        raise SystemExit(1)

    print(json.dumps({
        'place': {'id': place.id, 'name': place.name, 'country': place.country},
        'weather': weather.to_dict() | {'raw': None},
    }, indent=2))

    if store:
        store.save(place)
        logger.info(f"Stored place {place.id} with weather {weather.id}")


if __name__ == "__main__":
    main()
