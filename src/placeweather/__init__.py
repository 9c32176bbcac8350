"""Facade package for the weather proxy.

The client lives under ``weatherclient`` and the records under
``placestore``; callers (the Azure function, scripts and tests) import
the public symbols from here.
"""

from placestore import Place, PlaceStore, PlaceStoreConfig, Weather  # noqa: F401
from weatherclient import (  # noqa: F401
    InvalidStateError,
    WeatherClient,
    WeatherDecodeError,
    WeatherError,
    WeatherResponseError,
    WeatherSettings,
    WeatherTransportError,
)

from .export import forecast_hours_frame, write_parquet  # noqa: F401
from .service import place_query, refresh_place_weather  # noqa: F401

__all__ = [
    'WeatherClient', 'WeatherSettings', 'WeatherError', 'InvalidStateError',
    'WeatherTransportError', 'WeatherDecodeError', 'WeatherResponseError',
    'Place', 'Weather', 'PlaceStore', 'PlaceStoreConfig',
    'refresh_place_weather', 'place_query', 'forecast_hours_frame', 'write_parquet',
]
