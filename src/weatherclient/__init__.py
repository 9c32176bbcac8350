"""
WeatherAPI.com client for current, forecast and history data.
Provides a thin Python interface around the WeatherAPI request/response cycle.
"""

__all__ = [
    'WeatherClient', 'WeatherSettings', 'WEATHER_API_PARAMETERS', 'WEATHER_API_INT_PARAMETERS',
    'WeatherError', 'InvalidStateError', 'WeatherTransportError', 'WeatherDecodeError',
    'WeatherResponseError',
]

from .client import WeatherClient
from .config import WEATHER_API_INT_PARAMETERS, WEATHER_API_PARAMETERS, WeatherSettings
from .errors import (
    InvalidStateError,
    WeatherDecodeError,
    WeatherError,
    WeatherResponseError,
    WeatherTransportError,
)
