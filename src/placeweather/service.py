from __future__ import annotations

import logging

from placestore.models import Place, Weather
from weatherclient.client import WeatherClient
from weatherclient.config import ArgumentValue
from weatherclient.errors import WeatherResponseError

_log = logging.getLogger(__name__)


def place_query(place: Place) -> str:
    """WeatherAPI `q` value for a place ("Paris,France")."""
    return f"{place.name},{place.country}"


def refresh_place_weather(client: WeatherClient, place: Place, **extra: ArgumentValue) -> Weather:
    """Fetch weather for ``place`` and attach it, replacing any previous record.

    ``extra`` is merged into the request arguments (e.g. ``aqi='no'``, ``lang='fr'``).
    Raises WeatherResponseError, leaving ``place.weather`` untouched, when the
    upstream answers with an error body or without a ``current`` section.
    """
    query = place_query(place)
    client.set_arguments({'q': query, **extra})
    data = client.send_request()
    if not isinstance(data, dict):
        raise WeatherResponseError(f"Unexpected weather response for {query}: {data!r:.200}")
    if 'error' in data:
        error = data['error'] if isinstance(data['error'], dict) else {}
        raise WeatherResponseError(
            f"Upstream error for {query}: {error.get('code')} {error.get('message', data['error'])}"
        )
    if not isinstance(data.get('current'), dict):
        raise WeatherResponseError(f"No current weather in response for {query}")

    weather = Weather.from_api_response(data)
    place.weather = weather
    _log.info(
        "Refreshed weather for %s: %s C, %s",
        query, weather.temperature_c, weather.condition,
    )
    return weather
