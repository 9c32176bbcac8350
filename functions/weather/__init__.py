import azure.functions as func
import json
import logging
import os
import sys

# Ensure src package path precedes functions duplicates
SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from weatherclient.client import WeatherClient
from weatherclient.config import WEATHER_API_INT_PARAMETERS, WEATHER_API_PARAMETERS, WeatherSettings
from weatherclient.errors import WeatherDecodeError, WeatherTransportError


def _json(body, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(json.dumps(body), status_code=status_code, mimetype='application/json')


def build_client() -> WeatherClient:
    settings = WeatherSettings.from_env()
    return WeatherClient(settings.api_key, settings)


def collect_arguments(req: func.HttpRequest) -> dict:
    """Pick the WeatherAPI parameters out of the query string. `key` is never taken from callers.

    Values are forwarded as sent, except the integer parameters (days, hour, ...),
    which must be plain ASCII digits; anything else raises ValueError.
    """
    args = {}
    for name in WEATHER_API_PARAMETERS:
        if name == 'key':
            continue
        value = req.params.get(name)
        if value is None or value == '':
            continue
        if name in WEATHER_API_INT_PARAMETERS:
            if not (value.isascii() and value.isdigit()):
                raise ValueError(f"Parameter {name} must be a non-negative integer, got {value!r}")
            args[name] = int(value)
        else:
            args[name] = value
    return args


def main(req: func.HttpRequest) -> func.HttpResponse:
    """
    HTTP-triggered weather endpoint.
    Without a `q` parameter it answers with an acknowledgement; with one it
    proxies the request to WeatherAPI.com and returns the upstream body.
    """
    try:
        arguments = collect_arguments(req)
    except ValueError as e:
        logging.warning(f"Rejected weather request: {e}")
        return _json({'error': str(e)}, status_code=400)

    if 'q' not in arguments:
        logging.info('Weather endpoint called without q; returning acknowledgement')
        return _json({
            'message': 'Weather endpoint is up. Pass ?q=<location> to query WeatherAPI.',
            'path': 'functions/weather',
        })

    try:
        client = build_client()
    except (KeyError, ValueError) as e:
        logging.error(f"Weather API configuration missing or invalid: {e}")
        return _json({'error': 'weather API is not configured'}, status_code=500)

    logging.info(f"Proxying weather request for q={arguments['q']}")
    try:
        with client:
            client.set_arguments(arguments)
            data = client.send_request()
    except (WeatherTransportError, WeatherDecodeError) as e:
        logging.error(f"Upstream weather request failed: {e}")
        return _json({'error': str(e)}, status_code=502)

    return _json(data)
