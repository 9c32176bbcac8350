from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Union

ArgumentValue = Union[str, int]
Arguments = Dict[str, ArgumentValue]

# Request parameters understood by WeatherAPI.com (https://www.weatherapi.com/docs/).
# The client forwards whatever it is given; this list is used by callers that
# pick parameters out of an inbound request.
WEATHER_API_PARAMETERS = (
    'key',             # API key (required)
    'q',               # city, "lat,lon", postcode, "auto:ip", "iata:DXB", ...
    'days',            # forecast days, 1-14
    'dt',              # yyyy-MM-dd
    'unixdt',
    'end_dt',          # history end date (Pro plans)
    'unixend_dt',
    'hour',            # 24h clock
    'alerts',          # yes/no
    'aqi',             # yes/no
    'tides',           # yes/no, marine only
    'tp',              # 15 for 15-minute intervals (Enterprise)
    'current_fields',
    'day_fields',
    'hour_fields',
    'lang',            # language of condition:text
)

# Parameters the upstream expects as integers; every other value is a string.
WEATHER_API_INT_PARAMETERS = frozenset({'days', 'unixdt', 'unixend_dt', 'hour', 'tp'})

DEFAULT_BASE_URL = 'http://api.weatherapi.com'
DEFAULT_ENDPOINT = '/v1/current.json'
DEFAULT_KEY_SECRET = 'weatherapi-key'

_log = logging.getLogger(__name__)


def load_api_key_from_key_vault(key_vault_name: str, secret_name: str = DEFAULT_KEY_SECRET) -> str:
    """Read the WeatherAPI key from Azure Key Vault using the ambient Azure identity."""
    from azure.identity import DefaultAzureCredential
    from azure.keyvault.secrets import SecretClient

    key_vault_url = f"https://{key_vault_name}.vault.azure.net/"
    secret_client = SecretClient(vault_url=key_vault_url, credential=DefaultAzureCredential())
    value = secret_client.get_secret(secret_name).value
    if not value:
        raise ValueError(f"Key Vault secret '{secret_name}' in {key_vault_name} is empty")
    _log.info("Retrieved WeatherAPI key from Key Vault %s", key_vault_name)
    return value


@dataclass
class WeatherSettings:
    """Configuration for the WeatherAPI client."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    endpoint: str = DEFAULT_ENDPOINT  # e.g. /v1/forecast.json, /v1/history.json
    timeout: float = 30.0
    lenient_json: bool = False  # return None instead of raising on a non-JSON body

    @property
    def url(self) -> str:
        base = self.base_url.rstrip('/')
        if not self.endpoint:
            return base
        return f"{base}/{self.endpoint.lstrip('/')}"

    @staticmethod
    def from_env() -> 'WeatherSettings':
        """Create Weather settings from environment variables.

        The API key comes from WEATHER_API_KEY, or from Key Vault when only
        KEY_VAULT_NAME is set (secret name WEATHER_API_KEY_SECRET, default
        'weatherapi-key').
        """
        api_key = os.environ.get('WEATHER_API_KEY')
        if not api_key:
            vault = os.environ.get('KEY_VAULT_NAME')
            if not vault:
                raise KeyError('WEATHER_API_KEY')
            api_key = load_api_key_from_key_vault(
                vault, os.environ.get('WEATHER_API_KEY_SECRET', DEFAULT_KEY_SECRET)
            )

        timeout_raw = os.environ.get('WEATHER_API_TIMEOUT', '30')
        try:
            timeout = float(timeout_raw)
        except ValueError as e:
            raise ValueError(f"Malformed WEATHER_API_TIMEOUT: {timeout_raw!r}") from e

        lenient = os.environ.get('WEATHER_API_LENIENT_JSON', '0').lower() in ('1', 'true', 'yes')

        return WeatherSettings(
            api_key=api_key,
            base_url=os.environ.get('WEATHER_API_BASE_URL', DEFAULT_BASE_URL),
            endpoint=os.environ.get('WEATHER_API_ENDPOINT', DEFAULT_ENDPOINT),
            timeout=timeout,
            lenient_json=lenient,
        )
