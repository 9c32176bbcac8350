from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx

from .config import Arguments, WeatherSettings
from .errors import InvalidStateError, WeatherDecodeError, WeatherTransportError


class WeatherClient:
    """
    Client for the WeatherAPI.com service.

    Holds an API token and the arguments for one logical request. Build the
    request with ``set_arguments`` and run it with ``send_request``; the client
    can be reused by setting new arguments.
    """

    def __init__(self, token: str, settings: Optional[WeatherSettings] = None,
                 transport: Optional[httpx.BaseTransport] = None):
        self.token = token
        self.settings = settings or WeatherSettings(api_key=token)
        self._arguments: Optional[Arguments] = None
        self._client = httpx.Client(timeout=self.settings.timeout, transport=transport)
        self._log = logging.getLogger(__name__)

    @property
    def token(self) -> str:
        return self._token

    @token.setter
    def token(self, value: str) -> None:
        # The key is passed as the `key` parameter of every request.
        if not value:
            raise ValueError("API token must be a non-empty string")
        self._token = value

    @property
    def url(self) -> str:
        return self.settings.url

    def get_arguments(self) -> Arguments:
        if self._arguments is None:
            raise InvalidStateError("Parameter arguments have not been set")
        return self._arguments

    def set_arguments(self, arguments: Arguments) -> None:
        """Set the request parameters, e.g. ``{'q': 'Paris', 'days': 3, 'lang': 'fr'}``.

        Values are forwarded as given; see ``WEATHER_API_PARAMETERS`` for the
        names the upstream understands.
        """
        self._arguments = dict(arguments)

    def send_request(self) -> Optional[Dict[str, Any]]:
        """POST the arguments as JSON and return the decoded response body.

        Upstream error statuses are not raised: their body is returned like any
        other. Returns None only in lenient-JSON mode when the body is not JSON.
        """
        if not self._arguments:
            raise InvalidStateError("Parameter arguments is missing")

        payload = dict(self._arguments)
        payload.setdefault('key', self._token)

        try:
            resp = self._client.post(
                self.url,
                json=payload,
                headers={'Content-Type': 'application/json'},
            )
        except httpx.TransportError as e:
            self._log.error("Request to %s failed: %s", self.url, e)
            raise WeatherTransportError(f"Transport error for {self.url}: {e}") from e

        if resp.status_code >= 400:
            self._log.warning("Upstream returned %s for %s", resp.status_code, self.url)

        try:
            return resp.json()
        except ValueError as e:  # JSON decode error
            if self.settings.lenient_json:
                self._log.warning("Non-JSON response for %s ignored: %s", self.url, resp.text[:200])
                return None
            raise WeatherDecodeError(f"Non-JSON response for {self.url}: {resp.text[:200]}") from e

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> 'WeatherClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
