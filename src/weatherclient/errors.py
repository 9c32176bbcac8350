from __future__ import annotations


class WeatherError(Exception):
    pass


class InvalidStateError(WeatherError):
    """Raised when the client is asked to send before its arguments are set."""


class WeatherTransportError(WeatherError):
    """Network-level failure talking to the upstream (connect, timeout, DNS)."""


class WeatherDecodeError(WeatherError):
    """Upstream body could not be decoded as JSON."""


class WeatherResponseError(WeatherError):
    """Upstream answered with an error body, or without the section the caller needs."""
