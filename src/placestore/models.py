from __future__ import annotations

from typing import Any, Dict, Optional

NAME_MAX_LENGTH = 70


def _check_length(field: str, value: str) -> str:
    if not value:
        raise ValueError(f"{field} must be a non-empty string")
    if len(value) > NAME_MAX_LENGTH:
        raise ValueError(f"{field} must be at most {NAME_MAX_LENGTH} characters, got {len(value)}")
    return value


class Place:
    """A named location. Owns at most one Weather record.

    The link is kept consistent from both ends: assigning ``place.weather``
    sets the weather's back-reference, and clearing it detaches the weather.
    """

    def __init__(self, name: str, country: str, id: Optional[int] = None):
        self.id = id
        self.name = name
        self.country = country
        self._weather: Optional[Weather] = None

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _check_length('name', value)

    @property
    def country(self) -> str:
        return self._country

    @country.setter
    def country(self, value: str) -> None:
        self._country = _check_length('country', value)

    @property
    def weather(self) -> Optional['Weather']:
        return self._weather

    @weather.setter
    def weather(self, weather: Optional['Weather']) -> None:
        previous = self._weather
        if previous is weather:
            return
        self._weather = weather
        # unset the back-reference on the record being replaced
        if previous is not None and previous.place is self:
            previous.place = None
        if weather is not None and weather.place is not self:
            weather.place = self

    def __repr__(self) -> str:
        return f"Place(id={self.id!r}, name={self.name!r}, country={self.country!r})"


class Weather:
    """Weather data attached to a Place (non-owning back-reference)."""

    def __init__(self, temperature_c: Optional[float] = None, condition: Optional[str] = None,
                 last_updated: Optional[str] = None, raw: Optional[Dict[str, Any]] = None,
                 id: Optional[int] = None):
        self.id = id
        self.temperature_c = temperature_c
        self.condition = condition
        self.last_updated = last_updated
        self.raw = raw or {}
        self._place: Optional[Place] = None

    @property
    def place(self) -> Optional[Place]:
        return self._place

    @place.setter
    def place(self, place: Optional[Place]) -> None:
        previous = self._place
        if previous is place:
            return
        self._place = place
        if previous is not None and previous.weather is self:
            previous.weather = None
        if place is not None and place.weather is not self:
            place.weather = self

    @classmethod
    def from_api_response(cls, data: Optional[Dict[str, Any]]) -> 'Weather':
        """Build a record from a WeatherAPI current/forecast body.

        Missing or malformed sections leave the matching fields as None.
        """
        if not isinstance(data, dict):
            data = {}
        current = data.get('current')
        if not isinstance(current, dict):
            current = {}
        condition = current.get('condition')
        if not isinstance(condition, dict):
            condition = {}
        temp = current.get('temp_c')
        return cls(
            temperature_c=float(temp) if temp is not None else None,
            condition=condition.get('text'),
            last_updated=current.get('last_updated'),
            raw=data,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'temperature_c': self.temperature_c,
            'condition': self.condition,
            'last_updated': self.last_updated,
            'raw': self.raw,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'Weather':
        return cls(
            temperature_c=d.get('temperature_c'),
            condition=d.get('condition'),
            last_updated=d.get('last_updated'),
            raw=d.get('raw') or {},
            id=d.get('id'),
        )

    def __repr__(self) -> str:
        return (
            f"Weather(id={self.id!r}, temperature_c={self.temperature_c!r}, "
            f"condition={self.condition!r})"
        )
