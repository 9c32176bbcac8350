"""
Place/Weather records and their blob-backed store.
"""

__all__ = ['Place', 'Weather', 'PlaceStore', 'PlaceStoreConfig', 'build_service_client']

from .config import PlaceStoreConfig
from .models import Place, Weather
from .store import PlaceStore, build_service_client
