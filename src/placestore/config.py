from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class PlaceStoreConfig:
    """Configuration for the blob container holding Place/Weather records."""
    storage_account_name: str
    storage_container_places: str = 'places'

    @staticmethod
    def from_env() -> 'PlaceStoreConfig':
        """Create configuration from environment variables."""
        storage_account = os.environ['STORAGE_ACCOUNT_NAME']
        container = os.environ.get('STORAGE_CONTAINER_PLACES', 'places')

        return PlaceStoreConfig(
            storage_account_name=storage_account,
            storage_container_places=container,
        )
