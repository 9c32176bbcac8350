from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

from azure.core.exceptions import ResourceNotFoundError
from azure.identity import DefaultAzureCredential
from azure.storage.blob import BlobServiceClient

from .config import PlaceStoreConfig
from .models import Place, Weather

PLACES_BLOB = 'places/places.json'


def build_service_client(config: PlaceStoreConfig) -> BlobServiceClient:
    """Blob service client from AZURE_STORAGE_CONNECTION_STRING, else the ambient Azure identity."""
    conn = os.environ.get('AZURE_STORAGE_CONNECTION_STRING')
    if conn:
        return BlobServiceClient.from_connection_string(conn)
    credential = DefaultAzureCredential(exclude_interactive_browser_credential=True)
    account_url = f"https://{config.storage_account_name}.blob.core.windows.net"
    return BlobServiceClient(account_url=account_url, credential=credential)


class PlaceStore:
    """Persists places and their weather as a single JSON document in blob storage.

    Ids are integers handed out on first save. A place's weather is stored with
    it, so saving a place persists its weather and deleting it removes the
    weather too.
    """

    def __init__(self, container_name: str, service_client: BlobServiceClient):
        self.container_name = container_name
        self.client = service_client.get_blob_client(container=container_name, blob=PLACES_BLOB)
        self._log = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: PlaceStoreConfig) -> 'PlaceStore':
        return cls(config.storage_container_places, build_service_client(config))

    # ---------------- Internal Helpers -----------------
    def _load(self) -> Dict[str, Any]:
        try:
            data = self.client.download_blob().readall()
        except ResourceNotFoundError:
            return {'next_place_id': 1, 'next_weather_id': 1, 'places': {}}
        doc = json.loads(data)
        doc.setdefault('next_place_id', 1)
        doc.setdefault('next_weather_id', 1)
        doc.setdefault('places', {})
        return doc

    def _dump(self, doc: Dict[str, Any]) -> None:
        self.client.upload_blob(json.dumps(doc, indent=2), overwrite=True)

    @staticmethod
    def _to_place(entry: Dict[str, Any]) -> Place:
        place = Place(name=entry['name'], country=entry['country'], id=entry['id'])
        if entry.get('weather'):
            place.weather = Weather.from_dict(entry['weather'])
        return place

    # ---------------- Public API -----------------
    def save(self, place: Place) -> Place:
        doc = self._load()
        if place.id is None:
            place.id = doc['next_place_id']
            doc['next_place_id'] += 1
        else:
            # explicit ids must not be handed out again later
            doc['next_place_id'] = max(doc['next_place_id'], place.id + 1)
        weather = place.weather
        if weather is not None:
            if weather.id is None:
                weather.id = doc['next_weather_id']
                doc['next_weather_id'] += 1
            else:
                doc['next_weather_id'] = max(doc['next_weather_id'], weather.id + 1)
        doc['places'][str(place.id)] = {
            'id': place.id,
            'name': place.name,
            'country': place.country,
            'weather': weather.to_dict() if weather is not None else None,
        }
        self._dump(doc)
        self._log.debug("Saved place %s (weather=%s)", place.id, weather.id if weather else None)
        return place

    def get(self, place_id: int) -> Optional[Place]:
        entry = self._load()['places'].get(str(place_id))
        return self._to_place(entry) if entry else None

    def list(self) -> List[Place]:
        entries = self._load()['places'].values()
        return [self._to_place(e) for e in sorted(entries, key=lambda e: e['id'])]

    def delete(self, place_id: int) -> bool:
        doc = self._load()
        entry = doc['places'].pop(str(place_id), None)
        if entry is None:
            return False
        self._dump(doc)
        self._log.info(
            "Deleted place %s%s", place_id,
            f" and weather {entry['weather']['id']}" if entry.get('weather') else ''
        )
        return True
