import pytest

from weatherclient import config as weather_config
from weatherclient.config import WeatherSettings
from placestore.config import PlaceStoreConfig


def test_url_joins_base_and_endpoint():
    s = WeatherSettings(api_key='k', base_url='http://mock.local/', endpoint='v1/forecast.json')
    assert s.url == 'http://mock.local/v1/forecast.json'
    s.endpoint = ''
    assert s.url == 'http://mock.local'

def test_from_env(monkeypatch):
    monkeypatch.setenv('WEATHER_API_KEY', 'k')
    monkeypatch.setenv('WEATHER_API_ENDPOINT', '/v1/history.json')
    monkeypatch.setenv('WEATHER_API_TIMEOUT', '5')
    monkeypatch.setenv('WEATHER_API_LENIENT_JSON', 'true')
    s = WeatherSettings.from_env()
    assert s.api_key == 'k'
    assert s.url == 'http://api.weatherapi.com/v1/history.json'
    assert s.timeout == 5.0
    assert s.lenient_json is True

def test_from_env_bad_timeout(monkeypatch):
    monkeypatch.setenv('WEATHER_API_KEY', 'k')
    monkeypatch.setenv('WEATHER_API_TIMEOUT', 'soon')
    with pytest.raises(ValueError):
        WeatherSettings.from_env()

def test_from_env_missing_key(monkeypatch):
    monkeypatch.delenv('WEATHER_API_KEY', raising=False)
    monkeypatch.delenv('KEY_VAULT_NAME', raising=False)
    with pytest.raises(KeyError):
        WeatherSettings.from_env()

def test_from_env_key_vault(monkeypatch):
    monkeypatch.delenv('WEATHER_API_KEY', raising=False)
    monkeypatch.setenv('KEY_VAULT_NAME', 'myvault')
    calls = []
    def fake_load(vault, secret):
        calls.append((vault, secret))
        return 'from-vault'
    monkeypatch.setattr(weather_config, 'load_api_key_from_key_vault', fake_load)
    s = WeatherSettings.from_env()
    assert s.api_key == 'from-vault'
    assert calls == [('myvault', 'weatherapi-key')]

def test_place_store_config_from_env(monkeypatch):
    monkeypatch.setenv('STORAGE_ACCOUNT_NAME', 'acc')
    monkeypatch.delenv('STORAGE_CONTAINER_PLACES', raising=False)
    cfg = PlaceStoreConfig.from_env()
    assert cfg.storage_account_name == 'acc'
    assert cfg.storage_container_places == 'places'
