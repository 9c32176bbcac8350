import importlib.util
import json
import os

import azure.functions as func
import httpx
import pytest

from weatherclient.client import WeatherClient
from weatherclient.config import WeatherSettings

FUNCTION_PATH = os.path.join(os.path.dirname(__file__), '..', 'functions', 'weather', '__init__.py')


@pytest.fixture
def weather_fn():
    spec = importlib.util.spec_from_file_location('weather_function', FUNCTION_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

def make_request(**params):
    return func.HttpRequest(method='GET', url='/api/weather', params=params, body=b'')

def use_handler(monkeypatch, module, handler):
    settings = WeatherSettings(api_key='abc')
    monkeypatch.setattr(
        module, 'build_client',
        lambda: WeatherClient('abc', settings, transport=httpx.MockTransport(handler)),
    )


def test_acknowledgement_without_q(weather_fn):
    resp = weather_fn.main(make_request())
    assert resp.status_code == 200
    body = json.loads(resp.get_body())
    assert body['path'] == 'functions/weather'
    assert 'message' in body

def test_proxies_query(weather_fn, monkeypatch):
    sent = []
    def handler(request):
        sent.append(json.loads(request.content))
        return httpx.Response(200, json={"location": {"name": "Paris"}, "current": {"temp_c": 21}})
    use_handler(monkeypatch, weather_fn, handler)
    resp = weather_fn.main(make_request(q='Paris', days='3', lang='fr', key='stolen', bogus='x'))
    assert resp.status_code == 200
    assert json.loads(resp.get_body()) == {"location": {"name": "Paris"}, "current": {"temp_c": 21}}
    assert sent == [{'q': 'Paris', 'days': 3, 'lang': 'fr', 'key': 'abc'}]

def test_transport_failure_is_bad_gateway(weather_fn, monkeypatch):
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)
    use_handler(monkeypatch, weather_fn, handler)
    resp = weather_fn.main(make_request(q='Paris'))
    assert resp.status_code == 502
    assert 'error' in json.loads(resp.get_body())

def test_missing_configuration(weather_fn, monkeypatch):
    monkeypatch.delenv('WEATHER_API_KEY', raising=False)
    monkeypatch.delenv('KEY_VAULT_NAME', raising=False)
    resp = weather_fn.main(make_request(q='Paris'))
    assert resp.status_code == 500

def test_string_parameters_forwarded_unchanged(weather_fn, monkeypatch):
    sent = []
    def handler(request):
        sent.append(json.loads(request.content))
        return httpx.Response(200, json={})
    use_handler(monkeypatch, weather_fn, handler)
    assert weather_fn.main(make_request(q='02139')).status_code == 200
    assert weather_fn.main(make_request(q='²', hour='07')).status_code == 200
    assert sent[0]['q'] == '02139'
    assert sent[1]['q'] == '²'
    assert sent[1]['hour'] == 7

def test_collect_arguments_keeps_strings(weather_fn):
    args = weather_fn.collect_arguments(make_request(q='02139', dt='2024-06-01', aqi='no'))
    assert args == {'q': '02139', 'dt': '2024-06-01', 'aqi': 'no'}

def test_malformed_integer_parameter_is_bad_request(weather_fn, monkeypatch):
    def handler(request):
        raise AssertionError("upstream must not be called")
    use_handler(monkeypatch, weather_fn, handler)
    for bad in ('²', 'three', '-1', '1.5'):
        resp = weather_fn.main(make_request(q='Paris', days=bad))
        assert resp.status_code == 400
        assert 'days' in json.loads(resp.get_body())['error']
