"""Shared fixtures: canned Open-Meteo payloads and fake HTTP responses."""

from unittest.mock import MagicMock

import pytest

from models import Place, Observation

LONDON_GEO = {"results": [{"name": "London", "latitude": 51.5, "longitude": -0.12}]}
LONDON_WEATHER = {"current_weather": {"temperature": 18.4, "windspeed": 12.0, "weathercode": 2}}


def make_response(payload, status=200):
    resp = MagicMock()
    resp.status_code = status
    resp.ok = status < 400
    resp.json.return_value = payload
    return resp


def fake_get(geo_payload=LONDON_GEO, weather_payload=LONDON_WEATHER,
             geo_status=200, weather_status=200):
    """side_effect for requests.get that answers by endpoint."""
    def _get(url, params=None, timeout=None):
        if "geocoding" in url:
            return make_response(geo_payload, geo_status)
        return make_response(weather_payload, weather_status)
    return _get


@pytest.fixture
def london() -> Place:
    return Place(display_name="London", latitude=51.5, longitude=-0.12)


@pytest.fixture
def london_obs() -> Observation:
    return Observation(temperature_c=18.4, wind_speed_kmh=12.0, condition_code=2)
