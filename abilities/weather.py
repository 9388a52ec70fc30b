"""
Weather ability — current conditions for a coordinate.

Uses the Open-Meteo forecast API. Humidity is not part of the
current_weather block, so callers render a placeholder for it.
"""

import logging

import requests

from config import WEATHER_URL, HTTP_TIMEOUT
from models import Observation

log = logging.getLogger(__name__)


class WeatherUnavailable(Exception):
    pass


def fetch_current(lat: float, lon: float) -> Observation:
    """Get current weather at (lat, lon) in Celsius and km/h."""
    resp = requests.get(
        WEATHER_URL,
        params={
            "latitude": lat,
            "longitude": lon,
            "current_weather": "true",
            "temperature_unit": "celsius",
            "windspeed_unit": "kmh",
            "precipitation_unit": "mm",
        },
        timeout=HTTP_TIMEOUT,
    )
    if not resp.ok:
        raise WeatherUnavailable(f"Forecast returned HTTP {resp.status_code}")

    cw = resp.json().get("current_weather")
    if not cw:
        raise WeatherUnavailable("No current_weather block in forecast response")

    obs = Observation.from_current_weather(cw)
    log.debug(f"Current weather at {lat}, {lon}: {obs}")
    return obs
