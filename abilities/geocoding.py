"""
Geocoding ability — resolve a city name to a Place.

Uses the Open-Meteo geocoding API (free, no API key required).
"""

import logging

import requests

from config import GEO_URL, HTTP_TIMEOUT
from models import Place

log = logging.getLogger(__name__)


class CityNotFound(LookupError):
    def __init__(self, city: str):
        super().__init__(f"City not found: {city}")
        self.city = city


def locate(city: str) -> Place:
    """Return the first geocoding match for `city`.

    Raises CityNotFound when the service answers with an error status or
    with no results. Transport errors propagate as requests exceptions.
    """
    resp = requests.get(GEO_URL, params={"name": city}, timeout=HTTP_TIMEOUT)
    if not resp.ok:
        log.info(f"Geocoding returned HTTP {resp.status_code} for {city!r}")
        raise CityNotFound(city)

    results = resp.json().get("results")
    if not results:
        raise CityNotFound(city)

    place = Place.from_result(results[0], fallback_name=city)
    log.debug(f"Located {city!r} at {place.latitude}, {place.longitude}")
    return place
