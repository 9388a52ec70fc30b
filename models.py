"""
Data models for places, observations, and widget states.

Every value here is frozen: a search builds fresh ones and throws them
away once the result has been rendered.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Place:
    display_name: str
    latitude: float
    longitude: float

    @classmethod
    def from_result(cls, result: dict, fallback_name: str = "") -> Place:
        """Build from one entry of the geocoding `results` array."""
        return cls(
            display_name=result.get("name") or fallback_name,
            latitude=float(result["latitude"]),
            longitude=float(result["longitude"]),
        )


@dataclass(frozen=True)
class Observation:
    temperature_c: float
    wind_speed_kmh: float
    condition_code: Optional[int]  # None when the service reports no code

    @classmethod
    def from_current_weather(cls, block: dict) -> Observation:
        return cls(
            temperature_c=float(block["temperature"]),
            wind_speed_kmh=float(block["windspeed"]),
            condition_code=_code(block.get("weathercode")),
        )


def _code(value) -> Optional[int]:
    return None if value is None else int(value)


# ── Widget states ───────────────────────────────────────────────

@dataclass(frozen=True)
class Idle:
    name = "idle"


@dataclass(frozen=True)
class Loading:
    city: str = ""
    name = "loading"


@dataclass(frozen=True)
class Error:
    message: str
    name = "error"


@dataclass(frozen=True)
class Success:
    place: Place
    observation: Observation
    description: str
    name = "success"


UIState = Union[Idle, Loading, Error, Success]
