"""
View — a pure projection of the widget state.

The orchestrator never touches markup or chat text; it hands each new
state to render() and the surfaces draw whatever View comes back.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, asdict

from models import UIState, Idle, Loading, Error, Success

PANELS = ("idle", "loading", "error", "result")
HUMIDITY_PLACEHOLDER = "N/A%"  # not provided by the current_weather endpoint


@dataclass(frozen=True)
class View:
    panel: str
    submit_enabled: bool = True
    error_message: str = ""
    city: str = ""
    temperature: str = ""
    description: str = ""
    humidity: str = ""
    wind_speed: str = ""

    def visible(self, panel: str) -> bool:
        return self.panel == panel

    def to_dict(self) -> dict:
        d = asdict(self)
        d["visible"] = {p: self.visible(p) for p in PANELS}
        return d


def format_temperature(celsius: float) -> str:
    # half-up rounding: 2.5 -> 3, -2.5 -> -2
    return f"{math.floor(celsius + 0.5)}°C"


def format_wind_speed(kmh: float) -> str:
    if float(kmh).is_integer():
        return f"{int(kmh)} km/h"
    return f"{kmh} km/h"


def render(state: UIState) -> View:
    if isinstance(state, Loading):
        return View(panel="loading", submit_enabled=False)
    if isinstance(state, Error):
        return View(panel="error", error_message=state.message)
    if isinstance(state, Success):
        return View(
            panel="result",
            city=state.place.display_name,
            temperature=format_temperature(state.observation.temperature_c),
            description=state.description,
            humidity=HUMIDITY_PLACEHOLDER,
            wind_speed=format_wind_speed(state.observation.wind_speed_kmh),
        )
    if isinstance(state, Idle):
        return View(panel="idle")
    raise TypeError(f"Not a widget state: {state!r}")


def render_text(state: UIState) -> str:
    """Plain-text rendering for the chat surface."""
    view = render(state)
    if view.panel == "loading":
        return "Looking up the weather..."
    if view.panel == "error":
        return view.error_message
    if view.panel == "result":
        return (
            f"Weather for {view.city}\n"
            f"Temp: {view.temperature}\n"
            f"Conditions: {view.description}\n"
            f"Humidity: {view.humidity}\n"
            f"Wind: {view.wind_speed}"
        )
    return "Send me a city name to get its current weather."
