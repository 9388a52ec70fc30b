"""
Orchestrator — owns the widget state and runs each city search.

This is the brain of the widget. Both surfaces (the web page and the
Telegram bot) funnel their submit actions into Orchestrator.submit(),
which validates the input, chains the geocoding and forecast lookups,
and moves the single UI state through its transitions.

Architecture:
  - Exactly one state is current: Idle, Loading, Error or Success
  - Only the orchestrator writes the state; surfaces read the View
  - Every transition is rendered to the injected render targets
  - One search at a time: submit is ignored while Loading
  - Nothing is cached or persisted between searches
"""

from __future__ import annotations
import asyncio
import logging
import threading
from typing import Callable, Iterable, Optional

from abilities.geocoding import locate, CityNotFound
from abilities.weather import fetch_current, WeatherUnavailable
from abilities.weather_codes import weather_description
from config import LOOKUP_DEADLINE
from models import Place, Observation, UIState, Idle, Loading, Error, Success
from view import View, render, render_text

log = logging.getLogger(__name__)

EMPTY_INPUT = "Please enter a city name."
CITY_NOT_FOUND = "City not found. Please try again."
FETCH_FAILED = "Failed to fetch weather data. Please try again later."
UNEXPECTED_FAILURE = "An error occurred. Please check your internet connection or try again."

RenderTarget = Callable[[View], None]


class Orchestrator:
    def __init__(
        self,
        render_targets: Iterable[RenderTarget] = (),
        locator: Callable[[str], Place] = locate,
        fetcher: Callable[[float, float], Observation] = fetch_current,
        deadline: float = LOOKUP_DEADLINE,
    ):
        self._render_targets = list(render_targets)
        self._locate = locator
        self._fetch_current = fetcher
        self._deadline = deadline
        # guards the check-and-enter of Loading; surfaces may run in different threads
        self._lock = threading.Lock()
        self._state: UIState = Idle()
        self._view: View = render(self._state)

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def view(self) -> View:
        return self._view

    @property
    def busy(self) -> bool:
        return isinstance(self._state, Loading)

    # ── Search ──────────────────────────────────────────────────

    async def submit(self, raw_input: Optional[str]) -> UIState:
        """
        Run one search for `raw_input` and return the final state.

        Errors of every kind end up as an Error state; nothing raised by
        the lookups escapes this method. While a search is in flight the
        call is ignored and the current (Loading) state is returned.
        """
        city = (raw_input or "").strip()

        with self._lock:
            if self.busy:
                log.info(f"Ignoring submit of {city!r}: a search is already running")
                return self._state
            if not city:
                self._transition(Error(EMPTY_INPUT))
                return self._state
            self._transition(Loading(city))

        # a cancelled search still leaves Loading, as an error
        new_state: UIState = Error(UNEXPECTED_FAILURE)
        try:
            place = await self._call(self._locate, city)
            observation = await self._call(
                self._fetch_current, place.latitude, place.longitude
            )
            new_state = Success(
                place=place,
                observation=observation,
                description=weather_description(observation.condition_code),
            )
        except CityNotFound:
            new_state = Error(CITY_NOT_FOUND)
        except WeatherUnavailable as e:
            log.warning(f"Weather unavailable for {city!r}: {e}")
            new_state = Error(FETCH_FAILED)
        except Exception as e:
            log.error(f"Error fetching weather data for {city!r}: {e}", exc_info=True)
            new_state = Error(UNEXPECTED_FAILURE)
        finally:
            self._transition(new_state)
        return new_state

    # ── Helpers ─────────────────────────────────────────────────

    def _transition(self, new_state: UIState):
        log.debug(f"State {self._state.name} -> {new_state.name}")
        self._state = new_state
        self._view = render(new_state)
        for target in self._render_targets:
            try:
                target(self._view)
            except Exception as e:
                log.error(f"Render target {target!r} failed on {new_state.name}: {e}", exc_info=True)

    async def _call(self, func, *args):
        """Run a blocking lookup in a worker thread, bounded by the deadline."""
        return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=self._deadline)

    def get_status_text(self) -> str:
        """Formatted current state for the /status command."""
        return render_text(self._state)
