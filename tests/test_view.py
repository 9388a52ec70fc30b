import pytest

from models import Idle, Loading, Error, Success, Observation
from view import PANELS, render, render_text, format_temperature, format_wind_speed


@pytest.mark.parametrize("celsius,expected", [
    (18.4, "18°C"),
    (18.5, "19°C"),
    (2.5, "3°C"),
    (-0.4, "0°C"),
    (-2.5, "-2°C"),
    (-7.6, "-8°C"),
])
def test_format_temperature(celsius, expected):
    assert format_temperature(celsius) == expected


@pytest.mark.parametrize("kmh,expected", [
    (12.0, "12 km/h"),
    (7.5, "7.5 km/h"),
    (0.0, "0 km/h"),
])
def test_format_wind_speed(kmh, expected):
    assert format_wind_speed(kmh) == expected


def test_render_success(london, london_obs):
    view = render(Success(place=london, observation=london_obs, description="Partly cloudy"))
    assert view.panel == "result"
    assert view.city == "London"
    assert view.temperature == "18°C"
    assert view.description == "Partly cloudy"
    assert view.humidity == "N/A%"
    assert view.wind_speed == "12 km/h"
    assert view.submit_enabled


def test_render_loading_disables_submit():
    view = render(Loading("London"))
    assert view.panel == "loading"
    assert not view.submit_enabled


def test_render_error():
    view = render(Error("City not found. Please try again."))
    assert view.panel == "error"
    assert view.error_message == "City not found. Please try again."


def test_exactly_one_panel_visible(london, london_obs):
    states = [
        Idle(),
        Loading("x"),
        Error("boom"),
        Success(place=london, observation=london_obs, description="Partly cloudy"),
    ]
    for state in states:
        visible = render(state).to_dict()["visible"]
        assert set(visible) == set(PANELS)
        assert sum(visible.values()) == 1


def test_render_rejects_unknown_state():
    with pytest.raises(TypeError):
        render("idle")


def test_render_text(london):
    obs = Observation(temperature_c=-3.2, wind_speed_kmh=20.5, condition_code=71)
    text = render_text(Success(place=london, observation=obs, description="Snow fall: Slight"))
    assert text == (
        "Weather for London\n"
        "Temp: -3°C\n"
        "Conditions: Snow fall: Slight\n"
        "Humidity: N/A%\n"
        "Wind: 20.5 km/h"
    )
    assert render_text(Error("nope")) == "nope"
