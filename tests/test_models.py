"""Tests for the Light / LightState wire models."""

import pytest
from pydantic import ValidationError

from huelink.models.color_mode import ColorMode
from huelink.models.light import Light, LightState


class TestLightState:
    def test_from_wire(self, light_json):
        state = LightState.model_validate(light_json["state"])

        assert state.is_on is False
        assert state.brightness == 100
        assert state.hue == 8418
        assert state.saturation == 140
        assert state.color_temperature == 366
        assert state.x == 0.4573
        assert state.y == 0.41
        assert state.color_mode is ColorMode.COLOR_TEMPERATURE
        assert state.is_reachable is True
        assert state.alert == "select"

    def test_out_of_range_values_are_clamped(self):
        state = LightState.model_validate({"bri": 0, "sat": 300, "hue": 70000, "ct": 600, "xy": [1.5, -0.2]})

        assert state.brightness == 1
        assert state.saturation == 254
        assert state.hue == 65535
        assert state.color_temperature == 500
        assert (state.x, state.y) == (1.0, 0.0)

    def test_unknown_color_mode(self):
        assert LightState.model_validate({"colormode": "rgb"}).color_mode is ColorMode.NONE
        assert LightState.model_validate({"colormode": None}).color_mode is ColorMode.NONE
        assert LightState.model_validate({}).color_mode is ColorMode.NONE

    def test_increments_are_not_clamped(self):
        state = LightState.model_validate({"bri_inc": -254, "ct_inc": 65534, "xy_inc": [0.5, -0.5]})

        assert state.bri_inc == -254
        assert state.ct_inc == 65534
        assert (state.x_inc, state.y_inc) == (0.5, -0.5)

    def test_short_xy_rejected(self):
        with pytest.raises(ValidationError):
            LightState.model_validate({"xy": [0.3]})


class TestToWire:
    def test_color_mode_token(self, light_json):
        wire = LightState.model_validate(light_json["state"]).to_wire()

        assert wire["colormode"] == "ct"
        assert wire["bri"] == 100
        assert wire["on"] is False
        assert wire["xy"] == [0.4573, 0.41]

    def test_no_color_mode_omits_key(self):
        wire = LightState(bri=10).to_wire()

        assert "colormode" not in wire
        assert None not in wire.values()

    def test_xy_inc_only_when_reported(self):
        assert "xy_inc" not in LightState().to_wire()
        assert LightState(xy_inc=[0.1, 0.2]).to_wire()["xy_inc"] == [0.1, 0.2]


class TestLight:
    def test_id_comes_from_key(self, light_json):
        light_json["id"] = "99"
        light = Light.from_wire("5", light_json)

        assert light.id == "5"

    def test_metadata(self, light):
        assert light.name == "Hue color lamp 1"
        assert light.model_id == "LCT015"
        assert light.software_version == "1.46.13_r26312"
        assert light.state.brightness == 100

    def test_integer_key(self, light_json):
        assert Light.from_wire(3, light_json).id == "3"
