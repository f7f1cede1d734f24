from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from huelink.models import value_domain
from huelink.models.color_mode import ColorMode, decode, encode


class LightState(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_on: bool = Field(False, alias="on")
    brightness: int = Field(value_domain.BRIGHTNESS[0], alias="bri")
    saturation: int = Field(0, alias="sat")
    hue: int = 0
    color_temperature: int = Field(value_domain.COLOR_TEMPERATURE[0], alias="ct")
    x: float = 0.0
    y: float = 0.0
    color_mode: ColorMode = Field(ColorMode.NONE, alias="colormode")
    is_reachable: bool = Field(False, alias="reachable")
    alert: Optional[str] = None
    effect: Optional[str] = None
    transition_time: Optional[int] = Field(None, alias="transitiontime")

    # As reported by the bridge, not range checked
    bri_inc: Optional[int] = None
    sat_inc: Optional[int] = None
    hue_inc: Optional[int] = None
    ct_inc: Optional[int] = None
    x_inc: Optional[float] = None
    y_inc: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def _split_xy(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key, (x_name, y_name) in (("xy", ("x", "y")), ("xy_inc", ("x_inc", "y_inc"))):
            pair = data.pop(key, None)
            if pair is None:
                continue
            if not isinstance(pair, (list, tuple)) or len(pair) < 2:
                raise ValueError(f"{key} must be a pair of numbers, got {pair!r}")
            data[x_name], data[y_name] = pair[0], pair[1]
        return data

    @field_validator("color_mode", mode="before")
    @classmethod
    def _decode_color_mode(cls, v: Any) -> ColorMode:
        if isinstance(v, ColorMode):
            return v
        return decode(v)

    @field_validator("brightness")
    @classmethod
    def _clamp_brightness(cls, v: int) -> int:
        return value_domain.clamp_brightness(v)

    @field_validator("saturation")
    @classmethod
    def _clamp_saturation(cls, v: int) -> int:
        return value_domain.clamp_saturation(v)

    @field_validator("hue")
    @classmethod
    def _clamp_hue(cls, v: int) -> int:
        return value_domain.clamp_hue(v)

    @field_validator("color_temperature")
    @classmethod
    def _clamp_color_temperature(cls, v: int) -> int:
        return value_domain.clamp_color_temperature(v)

    @field_validator("x", "y")
    @classmethod
    def _clamp_xy(cls, v: float) -> float:
        return value_domain.clamp_xy(v)

    def to_wire(self) -> dict[str, Any]:
        """Flat bridge representation. "colormode" is left out entirely when no mode is active."""
        data = self.model_dump(
            by_alias=True,
            exclude={"x", "y", "x_inc", "y_inc", "color_mode"},
            exclude_none=True,
        )
        data["xy"] = [self.x, self.y]
        if self.x_inc is not None and self.y_inc is not None:
            data["xy_inc"] = [self.x_inc, self.y_inc]

        token = encode(self.color_mode)
        if token is not None:
            data["colormode"] = token
        return data


class Light(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    id: str = ""
    state: LightState = Field(default_factory=LightState)
    type: Optional[str] = None
    name: Optional[str] = None
    model_id: Optional[str] = Field(None, alias="modelid")
    unique_id: Optional[str] = Field(None, alias="uniqueid")
    manufacturer_name: Optional[str] = Field(None, alias="manufacturername")
    software_version: Optional[str] = Field(None, alias="swversion")

    @classmethod
    def from_wire(cls, light_id: str, data: dict) -> "Light":
        # The id is the key the light was fetched under, whatever the body says.
        light = cls.model_validate(data)
        light.id = str(light_id)
        return light
