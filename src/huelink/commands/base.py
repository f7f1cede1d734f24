from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from huelink.models import value_domain
from huelink.models.color_mode import ColorMode


class LightCommand(BaseModel):
    """Body of PUT /lights/{id}/state.

    ``color_mode`` is the mode the light is in after the command succeeds,
    or None when the command leaves the mode alone. It only takes effect once
    the bridge has acknowledged every field in ``mode_fields``.
    """

    color_mode: ClassVar[Optional[ColorMode]] = None
    mode_fields: ClassVar[frozenset] = frozenset()

    transitiontime: Optional[int] = Field(None, ge=0)

    def payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class OnOffCommand(LightCommand):
    on: bool


class BrightnessCommand(LightCommand):
    bri: int

    @field_validator("bri")
    @classmethod
    def _clamp_bri(cls, v: int) -> int:
        return value_domain.clamp_brightness(v)


class HueSaturationCommand(BrightnessCommand):
    color_mode: ClassVar[Optional[ColorMode]] = ColorMode.HUE_AND_SATURATION
    mode_fields: ClassVar[frozenset] = frozenset({"hue", "sat"})

    hue: int
    sat: int

    @field_validator("hue")
    @classmethod
    def _clamp_hue(cls, v: int) -> int:
        return value_domain.clamp_hue(v)

    @field_validator("sat")
    @classmethod
    def _clamp_sat(cls, v: int) -> int:
        return value_domain.clamp_saturation(v)


class ColorTemperatureCommand(BrightnessCommand):
    color_mode: ClassVar[Optional[ColorMode]] = ColorMode.COLOR_TEMPERATURE
    mode_fields: ClassVar[frozenset] = frozenset({"ct"})

    ct: int

    @field_validator("ct")
    @classmethod
    def _clamp_ct(cls, v: int) -> int:
        return value_domain.clamp_color_temperature(v)


class XYCommand(BrightnessCommand):
    color_mode: ClassVar[Optional[ColorMode]] = ColorMode.XY
    mode_fields: ClassVar[frozenset] = frozenset({"xy"})

    xy: Tuple[float, float]

    @field_validator("xy")
    @classmethod
    def _clamp_xy(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        return value_domain.clamp_xy(v[0]), value_domain.clamp_xy(v[1])
