from enum import Enum
from typing import Optional


class ColorMode(Enum):
    NONE = "none"
    HUE_AND_SATURATION = "hue_and_saturation"
    COLOR_TEMPERATURE = "color_temperature"
    XY = "xy"


_TOKENS = {
    "hs": ColorMode.HUE_AND_SATURATION,
    "ct": ColorMode.COLOR_TEMPERATURE,
    "xy": ColorMode.XY,
}
_MODES = {mode: token for token, mode in _TOKENS.items()}


def decode(token: Optional[str]) -> ColorMode:
    """Wire token ("hs", "ct", "xy") to ColorMode. Anything else is ColorMode.NONE."""
    if not isinstance(token, str):
        return ColorMode.NONE
    return _TOKENS.get(token, ColorMode.NONE)


def encode(mode: ColorMode) -> Optional[str]:
    """ColorMode to wire token. ColorMode.NONE has no wire form and gives None,
    which callers must drop from the payload rather than send as null."""
    return _MODES.get(mode)
