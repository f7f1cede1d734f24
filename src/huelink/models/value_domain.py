from typing import TypeVar

T = TypeVar("T", int, float)

BRIGHTNESS = (1, 254)
SATURATION = (0, 254)
HUE = (0, 65535)
COLOR_TEMPERATURE = (153, 500)  # mired
XY = (0.0, 1.0)


def clamp(value: T, min_value: T, max_value: T) -> T:
    return max(min_value, min(value, max_value))


def clamp_brightness(value: int) -> int:
    return clamp(int(value), *BRIGHTNESS)


def clamp_saturation(value: int) -> int:
    return clamp(int(value), *SATURATION)


def clamp_hue(value: int) -> int:
    return clamp(int(value), *HUE)


def clamp_color_temperature(value: int) -> int:
    return clamp(int(value), *COLOR_TEMPERATURE)


def clamp_xy(value: float) -> float:
    return clamp(float(value), *XY)


def transition_time(seconds: float) -> int:
    """Seconds -> bridge ticks (1 tick = 100 ms), rounded half up."""
    return max(0, int(seconds * 10 + 0.5))
