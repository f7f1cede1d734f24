"""Folds the bridge's acknowledgement list back into a local LightState.

A successful ``PUT /lights/{id}/state`` answers with one element per field it
changed::

    [{"success": {"/lights/1/state/bri": 200}},
     {"success": {"/lights/1/state/on": true}}]

Only the fields the bridge confirmed are touched. Colour mode is not derived
here: ``bri`` and ``on`` echoes say nothing about which mode the light is in,
so the caller sets it from the command it issued.
"""
import logging
import math
from enum import Enum
from numbers import Real
from typing import Any, List, Sequence, Tuple

from huelink.errors import MalformedResponse
from huelink.models import value_domain
from huelink.models.light import LightState

logger = logging.getLogger(__name__)

Acknowledgement = Tuple[str, Any]


class StateField(Enum):
    BRI = "bri"
    SAT = "sat"
    HUE = "hue"
    CT = "ct"
    XY = "xy"
    ON = "on"


def parse_acknowledgements(body: Any) -> List[Acknowledgement]:
    """Flatten a bridge response list into ``(path, value)`` pairs.

    Error elements are logged and skipped; anything that is not a list of
    single-key objects raises MalformedResponse.
    """
    if not isinstance(body, list):
        raise MalformedResponse(f"expected a list of acknowledgements, got {type(body).__name__}")

    acks: List[Acknowledgement] = []
    for element in body:
        if not isinstance(element, dict):
            raise MalformedResponse(f"acknowledgement is not an object: {element!r}")
        if "error" in element:
            logger.warning("Bridge rejected part of a command: %s", element["error"])
            continue
        success = element.get("success")
        if not isinstance(success, dict):
            raise MalformedResponse(f"acknowledgement has no success object: {element!r}")
        acks.extend(success.items())
    return acks


def _number(path: str, value: Any) -> Real:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise MalformedResponse(f"{path}: expected a number, got {value!r}")
    return value


def apply_acknowledgements(state: LightState, light_id: str, acks: Sequence[Acknowledgement]) -> LightState:
    """Apply the acknowledged fields for ``light_id`` to ``state`` in place.

    Paths for other lights and unknown fields are ignored. A malformed entry
    raises MalformedResponse; entries before it stay applied.
    """
    if not isinstance(acks, (list, tuple)):
        raise MalformedResponse(f"expected a sequence of acknowledgements, got {type(acks).__name__}")

    prefix = f"/lights/{light_id}/state/"
    for ack in acks:
        if not isinstance(ack, (list, tuple)) or len(ack) != 2 or not isinstance(ack[0], str):
            raise MalformedResponse(f"acknowledgement is not a (path, value) pair: {ack!r}")
        path, value = ack
        if not path.startswith(prefix):
            continue

        try:
            field = StateField(path[len(prefix):])
        except ValueError:
            logger.debug("Ignoring acknowledgement for unknown field %s", path)
            continue

        if field is StateField.BRI:
            state.brightness = value_domain.clamp_brightness(_number(path, value))
        elif field is StateField.SAT:
            state.saturation = value_domain.clamp_saturation(_number(path, value))
        elif field is StateField.HUE:
            state.hue = value_domain.clamp_hue(_number(path, value))
        elif field is StateField.CT:
            state.color_temperature = value_domain.clamp_color_temperature(_number(path, value))
        elif field is StateField.XY:
            if not isinstance(value, (list, tuple)) or len(value) < 2:
                raise MalformedResponse(f"{path}: expected [x, y], got {value!r}")
            x, y = _number(path, value[0]), _number(path, value[1])
            state.x, state.y = value_domain.clamp_xy(x), value_domain.clamp_xy(y)
        elif field is StateField.ON:
            if not isinstance(value, bool):
                raise MalformedResponse(f"{path}: expected a boolean, got {value!r}")
            state.is_on = value
    return state
