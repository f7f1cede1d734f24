from typing import Optional

from huelink.api.bridge import BridgeClient
from huelink.commands.base import (
    BrightnessCommand,
    ColorTemperatureCommand,
    HueSaturationCommand,
    LightCommand,
    OnOffCommand,
    XYCommand,
)
from huelink.models.light import Light
from huelink.models.value_domain import transition_time
from huelink.services.state_reconciler import apply_acknowledgements, parse_acknowledgements


def _ticks(seconds: Optional[float]) -> Optional[int]:
    return None if seconds is None else transition_time(seconds)


class LightService:
    def __init__(self, api: BridgeClient):
        self.api = api

    async def send(self, light: Light, command: LightCommand) -> Light:
        """PUT ``command`` and fold the bridge's acknowledgements into ``light.state``."""
        body = await self.api.put(f"lights/{light.id}/state", command.payload())
        acks = parse_acknowledgements(body)
        apply_acknowledgements(light.state, light.id, acks)
        prefix = f"/lights/{light.id}/state/"
        acked = {path[len(prefix):] for path, _ in acks if path.startswith(prefix)}
        if command.color_mode is not None and command.mode_fields <= acked:
            light.state.color_mode = command.color_mode
        return light

    async def turn_on(self, light: Light) -> Light:
        return await self.send(light, OnOffCommand(on=True))

    async def turn_off(self, light: Light) -> Light:
        return await self.send(light, OnOffCommand(on=False))

    async def set_brightness(self, light: Light, brightness: int, transition: Optional[float] = None) -> Light:
        return await self.send(light, BrightnessCommand(bri=brightness, transitiontime=_ticks(transition)))

    async def set_color_temperature(self, light: Light, brightness: int, mired: int,
                                    transition: Optional[float] = None) -> Light:
        command = ColorTemperatureCommand(bri=brightness, ct=mired, transitiontime=_ticks(transition))
        return await self.send(light, command)

    async def set_hue_saturation(self, light: Light, brightness: int, hue: int, saturation: int,
                                 transition: Optional[float] = None) -> Light:
        command = HueSaturationCommand(bri=brightness, hue=hue, sat=saturation, transitiontime=_ticks(transition))
        return await self.send(light, command)

    async def set_xy(self, light: Light, brightness: int, x: float, y: float,
                     transition: Optional[float] = None) -> Light:
        return await self.send(light, XYCommand(bri=brightness, xy=(x, y), transitiontime=_ticks(transition)))
