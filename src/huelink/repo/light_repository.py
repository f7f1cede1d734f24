from pydantic import ValidationError

from huelink.api.bridge import BridgeClient
from huelink.errors import MalformedResponse
from huelink.models.light import Light


class LightRepository:
    def __init__(self, api: BridgeClient):
        self.api = api

    async def get_lights(self) -> list[Light]:
        body = await self.api.get("lights")
        if not isinstance(body, dict):
            raise MalformedResponse(f"expected a map of lights, got {body!r}")
        try:
            return [Light.from_wire(light_id, data) for light_id, data in body.items()]
        except ValidationError as e:
            raise MalformedResponse(f"could not read lights: {e}") from e

    async def get_light(self, light_id: str) -> Light:
        body = await self.api.get(f"lights/{light_id}")
        if not isinstance(body, dict):
            raise MalformedResponse(f"expected light {light_id}, got {body!r}")
        try:
            return Light.from_wire(light_id, body)
        except ValidationError as e:
            raise MalformedResponse(f"could not read light {light_id}: {e}") from e
