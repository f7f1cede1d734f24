import asyncio
import logging
from typing import Any, Callable, Optional

from huelink.api import discovery
from huelink.api.http_client import HttpClient
from huelink.config import HueSettings
from huelink.errors import DiscoveryFailed, MalformedResponse, TransportFailure, Unauthenticated

logger = logging.getLogger(__name__)


class BridgeClient:
    """Talks to one bridge over the v1 REST API.

    A request that fails in transport triggers one rediscovery of the bridge
    (its DHCP lease may have changed) and one retry against the new address.
    """

    def __init__(self, address: str, username: Optional[str] = None, *,
                 timeout: float = 5, discovery_timeout: float = 5):
        self.http = HttpClient(address, timeout=timeout)
        self.username = username
        self.discovery_timeout = discovery_timeout

    @property
    def address(self) -> str:
        return self.http.base_url

    @classmethod
    async def discover(cls, username: Optional[str] = None, *,
                       timeout: float = 5, discovery_timeout: float = 5) -> "BridgeClient":
        address = await discovery.discover(discovery_timeout)
        if not address:
            raise DiscoveryFailed("no bridge answered on the local network or in the cloud registry")
        return cls(address, username, timeout=timeout, discovery_timeout=discovery_timeout)

    @classmethod
    async def from_settings(cls, settings: Optional[HueSettings] = None) -> "BridgeClient":
        settings = settings or HueSettings.from_env()
        kwargs = {"timeout": settings.request_timeout, "discovery_timeout": settings.discovery_timeout}
        if settings.bridge_address:
            return cls(settings.bridge_address, settings.username, **kwargs)
        return await cls.discover(settings.username, **kwargs)

    async def get(self, resource: str) -> Any:
        return await self._call(self.http.get, resource)

    async def put(self, resource: str, payload: dict) -> Any:
        return await self._call(self.http.put, resource, payload)

    async def post(self, resource: str, payload: dict, *, anonymous: bool = False) -> Any:
        return await self._call(self.http.post, resource, payload, anonymous=anonymous)

    async def register(self, device_type: str) -> str:
        """Ask the bridge for a new username.

        Returns an empty string when the bridge refuses, which almost always
        means the link button was not pressed first.
        """
        body = await self.post("", {"devicetype": device_type}, anonymous=True)
        if not isinstance(body, list) or not body or not isinstance(body[0], dict):
            raise MalformedResponse(f"unexpected registration response: {body!r}")

        result = body[0]
        if "error" in result:
            logger.info("Registration refused: %s", result["error"])
            return ""
        try:
            return str(result["success"]["username"])
        except (KeyError, TypeError) as e:
            raise MalformedResponse(f"unexpected registration response: {body!r}") from e

    def _path(self, resource: str, anonymous: bool) -> str:
        base = "api" if anonymous else f"api/{self.username}"
        return f"{base}/{resource}" if resource else base

    async def _call(self, send: Callable[..., Any], resource: str, *args: Any, anonymous: bool = False) -> Any:
        if not anonymous and not self.username:
            raise Unauthenticated(f"'{resource}' needs a username, register with the bridge first")

        path = self._path(resource, anonymous)
        try:
            return await asyncio.to_thread(send, path, *args)
        except TransportFailure as e:
            logger.warning("Request to bridge at %s failed (%s), rediscovering", self.address, e)

        address = await discovery.discover(self.discovery_timeout)
        if not address:
            raise DiscoveryFailed("bridge stopped answering and could not be found again")
        self.http.base_url = address
        return await asyncio.to_thread(send, path, *args)
