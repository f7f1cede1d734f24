"""Bridge discovery.

Two probes run side by side and the first one to confirm a bridge wins:

* SSDP: multicast an M-SEARCH on the local network and read the device
  description of everything that answers.
* N-UPnP: ask the cloud registry for the bridge's internal IP, then read
  ``description.xml`` from that address to make sure it really is a bridge.

Either probe failing (timeouts, refused connections, garbage bodies) only
means "not found" for that probe. The loser keeps running in its worker
thread until its own timeout; its result is dropped. That thread is still
in the loop's default executor, so ``asyncio.run()`` waits for it on
shutdown until the probe's own timeouts run out.
"""
import asyncio
import logging
import socket
import time
from typing import Callable, Optional, Sequence, Union
from urllib.parse import urlsplit
from xml.etree import ElementTree

import requests

logger = logging.getLogger(__name__)

MODEL_NAME = "Philips hue bridge"
CLOUD_DISCOVERY_URL = "https://discovery.meethue.com/"
UPNP_NS = "{urn:schemas-upnp-org:device-1-0}"
SSDP_GROUP = ("239.255.255.250", 1900)
SSDP_SEARCH = "\r\n".join([
    "M-SEARCH * HTTP/1.1",
    "HOST: 239.255.255.250:1900",
    'MAN: "ssdp:discover"',
    "MX: 2",
    "ST: ssdp:all",
    "",
    "",
]).encode("ascii")

Strategy = Callable[[float], Optional[str]]


def is_bridge_model(model_name: Optional[str]) -> bool:
    return bool(model_name) and model_name.lower().startswith(MODEL_NAME.lower())


def parse_description(xml_text: Union[str, bytes]) -> tuple[Optional[str], Optional[str]]:
    """Return ``(modelName, URLBase)`` from a UPnP device description."""
    root = ElementTree.fromstring(xml_text)
    if root.tag != f"{UPNP_NS}root":
        return None, None
    model_name = root.findtext(f"{UPNP_NS}device/{UPNP_NS}modelName")
    url_base = root.findtext(f"{UPNP_NS}URLBase")
    return model_name, url_base


def _fetch_description(url: str, timeout: float) -> bytes:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.content


def find_via_cloud(timeout: float) -> Optional[str]:
    r = requests.get(CLOUD_DISCOVERY_URL, timeout=timeout)
    r.raise_for_status()
    devices = r.json()
    if not isinstance(devices, list) or not devices or not isinstance(devices[0], dict):
        return None

    ip = devices[0].get("internalipaddress")
    if not ip:
        return None

    address = f"http://{ip}/"
    model_name, _ = parse_description(_fetch_description(f"{address}description.xml", timeout))
    return address if is_bridge_model(model_name) else None


def _ssdp_locations(timeout: float) -> list[str]:
    locations: list[str] = []
    deadline = time.monotonic() + timeout
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP) as sock:
        sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, 2)
        sock.sendto(SSDP_SEARCH, SSDP_GROUP)
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            sock.settimeout(remaining)
            try:
                data, _ = sock.recvfrom(65507)
            except socket.timeout:
                break
            for line in data.decode("utf-8", errors="replace").split("\r\n"):
                name, _, value = line.partition(":")
                if name.strip().lower() == "location" and value.strip() not in locations:
                    locations.append(value.strip())
    return locations


def find_via_ssdp(timeout: float) -> Optional[str]:
    for location in _ssdp_locations(timeout):
        try:
            model_name, url_base = parse_description(_fetch_description(location, timeout))
        except (OSError, ValueError, ElementTree.ParseError) as e:
            logger.debug("Skipping SSDP responder %s: %s", location, e)
            continue
        if is_bridge_model(model_name):
            if url_base:
                return url_base
            parts = urlsplit(location)
            return f"{parts.scheme}://{parts.netloc}/"
    return None


async def _probe(strategy: Strategy, timeout: float) -> Optional[str]:
    name = getattr(strategy, "__name__", repr(strategy))
    try:
        address = await asyncio.to_thread(strategy, timeout)
    except Exception as e:
        logger.debug("%s gave up: %s", name, e)
        return None

    if address:
        logger.debug("Bridge found by %s at %s", name, address)
    return address or None


async def discover(timeout: float = 5.0, strategies: Optional[Sequence[Strategy]] = None) -> Optional[str]:
    """Base URL of the first bridge any strategy confirms, or None."""
    if strategies is None:
        strategies = (find_via_ssdp, find_via_cloud)

    pending = {asyncio.ensure_future(_probe(strategy, timeout)) for strategy in strategies}
    try:
        while pending:
            done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
            for task in done:
                address = task.result()
                if address:
                    return address
    finally:
        for task in pending:
            task.cancel()

    logger.debug("No bridge found")
    return None
