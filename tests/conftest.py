"""
Shared fixtures for huelink tests.

Nothing here touches the network; bridge and HTTP layers are mocks.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from huelink.api.bridge import BridgeClient
from huelink.models.light import Light

BRIDGE_DESCRIPTION = b"""<?xml version="1.0" encoding="UTF-8" ?>
<root xmlns="urn:schemas-upnp-org:device-1-0">
  <specVersion><major>1</major><minor>0</minor></specVersion>
  <URLBase>http://192.168.1.20:80/</URLBase>
  <device>
    <deviceType>urn:schemas-upnp-org:device:Basic:1</deviceType>
    <friendlyName>Philips hue (192.168.1.20)</friendlyName>
    <manufacturer>Royal Philips Electronics</manufacturer>
    <modelName>Philips hue bridge 2015</modelName>
  </device>
</root>
"""

ROUTER_DESCRIPTION = b"""<?xml version="1.0" encoding="UTF-8" ?>
<root xmlns="urn:schemas-upnp-org:device-1-0">
  <URLBase>http://192.168.1.1:5000/</URLBase>
  <device>
    <modelName>Some Router</modelName>
  </device>
</root>
"""


@pytest.fixture
def light_json():
    """A light as returned by GET /api/<username>/lights/<id>"""
    return {
        "state": {
            "on": False,
            "bri": 100,
            "hue": 8418,
            "sat": 140,
            "effect": "none",
            "xy": [0.4573, 0.41],
            "ct": 366,
            "alert": "select",
            "colormode": "ct",
            "mode": "homeautomation",
            "reachable": True,
        },
        "type": "Extended color light",
        "name": "Hue color lamp 1",
        "modelid": "LCT015",
        "manufacturername": "Signify Netherlands B.V.",
        "uniqueid": "00:17:88:01:02:03:04:05-0b",
        "swversion": "1.46.13_r26312",
    }


@pytest.fixture
def light(light_json):
    return Light.from_wire("5", light_json)


@pytest.fixture
def mock_http():
    """HttpClient double with the methods BridgeClient calls."""
    http = MagicMock()
    http.base_url = "http://192.168.1.20/"
    http.get = MagicMock()
    http.put = MagicMock()
    http.post = MagicMock()
    return http


@pytest.fixture
def bridge(mock_http):
    client = BridgeClient("http://192.168.1.20/", "testuser")
    client.http = mock_http
    return client


@pytest.fixture
def mock_api():
    """BridgeClient double for service and repository tests."""
    api = MagicMock()
    api.get = AsyncMock()
    api.put = AsyncMock()
    api.post = AsyncMock()
    return api
