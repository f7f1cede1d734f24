import logging
from typing import Any, Optional

import requests

from huelink.errors import MalformedResponse, TransportFailure

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(self, base_url: str, headers: Optional[dict[str, str]] = None, *, timeout: float = 5):
        self.session = requests.Session()
        self.base_url = base_url
        self.headers = headers or {}
        self.timeout = timeout

    def get(self, path: str, *, timeout: Optional[float] = None) -> Any:
        return self.request("GET", path, timeout=timeout)

    def put(self, path: str, payload: dict, *, timeout: Optional[float] = None) -> Any:
        return self.request("PUT", path, payload, timeout=timeout)

    def post(self, path: str, payload: dict, *, timeout: Optional[float] = None) -> Any:
        return self.request("POST", path, payload, timeout=timeout)

    def request(self, method: str, path: str, payload: Optional[dict] = None, *, timeout: Optional[float] = None) -> Any:
        url = f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
        logger.debug("%s %s %s", method, url, payload if payload is not None else "")
        try:
            r = self.session.request(
                method, url, json=payload, headers=self.headers, timeout=timeout or self.timeout
            )
            r.raise_for_status()
        except requests.RequestException as e:
            raise TransportFailure(f"{method} {url} failed: {e}") from e

        try:
            return r.json()
        except ValueError as e:
            raise MalformedResponse(f"{method} {url} did not return JSON: {r.text[:200]!r}") from e
