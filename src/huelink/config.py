import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


class HueSettings(BaseModel):
    bridge_address: Optional[str] = None
    username: Optional[str] = None
    request_timeout: float = Field(5.0, gt=0)
    discovery_timeout: float = Field(5.0, gt=0)

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "HueSettings":
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))

        values = {
            "bridge_address": os.getenv("HUE_BRIDGE_ADDRESS") or None,
            "username": os.getenv("HUE_USERNAME") or None,
            "request_timeout": os.getenv("HUE_REQUEST_TIMEOUT"),
            "discovery_timeout": os.getenv("HUE_DISCOVERY_TIMEOUT"),
        }
        return cls(**{k: v for k, v in values.items() if v is not None})
