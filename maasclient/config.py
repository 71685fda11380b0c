"""Client configuration loaded from arguments, the environment or ~/.maas/config.ini."""
from __future__ import annotations

import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from maasclient.auth.refresher import REFRESH_INTERVAL
from maasclient.errors import MAASConfigError

load_dotenv()

API_PREFIX = "/api/2.0"
CONFIG_FILE = Path.home() / ".maas" / "config.ini"


@dataclass(frozen=True)
class Config:
    endpoint: str = ""
    api_key: str = ""
    timeout: float = 30.0
    refresh_interval: float = REFRESH_INTERVAL

    @classmethod
    def load(cls, endpoint: str | None = None, api_key: str | None = None) -> Config:
        """Explicit arguments win, then MAAS_ENDPOINT / MAAS_API_KEY, then the config file."""
        endpoint = endpoint or os.getenv("MAAS_ENDPOINT")
        api_key = api_key or os.getenv("MAAS_API_KEY")

        if not (endpoint and api_key) and CONFIG_FILE.exists():
            parser = ConfigParser()
            parser.read(CONFIG_FILE)
            endpoint = endpoint or parser.get("api", "endpoint", fallback=None)
            api_key = api_key or parser.get("api", "api_key", fallback=None)

        if not endpoint:
            raise MAASConfigError("No MAAS endpoint found. Set MAAS_ENDPOINT or ~/.maas/config.ini")
        if not api_key:
            raise MAASConfigError("No API key found. Set MAAS_API_KEY or ~/.maas/config.ini")

        timeout = float(os.getenv("MAAS_TIMEOUT", cls.timeout))
        return cls(endpoint=endpoint, api_key=api_key, timeout=timeout)

    @property
    def api_url(self) -> str:
        return f"{self.endpoint.rstrip('/')}{API_PREFIX}"
