from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = 10.0


class ApiConnection:
    """Singleton-like factory for the backend HTTP session.

    Note: One pooled requests.Session is shared by every repository.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.setdefault("Accept", "application/json")

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def timeout(self) -> float:
        return float(self._config.timeout)

    @property
    def session(self) -> requests.Session:
        return self._session

    def url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"
