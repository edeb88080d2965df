from __future__ import annotations

import json as jsonlib
from typing import Any, Optional

import pytest

from student_portal.backend.connection import ApiConfig, ApiConnection


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, *, content_type: str = "application/json"):
        self.status_code = status_code
        self._payload = payload
        self.headers = {"content-type": content_type} if content_type else {}

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if isinstance(self._payload, str):
            return jsonlib.loads(self._payload)
        return self._payload


class FakeSession:
    """Stands in for requests.Session: answers from a (method, path) routing table."""

    def __init__(self):
        self.headers: dict = {}
        self.routes: dict[tuple[str, str], Any] = {}
        self.calls: list[dict] = []

    def on(self, method: str, path: str, response: Any) -> None:
        self.routes[(method.upper(), path)] = response

    def request(self, method: str, url: str, *, params=None, json=None, timeout=None):
        path = "/" + url.split("://", 1)[-1].split("/", 1)[-1]
        self.calls.append({"method": method, "path": path, "params": params, "json": json, "timeout": timeout})
        answer = self.routes.get((method.upper(), path))
        if answer is None:
            return FakeResponse(404, {"error": f"no route for {method} {path}"})
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(params=params, json=json)
        return answer

    def last(self, method: str, path: str) -> Optional[dict]:
        for call in reversed(self.calls):
            if call["method"] == method and call["path"] == path:
                return call
        return None


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def conn(fake_session) -> ApiConnection:
    return ApiConnection(ApiConfig(base_url="http://backend.test", timeout=1), session=fake_session)


@pytest.fixture
def app(monkeypatch, conn):
    monkeypatch.setenv("APP_ENV", "testing")
    from student_portal.main import create_app

    app = create_app(conn=conn)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
