"""Shared fixtures: a CrmClient wired to an in-memory fake Nocobase."""

import json

import httpx
import pytest

from nocobase_mcp.client import CrmClient
from nocobase_mcp.config import ServerConfig


class FakeBackend:
    """Answers requests from a route table and records everything it sees."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, *responses) -> None:
        self.routes.setdefault((method, path), []).extend(responses)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"errors": [{"message": "not found"}]})

        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    def bodies(self, path: str) -> list[dict]:
        return [json.loads(r.content) for r in self.requests if r.url.path == path]


@pytest.fixture
def config() -> ServerConfig:
    return ServerConfig(api_base="https://crm.test", token="secret-token", user_agent="test-agent/0.1")


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(config, backend) -> CrmClient:
    return CrmClient(config, transport=httpx.MockTransport(backend.handle))
