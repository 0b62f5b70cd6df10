"""
Pytest fixtures for Barikoi client tests.

HTTP is faked with ``httpx.MockTransport``: every request the client sends is
recorded by the ``mockApi`` fixture and answered with the queued response
(``{"status": 200}`` by default).
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from .client import BarikoiClient
from .constants import ENV_API_KEY, ENV_BASE_URL, ENV_TIMEOUT

TEST_API_KEY = "test_api_key"
TEST_BASE_URL = "https://test.barikoi.xyz/v2/api"


class MockApi:
    """Records sent requests and replays queued responses"""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: List[httpx.Response] = []

    def respond(self, statusCode: int = 200, json: Any = None, content: Optional[bytes] = None) -> None:
        """Queue response for the next request"""
        if content is not None:
            self._responses.append(httpx.Response(statusCode, content=content))
        elif json is not None:
            self._responses.append(httpx.Response(statusCode, json=json))
        else:
            self._responses.append(httpx.Response(statusCode))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={"status": 200})

    @property
    def lastRequest(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]

    @property
    def lastQuery(self) -> Dict[str, str]:
        return dict(self.lastRequest.url.params)

    @property
    def lastForm(self) -> Dict[str, str]:
        return dict(httpx.QueryParams(self.lastRequest.content.decode()))

    @property
    def lastJson(self) -> Any:
        return json.loads(self.lastRequest.content)


@pytest.fixture(autouse=True)
def cleanEnv(monkeypatch):
    """Make sure no BARIKOI_* variables leak from the environment"""
    for name in (ENV_API_KEY, ENV_BASE_URL, ENV_TIMEOUT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mockApi() -> MockApi:
    return MockApi()


@pytest.fixture
def transport(mockApi) -> httpx.MockTransport:
    return httpx.MockTransport(mockApi.handler)


@pytest.fixture
def client(transport) -> BarikoiClient:
    """Create a client instance talking to the mock transport"""
    return BarikoiClient(TEST_API_KEY, TEST_BASE_URL, transport=transport)
