"""
Shared fixtures: an in-memory storage service behind httpx.MockTransport.
"""

from typing import Callable, List, Optional

import httpx
import pytest

AUTH_URL = "https://example.com/auth/v1.0"
STORAGE_URL = "https://example.com/v1/AUTH_account"


class FakeSwift:
    """
    Records every request and answers from configurable handlers.

    The auth endpoint issues tokens "Token", "Token-2", ... in order.
    Storage requests are answered by ``storage_handler``.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.auth_status = 200
        self.storage_url_header: Optional[str] = STORAGE_URL
        self.storage_handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, content=b"")
        )
        self._tokens_issued = 0

    @property
    def auth_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url) == AUTH_URL]

    @property
    def storage_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url) != AUTH_URL]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == AUTH_URL:
            return self._auth(request)
        return self.storage_handler(request)

    def _auth(self, request: httpx.Request) -> httpx.Response:
        if self.auth_status != 200:
            return httpx.Response(self.auth_status)
        self._tokens_issued += 1
        token = "Token" if self._tokens_issued == 1 else f"Token-{self._tokens_issued}"
        headers = {"X-Auth-Token": token}
        if self.storage_url_header:
            headers["X-Storage-Url"] = self.storage_url_header
        return httpx.Response(200, headers=headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SWIFT_* variables from the host out of the tests."""
    for name in (
        "SWIFT_AUTH_URL",
        "SWIFT_USERNAME",
        "SWIFT_API_KEY",
        "SWIFT_STORAGE_URL",
        "SWIFT_TEMP_URL_KEY",
        "SWIFT_EXPIRES_IN",
        "SWIFT_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_swift() -> FakeSwift:
    return FakeSwift()


@pytest.fixture
def client_options() -> dict:
    return {
        "auth_url": AUTH_URL,
        "username": "account:username",
        "api_key": "secret",
        "temp_url_key": "Temp url key",
    }


@pytest.fixture
def swift_client(fake_swift, client_options):
    from swift_core import SwiftClient

    client = SwiftClient(transport=fake_swift.transport, **client_options)
    yield client
    client.close()
