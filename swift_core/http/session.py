"""
Authenticated Session
=====================
Token lifecycle for the storage API.

The session authenticates once on construction, injects the cached token
into every request and, when the storage service answers 401, refreshes the
token and retries that request exactly once.
"""

import threading
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import httpx
import structlog

from ..config import SwiftConfig
from ..exceptions import AuthenticationError, OptionError, ResponseError
from .response import SwiftResponse

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SessionState:
    """Token and endpoint from one successful authentication."""
    auth_token: str
    storage_url: str


class AuthSession:
    """
    Owns the credentials and the current (token, storage URL) pair.

    Example:
        session = AuthSession(SwiftConfig(auth_url=..., username=..., api_key=...))
        response = session.request("GET", "/container", query={"limit": 10})

    State is replaced wholesale under a lock. Concurrent requests that all
    see a 401 for the same token trigger a single re-authentication.
    """

    def __init__(
        self,
        config: SwiftConfig,
        transport: Optional[httpx.BaseTransport] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.config = config.validate()
        if client is not None and transport is not None:
            raise OptionError("pass either a transport or a client, not both")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(
            timeout=self.config.timeout,
            transport=transport,
        )
        self._lock = threading.Lock()
        self._state: Optional[SessionState] = None

        try:
            self.authenticate()
        except Exception:
            self.close()
            raise

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        """Close the underlying HTTP client if this session created it."""
        if self._owns_client:
            self._client.close()

    @property
    def state(self) -> SessionState:
        with self._lock:
            return self._state

    @property
    def auth_token(self) -> str:
        return self.state.auth_token

    @property
    def storage_url(self) -> str:
        return self.state.storage_url

    def authenticate(self) -> SessionState:
        """
        Exchange the credentials for a token and storage URL.

        Raises:
            AuthenticationError: If the auth endpoint rejects the request
        """
        with self._lock:
            return self._authenticate()

    def _authenticate(self) -> SessionState:
        logger.debug("swift_authenticating", auth_url=self.config.auth_url)

        response = self._client.get(
            self.config.auth_url,
            headers={
                "X-Auth-User": self.config.username,
                "X-Auth-Key": self.config.api_key,
            },
        )

        if not response.is_success:
            logger.warning(
                "swift_authentication_failed",
                auth_url=self.config.auth_url,
                status_code=response.status_code,
            )
            raise AuthenticationError(response.status_code, response.reason_phrase)

        auth_token = response.headers.get("X-Auth-Token")
        storage_url = self.config.storage_url or response.headers.get("X-Storage-Url")

        if not auth_token or not storage_url:
            missing = "X-Auth-Token" if not auth_token else "X-Storage-Url"
            logger.warning("swift_authentication_failed", missing_header=missing)
            raise AuthenticationError(
                response.status_code, f"{missing} missing from auth response"
            )

        self._state = SessionState(auth_token=auth_token, storage_url=storage_url)
        logger.info("swift_authenticated", storage_url=storage_url)
        return self._state

    def _refresh(self, stale: SessionState) -> SessionState:
        """Re-authenticate unless another caller already replaced the stale state."""
        with self._lock:
            if self._state is not stale:
                return self._state
            return self._authenticate()

    def request(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[bytes] = None,
    ) -> SwiftResponse:
        """
        Send an authenticated request to the storage endpoint.

        Args:
            method: HTTP method
            path: Path below the storage URL (e.g., /container/object)
            headers: Extra request headers
            query: Query string parameters; None values are omitted
            body: Raw request body

        Returns:
            The successful response

        Raises:
            ResponseError: If the final response is not 2xx
            AuthenticationError: If re-authentication after a 401 fails
        """
        state = self.state
        response = self._send(state, method, path, headers, query, body)

        if response.status_code == 401:
            logger.info("swift_token_rejected", method=method, path=path)
            state = self._refresh(state)
            response = self._send(state, method, path, headers, query, body)

        if not response.is_success:
            logger.warning(
                "swift_request_failed",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise ResponseError(response.status_code, response.reason)

        return response

    def _send(
        self,
        state: SessionState,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]],
        query: Optional[Mapping[str, Any]],
        body: Optional[bytes],
    ) -> SwiftResponse:
        request_headers = httpx.Headers(headers or {})
        request_headers["X-Auth-Token"] = state.auth_token
        request_headers["Accept"] = "application/json"

        response = self._client.request(
            method.upper(),
            f"{state.storage_url}{path}",
            headers=request_headers,
            params=_query_params(query),
            content=body,
        )
        return SwiftResponse.from_httpx(response)


def _query_params(query: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    # None means "not set"; httpx encodes the remaining primitives
    if not query:
        return None
    return {key: value for key, value in query.items() if value is not None}
