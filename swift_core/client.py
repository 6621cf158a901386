"""
Swift Client
============
Account, container and object operations for an object storage account.

Usage:
    from swift_core import SwiftClient

    client = SwiftClient(
        auth_url="https://example.com/auth/v1.0",
        username="account:username",
        api_key="secret",
        temp_url_key="Temp url key",
    )

    client.put_container("backups")
    client.put_object("db.sql.gz", open("db.sql.gz", "rb"), "backups")
    objects = client.get_objects("backups", {"limit": 100}).parse(ObjectInfo)
    url = client.temp_url("db.sql.gz", "backups", expires_in=600)
"""

from typing import Any, Mapping, Optional, Union

import httpx

from .config import SwiftConfig
from .exceptions import EmptyNameError, OptionError, TempUrlKeyMissing
from .http import AuthSession, SwiftResponse
from .mime import ContentTypeLookup, content_type_for
from .temp_url import DEFAULT_EXPIRES_IN, generate_temp_url


ObjectData = Union[bytes, str, Any]


class SwiftClient:
    """
    Client for an object storage account.

    Authenticates on construction. Expired tokens are refreshed
    transparently by the underlying ``AuthSession``.
    """

    def __init__(
        self,
        config: Optional[SwiftConfig] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
        mime_lookup: Optional[ContentTypeLookup] = None,
        **options,
    ):
        if config is None:
            config = SwiftConfig.from_options(**options)
        elif options:
            raise OptionError("pass either a config or keyword options, not both")

        self.config = config.validate()
        self._mime_lookup = mime_lookup or content_type_for
        self.session = AuthSession(self.config, transport=transport, client=http_client)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self.session.close()

    @property
    def auth_token(self) -> str:
        return self.session.auth_token

    @property
    def storage_url(self) -> str:
        return self.session.storage_url

    def request(self, method: str, path: str, **kwargs) -> SwiftResponse:
        return self.session.request(method, path, **kwargs)

    # Account operations

    def post_account(self, headers: Optional[Mapping[str, str]] = None) -> SwiftResponse:
        return self.request("POST", "/", headers=headers)

    def get_containers(self, query: Optional[Mapping[str, Any]] = None) -> SwiftResponse:
        """List containers; query (limit, marker, prefix, ...) is passed through."""
        return self.request("GET", "/", query=query)

    # Container operations

    def get_container(
        self, container: str, query: Optional[Mapping[str, Any]] = None
    ) -> SwiftResponse:
        """List objects in a container."""
        _require_names(container)
        return self.request("GET", f"/{container}", query=query)

    get_objects = get_container

    def head_container(self, container: str) -> SwiftResponse:
        _require_names(container)
        return self.request("HEAD", f"/{container}")

    def put_container(
        self, container: str, headers: Optional[Mapping[str, str]] = None
    ) -> SwiftResponse:
        _require_names(container)
        return self.request("PUT", f"/{container}", headers=headers)

    def post_container(
        self, container: str, headers: Optional[Mapping[str, str]] = None
    ) -> SwiftResponse:
        _require_names(container)
        return self.request("POST", f"/{container}", headers=headers)

    def delete_container(self, container: str) -> SwiftResponse:
        _require_names(container)
        return self.request("DELETE", f"/{container}")

    # Object operations

    def put_object(
        self,
        object_name: str,
        data: ObjectData,
        container: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> SwiftResponse:
        """
        Upload an object.

        Args:
            object_name: Object name
            data: bytes, str, or a readable file-like object (read fully)
            container: Container name
            headers: Extra headers; Content-Type is guessed from the
                object name when not given

        Returns:
            The storage response (201 on success)
        """
        _require_names(object_name, container)

        extended_headers = dict(headers or {})
        if not any(key.lower() == "content-type" for key in extended_headers):
            content_type = self._mime_lookup(object_name)
            if content_type:
                extended_headers["Content-Type"] = content_type

        return self.request(
            "PUT",
            f"/{container}/{object_name}",
            headers=extended_headers,
            body=_read_body(data),
        )

    def post_object(
        self,
        object_name: str,
        container: str,
        headers: Optional[Mapping[str, str]] = None,
    ) -> SwiftResponse:
        _require_names(object_name, container)
        return self.request("POST", f"/{container}/{object_name}", headers=headers)

    def get_object(self, object_name: str, container: str) -> SwiftResponse:
        _require_names(object_name, container)
        return self.request("GET", f"/{container}/{object_name}")

    def head_object(self, object_name: str, container: str) -> SwiftResponse:
        _require_names(object_name, container)
        return self.request("HEAD", f"/{container}/{object_name}")

    def delete_object(self, object_name: str, container: str) -> SwiftResponse:
        _require_names(object_name, container)
        return self.request("DELETE", f"/{container}/{object_name}")

    # URLs

    def public_url(self, object_name: str, container: str) -> str:
        """URL of an object in a publicly readable container."""
        _require_names(object_name, container)
        return f"{self.storage_url}/{container}/{object_name}"

    def temp_url(
        self,
        object_name: str,
        container: str,
        expires_in: Optional[int] = None,
    ) -> str:
        """
        Signed GET URL for an object, valid for expires_in seconds.

        Falls back to the configured expires_in, then to one hour.

        Raises:
            EmptyNameError: If either name is empty
            TempUrlKeyMissing: If no temp_url_key is configured
        """
        _require_names(object_name, container)
        if not self.config.temp_url_key:
            raise TempUrlKeyMissing()

        lifetime = expires_in or self.config.expires_in or DEFAULT_EXPIRES_IN
        return generate_temp_url(
            self.storage_url,
            container,
            object_name,
            self.config.temp_url_key,
            expires_in=lifetime,
        )

    temporary_url = temp_url


def _require_names(*names: str) -> None:
    for name in names:
        if not name:
            raise EmptyNameError()


def _read_body(data: ObjectData) -> bytes:
    if hasattr(data, "read"):
        data = data.read()
    if isinstance(data, str):
        data = data.encode("utf-8")
    return bytes(data)
