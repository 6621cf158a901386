"""
Swift Client Configuration
==========================
Credentials and connection settings for an object storage account.
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

from .exceptions import OptionError

DEFAULT_EXPIRES_IN = 3600
DEFAULT_TIMEOUT = 30.0

REQUIRED_OPTIONS = ("auth_url", "username", "api_key")

# Field name -> environment variable read by SwiftConfig.from_env()
ENV_VARS = {
    "auth_url": "SWIFT_AUTH_URL",
    "username": "SWIFT_USERNAME",
    "api_key": "SWIFT_API_KEY",
    "storage_url": "SWIFT_STORAGE_URL",
    "temp_url_key": "SWIFT_TEMP_URL_KEY",
    "expires_in": "SWIFT_EXPIRES_IN",
    "timeout": "SWIFT_TIMEOUT",
}


@dataclass(frozen=True)
class SwiftConfig:
    """Configuration for an object storage account."""
    auth_url: Optional[str] = None
    username: Optional[str] = None
    api_key: Optional[str] = None
    # Pins the storage endpoint; the X-Storage-Url auth header is then ignored
    storage_url: Optional[str] = None
    temp_url_key: Optional[str] = None
    expires_in: int = DEFAULT_EXPIRES_IN
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        expires_in = DEFAULT_EXPIRES_IN if self.expires_in is None else self.expires_in
        timeout = DEFAULT_TIMEOUT if self.timeout is None else self.timeout
        try:
            object.__setattr__(self, "expires_in", int(expires_in))
        except (TypeError, ValueError):
            raise OptionError(f"expires_in must be an integer, got {expires_in!r}")
        try:
            object.__setattr__(self, "timeout", float(timeout))
        except (TypeError, ValueError):
            raise OptionError(f"timeout must be a number, got {timeout!r}")

    @classmethod
    def from_options(cls, **options) -> "SwiftConfig":
        """
        Build a config from keyword options.

        Raises:
            OptionError: If an option name is not recognised
        """
        known = {f.name for f in fields(cls)}
        for key in options:
            if key not in known:
                raise OptionError(f"{key} is not a valid option")
        return cls(**options)

    @classmethod
    def from_env(cls, **overrides) -> "SwiftConfig":
        """
        Build a config from SWIFT_* environment variables.

        Keyword overrides take precedence over the environment.
        """
        options = {
            name: os.environ[var]
            for name, var in ENV_VARS.items()
            if os.environ.get(var)
        }
        options.update(overrides)
        return cls.from_options(**options)

    def validate(self) -> "SwiftConfig":
        """
        Check that the required credentials are present.

        Raises:
            OptionError: Naming the first missing required option
        """
        for key in REQUIRED_OPTIONS:
            if not getattr(self, key):
                raise OptionError(f"{key} is missing")
        return self
