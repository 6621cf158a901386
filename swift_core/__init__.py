"""
Swift Core Library
==================
Client for object storage accounts with token authentication.
"""

__version__ = "0.1.0"

# Client
from swift_core.client import SwiftClient

# Configuration
from swift_core.config import SwiftConfig

# Exceptions
from swift_core.exceptions import (
    SwiftError,
    OptionError,
    EmptyNameError,
    AuthenticationError,
    TempUrlKeyMissing,
    ResponseError,
)

# HTTP
from swift_core.http import AuthSession, SessionState, SwiftResponse

# Listing Models
from swift_core.models import ContainerInfo, ObjectInfo

# MIME
from swift_core.mime import content_type_for

# Temp URLs
from swift_core.temp_url import (
    compute_signature,
    generate_temp_url,
    verify_signature,
)

__all__ = [
    # Client
    "SwiftClient",
    # Configuration
    "SwiftConfig",
    # Exceptions
    "SwiftError",
    "OptionError",
    "EmptyNameError",
    "AuthenticationError",
    "TempUrlKeyMissing",
    "ResponseError",
    # HTTP
    "AuthSession",
    "SessionState",
    "SwiftResponse",
    # Listing Models
    "ContainerInfo",
    "ObjectInfo",
    # MIME
    "content_type_for",
    # Temp URLs
    "compute_signature",
    "generate_temp_url",
    "verify_signature",
]
