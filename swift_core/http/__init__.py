"""
HTTP Module
===========
Authenticated request layer for the storage API.
"""

from .response import SwiftResponse
from .session import AuthSession, SessionState

__all__ = [
    "AuthSession",
    "SessionState",
    "SwiftResponse",
]
