"""
Temp URL Module
===============
Time-limited signed URLs for objects.
"""

from .signature import (
    compute_signature,
    compute_expires,
    generate_temp_url,
    verify_signature,
    is_expired,
    DEFAULT_EXPIRES_IN,
    SIGNATURE_ALGORITHM,
    SIGNED_METHOD,
)

__all__ = [
    "compute_signature",
    "compute_expires",
    "generate_temp_url",
    "verify_signature",
    "is_expired",
    "DEFAULT_EXPIRES_IN",
    "SIGNATURE_ALGORITHM",
    "SIGNED_METHOD",
]
