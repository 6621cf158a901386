"""
Temp URL Signature Functions
============================
HMAC-SHA1 signing for time-limited object URLs.

The signed message is "<METHOD>\\n<expires>\\n<path>", where path is
"/<container>/<object>" and expires is a UNIX timestamp in seconds.
"""

import hmac
import hashlib
import time
from typing import Optional

# Configuration
DEFAULT_EXPIRES_IN = 3600
SIGNATURE_ALGORITHM = "sha1"
SIGNED_METHOD = "GET"


def compute_signature(
    key: str,
    method: str,
    expires: int,
    path: str,
) -> str:
    """
    Compute HMAC-SHA1 signature for a temporary URL.

    Args:
        key: The account or container temp URL key
        method: HTTP method the URL is valid for
        expires: Unix timestamp after which the URL is rejected
        path: Object path (e.g., /container/object)

    Returns:
        Lowercase hex-encoded HMAC-SHA1 signature (40 characters)
    """
    message = f"{method.upper()}\n{int(expires)}\n{path}"
    return hmac.new(
        key.encode(),
        message.encode(),
        hashlib.sha1,
    ).hexdigest()


def compute_expires(expires_in: int, now: Optional[float] = None) -> int:
    """Unix timestamp expires_in seconds from now."""
    if now is None:
        now = time.time()
    return int(now + int(expires_in))


def generate_temp_url(
    storage_url: str,
    container: str,
    object_name: str,
    key: str,
    expires_in: int = DEFAULT_EXPIRES_IN,
    now: Optional[float] = None,
    method: str = SIGNED_METHOD,
) -> str:
    """
    Build a signed, time-limited URL for an object.

    Args:
        storage_url: Storage endpoint of the account
        container: Container name
        object_name: Object name
        key: Temp URL key
        expires_in: Lifetime of the URL in seconds
        now: Current Unix time (defaults to time.time())
        method: HTTP method to sign

    Returns:
        "<storage_url>/<container>/<object>?temp_url_sig=...&temp_url_expires=..."
    """
    expires = compute_expires(expires_in, now)
    path = f"/{container}/{object_name}"
    signature = compute_signature(key, method, expires, path)
    return f"{storage_url}{path}?temp_url_sig={signature}&temp_url_expires={expires}"


def verify_signature(
    key: str,
    method: str,
    expires: int,
    path: str,
    provided_signature: str,
) -> bool:
    """
    Verify a temp URL signature using constant-time comparison.

    Args:
        key: Temp URL key
        method: HTTP method
        expires: Expiry timestamp from the URL
        path: Object path
        provided_signature: Signature to verify

    Returns:
        True if signature is valid
    """
    expected_signature = compute_signature(key, method, expires, path)
    return hmac.compare_digest(expected_signature, provided_signature.lower())


def is_expired(expires: int, now: Optional[float] = None) -> bool:
    """Check whether an expiry timestamp has passed."""
    if now is None:
        now = time.time()
    return int(now) > int(expires)
