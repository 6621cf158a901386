"""
Tests for temp URL signing
==========================
"""

import hashlib
import hmac


class TestSignature:
    """Tests for HMAC-SHA1 temp URL signatures."""

    def test_compute_signature_matches_hmac_sha1(self):
        from swift_core.temp_url import compute_signature

        expected = hmac.new(
            b"Temp url key", b"GET\n1700003600\n/container/object", hashlib.sha1
        ).hexdigest()

        signature = compute_signature("Temp url key", "GET", 1700003600, "/container/object")

        assert signature == expected
        assert len(signature) == 40
        assert signature == signature.lower()

    def test_method_is_uppercased(self):
        from swift_core.temp_url import compute_signature

        assert compute_signature("k", "get", 1, "/c/o") == compute_signature("k", "GET", 1, "/c/o")

    def test_verify_signature(self):
        from swift_core.temp_url import compute_signature, verify_signature

        signature = compute_signature("k", "GET", 100, "/c/o")

        assert verify_signature("k", "GET", 100, "/c/o", signature) is True
        assert verify_signature("k", "GET", 101, "/c/o", signature) is False
        assert verify_signature("other", "GET", 100, "/c/o", signature) is False


class TestGenerateTempUrl:
    """Tests for full temp URL generation."""

    def test_deterministic_for_fixed_time(self):
        from swift_core.temp_url import compute_signature, generate_temp_url

        url = generate_temp_url(
            "https://example.com/v1/AUTH_account",
            "container",
            "object",
            "Temp url key",
            expires_in=3600,
            now=1700000000,
        )

        signature = compute_signature("Temp url key", "GET", 1700003600, "/container/object")
        assert url == (
            "https://example.com/v1/AUTH_account/container/object"
            f"?temp_url_sig={signature}&temp_url_expires=1700003600"
        )

    def test_compute_expires(self):
        from swift_core.temp_url import compute_expires

        assert compute_expires(60, now=1000.7) == 1060

    def test_is_expired(self):
        from swift_core.temp_url import is_expired

        assert is_expired(1000, now=1001) is True
        assert is_expired(1000, now=1000) is False
