"""Unit tests for the Starlette cookie adapters.

Tests cover:
- RequestCookies decrypting named cookies (missing, tampered, wrong name)
- ResponseCookies queueing, last-write-wins, and applying attributes
"""

import pytest
from starlette.requests import Request
from starlette.responses import Response

from src.core.result import Success
from src.infrastructure.security.cookie_cipher import CookieCipher
from src.presentation.api.cookies import RequestCookies, ResponseCookies


@pytest.fixture
def cipher(encryption_key):
    result = CookieCipher.create(encryption_key)
    assert isinstance(result, Success)
    return result.value


def _request(cookie_header: str | None = None) -> Request:
    headers = []
    if cookie_header is not None:
        headers.append((b"cookie", cookie_header.encode("latin-1")))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def _set_cookie_headers(response: Response) -> list[str]:
    return [
        value.decode("latin-1")
        for key, value in response.raw_headers
        if key == b"set-cookie"
    ]


@pytest.mark.unit
class TestRequestCookies:
    """Test reading encrypted request cookies."""

    def test_decrypts_cookie(self, cipher):
        """Test a value encrypted for the cookie name is returned in clear."""
        token = cipher.encrypt("remember_web", "series.secret")
        cookies = RequestCookies(_request(f"remember_web={token}"), cipher)

        assert cookies.encrypted_cookie("remember_web") == "series.secret"

    def test_missing_cookie(self, cipher):
        """Test an absent cookie reads as None."""
        cookies = RequestCookies(_request(), cipher)

        assert cookies.encrypted_cookie("remember_web") is None

    def test_tampered_cookie(self, cipher):
        """Test an undecryptable cookie reads as None."""
        cookies = RequestCookies(_request("remember_web=not-encrypted"), cipher)

        assert cookies.encrypted_cookie("remember_web") is None

    def test_value_moved_to_other_name(self, cipher):
        """Test a value encrypted for one name is rejected under another."""
        token = cipher.encrypt("remember_web", "series.secret")
        cookies = RequestCookies(_request(f"remember_api={token}"), cipher)

        assert cookies.encrypted_cookie("remember_api") is None


@pytest.mark.unit
class TestResponseCookies:
    """Test queueing response cookies."""

    def test_encrypted_cookie_applied(self, cipher):
        """Test queued cookies are encrypted and written with attributes."""
        # Arrange
        cookies = ResponseCookies(cipher, secure=True)
        response = Response()

        # Act
        cookies.encrypted_cookie("remember_web", "series.secret", max_age=3600)
        cookies.apply(response)

        # Assert
        [header] = _set_cookie_headers(response)
        assert header.startswith("remember_web=")
        assert "series.secret" not in header
        assert "Max-Age=3600" in header
        assert "HttpOnly" in header
        assert "Path=/" in header
        assert "SameSite=lax" in header
        assert "Secure" in header

        value = header.split(";", 1)[0].split("=", 1)[1]
        assert cipher.decrypt("remember_web", value) == "series.secret"

    def test_insecure_cookies(self, cipher):
        """Test the Secure attribute follows configuration."""
        cookies = ResponseCookies(cipher, secure=False)
        response = Response()

        cookies.encrypted_cookie("remember_web", "v", max_age=10)
        cookies.apply(response)

        assert "Secure" not in _set_cookie_headers(response)[0]

    def test_clear_cookie_expires_it(self, cipher):
        """Test cleared cookies are deleted on the response."""
        cookies = ResponseCookies(cipher)
        response = Response()

        cookies.clear_cookie("remember_web")
        cookies.apply(response)

        [header] = _set_cookie_headers(response)
        assert header.startswith('remember_web=""') or header.startswith("remember_web=;")
        assert "Max-Age=0" in header

    def test_last_write_wins(self, cipher):
        """Test set then clear only clears the cookie."""
        cookies = ResponseCookies(cipher)
        response = Response()

        cookies.encrypted_cookie("remember_web", "v", max_age=10)
        cookies.clear_cookie("remember_web")
        cookies.apply(response)

        assert cookies.pending() == ["remember_web"]
        assert len(_set_cookie_headers(response)) == 1
        assert "Max-Age=0" in _set_cookie_headers(response)[0]

    def test_nothing_queued(self, cipher):
        """Test an empty queue writes no headers."""
        cookies = ResponseCookies(cipher)
        response = Response()

        cookies.apply(response)

        assert cookies.pending() == []
        assert _set_cookie_headers(response) == []
