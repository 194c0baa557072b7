"""Cookie encryption (AES-256-GCM).

Encrypts cookie values so clients can neither read nor forge them. The
remember-me cookie relies on this: its plaintext ``series.secret`` value is
only ever visible to the server.

Format:
    cookie = urlsafe_b64(IV (12 bytes) || ciphertext || auth_tag (16 bytes))

The cookie name is bound as associated data, so a value cut from one
cookie does not decrypt under another name.

Security Properties:
    - Confidentiality: Only holder of key can decrypt
    - Integrity: Tampering is detected via GCM authentication tag
    - Uniqueness: Random IV per encryption prevents pattern analysis

Architecture:
    - Infrastructure adapter (catches cryptography exceptions)
    - ``create`` returns a Result type; ``decrypt`` returns None on any
      failure because tampered input is expected, not exceptional
"""

import base64
import binascii
import os
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success


@dataclass(frozen=True, slots=True, kw_only=True)
class CookieKeyError(DomainError):
    """Cookie encryption key is missing or malformed."""


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)


class CookieCipher:
    """AES-256-GCM cipher for cookie values.

    Usage:
        >>> match CookieCipher.create(settings.encryption_key):
        ...     case Success(value=cipher):
        ...         token = cipher.encrypt("remember_web", "series.secret")
        ...         cipher.decrypt("remember_web", token)
        ...     case Failure(error=err):
        ...         raise RuntimeError(err.message)
    """

    IV_SIZE = 12  # 96 bits - NIST recommended for GCM
    MIN_ENCRYPTED_SIZE = 12 + 16  # IV + auth tag

    def __init__(self, aesgcm: AESGCM) -> None:
        """Initialize with pre-validated AESGCM instance.

        Use CookieCipher.create() instead of direct construction.
        """
        self._aesgcm = aesgcm

    @classmethod
    def create(cls, key: str) -> Result["CookieCipher", CookieKeyError]:
        """Create cipher from a url-safe base64 encoded 32-byte key.

        Args:
            key: Encoded key (e.g., ``secrets.token_urlsafe(32)``).

        Returns:
            Success(CookieCipher) if key is valid.
            Failure(CookieKeyError) if key is invalid.
        """
        try:
            raw_key = _b64decode(key.strip())
        except (binascii.Error, ValueError):
            return Failure(
                error=CookieKeyError(
                    code=ErrorCode.ENCRYPTION_KEY_INVALID,
                    message="Encryption key is not valid url-safe base64",
                )
            )

        if len(raw_key) != 32:
            return Failure(
                error=CookieKeyError(
                    code=ErrorCode.ENCRYPTION_KEY_INVALID,
                    message=(
                        f"Encryption key must decode to exactly 32 bytes (256 bits), "
                        f"got {len(raw_key)} bytes"
                    ),
                    details={
                        "expected_length": "32",
                        "actual_length": str(len(raw_key)),
                    },
                )
            )

        return Success(value=cls(AESGCM(raw_key)))

    def encrypt(self, name: str, value: str) -> str:
        """Encrypt a cookie value.

        Args:
            name: Cookie name (bound as associated data).
            value: Plaintext value.

        Returns:
            URL-safe base64 string without padding.
        """
        iv = os.urandom(self.IV_SIZE)
        ciphertext = self._aesgcm.encrypt(
            iv, value.encode("utf-8"), name.encode("utf-8")
        )
        return _b64encode(iv + ciphertext)

    def decrypt(self, name: str, token: str) -> str | None:
        """Decrypt a cookie value.

        Args:
            name: Cookie name the value was encrypted for.
            token: Value produced by encrypt().

        Returns:
            Plaintext value, or None if the token is malformed, tampered
            with, or encrypted for a different cookie name.
        """
        try:
            encrypted = _b64decode(token)
        except (binascii.Error, ValueError):
            return None

        if len(encrypted) < self.MIN_ENCRYPTED_SIZE:
            return None

        iv, ciphertext = encrypted[: self.IV_SIZE], encrypted[self.IV_SIZE :]
        try:
            plaintext = self._aesgcm.decrypt(iv, ciphertext, name.encode("utf-8"))
            return plaintext.decode("utf-8")
        except (InvalidTag, UnicodeDecodeError):
            return None
