"""RememberMeToken domain entity.

Persistent login token used by the session guard when a request carries no
authenticated session. A token has two parts:

    - series: Random, non-secret lookup key (acts like a row pointer).
    - secret: Random value shown to the client once, inside the cookie.

The client receives ``"<series>.<secret>"``; storage keeps only the SHA-256
digest of the secret. Refreshing a token replaces the secret and expiry but
keeps the series, so the persisted row identity never changes.

Security:
    - series and secret are generated independently with ``secrets``
      (144 and 256 bits of entropy respectively)
    - Secret digests are compared with ``hmac.compare_digest``
    - ``decode`` never raises for attacker-controlled input

Usage:
    token = RememberMeToken.create(user_id, "2 years", "web")
    await token_repo.create_token(token)
    cookie_value = token.value.get_secret_value()

    decoded = RememberMeToken.decode(cookie_value)
    if decoded:
        stored = await token_repo.get_token_by_series(decoded.series)
        if stored and stored.verify(decoded.secret):
            ...
"""

import hashlib
import hmac
import re
import secrets
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from pydantic import SecretStr

from src.core.duration import DurationLike, parse_duration

REMEMBER_ME_TOKEN_TYPE = "remember_me_token"

SERIES_BYTES = 18
SECRET_BYTES = 32

_SERIES_PATTERN = re.compile(r"^[A-Za-z0-9_-]{20,64}$")
_SECRET_PATTERN = re.compile(r"^[A-Za-z0-9_-]{20,128}$")


def _hash_secret(secret: str) -> str:
    """Return hex SHA-256 digest of a token secret."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


@dataclass(frozen=True, slots=True)
class DecodedRememberMeToken:
    """Identity carried by a remember-me cookie.

    Attributes:
        series: Lookup key of the persisted token.
        secret: Plaintext secret to verify against the stored hash.
    """

    series: str
    secret: str = field(repr=False)


@dataclass(slots=True, kw_only=True)
class RememberMeToken:
    """Remember-me token with split series/secret scheme.

    Attributes:
        series: Unique, non-secret identifier (primary key when persisted).
        user_id: Identifier of the owning principal.
        guard: Name of the guard that issued the token.
        hash: SHA-256 hex digest of the secret.
        created_at: When the token row was created (UTC).
        updated_at: When the secret was last generated (UTC).
        expires_at: Absolute expiry instant (UTC).
        type: Persisted token kind.
        value: Transport string ``"<series>.<secret>"``. Only set on tokens
            created or refreshed during the current request; tokens loaded
            from storage never carry it.
    """

    series: str
    user_id: str | int
    guard: str
    hash: str
    created_at: datetime
    updated_at: datetime
    expires_at: datetime
    type: str = REMEMBER_ME_TOKEN_TYPE
    value: SecretStr | None = None

    @classmethod
    def create(
        cls,
        user_id: str | int,
        expires_in: DurationLike,
        guard: str,
    ) -> "RememberMeToken":
        """Mint a new token for a user.

        Args:
            user_id: Identifier of the owning principal.
            expires_in: Token lifetime (e.g., "2 years", 3600, timedelta).
            guard: Name of the issuing guard.

        Returns:
            New token with ``value`` populated.

        Raises:
            ValueError: If ``expires_in`` is not a valid positive duration.
        """
        ttl = parse_duration(expires_in)
        now = datetime.now(UTC)
        series = secrets.token_urlsafe(SERIES_BYTES)
        secret = secrets.token_urlsafe(SECRET_BYTES)

        return cls(
            series=series,
            user_id=user_id,
            guard=guard,
            hash=_hash_secret(secret),
            created_at=now,
            updated_at=now,
            expires_at=now + ttl,
            value=SecretStr(cls.encode(series, secret)),
        )

    @staticmethod
    def encode(series: str, secret: str) -> str:
        """Build the cookie transport string.

        Args:
            series: Token series.
            secret: Plaintext secret.

        Returns:
            ``"<series>.<secret>"``
        """
        return f"{series}.{secret}"

    @staticmethod
    def decode(value: object) -> DecodedRememberMeToken | None:
        """Parse a cookie transport string.

        Malformed input is an expected outcome, not an error: anything that is
        not exactly two URL-safe base64 parts yields None.

        Args:
            value: Raw (already decrypted) cookie value.

        Returns:
            DecodedRememberMeToken, or None when the value is malformed.
        """
        if not isinstance(value, str):
            return None

        parts = value.split(".")
        if len(parts) != 2:
            return None

        series, secret = parts
        if not _SERIES_PATTERN.fullmatch(series) or not _SECRET_PATTERN.fullmatch(secret):
            return None

        return DecodedRememberMeToken(series=series, secret=secret)

    def verify(self, secret: str) -> bool:
        """Check a presented secret against the stored hash.

        Args:
            secret: Plaintext secret from the cookie.

        Returns:
            True if the digest matches, False otherwise.
        """
        if not isinstance(secret, str):
            return False
        return hmac.compare_digest(_hash_secret(secret), self.hash)

    def refresh(self, expires_in: DurationLike) -> None:
        """Rotate the secret and push the expiry forward.

        Series is preserved. ``value`` holds the new transport string.

        Args:
            expires_in: New lifetime measured from now.

        Raises:
            ValueError: If ``expires_in`` is not a valid positive duration.
        """
        ttl = parse_duration(expires_in)
        now = datetime.now(UTC)
        secret = secrets.token_urlsafe(SECRET_BYTES)

        self.hash = _hash_secret(secret)
        self.updated_at = now
        self.expires_at = now + ttl
        self.value = SecretStr(self.encode(self.series, secret))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the token has reached its expiry instant.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if ``now >= expires_at``.
        """
        return (now or datetime.now(UTC)) >= self.expires_at

    def updated_within(self, window: timedelta, now: datetime | None = None) -> bool:
        """Check whether the secret was generated less than ``window`` ago.

        Args:
            window: Grace window after ``updated_at``.
            now: Reference time (defaults to current UTC time).

        Returns:
            True if ``now <= updated_at + window``.
        """
        return (now or datetime.now(UTC)) <= self.updated_at + window
