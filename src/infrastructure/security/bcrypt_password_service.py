"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Injected via dependency container (cost factor from BCRYPT_ROUNDS)

Security:
    - Adaptive algorithm (cost factor can increase over time)
    - Constant-time comparison via bcrypt.checkpw
    - ``dummy_verify`` burns the same time as a real check so unknown
      accounts are not revealed by response timing

Performance:
    - Cost factor 12 = 2^12 iterations (~250ms per hash)
    - Tests use the minimum cost factor (4) to stay fast
"""

import bcrypt

MIN_COST_FACTOR = 4
MAX_COST_FACTOR = 20


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12). Each +1 doubles
                computation time.

        Raises:
            ValueError: If cost factor is outside 4..20.
        """
        if cost_factor < MIN_COST_FACTOR:
            msg = f"Cost factor must be at least {MIN_COST_FACTOR}"
            raise ValueError(msg)
        if cost_factor > MAX_COST_FACTOR:
            msg = f"Cost factor above {MAX_COST_FACTOR} is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor
        self._dummy_hash: bytes | None = None

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$..., 60 characters).
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from database.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes).
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False

    def dummy_verify(self, password: str) -> None:
        """Run a bcrypt check against a throwaway hash.

        Called when the looked-up account does not exist.
        """
        if self._dummy_hash is None:
            self._dummy_hash = bcrypt.hashpw(
                b"dummy-password", bcrypt.gensalt(rounds=self._cost_factor)
            )
        bcrypt.checkpw(password.encode("utf-8"), self._dummy_hash)
