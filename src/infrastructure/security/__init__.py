"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Password hashing (bcrypt)
- Cookie encryption (AES-256-GCM)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.cookie_cipher import CookieCipher, CookieKeyError

__all__ = [
    "BcryptPasswordService",
    "CookieCipher",
    "CookieKeyError",
]
