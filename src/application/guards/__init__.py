"""Authentication guards."""

from src.application.guards.session_guard import AuthFailureReason, SessionGuard

__all__ = ["AuthFailureReason", "SessionGuard"]
