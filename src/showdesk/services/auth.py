"""Email/password sign-up against the hosted auth service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from supabase import AuthError

logger = logging.getLogger(__name__)

CONFIRMATION_MESSAGE = "Check your email for confirmation link!"


class AuthClient(Protocol):
    """Interface for the hosted auth API."""

    def sign_up(self, email: str, password: str, redirect_to: str | None) -> None:
        """Register a user; raises ``AuthError`` when the service rejects it."""


@dataclass(frozen=True)
class SignUpResult:
    """Outcome of a sign-up attempt."""

    success: bool
    message: str


@dataclass
class AuthService:
    """Service wrapping sign-up and mapping auth errors to messages."""

    client: AuthClient
    redirect_to: str | None = None

    def sign_up(self, email: str, password: str) -> SignUpResult:
        """Sign up a user and return the message to show them."""
        try:
            self.client.sign_up(email, password, self.redirect_to)
        except AuthError as exc:
            logger.info("Sign-up rejected: %s", exc.message)
            return SignUpResult(success=False, message=exc.message)
        return SignUpResult(success=True, message=CONFIRMATION_MESSAGE)
