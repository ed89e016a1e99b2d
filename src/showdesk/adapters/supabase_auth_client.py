"""Supabase auth client adapter."""

from dataclasses import dataclass

from supabase import Client

from showdesk.services.auth import AuthClient


@dataclass
class SupabaseAuthClient(AuthClient):
    """Sign-up through Supabase auth."""

    client: Client

    def sign_up(self, email: str, password: str, redirect_to: str | None) -> None:
        """Register a user; Supabase raises ``AuthError`` on rejection."""
        credentials: dict[str, object] = {"email": email, "password": password}
        if redirect_to is not None:
            credentials["options"] = {"email_redirect_to": redirect_to}
        self.client.auth.sign_up(credentials)
