"""Supabase-backed advancing session repository."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from showdesk.domain.advancing import AdvancingSession
from showdesk.services.advancing import AdvancingRepository


@dataclass
class SupabaseAdvancingRepository(AdvancingRepository):
    """Supabase implementation for advancing sessions."""

    client: Client

    def list_sessions(self, org_slug: str) -> list[AdvancingSession]:
        """Return all sessions of the organization with the given slug."""
        response = (
            self.client.table("advancing_sessions")
            .select(
                "id, title, created_at, expires_at, show_id, org_id, "
                "organizations!inner(slug)"
            )
            .eq("organizations.slug", org_slug)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_session(row) for row in response.data or []]


def _parse_session(row: dict[str, object]) -> AdvancingSession:
    expires = row.get("expires_at")
    return AdvancingSession(
        id=str(row["id"]),
        org_id=str(row["org_id"]),
        show_id=str(row["show_id"]),
        title=str(row["title"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        expires_at=(
            datetime.fromisoformat(expires)
            if isinstance(expires, str) and expires
            else None
        ),
    )
