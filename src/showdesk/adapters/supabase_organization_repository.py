"""Supabase-backed organization and show repository."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from showdesk.domain.models import Organization, Show, Venue
from showdesk.services.organizations import OrganizationRepository


@dataclass
class SupabaseOrganizationRepository(OrganizationRepository):
    """Supabase implementation for organization lookups."""

    client: Client

    def get_by_slug(self, slug: str) -> Organization | None:
        """Return the organization for a slug, if present."""
        response = (
            self.client.table("organizations")
            .select("id, name, slug")
            .eq("slug", slug)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Organization(id=row["id"], name=row["name"], slug=row["slug"])

    def get_show(self, show_id: str, org_id: str) -> Show | None:
        """Return a show with its venue and artists, if owned by the org."""
        response = (
            self.client.table("shows")
            .select("id, title, date, org_id, venues(name, city), artists(name)")
            .eq("id", show_id)
            .eq("org_id", org_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_show(response.data[0])


def _parse_show(row: dict[str, object]) -> Show:
    venue_row = row.get("venues")
    venue = None
    if isinstance(venue_row, dict) and venue_row.get("name"):
        venue = Venue(name=str(venue_row["name"]), city=venue_row.get("city"))
    artist_rows = row.get("artists")
    artists = (
        [str(artist["name"]) for artist in artist_rows if artist.get("name")]
        if isinstance(artist_rows, list)
        else []
    )
    return Show(
        id=str(row["id"]),
        org_id=str(row["org_id"]),
        title=row.get("title"),
        date=date.fromisoformat(str(row["date"])[:10]),
        venue=venue,
        artists=artists,
    )
