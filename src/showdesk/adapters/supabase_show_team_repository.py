"""Supabase-backed show team repository."""

from dataclasses import dataclass

from supabase import Client

from showdesk.domain.people import Person
from showdesk.services.team import ShowTeamRepository

_PERSON_COLUMNS = "id, name, email, phone, member_type, duty"


@dataclass
class SupabaseShowTeamRepository(ShowTeamRepository):
    """Supabase implementation for show team assignments."""

    client: Client

    def get_show_team(self, show_id: str, org_id: str) -> list[Person]:
        """Return people of the organization assigned to a show."""
        response = (
            self.client.table("show_assignments")
            .select(f"people!inner({_PERSON_COLUMNS})")
            .eq("show_id", show_id)
            .eq("people.org_id", org_id)
            .execute()
        )
        return [
            _parse_person(row["people"])
            for row in response.data or []
            if isinstance(row.get("people"), dict)
        ]

    def list_people(self, org_id: str) -> list[Person]:
        """Return the organization's roster ordered by name."""
        response = (
            self.client.table("people")
            .select(_PERSON_COLUMNS)
            .eq("org_id", org_id)
            .order("name")
            .execute()
        )
        return [_parse_person(row) for row in response.data or []]

    def assign(self, show_id: str, person_id: str) -> None:
        """Insert the assignment, ignoring an existing one."""
        self.client.table("show_assignments").upsert(
            {"show_id": show_id, "person_id": person_id},
            on_conflict="show_id,person_id",
            ignore_duplicates=True,
        ).execute()

    def unassign(self, show_id: str, person_id: str) -> None:
        """Delete the assignment; deleting a missing row is a no-op."""
        self.client.table("show_assignments").delete().eq("show_id", show_id).eq(
            "person_id", person_id
        ).execute()


def _parse_person(row: dict[str, object]) -> Person:
    return Person(
        id=str(row["id"]),
        name=str(row["name"]),
        email=row.get("email") or None,
        phone=row.get("phone") or None,
        member_type=row.get("member_type") or None,
        duty=row.get("duty") or None,
    )
