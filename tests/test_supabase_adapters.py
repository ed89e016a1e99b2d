"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import date

import pytest
from supabase import AuthError

from showdesk.adapters.supabase_advancing_repository import (
    SupabaseAdvancingRepository,
)
from showdesk.adapters.supabase_auth_client import SupabaseAuthClient
from showdesk.adapters.supabase_organization_repository import (
    SupabaseOrganizationRepository,
)
from showdesk.adapters.supabase_show_team_repository import (
    SupabaseShowTeamRepository,
)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": [], "delete": []}
    )
    last_payload: object | None = None
    last_options: dict[str, object] = field(default_factory=dict)
    last_columns: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    executed: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, columns: str) -> "FakeTable":
        self._action = "select"
        self.last_columns = columns
        return self

    def upsert(self, payload, **options) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_options = options
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.executed.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeAuth:
    credentials: list[dict[str, object]] = field(default_factory=list)
    error: AuthError | None = None

    def sign_up(self, credentials: dict[str, object]) -> None:
        if self.error:
            raise self.error
        self.credentials.append(credentials)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    auth: FakeAuth = field(default_factory=FakeAuth)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_organization_repository_by_slug() -> None:
    client = FakeSupabaseClient()
    table = client.table("organizations")
    table.queue("select", [{"id": "org-1", "name": "Night Owl", "slug": "night-owl"}])

    repository = SupabaseOrganizationRepository(client)
    found = repository.get_by_slug("night-owl")
    missing = repository.get_by_slug("other")

    assert found is not None
    assert found.id == "org-1"
    assert missing is None
    assert ("slug", "night-owl") in table.last_filters


def test_supabase_organization_repository_show_with_venue() -> None:
    client = FakeSupabaseClient()
    table = client.table("shows")
    table.queue(
        "select",
        [
            {
                "id": "show-1",
                "title": None,
                "date": "2024-05-01",
                "org_id": "org-1",
                "venues": {"name": "The Fillmore", "city": "San Francisco"},
                "artists": [{"name": "The Lanterns"}, {"name": "Echo Park"}],
            }
        ],
    )

    repository = SupabaseOrganizationRepository(client)
    show = repository.get_show("show-1", "org-1")

    assert show is not None
    assert show.title is None
    assert show.date == date(2024, 5, 1)
    assert show.venue is not None
    assert show.venue.city == "San Francisco"
    assert show.artists == ["The Lanterns", "Echo Park"]
    assert ("org_id", "org-1") in table.last_filters


def test_supabase_organization_repository_show_without_relations() -> None:
    client = FakeSupabaseClient()
    client.table("shows").queue(
        "select",
        [
            {
                "id": "show-2",
                "title": "Late Set",
                "date": "2024-06-02T20:00:00+00:00",
                "org_id": "org-1",
                "venues": None,
                "artists": [],
            }
        ],
    )

    show = SupabaseOrganizationRepository(client).get_show("show-2", "org-1")

    assert show is not None
    assert show.venue is None
    assert show.artists == []
    assert show.date == date(2024, 6, 2)


def test_supabase_show_team_repository_reads_people() -> None:
    client = FakeSupabaseClient()
    client.table("show_assignments").queue(
        "select",
        [
            {
                "people": {
                    "id": "p1",
                    "name": "Ada",
                    "email": "ada@example.com",
                    "phone": None,
                    "member_type": "Artist",
                    "duty": "Lead vocals",
                }
            },
            {"people": None},
        ],
    )
    client.table("people").queue(
        "select",
        [
            {"id": "p1", "name": "Ada", "member_type": "Artist"},
            {"id": "p2", "name": "Bo", "member_type": None, "email": ""},
        ],
    )

    repository = SupabaseShowTeamRepository(client)
    team = repository.get_show_team("show-1", "org-1")
    roster = repository.list_people("org-1")

    assert [person.id for person in team] == ["p1"]
    assert team[0].duty == "Lead vocals"
    assert [person.id for person in roster] == ["p1", "p2"]
    assert roster[1].member_type is None
    assert roster[1].email is None
    assignments = client.table("show_assignments")
    assert assignments.last_columns is not None
    assert assignments.last_columns.startswith("people!inner(")
    assert ("people.org_id", "org-1") in assignments.last_filters


def test_supabase_show_team_repository_commands() -> None:
    client = FakeSupabaseClient()
    table = client.table("show_assignments")

    repository = SupabaseShowTeamRepository(client)
    repository.assign("show-1", "p1")

    assert table.last_payload == {"show_id": "show-1", "person_id": "p1"}
    assert table.last_options == {
        "on_conflict": "show_id,person_id",
        "ignore_duplicates": True,
    }

    repository.unassign("show-1", "p1")

    assert table.executed == ["upsert", "delete"]
    assert table.last_filters[-2:] == [("show_id", "show-1"), ("person_id", "p1")]


def test_supabase_advancing_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("advancing_sessions")
    table.queue(
        "select",
        [
            {
                "id": "sess-1",
                "title": "Tech rider",
                "created_at": "2024-04-01T10:00:00+00:00",
                "expires_at": None,
                "show_id": "show-1",
                "org_id": "org-1",
                "organizations": {"slug": "night-owl"},
            },
            {
                "id": "sess-2",
                "title": "Hospitality",
                "created_at": "2024-04-02T10:00:00+00:00",
                "expires_at": "2024-05-02T10:00:00+00:00",
                "show_id": "show-2",
                "org_id": "org-1",
                "organizations": {"slug": "night-owl"},
            },
        ],
    )

    sessions = SupabaseAdvancingRepository(client).list_sessions("night-owl")

    assert [session.id for session in sessions] == ["sess-1", "sess-2"]
    assert sessions[0].expires_at is None
    assert sessions[1].expires_at is not None
    assert ("organizations.slug", "night-owl") in table.last_filters


def test_supabase_auth_client_passes_redirect() -> None:
    client = FakeSupabaseClient()

    SupabaseAuthClient(client).sign_up("you@example.com", "pw", "https://x/cb")
    SupabaseAuthClient(client).sign_up("me@example.com", "pw", None)

    assert client.auth.credentials == [
        {
            "email": "you@example.com",
            "password": "pw",
            "options": {"email_redirect_to": "https://x/cb"},
        },
        {"email": "me@example.com", "password": "pw"},
    ]


def test_supabase_auth_client_propagates_errors() -> None:
    client = FakeSupabaseClient()
    client.auth.error = AuthError("Password should be at least 6 characters", None)

    with pytest.raises(AuthError):
        SupabaseAuthClient(client).sign_up("you@example.com", "pw", None)
