"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

import pytest
from supabase import AuthError

from showdesk.config import Settings
from showdesk.containers import AppContainer
from showdesk.domain.advancing import AdvancingSession
from showdesk.domain.models import Organization, Show, Venue
from showdesk.domain.people import Person
from showdesk.services.advancing import AdvancingRepository, AdvancingService
from showdesk.services.auth import AuthClient, AuthService
from showdesk.services.organizations import (
    OrganizationRepository,
    OrganizationService,
)
from showdesk.services.team import ShowTeamRepository, ShowTeamService


@dataclass
class InMemoryOrganizationRepository(OrganizationRepository):
    """In-memory organization repository for tests."""

    organizations: dict[str, Organization] = field(default_factory=dict)
    shows: dict[str, Show] = field(default_factory=dict)

    def get_by_slug(self, slug: str) -> Organization | None:
        return self.organizations.get(slug)

    def get_show(self, show_id: str, org_id: str) -> Show | None:
        show = self.shows.get(show_id)
        if show and show.org_id == org_id:
            return show
        return None


@dataclass
class InMemoryShowTeamRepository(ShowTeamRepository):
    """In-memory show team repository for tests."""

    people: dict[str, list[Person]] = field(default_factory=dict)
    assignments: list[tuple[str, str]] = field(default_factory=list)
    fail_with: Exception | None = None

    def get_show_team(self, show_id: str, org_id: str) -> list[Person]:
        by_id = {person.id: person for person in self.people.get(org_id, [])}
        return [
            by_id[person_id]
            for assigned_show, person_id in self.assignments
            if assigned_show == show_id and person_id in by_id
        ]

    def list_people(self, org_id: str) -> list[Person]:
        return list(self.people.get(org_id, []))

    def assign(self, show_id: str, person_id: str) -> None:
        if self.fail_with:
            raise self.fail_with
        if (show_id, person_id) not in self.assignments:
            self.assignments.append((show_id, person_id))

    def unassign(self, show_id: str, person_id: str) -> None:
        if self.fail_with:
            raise self.fail_with
        if (show_id, person_id) in self.assignments:
            self.assignments.remove((show_id, person_id))


@dataclass
class InMemoryAdvancingRepository(AdvancingRepository):
    """In-memory advancing repository keyed by organization slug."""

    sessions: dict[str, list[AdvancingSession]] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def list_sessions(self, org_slug: str) -> list[AdvancingSession]:
        self.calls.append(org_slug)
        return list(self.sessions.get(org_slug, []))


@dataclass
class FakeAuthClient(AuthClient):
    """Fake auth client that records sign-ups."""

    signups: list[tuple[str, str, str | None]] = field(default_factory=list)
    error_message: str | None = None

    def sign_up(self, email: str, password: str, redirect_to: str | None) -> None:
        if self.error_message is not None:
            raise AuthError(self.error_message, None)
        self.signups.append((email, password, redirect_to))


def make_person(person_id: str, member_type: str | None = None) -> Person:
    return Person(
        id=person_id,
        name=f"Person {person_id}",
        email=f"{person_id.lower()}@example.com",
        member_type=member_type,
    )


def make_session(session_id: str, show_id: str) -> AdvancingSession:
    return AdvancingSession(
        id=session_id,
        org_id="org-1",
        show_id=show_id,
        title=f"Session {session_id}",
        created_at=datetime(2024, 4, 1, tzinfo=UTC),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service.key.signature",
        supabase_anon_key="anon.key.signature",
        environment="test",
    )


@pytest.fixture
def organization() -> Organization:
    return Organization(id="org-1", name="Night Owl Touring", slug="night-owl")


@pytest.fixture
def show(organization: Organization) -> Show:
    return Show(
        id="show-1",
        org_id=organization.id,
        title="Spring Tour Opener",
        date=date(2024, 5, 1),
        venue=Venue(name="The Fillmore", city="San Francisco"),
        artists=["The Lanterns"],
    )


@pytest.fixture
def organization_repository(
    organization: Organization, show: Show
) -> InMemoryOrganizationRepository:
    return InMemoryOrganizationRepository(
        organizations={organization.slug: organization},
        shows={show.id: show},
    )


@pytest.fixture
def team_repository(organization: Organization) -> InMemoryShowTeamRepository:
    return InMemoryShowTeamRepository(
        people={
            organization.id: [
                make_person("A", "Artist"),
                make_person("B", "Crew"),
                make_person("C", "Agent"),
                make_person("D"),
            ]
        }
    )


@pytest.fixture
def advancing_repository() -> InMemoryAdvancingRepository:
    return InMemoryAdvancingRepository()


@pytest.fixture
def auth_client() -> FakeAuthClient:
    return FakeAuthClient()


@pytest.fixture
def container(
    settings: Settings,
    organization_repository: InMemoryOrganizationRepository,
    team_repository: InMemoryShowTeamRepository,
    advancing_repository: InMemoryAdvancingRepository,
    auth_client: FakeAuthClient,
) -> AppContainer:
    organization_service = OrganizationService(organization_repository)
    return AppContainer(
        settings=settings,
        organization_service=organization_service,
        show_team_service=ShowTeamService(
            organizations=organization_service,
            repository=team_repository,
            environment=settings.environment,
        ),
        advancing_service=AdvancingService(
            organizations=organization_service,
            repository=advancing_repository,
        ),
        auth_service=AuthService(client=auth_client),
    )
