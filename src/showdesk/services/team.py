"""Show team composition and assignment commands."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from showdesk.domain.models import Organization, Show
from showdesk.domain.people import MemberType, Person, TeamComposition
from showdesk.services.organizations import OrganizationService

logger = logging.getLogger(__name__)

_PROMOTER_TYPES = {MemberType.AGENT, MemberType.MANAGER}
_NOT_IN_ORGANIZATION = "This person is not part of the organization."


class ShowTeamRepository(Protocol):
    """Persistence interface for show team assignments."""

    def get_show_team(self, show_id: str, org_id: str) -> list[Person]:
        """Return people of the organization currently assigned to a show."""

    def list_people(self, org_id: str) -> list[Person]:
        """Return the full roster of an organization."""

    def assign(self, show_id: str, person_id: str) -> None:
        """Create the assignment if it does not exist."""

    def unassign(self, show_id: str, person_id: str) -> None:
        """Remove the assignment if it exists."""


@dataclass(frozen=True)
class CommandResult:
    """Outcome of an assignment command, shown inline to the user."""

    success: bool
    message: str


@dataclass(frozen=True)
class TeamPage:
    """Everything the team page needs to render."""

    organization: Organization
    show: Show
    team: TeamComposition


@dataclass
class ShowTeamService:
    """Application service for the show team page."""

    organizations: OrganizationService
    repository: ShowTeamRepository
    environment: str = "local"

    def get_team_page(self, org_slug: str, show_id: str) -> TeamPage:
        """Fetch the organization, show and people, then compose the team.

        Raises ``NotFoundError`` when the organization or show is missing.
        """
        organization = self.organizations.require_organization(org_slug)
        show = self.organizations.require_show(show_id, organization.id)
        assigned = self.repository.get_show_team(show_id, organization.id)
        roster = self.repository.list_people(organization.id)
        return TeamPage(
            organization=organization,
            show=show,
            team=compose_team(assigned, roster),
        )

    def assign_person(
        self, org_slug: str, show_id: str, person_id: str
    ) -> CommandResult:
        """Assign a person from the show's organization to the show.

        Raises ``NotFoundError`` when the organization or show is missing.
        """
        organization = self.organizations.require_organization(org_slug)
        self.organizations.require_show(show_id, organization.id)
        try:
            if not self._in_roster(organization.id, person_id):
                return CommandResult(success=False, message=_NOT_IN_ORGANIZATION)
            self.repository.assign(show_id, person_id)
        except Exception as exc:
            logger.exception(
                "Failed to assign person",
                extra={"show_id": show_id, "person_id": person_id},
            )
            return CommandResult(
                success=False,
                message=self._failure_message(exc, "Failed to assign team member."),
            )
        logger.info("Assigned person %s to show %s", person_id, show_id)
        return CommandResult(success=True, message="Team member assigned.")

    def unassign_person(
        self, org_slug: str, show_id: str, person_id: str
    ) -> CommandResult:
        """Remove a person of the show's organization from the show.

        Raises ``NotFoundError`` when the organization or show is missing.
        """
        organization = self.organizations.require_organization(org_slug)
        self.organizations.require_show(show_id, organization.id)
        try:
            if not self._in_roster(organization.id, person_id):
                return CommandResult(success=False, message=_NOT_IN_ORGANIZATION)
            self.repository.unassign(show_id, person_id)
        except Exception as exc:
            logger.exception(
                "Failed to unassign person",
                extra={"show_id": show_id, "person_id": person_id},
            )
            return CommandResult(
                success=False,
                message=self._failure_message(exc, "Failed to remove team member."),
            )
        logger.info("Unassigned person %s from show %s", person_id, show_id)
        return CommandResult(success=True, message="Team member removed.")

    def _in_roster(self, org_id: str, person_id: str) -> bool:
        return any(
            person.id == person_id for person in self.repository.list_people(org_id)
        )

    def _failure_message(self, exc: Exception, fallback: str) -> str:
        """Return a user-facing failure message with local debug info."""
        if self.environment == "local":
            detail = f"{type(exc).__name__}: {exc}".strip()
            if detail:
                return f"{fallback} (debug: {detail})"
        return fallback


def compute_available_people(
    assigned_team: Sequence[Person], all_people: Sequence[Person]
) -> list[Person]:
    """Return roster people not assigned to the show, in roster order."""
    assigned_ids = {person.id for person in assigned_team}
    return [person for person in all_people if person.id not in assigned_ids]


def group_team_by_role(
    assigned_team: Sequence[Person],
) -> tuple[list[Person], list[Person], list[Person]]:
    """Split the assigned team into artist, crew and promoter groups.

    Each group is an independent predicate over ``member_type``; people whose
    type is unset or unknown land in none of them.
    """
    artist_team = [p for p in assigned_team if p.member_type == MemberType.ARTIST]
    crew_team = [p for p in assigned_team if p.member_type == MemberType.CREW]
    promoter_team = [p for p in assigned_team if p.member_type in _PROMOTER_TYPES]
    return artist_team, crew_team, promoter_team


def compose_team(
    assigned_team: Sequence[Person], all_people: Sequence[Person]
) -> TeamComposition:
    """Build the team view for a show from a snapshot of fetched people."""
    artist_team, crew_team, promoter_team = group_team_by_role(assigned_team)
    return TeamComposition(
        assigned=list(assigned_team),
        available=compute_available_people(assigned_team, all_people),
        artist_team=artist_team,
        crew_team=crew_team,
        promoter_team=promoter_team,
    )


def role_label(member_type: str | None) -> str:
    """Return the display role for a member type."""
    if member_type == MemberType.ARTIST:
        return "music"
    if member_type in _PROMOTER_TYPES:
        return "promoter"
    if member_type == MemberType.CREW:
        return "crew"
    return "general"
