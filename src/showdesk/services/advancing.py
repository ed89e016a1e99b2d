"""Advancing session listing for organizations and shows."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from showdesk.domain.advancing import AdvancingSession
from showdesk.domain.models import Organization, Show
from showdesk.services.organizations import OrganizationService


class AdvancingRepository(Protocol):
    """Persistence interface for advancing sessions."""

    def list_sessions(self, org_slug: str) -> list[AdvancingSession]:
        """Return all advancing sessions for an organization, newest first."""


@dataclass(frozen=True)
class AdvancingPage:
    """Sessions shown on the advancing page, optionally scoped to a show."""

    organization: Organization
    show: Show | None
    show_id: str | None
    sessions: list[AdvancingSession]


@dataclass
class AdvancingService:
    """Application service for the advancing page."""

    organizations: OrganizationService
    repository: AdvancingRepository

    def get_advancing_page(
        self, org_slug: str, show_id: str | None = None
    ) -> AdvancingPage:
        """Return sessions for the organization, narrowed to a show if given.

        An unknown ``show_id`` leaves ``show`` unset and yields no sessions.
        """
        organization = self.organizations.require_organization(org_slug)
        show = None
        if show_id:
            show = self.organizations.get_show(show_id, organization.id)
        sessions = self.repository.list_sessions(org_slug)
        return AdvancingPage(
            organization=organization,
            show=show,
            show_id=show_id or None,
            sessions=filter_sessions_by_show(sessions, show_id),
        )


def filter_sessions_by_show(
    sessions: Sequence[AdvancingSession], show_id: str | None
) -> list[AdvancingSession]:
    """Return sessions belonging to ``show_id``, or all of them when unset."""
    if not show_id:
        return list(sessions)
    return [session for session in sessions if session.show_id == show_id]
