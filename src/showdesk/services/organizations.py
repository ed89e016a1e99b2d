"""Organization and show lookups."""

from dataclasses import dataclass
from typing import Protocol

from showdesk.domain.models import Organization, Show


class NotFoundError(LookupError):
    """Raised when a tenant-scoped lookup returns no row."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OrganizationRepository(Protocol):
    """Persistence interface for organizations and their shows."""

    def get_by_slug(self, slug: str) -> Organization | None:
        """Return the organization for a slug, if present."""

    def get_show(self, show_id: str, org_id: str) -> Show | None:
        """Return a show owned by the organization, if present."""


@dataclass
class OrganizationService:
    """Application service for tenant-scoped lookups."""

    repository: OrganizationRepository

    def get_by_slug(self, slug: str) -> Organization | None:
        """Return the organization for a slug."""
        return self.repository.get_by_slug(slug)

    def get_show(self, show_id: str, org_id: str) -> Show | None:
        """Return a show scoped to its organization."""
        return self.repository.get_show(show_id, org_id)

    def require_organization(self, slug: str) -> Organization:
        """Return the organization or raise when the slug is unknown."""
        organization = self.repository.get_by_slug(slug)
        if organization is None:
            raise NotFoundError("Organization not found")
        return organization

    def require_show(self, show_id: str, org_id: str) -> Show:
        """Return the show or raise when it is not in the organization."""
        show = self.repository.get_show(show_id, org_id)
        if show is None:
            raise NotFoundError("Show not found")
        return show
