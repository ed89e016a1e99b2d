"""Domain models for organizations and shows."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Organization:
    """Represents a tenant organization."""

    id: str
    name: str
    slug: str


@dataclass(frozen=True)
class Venue:
    """Venue a show is booked at."""

    name: str
    city: str | None = None


@dataclass(frozen=True)
class Show:
    """Represents a show owned by an organization."""

    id: str
    org_id: str
    title: str | None
    date: date
    venue: Venue | None = None
    artists: list[str] = field(default_factory=list)
