"""Domain models for people and show teams."""

from dataclasses import dataclass
from enum import StrEnum


class MemberType(StrEnum):
    """Known member types for people in an organization."""

    ARTIST = "Artist"
    AGENT = "Agent"
    MANAGER = "Manager"
    CREW = "Crew"


@dataclass(frozen=True)
class Person:
    """Represents a person on an organization's roster."""

    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    member_type: str | None = None
    duty: str | None = None


@dataclass(frozen=True)
class TeamComposition:
    """Assigned and available people for a show, grouped by role."""

    assigned: list[Person]
    available: list[Person]
    artist_team: list[Person]
    crew_team: list[Person]
    promoter_team: list[Person]

    @property
    def others(self) -> list[Person]:
        """Assigned people that fall in no role group."""
        grouped = {
            person.id
            for person in (*self.artist_team, *self.crew_team, *self.promoter_team)
        }
        return [person for person in self.assigned if person.id not in grouped]
