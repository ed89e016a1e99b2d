"""Display helpers and JSON serializers for page views."""

from datetime import date, datetime

from showdesk.domain.advancing import AdvancingSession
from showdesk.domain.models import Show, Venue
from showdesk.domain.people import Person
from showdesk.services.advancing import AdvancingPage
from showdesk.services.team import TeamPage, role_label

UNTITLED_SHOW = "Untitled Show"


def display_title(show: Show) -> str:
    """Return the show title, falling back to a placeholder."""
    return show.title or UNTITLED_SHOW


def format_short_date(value: date) -> str:
    """Format a date like ``May 1, 2024``."""
    return f"{value:%b} {value.day}, {value.year}"


def format_long_date(value: date) -> str:
    """Format a date like ``Wednesday, May 1, 2024``."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_numeric_date(value: datetime) -> str:
    """Format a timestamp's date like ``5/1/2024``."""
    return f"{value.month}/{value.day}/{value.year}"


def venue_label(venue: Venue | None) -> str | None:
    """Return ``name, city`` for a venue."""
    if venue is None:
        return None
    if venue.city:
        return f"{venue.name}, {venue.city}"
    return venue.name


def expiry_label(session: AdvancingSession) -> str:
    """Return the advisory expiry badge; elapsed expiries are not checked."""
    return "Active" if session.expires_at else "No Expiry"


def advancing_heading(page: AdvancingPage) -> str:
    if page.show is None:
        return "Advancing"
    return f"Advancing - {display_title(page.show)}"


def advancing_empty_state(page: AdvancingPage) -> tuple[str, str]:
    """Return the empty-state heading and prompt."""
    if page.show is not None:
        return (
            "No advancing sessions yet for this show",
            "Create an advancing session to collaborate with the venue on "
            "technical details, hospitality, and show requirements.",
        )
    return (
        "No advancing sessions yet",
        "Create your first advancing session to start collaborating with "
        "promoters and venues.",
    )


def new_session_path(org_slug: str, show_id: str | None) -> str:
    path = f"/{org_slug}/advancing/new"
    if show_id:
        return f"{path}?showId={show_id}"
    return path


def serialize_team_page(page: TeamPage) -> dict[str, object]:
    """Serialize the team page for JSON responses."""
    team = page.team
    return {
        "organization": {
            "id": page.organization.id,
            "name": page.organization.name,
            "slug": page.organization.slug,
        },
        "show": {
            "id": page.show.id,
            "title": display_title(page.show),
            "date": page.show.date.isoformat(),
            "date_label": format_short_date(page.show.date),
        },
        "counts": {
            "total": len(team.assigned),
            "artists": len(team.artist_team),
            "crew": len(team.crew_team),
            "promoter": len(team.promoter_team),
            "other": len(team.others),
        },
        "assigned": [_serialize_person(person) for person in team.assigned],
        "available": [_serialize_person(person) for person in team.available],
    }


def serialize_advancing_page(page: AdvancingPage) -> dict[str, object]:
    """Serialize the advancing page for JSON responses."""
    show = None
    if page.show is not None:
        show = {
            "id": page.show.id,
            "title": display_title(page.show),
            "date": page.show.date.isoformat(),
            "date_label": format_long_date(page.show.date),
            "venue": venue_label(page.show.venue),
            "artists": page.show.artists,
        }
    return {
        "organization": {
            "id": page.organization.id,
            "name": page.organization.name,
            "slug": page.organization.slug,
        },
        "heading": advancing_heading(page),
        "show": show,
        "new_session_path": new_session_path(page.organization.slug, page.show_id),
        "sessions": [_serialize_session(session) for session in page.sessions],
    }


def _serialize_person(person: Person) -> dict[str, object]:
    return {
        "id": person.id,
        "name": person.name,
        "email": person.email,
        "phone": person.phone,
        "member_type": person.member_type,
        "duty": person.duty,
        "role": role_label(person.member_type),
    }


def _serialize_session(session: AdvancingSession) -> dict[str, object]:
    return {
        "id": session.id,
        "title": session.title,
        "show_id": session.show_id,
        "created_at": session.created_at.isoformat(),
        "expires_at": session.expires_at.isoformat() if session.expires_at else None,
        "status": expiry_label(session),
    }
