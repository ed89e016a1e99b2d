"""Server-rendered HTML pages."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse

from showdesk.api.views import (
    advancing_empty_state,
    advancing_heading,
    display_title,
    expiry_label,
    format_long_date,
    format_numeric_date,
    format_short_date,
    new_session_path,
    venue_label,
)
from showdesk.services.organizations import NotFoundError
from showdesk.services.team import role_label

if TYPE_CHECKING:
    from showdesk.containers import AppContainer
    from showdesk.domain.people import Person
    from showdesk.services.advancing import AdvancingPage
    from showdesk.services.team import TeamPage

router = APIRouter(tags=["pages"])


@router.get("/auth/signup", response_class=HTMLResponse)
async def signup_page() -> HTMLResponse:
    """Sign-up form that posts to the sign-up command."""
    return HTMLResponse(_layout("Sign Up", _SIGNUP_FORM))


@router.get("/{org_slug}/shows/{show_id}/team", response_class=HTMLResponse)
async def team_page(org_slug: str, show_id: str, request: Request) -> HTMLResponse:
    """Render the team assignment page for a show."""
    container: AppContainer = request.app.state.container
    try:
        page = container.show_team_service.get_team_page(org_slug, show_id)
    except NotFoundError as exc:
        return _not_found(exc.message)
    return HTMLResponse(_layout("Team Assignment", render_team_page(page)))


@router.get("/{org_slug}/advancing", response_class=HTMLResponse)
async def advancing_page(
    org_slug: str, request: Request, show: str | None = None
) -> HTMLResponse:
    """Render the advancing sessions page, optionally for one show."""
    container: AppContainer = request.app.state.container
    try:
        page = container.advancing_service.get_advancing_page(org_slug, show)
    except NotFoundError as exc:
        return _not_found(exc.message)
    return HTMLResponse(_layout("Advancing", render_advancing_page(page)))


def render_team_page(page: TeamPage) -> str:
    """Render the team page body."""
    team = page.team
    lines = [
        f'<div id="team" data-org-slug="{escape(page.organization.slug)}" '
        f'data-show-id="{escape(page.show.id)}">',
        "<h1>Team Assignment</h1>",
        "<p>Assign people from your organization to this show: "
        f"{escape(display_title(page.show))}</p>",
        f"<p>Show Date: {format_short_date(page.show.date)}</p>",
        '<ul class="stats">',
        f"<li>{len(team.assigned)} Total Assigned</li>",
        f"<li>{len(team.artist_team)} Artists</li>",
        f"<li>{len(team.crew_team)} Crew</li>",
        f"<li>{len(team.promoter_team)} Promoter Team</li>",
        "</ul>",
        f"<h2>Assigned Team ({len(team.assigned)})</h2>",
    ]
    if not team.assigned:
        lines.append("<p>No team members assigned to this show yet</p>")
    for person in team.assigned:
        lines.append(
            '<div class="person">'
            f"{_person_summary(person, with_duty=True)}"
            '<button class="team-command" data-method="DELETE" '
            f'data-person-id="{escape(person.id)}">'
            f"Remove {escape(person.name)}</button>"
            "</div>"
        )
    lines.append(f"<h2>Available People ({len(team.available)})</h2>")
    if not team.available:
        lines.append("<p>All available people have been assigned to this show</p>")
    for person in team.available:
        lines.append(
            '<div class="person available">'
            f"{_person_summary(person, with_duty=False)}"
            '<button class="team-command" data-method="POST" '
            f'data-person-id="{escape(person.id)}">Available to Assign</button>'
            "</div>"
        )
    lines.append('<p id="message"></p>')
    lines.append("</div>")
    lines.append(_COMMAND_SCRIPT)
    return "\n".join(lines)


def render_advancing_page(page: AdvancingPage) -> str:
    """Render the advancing page body."""
    slug = escape(page.organization.slug)
    new_path = escape(new_session_path(page.organization.slug, page.show_id))
    lines = []
    if page.show is not None:
        lines.append(f'<a href="/{slug}/shows/{escape(page.show.id)}">Back to Show</a>')
    lines.append(f"<h1>{escape(advancing_heading(page))}</h1>")
    lines.append(f'<a href="{new_path}">New Session</a>')
    if page.show is not None:
        details = [format_long_date(page.show.date)]
        venue = venue_label(page.show.venue)
        if venue:
            details.append(venue)
        if page.show.artists:
            details.append(", ".join(page.show.artists))
        lines.append(f"<p>{escape(' | '.join(details))}</p>")
        lines.append(f'<a href="/{slug}/advancing">All Sessions</a>')
        lines.append(
            "<h2>Advancing Sessions for "
            f"{escape(display_title(page.show))}</h2>"
        )
    else:
        lines.append(
            "<p>Collaborate with promoters and venues on show logistics "
            "and advancing.</p>"
        )
    if not page.sessions:
        heading, prompt = advancing_empty_state(page)
        label = "Create First Session" if page.show is not None else "Create Session"
        lines.append(f"<h3>{heading}</h3>")
        lines.append(f"<p>{prompt}</p>")
        lines.append(f'<a href="{new_path}">{label}</a>')
        return "\n".join(lines)
    for session in page.sessions:
        lines.append('<div class="session">')
        lines.append(f"<h3>{escape(session.title)}</h3>")
        lines.append(f'<span class="badge">{expiry_label(session)}</span>')
        lines.append(f"<p>Created {format_numeric_date(session.created_at)}</p>")
        if session.expires_at:
            lines.append(f"<p>Expires {format_numeric_date(session.expires_at)}</p>")
        lines.append(
            f'<a href="/{slug}/advancing/{escape(session.id)}">Open Session</a>'
        )
        lines.append("</div>")
    return "\n".join(lines)


def _person_summary(person: Person, with_duty: bool) -> str:
    parts = [f"<h4>{escape(person.name)}</h4>"]
    if person.member_type:
        parts.append(
            f'<span class="badge role-{role_label(person.member_type)}">'
            f"{escape(person.member_type)}</span>"
        )
    if with_duty and person.duty:
        parts.append(f'<span class="badge">{escape(person.duty)}</span>')
    if with_duty:
        for contact in (person.email, person.phone):
            if contact:
                parts.append(f"<span>{escape(contact)}</span>")
    return "".join(parts)


def _not_found(message: str) -> HTMLResponse:
    return HTMLResponse(
        _layout(message, f"<div>{escape(message)}</div>"),
        status_code=status.HTTP_404_NOT_FOUND,
    )


def _layout(title: str, body: str) -> str:
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "  <head>\n"
        '    <meta charset="utf-8" />\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1" />\n'
        f"    <title>{escape(title)}</title>\n"
        f"    <style>{_STYLE}</style>\n"
        "  </head>\n"
        f"  <body>\n{body}\n  </body>\n"
        "</html>\n"
    )


_STYLE = """
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      .person, .session { border: 1px solid #ddd; padding: 1rem; margin: 0.5rem 0; }
      .available { border-style: dashed; }
      .badge { font-size: 0.75rem; margin-left: 0.5rem; }
      button { padding: 0.4rem 0.8rem; }
"""

_COMMAND_SCRIPT = """<script>
  const team = document.getElementById('team');
  team.querySelectorAll('button.team-command').forEach((button) => {
    button.addEventListener('click', async () => {
      const output = document.getElementById('message');
      const path = [
        'api', 'orgs', team.dataset.orgSlug, 'shows', team.dataset.showId,
        'team', button.dataset.personId,
      ].map(encodeURIComponent).join('/');
      const res = await fetch('/' + path, { method: button.dataset.method });
      const data = await res.json();
      output.textContent = data.message || data.detail;
      if (res.ok) {
        window.location.reload();
      }
    });
  });
</script>"""

_SIGNUP_FORM = """<form id="signup">
  <label for="email">Email</label><br />
  <input id="email" type="email" required placeholder="you@example.com" /><br />
  <label for="password">Password</label><br />
  <input id="password" type="password" required /><br />
  <button type="submit">Sign Up</button>
</form>
<div id="message"></div>
<script>
  document.getElementById('signup').addEventListener('submit', async (event) => {
    event.preventDefault();
    const output = document.getElementById('message');
    output.textContent = '';
    const res = await fetch('/auth/signup', {
      method: 'POST',
      headers: { 'Content-Type': 'application/json' },
      body: JSON.stringify({
        email: document.getElementById('email').value,
        password: document.getElementById('password').value,
      }),
    });
    const data = await res.json();
    output.textContent = data.message || 'Sign up failed';
  });
</script>"""
