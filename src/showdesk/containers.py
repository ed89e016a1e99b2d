"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

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
from showdesk.config import Settings, signup_redirect_url
from showdesk.services.advancing import AdvancingService
from showdesk.services.auth import AuthService
from showdesk.services.organizations import OrganizationService
from showdesk.services.team import ShowTeamService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    organization_service: OrganizationService
    show_team_service: ShowTeamService
    advancing_service: AdvancingService
    auth_service: AuthService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_anon_key
    )
    organization_service = OrganizationService(
        SupabaseOrganizationRepository(supabase_client)
    )
    show_team_service = ShowTeamService(
        organizations=organization_service,
        repository=SupabaseShowTeamRepository(supabase_client),
        environment=resolved_settings.environment,
    )
    advancing_service = AdvancingService(
        organizations=organization_service,
        repository=SupabaseAdvancingRepository(supabase_client),
    )
    auth_service = AuthService(
        client=SupabaseAuthClient(auth_client),
        redirect_to=signup_redirect_url(resolved_settings.site_url),
    )
    return AppContainer(
        settings=resolved_settings,
        organization_service=organization_service,
        show_team_service=show_team_service,
        advancing_service=advancing_service,
        auth_service=auth_service,
    )
