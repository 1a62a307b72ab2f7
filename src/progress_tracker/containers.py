"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from progress_tracker.adapters.supabase_progress_repository import (
    SupabaseProgressRepository,
)
from progress_tracker.config import Settings
from progress_tracker.services.progress import ProgressService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    progress_service: ProgressService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    progress_repository = SupabaseProgressRepository(supabase_client)
    return AppContainer(
        settings=resolved_settings,
        progress_service=ProgressService(progress_repository),
    )
