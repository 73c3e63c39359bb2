"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from pawcare.adapters.supabase_breed_catalog import SupabaseBreedCatalog
from pawcare.adapters.supabase_custom_breed_store import SupabaseCustomBreedStore
from pawcare.config import Settings
from pawcare.services.breed_info import BreedInfoService
from pawcare.services.breeds import BreedResolver
from pawcare.services.cache import InMemoryCache


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    breed_resolver: BreedResolver
    breed_info_service: BreedInfoService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    breed_resolver = BreedResolver(
        catalog=SupabaseBreedCatalog(supabase_client),
        custom_breeds=SupabaseCustomBreedStore(supabase_client),
    )
    breed_info_service = BreedInfoService(
        resolver=breed_resolver,
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.breed_cache_ttl_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        breed_resolver=breed_resolver,
        breed_info_service=breed_info_service,
    )
