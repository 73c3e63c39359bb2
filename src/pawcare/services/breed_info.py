"""Application service for breed lookups used across the app."""

import logging
from dataclasses import dataclass
from uuid import UUID

from pawcare.domain.breeds import (
    BreedNotFoundError,
    BreedProfile,
    CustomBreedDefinition,
    ResolvedBreedInfo,
    Sex,
    WeightStatus,
)
from pawcare.services.advice import classify_weight, recommend_exercise
from pawcare.services.breeds import BreedResolver
from pawcare.services.cache import Cache

_logger = logging.getLogger(__name__)

_RESOLVED_PREFIX = "resolved-breed-info"


@dataclass
class BreedInfoService:
    """Memoizes breed resolution and exposes the derived advice."""

    resolver: BreedResolver
    cache: Cache
    ttl_seconds: int = 300

    def resolve(
        self, breed_id: UUID | None = None, custom_breed_id: UUID | None = None
    ) -> ResolvedBreedInfo | None:
        """Resolve a breed reference, reusing a recent result when available."""
        if breed_id is None and custom_breed_id is None:
            return None
        cache_key = (_RESOLVED_PREFIX, breed_id, custom_breed_id)
        cached = self.cache.get(cache_key)
        if isinstance(cached, ResolvedBreedInfo):
            return cached
        resolved = self.resolver.resolve(breed_id, custom_breed_id)
        if resolved is not None:
            self.cache.set(cache_key, resolved, ttl_seconds=self.ttl_seconds)
        return resolved

    def invalidate_custom_breed(self, custom_breed_id: UUID) -> int:
        """Forget memoized results for a custom breed after it changes."""
        return self.cache.delete_where(
            lambda key: (
                isinstance(key, tuple)
                and len(key) == 3  # noqa: PLR2004
                and key[0] == _RESOLVED_PREFIX
                and key[2] == custom_breed_id
            )
        )

    def clear(self) -> None:
        """Forget every memoized result."""
        self.cache.clear()

    def weight_status(
        self,
        weight_kg: float | None,
        sex: Sex,
        breed_id: UUID | None = None,
        custom_breed_id: UUID | None = None,
    ) -> WeightStatus:
        """Classify a dog's weight against its breed range."""
        return classify_weight(
            weight_kg, sex, self._resolve_or_none(breed_id, custom_breed_id)
        )

    def exercise_recommendation(
        self, breed_id: UUID | None = None, custom_breed_id: UUID | None = None
    ) -> str:
        """Return exercise advice for a dog's breed."""
        return recommend_exercise(self._resolve_or_none(breed_id, custom_breed_id))

    def get_breed_name(self, breed_id: UUID | None, is_custom: bool = False) -> str:
        """Return a display name for a breed id, or an empty string."""
        if breed_id is None:
            return ""
        try:
            if is_custom:
                custom = self.resolver.custom_breeds.get_custom_breed(breed_id)
                return custom.name if custom else ""
            breed = self.resolver.catalog.get_breed(breed_id)
            return breed.name if breed else ""
        except Exception:
            _logger.exception("Failed to fetch breed name for %s", breed_id)
            return ""

    def find_breed_by_name(self, name: str | None) -> BreedProfile | None:
        """Look up a catalogued breed by its name."""
        if not name:
            return None
        return self.resolver.catalog.find_breed_by_name(name)

    def list_breed_names(self) -> list[str]:
        """Return every catalogued breed name."""
        return self.resolver.catalog.list_breed_names()

    def list_custom_breeds(self, user_id: UUID) -> list[CustomBreedDefinition]:
        """Return the custom breeds a user has defined."""
        return self.resolver.custom_breeds.list_custom_breeds(user_id)

    def _resolve_or_none(
        self, breed_id: UUID | None, custom_breed_id: UUID | None
    ) -> ResolvedBreedInfo | None:
        try:
            return self.resolve(breed_id, custom_breed_id)
        except BreedNotFoundError as exc:
            _logger.info("Breed information unavailable: %s", exc)
            return None
