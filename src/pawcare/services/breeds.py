"""Breed resolution: canonical passthrough and custom breed aggregation."""

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from pawcare.domain.breeds import (
    BreedNotFoundError,
    BreedProfile,
    CustomBreedDefinition,
    ParentBreed,
    ResolvedBreedInfo,
    WeightBySex,
    WeightRange,
)

_logger = logging.getLogger(__name__)

TEMPERAMENT_SEPARATOR = ", "
NEEDS_SEPARATOR = " / "


class BreedCatalog(Protocol):
    """Read interface for catalogued breeds."""

    def get_breed(self, breed_id: UUID) -> BreedProfile | None:
        """Return a breed by id, if present."""

    def find_breed_by_name(self, name: str) -> BreedProfile | None:
        """Return a breed whose name matches case-insensitively."""

    def list_breed_names(self) -> list[str]:
        """Return every breed name in alphabetical order."""


class CustomBreedStore(Protocol):
    """Read interface for user-authored custom breeds."""

    def get_custom_breed(self, custom_breed_id: UUID) -> CustomBreedDefinition | None:
        """Return a custom breed definition by id, if present."""

    def list_custom_breeds(self, user_id: UUID) -> list[CustomBreedDefinition]:
        """Return a user's custom breeds ordered by name."""


def weighted_average(
    contributions: Iterable[tuple[float | None, float]],
) -> float | None:
    """Sum ``value * percentage / 100`` over the contributions that have a value.

    Contributions whose value is ``None`` are skipped and their percentage is
    NOT redistributed, so a field known for only some parents is
    under-weighted. Percentages are not required to sum to 100 either; a
    50/50/50 split yields larger magnitudes than 33/33/34. Both behaviours
    are kept for compatibility with existing custom breeds.
    """
    present = [(value, pct) for value, pct in contributions if value is not None]
    if not present:
        return None
    total = sum(value * pct / 100 for value, pct in present)
    return round_half_up(total)


def round_half_up(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals with halves rounded up."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def join_texts(values: Iterable[str | None], separator: str) -> str | None:
    """Join the non-empty values in order, or ``None`` when none remain."""
    joined = separator.join(value for value in values if value)
    return joined or None


@dataclass
class BreedResolver:
    """Turn a dog's breed reference into one unified attribute set.

    The resolver holds no state between calls; callers that want memoization
    should key it on ``(breed_id, custom_breed_id)``.
    """

    catalog: BreedCatalog
    custom_breeds: CustomBreedStore

    def resolve(
        self, breed_id: UUID | None = None, custom_breed_id: UUID | None = None
    ) -> ResolvedBreedInfo | None:
        """Resolve a canonical or custom breed reference.

        ``breed_id`` takes precedence when both ids are given. Returns ``None``
        without fetching anything when neither is given. Raises
        ``BreedNotFoundError`` when the requested record does not exist.
        """
        if breed_id is not None:
            return self._resolve_canonical(breed_id)
        if custom_breed_id is not None:
            return self._resolve_custom(custom_breed_id)
        return None

    def _resolve_canonical(self, breed_id: UUID) -> ResolvedBreedInfo:
        breed = self.catalog.get_breed(breed_id)
        if breed is None:
            raise BreedNotFoundError("breed", breed_id)
        return ResolvedBreedInfo(
            id=breed.id,
            name=breed.name,
            is_custom=False,
            weight_kg=breed.weight_kg,
            origin=breed.origin,
            life_span_years=breed.life_span_years,
            temperament=breed.temperament,
            exercise_needs=breed.exercise_needs,
            trainability=breed.trainability,
            coat=breed.coat,
            grooming=breed.grooming,
            common_health_issues=breed.common_health_issues,
            recognized_by=breed.recognized_by,
            also_known_as=breed.also_known_as,
            fci_group=breed.fci_group,
            exercise_level=breed.exercise_level,
            grooming_needs=breed.grooming_needs,
        )

    def _resolve_custom(self, custom_breed_id: UUID) -> ResolvedBreedInfo:
        definition = self.custom_breeds.get_custom_breed(custom_breed_id)
        if definition is None:
            raise BreedNotFoundError("custom breed", custom_breed_id)

        parents = tuple(self._fetch_parents(definition))
        overrides = definition.overrides
        weight_kg = WeightBySex(
            male=_aggregate_weights(
                parents,
                lambda breed: breed.weight_kg.male,
                adult_min=overrides.male_adult_min,
                adult_max=overrides.male_adult_max,
            ),
            female=_aggregate_weights(
                parents,
                lambda breed: breed.weight_kg.female,
                adult_min=overrides.female_adult_min,
                adult_max=overrides.female_adult_max,
            ),
        )
        return ResolvedBreedInfo(
            id=definition.id,
            name=definition.name,
            is_custom=True,
            parent_breeds=parents,
            weight_kg=weight_kg,
            temperament=_text_attribute(
                overrides.temperament,
                (parent.breed.temperament for parent in parents),
                TEMPERAMENT_SEPARATOR,
            ),
            exercise_needs=_text_attribute(
                overrides.exercise_needs,
                (parent.breed.exercise_needs for parent in parents),
                NEEDS_SEPARATOR,
            ),
            grooming_needs=_text_attribute(
                overrides.grooming_needs,
                (parent.breed.grooming_needs for parent in parents),
                NEEDS_SEPARATOR,
            ),
        )

    def _fetch_parents(self, definition: CustomBreedDefinition) -> list[ParentBreed]:
        """Fetch parents in declared order, dropping any that cannot be loaded."""
        parents: list[ParentBreed] = []
        for contribution in definition.parents:
            try:
                breed = self.catalog.get_breed(contribution.parent_breed_id)
            except Exception as exc:  # noqa: BLE001
                _logger.warning(
                    "Parent breed %s of custom breed %s failed to load: %s",
                    contribution.parent_breed_id,
                    definition.id,
                    exc,
                )
                continue
            if breed is None:
                _logger.warning(
                    "Parent breed %s of custom breed %s not found",
                    contribution.parent_breed_id,
                    definition.id,
                )
                continue
            parents.append(
                ParentBreed(breed=breed, percentage=contribution.percentage)
            )
        return parents


def _aggregate_weights(
    parents: tuple[ParentBreed, ...],
    bracket: Callable[[BreedProfile], WeightRange],
    *,
    adult_min: float | None,
    adult_max: float | None,
) -> WeightRange:
    """Aggregate one sex's brackets; adult overrides replace computed values."""

    def computed(field_name: str) -> float | None:
        return weighted_average(
            (getattr(bracket(parent.breed), field_name), parent.percentage)
            for parent in parents
        )

    return WeightRange(
        adult_min=adult_min if adult_min is not None else computed("adult_min"),
        adult_max=adult_max if adult_max is not None else computed("adult_max"),
        six_month_min=computed("six_month_min"),
        six_month_max=computed("six_month_max"),
    )


def _text_attribute(
    override: str | None, values: Iterable[str | None], separator: str
) -> str | None:
    if override:
        return override
    return join_texts(values, separator)

