"""Supabase implementation of the custom breed store."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from pawcare.adapters.supabase_breed_catalog import optional_float
from pawcare.domain.breeds import (
    CustomBreedDefinition,
    CustomBreedOverrides,
    ParentContribution,
)
from pawcare.services.breeds import CustomBreedStore

_TABLE = "custom_breeds"
_PARENT_SLOTS = (1, 2, 3)
# A blank percentage means "all of it" for the first parent, "none" otherwise.
_DEFAULT_FIRST_PARENT_PERCENTAGE = 100.0
_DEFAULT_OTHER_PARENT_PERCENTAGE = 0.0


@dataclass
class SupabaseCustomBreedStore(CustomBreedStore):
    """Supabase-backed store of user-authored custom breeds."""

    client: Client

    def get_custom_breed(self, custom_breed_id: UUID) -> CustomBreedDefinition | None:
        """Return a custom breed definition by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(custom_breed_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_custom_breed(response.data[0])

    def list_custom_breeds(self, user_id: UUID) -> list[CustomBreedDefinition]:
        """Return a user's custom breeds ordered by name."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", str(user_id))
            .order("name")
            .execute()
        )
        return [parse_custom_breed(row) for row in response.data or []]


def parse_custom_breed(row: dict[str, object]) -> CustomBreedDefinition:
    """Parse a custom_breeds row into a domain model."""
    raw_id = row.get("id")
    if not raw_id:
        raise RuntimeError("Custom breed row is missing an id")
    raw_user_id = row.get("user_id")
    return CustomBreedDefinition(
        id=UUID(str(raw_id)),
        name=str(row.get("name") or ""),
        user_id=UUID(str(raw_user_id)) if raw_user_id else None,
        description=row.get("description"),
        notes=row.get("notes"),
        parents=tuple(_parse_parents(row)),
        overrides=CustomBreedOverrides(
            male_adult_min=optional_float(row.get("weight_male_adult_min_override")),
            male_adult_max=optional_float(row.get("weight_male_adult_max_override")),
            female_adult_min=optional_float(
                row.get("weight_female_adult_min_override")
            ),
            female_adult_max=optional_float(
                row.get("weight_female_adult_max_override")
            ),
            exercise_needs=row.get("exercise_needs_override") or None,
            temperament=row.get("temperament_override") or None,
            grooming_needs=row.get("grooming_needs_override") or None,
        ),
    )


def _parse_parents(row: dict[str, object]) -> list[ParentContribution]:
    parents: list[ParentContribution] = []
    for slot in _PARENT_SLOTS:
        parent_id = row.get(f"parent_breed_{slot}_id")
        if not parent_id:
            continue
        percentage = optional_float(row.get(f"parent_breed_{slot}_percentage"))
        if not percentage:
            percentage = (
                _DEFAULT_FIRST_PARENT_PERCENTAGE
                if slot == 1
                else _DEFAULT_OTHER_PARENT_PERCENTAGE
            )
        parents.append(
            ParentContribution(
                parent_breed_id=UUID(str(parent_id)), percentage=percentage
            )
        )
    return parents
