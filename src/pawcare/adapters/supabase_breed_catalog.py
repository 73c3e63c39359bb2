"""Supabase implementation of the breed catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from pawcare.domain.breeds import BreedProfile, WeightBySex, WeightRange
from pawcare.services.breeds import BreedCatalog

_TABLE = "dog_breeds"


@dataclass
class SupabaseBreedCatalog(BreedCatalog):
    """Supabase-backed catalog of canonical breeds."""

    client: Client

    def get_breed(self, breed_id: UUID) -> BreedProfile | None:
        """Return a breed by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(breed_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_breed(response.data[0])

    def find_breed_by_name(self, name: str) -> BreedProfile | None:
        """Return a breed whose name matches case-insensitively."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .ilike("breed", name.strip())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_breed(response.data[0])

    def list_breed_names(self) -> list[str]:
        """Return every breed name in alphabetical order."""
        response = self.client.table(_TABLE).select("breed").order("breed").execute()
        return [str(row["breed"]) for row in response.data or [] if row.get("breed")]


def parse_breed(row: dict[str, object]) -> BreedProfile:
    """Parse a dog_breeds row into a domain model."""
    raw_id = row.get("id")
    if not raw_id:
        raise RuntimeError("Breed row is missing an id")
    return BreedProfile(
        id=UUID(str(raw_id)),
        name=str(row.get("breed") or ""),
        weight_kg=WeightBySex(
            male=_parse_weights(row, "male"),
            female=_parse_weights(row, "female"),
        ),
        origin=_optional_text(row.get("origin")),
        life_span_years=_optional_text(row.get("life_span_years")),
        temperament=_optional_text(row.get("temperament")),
        exercise_needs=_optional_text(row.get("exercise_needs")),
        trainability=_optional_text(row.get("trainability")),
        coat=_optional_text(row.get("coat")),
        grooming=_optional_text(row.get("grooming")),
        common_health_issues=_optional_text(row.get("common_health_issues")),
        recognized_by=_optional_text(row.get("recognized_by")),
        also_known_as=_optional_text(row.get("also_known_as")),
        fci_group=_optional_int(row.get("fci_group")),
        exercise_level=_optional_text(row.get("exercise_level")),
        grooming_needs=_optional_text(row.get("grooming_needs")),
    )


def _parse_weights(row: dict[str, object], sex: str) -> WeightRange:
    return WeightRange(
        adult_min=optional_float(row.get(f"{sex}_weight_adult_kg_min")),
        adult_max=optional_float(row.get(f"{sex}_weight_adult_kg_max")),
        six_month_min=optional_float(row.get(f"{sex}_weight_6m_kg_min")),
        six_month_max=optional_float(row.get(f"{sex}_weight_6m_kg_max")),
    )


def optional_float(value: object) -> float | None:
    """Coerce a numeric column (possibly a numeric string) to float."""
    if value is None or value == "":
        return None
    return float(value)


def _optional_int(value: object) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
