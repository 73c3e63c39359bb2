"""Domain models for canonical and custom dog breeds."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID


MAX_PARENT_BREEDS = 3


class Sex(StrEnum):
    """Sex used to pick a weight bracket."""

    MALE = "male"
    FEMALE = "female"


class WeightStatus(StrEnum):
    """Result of comparing a dog's weight with its breed range."""

    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class WeightRange:
    """Weight brackets in kilograms for one sex."""

    adult_min: float | None = None
    adult_max: float | None = None
    six_month_min: float | None = None
    six_month_max: float | None = None


@dataclass(frozen=True)
class WeightBySex:
    """Weight brackets for both sexes."""

    male: WeightRange = field(default_factory=WeightRange)
    female: WeightRange = field(default_factory=WeightRange)

    def for_sex(self, sex: Sex) -> WeightRange:
        """Return the bracket for the given sex."""
        return self.male if Sex(sex) is Sex.MALE else self.female


@dataclass(frozen=True)
class BreedProfile:
    """Catalogued breed record.

    List-like attributes (temperament, health issues, registries) are kept as
    the comma separated text the catalogue stores; the ``*_tags``/``*_list``
    properties split them for display.
    """

    id: UUID
    name: str
    weight_kg: WeightBySex = field(default_factory=WeightBySex)
    origin: str | None = None
    life_span_years: str | None = None
    temperament: str | None = None
    exercise_needs: str | None = None
    trainability: str | None = None
    coat: str | None = None
    grooming: str | None = None
    common_health_issues: str | None = None
    recognized_by: str | None = None
    also_known_as: str | None = None
    fci_group: int | None = None
    exercise_level: str | None = None
    grooming_needs: str | None = None

    @property
    def temperament_tags(self) -> tuple[str, ...]:
        return split_list_text(self.temperament)

    @property
    def health_issue_list(self) -> tuple[str, ...]:
        return split_list_text(self.common_health_issues)

    @property
    def registry_list(self) -> tuple[str, ...]:
        return split_list_text(self.recognized_by)


@dataclass(frozen=True)
class ParentContribution:
    """A parent breed reference with its percentage share (0-100)."""

    parent_breed_id: UUID
    percentage: float

    def __post_init__(self) -> None:
        if not 0 <= self.percentage <= 100:  # noqa: PLR2004
            raise ValueError(f"Parent percentage out of range: {self.percentage}")


@dataclass(frozen=True)
class CustomBreedOverrides:
    """Field values that replace anything computed from parent breeds."""

    male_adult_min: float | None = None
    male_adult_max: float | None = None
    female_adult_min: float | None = None
    female_adult_max: float | None = None
    exercise_needs: str | None = None
    temperament: str | None = None
    grooming_needs: str | None = None


@dataclass(frozen=True)
class CustomBreedDefinition:
    """User-authored mixed breed built from up to three parent breeds.

    Percentages are not required to sum to 100 and are never normalized.
    """

    id: UUID
    name: str
    user_id: UUID | None = None
    description: str | None = None
    notes: str | None = None
    parents: tuple[ParentContribution, ...] = ()
    overrides: CustomBreedOverrides = field(default_factory=CustomBreedOverrides)

    def __post_init__(self) -> None:
        if len(self.parents) > MAX_PARENT_BREEDS:
            raise ValueError(
                f"Custom breed {self.id} declares {len(self.parents)} parents"
            )


@dataclass(frozen=True)
class ParentBreed:
    """A parent breed that contributed to a resolved custom breed."""

    breed: BreedProfile
    percentage: float


@dataclass(frozen=True)
class ResolvedBreedInfo:
    """Unified breed attributes for either a canonical or a custom breed."""

    id: UUID
    name: str
    is_custom: bool
    weight_kg: WeightBySex = field(default_factory=WeightBySex)
    parent_breeds: tuple[ParentBreed, ...] = ()
    origin: str | None = None
    life_span_years: str | None = None
    temperament: str | None = None
    exercise_needs: str | None = None
    trainability: str | None = None
    coat: str | None = None
    grooming: str | None = None
    common_health_issues: str | None = None
    recognized_by: str | None = None
    also_known_as: str | None = None
    fci_group: int | None = None
    exercise_level: str | None = None
    grooming_needs: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping with a stable key order."""
        payload = breed_fields_to_dict(self)
        payload["is_custom"] = self.is_custom
        payload["parent_breeds"] = [
            {
                "breed": breed_fields_to_dict(parent.breed),
                "percentage": parent.percentage,
            }
            for parent in self.parent_breeds
        ]
        return payload


class BreedNotFoundError(LookupError):
    """Raised when a requested breed or custom breed does not exist."""

    def __init__(self, kind: str, breed_id: UUID) -> None:
        super().__init__(f"{kind} {breed_id} not found")
        self.kind = kind
        self.breed_id = breed_id


_DESCRIPTIVE_FIELDS = (
    "origin",
    "life_span_years",
    "temperament",
    "exercise_needs",
    "trainability",
    "coat",
    "grooming",
    "common_health_issues",
    "recognized_by",
    "also_known_as",
    "fci_group",
    "exercise_level",
    "grooming_needs",
)


def split_list_text(raw: str | None) -> tuple[str, ...]:
    """Split comma separated catalogue text into trimmed, non-empty items."""
    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _weight_range_to_dict(weights: WeightRange) -> dict[str, float | None]:
    return {
        "adult_min": weights.adult_min,
        "adult_max": weights.adult_max,
        "six_month_min": weights.six_month_min,
        "six_month_max": weights.six_month_max,
    }


def breed_fields_to_dict(
    breed: BreedProfile | ResolvedBreedInfo,
) -> dict[str, object]:
    """Serialize the fields shared by profiles and resolved info."""
    payload: dict[str, object] = {
        "id": str(breed.id),
        "name": breed.name,
        "weight_kg": {
            "male": _weight_range_to_dict(breed.weight_kg.male),
            "female": _weight_range_to_dict(breed.weight_kg.female),
        },
    }
    for name in _DESCRIPTIVE_FIELDS:
        payload[name] = getattr(breed, name)
    return payload
