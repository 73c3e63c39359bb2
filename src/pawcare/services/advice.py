"""Weight status and exercise advice derived from resolved breed info."""

import math

from pawcare.domain.breeds import ResolvedBreedInfo, Sex, WeightStatus

EXERCISE_FALLBACK = (
    "Consult your veterinarian for exercise recommendations specific to "
    "your dog's breed and health."
)


def classify_weight(
    current_weight_kg: float | None,
    sex: Sex,
    resolved: ResolvedBreedInfo | None,
) -> WeightStatus:
    """Compare a weight with the breed's inclusive adult range for ``sex``."""
    if resolved is None or not _is_positive(current_weight_kg):
        return WeightStatus.UNKNOWN
    weights = resolved.weight_kg.for_sex(sex)
    if weights.adult_min is None or weights.adult_max is None:
        return WeightStatus.UNKNOWN
    if current_weight_kg < weights.adult_min:
        return WeightStatus.UNDERWEIGHT
    if current_weight_kg > weights.adult_max:
        return WeightStatus.OVERWEIGHT
    return WeightStatus.NORMAL


def recommend_exercise(resolved: ResolvedBreedInfo | None) -> str:
    """Return exercise advice built from the breed's exercise needs."""
    if resolved is None or not resolved.exercise_needs:
        return EXERCISE_FALLBACK
    return (
        f"Based on breed characteristics: {resolved.exercise_needs}. "
        "Always adjust based on your individual dog's age, health, "
        "and fitness level."
    )


def _is_positive(value: float | None) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value) and value > 0
