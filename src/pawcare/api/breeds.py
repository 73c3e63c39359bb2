"""Read-only breed endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Query, Request, status

from pawcare.api.models import (
    CustomBreedSummary,
    ExerciseResponse,
    WeightStatusResponse,
)
from pawcare.domain.breeds import Sex, breed_fields_to_dict

if TYPE_CHECKING:
    from pawcare.containers import AppContainer

router = APIRouter(tags=["breeds"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/breeds")
async def list_breeds(request: Request) -> dict[str, object]:
    """Return every catalogued breed name."""
    return {"breeds": _container(request).breed_info_service.list_breed_names()}


@router.get("/breeds/lookup")
async def lookup_breed(request: Request, name: str = Query(min_length=1)) -> dict:
    """Return a catalogued breed by name."""
    breed = _container(request).breed_info_service.find_breed_by_name(name)
    if breed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return breed_fields_to_dict(breed)


@router.get("/breeds/resolve")
async def resolve_breed(
    request: Request,
    breed_id: UUID | None = None,
    custom_breed_id: UUID | None = None,
) -> dict[str, object]:
    """Resolve a canonical or custom breed into unified attributes."""
    resolved = _container(request).breed_info_service.resolve(
        breed_id, custom_breed_id
    )
    return {"breed": resolved.to_dict() if resolved else None}


@router.get("/breeds/weight-status")
async def weight_status(
    request: Request,
    weight_kg: float,
    sex: Sex,
    breed_id: UUID | None = None,
    custom_breed_id: UUID | None = None,
) -> WeightStatusResponse:
    """Classify a dog's weight against its breed range."""
    result = _container(request).breed_info_service.weight_status(
        weight_kg, sex, breed_id, custom_breed_id
    )
    return WeightStatusResponse(weight_kg=weight_kg, sex=sex, status=result)


@router.get("/breeds/exercise")
async def exercise(
    request: Request,
    breed_id: UUID | None = None,
    custom_breed_id: UUID | None = None,
) -> ExerciseResponse:
    """Return exercise advice for a breed."""
    text = _container(request).breed_info_service.exercise_recommendation(
        breed_id, custom_breed_id
    )
    return ExerciseResponse(recommendation=text)


@router.get("/breeds/name")
async def breed_name(
    request: Request, breed_id: UUID | None = None, is_custom: bool = False
) -> dict[str, str]:
    """Return the display name for a breed id."""
    return {
        "name": _container(request).breed_info_service.get_breed_name(
            breed_id, is_custom
        )
    }


@router.get("/users/{user_id}/custom-breeds")
async def list_custom_breeds(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the custom breeds a user has defined."""
    definitions = _container(request).breed_info_service.list_custom_breeds(user_id)
    return {
        "custom_breeds": [
            CustomBreedSummary.from_definition(definition).model_dump(mode="json")
            for definition in definitions
        ]
    }
