"""Pydantic response models for the breed API."""

from uuid import UUID

from pydantic import BaseModel

from pawcare.domain.breeds import CustomBreedDefinition, Sex, WeightStatus


class ParentContributionModel(BaseModel):
    """Parent breed reference inside a custom breed."""

    parent_breed_id: UUID
    percentage: float


class CustomBreedSummary(BaseModel):
    """Custom breed as listed for its owner."""

    id: UUID
    name: str
    description: str | None = None
    notes: str | None = None
    parents: list[ParentContributionModel]

    @classmethod
    def from_definition(cls, definition: CustomBreedDefinition) -> "CustomBreedSummary":
        return cls(
            id=definition.id,
            name=definition.name,
            description=definition.description,
            notes=definition.notes,
            parents=[
                ParentContributionModel(
                    parent_breed_id=parent.parent_breed_id,
                    percentage=parent.percentage,
                )
                for parent in definition.parents
            ],
        )


class WeightStatusResponse(BaseModel):
    """Weight classification for a dog."""

    weight_kg: float
    sex: Sex
    status: WeightStatus


class ExerciseResponse(BaseModel):
    """Exercise advice for a dog's breed."""

    recommendation: str
