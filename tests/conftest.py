"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from pawcare.config import Settings
from pawcare.containers import AppContainer
from pawcare.domain.breeds import (
    BreedProfile,
    CustomBreedDefinition,
    CustomBreedOverrides,
    ParentContribution,
    WeightBySex,
    WeightRange,
)
from pawcare.services.breed_info import BreedInfoService
from pawcare.services.breeds import BreedCatalog, BreedResolver, CustomBreedStore
from pawcare.services.cache import InMemoryCache


@dataclass
class InMemoryBreedCatalog(BreedCatalog):
    """In-memory breed catalog for tests."""

    breeds: dict[UUID, BreedProfile] = field(default_factory=dict)
    failing_ids: set[UUID] = field(default_factory=set)
    requested: list[UUID] = field(default_factory=list)

    def add(self, breed: BreedProfile) -> BreedProfile:
        self.breeds[breed.id] = breed
        return breed

    def get_breed(self, breed_id: UUID) -> BreedProfile | None:
        self.requested.append(breed_id)
        if breed_id in self.failing_ids:
            raise RuntimeError("catalog unavailable")
        return self.breeds.get(breed_id)

    def find_breed_by_name(self, name: str) -> BreedProfile | None:
        for breed in self.breeds.values():
            if breed.name.lower() == name.strip().lower():
                return breed
        return None

    def list_breed_names(self) -> list[str]:
        return sorted(breed.name for breed in self.breeds.values())


@dataclass
class InMemoryCustomBreedStore(CustomBreedStore):
    """In-memory custom breed store for tests."""

    definitions: dict[UUID, CustomBreedDefinition] = field(default_factory=dict)
    requested: list[UUID] = field(default_factory=list)

    def add(self, definition: CustomBreedDefinition) -> CustomBreedDefinition:
        self.definitions[definition.id] = definition
        return definition

    def get_custom_breed(self, custom_breed_id: UUID) -> CustomBreedDefinition | None:
        self.requested.append(custom_breed_id)
        return self.definitions.get(custom_breed_id)

    def list_custom_breeds(self, user_id: UUID) -> list[CustomBreedDefinition]:
        owned = [d for d in self.definitions.values() if d.user_id == user_id]
        return sorted(owned, key=lambda definition: definition.name)


def make_breed(  # noqa: PLR0913
    name: str,
    *,
    male: WeightRange | None = None,
    female: WeightRange | None = None,
    temperament: str | None = None,
    exercise_needs: str | None = None,
    grooming_needs: str | None = None,
    **extra: object,
) -> BreedProfile:
    return BreedProfile(
        id=uuid4(),
        name=name,
        weight_kg=WeightBySex(
            male=male or WeightRange(),
            female=female or WeightRange(),
        ),
        temperament=temperament,
        exercise_needs=exercise_needs,
        grooming_needs=grooming_needs,
        **extra,
    )


def make_custom_breed(
    name: str,
    parents: list[tuple[UUID, float]],
    overrides: CustomBreedOverrides | None = None,
    user_id: UUID | None = None,
) -> CustomBreedDefinition:
    return CustomBreedDefinition(
        id=uuid4(),
        name=name,
        user_id=user_id,
        parents=tuple(
            ParentContribution(parent_breed_id=breed_id, percentage=percentage)
            for breed_id, percentage in parents
        ),
        overrides=overrides or CustomBreedOverrides(),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def catalog() -> InMemoryBreedCatalog:
    return InMemoryBreedCatalog()


@pytest.fixture
def custom_store() -> InMemoryCustomBreedStore:
    return InMemoryCustomBreedStore()


@pytest.fixture
def labrador(catalog: InMemoryBreedCatalog) -> BreedProfile:
    return catalog.add(
        make_breed(
            "Labrador Retriever",
            male=WeightRange(
                adult_min=29, adult_max=36, six_month_min=18, six_month_max=23
            ),
            female=WeightRange(
                adult_min=25, adult_max=32, six_month_min=16, six_month_max=20
            ),
            temperament="Friendly, Active, Outgoing",
            exercise_needs="High - at least 1 hour daily",
            grooming_needs="Weekly brushing",
            origin="Canada",
            life_span_years="10-12",
            trainability="High",
            coat="Short, dense double coat",
            grooming="Moderate",
            common_health_issues="Hip dysplasia, Obesity",
            recognized_by="AKC, FCI, KC",
            also_known_as="Lab",
            fci_group=8,
            exercise_level="high",
        )
    )


@pytest.fixture
def poodle(catalog: InMemoryBreedCatalog) -> BreedProfile:
    return catalog.add(
        make_breed(
            "Standard Poodle",
            male=WeightRange(
                adult_min=20, adult_max=32, six_month_min=12, six_month_max=16
            ),
            female=WeightRange(adult_min=18, adult_max=27),
            temperament="Intelligent, Proud",
            exercise_needs="Moderate",
            grooming_needs="Professional grooming every 4-6 weeks",
        )
    )


@pytest.fixture
def resolver(
    catalog: InMemoryBreedCatalog, custom_store: InMemoryCustomBreedStore
) -> BreedResolver:
    return BreedResolver(catalog=catalog, custom_breeds=custom_store)


@pytest.fixture
def breed_info_service(resolver: BreedResolver) -> BreedInfoService:
    return BreedInfoService(resolver=resolver, cache=InMemoryCache())


@pytest.fixture
def container(
    settings: Settings,
    resolver: BreedResolver,
    breed_info_service: BreedInfoService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        breed_resolver=resolver,
        breed_info_service=breed_info_service,
    )
