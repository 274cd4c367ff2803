"""
Pytest configuration and shared fixtures.
"""

import pytest

from veganizer.data import reference_data as seed
from veganizer.models.impact import ClimateMetrics
from veganizer.models.nutrition import NutritionRecord
from veganizer.repositories.memory import (
    InMemoryAnimalImpactStore,
    InMemoryClimateStore,
    InMemoryNutritionStore,
    InMemorySubstitutionStore,
    InMemorySupplementStore,
    ReferenceData,
)
from veganizer.services.veganizer_service import VeganizerService


@pytest.fixture(scope="session")
def reference_data():
    """Stores over the bundled seed tables."""
    return ReferenceData.from_seed()


@pytest.fixture(scope="session")
def service(reference_data):
    return VeganizerService(reference_data, max_workers=2)


@pytest.fixture
def substitution_store():
    return InMemorySubstitutionStore(seed.SUBSTITUTION_RULES)


@pytest.fixture
def supplement_store():
    return InMemorySupplementStore(seed.SUPPLEMENTS)


@pytest.fixture
def animal_store():
    return InMemoryAnimalImpactStore(seed.ANIMAL_IMPACT_RECORDS)


@pytest.fixture
def nutrition_store():
    """Small nutrition table with round values."""
    return InMemoryNutritionStore([
        NutritionRecord(
            name="Tofu nature", calories=138, proteins=13, carbs=2, fats=9,
            fiber=1, calcium=340, iron=2.7, zinc=1.6,
        ),
        NutritionRecord(
            name="Salade composée au poulet", calories=110, proteins=9, carbs=5,
            fats=6, fiber=1.5, calcium=30, iron=0.8, zinc=0.9,
        ),
        NutritionRecord(
            name="Poulet, viande, crue", calories=121, proteins=21, carbs=0,
            fats=4, fiber=0, calcium=9, iron=0.7, zinc=1.5,
        ),
        NutritionRecord(
            name="Soupe de carotte", calories=30, proteins=1, carbs=5,
            fats=1, fiber=1, calcium=20, iron=0.3, zinc=0.2,
        ),
        NutritionRecord(
            name="Jus de carotte", calories=40, proteins=1, carbs=9,
            fats=0, fiber=1, calcium=25, iron=0.4, zinc=0.1,
        ),
        NutritionRecord(name="Eau de source", calories=0),
    ])


@pytest.fixture
def climate_store():
    """Climate metrics with round per-kg values."""
    return InMemoryClimateStore([
        ClimateMetrics(category="beef", co2_kg_per_kg=30, water_l_per_kg=1500, land_m2_per_kg=160, biodiversity_impact=9),
        ClimateMetrics(category="tofu", co2_kg_per_kg=3, water_l_per_kg=150, land_m2_per_kg=2, biodiversity_impact=1),
        ClimateMetrics(category="seitan", co2_kg_per_kg=2, water_l_per_kg=100, land_m2_per_kg=1.5, biodiversity_impact=0.5),
        ClimateMetrics(category="vegetables", co2_kg_per_kg=0.5, water_l_per_kg=100, land_m2_per_kg=0.5, biodiversity_impact=0.3),
    ])
