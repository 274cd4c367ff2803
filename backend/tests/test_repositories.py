"""
Tests for the in-memory reference data stores.
"""

import pytest

from veganizer.models.impact import ClimateMetrics
from veganizer.models.recipe import Recipe
from veganizer.models.substitution import SubstitutionRule
from veganizer.repositories.base import ReferenceDataError
from veganizer.repositories.memory import (
    InMemoryClimateStore,
    InMemoryRecipeStore,
    InMemorySubstitutionStore,
)


@pytest.fixture
def recipe_store():
    return InMemoryRecipeStore([
        Recipe(name="Sauce au poulet"),
        Recipe(name="Poulet rôti"),
        Recipe(name="Poulet"),
    ])


def test_duplicate_substitution_key_is_rejected():
    rules = [
        SubstitutionRule(original_ingredient="Bœuf", vegan_substitute="seitan"),
        SubstitutionRule(original_ingredient="boeuf", vegan_substitute="haché végétal"),
    ]

    with pytest.raises(ReferenceDataError) as exc_info:
        InMemorySubstitutionStore(rules)

    assert exc_info.value.table == "substitutions"
    assert exc_info.value.key == "boeuf"


def test_duplicate_climate_category_is_rejected():
    metrics = ClimateMetrics(category="beef", co2_kg_per_kg=1, water_l_per_kg=1, land_m2_per_kg=1)

    with pytest.raises(ReferenceDataError):
        InMemoryClimateStore([metrics, metrics])


def test_search_ranks_exact_prefix_contains(recipe_store):
    names = [r.name for r in recipe_store.search("poulet")]

    assert names == ["Poulet", "Poulet rôti", "Sauce au poulet"]
    assert [r.name for r in recipe_store.search("POULET", limit=1)] == ["Poulet"]
    assert recipe_store.search("") == []


def test_get_by_name_is_normalized(recipe_store):
    assert recipe_store.get_by_name("poulet RÔTI").name == "Poulet rôti"
    assert recipe_store.get_by_name("poulet basquaise") is None


def test_find_falls_back_to_search(recipe_store):
    assert recipe_store.find("sauce").name == "Sauce au poulet"
    assert recipe_store.find("rôti").name == "Poulet rôti"
    assert recipe_store.find("lasagnes") is None


def test_seed_reference_data(reference_data):
    assert reference_data.recipes.count() == 8
    assert reference_data.substitutions.count() == 17
    assert reference_data.supplements.count() == 6
    assert reference_data.animals.count() == 6
    assert reference_data.climate.get_metrics("beef").co2_kg_per_kg > 0
    assert reference_data.supplements.get_by_name("spiruline").name == "Spiruline"
