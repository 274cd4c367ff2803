"""
Tests for climate category mapping and comparisons.
"""

import math

import pytest

from veganizer.data import reference_data as seed
from veganizer.models.impact import IngredientImpact
from veganizer.services.climate_impact import ClimateImpactCalculator, reduction_percentage


@pytest.fixture
def calculator(climate_store):
    return ClimateImpactCalculator(climate_store, portion_kg=0.1)


@pytest.mark.parametrize("ingredient, category", [
    ("Bœuf", "beef"),
    ("boeuf haché", "beef"),
    ("Lentilles corail", "lentils"),
    ("pois chiches", "chickpeas"),
    ("crème de soja", "milk"),
    ("carottes", "vegetables"),
    ("quelque chose", "vegetables"),
])
def test_map_category(calculator, ingredient, category):
    assert calculator.map_category(ingredient) == category


def test_ingredient_impact_uses_portion(calculator):
    assert calculator.ingredient_impact("boeuf") == IngredientImpact(
        co2_kg=3.0, water_l=150, land_m2=16.0, biodiversity_score=9.0
    )
    assert calculator.ingredient_impact("boeuf", portion_kg=0.2).co2_kg == 6.0


def test_ingredient_impact_without_metrics(calculator):
    # lentils have no metrics in the fixture table
    assert calculator.ingredient_impact("lentilles") is None


def test_totals_fall_back_to_defaults(calculator):
    totals = calculator.calculate_totals(["lentilles", "boeuf"])

    assert totals.total_co2 == 5.0
    assert totals.total_water == 200
    assert totals.total_land == 17.5
    assert totals.total_biodiversity == 9.0


def test_vegan_alternative_impact(calculator):
    assert calculator.vegan_alternative_impact("poulet") == IngredientImpact(
        co2_kg=0.2, water_l=10, land_m2=0.15, biodiversity_score=0.5
    )
    assert calculator.vegan_alternative_impact("carottes") is None
    # milk maps to vegetables, which the fixture table holds
    assert calculator.vegan_alternative_impact("lait").co2_kg == 0.05


def test_compare_reductions(calculator):
    comparison = calculator.compare(["boeuf"], ["tofu"])

    assert comparison.co2_reduction == 90
    assert comparison.water_saving == 90
    assert comparison.land_saving == 99
    assert comparison.details.original.total_co2 == 3.0
    assert comparison.details.vegan.total_co2 == 0.3


def test_zero_original_impact_uses_fallbacks(calculator):
    comparison = calculator.compare([], ["tofu"])

    assert (comparison.co2_reduction, comparison.water_saving, comparison.land_saving) == (65, 78, 83)


def test_empty_lists_give_valid_result(calculator):
    comparison = calculator.compare([], [])

    assert comparison.co2_reduction == 65
    assert comparison.details.original.total_co2 == 0.0
    assert comparison.details.vegan.total_water == 0


def test_supplement_impact_is_added_to_vegan_side(calculator):
    omega3 = next(s for s in seed.SUPPLEMENTS if s.name == "Omega 3 Vegan")

    comparison = calculator.compare(["boeuf"], ["tofu"], [omega3])

    assert comparison.details.supplements.total_co2 == 0.03
    assert comparison.details.supplements.total_water == 2
    assert comparison.details.vegan.total_co2 == 0.33
    assert comparison.details.vegan.total_water == 17


def test_reduction_percentage_never_invalid():
    assert reduction_percentage(4, 1, 0) == 75
    assert reduction_percentage(0, 1, 65) == 65
    assert reduction_percentage(math.nan, 1, 65) == 65
    assert reduction_percentage(10, math.inf, 78) == 78
    assert reduction_percentage(1, 2, 83) == -100


def test_seed_reductions_are_finite_integers(reference_data):
    calculator = ClimateImpactCalculator(reference_data.climate)

    comparison = calculator.compare(
        ["bœuf", "lardons", "crème fraîche"],
        ["seitan", "tofu fumé", "crème de soja"],
        reference_data.supplements.all(),
    )

    for value in (comparison.co2_reduction, comparison.water_saving, comparison.land_saving):
        assert isinstance(value, int)
        assert -100 <= value <= 100
