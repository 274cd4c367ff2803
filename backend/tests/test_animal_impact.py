"""
Tests for the animal impact calculator.
"""

import pytest

from veganizer.models.recipe import MenuItemRequest
from veganizer.services.animal_impact import (
    AnimalImpactCalculator,
    map_ingredient_to_animal_product,
)


@pytest.mark.parametrize("ingredient, product", [
    ("bœuf", "beef"),
    ("poulet", "chicken"),
    ("saumon", "fish"),
    ("lait", "dairy"),
    ("œuf", "eggs"),
    ("Escalope de poulet", "chicken"),
    ("lardons fumés", "pork"),
    ("crème fraîche épaisse", "dairy"),
    ("3 œufs", "eggs"),
    ("thon", "fish"),
    ("ail", None),
    ("carottes", None),
])
def test_map_ingredient_to_animal_product(ingredient, product):
    assert map_ingredient_to_animal_product(ingredient) == product


def test_empty_recipe_saves_nothing(animal_store):
    calculator = AnimalImpactCalculator(animal_store)

    result = calculator.calculate_animals_saved([], [])

    assert result.total_animals == 0
    assert result.life_years_saved == 0
    assert result.details == []


def test_beef_counts_only_cows(animal_store):
    calculator = AnimalImpactCalculator(animal_store, portion_kg=0.1)

    result = calculator.calculate_animals_saved(["bœuf"], ["seitan"])

    breakdown = result.animal_breakdown
    assert breakdown.cows > 0
    assert breakdown.pigs == breakdown.chickens == breakdown.fish == 0
    assert breakdown.dairy_cows == breakdown.hens == 0
    assert result.total_animals >= 0


def test_quantity_and_life_years(animal_store):
    calculator = AnimalImpactCalculator(animal_store)

    result = calculator.calculate_animals_saved(["poulet"], [], [1.0])

    assert result.total_animals == 0.6
    assert result.life_years_saved == 4.73
    assert result.details[0].quantity_kg == 1.0


def test_missing_quantity_uses_default_portion(animal_store):
    calculator = AnimalImpactCalculator(animal_store, portion_kg=0.5)

    result = calculator.calculate_animals_saved(["poulet", "saumon"], [], [None])

    assert [d.quantity_kg for d in result.details] == [0.5, 0.5]
    assert result.total_animals == 1.3


def test_details_keep_input_order(animal_store):
    calculator = AnimalImpactCalculator(animal_store)

    result = calculator.calculate_animals_saved(["saumon", "carottes", "poulet"])

    assert [d.animal_type for d in result.details] == ["fish", "chicken"]
    assert [d.product_type for d in result.details] == ["fish", "chicken"]


def test_menu_multiplies_servings_and_weeks(reference_data):
    calculator = AnimalImpactCalculator(reference_data.animals, reference_data.recipes, portion_kg=0.1)

    result = calculator.calculate_menu_animals_saved(
        [MenuItemRequest(recipe_name="Poulet basquaise", servings=2)],
        timeframe_weeks=3,
    )

    assert len(result.details) == 1
    assert result.details[0].quantity_kg == pytest.approx(0.6)
    assert result.total_animals == 0.36
    assert result.animal_breakdown.chickens == pytest.approx(0.36)


def test_menu_skips_unknown_recipes(reference_data):
    calculator = AnimalImpactCalculator(reference_data.animals, reference_data.recipes)

    result = calculator.calculate_menu_animals_saved(
        [MenuItemRequest(recipe_name="Plat inexistant xyz", servings=1)]
    )

    assert result.total_animals == 0
    assert result.details == []


def test_menu_requires_recipe_store(animal_store):
    calculator = AnimalImpactCalculator(animal_store)

    with pytest.raises(ValueError):
        calculator.calculate_menu_animals_saved([MenuItemRequest(recipe_name="Crêpes")])


def test_keyword_inside_longer_word_still_maps():
    assert map_ingredient_to_animal_product("laitue") == "dairy"
