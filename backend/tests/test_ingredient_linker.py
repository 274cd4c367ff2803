"""
Tests for the ingredient linking report.
"""

import pytest

from veganizer.services.ingredient_linker import IngredientLinker, is_vegan_substitute_or_processed


@pytest.fixture
def linker(reference_data):
    return IngredientLinker(
        reference_data.recipes, reference_data.substitutions, reference_data.nutrition
    )


@pytest.mark.parametrize("ingredient, record_name, match_type", [
    ("vin rouge", "Vin rouge", "exact"),
    ("carottes", "Carotte, crue", "partial"),
    ("crème fraîche", "Crème fraîche épaisse, 30% MG", "partial"),
    ("œufs", "Oeuf, cru", "alias"),
    ("seitan", None, "skipped"),
    ("beurre végétal", None, "skipped"),
    ("quelque chose", None, "none"),
])
def test_find_match(linker, ingredient, record_name, match_type):
    record, found_type = linker.find_match(ingredient)

    assert found_type == match_type
    assert (record.name if record else None) == record_name


def test_processed_detection():
    assert is_vegan_substitute_or_processed("Tofu fumé")
    assert is_vegan_substitute_or_processed("lardons végétaux")
    assert not is_vegan_substitute_or_processed("carottes")


def test_report_counts(linker):
    report = linker.build_report()

    assert report.stats.substitution_ingredients.total == 34
    assert report.stats.recipe_ingredients.total == 72
    assert 0 < report.stats.recipe_ingredients.linked <= 72
    assert len(report.links) == 34 + 72


def test_report_fields(linker):
    report = linker.build_report()

    bourguignon = [link for link in report.links if link.owner == "Bœuf bourguignon"]
    assert bourguignon[0].field == "ingredient_1"
    assert bourguignon[1].field == "ingredient_vegan_1"
    assert bourguignon[1].match_type == "skipped"

    rules = [link for link in report.links if link.source == "substitution" and link.owner == "lait"]
    assert [link.field for link in rules] == ["original", "vegan_substitute"]


def test_report_leaves_stores_untouched(reference_data, linker):
    before = [r.model_dump() for r in reference_data.recipes.all()]

    linker.build_report()

    assert [r.model_dump() for r in reference_data.recipes.all()] == before
