"""
Tests for nutrition lookup, aggregation and supplement selection.
"""

from veganizer.models.nutrition import NutritionRecord, NutritionTotals
from veganizer.repositories.memory import InMemoryNutritionStore, InMemorySupplementStore
from veganizer.data import reference_data as seed
from veganizer.services.nutrition_aggregator import NutritionAggregator, is_composite_dish


def test_singleton_exact_record_equals_record_values(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store, portion_grams=100)

    totals = aggregator.calculate_totals(["Tofu nature"])

    assert totals == NutritionTotals(
        calories=138, proteins=13, carbs=2, fats=9,
        fiber=1, calcium=340, iron=2.7, zinc=1.6,
    )


def test_portion_scales_record_values(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    totals = aggregator.calculate_totals(["Tofu nature"], portions=[200])

    assert totals.calories == 276
    assert totals.calcium == 680


def test_prefix_match_finds_compound_entry(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    assert aggregator.find_record("poulet").name == "Poulet, viande, crue"


def test_substring_match_skips_prepared_dishes(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    assert aggregator.find_record("carottes").name == "Jus de carotte"


def test_substring_match_falls_back_to_prepared_dish(supplement_store):
    store = InMemoryNutritionStore([NutritionRecord(name="Soupe de carotte", calories=30)])
    aggregator = NutritionAggregator(store, supplement_store)

    assert aggregator.find_record("carotte").name == "Soupe de carotte"


def test_lookup_ignores_cosmetic_noise(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    assert aggregator.find_record("Tofu nature bio").name == "Tofu nature"


def test_missing_record_uses_defaults(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    totals = aggregator.calculate_totals(["ingrédient mystère", "autre inconnu"])

    assert totals == NutritionTotals(
        calories=300, proteins=16, carbs=30, fats=10,
        fiber=6, calcium=100, iron=4, zinc=2,
    )


def test_missing_nutrients_count_as_zero(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    totals = aggregator.calculate_totals(["Eau de source"])

    assert totals == NutritionTotals()


def test_empty_list_gives_zero_totals(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    assert aggregator.calculate_totals([]) == NutritionTotals()


def test_composite_dish_detection():
    assert is_composite_dish("Salade composée au poulet")
    assert is_composite_dish("Pâtes à la bolognaise")
    assert not is_composite_dish("Poulet, viande, crue")


def test_b12_and_omega3_always_recommended(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)
    rich = NutritionTotals(proteins=40, calcium=900, iron=12, zinc=10)

    names = [s.name for s in aggregator.recommend_supplements(rich)]

    assert names == ["Vitamine B12 Vegan", "Omega 3 Vegan"]


def test_iron_deficiency_adds_iron_supplement(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)
    low_iron = NutritionTotals(proteins=40, calcium=900, iron=2.0, zinc=10)

    names = [s.name for s in aggregator.recommend_supplements(low_iron)]

    assert names == ["Vitamine B12 Vegan", "Omega 3 Vegan", "Fer bisglycinate"]


def test_thresholds_are_strict(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)
    at_threshold = NutritionTotals(proteins=15, calcium=350, iron=6, zinc=6)

    assert len(aggregator.recommend_supplements(at_threshold)) == 2


def test_every_deficiency_recommends_six_supplements(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    names = [s.name for s in aggregator.recommend_supplements(NutritionTotals())]

    assert names == [
        "Vitamine B12 Vegan",
        "Omega 3 Vegan",
        "Fer bisglycinate",
        "Zinc bisglycinate",
        "Calcium + Vitamine D3",
        "Spiruline",
    ]


def test_missing_supplement_record_is_skipped(nutrition_store):
    only_b12 = InMemorySupplementStore([seed.SUPPLEMENTS[0]])
    aggregator = NutritionAggregator(nutrition_store, only_b12)

    names = [s.name for s in aggregator.recommend_supplements(NutritionTotals())]

    assert names == ["Vitamine B12 Vegan"]


def test_vegan_totals_include_supplements(nutrition_store, supplement_store):
    aggregator = NutritionAggregator(nutrition_store, supplement_store)

    comparison = aggregator.compare(["Poulet, viande, crue"], ["Tofu nature"])

    assert comparison.original.calories == 121
    assert "Fer bisglycinate" in [s.name for s in comparison.supplements]
    assert len(comparison.supplements) == 6
    assert comparison.supplement_contribution.calories == 21
    assert comparison.supplement_contribution.calcium == 504
    assert comparison.vegan.calories == 159
    assert comparison.vegan.calcium == 844
    assert comparison.vegan.iron == 17.6
