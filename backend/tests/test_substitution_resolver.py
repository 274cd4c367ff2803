"""
Tests for the substitution resolver.
"""

from veganizer.models.recipe import IngredientSlot
from veganizer.models.substitution import SubstitutionRule
from veganizer.repositories.memory import InMemorySubstitutionStore
from veganizer.services.substitution_resolver import SubstitutionResolver


def test_exact_rule_ignores_case_and_accents(substitution_store):
    resolver = SubstitutionResolver(substitution_store)

    assert resolver.find_rule("beurre").vegan_substitute == "beurre végétal"
    assert resolver.find_rule("BŒUF").vegan_substitute == "haché végétal ou seitan"
    assert resolver.find_rule("boeuf").vegan_substitute == "haché végétal ou seitan"


def test_singular_and_plural_egg_rules_stay_distinct(substitution_store):
    resolver = SubstitutionResolver(substitution_store)

    assert resolver.find_rule("œuf").vegan_substitute == "substitut d'œuf ou aquafaba"
    assert resolver.find_rule("œufs").vegan_substitute == "fécule de maïs + eau"


def test_partial_rule_with_quantity(substitution_store):
    resolver = SubstitutionResolver(substitution_store)

    ingredient = resolver.resolve("200g de beurre")

    assert ingredient.name == "beurre végétal"
    assert ingredient.is_substituted is True
    assert ingredient.substitution == "remplace 200g de beurre"
    assert ingredient.ratio == 1.0


def test_longest_rule_wins_regardless_of_table_order():
    lait = SubstitutionRule(original_ingredient="lait", vegan_substitute="lait végétal")
    creme = SubstitutionRule(original_ingredient="crème fraîche", vegan_substitute="crème de soja")

    for rules in ([lait, creme], [creme, lait]):
        resolver = SubstitutionResolver(InMemorySubstitutionStore(rules))
        rule = resolver.find_rule("crème fraîche au lait")
        assert rule.vegan_substitute == "crème de soja"


def test_equal_length_rules_keep_table_order():
    porc = SubstitutionRule(original_ingredient="porc", vegan_substitute="tempeh")
    veau = SubstitutionRule(original_ingredient="veau", vegan_substitute="haché végétal")
    resolver = SubstitutionResolver(InMemorySubstitutionStore([porc, veau]))

    assert resolver.find_rule("veau et porc").vegan_substitute == "tempeh"


def test_unmatched_ingredient_passes_through(substitution_store):
    resolver = SubstitutionResolver(substitution_store)

    ingredient = resolver.resolve("carottes")

    assert ingredient.name == "carottes"
    assert ingredient.is_substituted is False
    assert ingredient.substitution is None


def test_digits_only_ingredient_passes_through(substitution_store):
    resolver = SubstitutionResolver(substitution_store)

    assert resolver.find_rule("123") is None
    assert resolver.resolve("123").name == "123"


def test_stored_vegan_ingredient_wins(substitution_store):
    resolver = SubstitutionResolver(substitution_store)

    replaced = resolver.resolve("bœuf", vegan="seitan", is_vegan=False)
    assert replaced.name == "seitan"
    assert replaced.is_substituted is True
    assert replaced.substitution == "remplace bœuf"

    kept = resolver.resolve("carottes", vegan="carottes", is_vegan=True)
    assert kept.is_substituted is False
    assert kept.substitution is None


def test_slot_vegan_ingredient_is_never_shifted(substitution_store):
    resolver = SubstitutionResolver(substitution_store)
    slots = [
        IngredientSlot(original="lardons", vegan=None, is_vegan=False),
        IngredientSlot(original=None, vegan=None),
        IngredientSlot(original="œufs", vegan="tofu soyeux", is_vegan=False),
    ]

    resolved = resolver.resolve_slots(slots)

    assert [i.name for i in resolved] == ["lardons", "tofu soyeux"]
    assert resolved[0].is_substituted is False
    assert resolved[1].substitution == "remplace œufs"


def test_containment_matches_inside_unrelated_words(substitution_store):
    # Two-way containment: "eau" sits inside "veau", "lait" inside "laitue"
    resolver = SubstitutionResolver(substitution_store)

    assert resolver.find_rule("eau").original_ingredient == "veau"
    assert resolver.resolve("eau").name == "haché végétal"
    assert resolver.find_rule("laitue").original_ingredient == "lait"
