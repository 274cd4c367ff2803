"""
Tests for the text normalizer and numeric helpers.
"""

import math

import pytest

from veganizer.utils.helpers import (
    clean_ingredient_for_lookup,
    is_finite_number,
    match_keyword,
    normalize_ingredient_name,
    normalize_text,
    round_half_up,
)


@pytest.mark.parametrize("raw, expected", [
    ("Carottes", "carotte"),
    ("BŒUF Bourguignon", "boeuf bourguignon"),
    ("boeuf bourguignon", "boeuf bourguignon"),
    ("  Crème   Fraîche ", "creme fraiche"),
    ("Pommes de terre", "pomme de terre"),
    ("Pois chiches", "pois chiche"),
    ("Tarte aux pommes", "tarte aux pomme"),
    ("", ""),
])
def test_normalize_text(raw, expected):
    assert normalize_text(raw) == expected


@pytest.mark.parametrize("raw", [
    "Bœuf bourguignon",
    "Pommes de terre nouvelles",
    "Crème fraîche épaisse, 30% MG",
    "3 Œufs frais!",
    "champignons de Paris",
])
def test_normalize_text_is_idempotent(raw):
    once = normalize_text(raw)
    assert normalize_text(once) == once

    stripped = normalize_ingredient_name(raw)
    assert normalize_ingredient_name(stripped) == stripped


def test_plural_folding_only_on_whole_words():
    # "courgettes" folds, but a longer word containing it does not
    assert normalize_text("courgettes") == "courgette"
    assert normalize_text("mini-courgettesx") == "mini-courgettesx"


def test_normalize_ingredient_name_strips_quantities_and_punctuation():
    assert normalize_ingredient_name("200g de Bœuf!") == "g de boeuf"
    assert normalize_ingredient_name("123") == ""


def test_clean_ingredient_for_lookup_removes_noise():
    assert clean_ingredient_for_lookup("Seitan entier bio 🌱 Voir sur Amazon") == "Seitan"
    assert clean_ingredient_for_lookup("Tomates fraîches") == "Tomates fraîches"
    assert clean_ingredient_for_lookup("Carottes biologiques") == "Carottes"


def test_match_keyword_prefers_exact_then_longest():
    keywords = {"creme": "short", "creme fraiche": "long"}
    assert match_keyword("Crème fraîche épaisse", keywords) == ("creme fraiche", "long")
    assert match_keyword("crème", keywords) == ("creme", "short")


def test_match_keyword_direction():
    keywords = {"volaille": "chicken"}
    assert match_keyword("ail", keywords, bidirectional=False) is None
    assert match_keyword("ail", keywords, bidirectional=True) == ("volaille", "chicken")
    assert match_keyword("", keywords) is None


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(17.6, 1) == 17.6
    assert round_half_up(-2.5) == -2


def test_is_finite_number():
    assert is_finite_number(1.5)
    assert not is_finite_number(math.nan)
    assert not is_finite_number(math.inf)
    assert not is_finite_number(None)
