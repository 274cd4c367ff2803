"""
Nutrition aggregation with supplement augmentation.

This module looks up a nutrition record for every ingredient of a recipe,
sums the values into recipe totals and recommends supplements for the
nutrients a vegan version is likely to lack.

Record lookup is best effort:
1. Exact normalized name ("tofu nature")
2. Name prefix, for compound table entries ("poulet" -> "Poulet, viande, crue")
3. Substring, preferring entries that are not prepared dishes
If nothing matches, fixed default values are used for that ingredient so
the aggregation never fails.

Supplement policy (applied to the base vegan totals):
- B12 and Omega-3 are always recommended
- Iron below 6mg, zinc below 6mg, calcium below 350mg and proteins
  below 15g each add the matching supplement
"""

import logging
from typing import Dict, List, Optional, Sequence

from veganizer.config import settings
from veganizer.models.nutrition import (
    NutritionComparison,
    NutritionRecord,
    NutritionTotals,
    Supplement,
)
from veganizer.repositories.base import NutritionStore, SupplementStore
from veganizer.utils.constants import (
    ALWAYS_RECOMMENDED_SUPPLEMENTS,
    COMPOSITE_DISH_KEYWORDS,
    DEFAULT_INGREDIENT_NUTRITION,
    DEFICIENCY_SUPPLEMENTS,
    NUTRIENT_FIELDS,
    NUTRITION_TOTAL_PRECISION,
    SUPPLEMENT_TOTAL_PRECISION,
)
from veganizer.utils.helpers import (
    clean_ingredient_for_lookup,
    normalize_text,
    round_half_up,
)

# Configure logging
logger = logging.getLogger(__name__)


def _round_totals(totals: Dict[str, float], precision: Dict[str, int]) -> NutritionTotals:
    """Round raw sums field by field into a NutritionTotals."""
    return NutritionTotals(**{
        field: round_half_up(totals.get(field, 0.0), precision[field])
        for field in NUTRIENT_FIELDS
    })


def is_composite_dish(record_name: str) -> bool:
    """Whether a nutrition entry describes a prepared dish rather than an ingredient."""
    name = normalize_text(record_name)
    return any(keyword in name for keyword in COMPOSITE_DISH_KEYWORDS)


class NutritionAggregator:
    """
    Sums ingredient nutrition and selects supplements.

    Attributes:
        nutrition: Read-only nutrition record store
        supplements: Read-only supplement store
        portion_grams: Default portion per ingredient (grams)
    """

    def __init__(
        self,
        nutrition: NutritionStore,
        supplements: SupplementStore,
        portion_grams: Optional[float] = None
    ):
        """
        Initialize the aggregator.

        Args:
            nutrition: Nutrition record store
            supplements: Supplement store
            portion_grams: Default portion per ingredient; settings value if None
        """
        self.nutrition = nutrition
        self.supplements = supplements
        self.portion_grams = portion_grams or settings.DEFAULT_PORTION_GRAMS

        logger.info(f"NutritionAggregator initialized with {self.portion_grams}g portions")

    # ==================== Record lookup ====================

    def find_record(self, ingredient: str) -> Optional[NutritionRecord]:
        """
        Find the nutrition record of an ingredient.

        Args:
            ingredient: Ingredient as written in a recipe

        Returns:
            Optional[NutritionRecord]: Best matching record or None
        """
        cleaned = clean_ingredient_for_lookup(ingredient)
        name = normalize_text(cleaned)
        if not name:
            return None

        record = self.nutrition.get_by_name(cleaned)
        if record:
            return record

        records = self.nutrition.all()

        for candidate in records:
            candidate_name = normalize_text(candidate.name)
            if candidate_name.startswith(f"{name},") or candidate_name.startswith(f"{name} "):
                logger.debug(f"Prefix nutrition match for '{ingredient}': {candidate.name}")
                return candidate

        hits = [c for c in records if name in normalize_text(c.name)]
        if not hits:
            return None

        simple = [c for c in hits if not is_composite_dish(c.name)]
        match = simple[0] if simple else hits[0]
        logger.debug(f"Substring nutrition match for '{ingredient}': {match.name}")
        return match

    # ==================== Totals ====================

    def calculate_totals(
        self,
        ingredients: Sequence[str],
        portions: Optional[Sequence[Optional[float]]] = None
    ) -> NutritionTotals:
        """
        Sum the nutrition of an ingredient list.

        Record values are per 100g and scaled to the ingredient's portion.
        Ingredients without a record add the fixed defaults once, whatever
        their portion.

        Args:
            ingredients: Ingredient names
            portions: Optional grams per ingredient (default portion if missing)

        Returns:
            NutritionTotals: Totals, whole units except iron and zinc (1 decimal)
        """
        totals = {field: 0.0 for field in NUTRIENT_FIELDS}

        for i, ingredient in enumerate(ingredients):
            portion = self.portion_grams
            if portions is not None and i < len(portions) and portions[i] is not None:
                portion = portions[i]

            record = self.find_record(ingredient)
            if record:
                factor = portion / 100
                for field in NUTRIENT_FIELDS:
                    totals[field] += (getattr(record, field) or 0.0) * factor
            else:
                logger.warning(f"No nutrition data for '{ingredient}', using defaults")
                for field in NUTRIENT_FIELDS:
                    totals[field] += DEFAULT_INGREDIENT_NUTRITION[field]

        return _round_totals(totals, NUTRITION_TOTAL_PRECISION)

    # ==================== Supplements ====================

    def recommend_supplements(self, vegan_totals: NutritionTotals) -> List[Supplement]:
        """
        Select supplements for the base vegan totals.

        Supplements missing from the store are skipped.

        Args:
            vegan_totals: Vegan totals before any supplement

        Returns:
            List[Supplement]: Zero to six supplements, always-recommended first
        """
        names = list(ALWAYS_RECOMMENDED_SUPPLEMENTS)
        for nutrient, threshold, supplement_name in DEFICIENCY_SUPPLEMENTS:
            if getattr(vegan_totals, nutrient) < threshold:
                names.append(supplement_name)

        recommended = []
        for name in names:
            supplement = self.supplements.get_by_name(name)
            if supplement is None:
                logger.warning(f"Supplement '{name}' not found in reference data")
                continue
            recommended.append(supplement)

        logger.debug(f"Recommended supplements: {[s.name for s in recommended]}")
        return recommended

    @staticmethod
    def supplement_contribution(supplements: Sequence[Supplement]) -> NutritionTotals:
        """Sum the per-serving nutrition of the given supplements."""
        totals = {field: 0.0 for field in NUTRIENT_FIELDS}
        for supplement in supplements:
            for field in NUTRIENT_FIELDS:
                totals[field] += getattr(supplement, field) or 0.0
        return _round_totals(totals, SUPPLEMENT_TOTAL_PRECISION)

    # ==================== Comparison ====================

    def compare(
        self,
        original_ingredients: Sequence[str],
        vegan_ingredients: Sequence[str],
        original_portions: Optional[Sequence[Optional[float]]] = None,
        vegan_portions: Optional[Sequence[Optional[float]]] = None
    ) -> NutritionComparison:
        """
        Compare original nutrition against vegan nutrition plus supplements.

        Args:
            original_ingredients: Ingredients of the original recipe
            vegan_ingredients: Ingredients of the vegan recipe
            original_portions: Optional grams per original ingredient
            vegan_portions: Optional grams per vegan ingredient

        Returns:
            NutritionComparison: ``vegan`` includes the supplement contribution
        """
        original = self.calculate_totals(original_ingredients, original_portions)
        base_vegan = self.calculate_totals(vegan_ingredients, vegan_portions)

        supplements = self.recommend_supplements(base_vegan)
        contribution = self.supplement_contribution(supplements)

        vegan = _round_totals(
            {
                field: getattr(base_vegan, field) + getattr(contribution, field)
                for field in NUTRIENT_FIELDS
            },
            SUPPLEMENT_TOTAL_PRECISION
        )

        logger.info(
            f"Nutrition: original {original.calories} kcal, vegan {vegan.calories} kcal, "
            f"{len(supplements)} supplements"
        )

        return NutritionComparison(
            original=original,
            vegan=vegan,
            supplements=supplements,
            supplement_contribution=contribution,
        )
