"""
Climate impact calculator.

This module maps ingredients to canonical climate product categories
("beef", "tofu", "vegetables"...), multiplies the per-kg metrics of the
category by the ingredient portion and compares the original recipe with
the vegan recipe plus its recommended supplements.

Reductions are always finite integers. Whenever a percentage cannot be
computed (zero original impact, NaN, infinity) literature-based values are
returned instead: 65% CO2, 78% water, 83% land.
"""

import logging
from typing import Optional, Sequence

from veganizer.config import settings
from veganizer.models.impact import (
    ClimateComparison,
    ClimateDetails,
    ClimateMetrics,
    ImpactTotals,
    IngredientImpact,
)
from veganizer.models.nutrition import Supplement
from veganizer.repositories.base import ClimateStore
from veganizer.utils.constants import (
    CLIMATE_CATEGORY_KEYWORDS,
    DEFAULT_CLIMATE_CATEGORY,
    DEFAULT_INGREDIENT_CLIMATE,
    FALLBACK_REDUCTIONS,
    VEGAN_CLIMATE_ALTERNATIVES,
)
from veganizer.utils.helpers import is_finite_number, match_keyword, round_half_up

# Configure logging
logger = logging.getLogger(__name__)


def reduction_percentage(original: float, vegan: float, fallback: int) -> int:
    """
    Percentage reduction from original to vegan, rounded half up.

    Args:
        original: Original total
        vegan: Vegan total
        fallback: Value returned when the percentage is not computable

    Returns:
        int: ``(original - vegan) / original * 100`` or ``fallback``
    """
    if not is_finite_number(original) or original == 0:
        return fallback

    percentage = (original - vegan) / original * 100
    if not is_finite_number(percentage):
        logger.warning(f"Invalid reduction ({original} -> {vegan}), using {fallback}%")
        return fallback

    return int(round_half_up(percentage))


def _round_impact_totals(co2: float, water: float, land: float, biodiversity: float) -> ImpactTotals:
    return ImpactTotals(
        total_co2=round_half_up(co2, 2),
        total_water=round_half_up(water),
        total_land=round_half_up(land, 2),
        total_biodiversity=round_half_up(biodiversity, 2),
    )


class ClimateImpactCalculator:
    """
    Computes CO2, water, land and biodiversity figures for ingredient lists.

    Attributes:
        climate: Read-only climate metrics store
        portion_kg: Default portion per ingredient (kg)
    """

    def __init__(self, climate: ClimateStore, portion_kg: Optional[float] = None):
        self.climate = climate
        self.portion_kg = portion_kg or settings.DEFAULT_PORTION_KG
        logger.info(f"ClimateImpactCalculator initialized with {self.portion_kg}kg portions")

    def map_category(self, ingredient: str) -> str:
        """
        Map an ingredient to its climate product category.

        Args:
            ingredient: Ingredient name

        Returns:
            str: Category, "vegetables" when nothing matches
        """
        match = match_keyword(ingredient, CLIMATE_CATEGORY_KEYWORDS, bidirectional=True)
        if match:
            return match[1]
        return DEFAULT_CLIMATE_CATEGORY

    def _impact_from_metrics(self, metrics: ClimateMetrics, portion_kg: float) -> IngredientImpact:
        return IngredientImpact(
            co2_kg=round_half_up(metrics.co2_kg_per_kg * portion_kg, 2),
            water_l=round_half_up(metrics.water_l_per_kg * portion_kg),
            land_m2=round_half_up(metrics.land_m2_per_kg * portion_kg, 2),
            biodiversity_score=round_half_up(metrics.biodiversity_impact, 2),
        )

    def ingredient_impact(
        self,
        ingredient: str,
        portion_kg: Optional[float] = None
    ) -> Optional[IngredientImpact]:
        """
        Impact of one ingredient portion.

        Args:
            ingredient: Ingredient name
            portion_kg: Portion in kg (default portion if None)

        Returns:
            Optional[IngredientImpact]: Impact, or None when the category has no metrics
        """
        category = self.map_category(ingredient)
        metrics = self.climate.get_metrics(category)
        if metrics is None:
            logger.warning(f"No climate metrics for category '{category}' ({ingredient})")
            return None

        portion = self.portion_kg if portion_kg is None else portion_kg
        return self._impact_from_metrics(metrics, portion)

    def vegan_alternative_impact(self, original_ingredient: str) -> Optional[IngredientImpact]:
        """
        Impact of the plant-based category usually replacing an animal ingredient.

        Args:
            original_ingredient: Animal-derived ingredient (e.g. "poulet")

        Returns:
            Optional[IngredientImpact]: Alternative's impact, or None when the
                ingredient has no known plant-based counterpart
        """
        match = match_keyword(original_ingredient, CLIMATE_CATEGORY_KEYWORDS, bidirectional=True)
        if not match:
            return None

        alternative = VEGAN_CLIMATE_ALTERNATIVES.get(match[1])
        if alternative is None:
            return None

        metrics = self.climate.get_metrics(alternative)
        if metrics is None:
            return None

        return self._impact_from_metrics(metrics, self.portion_kg)

    def calculate_totals(
        self,
        ingredients: Sequence[str],
        portions: Optional[Sequence[Optional[float]]] = None
    ) -> ImpactTotals:
        """
        Sum the impact of an ingredient list.

        Args:
            ingredients: Ingredient names
            portions: Optional kg per ingredient

        Returns:
            ImpactTotals: CO2 and land to 2 decimals, water to whole litres
        """
        co2 = water = land = biodiversity = 0.0

        for i, ingredient in enumerate(ingredients):
            portion = None
            if portions is not None and i < len(portions):
                portion = portions[i]

            impact = self.ingredient_impact(ingredient, portion)
            if impact:
                co2 += impact.co2_kg
                water += impact.water_l
                land += impact.land_m2
                biodiversity += impact.biodiversity_score
            else:
                co2 += DEFAULT_INGREDIENT_CLIMATE["co2_kg"]
                water += DEFAULT_INGREDIENT_CLIMATE["water_l"]
                land += DEFAULT_INGREDIENT_CLIMATE["land_m2"]

        return _round_impact_totals(co2, water, land, biodiversity)

    @staticmethod
    def supplement_impact(supplements: Sequence[Supplement]) -> ImpactTotals:
        """Sum the per-serving impact of all supplements."""
        return _round_impact_totals(
            sum(s.co2_kg_per_serving or 0.0 for s in supplements),
            sum(s.water_l_per_serving or 0.0 for s in supplements),
            sum(s.land_m2_per_serving or 0.0 for s in supplements),
            sum(s.biodiversity_impact or 0.0 for s in supplements),
        )

    def compare(
        self,
        original_ingredients: Sequence[str],
        vegan_ingredients: Sequence[str],
        supplements: Sequence[Supplement] = (),
        original_portions: Optional[Sequence[Optional[float]]] = None,
        vegan_portions: Optional[Sequence[Optional[float]]] = None
    ) -> ClimateComparison:
        """
        Compare the original recipe with the vegan recipe plus supplements.

        Args:
            original_ingredients: Ingredients of the original recipe
            vegan_ingredients: Ingredients of the vegan recipe
            supplements: Recommended supplements (their impact is added to the vegan side)
            original_portions: Optional kg per original ingredient
            vegan_portions: Optional kg per vegan ingredient

        Returns:
            ClimateComparison: Integer reductions plus the totals behind them
        """
        original = self.calculate_totals(original_ingredients, original_portions)
        base_vegan = self.calculate_totals(vegan_ingredients, vegan_portions)
        supplement_totals = self.supplement_impact(supplements)

        vegan = _round_impact_totals(
            base_vegan.total_co2 + supplement_totals.total_co2,
            base_vegan.total_water + supplement_totals.total_water,
            base_vegan.total_land + supplement_totals.total_land,
            base_vegan.total_biodiversity + supplement_totals.total_biodiversity,
        )

        comparison = ClimateComparison(
            co2_reduction=reduction_percentage(
                original.total_co2, vegan.total_co2, FALLBACK_REDUCTIONS["co2"]
            ),
            water_saving=reduction_percentage(
                original.total_water, vegan.total_water, FALLBACK_REDUCTIONS["water"]
            ),
            land_saving=reduction_percentage(
                original.total_land, vegan.total_land, FALLBACK_REDUCTIONS["land"]
            ),
            details=ClimateDetails(original=original, vegan=vegan, supplements=supplement_totals),
        )

        logger.info(
            f"Climate: CO2 -{comparison.co2_reduction}%, water -{comparison.water_saving}%, "
            f"land -{comparison.land_saving}%"
        )
        return comparison
