"""
Pydantic models for the conversion result.

A ConversionResult is built fresh on every request and never stored by
the pipeline; callers may persist its JSON dump (e.g. as a favorite).
"""

from pydantic import BaseModel, Field
from typing import List

from veganizer.models.impact import AnimalSavingsCalculation, ClimateComparison
from veganizer.models.nutrition import NutritionComparison
from veganizer.models.recipe import OriginalRecipe, VeganRecipe


class ShoppingList(BaseModel):
    """
    Vegan ingredients grouped by shop aisle, with a rough cost estimate.

    Attributes:
        fruits_vegetables: Fresh produce
        proteins: Plant proteins (tofu, seitan, legumes...)
        dry_goods: Everything else
        alternatives: Dairy-style swaps (plant milk, vegan butter...)
        estimated_cost: Ingredient count times the average cost (EUR)
        savings: Estimated savings compared to the omnivore recipe (EUR)
    """
    fruits_vegetables: List[str] = Field(default_factory=list)
    proteins: List[str] = Field(default_factory=list)
    dry_goods: List[str] = Field(default_factory=list)
    alternatives: List[str] = Field(default_factory=list)
    estimated_cost: float = Field(0.0, ge=0)
    savings: float = Field(0.0, ge=0)


class ConversionResult(BaseModel):
    """
    Complete comparison between an omnivore recipe and its vegan version.

    Attributes:
        original_recipe: Omnivore recipe as found (or synthesized)
        vegan_recipe: Vegan recipe with substitution annotations
        nutrition_comparison: Nutrition totals, supplements included
        climate_comparison: CO2 / water / land reductions
        animal_savings: Animals spared by the original ingredients
        shopping_list: Categorized vegan shopping list
        substitution_count: Number of vegan ingredients flagged as substituted
    """
    original_recipe: OriginalRecipe
    vegan_recipe: VeganRecipe
    nutrition_comparison: NutritionComparison
    climate_comparison: ClimateComparison
    animal_savings: AnimalSavingsCalculation
    shopping_list: ShoppingList
    substitution_count: int = Field(0, ge=0)
