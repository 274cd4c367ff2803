"""
Animal impact calculator.

Estimates how many animals the ORIGINAL ingredients of a recipe would have
cost, and how many years of life that represents. Vegan ingredients play no
part in the calculation.

Ingredients are mapped to an animal product type (beef, pork, chicken, fish,
dairy, eggs) by exact keyword first, then by a keyword contained in the
ingredient. The reverse direction is never used, so "ail" does not match
"volaille".
"""

import logging
from typing import Optional, Sequence

from veganizer.config import settings
from veganizer.models.impact import (
    AnimalBreakdown,
    AnimalImpactRecord,
    AnimalSavingsCalculation,
    AnimalSavingsDetail,
)
from veganizer.models.recipe import MenuItemRequest
from veganizer.repositories.base import AnimalImpactStore, RecipeStore
from veganizer.utils.constants import (
    ANIMAL_BREAKDOWN_FIELDS,
    ANIMAL_PRODUCT_KEYWORDS,
    DAYS_PER_YEAR,
)
from veganizer.utils.helpers import match_keyword, round_half_up

# Configure logging
logger = logging.getLogger(__name__)


def map_ingredient_to_animal_product(ingredient: str) -> Optional[str]:
    """
    Map an ingredient to its animal product type.

    Args:
        ingredient: Ingredient name (e.g. "Escalope de poulet")

    Returns:
        Optional[str]: Product type (e.g. "chicken") or None

    Example:
        >>> map_ingredient_to_animal_product("bœuf")
        "beef"
        >>> map_ingredient_to_animal_product("ail")
        None
    """
    match = match_keyword(ingredient, ANIMAL_PRODUCT_KEYWORDS, bidirectional=False)
    return match[1] if match else None


def life_years_saved(animal_count: float, record: AnimalImpactRecord) -> float:
    """
    Years of life lost by the animals, natural lifespan minus age at slaughter.

    Returns 0 when the record lacks lifespan data.
    """
    if not record.lifespan_days or not record.actual_age_at_death_days:
        return 0.0

    natural_years = record.lifespan_days / DAYS_PER_YEAR
    actual_years = record.actual_age_at_death_days / DAYS_PER_YEAR
    return animal_count * (natural_years - actual_years)


class AnimalImpactCalculator:
    """
    Computes animals spared for recipes and menus.

    Attributes:
        animals: Read-only animal impact store
        recipes: Recipe store, needed for menu calculations only
        portion_kg: Default quantity per ingredient (kg)
    """

    def __init__(
        self,
        animals: AnimalImpactStore,
        recipes: Optional[RecipeStore] = None,
        portion_kg: Optional[float] = None
    ):
        self.animals = animals
        self.recipes = recipes
        self.portion_kg = portion_kg or settings.DEFAULT_PORTION_KG
        logger.info(f"AnimalImpactCalculator initialized with {self.portion_kg}kg portions")

    def calculate_animals_saved(
        self,
        original_ingredients: Sequence[str],
        vegan_ingredients: Sequence[str] = (),
        quantities: Optional[Sequence[Optional[float]]] = None
    ) -> AnimalSavingsCalculation:
        """
        Animals spared by replacing the original ingredients.

        Args:
            original_ingredients: Ingredients of the omnivore recipe
            vegan_ingredients: Accepted for symmetry with the other
                calculators; not used
            quantities: Optional kg per original ingredient (default portion if missing)

        Returns:
            AnimalSavingsCalculation: Totals and details rounded to 2 decimals,
                details in input order
        """
        result = AnimalSavingsCalculation()
        if not original_ingredients:
            return result

        total_animals = 0.0
        total_life_years = 0.0

        for i, ingredient in enumerate(original_ingredients):
            quantity = self.portion_kg
            if quantities is not None and i < len(quantities) and quantities[i] is not None:
                quantity = quantities[i]

            product_type = map_ingredient_to_animal_product(ingredient)
            if product_type is None:
                continue

            record = self.animals.get_by_product(product_type)
            if record is None:
                logger.warning(f"No animal impact data for product '{product_type}'")
                continue

            animal_count = quantity * record.animals_per_kg
            years = life_years_saved(animal_count, record)

            total_animals += animal_count
            total_life_years += years

            field = ANIMAL_BREAKDOWN_FIELDS.get(record.animal_type)
            if field:
                setattr(
                    result.animal_breakdown,
                    field,
                    getattr(result.animal_breakdown, field) + animal_count
                )

            result.details.append(AnimalSavingsDetail(
                animal_type=record.animal_type,
                animal_count=round_half_up(animal_count, 2),
                product_type=product_type,
                quantity_kg=quantity,
                life_years_saved=round_half_up(years, 2),
            ))
            logger.debug(f"{ingredient}: {animal_count:.4f} {record.animal_type}(s)")

        result.total_animals = round_half_up(total_animals, 2)
        result.life_years_saved = round_half_up(total_life_years, 2)

        logger.info(
            f"Animals saved: {result.total_animals} "
            f"({len(result.details)} animal ingredients)"
        )
        return result

    def calculate_menu_animals_saved(
        self,
        menu_items: Sequence[MenuItemRequest],
        timeframe_weeks: int = 1
    ) -> AnimalSavingsCalculation:
        """
        Animals spared by a whole menu over a number of weeks.

        Each recipe's animal ingredients count for the default portion times
        the item's servings times the number of weeks. Unknown recipes are
        skipped.

        Args:
            menu_items: Recipes of the menu with their servings
            timeframe_weeks: Number of weeks the menu is eaten

        Returns:
            AnimalSavingsCalculation: Sum over all menu items
        """
        if self.recipes is None:
            raise ValueError("A recipe store is required for menu calculations")

        aggregate = AnimalSavingsCalculation()
        total_animals = 0.0
        total_life_years = 0.0

        for item in menu_items:
            recipe = self.recipes.find(item.recipe_name)
            if recipe is None:
                logger.warning(f"Menu recipe '{item.recipe_name}' not found, skipping")
                continue

            multiplier = (item.servings or 1) * timeframe_weeks
            animal_ingredients = [
                ingredient for ingredient in recipe.original_ingredients()
                if map_ingredient_to_animal_product(ingredient) is not None
            ]
            quantities = [self.portion_kg * multiplier for _ in animal_ingredients]

            recipe_result = self.calculate_animals_saved(animal_ingredients, [], quantities)

            total_animals += recipe_result.total_animals
            total_life_years += recipe_result.life_years_saved
            for field in AnimalBreakdown.model_fields:
                setattr(
                    aggregate.animal_breakdown,
                    field,
                    getattr(aggregate.animal_breakdown, field)
                    + getattr(recipe_result.animal_breakdown, field)
                )
            aggregate.details.extend(recipe_result.details)

        aggregate.total_animals = round_half_up(total_animals, 2)
        aggregate.life_years_saved = round_half_up(total_life_years, 2)
        return aggregate
