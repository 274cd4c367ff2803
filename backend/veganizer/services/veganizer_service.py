"""
Recipe conversion orchestrator.

This module turns a recipe name into a complete omnivore vs vegan
comparison. It coordinates:
- Recipe lookup (exact name, then fuzzy search)
- Ingredient substitution
- Nutrition, climate and animal impact calculations
- Shopping list generation

Known recipes use their stored ingredient slots. Unknown recipes go through
the same pipeline on a generic five-ingredient template, so every request
yields a complete, well-typed result.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from veganizer.config import settings
from veganizer.models.conversion import ConversionResult, ShoppingList
from veganizer.models.impact import ClimateComparison
from veganizer.models.nutrition import Supplement
from veganizer.models.recipe import (
    OriginalRecipe,
    Recipe,
    RecipeSuggestion,
    VeganRecipe,
)
from veganizer.repositories.memory import ReferenceData
from veganizer.services.animal_impact import AnimalImpactCalculator
from veganizer.services.climate_impact import ClimateImpactCalculator
from veganizer.services.ingredient_linker import IngredientLinker
from veganizer.services.nutrition_aggregator import NutritionAggregator
from veganizer.services.substitution_resolver import SubstitutionResolver
from veganizer.utils.constants import (
    DEFAULT_KNOWN_RECIPE_SERVINGS,
    DEFAULT_ORIGINAL_COOKING_TIME,
    DEFAULT_ORIGINAL_DIFFICULTY,
    DEFAULT_UNKNOWN_RECIPE_SERVINGS,
    DEFAULT_VEGAN_COOKING_TIME,
    DEFAULT_VEGAN_DIFFICULTY,
    GENERIC_RECIPE_TEMPLATE,
    SHOPPING_ALTERNATIVE_KEYWORDS,
    SHOPPING_FRUIT_VEGETABLE_KEYWORDS,
    SHOPPING_PROTEIN_KEYWORDS,
    VEGAN_NAME_SUFFIX,
)
from veganizer.utils.helpers import normalize_text, round_half_up

# Configure logging
logger = logging.getLogger(__name__)

_FRUIT_VEGETABLE = [normalize_text(k) for k in SHOPPING_FRUIT_VEGETABLE_KEYWORDS]
_PROTEIN = [normalize_text(k) for k in SHOPPING_PROTEIN_KEYWORDS]
_ALTERNATIVE = [normalize_text(k) for k in SHOPPING_ALTERNATIVE_KEYWORDS]


class VeganizerService:
    """
    Main service converting recipes to their vegan version.

    Attributes:
        data: Reference data stores
        resolver: Substitution resolver
        nutrition: Nutrition aggregator
        climate: Climate impact calculator
        animals: Animal impact calculator
        linker: Ingredient linking report builder
        max_workers: Threads used for the calculator fan-out
    """

    def __init__(
        self,
        data: Optional[ReferenceData] = None,
        max_workers: Optional[int] = None
    ):
        """
        Initialize the service and its calculators.

        Args:
            data: Reference data stores; bundled seed data if None
            max_workers: Thread pool size; settings value if None
        """
        self.data = data or ReferenceData.from_seed()
        self.max_workers = max_workers or settings.MAX_WORKERS

        self.resolver = SubstitutionResolver(self.data.substitutions)
        self.nutrition = NutritionAggregator(self.data.nutrition, self.data.supplements)
        self.climate = ClimateImpactCalculator(self.data.climate)
        self.animals = AnimalImpactCalculator(self.data.animals, self.data.recipes)
        self.linker = IngredientLinker(
            self.data.recipes, self.data.substitutions, self.data.nutrition
        )

        logger.info("VeganizerService initialized successfully")

    # ==================== Conversion ====================

    def convert_recipe(self, recipe_name: str) -> ConversionResult:
        """
        Convert a recipe to its vegan version.

        Args:
            recipe_name: Recipe name, any casing or accents

        Returns:
            ConversionResult: Complete comparison

        Raises:
            ValueError: If the recipe name is empty
        """
        if not recipe_name or not recipe_name.strip():
            raise ValueError("Recipe name is required")

        recipe_name = recipe_name.strip()
        logger.info(f"Converting recipe: {recipe_name}")

        recipe = self.data.recipes.find(recipe_name)
        if recipe:
            logger.info(f"Found recipe '{recipe.name}'")
            return self._convert_known_recipe(recipe)

        logger.info(f"Recipe '{recipe_name}' not found, using generic template")
        return self._convert_unknown_recipe(recipe_name)

    def _convert_known_recipe(self, recipe: Recipe) -> ConversionResult:
        original_ingredients = recipe.original_ingredients()
        vegan_ingredients = self.resolver.resolve_slots(recipe.slots)

        original = OriginalRecipe(
            name=recipe.name,
            ingredients=original_ingredients,
            cooking_time=recipe.cooking_time or DEFAULT_ORIGINAL_COOKING_TIME,
            servings=recipe.servings or DEFAULT_KNOWN_RECIPE_SERVINGS,
            difficulty=recipe.difficulty or DEFAULT_ORIGINAL_DIFFICULTY,
        )
        vegan = VeganRecipe(
            name=recipe.vegan_name or f"{recipe.name} {VEGAN_NAME_SUFFIX}",
            ingredients=vegan_ingredients,
            cooking_time=recipe.cooking_time or DEFAULT_VEGAN_COOKING_TIME,
            servings=recipe.servings or DEFAULT_KNOWN_RECIPE_SERVINGS,
            difficulty=DEFAULT_VEGAN_DIFFICULTY,
        )
        return self._build_result(original, vegan)

    def _convert_unknown_recipe(self, recipe_name: str) -> ConversionResult:
        original_ingredients = list(GENERIC_RECIPE_TEMPLATE)
        vegan_ingredients = self.resolver.resolve_all(original_ingredients)

        original = OriginalRecipe(
            name=recipe_name,
            ingredients=original_ingredients,
            cooking_time=DEFAULT_ORIGINAL_COOKING_TIME,
            servings=DEFAULT_UNKNOWN_RECIPE_SERVINGS,
            difficulty=DEFAULT_ORIGINAL_DIFFICULTY,
        )
        vegan = VeganRecipe(
            name=f"{recipe_name} {VEGAN_NAME_SUFFIX}",
            ingredients=vegan_ingredients,
            cooking_time=DEFAULT_VEGAN_COOKING_TIME,
            servings=DEFAULT_UNKNOWN_RECIPE_SERVINGS,
            difficulty=DEFAULT_VEGAN_DIFFICULTY,
        )
        return self._build_result(original, vegan)

    def _build_result(self, original: OriginalRecipe, vegan: VeganRecipe) -> ConversionResult:
        """
        Run the calculators and assemble the comparison.

        Nutrition and animal impact run concurrently; climate waits for the
        nutrition result because the recommended supplements count on the
        vegan side.
        """
        original_names = original.ingredients
        vegan_names = [ingredient.name for ingredient in vegan.ingredients]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            nutrition_future = executor.submit(
                self.nutrition.compare, original_names, vegan_names
            )
            animals_future = executor.submit(
                self.animals.calculate_animals_saved, original_names, vegan_names
            )
            shopping_future = executor.submit(self.generate_shopping_list, vegan_names)

            nutrition_comparison = nutrition_future.result()
            climate_future = executor.submit(
                self.climate.compare,
                original_names,
                vegan_names,
                nutrition_comparison.supplements,
            )

            climate_comparison = climate_future.result()
            animal_savings = animals_future.result()
            shopping_list = shopping_future.result()

        substitution_count = sum(1 for i in vegan.ingredients if i.is_substituted)
        logger.info(
            f"Converted '{original.name}': {substitution_count} substitutions, "
            f"{animal_savings.total_animals} animals saved"
        )

        return ConversionResult(
            original_recipe=original,
            vegan_recipe=vegan,
            nutrition_comparison=nutrition_comparison,
            climate_comparison=climate_comparison,
            animal_savings=animal_savings,
            shopping_list=shopping_list,
            substitution_count=substitution_count,
        )

    # ==================== Shopping list ====================

    def generate_shopping_list(self, vegan_ingredients: Sequence[str]) -> ShoppingList:
        """
        Group vegan ingredients by aisle and estimate their cost.

        Categories are checked in order: fruits/vegetables, proteins,
        alternatives; anything else is a dry good.

        Args:
            vegan_ingredients: Final ingredients of the vegan recipe

        Returns:
            ShoppingList: Categorized ingredients, cost and savings (EUR, 2 decimals)
        """
        shopping = ShoppingList()

        for ingredient in vegan_ingredients:
            normalized = normalize_text(ingredient)
            if any(k in normalized for k in _FRUIT_VEGETABLE):
                shopping.fruits_vegetables.append(ingredient)
            elif any(k in normalized for k in _PROTEIN):
                shopping.proteins.append(ingredient)
            elif any(k in normalized for k in _ALTERNATIVE):
                shopping.alternatives.append(ingredient)
            else:
                shopping.dry_goods.append(ingredient)

        estimated_cost = len(vegan_ingredients) * settings.COST_PER_INGREDIENT
        shopping.estimated_cost = round_half_up(estimated_cost, 2)
        shopping.savings = round_half_up(estimated_cost * settings.SAVINGS_RATE, 2)
        return shopping

    # ==================== Search ====================

    def search_recipes(self, query: str) -> List[RecipeSuggestion]:
        """
        Search recipes for the autocomplete list.

        Args:
            query: Search text; shorter than the minimum length returns nothing

        Returns:
            List[RecipeSuggestion]: Name and "<time> • <servings> personnes • <difficulty>"
        """
        if not query or len(query.strip()) < settings.MIN_SEARCH_QUERY_LENGTH:
            return []

        recipes = self.data.recipes.search(query.strip(), limit=settings.RECIPE_SEARCH_LIMIT)
        return [
            RecipeSuggestion(
                name=recipe.name,
                description=(
                    f"{recipe.cooking_time or 'Temps variable'} • "
                    f"{recipe.servings or DEFAULT_UNKNOWN_RECIPE_SERVINGS} personnes • "
                    f"{recipe.difficulty or 'Difficulté moyenne'}"
                ),
            )
            for recipe in recipes
        ]

    def suggest_recipe_names(self, query: str, limit: Optional[int] = None) -> List[str]:
        """Recipe names matching a query, best matches first."""
        suggestions = self.search_recipes(query)
        if limit is not None:
            suggestions = suggestions[:limit]
        return [suggestion.name for suggestion in suggestions]

    # ==================== Standalone calculators ====================

    def resolve_supplements(self, names: Sequence[str]) -> List[Supplement]:
        """Look up supplements by name, skipping unknown names."""
        supplements = []
        for name in names:
            supplement = self.data.supplements.get_by_name(name)
            if supplement is None:
                logger.warning(f"Unknown supplement '{name}' ignored")
                continue
            supplements.append(supplement)
        return supplements

    def compare_climate_impact(
        self,
        original_ingredients: Sequence[str],
        vegan_ingredients: Sequence[str],
        supplement_names: Sequence[str] = ()
    ) -> ClimateComparison:
        """Climate comparison for free ingredient lists and named supplements."""
        return self.climate.compare(
            original_ingredients,
            vegan_ingredients,
            self.resolve_supplements(supplement_names),
        )

    def list_supplements(self) -> List[Supplement]:
        return self.data.supplements.all()

    def get_stats(self) -> Dict[str, int]:
        """
        Get reference data counts.

        Returns:
            Dict with recipe, substitution, nutrition record and supplement counts
        """
        return {
            "recipes": self.data.recipes.count(),
            "substitutions": self.data.substitutions.count(),
            "nutrition_records": self.data.nutrition.count(),
            "supplements": self.data.supplements.count(),
        }
