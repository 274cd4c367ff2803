"""
Ingredient to nutrition record linking report.

Walks every stored recipe slot (original and vegan ingredient) and every
substitution rule (original and substitute) and reports which nutrition
record each ingredient would be linked to. The report is read-only: links
are returned to the caller, nothing is written back to the stores.
"""

import logging
from typing import Optional, Tuple

from veganizer.models.linking import IngredientLink, LinkCount, LinkingReport, LinkingStats
from veganizer.models.nutrition import NutritionRecord
from veganizer.repositories.base import NutritionStore, RecipeStore, SubstitutionStore
from veganizer.utils.constants import LINKER_ALIASES, LINKER_SKIP_KEYWORDS
from veganizer.utils.helpers import normalize_text

# Configure logging
logger = logging.getLogger(__name__)

_SKIP_KEYWORDS = [normalize_text(keyword) for keyword in LINKER_SKIP_KEYWORDS]
_ALIASES = {normalize_text(name): normalize_text(alias) for name, alias in LINKER_ALIASES.items()}


def is_vegan_substitute_or_processed(ingredient: str) -> bool:
    """Whether an ingredient is a processed or plant-based product a raw-food table lacks."""
    normalized = normalize_text(ingredient)
    return any(keyword in normalized for keyword in _SKIP_KEYWORDS)


class IngredientLinker:
    """
    Finds nutrition records for stored ingredients.

    Attributes:
        recipes: Recipe store
        substitutions: Substitution rule store
        nutrition: Nutrition record store
    """

    def __init__(
        self,
        recipes: RecipeStore,
        substitutions: SubstitutionStore,
        nutrition: NutritionStore
    ):
        self.recipes = recipes
        self.substitutions = substitutions
        self.nutrition = nutrition

    def _first_containing(self, fragment: str) -> Optional[NutritionRecord]:
        records = self.nutrition.all()
        names = [normalize_text(record.name) for record in records]

        # Prefix first, so "oeuf" links to "Oeuf, cru" and not to "Boeuf, ..."
        for record, name in zip(records, names):
            if name.startswith(fragment):
                return record
        for record, name in zip(records, names):
            if fragment in name:
                return record
        return None

    def find_match(self, ingredient: str) -> Tuple[Optional[NutritionRecord], str]:
        """
        Find the nutrition record of one ingredient.

        Matching order: exact name, record name starting with or containing
        the ingredient, then the same for the ingredient's alias.

        Args:
            ingredient: Stored ingredient name

        Returns:
            Tuple of (record or None, match type)
        """
        normalized = normalize_text(ingredient)
        if not normalized:
            return None, "none"

        if is_vegan_substitute_or_processed(normalized):
            return None, "skipped"

        record = self.nutrition.get_by_name(normalized)
        if record:
            return record, "exact"

        record = self._first_containing(normalized)
        if record:
            return record, "partial"

        alias = _ALIASES.get(normalized)
        if alias:
            record = self._first_containing(alias)
            if record:
                return record, "alias"

        logger.debug(f"No nutrition link for '{ingredient}'")
        return None, "none"

    def _link(self, source: str, owner: str, field: str, ingredient: str) -> IngredientLink:
        record, match_type = self.find_match(ingredient)
        return IngredientLink(
            source=source,
            owner=owner,
            field=field,
            ingredient=ingredient,
            record_name=record.name if record else None,
            match_type=match_type,
        )

    def build_report(self) -> LinkingReport:
        """
        Link every recipe and substitution ingredient.

        Returns:
            LinkingReport: All links with linked/total counts per source
        """
        logger.info("Starting ingredient linking report")
        report = LinkingReport()
        recipe_count = LinkCount()
        substitution_count = LinkCount()

        for recipe in self.recipes.all():
            for position, slot in enumerate(recipe.slots, start=1):
                for field, ingredient in (
                    (f"ingredient_{position}", slot.original),
                    (f"ingredient_vegan_{position}", slot.vegan),
                ):
                    if not ingredient or not ingredient.strip():
                        continue
                    link = self._link("recipe", recipe.name, field, ingredient)
                    report.links.append(link)
                    recipe_count.total += 1
                    if link.record_name:
                        recipe_count.linked += 1

        for rule in self.substitutions.all():
            for field, ingredient in (
                ("original", rule.original_ingredient),
                ("vegan_substitute", rule.vegan_substitute),
            ):
                link = self._link("substitution", rule.original_ingredient, field, ingredient)
                report.links.append(link)
                substitution_count.total += 1
                if link.record_name:
                    substitution_count.linked += 1

        report.stats = LinkingStats(
            recipe_ingredients=recipe_count,
            substitution_ingredients=substitution_count,
        )
        logger.info(
            f"Linked {recipe_count.linked}/{recipe_count.total} recipe ingredients, "
            f"{substitution_count.linked}/{substitution_count.total} substitution ingredients"
        )
        return report
