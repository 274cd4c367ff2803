"""
Ingredient substitution resolver.

This module maps each original ingredient of a recipe to its vegan
replacement. A vegan ingredient stored on the recipe slot always wins;
otherwise the substitution rule table is searched by normalized name.

Matching order for rules:
1. Exact normalized match on the rule's original ingredient
2. Two-way containment (rule inside the ingredient or ingredient inside
   the rule). The longest matching rule wins; equal lengths keep table order.

An ingredient matching no rule is kept unchanged and flagged as not
substituted: it is assumed to be vegan already.
"""

import logging
from typing import List, Optional, Sequence

from veganizer.models.recipe import IngredientSlot, VeganIngredient
from veganizer.models.substitution import SubstitutionRule
from veganizer.repositories.base import SubstitutionStore
from veganizer.utils.constants import SUBSTITUTION_NOTE_PREFIX
from veganizer.utils.helpers import normalize_ingredient_name

# Configure logging
logger = logging.getLogger(__name__)


class SubstitutionResolver:
    """
    Resolves original ingredients to vegan ingredients.

    Attributes:
        substitutions: Read-only store of substitution rules
    """

    def __init__(self, substitutions: SubstitutionStore):
        """
        Initialize the resolver.

        Args:
            substitutions: Substitution rule store
        """
        self.substitutions = substitutions
        logger.info(
            f"SubstitutionResolver initialized with {substitutions.count()} rules"
        )

    def find_rule(self, ingredient: str) -> Optional[SubstitutionRule]:
        """
        Find the substitution rule for an ingredient.

        Args:
            ingredient: Raw ingredient string (e.g. "200g de Bœuf")

        Returns:
            Optional[SubstitutionRule]: Matching rule or None

        Example:
            >>> resolver.find_rule("crème fraîche épaisse").vegan_substitute
            "crème de soja"
        """
        query = normalize_ingredient_name(ingredient)
        if not query:
            return None

        rule = self.substitutions.get(query)
        if rule:
            logger.debug(f"Exact substitution for '{ingredient}': {rule.vegan_substitute}")
            return rule

        best: Optional[SubstitutionRule] = None
        best_length = -1

        for candidate in self.substitutions.all():
            key = normalize_ingredient_name(candidate.original_ingredient)
            if not key:
                continue
            if (key in query or query in key) and len(key) > best_length:
                best = candidate
                best_length = len(key)

        if best:
            logger.debug(
                f"Partial substitution for '{ingredient}' via "
                f"'{best.original_ingredient}': {best.vegan_substitute}"
            )
        return best

    def resolve(
        self,
        original: str,
        vegan: Optional[str] = None,
        is_vegan: bool = False
    ) -> VeganIngredient:
        """
        Resolve one ingredient.

        Args:
            original: Original ingredient
            vegan: Vegan ingredient stored on the same recipe slot, if any
            is_vegan: Whether the slot's original ingredient is already vegan

        Returns:
            VeganIngredient: Final ingredient with its substitution annotation
        """
        if vegan and vegan.strip():
            if is_vegan:
                return VeganIngredient(name=vegan, is_substituted=False)
            return VeganIngredient(
                name=vegan,
                substitution=f"{SUBSTITUTION_NOTE_PREFIX} {original}",
                is_substituted=True,
            )

        rule = self.find_rule(original)
        if rule:
            return VeganIngredient(
                name=rule.vegan_substitute,
                substitution=f"{SUBSTITUTION_NOTE_PREFIX} {original}",
                is_substituted=True,
                ratio=rule.substitution_ratio,
                notes=rule.notes,
            )

        # No rule: the ingredient passes through and counts as vegan
        logger.debug(f"No substitution for '{original}', keeping it unchanged")
        return VeganIngredient(name=original, is_substituted=False)

    def resolve_slots(self, slots: Sequence[IngredientSlot]) -> List[VeganIngredient]:
        """
        Resolve the filled slots of a stored recipe, keeping slot order.

        A slot's vegan ingredient is only ever used for that same slot.

        Args:
            slots: Recipe ingredient slots

        Returns:
            List[VeganIngredient]: One entry per slot holding an original ingredient
        """
        return [
            self.resolve(slot.original, slot.vegan, slot.is_vegan)
            for slot in slots
            if slot.original and slot.original.strip()
        ]

    def resolve_all(self, ingredients: Sequence[str]) -> List[VeganIngredient]:
        """
        Resolve a plain ingredient list using the rule table only.

        Args:
            ingredients: Original ingredients

        Returns:
            List[VeganIngredient]: Resolved ingredients in input order
        """
        return [self.resolve(ingredient) for ingredient in ingredients]
