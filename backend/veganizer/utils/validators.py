"""
Input validation utilities.

This module provides validation functions for the inputs accepted by the
conversion API: recipe names, ingredient lists and per-ingredient
quantities. All validators raise ValueError so pydantic request models can
call them from field validators.
"""

import re
import logging
from typing import List, Optional

# Configure logging
logger = logging.getLogger(__name__)

MAX_RECIPE_NAME_LENGTH = 255
MAX_INGREDIENTS = 100
MAX_INGREDIENT_LENGTH = 500

_DANGEROUS_PATTERNS = [
    r'<script',  # Script tags
    r'javascript:',  # JavaScript protocol
    r'on\w+\s*=',  # Event handlers (onclick, onload, etc)
    r'[<>]'  # HTML tags
]


def validate_recipe_name(name: str) -> str:
    """
    Validate and clean a recipe name.

    Ensures recipe name:
    - Is not empty or whitespace only
    - Does not exceed maximum length
    - Does not contain markup or script patterns

    Args:
        name: Recipe name string

    Returns:
        str: The stripped recipe name

    Raises:
        ValueError: If validation fails with specific error message
    """
    if not name or not name.strip():
        raise ValueError("Recipe name is required")

    name = name.strip()

    if len(name) > MAX_RECIPE_NAME_LENGTH:
        raise ValueError(
            f"Recipe name cannot exceed {MAX_RECIPE_NAME_LENGTH} characters"
        )

    for pattern in _DANGEROUS_PATTERNS:
        if re.search(pattern, name, re.IGNORECASE):
            raise ValueError("Recipe name contains invalid characters or patterns")

    logger.debug(f"Recipe name validated: {name}")
    return name


def validate_ingredient_list(ingredients: List[str]) -> List[str]:
    """
    Validate an ingredient list.

    An empty list is accepted: the calculators return a zero-valued result
    for it. Each entry must be a non-empty string of reasonable length.

    Args:
        ingredients: List of ingredient strings

    Returns:
        List[str]: Ingredients with surrounding whitespace removed

    Raises:
        ValueError: If validation fails
    """
    if len(ingredients) > MAX_INGREDIENTS:
        raise ValueError(
            f"Ingredient list cannot exceed {MAX_INGREDIENTS} items "
            f"(got {len(ingredients)})"
        )

    cleaned = []
    for i, ingredient in enumerate(ingredients):
        if not isinstance(ingredient, str):
            raise ValueError(
                f"Ingredient at index {i} must be a string, "
                f"got {type(ingredient).__name__}"
            )

        if not ingredient.strip():
            raise ValueError(f"Ingredient at index {i} cannot be empty")

        if len(ingredient) > MAX_INGREDIENT_LENGTH:
            raise ValueError(
                f"Ingredient at index {i} exceeds maximum length of "
                f"{MAX_INGREDIENT_LENGTH} characters"
            )

        for pattern in _DANGEROUS_PATTERNS[:3]:
            if re.search(pattern, ingredient, re.IGNORECASE):
                raise ValueError(
                    f"Ingredient at index {i} contains invalid characters"
                )

        cleaned.append(ingredient.strip())

    logger.debug(f"Ingredient list validated: {len(cleaned)} ingredients")
    return cleaned


def validate_quantities(quantities: Optional[List[float]]) -> Optional[List[float]]:
    """
    Validate per-ingredient quantities (kg or g, depending on the caller).

    Args:
        quantities: Optional list of non-negative numbers

    Returns:
        Optional[List[float]]: The quantities unchanged

    Raises:
        ValueError: If a quantity is negative
    """
    if quantities is None:
        return None

    for i, quantity in enumerate(quantities):
        if quantity is not None and quantity < 0:
            raise ValueError(f"Quantity at index {i} cannot be negative")

    return quantities
