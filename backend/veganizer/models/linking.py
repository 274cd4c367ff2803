"""
Pydantic models for the ingredient linking report.
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class IngredientLink(BaseModel):
    """
    Nutrition record found for one stored ingredient.

    Attributes:
        source: "recipe" or "substitution"
        owner: Recipe name or substitution original the ingredient belongs to
        field: Slot label ("ingredient_2", "ingredient_vegan_2", "original",
            "vegan_substitute")
        ingredient: Ingredient text as stored
        record_name: Matched nutrition record, or None
        match_type: How the record was found
    """
    source: Literal["recipe", "substitution"]
    owner: str
    field: str
    ingredient: str
    record_name: Optional[str] = None
    match_type: Literal["exact", "partial", "alias", "skipped", "none"] = "none"


class LinkCount(BaseModel):
    total: int = 0
    linked: int = 0


class LinkingStats(BaseModel):
    recipe_ingredients: LinkCount = Field(default_factory=LinkCount)
    substitution_ingredients: LinkCount = Field(default_factory=LinkCount)


class LinkingReport(BaseModel):
    """All links plus summary counts."""
    links: List[IngredientLink] = Field(default_factory=list)
    stats: LinkingStats = Field(default_factory=LinkingStats)
