"""
Pydantic models for ingredient substitution rules.
"""

from pydantic import BaseModel, Field
from typing import Optional


class SubstitutionRule(BaseModel):
    """
    Mapping from one animal-derived ingredient to a plant-based replacement.

    Original ingredient names are unique under normalized comparison; the
    substitution store enforces this when it is built.

    Attributes:
        original_ingredient: Animal-derived ingredient (e.g. "beurre")
        vegan_substitute: Replacement to use instead
        substitution_ratio: Quantity of substitute per unit of original
        category: Rule family (e.g. "produits_laitiers", "viandes")
        notes: Cooking advice
    """
    original_ingredient: str = Field(..., min_length=1, description="Original ingredient")
    vegan_substitute: str = Field(..., min_length=1, description="Vegan substitute")
    substitution_ratio: float = Field(1.0, gt=0, description="Substitution ratio")
    category: Optional[str] = Field(None, description="Rule category")
    notes: Optional[str] = Field(None, description="Substitution notes")

    model_config = {
        "json_schema_extra": {
            "example": {
                "original_ingredient": "beurre",
                "vegan_substitute": "beurre végétal",
                "substitution_ratio": 1.0,
                "category": "produits_laitiers",
                "notes": "Margarine végétale ou huile selon l'usage"
            }
        }
    }
