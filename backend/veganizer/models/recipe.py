"""
Pydantic models for recipe data.

This module defines the stored recipe shape (six positional ingredient
slots), the original/vegan recipe views returned by a conversion, and the
request schemas of the recipe endpoints.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from veganizer.utils.constants import MAX_INGREDIENT_SLOTS
from veganizer.utils.validators import validate_recipe_name


class IngredientSlot(BaseModel):
    """
    One positional ingredient slot of a stored recipe.

    Any field may be empty. The vegan ingredient is authoritative for this
    slot only, never for a neighbouring one.

    Attributes:
        original: Ingredient of the omnivore recipe
        vegan: Pre-stored vegan replacement for this slot
        is_vegan: Whether the original ingredient is already vegan
    """
    original: Optional[str] = Field(None, description="Original ingredient")
    vegan: Optional[str] = Field(None, description="Pre-stored vegan ingredient")
    is_vegan: bool = Field(False, description="Original is already vegan")


class Recipe(BaseModel):
    """
    Recipe as held by the recipe store.

    Attributes:
        id: Store identifier
        name: Recipe name (French)
        vegan_name: Name of the vegan equivalent, when one is known
        slots: Up to six ordered ingredient slots (sparse)
        cooking_time: Free-form cooking time (e.g. "2h")
        servings: Number of servings
        difficulty: Free-form difficulty label
    """
    id: Optional[str] = Field(None, description="Recipe identifier")
    name: str = Field(..., min_length=1, description="Recipe name")
    vegan_name: Optional[str] = Field(None, description="Vegan recipe name")
    slots: List[IngredientSlot] = Field(
        default_factory=list,
        description="Ordered ingredient slots (max 6)"
    )
    cooking_time: Optional[str] = Field(None, description="Cooking time")
    servings: Optional[int] = Field(None, ge=1, description="Servings")
    difficulty: Optional[str] = Field(None, description="Difficulty")

    @field_validator('slots')
    @classmethod
    def validate_slot_count(cls, v: List[IngredientSlot]) -> List[IngredientSlot]:
        """A recipe holds at most six ingredient slots."""
        if len(v) > MAX_INGREDIENT_SLOTS:
            raise ValueError(
                f"A recipe holds at most {MAX_INGREDIENT_SLOTS} ingredient slots"
            )
        return v

    def filled_slots(self) -> List[IngredientSlot]:
        """Slots holding an original ingredient, in slot order."""
        return [slot for slot in self.slots if slot.original and slot.original.strip()]

    def original_ingredients(self) -> List[str]:
        """Original ingredients in slot order, empty slots skipped."""
        return [slot.original for slot in self.filled_slots()]


class RecipeConversionRequest(BaseModel):
    """
    Request model for the recipe conversion endpoint.

    Attributes:
        recipe_name: Name of the recipe to veganize
    """
    recipe_name: str = Field(
        ...,
        description="Name of the recipe to convert",
        examples=["Bœuf bourguignon"]
    )

    @field_validator('recipe_name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_recipe_name(v)


class OriginalRecipe(BaseModel):
    """Original (omnivore) side of a conversion."""
    name: str
    ingredients: List[str] = Field(default_factory=list)
    cooking_time: Optional[str] = None
    servings: Optional[int] = None
    difficulty: Optional[str] = None


class VeganIngredient(BaseModel):
    """
    One ingredient of the vegan recipe, with its substitution annotation.

    Attributes:
        name: Ingredient to buy and cook with
        substitution: Human-readable note such as "remplace beurre"
        is_substituted: Whether the ingredient replaces an animal product
        ratio: Quantity ratio from the substitution rule, when one applied
        notes: Cooking notes from the substitution rule
    """
    name: str = Field(..., description="Vegan ingredient name")
    substitution: Optional[str] = Field(None, description="Substitution note")
    is_substituted: bool = Field(..., description="Replaces an animal product")
    ratio: Optional[float] = Field(None, ge=0, description="Substitution ratio")
    notes: Optional[str] = Field(None, description="Substitution notes")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "beurre végétal",
                "substitution": "remplace beurre",
                "is_substituted": True,
                "ratio": 1.0,
                "notes": "Margarine végétale ou huile selon l'usage"
            }
        }
    }


class VeganRecipe(BaseModel):
    """Vegan side of a conversion."""
    name: str
    ingredients: List[VeganIngredient] = Field(default_factory=list)
    cooking_time: Optional[str] = None
    servings: Optional[int] = None
    difficulty: Optional[str] = None


class RecipeSuggestion(BaseModel):
    """
    Search result shown in the recipe autocomplete.

    Attributes:
        name: Recipe name
        description: "<time> • <servings> personnes • <difficulty>"
    """
    name: str
    description: str


class MenuItemRequest(BaseModel):
    """One recipe of a menu, with the number of servings eaten."""
    recipe_name: str = Field(..., description="Recipe name")
    servings: float = Field(1.0, ge=0.1, le=10, description="Servings of this recipe")

    @field_validator('recipe_name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        return validate_recipe_name(v)


class MenuAnimalsRequest(BaseModel):
    """Request model for the menu-level animal savings endpoint."""
    items: List[MenuItemRequest] = Field(default_factory=list)
    timeframe_weeks: int = Field(1, ge=1, le=520, description="Number of weeks")
