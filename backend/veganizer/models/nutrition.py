"""
Pydantic models for nutrition data.

This module defines the per-100g nutrition records held by the nutrition
store, the supplements recommended to vegan eaters, and the recipe-level
totals and comparison produced by the nutrition aggregator.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class NutritionRecord(BaseModel):
    """
    Ciqual-style nutrition facts for 100g of a named food.

    Any nutrient may be missing (no data), which counts as zero when summed.

    Attributes:
        id: Store identifier
        code: Food code in the source table
        name: Food name (French, e.g. "Poulet, viande, crue")
        calories: Energy in kcal
        proteins: Proteins in grams
        carbs: Carbohydrates in grams
        fats: Lipids in grams
        fiber: Dietary fiber in grams
        calcium: Calcium in milligrams
        iron: Iron in milligrams
        zinc: Zinc in milligrams
        vitamin_b12: Vitamin B12 in micrograms
        vitamin_d: Vitamin D in micrograms
    """
    id: Optional[str] = Field(None, description="Record identifier")
    code: Optional[str] = Field(None, description="Food code")
    name: str = Field(..., min_length=1, description="Food name")
    calories: Optional[float] = Field(None, ge=0, description="kcal per 100g")
    proteins: Optional[float] = Field(None, ge=0, description="Proteins (g) per 100g")
    carbs: Optional[float] = Field(None, ge=0, description="Carbohydrates (g) per 100g")
    fats: Optional[float] = Field(None, ge=0, description="Lipids (g) per 100g")
    fiber: Optional[float] = Field(None, ge=0, description="Fiber (g) per 100g")
    calcium: Optional[float] = Field(None, ge=0, description="Calcium (mg) per 100g")
    iron: Optional[float] = Field(None, ge=0, description="Iron (mg) per 100g")
    zinc: Optional[float] = Field(None, ge=0, description="Zinc (mg) per 100g")
    vitamin_b12: Optional[float] = Field(None, ge=0, description="Vitamin B12 (µg) per 100g")
    vitamin_d: Optional[float] = Field(None, ge=0, description="Vitamin D (µg) per 100g")


class NutritionTotals(BaseModel):
    """
    Summed nutrition of an ingredient list.

    Calories, macros, fiber and calcium are whole numbers; iron and zinc keep
    one decimal.
    """
    calories: float = Field(0.0, ge=0, description="Total kcal")
    proteins: float = Field(0.0, ge=0, description="Total proteins (g)")
    carbs: float = Field(0.0, ge=0, description="Total carbohydrates (g)")
    fats: float = Field(0.0, ge=0, description="Total lipids (g)")
    fiber: float = Field(0.0, ge=0, description="Total fiber (g)")
    calcium: float = Field(0.0, ge=0, description="Total calcium (mg)")
    iron: float = Field(0.0, ge=0, description="Total iron (mg)")
    zinc: float = Field(0.0, ge=0, description="Total zinc (mg)")

    model_config = {
        "json_schema_extra": {
            "example": {
                "calories": 612.0,
                "proteins": 31.0,
                "carbs": 48.0,
                "fats": 29.0,
                "fiber": 9.0,
                "calcium": 214.0,
                "iron": 5.2,
                "zinc": 3.1
            }
        }
    }


class Supplement(BaseModel):
    """
    Supplement product recommended alongside vegan recipes.

    Nutrition and environmental values are given per serving. When the
    supplement is recommended is decided by the deficiency policy of the
    nutrition aggregator, not by this record.

    Attributes:
        id: Store identifier
        name: Product name (e.g. "Fer bisglycinate")
        type: vitamin / mineral / omega / protein
        priority: critical / high / medium
        serving_size: Serving description (e.g. "1 gélule")
        link: Where to buy the product
        description: Short description
    """
    id: Optional[str] = None
    name: str = Field(..., min_length=1, description="Supplement name")
    type: str = Field(..., description="Supplement type")
    priority: str = Field(..., description="Priority tier")
    serving_size: str = Field(..., description="Serving size")
    link: Optional[str] = Field(None, description="Purchase link")
    description: Optional[str] = None

    # Nutrition per serving
    calories: float = Field(0.0, ge=0)
    proteins: float = Field(0.0, ge=0)
    carbs: float = Field(0.0, ge=0)
    fats: float = Field(0.0, ge=0)
    fiber: float = Field(0.0, ge=0)
    calcium: float = Field(0.0, ge=0)
    iron: float = Field(0.0, ge=0)
    zinc: float = Field(0.0, ge=0)
    vitamin_b12: float = Field(0.0, ge=0, description="Vitamin B12 (µg)")
    omega3_dha: float = Field(0.0, ge=0, description="DHA (mg)")
    omega3_epa: float = Field(0.0, ge=0, description="EPA (mg)")

    # Environmental impact per serving
    co2_kg_per_serving: float = Field(0.0, ge=0)
    water_l_per_serving: float = Field(0.0, ge=0)
    land_m2_per_serving: float = Field(0.0, ge=0)
    biodiversity_impact: float = Field(0.0, ge=0)


class NutritionComparison(BaseModel):
    """
    Original vs vegan nutrition of a recipe.

    ``vegan`` already includes ``supplement_contribution``: the comparison is
    original recipe against vegan recipe plus recommended supplements.
    """
    original: NutritionTotals
    vegan: NutritionTotals
    supplements: List[Supplement] = Field(default_factory=list)
    supplement_contribution: NutritionTotals = Field(default_factory=NutritionTotals)
