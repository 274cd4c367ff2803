"""
Pydantic models for climate and animal impact.

Climate metrics are keyed by canonical product category ("beef", "tofu",
"vegetables"...), never by raw ingredient name. Animal impact records are
keyed by animal product type (beef, pork, chicken, fish, dairy, eggs).
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from veganizer.utils.validators import validate_ingredient_list, validate_quantities


# ==================== Climate ====================

class ClimateMetrics(BaseModel):
    """
    Per-kg environmental impact of a climate product category.

    Attributes:
        category: Canonical category (e.g. "beef")
        co2_kg_per_kg: Global warming potential (kg CO2e per kg)
        water_l_per_kg: Water use (L per kg)
        land_m2_per_kg: Land use (m² per kg)
        biodiversity_impact: Biodiversity impact score
        source: Data source label
    """
    category: str = Field(..., min_length=1, description="Climate product category")
    co2_kg_per_kg: float = Field(..., ge=0, description="kg CO2e per kg")
    water_l_per_kg: float = Field(..., ge=0, description="Litres of water per kg")
    land_m2_per_kg: float = Field(..., ge=0, description="m² of land per kg")
    biodiversity_impact: float = Field(0.0, ge=0, description="Biodiversity score")
    source: str = Field("AGRIBALYSE", description="Data source")


class IngredientImpact(BaseModel):
    """Impact of one ingredient portion."""
    co2_kg: float
    water_l: float
    land_m2: float
    biodiversity_score: float = 0.0


class ImpactTotals(BaseModel):
    """Summed impact of an ingredient list (or of a supplement set)."""
    total_co2: float = Field(0.0, description="kg CO2e")
    total_water: float = Field(0.0, description="Litres")
    total_land: float = Field(0.0, description="m²")
    total_biodiversity: float = Field(0.0, description="Summed biodiversity score")


class ClimateDetails(BaseModel):
    """Totals behind a climate comparison; ``vegan`` includes supplements."""
    original: ImpactTotals
    vegan: ImpactTotals
    supplements: ImpactTotals = Field(default_factory=ImpactTotals)


class ClimateComparison(BaseModel):
    """
    Percentage reductions of the vegan recipe (with supplements).

    Percentages are always finite integers; literature-based constants
    replace anything that cannot be computed.
    """
    co2_reduction: int = Field(..., description="CO2 reduction (%)")
    water_saving: int = Field(..., description="Water saving (%)")
    land_saving: int = Field(..., description="Land saving (%)")
    details: ClimateDetails

    model_config = {
        "json_schema_extra": {
            "example": {
                "co2_reduction": 72,
                "water_saving": 64,
                "land_saving": 81,
                "details": {
                    "original": {"total_co2": 4.1, "total_water": 221, "total_land": 4.6},
                    "vegan": {"total_co2": 1.15, "total_water": 80, "total_land": 0.87},
                    "supplements": {"total_co2": 0.05, "total_water": 3, "total_land": 0.02}
                }
            }
        }
    }


class ClimateCompareRequest(BaseModel):
    """Request model for the climate comparison endpoint."""
    original_ingredients: List[str] = Field(default_factory=list)
    vegan_ingredients: List[str] = Field(default_factory=list)
    supplement_names: List[str] = Field(
        default_factory=list,
        description="Names of supplements whose impact is added to the vegan side"
    )

    @field_validator('original_ingredients', 'vegan_ingredients')
    @classmethod
    def validate_ingredients(cls, v: List[str]) -> List[str]:
        return validate_ingredient_list(v)


# ==================== Animals ====================

class AnimalImpactRecord(BaseModel):
    """
    Animals affected per kg of an animal product.

    Attributes:
        product_type: beef / pork / chicken / fish / dairy / eggs
        animal_type: cow / pig / chicken / fish / cow_dairy / hen
        animals_per_kg: Animals killed per kg of product
        average_weight_kg: Average animal weight
        lifespan_days: Natural lifespan
        actual_age_at_death_days: Age at slaughter
    """
    product_type: str = Field(..., min_length=1)
    animal_type: str = Field(..., min_length=1)
    animals_per_kg: float = Field(..., ge=0)
    average_weight_kg: Optional[float] = Field(None, ge=0)
    lifespan_days: Optional[int] = Field(None, ge=0)
    actual_age_at_death_days: Optional[int] = Field(None, ge=0)
    source: str = Field("Research_Based")
    notes: Optional[str] = None


class AnimalBreakdown(BaseModel):
    """Animals spared per animal type."""
    cows: float = 0.0
    pigs: float = 0.0
    chickens: float = 0.0
    fish: float = 0.0
    dairy_cows: float = 0.0
    hens: float = 0.0


class AnimalSavingsDetail(BaseModel):
    """Contribution of one original ingredient."""
    animal_type: str
    animal_count: float
    product_type: str
    quantity_kg: float
    life_years_saved: float


class AnimalSavingsCalculation(BaseModel):
    """
    Animals spared by not cooking the original ingredients.

    Details follow the order of the input ingredients.
    """
    total_animals: float = 0.0
    animal_breakdown: AnimalBreakdown = Field(default_factory=AnimalBreakdown)
    life_years_saved: float = 0.0
    details: List[AnimalSavingsDetail] = Field(default_factory=list)


class AnimalsSavedRequest(BaseModel):
    """Request model for the animal savings endpoint."""
    original_ingredients: List[str] = Field(default_factory=list)
    vegan_ingredients: List[str] = Field(default_factory=list)
    quantities: Optional[List[float]] = Field(
        None,
        description="Quantity in kg per original ingredient (defaults to 0.1)"
    )

    @field_validator('original_ingredients', 'vegan_ingredients')
    @classmethod
    def validate_ingredients(cls, v: List[str]) -> List[str]:
        return validate_ingredient_list(v)

    @field_validator('quantities')
    @classmethod
    def validate_quantity_values(cls, v: Optional[List[float]]) -> Optional[List[float]]:
        return validate_quantities(v)
