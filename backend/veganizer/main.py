"""
FastAPI application entry point and endpoint definitions.

This module initializes the FastAPI application and exposes the recipe
veganization pipeline over HTTP.

Responsibilities:
- Initialize FastAPI application with CORS and error handling
- Define the conversion, search and impact endpoints
- Coordinate service layer calls
- Handle request validation and error responses
"""

from fastapi import FastAPI, HTTPException, Query, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Dict, List
import logging

from veganizer.config import settings
from veganizer.models.conversion import ConversionResult
from veganizer.models.impact import (
    AnimalSavingsCalculation,
    AnimalsSavedRequest,
    ClimateComparison,
    ClimateCompareRequest,
)
from veganizer.models.linking import LinkingReport
from veganizer.models.nutrition import Supplement
from veganizer.models.recipe import (
    MenuAnimalsRequest,
    RecipeConversionRequest,
    RecipeSuggestion,
)
from veganizer.services.veganizer_service import VeganizerService

# Configure logging
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Initialize and configure the FastAPI application.

    Sets up:
    - CORS middleware for frontend communication
    - Exception handlers for consistent error responses
    - Application metadata

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="Recipe Veganizer API",
        description="Converts French recipes to vegan versions and scores their nutrition, climate and animal impact",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Configure CORS to allow frontend communication
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global exception handler for consistent error responses
    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        """
        Handle all uncaught exceptions with consistent error format.

        Args:
            request: The incoming request object
            exc: The exception that was raised

        Returns:
            JSONResponse: Formatted error response
        """
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error occurred",
                "error": str(exc)
            }
        )

    return app


# Initialize FastAPI application
app = create_app()

# Initialize service layer (reference data is loaded once, read-only afterwards)
veganizer_service = VeganizerService()


@app.get("/")
async def root():
    """
    Root endpoint.

    Returns:
        dict: API status and version information
    """
    return {
        "message": "Recipe Veganizer API",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check for load balancers and the frontend."""
    return {"status": "healthy"}


@app.get("/stats")
async def get_stats() -> Dict[str, int]:
    """
    Reference data counts.

    Returns:
        dict: Number of recipes, substitutions, nutrition records and supplements
    """
    return veganizer_service.get_stats()


@app.post("/recipes/convert", response_model=ConversionResult)
async def convert_recipe(request: RecipeConversionRequest) -> ConversionResult:
    """
    Convert a recipe to its vegan version.

    Unknown recipes are converted from a generic ingredient template, so
    this endpoint never returns 404.

    Args:
        request: RecipeConversionRequest containing recipe_name

    Returns:
        ConversionResult: Original vs vegan recipe with nutrition, climate,
                          animal impact and shopping list

    Raises:
        HTTPException: 500 if processing fails
    """
    try:
        return veganizer_service.convert_recipe(request.recipe_name)
    except Exception as e:
        logger.error(f"Error converting recipe: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to convert recipe: {str(e)}"
        )


@app.get("/recipes/search", response_model=List[RecipeSuggestion])
async def search_recipes(q: str = Query("", description="Search text")) -> List[RecipeSuggestion]:
    """
    Search recipes by name.

    Args:
        q: Search text (at least two characters)

    Returns:
        List[RecipeSuggestion]: Matching recipes with a short description
    """
    return veganizer_service.search_recipes(q)


@app.get("/suggestions", response_model=List[str])
async def get_suggestions(q: str = Query("", description="Search text")) -> List[str]:
    """Recipe names for the search box autocomplete."""
    return veganizer_service.suggest_recipe_names(q)


@app.get("/supplements", response_model=List[Supplement])
async def list_supplements() -> List[Supplement]:
    """All supplements known to the deficiency policy."""
    return veganizer_service.list_supplements()


@app.post("/climate/compare", response_model=ClimateComparison)
async def compare_climate(request: ClimateCompareRequest) -> ClimateComparison:
    """
    Compare the climate impact of two ingredient lists.

    Args:
        request: Original and vegan ingredients plus supplement names

    Returns:
        ClimateComparison: Integer reductions and the totals behind them
    """
    return veganizer_service.compare_climate_impact(
        request.original_ingredients,
        request.vegan_ingredients,
        request.supplement_names,
    )


@app.post("/animals/saved", response_model=AnimalSavingsCalculation)
async def animals_saved(request: AnimalsSavedRequest) -> AnimalSavingsCalculation:
    """
    Animals spared by replacing the original ingredients.

    Args:
        request: Original ingredients, vegan ingredients and optional kg quantities

    Returns:
        AnimalSavingsCalculation: Totals, breakdown and per-ingredient details
    """
    return veganizer_service.animals.calculate_animals_saved(
        request.original_ingredients,
        request.vegan_ingredients,
        request.quantities,
    )


@app.post("/menus/animals-saved", response_model=AnimalSavingsCalculation)
async def menu_animals_saved(request: MenuAnimalsRequest) -> AnimalSavingsCalculation:
    """
    Animals spared by a menu eaten over several weeks.

    Args:
        request: Menu items (recipe name, servings) and number of weeks

    Returns:
        AnimalSavingsCalculation: Aggregate over all known menu recipes
    """
    return veganizer_service.animals.calculate_menu_animals_saved(
        request.items,
        request.timeframe_weeks,
    )


@app.get("/ingredients/links", response_model=LinkingReport)
async def ingredient_links() -> LinkingReport:
    """
    Nutrition record linked to every stored recipe and substitution ingredient.

    Returns:
        LinkingReport: Links and linked/total counts
    """
    return veganizer_service.linker.build_report()


if __name__ == "__main__":
    import uvicorn

    # For development only - use uvicorn command in production
    uvicorn.run(
        "veganizer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.LOG_LEVEL.lower()
    )
