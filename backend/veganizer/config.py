"""
Application configuration.

This module defines the application settings using a Pydantic model whose
defaults are read from environment variables (loaded from a .env file by
python-dotenv), with type validation on every field.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from typing import List
import os
from dotenv import load_dotenv

# Load .env from backend directory (works regardless of cwd when running uvicorn)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, default))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, default))


class Settings(BaseModel):
    """
    Application configuration settings.

    Can be configured via environment variables or .env file.
    Environment variable names match the field names (e.g., DEFAULT_PORTION_GRAMS).

    Attributes:
        DEFAULT_PORTION_GRAMS: Portion assumed per ingredient for nutrition totals
        DEFAULT_PORTION_KG: Portion assumed per ingredient for climate and animal figures
        COST_PER_INGREDIENT: Estimated shopping cost per ingredient (EUR)
        SAVINGS_RATE: Share of the cost saved compared to the omnivore recipe
        RECIPE_SEARCH_LIMIT: Maximum number of recipes returned by a search
        MIN_SEARCH_QUERY_LENGTH: Shorter search queries return no results
        MAX_WORKERS: Thread pool size for the calculator fan-out
        CORS_ORIGINS: Origins allowed to call the API
        LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR)
    """

    # Portion assumptions
    DEFAULT_PORTION_GRAMS: float = Field(
        default_factory=lambda: _env_float("DEFAULT_PORTION_GRAMS", 100.0),
        gt=0,
        description="Portion per ingredient (g) used for nutrition totals"
    )

    DEFAULT_PORTION_KG: float = Field(
        default_factory=lambda: _env_float("DEFAULT_PORTION_KG", 0.1),
        gt=0,
        description="Portion per ingredient (kg) used for climate and animal figures"
    )

    # Shopping list estimation
    COST_PER_INGREDIENT: float = Field(
        default_factory=lambda: _env_float("COST_PER_INGREDIENT", 3.5),
        ge=0,
        description="Average cost of one ingredient (EUR)"
    )

    SAVINGS_RATE: float = Field(
        default_factory=lambda: _env_float("SAVINGS_RATE", 0.25),
        ge=0.0,
        le=1.0,
        description="Savings compared to the omnivore recipe (0-1)"
    )

    # Recipe search
    RECIPE_SEARCH_LIMIT: int = Field(
        default_factory=lambda: _env_int("RECIPE_SEARCH_LIMIT", 10),
        ge=1,
        le=100,
        description="Maximum number of recipes returned by a search"
    )

    MIN_SEARCH_QUERY_LENGTH: int = Field(
        default=2,
        ge=1,
        description="Queries shorter than this return no suggestions"
    )

    # Calculator fan-out
    MAX_WORKERS: int = Field(
        default_factory=lambda: _env_int("MAX_WORKERS", 3),
        ge=1,
        le=16,
        description="Threads used to run the impact calculators concurrently"
    )

    CORS_ORIGINS: List[str] = Field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5173,http://localhost:5000"
            ).split(",")
            if origin.strip()
        ],
        description="Origins allowed by the CORS middleware"
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"),
        validate_default=True,
        description="Logging level (DEBUG/INFO/WARNING/ERROR)"
    )

    @field_validator('LOG_LEVEL')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


# Create global settings instance
settings = Settings()


# Configure logging based on settings
def configure_logging():
    """Configure application logging based on settings."""
    import logging

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured at {settings.LOG_LEVEL} level")
    logger.info(
        f"Portions: {settings.DEFAULT_PORTION_GRAMS}g nutrition, "
        f"{settings.DEFAULT_PORTION_KG}kg climate/animals"
    )


# Initialize logging on import
configure_logging()
