"""
Read-only reference data store interfaces.

This follows the Repository pattern to separate the conversion pipeline from
data access. The pipeline only ever needs keyed lookup by normalized name or
category and "get all" enumeration; stores are never written to during a
conversion, so implementations need no locking.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from veganizer.models.impact import AnimalImpactRecord, ClimateMetrics
from veganizer.models.nutrition import NutritionRecord, Supplement
from veganizer.models.recipe import Recipe
from veganizer.models.substitution import SubstitutionRule

ModelType = TypeVar("ModelType")


class ReferenceDataError(ValueError):
    """Raised when a reference table violates one of its invariants.

    Attributes:
        table: name of the offending table
        key: the key that broke the invariant (e.g. a duplicated name)
    """

    def __init__(self, message: str, table: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.table = table
        self.key = key

    def __str__(self) -> str:
        return self.message


class ReadOnlyStore(Generic[ModelType], ABC):
    """
    Base store providing enumeration.
    All reference stores inherit from this class.
    """

    @abstractmethod
    def all(self) -> List[ModelType]:
        """Get all records, in table order"""

    def count(self) -> int:
        """Number of records held by the store"""
        return len(self.all())


class RecipeStore(ReadOnlyStore[Recipe]):

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Recipe]:
        """
        Get a recipe by exact normalized name.

        Args:
            name: Recipe name, any casing or accents

        Returns:
            Recipe or None if not found
        """

    @abstractmethod
    def search(self, query: str, limit: int = 10) -> List[Recipe]:
        """
        Find recipes whose normalized name contains the query.

        Results are ranked exact, then prefix, then contains; ties keep
        table order.

        Args:
            query: Search text
            limit: Maximum number of results

        Returns:
            Matching recipes (possibly empty)
        """

    def find(self, name: str) -> Optional[Recipe]:
        """
        Get a recipe by exact name, falling back to the best search hit.

        Args:
            name: Recipe name as typed by a user

        Returns:
            Recipe or None if neither lookup finds one
        """
        recipe = self.get_by_name(name)
        if recipe:
            return recipe

        results = self.search(name, limit=1)
        return results[0] if results else None


class SubstitutionStore(ReadOnlyStore[SubstitutionRule]):

    @abstractmethod
    def get(self, original_ingredient: str) -> Optional[SubstitutionRule]:
        """Get the rule whose original ingredient matches exactly (normalized)"""


class NutritionStore(ReadOnlyStore[NutritionRecord]):

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[NutritionRecord]:
        """Get the record whose name matches exactly (normalized)"""


class ClimateStore(ReadOnlyStore[ClimateMetrics]):

    @abstractmethod
    def get_metrics(self, category: str) -> Optional[ClimateMetrics]:
        """Get per-kg metrics of a climate product category"""


class SupplementStore(ReadOnlyStore[Supplement]):

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Supplement]:
        """Get a supplement by normalized name"""


class AnimalImpactStore(ReadOnlyStore[AnimalImpactRecord]):

    @abstractmethod
    def get_by_product(self, product_type: str) -> Optional[AnimalImpactRecord]:
        """Get the impact record of an animal product type (beef, pork...)"""
