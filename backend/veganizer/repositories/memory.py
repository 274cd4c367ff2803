"""
In-memory reference data stores.

Each store is built once from an iterable of pydantic records and indexed by
normalized key. Building a store validates its table invariants and raises
ReferenceDataError on a violation; after that the store is read-only and safe
to share across threads.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from veganizer.models.impact import AnimalImpactRecord, ClimateMetrics
from veganizer.models.nutrition import NutritionRecord, Supplement
from veganizer.models.recipe import Recipe
from veganizer.models.substitution import SubstitutionRule
from veganizer.repositories.base import (
    AnimalImpactStore,
    ClimateStore,
    NutritionStore,
    RecipeStore,
    ReferenceDataError,
    SubstitutionStore,
    SupplementStore,
)
from veganizer.utils.helpers import normalize_ingredient_name, normalize_text

# Configure logging
logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


class _KeyedTable(Generic[ModelType]):
    """Ordered records plus an index on a normalized key."""

    def __init__(
        self,
        records: Iterable[ModelType],
        key: Callable[[ModelType], str],
        table: str,
        unique: bool = True
    ):
        self.records: List[ModelType] = list(records)
        self.index: Dict[str, ModelType] = {}

        for record in self.records:
            record_key = key(record)
            if record_key in self.index:
                if unique:
                    raise ReferenceDataError(
                        f"Duplicate key '{record_key}' in {table} table",
                        table=table,
                        key=record_key
                    )
                # First entry wins for non-unique tables
                continue
            self.index[record_key] = record

        logger.debug(f"Loaded {len(self.records)} records into {table} table")


class InMemoryRecipeStore(RecipeStore):

    def __init__(self, recipes: Iterable[Recipe]):
        self._table = _KeyedTable(
            recipes, key=lambda r: normalize_text(r.name), table="recipes", unique=False
        )

    def all(self) -> List[Recipe]:
        return list(self._table.records)

    def get_by_name(self, name: str) -> Optional[Recipe]:
        return self._table.index.get(normalize_text(name))

    def search(self, query: str, limit: int = 10) -> List[Recipe]:
        normalized_query = normalize_text(query)
        if not normalized_query:
            return []

        exact, prefix, contains = [], [], []
        for recipe in self._table.records:
            name = normalize_text(recipe.name)
            if name == normalized_query:
                exact.append(recipe)
            elif name.startswith(normalized_query):
                prefix.append(recipe)
            elif normalized_query in name:
                contains.append(recipe)

        return (exact + prefix + contains)[:limit]


class InMemorySubstitutionStore(SubstitutionStore):

    def __init__(self, rules: Iterable[SubstitutionRule]):
        self._table = _KeyedTable(
            rules,
            key=lambda r: normalize_ingredient_name(r.original_ingredient),
            table="substitutions"
        )

    def all(self) -> List[SubstitutionRule]:
        return list(self._table.records)

    def get(self, original_ingredient: str) -> Optional[SubstitutionRule]:
        return self._table.index.get(normalize_ingredient_name(original_ingredient))


class InMemoryNutritionStore(NutritionStore):

    def __init__(self, records: Iterable[NutritionRecord]):
        self._table = _KeyedTable(
            records, key=lambda r: normalize_text(r.name), table="nutrition", unique=False
        )

    def all(self) -> List[NutritionRecord]:
        return list(self._table.records)

    def get_by_name(self, name: str) -> Optional[NutritionRecord]:
        return self._table.index.get(normalize_text(name))


class InMemoryClimateStore(ClimateStore):

    def __init__(self, metrics: Iterable[ClimateMetrics]):
        self._table = _KeyedTable(
            metrics, key=lambda m: normalize_text(m.category), table="climate"
        )

    def all(self) -> List[ClimateMetrics]:
        return list(self._table.records)

    def get_metrics(self, category: str) -> Optional[ClimateMetrics]:
        return self._table.index.get(normalize_text(category))


class InMemorySupplementStore(SupplementStore):

    def __init__(self, supplements: Iterable[Supplement]):
        self._table = _KeyedTable(
            supplements, key=lambda s: normalize_text(s.name), table="supplements"
        )

    def all(self) -> List[Supplement]:
        return list(self._table.records)

    def get_by_name(self, name: str) -> Optional[Supplement]:
        return self._table.index.get(normalize_text(name))


class InMemoryAnimalImpactStore(AnimalImpactStore):

    def __init__(self, records: Iterable[AnimalImpactRecord]):
        self._table = _KeyedTable(
            records, key=lambda r: normalize_text(r.product_type), table="animal_impact"
        )

    def all(self) -> List[AnimalImpactRecord]:
        return list(self._table.records)

    def get_by_product(self, product_type: str) -> Optional[AnimalImpactRecord]:
        return self._table.index.get(normalize_text(product_type))


@dataclass
class ReferenceData:
    """
    The six reference stores read by the conversion pipeline.

    Attributes:
        recipes: Recipe store
        substitutions: Substitution rule store
        nutrition: Nutrition record store
        climate: Climate metrics store
        supplements: Supplement store
        animals: Animal impact store
    """
    recipes: RecipeStore
    substitutions: SubstitutionStore
    nutrition: NutritionStore
    climate: ClimateStore
    supplements: SupplementStore
    animals: AnimalImpactStore

    @classmethod
    def from_seed(cls) -> "ReferenceData":
        """
        Build in-memory stores over the bundled seed tables.

        Returns:
            ReferenceData: Stores holding the default reference data

        Raises:
            ReferenceDataError: If a seed table violates its invariants
        """
        from veganizer.data import reference_data as seed

        data = cls(
            recipes=InMemoryRecipeStore(seed.RECIPES),
            substitutions=InMemorySubstitutionStore(seed.SUBSTITUTION_RULES),
            nutrition=InMemoryNutritionStore(seed.NUTRITION_RECORDS),
            climate=InMemoryClimateStore(seed.CLIMATE_METRICS),
            supplements=InMemorySupplementStore(seed.SUPPLEMENTS),
            animals=InMemoryAnimalImpactStore(seed.ANIMAL_IMPACT_RECORDS),
        )
        logger.info(
            f"Reference data loaded: {data.recipes.count()} recipes, "
            f"{data.substitutions.count()} substitutions, "
            f"{data.nutrition.count()} nutrition records"
        )
        return data
