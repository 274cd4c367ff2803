"""
Centralized constants and keyword tables.

This module contains the hardcoded keyword maps, thresholds and fallback
values used by the conversion pipeline. Keyword keys are written the way a
French cook would type them; every lookup normalizes both sides with
``normalize_text`` so accents, ligatures and casing never matter.

Categories:
- Plural folding table for the text normalizer
- Nutrition lookup noise words and composite-dish exclusions
- Nutrition and supplement defaults / deficiency thresholds
- Climate category keywords and fallback percentages
- Animal product keywords and breakdown mapping
- Shopping list keyword sets
- Generic template for unknown recipes
"""

from typing import Dict, List, Tuple

# ==============================================================================
# TEXT NORMALIZATION
# ==============================================================================

# Known French plural forms (already accent-free) folded to their singular.
# Multi-word forms come first so they win over their single-word parts.
PLURAL_FOLDING: List[Tuple[str, str]] = [
    ("pommes de terre", "pomme de terre"),
    ("pois chiches", "pois chiche"),
    ("courgettes", "courgette"),
    ("echalotes", "echalote"),
    ("navets", "navet"),
    ("champignons", "champignon"),
    ("carottes", "carotte"),
    ("tomates", "tomate"),
    ("oignons", "oignon"),
    ("pommes", "pomme"),
    ("poires", "poire"),
    ("abricots", "abricot"),
    ("amandes", "amande"),
    ("artichauts", "artichaut"),
    ("endives", "endive"),
    ("cardons", "cardon"),
    ("topinambours", "topinambour"),
    ("pistaches", "pistache"),
    ("biscuits", "biscuit"),
]

# Ligatures that unicode decomposition leaves untouched
LIGATURES: Dict[str, str] = {
    "œ": "oe",
    "Œ": "oe",
    "æ": "ae",
    "Æ": "ae",
}


# ==============================================================================
# NUTRITION
# ==============================================================================

# Cosmetic noise removed before a nutrition lookup (affiliate text, labels)
NUTRITION_NOISE_PATTERNS: List[str] = [
    r"amazon",
    r"voir sur",
    r"\bentier\b",
    r"\bfrais\b",
    r"\bbiologiques?\b",
    r"\bbio\b",
]

# Nutrition entries containing these words are prepared dishes, not ingredients
COMPOSITE_DISH_KEYWORDS: List[str] = [
    "salade", "soupe", "plat", "pizza", "burger", "sandwich",
    "preemballe", "prepare", "tajine", "couscous", "pastilla",
    "pates", "riz avec", "poelee",
]

NUTRIENT_FIELDS: List[str] = [
    "calories", "proteins", "carbs", "fats", "fiber", "calcium", "iron", "zinc",
]

# Values applied per ingredient when no nutrition record matches
DEFAULT_INGREDIENT_NUTRITION: Dict[str, float] = {
    "calories": 150.0,
    "proteins": 8.0,
    "carbs": 15.0,
    "fats": 5.0,
    "fiber": 3.0,
    "calcium": 50.0,
    "iron": 2.0,
    "zinc": 1.0,
}

# Decimal places per nutrient in recipe totals
NUTRITION_TOTAL_PRECISION: Dict[str, int] = {
    "calories": 0,
    "proteins": 0,
    "carbs": 0,
    "fats": 0,
    "fiber": 0,
    "calcium": 0,
    "iron": 1,
    "zinc": 1,
}

# Decimal places per nutrient in the supplement contribution
SUPPLEMENT_TOTAL_PRECISION: Dict[str, int] = {
    "calories": 0,
    "proteins": 1,
    "carbs": 1,
    "fats": 1,
    "fiber": 1,
    "calcium": 0,
    "iron": 1,
    "zinc": 1,
}


# ==============================================================================
# SUPPLEMENTS
# ==============================================================================

# Recommended for every vegan recipe
ALWAYS_RECOMMENDED_SUPPLEMENTS: List[str] = [
    "Vitamine B12 Vegan",
    "Omega 3 Vegan",
]

# (nutrient, threshold, supplement): recommend when vegan total < threshold
DEFICIENCY_SUPPLEMENTS: List[Tuple[str, float, str]] = [
    ("iron", 6.0, "Fer bisglycinate"),
    ("zinc", 6.0, "Zinc bisglycinate"),
    ("calcium", 350.0, "Calcium + Vitamine D3"),
    ("proteins", 15.0, "Spiruline"),
]


# ==============================================================================
# CLIMATE IMPACT
# ==============================================================================

# Ingredient keyword -> canonical climate product category
CLIMATE_CATEGORY_KEYWORDS: Dict[str, str] = {
    # Animal proteins
    "poulet": "chicken",
    "boeuf": "beef",
    "porc": "pork",
    "veau": "beef",
    "agneau": "beef",
    "poisson": "fish",
    # Plant proteins
    "seitan": "seitan",
    "tofu": "tofu",
    "tempeh": "tempeh",
    # Dairy
    "lait": "milk",
    "fromage": "cheese",
    "beurre": "milk",
    "creme": "milk",
    # Eggs
    "oeuf": "eggs",
    "oeufs": "eggs",
    # Plant-based
    "lentilles": "lentils",
    "haricots": "lentils",
    "pois chiche": "chickpeas",
    "legumes": "vegetables",
    "legume": "vegetables",
    "cereales": "grains",
    "riz": "grains",
    "ble": "grains",
    "avoine": "grains",
    "noix": "nuts",
    "amande": "nuts",
}

DEFAULT_CLIMATE_CATEGORY = "vegetables"

# Animal climate category -> plant-based category usually replacing it
VEGAN_CLIMATE_ALTERNATIVES: Dict[str, str] = {
    "chicken": "seitan",
    "beef": "seitan",
    "pork": "tempeh",
    "fish": "tofu",
    "milk": "vegetables",
    "cheese": "tofu",
    "eggs": "tofu",
}

# Per-ingredient impact applied when no metrics exist at all
DEFAULT_INGREDIENT_CLIMATE: Dict[str, float] = {
    "co2_kg": 2.0,
    "water_l": 50.0,
    "land_m2": 1.5,
}

# Literature-based reductions used whenever a percentage cannot be computed
FALLBACK_REDUCTIONS: Dict[str, int] = {
    "co2": 65,
    "water": 78,
    "land": 83,
}


# ==============================================================================
# ANIMAL IMPACT
# ==============================================================================

ANIMAL_PRODUCT_KEYWORDS: Dict[str, str] = {
    # Beef
    "boeuf": "beef",
    "viande de boeuf": "beef",
    "steaks": "beef",
    "cote de boeuf": "beef",
    "viande principale": "beef",
    "viande": "beef",
    # Pork
    "porc": "pork",
    "jambon": "pork",
    "lardons": "pork",
    "saucisse": "pork",
    "chorizo": "pork",
    # Poultry
    "poulet": "chicken",
    "volaille": "chicken",
    "blanc de poulet": "chicken",
    "escalope de poulet": "chicken",
    "dinde": "chicken",
    # Fish
    "poisson": "fish",
    "saumon": "fish",
    "thon": "fish",
    "cabillaud": "fish",
    "sole": "fish",
    # Dairy
    "lait": "dairy",
    "creme": "dairy",
    "creme fraiche": "dairy",
    "fromage": "dairy",
    "beurre": "dairy",
    "yaourt": "dairy",
    # Eggs
    "oeufs": "eggs",
    "oeuf": "eggs",
}

# Animal type stored on impact records -> breakdown field
ANIMAL_BREAKDOWN_FIELDS: Dict[str, str] = {
    "cow": "cows",
    "pig": "pigs",
    "chicken": "chickens",
    "fish": "fish",
    "cow_dairy": "dairy_cows",
    "hen": "hens",
}

DAYS_PER_YEAR = 365


# ==============================================================================
# SHOPPING LIST
# ==============================================================================

SHOPPING_FRUIT_VEGETABLE_KEYWORDS: List[str] = [
    "carotte", "oignon", "champignon", "legume", "tomate", "courgette",
    "pomme de terre",
]

SHOPPING_PROTEIN_KEYWORDS: List[str] = [
    "soja", "tofu", "seitan", "tempeh", "proteine", "legumineuse",
    "lentille", "pois chiche",
]

SHOPPING_ALTERNATIVE_KEYWORDS: List[str] = [
    "lait vegetal", "creme", "beurre vegetal", "fromage vegetal", "yaourt",
]


# ==============================================================================
# RECIPE CONVERSION
# ==============================================================================

# Schematic ingredient list used when a recipe is unknown
GENERIC_RECIPE_TEMPLATE: List[str] = [
    "viande principale",
    "légumes variés",
    "base sauce",
    "aromates",
    "féculents",
]

VEGAN_NAME_SUFFIX = "(Version Végane)"
SUBSTITUTION_NOTE_PREFIX = "remplace"

DEFAULT_ORIGINAL_COOKING_TIME = "2h"
DEFAULT_VEGAN_COOKING_TIME = "1h45"
DEFAULT_ORIGINAL_DIFFICULTY = "Moyen"
DEFAULT_VEGAN_DIFFICULTY = "Facile"
DEFAULT_KNOWN_RECIPE_SERVINGS = 6
DEFAULT_UNKNOWN_RECIPE_SERVINGS = 4

MAX_INGREDIENT_SLOTS = 6


# ==============================================================================
# INGREDIENT LINKING
# ==============================================================================

# Vegan substitutes and processed foods that a raw-food table will not hold
LINKER_SKIP_KEYWORDS: List[str] = [
    "vegetal", "vegane", "vegetale", "vegetaux",
    "tofu", "seitan", "tempeh", "aquafaba",
    "proteines de soja", "proteines de ble", "proteines vegetales",
    "bechamel vegane", "chantilly vegetale", "creme vegane",
    "pate vegane", "brioche vegane", "pate a choux vegane",
    "biscuit veganes", "mascarpone vegetal", "fondant vegane",
    "caramel vegetal", "jambon vegetal", "charcuterie vegetale",
    "boyau vegetal", "ferments vegetaux", "fumage vegetal",
    "aromes naturels", "farce vegetale", "gremolata",
    "mayonnaise vegane", "aioli vegane", "algue", "king oyster",
    "shiitake", "bouillon vegetal", "lait d'amande", "huile coco",
    "creme d'amande", "eau de vichy",
]

# Ingredient names whose nutrition entry is filed under another word
LINKER_ALIASES: Dict[str, str] = {
    "creme fraiche": "creme",
    "vin rouge": "vin",
    "vin blanc": "vin",
    "huile d'olive": "huile",
    "oeufs": "oeuf",
}
