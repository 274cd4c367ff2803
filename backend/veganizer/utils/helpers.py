"""
Common utility helper functions.

This module provides the text normalizer shared by every lookup in the
conversion pipeline, plus the small numeric helpers used when aggregating
nutrition, climate and animal figures.

The same ingredient string must always normalize to the same key, whichever
subsystem asks for it, so substitution lookup, nutrition lookup, climate and
animal keyword matching, recipe search and ingredient linking all go through
``normalize_text``.
"""

import math
import re
import logging
import unicodedata
from typing import Dict, Optional, Tuple, TypeVar

from veganizer.utils.constants import (
    LIGATURES,
    NUTRITION_NOISE_PATTERNS,
    PLURAL_FOLDING,
)

# Configure logging
logger = logging.getLogger(__name__)

V = TypeVar("V")

_PLURAL_PATTERNS = [
    (re.compile(r"\b" + re.escape(plural) + r"\b"), singular)
    for plural, singular in PLURAL_FOLDING
]


def normalize_text(
    text: str,
    strip_digits: bool = False,
    strip_punctuation: bool = False
) -> str:
    """
    Canonicalize an ingredient or recipe name for matching.

    Performs the following normalization:
    1. Expand ligatures (œ -> oe, æ -> ae)
    2. Convert to lowercase
    3. Decompose and strip diacritics
    4. Optionally remove digits and punctuation
    5. Collapse whitespace
    6. Fold known French plurals to singular

    The function is pure and idempotent: normalizing an already normalized
    string returns it unchanged.

    Args:
        text: Raw ingredient or recipe name
        strip_digits: Remove digits (quantities) from the text
        strip_punctuation: Remove every character that is neither a word
            character nor whitespace

    Returns:
        str: Canonical key ("" for empty input)

    Example:
        >>> normalize_text("Carottes")
        "carotte"
        >>> normalize_text("BŒUF Bourguignon")
        "boeuf bourguignon"
    """
    if not text:
        return ""

    normalized = text
    for ligature, replacement in LIGATURES.items():
        normalized = normalized.replace(ligature, replacement)

    normalized = normalized.lower()
    normalized = unicodedata.normalize("NFD", normalized)
    normalized = "".join(ch for ch in normalized if not unicodedata.combining(ch))

    if strip_digits:
        normalized = re.sub(r"[0-9]", "", normalized)
    if strip_punctuation:
        normalized = re.sub(r"[^\w\s]", "", normalized)

    normalized = re.sub(r"\s+", " ", normalized).strip()

    for pattern, singular in _PLURAL_PATTERNS:
        normalized = pattern.sub(singular, normalized)

    return normalized


def normalize_ingredient_name(ingredient: str) -> str:
    """
    Normalize an ingredient for substitution rule lookup.

    Quantities and punctuation carry no meaning for substitution rules, so
    this mode strips both on top of the base normalization.

    Args:
        ingredient: Raw ingredient string (e.g. "200g de bœuf")

    Returns:
        str: Normalized ingredient name (e.g. "g de boeuf")
    """
    return normalize_text(ingredient, strip_digits=True, strip_punctuation=True)


def clean_ingredient_for_lookup(ingredient: str) -> str:
    """
    Remove cosmetic noise before a nutrition lookup.

    Strips emoji and non-Latin symbols, affiliate text ("Amazon",
    "Voir sur") and descriptors that nutrition tables do not carry
    ("entier", "frais", "bio", "biologique"). Accented Latin letters are kept.

    Args:
        ingredient: Ingredient as stored in a recipe

    Returns:
        str: Cleaned ingredient name
    """
    if not ingredient:
        return ""

    cleaned = "".join(
        ch for ch in ingredient
        if ord(ch) < 0x80 or 0x00C0 <= ord(ch) <= 0x024F
    )

    for pattern in NUTRITION_NOISE_PATTERNS:
        cleaned = re.sub(pattern, "", cleaned, flags=re.IGNORECASE)

    cleaned = re.sub(r"\s+", " ", cleaned).strip()

    if cleaned != ingredient:
        logger.debug(f"Cleaned '{ingredient}' -> '{cleaned}' for nutrition lookup")

    return cleaned


def match_keyword(
    text: str,
    keywords: Dict[str, V],
    bidirectional: bool = True
) -> Optional[Tuple[str, V]]:
    """
    Find the keyword entry matching an ingredient.

    Matching order:
    1. Exact normalized match
    2. Containment: the keyword appears inside the text (and, when
       ``bidirectional`` is set, the text inside the keyword). The longest
       matching keyword wins; equal lengths keep table order.

    Args:
        text: Ingredient string (raw or normalized)
        keywords: Mapping of keyword to value
        bidirectional: Also accept keywords that contain the text

    Returns:
        Optional[Tuple[str, V]]: Matched keyword and its value, or None
    """
    query = normalize_text(text)
    if not query:
        return None

    best: Optional[Tuple[str, V]] = None
    best_length = -1

    for keyword, value in keywords.items():
        key = normalize_text(keyword)
        if key == query:
            return keyword, value

        contained = key in query or (bidirectional and query in key)
        if contained and len(key) > best_length:
            best = (keyword, value)
            best_length = len(key)

    return best


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round half away from zero for positive values, like JavaScript's Math.round.

    Python's round() uses banker's rounding (round(2.5) == 2), which would
    shift published figures by one unit.

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        float: Rounded value
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def is_finite_number(value: Optional[float]) -> bool:
    """Return True when value is a real, finite number."""
    if value is None:
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False
