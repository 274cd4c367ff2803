"""
Bundled reference tables.

This module contains the default reference data loaded by
``ReferenceData.from_seed()``: substitution rules, a Ciqual-style nutrition
excerpt (values per 100g), AGRIBALYSE-style climate metrics per product
category (values per kg), the supplements referenced by the deficiency
policy, animal impact records and a handful of classic French recipes.

Tables:
- SUBSTITUTION_RULES
- NUTRITION_RECORDS
- CLIMATE_METRICS
- SUPPLEMENTS
- ANIMAL_IMPACT_RECORDS
- RECIPES
"""

from typing import List, Optional, Tuple

from veganizer.models.impact import AnimalImpactRecord, ClimateMetrics
from veganizer.models.nutrition import NutritionRecord, Supplement
from veganizer.models.recipe import IngredientSlot, Recipe
from veganizer.models.substitution import SubstitutionRule


# ==============================================================================
# SUBSTITUTION RULES
# ==============================================================================

SUBSTITUTION_RULES: List[SubstitutionRule] = [
    # Dairy
    SubstitutionRule(
        original_ingredient="lait",
        vegan_substitute="lait végétal (soja, avoine, amande)",
        substitution_ratio=1.0,
        category="produits_laitiers",
        notes="Choisir selon le goût désiré",
    ),
    SubstitutionRule(
        original_ingredient="beurre",
        vegan_substitute="beurre végétal",
        substitution_ratio=1.0,
        category="produits_laitiers",
        notes="Margarine végétale ou huile selon l'usage",
    ),
    SubstitutionRule(
        original_ingredient="crème fraîche",
        vegan_substitute="crème de soja",
        substitution_ratio=1.0,
        category="produits_laitiers",
        notes="Ou crème de coco pour plus de richesse",
    ),
    SubstitutionRule(
        original_ingredient="fromage",
        vegan_substitute="fromage végétal",
        substitution_ratio=1.0,
        category="produits_laitiers",
        notes="Levure nutritionnelle pour le goût umami",
    ),
    SubstitutionRule(
        original_ingredient="yaourt",
        vegan_substitute="yaourt végétal",
        substitution_ratio=1.0,
        category="produits_laitiers",
        notes="Soja, coco ou amande selon préférence",
    ),

    # Meat
    SubstitutionRule(
        original_ingredient="viande",
        vegan_substitute="haché végétal",
        substitution_ratio=0.8,
        category="viandes",
        notes="Prêt à l'emploi, savoureux et riche en protéines",
    ),
    SubstitutionRule(
        original_ingredient="bœuf",
        vegan_substitute="haché végétal ou seitan",
        substitution_ratio=0.8,
        category="viandes",
        notes="Haché végétal pour la facilité, seitan pour plus de texture",
    ),
    SubstitutionRule(
        original_ingredient="porc",
        vegan_substitute="tempeh ou tofu fumé",
        substitution_ratio=0.9,
        category="viandes",
        notes="Tempeh pour plus de saveur",
    ),
    SubstitutionRule(
        original_ingredient="veau",
        vegan_substitute="haché végétal",
        substitution_ratio=0.8,
        category="viandes",
        notes="Texture tendre et goût authentique",
    ),
    SubstitutionRule(
        original_ingredient="agneau",
        vegan_substitute="seitan aux herbes",
        substitution_ratio=0.8,
        category="viandes",
        notes="Ajouter romarin et thym",
    ),
    SubstitutionRule(
        original_ingredient="poulet",
        vegan_substitute="tofu ou morceaux de soja",
        substitution_ratio=0.9,
        category="viandes",
        notes="Mariner le tofu pour plus de goût",
    ),

    # Eggs
    SubstitutionRule(
        original_ingredient="œuf",
        vegan_substitute="substitut d'œuf ou aquafaba",
        substitution_ratio=1.0,
        category="œufs",
        notes="3 c.à.s d'aquafaba = 1 œuf",
    ),
    SubstitutionRule(
        original_ingredient="œufs",
        vegan_substitute="fécule de maïs + eau",
        substitution_ratio=1.0,
        category="œufs",
        notes="Pour lier les sauces: 1 c.à.s de fécule + 2 c.à.s d'eau = 1 œuf",
    ),

    # Fish
    SubstitutionRule(
        original_ingredient="poisson",
        vegan_substitute="tofu aux algues",
        substitution_ratio=1.0,
        category="poissons",
        notes="Algues nori pour le goût iodé",
    ),
    SubstitutionRule(
        original_ingredient="saumon",
        vegan_substitute="carotte fumée ou tofu mariné",
        substitution_ratio=1.0,
        category="poissons",
        notes="Carotte pour la couleur, fumage liquide pour le goût",
    ),

    # Other
    SubstitutionRule(
        original_ingredient="miel",
        vegan_substitute="sirop d'agave ou sirop d'érable",
        substitution_ratio=0.8,
        category="édulcorants",
        notes="Réduire les autres liquides si nécessaire",
    ),
    SubstitutionRule(
        original_ingredient="gélatine",
        vegan_substitute="agar-agar",
        substitution_ratio=0.5,
        category="gélifiants",
        notes="Plus puissant que la gélatine",
    ),
]


# ==============================================================================
# NUTRITION (per 100g)
# ==============================================================================

# (code, name, kcal, proteins, carbs, fats, fiber, calcium, iron, zinc, b12, vit D)
_NUTRITION_ROWS: List[Tuple] = [
    ("6101", "Bœuf, à bourguignon, cru", 150, 20.8, 0.0, 7.4, 0.0, 6, 2.4, 5.5, 2.1, 0.2),
    ("6254", "Bœuf, viande hachée, 15% MG, crue", 208, 18.5, 0.0, 15.0, 0.0, 7, 2.2, 4.6, 2.0, 0.3),
    ("36004", "Poulet, viande, crue", 121, 21.4, 0.0, 3.9, 0.0, 9, 0.7, 1.5, 0.3, 0.1),
    ("6520", "Veau, escalope, crue", 109, 22.6, 0.0, 2.0, 0.0, 8, 0.8, 3.4, 1.1, 0.2),
    ("28900", "Lardons, crus", 276, 14.6, 0.5, 24.0, 0.0, 9, 0.7, 1.9, 0.6, 0.5),
    ("26037", "Saumon, cru, élevage", 208, 20.4, 0.0, 13.4, 0.0, 9, 0.3, 0.4, 3.2, 8.0),
    ("19024", "Lait demi-écrémé, UHT", 46, 3.3, 4.8, 1.6, 0.0, 120, 0.02, 0.4, 0.3, 0.02),
    ("16400", "Beurre doux", 745, 0.7, 0.6, 82.0, 0.0, 15, 0.02, 0.1, 0.1, 0.8),
    ("19402", "Crème fraîche épaisse, 30% MG", 292, 2.4, 3.1, 30.0, 0.0, 80, 0.1, 0.3, 0.2, 0.3),
    ("12120", "Fromage râpé, emmental", 380, 28.0, 0.0, 29.5, 0.0, 1000, 0.2, 4.1, 1.9, 0.6),
    ("22000", "Oeuf, cru", 140, 12.7, 0.3, 9.8, 0.0, 55, 1.8, 1.2, 1.6, 1.9),
    ("19590", "Yaourt nature", 61, 4.3, 5.3, 2.4, 0.0, 150, 0.05, 0.5, 0.2, 0.03),
    ("20904", "Tofu nature", 138, 13.3, 1.5, 8.5, 1.5, 340, 2.7, 1.6, 0.0, 0.0),
    ("20910", "Seitan", 120, 24.0, 4.0, 1.5, 0.5, 40, 2.2, 0.9, 0.0, 0.0),
    ("20915", "Tempeh", 195, 19.0, 9.0, 11.0, 6.0, 110, 2.7, 1.1, 0.1, 0.0),
    ("18900", "Lait de soja nature", 39, 3.3, 1.6, 2.0, 0.5, 120, 0.4, 0.3, 0.4, 0.8),
    ("19660", "Crème de soja", 180, 3.0, 4.0, 17.0, 0.5, 5, 0.5, 0.3, 0.0, 0.0),
    ("16700", "Margarine, 80% MG", 717, 0.2, 0.5, 80.0, 0.0, 10, 0.0, 0.0, 0.0, 7.5),
    ("20009", "Carotte, crue", 36, 0.8, 7.6, 0.3, 2.7, 33, 0.3, 0.2, 0.0, 0.0),
    ("20034", "Oignon, cru", 37, 1.2, 6.6, 0.2, 1.6, 23, 0.2, 0.2, 0.0, 0.0),
    ("20031", "Champignon de Paris, cru", 22, 3.1, 1.0, 0.3, 1.9, 3, 0.3, 0.5, 0.0, 0.2),
    ("20047", "Tomate, crue", 18, 0.9, 3.0, 0.3, 1.2, 9, 0.1, 0.1, 0.0, 0.0),
    ("20020", "Courgette, crue", 16, 1.2, 1.6, 0.3, 1.1, 18, 0.3, 0.3, 0.0, 0.0),
    ("20005", "Aubergine, crue", 20, 1.0, 3.0, 0.2, 2.5, 9, 0.2, 0.2, 0.0, 0.0),
    ("20087", "Poivron rouge, cru", 29, 0.9, 5.1, 0.3, 1.9, 7, 0.4, 0.2, 0.0, 0.0),
    ("4003", "Pomme de terre, crue", 80, 2.0, 17.0, 0.1, 2.0, 6, 0.4, 0.3, 0.0, 0.0),
    ("11000", "Ail, cru", 131, 6.6, 21.9, 0.4, 4.7, 17, 0.8, 0.6, 0.0, 0.0),
    ("9100", "Riz blanc, cru", 354, 7.5, 78.0, 0.8, 1.4, 5, 0.4, 1.2, 0.0, 0.0),
    ("9410", "Farine de blé tendre", 343, 10.0, 71.0, 1.2, 3.0, 17, 1.2, 0.8, 0.0, 0.0),
    ("31016", "Sucre blanc", 400, 0.0, 100.0, 0.0, 0.0, 1, 0.03, 0.0, 0.0, 0.0),
    ("5215", "Vin rouge", 79, 0.1, 0.2, 0.0, 0.0, 8, 0.6, 0.1, 0.0, 0.0),
    ("17270", "Huile d'olive vierge extra", 900, 0.0, 0.0, 100.0, 0.0, 1, 0.4, 0.0, 0.0, 0.0),
    ("20505", "Lentilles vertes, cuites", 125, 10.0, 16.6, 0.5, 8.5, 18, 2.4, 1.3, 0.0, 0.0),
    ("20532", "Pois chiche, cuit", 135, 8.3, 18.6, 2.4, 7.6, 43, 2.1, 1.3, 0.0, 0.0),
    ("7110", "Pâte brisée, crue", 450, 6.0, 50.0, 25.0, 2.0, 20, 1.0, 0.6, 0.0, 0.0),
    ("13010", "Citron, pulpe, cru", 29, 0.8, 3.1, 0.3, 2.8, 12, 0.1, 0.1, 0.0, 0.0),
    ("25413", "Salade composée au poulet", 110, 9.0, 5.0, 6.0, 1.5, 30, 0.8, 0.9, 0.2, 0.1),
    ("25000", "Soupe de légumes variés", 32, 1.0, 5.0, 0.8, 1.2, 15, 0.3, 0.2, 0.0, 0.0),
]

NUTRITION_RECORDS: List[NutritionRecord] = [
    NutritionRecord(
        id=f"ciqual-{code}",
        code=code,
        name=name,
        calories=kcal,
        proteins=proteins,
        carbs=carbs,
        fats=fats,
        fiber=fiber,
        calcium=calcium,
        iron=iron,
        zinc=zinc,
        vitamin_b12=b12,
        vitamin_d=vitamin_d,
    )
    for code, name, kcal, proteins, carbs, fats, fiber, calcium, iron, zinc, b12, vitamin_d
    in _NUTRITION_ROWS
]


# ==============================================================================
# CLIMATE (per kg)
# ==============================================================================

CLIMATE_METRICS: List[ClimateMetrics] = [
    ClimateMetrics(category="beef", co2_kg_per_kg=35.0, water_l_per_kg=1451.0, land_m2_per_kg=164.0, biodiversity_impact=9.5),
    ClimateMetrics(category="pork", co2_kg_per_kg=9.3, water_l_per_kg=1796.0, land_m2_per_kg=17.4, biodiversity_impact=4.2),
    ClimateMetrics(category="chicken", co2_kg_per_kg=7.0, water_l_per_kg=660.0, land_m2_per_kg=12.2, biodiversity_impact=3.6),
    ClimateMetrics(category="fish", co2_kg_per_kg=13.6, water_l_per_kg=3691.0, land_m2_per_kg=8.4, biodiversity_impact=5.1),
    ClimateMetrics(category="milk", co2_kg_per_kg=3.2, water_l_per_kg=628.0, land_m2_per_kg=8.9, biodiversity_impact=2.4),
    ClimateMetrics(category="cheese", co2_kg_per_kg=23.9, water_l_per_kg=5605.0, land_m2_per_kg=87.8, biodiversity_impact=7.8),
    ClimateMetrics(category="eggs", co2_kg_per_kg=4.7, water_l_per_kg=578.0, land_m2_per_kg=5.7, biodiversity_impact=2.1),
    ClimateMetrics(category="tofu", co2_kg_per_kg=3.2, water_l_per_kg=149.0, land_m2_per_kg=2.2, biodiversity_impact=0.9),
    ClimateMetrics(category="seitan", co2_kg_per_kg=2.0, water_l_per_kg=100.0, land_m2_per_kg=1.5, biodiversity_impact=0.7),
    ClimateMetrics(category="tempeh", co2_kg_per_kg=2.5, water_l_per_kg=120.0, land_m2_per_kg=2.0, biodiversity_impact=0.8),
    ClimateMetrics(category="lentils", co2_kg_per_kg=0.9, water_l_per_kg=435.0, land_m2_per_kg=7.7, biodiversity_impact=0.6),
    ClimateMetrics(category="chickpeas", co2_kg_per_kg=0.8, water_l_per_kg=400.0, land_m2_per_kg=7.0, biodiversity_impact=0.6),
    ClimateMetrics(category="vegetables", co2_kg_per_kg=0.5, water_l_per_kg=103.0, land_m2_per_kg=0.4, biodiversity_impact=0.3),
    ClimateMetrics(category="grains", co2_kg_per_kg=1.4, water_l_per_kg=740.0, land_m2_per_kg=2.9, biodiversity_impact=0.9),
    ClimateMetrics(category="nuts", co2_kg_per_kg=0.4, water_l_per_kg=4134.0, land_m2_per_kg=13.0, biodiversity_impact=1.2),
]


# ==============================================================================
# SUPPLEMENTS (per serving)
# ==============================================================================

SUPPLEMENTS: List[Supplement] = [
    Supplement(
        id="sup-b12",
        name="Vitamine B12 Vegan",
        type="vitamin",
        priority="critical",
        serving_size="1 comprimé",
        link="https://www.amazon.fr/s?k=vitamine+b12+vegan",
        description="Cyanocobalamine, indispensable dans une alimentation végétale",
        vitamin_b12=25.0,
        co2_kg_per_serving=0.002,
        water_l_per_serving=0.1,
        land_m2_per_serving=0.001,
        biodiversity_impact=0.01,
    ),
    Supplement(
        id="sup-omega3",
        name="Omega 3 Vegan",
        type="omega",
        priority="critical",
        serving_size="2 capsules",
        link="https://www.amazon.fr/s?k=omega+3+algues",
        description="DHA et EPA issus de micro-algues",
        calories=10.0,
        fats=1.1,
        omega3_dha=250.0,
        omega3_epa=125.0,
        co2_kg_per_serving=0.03,
        water_l_per_serving=1.5,
        land_m2_per_serving=0.02,
        biodiversity_impact=0.05,
    ),
    Supplement(
        id="sup-iron",
        name="Fer bisglycinate",
        type="mineral",
        priority="high",
        serving_size="1 gélule",
        link="https://www.amazon.fr/s?k=fer+bisglycinate",
        description="Fer bien toléré, à prendre avec de la vitamine C",
        iron=14.0,
        co2_kg_per_serving=0.004,
        water_l_per_serving=0.2,
        land_m2_per_serving=0.002,
        biodiversity_impact=0.01,
    ),
    Supplement(
        id="sup-zinc",
        name="Zinc bisglycinate",
        type="mineral",
        priority="medium",
        serving_size="1 gélule",
        link="https://www.amazon.fr/s?k=zinc+bisglycinate",
        description="Zinc chélaté pour une meilleure absorption",
        zinc=15.0,
        co2_kg_per_serving=0.003,
        water_l_per_serving=0.2,
        land_m2_per_serving=0.002,
        biodiversity_impact=0.01,
    ),
    Supplement(
        id="sup-calcium",
        name="Calcium + Vitamine D3",
        type="mineral",
        priority="high",
        serving_size="1 comprimé",
        link="https://www.amazon.fr/s?k=calcium+vitamine+d3+vegan",
        description="Calcium d'algues marines et vitamine D3 végétale",
        calcium=500.0,
        co2_kg_per_serving=0.01,
        water_l_per_serving=0.5,
        land_m2_per_serving=0.005,
        biodiversity_impact=0.02,
    ),
    Supplement(
        id="sup-spirulina",
        name="Spiruline",
        type="protein",
        priority="medium",
        serving_size="3 g",
        link="https://www.amazon.fr/s?k=spiruline+bio",
        description="Micro-algue riche en protéines et en fer",
        calories=11.0,
        proteins=1.9,
        carbs=0.7,
        fats=0.2,
        fiber=0.1,
        calcium=4.0,
        iron=0.9,
        zinc=0.1,
        co2_kg_per_serving=0.02,
        water_l_per_serving=2.0,
        land_m2_per_serving=0.01,
        biodiversity_impact=0.03,
    ),
]


# ==============================================================================
# ANIMAL IMPACT (per kg of product)
# ==============================================================================

ANIMAL_IMPACT_RECORDS: List[AnimalImpactRecord] = [
    AnimalImpactRecord(
        product_type="beef",
        animal_type="cow",
        animals_per_kg=0.0036,
        average_weight_kg=600.0,
        lifespan_days=7300,
        actual_age_at_death_days=548,
        notes="Environ 280 kg de viande par bovin",
    ),
    AnimalImpactRecord(
        product_type="pork",
        animal_type="pig",
        animals_per_kg=0.0125,
        average_weight_kg=115.0,
        lifespan_days=5475,
        actual_age_at_death_days=180,
        notes="Environ 80 kg de viande par porc",
    ),
    AnimalImpactRecord(
        product_type="chicken",
        animal_type="chicken",
        animals_per_kg=0.6,
        average_weight_kg=2.5,
        lifespan_days=2920,
        actual_age_at_death_days=42,
        notes="Poulet de chair, environ 1,7 kg de viande",
    ),
    AnimalImpactRecord(
        product_type="fish",
        animal_type="fish",
        animals_per_kg=2.0,
        average_weight_kg=0.8,
        lifespan_days=1825,
        actual_age_at_death_days=730,
    ),
    AnimalImpactRecord(
        product_type="dairy",
        animal_type="cow_dairy",
        animals_per_kg=0.00003,
        average_weight_kg=650.0,
        lifespan_days=7300,
        actual_age_at_death_days=1825,
        notes="Production laitière sur la vie d'une vache",
    ),
    AnimalImpactRecord(
        product_type="eggs",
        animal_type="hen",
        animals_per_kg=0.037,
        average_weight_kg=2.0,
        lifespan_days=2920,
        actual_age_at_death_days=540,
        notes="Environ 27 kg d'œufs par poule pondeuse",
    ),
]


# ==============================================================================
# RECIPES
# ==============================================================================

def _slots(*rows: Tuple[str, Optional[str], bool]) -> List[IngredientSlot]:
    """Build ingredient slots from (original, vegan, is_vegan) rows."""
    return [
        IngredientSlot(original=original, vegan=vegan, is_vegan=is_vegan)
        for original, vegan, is_vegan in rows
    ]


RECIPES: List[Recipe] = [
    Recipe(
        id="rec-1",
        name="Bœuf bourguignon",
        vegan_name="Bourguignon de seitan",
        slots=_slots(
            ("bœuf", "seitan", False),
            ("carottes", "carottes", True),
            ("oignons", "oignons", True),
            ("champignons", "champignons", True),
            ("vin rouge", "vin rouge", True),
            ("lardons", "tofu fumé", False),
        ),
        cooking_time="3h",
        servings=6,
        difficulty="Moyen",
    ),
    Recipe(
        id="rec-2",
        name="Blanquette de veau",
        slots=_slots(
            ("veau", None, False),
            ("carottes", None, True),
            ("champignons", None, True),
            ("crème fraîche", None, False),
            ("beurre", None, False),
            ("oignons", None, True),
        ),
        cooking_time="2h30",
        servings=6,
        difficulty="Moyen",
    ),
    Recipe(
        id="rec-3",
        name="Quiche lorraine",
        vegan_name="Quiche lorraine végétale",
        slots=_slots(
            ("pâte brisée", "pâte brisée végétale", False),
            ("lardons", "lardons végétaux", False),
            ("œufs", "tofu soyeux", False),
            ("crème fraîche", "crème de soja", False),
            ("lait", "lait de soja", False),
            ("fromage râpé", "fromage végétal râpé", False),
        ),
        cooking_time="1h",
        servings=6,
        difficulty="Facile",
    ),
    Recipe(
        id="rec-4",
        name="Poulet basquaise",
        slots=_slots(
            ("poulet", None, False),
            ("poivrons", None, True),
            ("tomates", None, True),
            ("oignons", None, True),
            ("ail", None, True),
            ("riz", None, True),
        ),
        cooking_time="1h15",
        servings=4,
        difficulty="Facile",
    ),
    Recipe(
        id="rec-5",
        name="Gratin dauphinois",
        slots=_slots(
            ("pommes de terre", "pommes de terre", True),
            ("crème fraîche", "crème de soja", False),
            ("lait", "lait d'avoine", False),
            ("ail", "ail", True),
            ("beurre", "margarine", False),
        ),
        cooking_time="1h30",
        servings=6,
    ),
    Recipe(
        id="rec-6",
        name="Saumon à l'oseille",
        slots=_slots(
            ("saumon", None, False),
            ("crème fraîche", None, False),
            ("citron", None, True),
            ("riz", None, True),
        ),
        cooking_time="40min",
        servings=4,
        difficulty="Facile",
    ),
    Recipe(
        id="rec-7",
        name="Crêpes",
        slots=_slots(
            ("farine", "farine", True),
            ("œufs", "fécule de maïs + eau", False),
            ("lait", "lait de soja", False),
            ("beurre", "margarine", False),
            ("sucre", "sucre", True),
        ),
        cooking_time="30min",
        servings=4,
        difficulty="Facile",
    ),
    Recipe(
        id="rec-8",
        name="Ratatouille",
        slots=_slots(
            ("courgettes", "courgettes", True),
            ("aubergines", "aubergines", True),
            ("tomates", "tomates", True),
            ("poivrons", "poivrons", True),
            ("oignons", "oignons", True),
            ("huile d'olive", "huile d'olive", True),
        ),
        servings=4,
    ),
]
