"""
API tests using FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from veganizer.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    assert client.get("/health").json() == {"status": "healthy"}


def test_stats(client):
    stats = client.get("/stats").json()

    assert stats["recipes"] == 8
    assert stats["supplements"] == 6


def test_convert_known_recipe(client):
    response = client.post("/recipes/convert", json={"recipe_name": "Quiche lorraine"})

    assert response.status_code == 200
    data = response.json()
    assert data["vegan_recipe"]["name"] == "Quiche lorraine végétale"
    assert data["substitution_count"] == 6
    assert set(data) == {
        "original_recipe", "vegan_recipe", "nutrition_comparison",
        "climate_comparison", "animal_savings", "shopping_list", "substitution_count",
    }


def test_convert_unknown_recipe_never_404(client):
    response = client.post("/recipes/convert", json={"recipe_name": "Tarte aux pommes"})

    assert response.status_code == 200
    assert response.json()["original_recipe"]["servings"] == 4


@pytest.mark.parametrize("payload", [
    {"recipe_name": ""},
    {"recipe_name": "<b>quiche</b>"},
    {},
])
def test_convert_rejects_invalid_names(client, payload):
    response = client.post("/recipes/convert", json=payload)

    assert response.status_code == 422


def test_search_and_suggestions(client):
    results = client.get("/recipes/search", params={"q": "qu"}).json()
    assert results[0] == {"name": "Quiche lorraine", "description": "1h • 6 personnes • Facile"}

    assert client.get("/recipes/search", params={"q": "q"}).json() == []
    assert client.get("/suggestions", params={"q": "bourg"}).json() == ["Bœuf bourguignon"]


def test_supplements(client):
    names = [s["name"] for s in client.get("/supplements").json()]

    assert names[0] == "Vitamine B12 Vegan"
    assert len(names) == 6


def test_climate_compare(client):
    response = client.post("/climate/compare", json={
        "original_ingredients": [],
        "vegan_ingredients": [],
    })

    assert response.status_code == 200
    data = response.json()
    assert (data["co2_reduction"], data["water_saving"], data["land_saving"]) == (65, 78, 83)


def test_animals_saved(client):
    response = client.post("/animals/saved", json={
        "original_ingredients": ["poulet"],
        "vegan_ingredients": ["tofu"],
        "quantities": [1.0],
    })

    assert response.status_code == 200
    data = response.json()
    assert data["total_animals"] == 0.6
    assert data["animal_breakdown"]["chickens"] == 0.6


def test_menu_animals_saved(client):
    response = client.post("/menus/animals-saved", json={
        "items": [{"recipe_name": "Poulet basquaise", "servings": 2}],
        "timeframe_weeks": 3,
    })

    assert response.status_code == 200
    assert response.json()["total_animals"] == 0.36


def test_ingredient_links(client):
    data = client.get("/ingredients/links").json()

    assert data["stats"]["substitution_ingredients"]["total"] == 34
    assert len(data["links"]) == 106
