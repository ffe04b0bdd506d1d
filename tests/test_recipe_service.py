"""
TheMealDB client tests.
"""
from unittest.mock import patch

import pytest
import requests

from cougar_craves.errors import UpstreamUnavailable
from cougar_craves.recipe_service import extract_ingredients, fetch_random_recipe


def _meal(populated, extra=None):
    meal = {
        "idMeal": "52772",
        "strMeal": "Teriyaki Chicken Casserole",
        "strInstructions": "Preheat oven to 350 F.",
    }
    for i in range(1, 21):
        meal[f"strIngredient{i}"] = f"ingredient {i}" if i <= populated else ""
        meal[f"strMeasure{i}"] = f"{i} cup" if i <= populated else " "
    meal.update(extra or {})
    return meal


def test_seven_ingredients_then_gap(http_response):
    with patch("cougar_craves.recipe_service.requests.get",
               return_value=http_response(200, {"meals": [_meal(7)]})) as get:
        recipe = fetch_random_recipe()

    assert recipe.name == "Teriyaki Chicken Casserole"
    assert recipe.instructions == "Preheat oven to 350 F."
    assert len(recipe.ingredients) == 7
    assert recipe.ingredients[0] == "1 cup ingredient 1"
    assert recipe.ingredients[6] == "7 cup ingredient 7"
    assert get.call_args.args[0] == "https://www.themealdb.com/api/json/v1/1/random.php"
    assert "headers" not in get.call_args.kwargs


def test_stops_at_first_empty_slot_even_if_later_slots_are_filled():
    meal = _meal(3, {"strIngredient5": "saffron", "strMeasure5": "1 pinch"})
    assert extract_ingredients(meal) == ["1 cup ingredient 1", "2 cup ingredient 2", "3 cup ingredient 3"]


def test_null_ingredient_stops_scan():
    meal = _meal(2, {"strIngredient3": None})
    assert len(extract_ingredients(meal)) == 2


def test_all_twenty_slots():
    assert len(extract_ingredients(_meal(20))) == 20


def test_missing_measure_leaves_just_the_ingredient():
    meal = _meal(1, {"strMeasure1": None})
    assert extract_ingredients(meal) == ["ingredient 1"]


@pytest.mark.parametrize("payload", [{"meals": None}, {"meals": []}, {}, {"meals": [{}]}])
def test_unusable_payload_means_no_recipe(http_response, payload):
    with patch("cougar_craves.recipe_service.requests.get", return_value=http_response(200, payload)):
        with pytest.raises(UpstreamUnavailable) as exc:
            fetch_random_recipe()
    assert "can't come up with a recipe" in exc.value.message


def test_http_error_means_no_recipe(http_response):
    with patch("cougar_craves.recipe_service.requests.get", return_value=http_response(500, {})):
        with pytest.raises(UpstreamUnavailable):
            fetch_random_recipe()


def test_timeout_means_no_recipe():
    with patch("cougar_craves.recipe_service.requests.get",
               side_effect=requests.exceptions.Timeout("slow")):
        with pytest.raises(UpstreamUnavailable):
            fetch_random_recipe()
