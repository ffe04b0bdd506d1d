"""TheMealDB client: fetches one random recipe."""

import logging

import requests

from .config import get_settings
from .errors import UpstreamUnavailable
from .suggestions import Recipe

logger = logging.getLogger(__name__)

# TheMealDB meals carry strIngredient1..20 / strMeasure1..20
MAX_INGREDIENTS = 20

NO_RECIPE_MESSAGE = "We can't come up with a recipe for you right now. Sorry."


def extract_ingredients(meal: dict) -> list[str]:
    """Collect "{measure} {ingredient}" lines in slot order.

    Stops at the first empty ingredient slot; later slots are not read
    even if they hold a value.
    """
    ingredients = []
    for i in range(1, MAX_INGREDIENTS + 1):
        ingredient = meal.get(f"strIngredient{i}")
        if not ingredient:
            break
        measure = meal.get(f"strMeasure{i}") or ""
        ingredients.append(f"{measure} {ingredient}".strip())
    return ingredients


def fetch_random_recipe() -> Recipe:
    """Fetch a random recipe.

    Raises:
        UpstreamUnavailable: On any failure to get a usable meal.
    """
    settings = get_settings()
    try:
        response = requests.get(
            f"{settings.recipe_api_base}/random.php",
            timeout=settings.request_timeout,
        )
        response.raise_for_status()
        meal = response.json()["meals"][0]
        recipe = Recipe(
            name=meal["strMeal"],
            ingredients=tuple(extract_ingredients(meal)),
            instructions=meal.get("strInstructions") or "",
        )
    except (requests.exceptions.RequestException, ValueError, KeyError, IndexError, TypeError) as e:
        logger.error(f"TheMealDB request failed: {e}")
        raise UpstreamUnavailable(NO_RECIPE_MESSAGE) from e

    logger.info(f"Fetched recipe {recipe.name!r} with {len(recipe.ingredients)} ingredients")
    return recipe
