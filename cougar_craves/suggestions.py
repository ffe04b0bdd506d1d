"""Suggestion types returned by the recipe and dining services."""

from dataclasses import dataclass

RULE = "=" * 73
SHORT_RULE = "=" * 53


@dataclass(frozen=True)
class Recipe:
    """A random recipe from TheMealDB."""

    name: str
    ingredients: tuple[str, ...]
    instructions: str

    @property
    def ingredients_text(self) -> str:
        return "\n".join(self.ingredients)


@dataclass(frozen=True)
class Location:
    """A campus dining location."""

    name: str
    latitude: float | None
    longitude: float | None


Suggestion = Recipe | Location


def format_recipe(name: str, ingredients: str, instructions: str) -> str:
    """Render the recipe banner shown after a suggestion or in history."""
    return "\n".join([
        "The universe has spoken! Here is what you will be eating today.",
        RULE,
        name,
        RULE,
        f"\nINGREDIENTS: \n{ingredients}\n",
        f"INSTRUCTIONS: \n{instructions}",
        RULE,
    ])


def format_location(name: str, latitude: float | None = None, longitude: float | None = None) -> str:
    """Render the location banner. Coordinates are shown when known."""
    lines = [
        SHORT_RULE,
        "Guess what? Today you will be eating at:",
        f"Location name: {name}",
    ]
    if latitude is not None and longitude is not None:
        lines.append(f"Location coordinate: {latitude}, {longitude}")
    lines.append(SHORT_RULE)
    return "\n".join(lines)


def format_suggestion(suggestion: Suggestion) -> str:
    if isinstance(suggestion, Recipe):
        return format_recipe(
            suggestion.name, suggestion.ingredients_text, suggestion.instructions
        )
    return format_location(suggestion.name, suggestion.latitude, suggestion.longitude)
