"""Recipe catalog: read-only collection of the plain (non-composite) recipes."""
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from menu.domain.Recipe import Recipe
from menu.infra.paths import RECIPES_FILE
from menu.utilities.validators import RecipeInput

logger = logging.getLogger(__name__)


def reading_from_recipes(path: Union[str, Path] = RECIPES_FILE) -> List[Recipe]:
    """Read and validate recipes from a JSON file with proper error handling."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            recipes_data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Recipes file not found: {path}. Returning empty list.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in recipes file: {e}")
        return []
    if not isinstance(recipes_data, list):
        logger.error(f"Recipes file {path} must contain a JSON list, got {type(recipes_data).__name__}")
        return []

    recipes = []
    for position, entry in enumerate(recipes_data):
        try:
            validated = RecipeInput.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"Skipping invalid recipe entry #{position}: {e.error_count()} error(s): {e}")
            continue
        recipes.append(Recipe.from_dict(validated.model_dump()))
    return recipes


class RecipeRepository:
    """Catalog lookups over a fixed list of recipes. Returned recipes must not be mutated."""

    def __init__(self, recipes: Iterable[Recipe]):
        self._recipes: List[Recipe] = []
        self._by_id: Dict[str, Recipe] = {}
        for recipe in recipes:
            if recipe.id in self._by_id:
                logger.warning(f"Duplicate recipe id '{recipe.id}' ({recipe.name}); keeping the first entry")
                continue
            self._by_id[recipe.id] = recipe
            self._recipes.append(recipe)

    @classmethod
    def from_json(cls, path: Union[str, Path] = RECIPES_FILE) -> 'RecipeRepository':
        repo = cls(reading_from_recipes(path))
        logger.info(f"Loaded {len(repo)} recipes from {path}")
        return repo

    def __len__(self) -> int:
        return len(self._recipes)

    def get_all(self) -> List[Recipe]:
        return list(self._recipes)

    def get_by_id(self, recipe_id: str) -> Optional[Recipe]:
        return self._by_id.get(recipe_id)

    def get_by_category(self, category: str) -> List[Recipe]:
        return [r for r in self._recipes if r.category == category]

    def search(self, query: str) -> List[Recipe]:
        """Recipes whose name or description contains the query (case-insensitive)."""
        if not query or not query.strip():
            return self.get_all()
        q = query.strip().lower()
        return [r for r in self._recipes if q in r.name.lower() or q in r.description.lower()]
