"""Recipe domain entity: identity, category, difficulty, ingredient lines, steps, nutrition info."""
import re
from typing import List, Optional

from menu.domain.NutritionalInfo import NutritionalInfo
from menu.utilities.constants import (
    CATEGORY_MAIN_DISH, DIFFICULTY_MEDIUM, MEAT_KEYWORDS, QUICK_RECIPE_MAX_MINUTES
)

_UNITS = r'horas?|hrs?|h|minutos?|minutes?|mins?'
# "60 min", "1 h 30 min", "30-40 min", "30min-40min", "2 horas"; a range counts by its upper bound
_DURATION_RE = re.compile(
    rf'(\d+(?:[.,]\d+)?)\s*({_UNITS})?(?![a-záéíóúñ])'
    rf'(?:\s*[-–]\s*(\d+(?:[.,]\d+)?)\s*({_UNITS})?(?![a-záéíóúñ]))?'
)
_HOUR_UNITS = ('h', 'hr', 'hrs', 'hora', 'horas')


def parse_prep_minutes(prep_time: str) -> Optional[int]:
    """Total minutes in a free-form preparation time, None when no number is found.

    Numbers carrying a time unit are summed. A bare number ("para 4 personas")
    is ignored when the text has any unit-bearing number, and read as minutes
    otherwise.
    """
    if not isinstance(prep_time, str):
        return None
    with_unit = []
    bare = []
    for low, low_unit, high, high_unit in _DURATION_RE.findall(prep_time.lower()):
        value = float((high or low).replace(',', '.'))
        unit = high_unit or low_unit
        if unit:
            with_unit.append(value * 60 if unit in _HOUR_UNITS else value)
        else:
            bare.append(value)
    if with_unit:
        return int(sum(with_unit))
    if bare:
        return int(sum(bare))
    return None


class Recipe:
    def __init__(self, id: str, name: str = "", origin: str = "Chile", description: str = "",
                 prep_time: str = "", difficulty: str = DIFFICULTY_MEDIUM,
                 ingredients: Optional[List[str]] = None, steps: Optional[List[str]] = None,
                 nutrition: Optional[NutritionalInfo] = None, category: str = CATEGORY_MAIN_DISH,
                 servings: int = 4, is_favorite: bool = False):
        self.id = id
        self.name = name
        self.origin = origin
        self.description = description
        self.prep_time = prep_time
        self.difficulty = difficulty
        self.ingredients = ingredients[:] if ingredients else []
        self.steps = steps[:] if steps else []
        self.nutrition = nutrition
        self.category = category
        self.servings = servings
        self.is_favorite = is_favorite

    def __str__(self) -> str:
        return f"{self.name} ({self.id}) - {self.category} - {self.difficulty} - {self.prep_time}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    @property
    def total_calories(self) -> int:
        return self.nutrition.calories if self.nutrition else 0

    def has_nutrition(self) -> bool:
        return self.nutrition is not None

    def is_vegetarian(self) -> bool:
        """True when no ingredient line mentions a meat, poultry or fish keyword."""
        for line in self.ingredients:
            lowered = line.lower()
            if any(word in lowered for word in MEAT_KEYWORDS):
                return False
        return True

    def prep_minutes(self) -> Optional[int]:
        return parse_prep_minutes(self.prep_time)

    def is_quick(self) -> bool:
        minutes = self.prep_minutes()
        return minutes is not None and minutes <= QUICK_RECIPE_MAX_MINUTES

    def detailed_description(self) -> str:
        lines = [
            f"=== {self.name} ===",
            f"Origen: {self.origin}",
            f"Categoría: {self.category}",
            f"Porciones: {self.servings}",
            "",
            "Descripción:",
            self.description,
            "",
            f"Tiempo de preparación: {self.prep_time}",
            f"Dificultad: {self.difficulty}",
        ]
        if self.nutrition is not None:
            lines += ["", "Información Nutricional:", self.nutrition.summary_text()]
        return "\n".join(lines)

    def copy(self, **changes) -> 'Recipe':
        """Return a new Recipe with the given attributes replaced."""
        data = {
            "id": self.id, "name": self.name, "origin": self.origin,
            "description": self.description, "prep_time": self.prep_time,
            "difficulty": self.difficulty, "ingredients": self.ingredients,
            "steps": self.steps, "nutrition": self.nutrition, "category": self.category,
            "servings": self.servings, "is_favorite": self.is_favorite,
        }
        data.update(changes)
        return Recipe(**data)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        d['nutrition'] = NutritionalInfo.from_dict(d.get('nutrition'))
        allowed = {"id", "name", "origin", "description", "prep_time", "difficulty", "ingredients",
                   "steps", "nutrition", "category", "servings", "is_favorite"}
        return Recipe(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "origin": self.origin,
            "description": self.description,
            "prep_time": self.prep_time,
            "difficulty": self.difficulty,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
            "nutrition": self.nutrition.to_dict() if self.nutrition else None,
            "category": self.category,
            "servings": self.servings,
            "is_favorite": self.is_favorite,
        }
