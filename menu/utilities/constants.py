from typing import Final

# Recipe categories as they appear in the catalog data
CATEGORY_MAIN_DISH: Final[str] = "Plato Principal"
CATEGORY_SOUP: Final[str] = "Sopa/Guiso"
CATEGORY_SIDE_DISH: Final[str] = "Acompañamiento"
CATEGORY_DESSERT: Final[str] = "Postre"
CATEGORY_SALAD: Final[str] = "Ensalada"

# Difficulty levels, ordered from easiest to hardest
DIFFICULTY_EASY: Final[str] = "Fácil"
DIFFICULTY_MEDIUM: Final[str] = "Media"
DIFFICULTY_HARD: Final[str] = "Difícil"
DIFFICULTY_RANK: Final[dict[str, int]] = {
    DIFFICULTY_EASY: 1,
    DIFFICULTY_MEDIUM: 2,
    DIFFICULTY_HARD: 3,
}

# Main dishes that are never served alone, always with a side dish
SIDE_REQUIRED_NAMES: Final[frozenset[str]] = frozenset({
    "Plateada", "Pollo Asado", "Pino de Carne", "Pescado sobre Cebolla",
})
# Building blocks that never make a day of their own
EXCLUDED_NAMES: Final[frozenset[str]] = frozenset({"Salsa Blanca"})

DAYS_PER_MENU: Final[int] = 5
DAY_NAMES: Final[tuple[str, ...]] = ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes")
MENU_NAME_TEMPLATE: Final[str] = "Recetas de la Semana #{week}"

# Probability of attaching two desserts instead of one
TWO_DESSERTS_PROBABILITY: Final[float] = 0.4

# Ingredient keywords that make a recipe non-vegetarian (matched case-insensitively)
MEAT_KEYWORDS: Final[tuple[str, ...]] = ("carne", "pollo", "vacuno", "cerdo", "pescado", "chorizo")
QUICK_RECIPE_MAX_MINUTES: Final[int] = 40

# Per-recipe nutrition thresholds
LOW_CALORIE_LIMIT: Final[int] = 300
HIGH_PROTEIN_LIMIT: Final[float] = 20.0
LOW_SODIUM_LIMIT: Final[int] = 140
HIGH_SODIUM_LIMIT: Final[int] = 400
HIGH_FAT_LIMIT: Final[float] = 20.0
GOOD_FIBER_LIMIT: Final[float] = 5.0

# Weekly average calorie band used by the weekly recommendations
WEEKLY_LOW_CALORIE_AVG: Final[int] = 400
WEEKLY_HIGH_CALORIE_AVG: Final[int] = 800

# Reference daily values (approximate)
DAILY_VALUES: Final[dict[str, float]] = {
    "calories": 2000,
    "protein": 50.0,
    "carbs": 300.0,
    "fat": 70.0,
    "fiber": 25.0,
    "sodium": 2300,
}
