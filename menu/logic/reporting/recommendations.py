"""Rule-based weekly recommendations derived from a WeeklySummary."""
from typing import List

from menu.logic.reporting.nutrition import WeeklySummary
from menu.utilities.constants import WEEKLY_HIGH_CALORIE_AVG, WEEKLY_LOW_CALORIE_AVG

LOW_CALORIE_WARNING = "⚠ Promedio calórico bajo - considera aumentar las porciones"
HIGH_CALORIE_WARNING = "⚠ Promedio calórico alto - considera recetas más ligeras"
BALANCED_CALORIES = "✓ Promedio calórico balanceado"
ADD_VEGETARIAN = "💡 Considera agregar recetas vegetarianas para mayor variedad"
GOOD_VEGETARIAN_VARIETY = "✓ Buena variedad con opciones vegetarianas"
BEGINNER_FRIENDLY = "✓ Mayoría de recetas fáciles - ideal para principiantes"
BUSY_DAYS_FRIENDLY = "✓ Varias recetas rápidas - ideal para días ocupados"


def recommend(summary: WeeklySummary) -> List[str]:
    """Advisory lines in fixed rule order; the calorie line is always present."""
    lines: List[str] = []
    if summary.avg_calories < WEEKLY_LOW_CALORIE_AVG:
        lines.append(LOW_CALORIE_WARNING)
    elif summary.avg_calories > WEEKLY_HIGH_CALORIE_AVG:
        lines.append(HIGH_CALORIE_WARNING)
    else:
        lines.append(BALANCED_CALORIES)

    if summary.vegetarian_count == 0:
        lines.append(ADD_VEGETARIAN)
    elif summary.vegetarian_count >= 2:
        lines.append(GOOD_VEGETARIAN_VARIETY)

    if summary.easy_count >= 3:
        lines.append(BEGINNER_FRIENDLY)

    if summary.quick_count >= 3:
        lines.append(BUSY_DAYS_FRIENDLY)
    return lines


__all__ = [
    "recommend", "LOW_CALORIE_WARNING", "HIGH_CALORIE_WARNING", "BALANCED_CALORIES",
    "ADD_VEGETARIAN", "GOOD_VEGETARIAN_VARIETY", "BEGINNER_FRIENDLY", "BUSY_DAYS_FRIENDLY"
]
