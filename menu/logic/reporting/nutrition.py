"""Nutrition aggregation over a weekly menu.

Macro totals truncate each day's grams to an integer before summing, which
matches how the per-day values are displayed.
"""
from typing import Any, Dict, List

from menu.domain.WeeklyMenu import WeeklyMenu
from menu.utilities.constants import DAY_NAMES, DAYS_PER_MENU, DIFFICULTY_EASY


class WeeklySummary:
    def __init__(self, total_calories: int = 0, avg_calories: float = 0.0, total_protein: int = 0,
                 total_carbs: int = 0, total_fat: int = 0, vegetarian_count: int = 0,
                 quick_count: int = 0, easy_count: int = 0):
        self.total_calories = total_calories
        self.avg_calories = avg_calories
        self.total_protein = total_protein
        self.total_carbs = total_carbs
        self.total_fat = total_fat
        self.vegetarian_count = vegetarian_count
        self.quick_count = quick_count
        self.easy_count = easy_count

    def __str__(self) -> str:
        return (f"Total: {self.total_calories} kcal - Avg/day: {self.avg_calories:.0f} kcal - "
                f"Vegetarian: {self.vegetarian_count} - Quick: {self.quick_count}")

    __repr__ = __str__

    def to_dict(self):
        return {
            "total_calories": self.total_calories,
            "avg_calories": self.avg_calories,
            "total_protein": self.total_protein,
            "total_carbs": self.total_carbs,
            "total_fat": self.total_fat,
            "vegetarian_count": self.vegetarian_count,
            "quick_count": self.quick_count,
            "easy_count": self.easy_count,
        }


def aggregate(menu: WeeklyMenu) -> WeeklySummary:
    """Aggregate calories, macros and category counts across the menu's five days."""
    total_calories = total_protein = total_carbs = total_fat = 0
    for recipe in menu.days:
        info = recipe.nutrition
        if info is None:
            continue
        total_calories += info.calories
        total_protein += int(info.protein)
        total_carbs += int(info.carbs)
        total_fat += int(info.fat)
    return WeeklySummary(
        total_calories=total_calories,
        avg_calories=total_calories / float(DAYS_PER_MENU),
        total_protein=total_protein,
        total_carbs=total_carbs,
        total_fat=total_fat,
        vegetarian_count=sum(1 for r in menu.days if r.is_vegetarian()),
        quick_count=sum(1 for r in menu.days if r.is_quick()),
        easy_count=sum(1 for r in menu.days if r.difficulty == DIFFICULTY_EASY),
    )


def daily_breakdown(menu: WeeklyMenu) -> Dict[str, Any]:
    """Per-day nutrition plus week totals.

    Returns structure:
    {
      'week': int,
      'days': [ { 'day': 'Lunes', 'recipe_id': str, 'name': str, 'calories': int,
                  'protein': g, 'carbs': g, 'fat': g }, ... ],
      'week_totals': { 'calories': int, 'protein': g, 'carbs': g, 'fat': g }
    }
    """
    days: List[Dict[str, Any]] = []
    for day_name, recipe in zip(DAY_NAMES, menu.days):
        info = recipe.nutrition
        days.append({
            'day': day_name,
            'recipe_id': recipe.id,
            'name': recipe.name,
            'calories': info.calories if info else 0,
            'protein': info.protein if info else 0,
            'carbs': info.carbs if info else 0,
            'fat': info.fat if info else 0,
        })
    summary = aggregate(menu)
    return {
        'week': menu.week_number,
        'days': days,
        'week_totals': {
            'calories': summary.total_calories,
            'protein': summary.total_protein,
            'carbs': summary.total_carbs,
            'fat': summary.total_fat,
        }
    }


__all__ = ["WeeklySummary", "aggregate", "daily_breakdown"]
