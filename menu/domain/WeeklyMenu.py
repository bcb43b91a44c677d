"""WeeklyMenu domain entity: the five weekday recipes (Monday..Friday) planned for one week."""
from typing import Dict, List, Sequence

from menu.domain.Recipe import Recipe
from menu.domain.errors import InvalidMenuShapeError
from menu.utilities.constants import DAY_NAMES, DAYS_PER_MENU, DIFFICULTY_RANK


class WeeklyMenu:
    def __init__(self, name: str, week_number: int, days: Sequence[Recipe]):
        days = tuple(days)
        if len(days) != DAYS_PER_MENU:
            raise InvalidMenuShapeError(len(days), DAYS_PER_MENU)
        for recipe in days:
            if not recipe.name or not recipe.name.strip():
                raise ValueError(f"Every recipe in a weekly menu needs a name, got blank name for id '{recipe.id}'")
        self.name = name
        self.week_number = week_number
        self._days = days

    @property
    def days(self) -> tuple:
        return self._days

    def __len__(self) -> int:
        return len(self._days)

    def __iter__(self):
        return iter(self._days)

    def __eq__(self, other):
        if not isinstance(other, WeeklyMenu):
            return NotImplemented
        return self.name == other.name and self.week_number == other.week_number

    def __hash__(self):
        return hash((self.name, self.week_number))

    def __str__(self) -> str:
        return f"WeeklyMenu(name='{self.name}', week={self.week_number}, days={len(self._days)})"

    __repr__ = __str__

    def recipe(self, index: int) -> Recipe:
        if not 0 <= index < DAYS_PER_MENU:
            raise IndexError(f"Day index must be between 0 and {DAYS_PER_MENU - 1}, got {index}")
        return self._days[index]

    @property
    def total_calories(self) -> int:
        return sum(r.total_calories for r in self._days)

    @property
    def average_daily_calories(self) -> float:
        return self.total_calories / len(self._days)

    def by_difficulty(self) -> List[Recipe]:
        return sorted(self._days, key=lambda r: DIFFICULTY_RANK.get(r.difficulty, len(DIFFICULTY_RANK) + 1))

    def vegetarian(self) -> List[Recipe]:
        return [r for r in self._days if r.is_vegetarian()]

    def quick(self) -> List[Recipe]:
        return [r for r in self._days if r.is_quick()]

    def count_with_nutrition(self) -> int:
        return sum(1 for r in self._days if r.has_nutrition())

    def daily_calories(self) -> Dict[str, int]:
        return {day: r.total_calories for day, r in zip(DAY_NAMES, self._days)}

    def search(self, query: str) -> List[Recipe]:
        """Recipes whose name or description contains the query (case-insensitive)."""
        if not query or not query.strip():
            return list(self._days)
        q = query.strip().lower()
        return [r for r in self._days if q in r.name.lower() or q in r.description.lower()]

    def has_difficulty_variety(self) -> bool:
        return len({r.difficulty for r in self._days}) >= 2

    def to_dict(self):
        return {
            "name": self.name,
            "week_number": self.week_number,
            "days": [dict(day=day, **r.to_dict()) for day, r in zip(DAY_NAMES, self._days)],
        }
