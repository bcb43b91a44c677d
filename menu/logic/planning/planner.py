"""Plan interface used by the web layer: weekly plans, recipe lookups and nutrition reports.

Every ``week`` argument defaults to the current ISO week.
"""
from collections import defaultdict
from typing import Dict, List, Optional, Set

from menu.domain.Recipe import Recipe
from menu.domain.WeeklyMenu import WeeklyMenu
from menu.infra.Plan_Cache import WeeklyPlanCache
from menu.logic.planning.combinator import is_marker
from menu.logic.reporting.nutrition import WeeklySummary, aggregate, daily_breakdown
from menu.logic.reporting.recommendations import recommend
from menu.logic.reporting.summary import weekly_report
from menu.utilities.constants import DAYS_PER_MENU, DIFFICULTY_MEDIUM, DIFFICULTY_RANK


class MenuPlanner:
    def __init__(self, cache: WeeklyPlanCache):
        self.cache = cache

    def _week(self, week: Optional[int]) -> int:
        return self.cache.current_week_number() if week is None else week

    def get_weekly_plan(self, week: Optional[int] = None) -> WeeklyMenu:
        return self.cache.get_or_create(self._week(week))

    def get_recipe_by_id(self, recipe_id: str) -> Optional[Recipe]:
        return self.cache.get_composite(recipe_id)

    def get_recipe_for_day(self, day: int, week: Optional[int] = None) -> Recipe:
        """Recipe for weekday index 0 (Monday) .. 4 (Friday)."""
        if not 0 <= day < DAYS_PER_MENU:
            raise ValueError(f"Day must be between 0 (Monday) and {DAYS_PER_MENU - 1} (Friday), got {day}")
        return self.get_weekly_plan(week).recipe(day)

    def get_summary(self, week: Optional[int] = None) -> WeeklySummary:
        return aggregate(self.get_weekly_plan(week))

    def get_recommendations(self, week: Optional[int] = None) -> List[str]:
        return recommend(self.get_summary(week))

    def get_report(self, week: Optional[int] = None) -> str:
        return weekly_report(self.get_weekly_plan(week))

    def get_daily_breakdown(self, week: Optional[int] = None):
        return daily_breakdown(self.get_weekly_plan(week))

    def filter_recipes(self, max_calories: int = 500, max_difficulty: str = DIFFICULTY_MEDIUM,
                       week: Optional[int] = None) -> List[Recipe]:
        """Week's recipes within a calorie ceiling and at most the given difficulty."""
        max_rank = DIFFICULTY_RANK.get(max_difficulty, DIFFICULTY_RANK[DIFFICULTY_MEDIUM])
        hardest = max(DIFFICULTY_RANK.values())
        return [
            r for r in self.get_weekly_plan(week).days
            if r.total_calories <= max_calories and DIFFICULTY_RANK.get(r.difficulty, hardest) <= max_rank
        ]

    def get_unique_ingredients(self, week: Optional[int] = None) -> Set[str]:
        """Distinct ingredient lines of the week, a starting point for a shopping list."""
        return {
            line for r in self.get_weekly_plan(week).days
            for line in r.ingredients if not is_marker(line)
        }

    def get_recipes_by_category(self, week: Optional[int] = None) -> Dict[str, List[Recipe]]:
        grouped: Dict[str, List[Recipe]] = defaultdict(list)
        for recipe in self.get_weekly_plan(week).days:
            grouped[recipe.category].append(recipe)
        return dict(grouped)
