"""Weekly plan cache: one generated WeeklyMenu per week number, plus an id index of composites.

Plans are generated once per process and never recomputed or evicted. A single
lock covers check, generation and storage, so concurrent requests for the same
week all receive the instance stored by the first one, and a week's composites
become addressable by id at the same moment its plan does.
"""
import logging
import random
import time
from datetime import date
from threading import Lock
from typing import Callable, Dict, List, Optional

from menu.domain.Recipe import Recipe
from menu.domain.WeeklyMenu import WeeklyMenu
from menu.infra.Recipe_Repository import RecipeRepository
from menu.logic.planning.selector import select

logger = logging.getLogger(__name__)

_SECONDS_PER_DAY = 60 * 60 * 24


def _fallback_week_number() -> int:
    epoch_days = int(time.time() // _SECONDS_PER_DAY)
    return (epoch_days // 7) % 52 + 1


class WeeklyPlanCache:
    def __init__(self, catalog: RecipeRepository, rng: Optional[random.Random] = None,
                 today: Callable[[], date] = date.today):
        self._catalog = catalog
        self._rng = rng or random.Random()
        self._today = today
        self._lock = Lock()
        self._plans: Dict[int, WeeklyMenu] = {}
        self._composites: Dict[str, Recipe] = {}

    @property
    def catalog(self) -> RecipeRepository:
        return self._catalog

    def __contains__(self, week_number: int) -> bool:
        with self._lock:
            return week_number in self._plans

    def __len__(self) -> int:
        with self._lock:
            return len(self._plans)

    def cached_weeks(self) -> List[int]:
        with self._lock:
            return sorted(self._plans)

    def current_week_number(self) -> int:
        """ISO week of today's date; a coarse epoch-based week if the date lookup fails."""
        try:
            return self._today().isocalendar()[1]
        except Exception as e:
            week = _fallback_week_number()
            logger.warning(f"Could not determine ISO week ({e}); falling back to week {week}")
            return week

    def get_or_create(self, week_number: int) -> WeeklyMenu:
        """Return the plan for ``week_number``, generating and storing it on first request.

        Planning errors propagate and leave the cache untouched.
        """
        with self._lock:
            plan = self._plans.get(week_number)
            if plan is not None:
                return plan
            composites: Dict[str, Recipe] = {}
            plan = select(week_number, self._catalog.get_all(), self._rng, composites)
            self._composites.update(composites)
            self._plans[week_number] = plan
        logger.info(f"Generated plan for week {week_number}: {[r.name for r in plan.days]}")
        return plan

    def get_composite(self, recipe_id: str) -> Optional[Recipe]:
        """Composite recipe by id, falling back to the catalog; None when unknown."""
        with self._lock:
            recipe = self._composites.get(recipe_id)
        if recipe is not None:
            return recipe
        return self._catalog.get_by_id(recipe_id)
