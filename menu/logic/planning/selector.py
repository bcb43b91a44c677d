"""Weekly selection: pick five weekday recipes from the catalog under category rules.

Rules:
  - Monday is a complete main dish (one that does not need a side).
  - Tuesday is a main dish that requires a side, served with a random side dish;
    when either pool is empty another complete main dish is used instead.
  - Wednesday is a soup or stew.
  - Thursday and Friday are complete main dishes not already in the week.
  - Missing days are backfilled from the eligible pool without duplicates.
  - Desserts are attached to one day, or to two days with probability 0.4.
  - Every day gets a salad, stacked on top of any dessert; a backfilled salad
    day never gets itself as its salad.

Side dishes and desserts never make a day on their own, names in
EXCLUDED_NAMES never appear, and names in SIDE_REQUIRED_NAMES never appear
without a side.
"""
import logging
import random
from typing import Dict, Iterable, List, Optional

from menu.domain.Recipe import Recipe
from menu.domain.WeeklyMenu import WeeklyMenu
from menu.domain.errors import CatalogInsufficientError
from menu.logic.planning.combinator import Role, combine
from menu.utilities.constants import (
    CATEGORY_DESSERT, CATEGORY_MAIN_DISH, CATEGORY_SALAD, CATEGORY_SIDE_DISH, CATEGORY_SOUP,
    DAYS_PER_MENU, EXCLUDED_NAMES, MENU_NAME_TEMPLATE, SIDE_REQUIRED_NAMES, TWO_DESSERTS_PROBABILITY
)

logger = logging.getLogger(__name__)

__all__ = ["CatalogPools", "select"]


class CatalogPools:
    """The catalog partitioned into the pools the weekly rules draw from."""

    def __init__(self, catalog: Iterable[Recipe]):
        recipes = list(catalog)
        self.eligible = [
            r for r in recipes
            if r.name not in EXCLUDED_NAMES
            and r.category not in (CATEGORY_SIDE_DISH, CATEGORY_DESSERT)
        ]
        self.complete_mains = [
            r for r in self.eligible
            if r.category == CATEGORY_MAIN_DISH and r.name not in SIDE_REQUIRED_NAMES
        ]
        self.mains_requiring_side = [r for r in self.eligible if r.name in SIDE_REQUIRED_NAMES]
        self.soups = [r for r in self.eligible if r.category == CATEGORY_SOUP]
        self.sides = [
            r for r in recipes
            if r.category == CATEGORY_SIDE_DISH and r.name not in EXCLUDED_NAMES
        ]
        self.desserts = [r for r in recipes if r.category == CATEGORY_DESSERT]
        self.salads = [r for r in recipes if r.category == CATEGORY_SALAD]
        # Backfill never serves a side-requiring main on its own
        self.backfill = [r for r in self.eligible if r.name not in SIDE_REQUIRED_NAMES]


def _pick_new(pool: List[Recipe], chosen: List[Recipe], rng: random.Random) -> Optional[Recipe]:
    """Random recipe from pool not already chosen, or None when the pool is exhausted."""
    taken = {r.id for r in chosen}
    candidates = [r for r in pool if r.id not in taken]
    return rng.choice(candidates) if candidates else None


def _salad_picks(salads: List[Recipe], base_ids: List[str], rng: random.Random) -> List[Optional[Recipe]]:
    """One salad per day: distinct while the pool lasts, never the day's own recipe.

    A day gets None only when the pool holds no salad other than that day's own.
    """
    picks = rng.sample(salads, min(len(base_ids), len(salads)))
    while len(picks) < len(base_ids):
        picks.append(rng.choice(salads))
    for index, base_id in enumerate(base_ids):
        if picks[index].id != base_id:
            continue
        for other in range(len(picks)):
            if picks[other] is not None and picks[other].id != base_id and base_ids[other] != base_id:
                picks[index], picks[other] = picks[other], picks[index]
                break
        else:
            picks[index] = None
    return picks


def select(week_number: int, catalog: Iterable[Recipe], rng: Optional[random.Random] = None,
           registry: Optional[Dict[str, Recipe]] = None) -> WeeklyMenu:
    """Build a randomized WeeklyMenu for ``week_number``.

    Every composite created along the way (including intermediate ones that a
    later pass wraps again) is stored in ``registry`` when given.

    Raises:
        CatalogInsufficientError: no complete main dish or no soup is available.
        InvalidMenuShapeError: the catalog cannot fill five distinct days.
    """
    rng = rng or random.Random()
    pools = CatalogPools(catalog)
    days: List[Recipe] = []

    # Day 1: complete main dish
    if not pools.complete_mains:
        raise CatalogInsufficientError("complete main dishes", week_number)
    days.append(rng.choice(pools.complete_mains))

    # Day 2: main dish with its side, or another complete main dish
    if pools.mains_requiring_side and pools.sides:
        main = rng.choice(pools.mains_requiring_side)
        side = rng.choice(pools.sides)
        days.append(combine(main, side, Role.SIDE, registry))
    else:
        logger.debug(f"Week {week_number}: no main/side pairing available, using a complete main dish")
        days.append(_pick_new(pools.complete_mains, days, rng) or rng.choice(pools.complete_mains))

    # Day 3: soup or stew
    if not pools.soups:
        raise CatalogInsufficientError("soups and stews", week_number)
    days.append(rng.choice(pools.soups))

    # Days 4-5: complete main dishes not yet in the week
    for _ in range(2):
        pick = _pick_new(pools.complete_mains, days, rng)
        if pick is not None:
            days.append(pick)

    while len(days) < DAYS_PER_MENU:
        pick = _pick_new(pools.backfill, days, rng)
        if pick is None:
            logger.warning(f"Week {week_number}: catalog exhausted after {len(days)} days")
            break
        days.append(pick)

    # Base recipe of each day, before desserts and salads are stacked on
    base_ids = [r.id for r in days]

    if pools.desserts and len(days) >= DAYS_PER_MENU:
        count = 2 if rng.random() > 1 - TWO_DESSERTS_PROBABILITY else 1
        for index in rng.sample(range(len(days)), count):
            dessert = rng.choice(pools.desserts)
            days[index] = combine(days[index], dessert, Role.DESSERT, registry)

    if pools.salads and len(days) >= DAYS_PER_MENU:
        for index, salad in enumerate(_salad_picks(pools.salads, base_ids, rng)):
            if salad is None:
                logger.debug(f"Week {week_number}: no other salad for {days[index].name}")
                continue
            days[index] = combine(days[index], salad, Role.SALAD, registry)

    menu = WeeklyMenu(MENU_NAME_TEMPLATE.format(week=week_number), week_number, days)
    logger.debug(f"Week {week_number} selection: {[r.id for r in menu.days]}")
    return menu
