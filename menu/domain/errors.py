"""Errors raised while building weekly menus."""


class MenuPlanningError(Exception):
    """Base class for weekly menu planning failures."""


class CatalogInsufficientError(MenuPlanningError):
    """A category required by the planner has no eligible recipes."""

    def __init__(self, pool: str, week_number: int):
        self.pool = pool
        self.week_number = week_number
        super().__init__(f"Catalog has no eligible recipes for '{pool}' (week {week_number})")


class InvalidMenuShapeError(MenuPlanningError):
    """A weekly menu was built with a number of days other than five."""

    def __init__(self, days: int, expected: int = 5):
        self.days = days
        self.expected = expected
        super().__init__(f"A weekly menu must contain exactly {expected} recipes, got {days}")
