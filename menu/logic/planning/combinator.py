"""Merge a main recipe with a side dish, dessert or salad into one composite menu entry.

The composite keeps the primary recipe's identity for display and nutrition
(category, difficulty, servings, origin, prep time, nutrition). The secondary
only contributes text: its ingredients and steps are appended after a
separator line naming it, and its nutrition is not added.
"""
from enum import Enum
from typing import Dict, Optional

from menu.domain.Recipe import Recipe

__all__ = ["Role", "combine", "format_marker", "format_step_separator", "is_marker"]


class Role(Enum):
    SIDE = "con"
    DESSERT = "postre"
    SALAD = "ensalada"

    @property
    def tag(self) -> str:
        return self.value


_MARKER_LABELS = {
    Role.SIDE: "Acompañamiento",
    Role.DESSERT: "Postre",
    Role.SALAD: "Ensalada",
}
_STEP_HEADINGS = {
    Role.SIDE: "Preparación del acompañamiento:",
    Role.DESSERT: "Preparación del postre:",
    Role.SALAD: "Preparación de la ensalada:",
}


def format_marker(role: Role, secondary: Recipe) -> str:
    """Ingredient line separating the primary's ingredients from the secondary's."""
    return f"--- {_MARKER_LABELS[role]}: {secondary.name} ---"


def is_marker(line: str) -> bool:
    """True for ingredient lines produced by format_marker."""
    return line.startswith("--- ") and line.endswith(" ---")


def format_step_separator(role: Role) -> str:
    """Step line separating the primary's steps from the secondary's."""
    return f"\n{_STEP_HEADINGS[role]}"


def _combined_name(primary: Recipe, secondary: Recipe, role: Role) -> str:
    if role is Role.SIDE:
        return f"{primary.name} con {secondary.name}"
    return f"{primary.name} + {secondary.name}"


def _combined_description(primary: Recipe, secondary: Recipe, role: Role) -> str:
    other = secondary.name.lower()
    if role is Role.SIDE:
        return f"{primary.description}. Acompañado de {other}."
    if role is Role.DESSERT:
        return f"{primary.description} Incluye postre: {other}."
    return f"{primary.description} Acompañado de {other}."


def combine(primary: Recipe, secondary: Recipe, role: Role,
            registry: Optional[Dict[str, Recipe]] = None) -> Recipe:
    """Build the composite of ``primary`` and ``secondary`` for the given role.

    When ``registry`` is given the composite is also stored in it under its id.
    """
    composite = primary.copy(
        id=f"{primary.id}_{role.tag}_{secondary.id}",
        name=_combined_name(primary, secondary, role),
        description=_combined_description(primary, secondary, role),
        ingredients=primary.ingredients + [format_marker(role, secondary)] + secondary.ingredients,
        steps=primary.steps + [format_step_separator(role)] + secondary.steps,
        is_favorite=False,
    )
    if registry is not None:
        registry[composite.id] = composite
    return composite
