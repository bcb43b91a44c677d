"""Plain-text weekly report of a menu: one block per day followed by the week's totals."""
from menu.domain.WeeklyMenu import WeeklyMenu
from menu.logic.reporting.nutrition import aggregate

_RULE = "═" * 39
_THIN_RULE = "─" * 37


def weekly_report(menu: WeeklyMenu) -> str:
    summary = aggregate(menu)
    lines = [
        _RULE,
        f"  MINUTA SEMANAL: {menu.name}",
        f"  Semana #{menu.week_number}",
        _RULE,
        "",
    ]
    for day_name, recipe in zip(("LUNES", "MARTES", "MIÉRCOLES", "JUEVES", "VIERNES"), menu.days):
        lines.append(f"{day_name}: {recipe.name}")
        lines.append(f"  {recipe.description}")
        lines.append(f"  Tiempo: {recipe.prep_time} | Dificultad: {recipe.difficulty}")
        if recipe.nutrition is not None:
            lines.append(f"  Calorías: {recipe.total_calories} kcal")
            lines.append(f"  {recipe.nutrition.recommendations()[0]}")
        lines.append("")
    lines += [
        _THIN_RULE,
        "RESUMEN SEMANAL:",
        f"  Total de calorías: {summary.total_calories} kcal",
        f"  Promedio diario: {summary.avg_calories:.0f} kcal",
        f"  Recetas vegetarianas: {summary.vegetarian_count}",
        f"  Recetas rápidas: {summary.quick_count}",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


__all__ = ["weekly_report"]
