import io
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from menu.logic.reporting.nutrition import aggregate
from menu.utilities.constants import DAY_NAMES


def generate_pdf_for_week(menu):
    """Generate a PDF table: Day / Recipe / Time / Difficulty / Calories, followed by the week's totals."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"{menu.name} – Semana {menu.week_number}", styles["Title"]),
        Spacer(1, 16),
    ]

    data = [["Día", "Receta", "Tiempo", "Dificultad", "Calorías"]]
    for day, recipe in zip(DAY_NAMES, menu.days):
        data.append([
            day,
            Paragraph(recipe.name, styles["BodyText"]),
            recipe.prep_time,
            recipe.difficulty,
            f"{recipe.total_calories} kcal" if recipe.nutrition else "-",
        ])

    table = Table(data, repeatRows=1, colWidths=[80, 420, 80, 80, 80])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))
    elements.append(table)

    summary = aggregate(menu)
    elements += [
        Spacer(1, 16),
        Paragraph(
            f"Total: {summary.total_calories} kcal · Promedio diario: {summary.avg_calories:.0f} kcal · "
            f"Vegetarianas: {summary.vegetarian_count} · Rápidas: {summary.quick_count}",
            styles["Normal"],
        ),
    ]
    doc.build(elements)
    return buf.getvalue()
