import io
from typing import Any, Dict, List

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from weekmenu.domain.Menu import Menu


def _fmt_quantity(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return f"{value:g}" if isinstance(value, float) else str(value)


def generate_shopping_list_pdf(menu: Menu, items: List[Dict[str, Any]], number_of_people: int) -> bytes:
    """Render a shopping list as a PDF table: Ingredient / Quantity / Unit."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20)

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Shopping List - Week {menu.week} ({menu.menu_type})", styles["Title"]),
        Paragraph(f"For {number_of_people} {'person' if number_of_people == 1 else 'people'}", styles["Normal"]),
        Spacer(1, 16),
    ]

    data = [["Ingredient", "Quantity", "Unit"]]
    for item in items:
        data.append([item["name"], _fmt_quantity(item["quantity"]), item["unit"]])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("ALIGN", (1, 0), (-1, -1), "CENTER"),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 12),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 10),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
