"""
➡️ But : Transformer un instantané de statistiques en fichier téléchargeable.

Aucun accès à la base : on reçoit un mapping player_id -> agrégat déjà calculé.
- xlsx : une feuille "Stats" (openpyxl)
- pdf  : document A4 paginé (reportlab)

Colonnes : Name, Jersey Number, Total Passes, Average Rating (2 décimales, 0 sans passe).
"""

import io
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from openpyxl import Workbook
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas

from volley_stats.core.errors import ValidationError

COLUMNS = ["Name", "Jersey Number", "Total Passes", "Average Rating"]
PDF_TITLE = "Volleyball Statistics"
FILE_STEM = "volleyball_stats"


class ExportFormat(str, Enum):
    xlsx = "xlsx"
    pdf = "pdf"


MEDIA_TYPES = {
    ExportFormat.xlsx: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ExportFormat.pdf: "application/pdf",
}


def format_average(stat: Any) -> float:
    avg = getattr(stat, "average_rating", None)
    if not getattr(stat, "total_passes", 0) or avg is None:
        return 0
    return round(float(avg), 2)


def stats_rows(stats: Mapping[int, Any]) -> List[Tuple[Optional[str], Optional[int], int, float]]:
    return [
        (s.name, s.jersey_number, int(s.total_passes or 0), format_average(s))
        for s in stats.values()
    ]


def to_xlsx(stats: Mapping[int, Any]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Stats"
    ws.append(COLUMNS)
    for row in stats_rows(stats):
        ws.append(list(row))

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def to_pdf(stats: Mapping[int, Any]) -> bytes:
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4

    # Titre
    y = height - 2 * cm
    pdf.setFont("Helvetica-Bold", 16)
    pdf.drawString(2 * cm, y, PDF_TITLE)
    y -= 30

    pdf.setFont("Helvetica", 11)
    for name, jersey, total, avg in stats_rows(stats):
        # un bloc = 3 lignes, on change de page s'il ne tient plus
        if y < 3 * cm:
            pdf.showPage()
            pdf.setFont("Helvetica", 11)
            y = height - 2 * cm

        pdf.drawString(2 * cm, y, f"{name} (#{jersey})")
        pdf.drawString(2 * cm, y - 14, f"Total Passes: {total}")
        pdf.drawString(2 * cm, y - 28, f"Average Rating: {avg:.2f}" if total else "Average Rating: 0")
        y -= 50

    pdf.save()
    return buffer.getvalue()


def render(stats: Mapping[int, Any], fmt: Any) -> Tuple[bytes, str, str]:
    """Retourne (contenu, media_type, nom de fichier)."""
    try:
        export_format = ExportFormat(fmt)
    except ValueError:
        raise ValidationError(f"Unsupported export format: {fmt}") from None

    content = to_xlsx(stats) if export_format is ExportFormat.xlsx else to_pdf(stats)
    return content, MEDIA_TYPES[export_format], f"{FILE_STEM}.{export_format.value}"
