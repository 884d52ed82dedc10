"""PDF export of a single simulation (inputs, results and optional table)."""

import io
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Optional

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

_HEADER_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#E6ECE9")),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ]
)


def _fmt(value) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


def flatten(obj) -> list:
    """Turn a parameter/result dataclass into ``[field, value]`` rows.

    Nested mappings become ``parent.child`` rows; the loan schedule is skipped
    because it is exported as its own table.
    """
    data = asdict(obj) if is_dataclass(obj) else dict(obj)
    rows = []

    def _walk(prefix: str, value):
        if isinstance(value, dict):
            for k, v in value.items():
                key = getattr(k, "value", k)
                _walk(f"{prefix}{key}.", v)
        else:
            rows.append([prefix[:-1], _fmt(value)])

    for k, v in data.items():
        if k == "schedule":
            continue
        _walk(f"{k}.", v)
    return rows


def build_pdf(title: str, params, result, table: Optional[pd.DataFrame] = None) -> bytes:
    """Create a PDF report with the inputs, the results and an optional table."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=36, rightMargin=36)
    styles = getSampleStyleSheet()
    story = [Paragraph(title, styles["Title"]), Spacer(1, 12)]

    for heading, obj in (("Inputs", params), ("Results", result)):
        story.append(Paragraph(heading, styles["Heading2"]))
        t = Table([["Field", "Value"]] + flatten(obj), hAlign="LEFT")
        t.setStyle(_HEADER_STYLE)
        story.extend([t, Spacer(1, 12)])

    if table is not None and not table.empty:
        story.append(Paragraph("Schedule", styles["Heading2"]))
        df = table.reset_index()
        rows = [list(df.columns)] + [[_fmt(v) for v in rec] for rec in df.itertuples(index=False)]
        t = Table(rows, hAlign="LEFT", repeatRows=1)
        t.setStyle(_HEADER_STYLE)
        story.append(t)

    doc.build(story)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes
