"""
pdf_generator.py: printable Tax Liability Comparison Report.

Builds the report with reportlab PLATYPUS into a BytesIO buffer (no temp file).

Entry point:
    generate_tax_report(inputs, comparison, generated_on=None) -> BytesIO

buffer.seek(0) is called after doc.build(story): reportlab leaves the buffer
position at the end, and a caller streaming it would read 0 bytes.

Any failure while building raises ReportGenerationError. The partial buffer is
closed and never handed back, so a caller can only ever see a complete PDF.

Sections:
  1. Title + "Financial Year | Generated on" header
  2. Income summary
  3. Deductions applied (old regime only, capped amounts)
  4. Comparison table: Particulars | Old Regime | New Regime (recommended highlighted)
  5. Recommendation + savings
  6. Notes and footer
"""
from __future__ import annotations

import datetime
import logging
from io import BytesIO

from reportlab.lib.colors import HexColor, black
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from taxcompare.config import settings
from taxcompare.engine.schemas import Regime, TaxComparison
from taxcompare.intake.schemas import TaxInputs
from taxcompare.report.formatting import REGIME_NAMES, format_inr

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Colour constants
# ---------------------------------------------------------------------------

GREEN_LIGHT = HexColor("#D5F5E3")   # Recommended regime highlight
GREY_LIGHT  = HexColor("#F2F2F2")   # Non-recommended header / section headers

# reportlab's built-in Helvetica has no ₹ glyph
_PDF_CURRENCY_PREFIX = "Rs. "


class ReportGenerationError(RuntimeError):
    """Raised when the PDF report cannot be built."""


def _money(amount: float) -> str:
    return format_inr(amount).replace("₹", _PDF_CURRENCY_PREFIX)


def report_filename(fiscal_year: str, today: datetime.date | None = None) -> str:
    """Download filename, e.g. Tax_Comparison_Report_2024-25_2025.pdf."""
    today = today or datetime.date.today()
    return f"Tax_Comparison_Report_{fiscal_year}_{today.year}.pdf"


# ---------------------------------------------------------------------------
# Private section builders
# ---------------------------------------------------------------------------

def _build_income_table(inputs: TaxInputs, comparison: TaxComparison) -> Table:
    data = [
        ["Gross Salary", _money(inputs.gross_salary)],
        ["Other Income", _money(inputs.other_income)],
        ["Total Income", _money(comparison.old_regime.total_income)],
    ]
    t = Table(data, colWidths=[90 * mm, 50 * mm])
    t.setStyle(TableStyle([
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("LINEABOVE", (0, -1), (-1, -1), 0.5, black),
    ]))
    return t


def _build_deduction_table(comparison: TaxComparison) -> Table:
    """Old regime deductions as actually applied (after caps)."""
    bd = comparison.old_regime.deductions
    rows = [
        ["Standard Deduction",            bd.standard_deduction],
        ["Section 80C",                   bd.section_80c],
        ["Section 80D",                   bd.section_80d],
        ["Section 80CCD(1B)",             bd.section_80ccd1b],
        ["Section 80E",                   bd.section_80e],
        ["Section 80G",                   bd.section_80g],
        ["HRA Exemption",                 bd.hra_exemption],
        ["LTA",                           bd.lta],
        ["Home Loan Interest u/s 24(b)",  bd.home_loan_interest],
        ["Total Deductions",              comparison.old_regime.total_deductions],
    ]
    data = [["Deduction", "Amount"]] + [[label, _money(v)] for label, v in rows]

    t = Table(data, colWidths=[90 * mm, 50 * mm])
    t.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), GREY_LIGHT),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.5, black),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]))
    return t


def _build_comparison_table(comparison: TaxComparison) -> Table:
    """
    Three columns: Particulars | Old Regime | New Regime, one row per TaxResult
    currency field. The recommended column header is GREEN_LIGHT, the other
    GREY_LIGHT; the Total Tax Liability row is bold.
    """
    old = comparison.old_regime
    new = comparison.new_regime
    rec_col = 1 if comparison.recommended_regime == Regime.old else 2
    other_col = 3 - rec_col

    fields = [
        ("Total Income",            "total_income"),
        ("Total Deductions",        "total_deductions"),
        ("Taxable Income",          "taxable_income"),
        ("Tax Before Rebate",       "tax_before_rebate"),
        ("Rebate u/s 87A",          "rebate_amount"),
        ("Tax After Rebate",        "tax_after_rebate"),
        ("Surcharge",               "surcharge"),
        ("Health & Education Cess", "cess"),
        ("Total Tax Liability",     "total_tax"),
    ]
    header = ["Particulars", "Old Regime", "New Regime"]
    header[rec_col] += " (Recommended)"
    data = [header] + [
        [label, _money(getattr(old, name)), _money(getattr(new, name))]
        for label, name in fields
    ]

    t = Table(data, colWidths=[70 * mm, 50 * mm, 50 * mm])
    t.setStyle(TableStyle([
        ("BACKGROUND", (rec_col, 0), (rec_col, 0), GREEN_LIGHT),
        ("BACKGROUND", (other_col, 0), (other_col, 0), GREY_LIGHT),
        ("BACKGROUND", (0, 0), (0, 0), GREY_LIGHT),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("LINEABOVE", (0, -1), (-1, -1), 1, black),
        ("GRID", (0, 0), (-1, -1), 0.5, black),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("ALIGN", (0, 0), (0, -1), "LEFT"),
        ("TOPPADDING", (0, 0), (-1, -1), 4),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ("LEFTPADDING", (0, 0), (0, -1), 6),
    ]))
    return t


def _build_story(
    inputs: TaxInputs,
    comparison: TaxComparison,
    generated_on: datetime.date,
) -> list:
    styles = getSampleStyleSheet()
    story = []

    # 1. Header
    title_style = ParagraphStyle(
        "report_title",
        parent=styles["Heading1"],
        fontSize=20,
        fontName="Helvetica-Bold",
        alignment=1,
    )
    subtitle_style = ParagraphStyle("report_subtitle", parent=styles["Normal"], alignment=1)
    story.append(Paragraph(settings.report_title, title_style))
    story.append(Spacer(1, 2 * mm))
    story.append(Paragraph(
        f"Financial Year {comparison.fiscal_year} | "
        f"Generated on: {generated_on.strftime('%d %B %Y')}",
        subtitle_style,
    ))
    story.append(Spacer(1, 8 * mm))

    # 2. Income summary
    story.append(KeepTogether([
        Paragraph("Income Summary", styles["Heading2"]),
        _build_income_table(inputs, comparison),
    ]))
    story.append(Spacer(1, 6 * mm))

    # 3. Deductions applied
    story.append(KeepTogether([
        Paragraph("Deductions Applied (Old Regime Only)", styles["Heading2"]),
        Spacer(1, 2 * mm),
        _build_deduction_table(comparison),
    ]))
    story.append(Spacer(1, 6 * mm))

    # 4. Comparison table
    story.append(KeepTogether([
        Paragraph("Tax Liability Comparison", styles["Heading2"]),
        Spacer(1, 2 * mm),
        _build_comparison_table(comparison),
    ]))
    story.append(Spacer(1, 8 * mm))

    # 5. Recommendation: single-cell callout with GREEN_LIGHT background
    callout_style = ParagraphStyle(
        "callout",
        parent=styles["Normal"],
        fontSize=12,
        leading=16,
        fontName="Helvetica-Bold",
    )
    callout = Table(
        [[Paragraph(
            f"Recommended: {REGIME_NAMES[comparison.recommended_regime]}<br/>"
            f"Potential Savings: {_money(comparison.savings)}",
            callout_style,
        )]],
        colWidths=[170 * mm],
    )
    callout.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, -1), GREEN_LIGHT),
        ("BOX", (0, 0), (-1, -1), 1, black),
        ("TOPPADDING", (0, 0), (-1, -1), 10),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 10),
        ("LEFTPADDING", (0, 0), (-1, -1), 12),
    ]))
    story.append(KeepTogether([
        Paragraph("Tax Savings Recommendation", styles["Heading2"]),
        callout,
    ]))
    story.append(Spacer(1, 8 * mm))

    # 6. Notes
    note_style = ParagraphStyle(
        "note",
        parent=styles["Normal"],
        fontSize=9,
        fontName="Helvetica-Oblique",
    )
    story.append(Paragraph(
        f"Note: This calculation is based on the tax slabs and rules for FY {comparison.fiscal_year}.",
        note_style,
    ))
    story.append(Paragraph(
        "Please consult a tax advisor for personalized tax planning advice.",
        note_style,
    ))
    return story


def _draw_footer(canvas, doc) -> None:
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.drawCentredString(A4[0] / 2, 12 * mm, f"Generated by taxcompare | Page {doc.page}")
    canvas.restoreState()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def generate_tax_report(
    inputs: TaxInputs,
    comparison: TaxComparison,
    generated_on: datetime.date | None = None,
) -> BytesIO:
    """
    Generate the printable comparison report.

    Args:
        inputs: The TaxInputs the comparison was computed from (income summary).
        comparison: TaxComparison from compare_regimes().
        generated_on: Date printed in the header; defaults to today.

    Returns:
        BytesIO buffer at position 0.

    Raises:
        ReportGenerationError: if reportlab fails to lay out or write the document.
    """
    generated_on = generated_on or datetime.date.today()
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title=settings.report_title,
    )

    try:
        story = _build_story(inputs, comparison, generated_on)
        doc.build(story, onFirstPage=_draw_footer, onLaterPages=_draw_footer)
    except Exception as exc:
        buffer.close()
        logger.error("PDF report generation failed", exc_info=True)
        raise ReportGenerationError("Failed to generate PDF report") from exc

    buffer.seek(0)  # reset position before the caller reads

    logger.info(
        "PDF report generated fiscal_year=%s recommended=%s",
        comparison.fiscal_year,
        comparison.recommended_regime.value,
    )
    return buffer
