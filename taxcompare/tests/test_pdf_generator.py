"""PDF report tests: a valid document comes back rewound, failures never leak a partial buffer."""
from __future__ import annotations

import datetime

import pytest
from reportlab.platypus import SimpleDocTemplate

from taxcompare.engine.tax_engine import compare_regimes
from taxcompare.intake.schemas import TaxInputs
from taxcompare.report.pdf_generator import (
    ReportGenerationError,
    generate_tax_report,
    report_filename,
)


def test_report_is_pdf_and_rewound(salaried_inputs: TaxInputs) -> None:
    comparison = compare_regimes(salaried_inputs)
    buffer = generate_tax_report(salaried_inputs, comparison, datetime.date(2025, 3, 31))

    assert buffer.tell() == 0
    content = buffer.read()
    assert content.startswith(b"%PDF")
    assert len(content) > 1_000


def test_report_for_surcharge_income() -> None:
    inputs = TaxInputs(gross_salary=30_000_000, section_80c=150_000)
    buffer = generate_tax_report(inputs, compare_regimes(inputs))
    assert buffer.getvalue().startswith(b"%PDF")


def test_build_failure_raises_report_generation_error(
    salaried_inputs: TaxInputs, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _broken_build(self, *args, **kwargs):
        raise RuntimeError("layout error")

    monkeypatch.setattr(SimpleDocTemplate, "build", _broken_build)

    with pytest.raises(ReportGenerationError, match="Failed to generate PDF report") as exc_info:
        generate_tax_report(salaried_inputs, compare_regimes(salaried_inputs))
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.parametrize(
    ("fiscal_year", "today", "expected"),
    [
        ("2024-25", datetime.date(2025, 1, 15), "Tax_Comparison_Report_2024-25_2025.pdf"),
        ("2024-25", datetime.date(2024, 12, 31), "Tax_Comparison_Report_2024-25_2024.pdf"),
    ],
)
def test_report_filename(fiscal_year: str, today: datetime.date, expected: str) -> None:
    assert report_filename(fiscal_year, today) == expected
