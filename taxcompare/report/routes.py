"""
Report HTTP route: POST /api/export

Recomputes the comparison from the submitted inputs and streams the PDF.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, StreamingResponse

from taxcompare.config import settings
from taxcompare.engine.routes import make_validation_error_response
from taxcompare.engine.tax_engine import compare_regimes
from taxcompare.intake.schemas import ErrorBody, ErrorResponse, TaxInputs
from taxcompare.intake.validator import InputValidationError, validate_business_rules
from taxcompare.report.pdf_generator import (
    ReportGenerationError,
    generate_tax_report,
    report_filename,
)

router = APIRouter(prefix="/api", tags=["report"])
logger = logging.getLogger(__name__)


@router.post("/export", response_model=None)
async def export_pdf(inputs: TaxInputs) -> StreamingResponse | JSONResponse:
    """Generate and download the Tax Liability Comparison Report."""
    try:
        validate_business_rules(inputs)
    except InputValidationError as exc:
        return make_validation_error_response(exc)

    comparison = compare_regimes(inputs, settings.fiscal_year)

    try:
        buffer = generate_tax_report(inputs, comparison)
    except ReportGenerationError as exc:
        body = ErrorResponse(
            error=ErrorBody(code="REPORT_ERROR", message=str(exc))
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    filename = report_filename(comparison.fiscal_year)
    logger.info("PDF exported filename=%s", filename)

    return StreamingResponse(
        buffer,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
