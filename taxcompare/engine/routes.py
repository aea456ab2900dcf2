"""
Tax engine HTTP routes: POST /api/calculate,
                         GET  /api/regimes

Stateless: every request recomputes from the submitted TaxInputs. Nothing is
stored between calls.
"""
from __future__ import annotations

import logging
import math

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from taxcompare.config import settings
from taxcompare.engine.regimes import get_regime_config, supported_fiscal_years
from taxcompare.engine.schemas import RateSlab, Regime
from taxcompare.engine.tax_engine import compare_regimes
from taxcompare.intake.schemas import ErrorBody, ErrorDetail, ErrorResponse, TaxInputs
from taxcompare.intake.validator import InputValidationError, validate_business_rules
from taxcompare.report.formatting import build_results_view

router = APIRouter(prefix="/api", tags=["tax_engine"])
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def make_validation_error_response(exc: InputValidationError) -> JSONResponse:
    """Return the standard 422 error envelope listing every violation."""
    details = [ErrorDetail(field=v.get("field"), issue=v["issue"]) for v in exc.violations]
    body = ErrorResponse(
        error=ErrorBody(
            code="VALIDATION_ERROR",
            message="Input validation failed",
            details=details,
        )
    )
    return JSONResponse(status_code=422, content=body.model_dump())


def _slab_payload(slabs: tuple[RateSlab, ...]) -> list[dict]:
    """JSON-safe slab table: an unbounded upper limit becomes null."""
    return [
        {
            "lower": slab.lower,
            "upper": None if math.isinf(slab.upper) else slab.upper,
            "rate": slab.rate,
        }
        for slab in slabs
    ]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/calculate")
async def calculate_tax(inputs: TaxInputs) -> JSONResponse:
    """
    Compare both regimes for the submitted inputs.

    Returns the raw TaxComparison plus the formatted results view.
    """
    try:
        validate_business_rules(inputs)
    except InputValidationError as exc:
        return make_validation_error_response(exc)

    comparison = compare_regimes(inputs, settings.fiscal_year)
    view = build_results_view(comparison)

    logger.info(
        "Tax calculated fiscal_year=%s recommended=%s",
        comparison.fiscal_year,
        comparison.recommended_regime.value,
    )

    return JSONResponse(
        status_code=200,
        content={
            "comparison": comparison.model_dump(mode="json"),
            "display": view.model_dump(mode="json"),
        },
    )


@router.get("/regimes")
async def list_regimes() -> JSONResponse:
    """Slab tables, rebate and surcharge parameters for every configured year."""
    years = []
    for fiscal_year in supported_fiscal_years():
        regimes = {}
        for regime in Regime:
            config = get_regime_config(regime, fiscal_year)
            regimes[regime.value] = {
                "standard_deduction": config.standard_deduction,
                "slabs": _slab_payload(config.slabs),
                "rebate": {
                    "threshold": config.rebate_threshold,
                    "cap": config.rebate_cap,
                },
                "surcharge": {
                    "threshold": config.surcharge_threshold,
                    "slabs": _slab_payload(config.surcharge_slabs),
                },
                "cess_rate": config.cess_rate,
            }
        years.append({"fiscal_year": fiscal_year, "regimes": regimes})

    return JSONResponse(
        status_code=200,
        content={"default_fiscal_year": settings.fiscal_year, "fiscal_years": years},
    )
