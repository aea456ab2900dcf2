"""
schemas.py: intake Pydantic v2 data contracts.

Defines:
  - TaxInputs  (the engine's input contract: one immutable value per calculation)
  - ErrorDetail, ErrorBody, ErrorResponse  (cross-cutting error envelope)

All monetary fields are annual amounts in INR. Every field defaults to 0 so
callers (and tests) can omit anything that does not apply to them.

TaxInputs only enforces STRUCTURE (non-negative, finite, known fields). The
entry form's range limits live in validator.py; statutory caps are applied
by the tax engine itself, so section_80c=200000 is a valid TaxInputs value
that the engine clamps to 150000.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# TaxInputs: central input contract
# ---------------------------------------------------------------------------

class TaxInputs(BaseModel):
    """
    Income and deduction figures for one salaried taxpayer, one fiscal year.

    frozen=True: an instance is never mutated after construction.
    extra='forbid': unknown fields from client requests cause a 422 error.
    allow_inf_nan=False: inf / NaN are rejected at the boundary.
    """
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    # --- Income ---
    gross_salary: float = Field(
        default=0, ge=0,
        description="Annual gross salary in INR.",
    )
    other_income: float = Field(
        default=0, ge=0,
        description="Income from other sources (interest, etc.): annual.",
    )
    basic_salary: float = Field(
        default=0, ge=0,
        description=(
            "Annual basic salary. Only used as the base for the employer NPS "
            "80CCD(2) cap (10% of basic). If 0, employer NPS deduction is 0."
        ),
    )

    # --- Old regime deductions ---
    section_80c: float = Field(
        default=0, ge=0,
        description="Section 80C investments. Engine caps at ₹1,50,000.",
    )
    section_80d: float = Field(
        default=0, ge=0,
        description="Section 80D health insurance premium. Engine caps at ₹50,000.",
    )
    section_80ccd1b: float = Field(
        default=0, ge=0,
        description="Employee NPS 80CCD(1B). Engine caps at ₹50,000.",
    )
    section_80e: float = Field(
        default=0, ge=0,
        description="Education loan interest 80E: uncapped.",
    )
    section_80g: float = Field(
        default=0, ge=0,
        description="Donations 80G: uncapped.",
    )
    hra_exemption: float = Field(
        default=0, ge=0,
        description="House rent allowance exemption: uncapped, pre-computed by the taxpayer.",
    )
    lta: float = Field(
        default=0, ge=0,
        description="Leave travel allowance: uncapped.",
    )
    home_loan_interest: float = Field(
        default=0, ge=0,
        description="Section 24(b) home loan interest. Engine caps at ₹2,00,000.",
    )

    # --- New regime deductions ---
    employer_nps: float = Field(
        default=0, ge=0,
        description="Employer NPS 80CCD(2). Engine caps at 10% of basic_salary.",
    )
    transport_allowance: float = Field(
        default=0, ge=0,
        description="Transport allowance. Only counted when is_disabled is True.",
    )
    conveyance_allowance: float = Field(
        default=0, ge=0,
        description="Conveyance allowance: uncapped.",
    )
    gratuity: float = Field(
        default=0, ge=0,
        description="Gratuity: uncapped.",
    )
    vrs: float = Field(
        default=0, ge=0,
        description="Voluntary retirement compensation. Engine caps at ₹5,00,000.",
    )
    leave_encashment: float = Field(
        default=0, ge=0,
        description="Leave encashment: uncapped.",
    )
    is_disabled: bool = Field(
        default=False,
        description="Gates transport_allowance: when False it is treated as 0.",
    )

    @property
    def total_income(self) -> float:
        """gross_salary + other_income (identical for both regimes)."""
        return self.gross_salary + self.other_income


# ---------------------------------------------------------------------------
# Error response models: used by main.py exception handlers (cross-cutting)
# ---------------------------------------------------------------------------

class ErrorDetail(BaseModel):
    """Single field-level validation or business-rule error."""
    model_config = ConfigDict(extra="forbid")

    field: Optional[str] = None   # Field name, e.g. "section_80c"
    issue: str                     # Human-readable description of the problem


class ErrorBody(BaseModel):
    """Error envelope body."""
    model_config = ConfigDict(extra="forbid")

    code: str                                      # VALIDATION_ERROR, REPORT_ERROR, etc.
    message: str                                   # High-level error description
    details: List[ErrorDetail] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """
    Standard error response format for all taxcompare endpoints.

    Structure: {"error": {"code": "...", "message": "...", "details": [...]}}
    """
    model_config = ConfigDict(extra="forbid")

    error: ErrorBody


__all__ = [
    "TaxInputs",
    "ErrorDetail",
    "ErrorBody",
    "ErrorResponse",
]
