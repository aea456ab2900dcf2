"""
schemas.py: tax engine Pydantic v2 data contracts (FY 2024-25).

Defines:
  - Regime              (old | new)
  - RateSlab            (lower, upper, rate): one progressive band
  - DeductionBreakdown  (itemised deductions applied in one regime)
  - TaxResult           (full tax computation for one regime)
  - TaxComparison       (dual-regime comparison: public output of the engine)

Every result model is frozen: a calculation builds fresh values in one pass
and nothing downstream (display, PDF) may mutate them.
"""
from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Enums / value types
# ---------------------------------------------------------------------------

class Regime(str, Enum):
    old = "old"
    new = "new"


class RateSlab(NamedTuple):
    """
    One progressive band: income in [lower, upper) is taxed at `rate`.
    The last band of a table has upper = math.inf.
    """
    lower: float
    upper: float
    rate: float


# ---------------------------------------------------------------------------
# DeductionBreakdown: itemised deductions applied in one regime
# ---------------------------------------------------------------------------

class DeductionBreakdown(BaseModel):
    """
    Itemised deductions used in a regime calculation.

    All values are the ACTUAL deduction applied (after caps), not the raw input.
    For example, section_80c=150000 means ₹1.5L was applied even if input was ₹2L.

    Old regime: standard deduction + Chapter VI-A items, HRA, LTA, 24(b).
    New regime: standard deduction + employer NPS and the exempt allowances.
    Fields that do not apply to a regime stay 0.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    standard_deduction: float = 0       # ₹50K old / ₹75K new
    # --- old regime only ---
    section_80c: float = 0              # Cap ₹1,50,000
    section_80d: float = 0              # Cap ₹50,000
    section_80ccd1b: float = 0          # Employee NPS, cap ₹50,000
    section_80e: float = 0              # Education loan interest, uncapped
    section_80g: float = 0              # Donations, uncapped
    hra_exemption: float = 0            # Uncapped
    lta: float = 0                      # Uncapped
    home_loan_interest: float = 0       # Section 24(b), cap ₹2,00,000
    # --- new regime only ---
    employer_nps: float = 0             # 80CCD(2), cap 10% of basic
    transport_allowance: float = 0      # Only when is_disabled
    conveyance_allowance: float = 0     # Uncapped
    gratuity: float = 0                 # Uncapped
    vrs: float = 0                      # Cap ₹5,00,000
    leave_encashment: float = 0         # Uncapped

    def total(self) -> float:
        """Sum of every applied item (field declaration order)."""
        return sum(getattr(self, name) for name in type(self).model_fields)


# ---------------------------------------------------------------------------
# TaxResult: full tax calculation for one regime
# ---------------------------------------------------------------------------

class TaxResult(BaseModel):
    """
    Complete tax computation result for a single regime (old or new).

    Computation sequence (order determines correctness):
      1. total_income = gross_salary + other_income
      2. total_deductions = sum of applicable capped deductions
      3. taxable_income = max(0, total_income - total_deductions)
      4. tax_before_rebate = progressive slab tax (rounded)
      5. rebate_amount = 87A rebate if taxable_income <= threshold
      6. tax_after_rebate = max(0, tax_before_rebate - rebate_amount)
      7. surcharge on tax_after_rebate above ₹50L taxable income
      8. cess = 4% of (tax_after_rebate + surcharge)
      9. total_tax = tax_after_rebate + surcharge + cess
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    regime: Regime
    total_income: float
    total_deductions: float
    taxable_income: float
    tax_before_rebate: float
    rebate_amount: float
    tax_after_rebate: float
    surcharge: float
    cess: float
    total_tax: float
    deductions: DeductionBreakdown


# ---------------------------------------------------------------------------
# TaxComparison: regime comparison output (public API of tax engine)
# ---------------------------------------------------------------------------

class TaxComparison(BaseModel):
    """
    Output of compare_regimes().

    savings = |old.total_tax - new.total_tax|
    recommended_regime = old when old.total_tax <= new.total_tax (ties favour old).
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    fiscal_year: str
    old_regime: TaxResult
    new_regime: TaxResult
    savings: float
    recommended_regime: Regime

    @property
    def recommended(self) -> TaxResult:
        """The TaxResult of the recommended regime."""
        return self.old_regime if self.recommended_regime == Regime.old else self.new_regime


__all__ = [
    "Regime",
    "RateSlab",
    "DeductionBreakdown",
    "TaxResult",
    "TaxComparison",
]
