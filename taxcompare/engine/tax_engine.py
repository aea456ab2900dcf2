"""
taxcompare tax engine: FY 2024-25
Pure Python, deterministic, no I/O. Same input → same output.

Pipeline (one generic pipeline, parameterised by RegimeConfig):
  deductions → taxable income → slab tax → 87A rebate → surcharge → 4% cess

Two statutory discontinuities are reproduced as-is, with NO marginal relief:
  - 87A rebate cliff: one rupee above the threshold loses the whole rebate.
  - Surcharge jumps: crossing ₹50L (and each old-regime band) applies the
    higher rate to the entire tax.

Inputs are assumed in-contract (non-negative, finite); validation belongs to
the intake layer.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from taxcompare.engine.regimes import (
    DEFAULT_FISCAL_YEAR,
    RegimeConfig,
    get_regime_config,
)
from taxcompare.engine.schemas import RateSlab, Regime, TaxComparison, TaxResult
from taxcompare.intake.schemas import TaxInputs


# ===========================================================================
# INTERNAL HELPERS (pure functions: no side effects, no I/O)
# ===========================================================================

def round_half_up(amount: float) -> float:
    """Round to the nearest whole rupee, halves away from zero (not banker's rounding)."""
    return float(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_slab_tax(income: float, slabs: Sequence[RateSlab]) -> float:
    """
    Apply progressive slab tax to income.

    Each band the income reaches contributes (min(income, upper) - lower) * rate.
    The sum is rounded once, at the end.
    """
    tax = 0.0
    for lower, upper, rate in slabs:
        if income <= lower:
            break
        tax += (min(income, upper) - lower) * rate
    return round_half_up(tax)


def compute_rebate(
    taxable_income: float,
    tax_before_rebate: float,
    regime: Regime | str,
    fiscal_year: str = DEFAULT_FISCAL_YEAR,
) -> float:
    """
    Section 87A rebate.

    taxable_income <= threshold → min(tax, cap); otherwise 0.
    Old FY 2024-25: threshold ₹5L / cap ₹12,500. New: ₹7L / ₹25,000.
    """
    config = get_regime_config(regime, fiscal_year)
    if taxable_income <= config.rebate_threshold:
        return min(tax_before_rebate, float(config.rebate_cap))
    return 0.0


def compute_surcharge(
    taxable_income: float,
    tax_after_rebate: float,
    regime: Regime | str,
    fiscal_year: str = DEFAULT_FISCAL_YEAR,
) -> float:
    """
    Surcharge on tax (not income) for taxable income above ₹50L.

    The band whose (lower, upper] bracket contains taxable_income sets the rate
    for the WHOLE tax: no marginal relief at band edges.
    """
    config = get_regime_config(regime, fiscal_year)
    if taxable_income <= config.surcharge_threshold:
        return 0.0
    for lower, upper, rate in config.surcharge_slabs:
        if lower < taxable_income <= upper:
            return round_half_up(tax_after_rebate * rate)
    return 0.0


def _calculate_regime(inputs: TaxInputs, config: RegimeConfig) -> TaxResult:
    """Run the shared pipeline for one regime configuration."""
    # Step 1: Total income (same definition for both regimes)
    total_income = inputs.total_income

    # Step 2: Regime-specific capped deductions
    deductions = config.derive_deductions(inputs, config)
    total_deductions = deductions.total()

    # Step 3: Taxable income (never negative)
    taxable_income = max(0.0, total_income - total_deductions)

    # Step 4: Slab tax
    tax_before_rebate = compute_slab_tax(taxable_income, config.slabs)

    # Step 5: 87A rebate
    rebate_amount = compute_rebate(
        taxable_income, tax_before_rebate, config.regime, config.fiscal_year
    )
    tax_after_rebate = max(0.0, tax_before_rebate - rebate_amount)

    # Step 6: Surcharge (on post-rebate tax)
    surcharge = compute_surcharge(
        taxable_income, tax_after_rebate, config.regime, config.fiscal_year
    )

    # Step 7: Cess on (tax + surcharge)
    cess = round_half_up((tax_after_rebate + surcharge) * config.cess_rate)

    # Step 8: Final tax
    total_tax = tax_after_rebate + surcharge + cess

    return TaxResult(
        regime=config.regime,
        total_income=total_income,
        total_deductions=total_deductions,
        taxable_income=taxable_income,
        tax_before_rebate=tax_before_rebate,
        rebate_amount=rebate_amount,
        tax_after_rebate=tax_after_rebate,
        surcharge=surcharge,
        cess=cess,
        total_tax=total_tax,
        deductions=deductions,
    )


# ===========================================================================
# REGIME CALCULATORS
# ===========================================================================

def calculate_old_regime(inputs: TaxInputs, fiscal_year: str = DEFAULT_FISCAL_YEAR) -> TaxResult:
    """
    Old regime tax.

    Deductions: std ₹50K, 80C (≤₹1.5L), 80D (≤₹50K), 80CCD(1B) (≤₹50K),
    80E, 80G, HRA, LTA (uncapped), 24(b) (≤₹2L).
    """
    return _calculate_regime(inputs, get_regime_config(Regime.old, fiscal_year))


def calculate_new_regime(inputs: TaxInputs, fiscal_year: str = DEFAULT_FISCAL_YEAR) -> TaxResult:
    """
    New regime tax (Section 115BAC).

    Deductions: std ₹75K, employer NPS (≤10% of basic), transport allowance
    (disabled only), conveyance, gratuity, leave encashment (uncapped),
    VRS (≤₹5L). Surcharge is capped at a flat 15%.
    """
    return _calculate_regime(inputs, get_regime_config(Regime.new, fiscal_year))


# ===========================================================================
# COMPARE REGIMES: public API
# ===========================================================================

def compare_regimes(inputs: TaxInputs, fiscal_year: str = DEFAULT_FISCAL_YEAR) -> TaxComparison:
    """
    Compare old and new regime tax for the given inputs.

    Recommends the lower-tax regime; ties go to the Old Regime.
    """
    old = calculate_old_regime(inputs, fiscal_year)
    new = calculate_new_regime(inputs, fiscal_year)

    recommended = Regime.old if old.total_tax <= new.total_tax else Regime.new

    return TaxComparison(
        fiscal_year=fiscal_year,
        old_regime=old,
        new_regime=new,
        savings=abs(old.total_tax - new.total_tax),
        recommended_regime=recommended,
    )
