"""
Demo input fixtures for taxcompare end-to-end tests: FY 2024-25

Three hand-verified profiles used as the primary integration data set, one per
outcome: new regime wins, old regime wins, tie (→ old).
"""
from __future__ import annotations
from typing import Any

# ---------------------------------------------------------------------------
# Profile 1: ₹12L gross, 80C + 80D: the reference walkthrough
# ---------------------------------------------------------------------------
_SALARIED_12L: dict[str, Any] = dict(
    gross_salary=1_200_000,
    other_income=0,
    basic_salary=600_000,
    section_80c=150_000,
    section_80d=25_000,
)
# OLD: ded=225000(std50+80c150+80d25), taxable=975000
# slab: 0+12500+95000=107500, no 87A (>5L), cess=4300, total=111800
# NEW: ded=75000, taxable=1125000
# slab: 0+15000+30000+33750=78750, no 87A (>7L), cess=3150, total=81900
_SALARIED_12L_EXPECTED: dict[str, Any] = dict(
    expected_old_tax=111_800,
    expected_new_tax=81_900,
    expected_regime="new",
    expected_savings=29_900,
)

# ---------------------------------------------------------------------------
# Profile 2: ₹10L gross, every major old regime deduction claimed
# ---------------------------------------------------------------------------
_HEAVY_DEDUCTIONS_10L: dict[str, Any] = dict(
    gross_salary=1_000_000,
    basic_salary=500_000,
    section_80c=150_000,
    section_80d=50_000,
    section_80ccd1b=50_000,
    hra_exemption=200_000,
    home_loan_interest=200_000,
)
# OLD: ded=700000(std50+80c150+80d50+nps50+hra200+24b200), taxable=300000
# slab: 2500, 87A (<=5L) rebate=2500, total=0
# NEW: ded=75000, taxable=925000
# slab: 15000+30000+3750=48750, cess=1950, total=50700
_HEAVY_DEDUCTIONS_10L_EXPECTED: dict[str, Any] = dict(
    expected_old_tax=0,
    expected_new_tax=50_700,
    expected_regime="old",
    expected_savings=50_700,
)

# ---------------------------------------------------------------------------
# Profile 3: ₹4.5L gross: both regimes fully rebated, tie goes to old
# ---------------------------------------------------------------------------
_LOW_INCOME_4_5L: dict[str, Any] = dict(
    gross_salary=450_000,
    basic_salary=225_000,
)
# OLD: taxable=400000, slab=7500, rebate=7500, total=0
# NEW: taxable=375000, slab=3750, rebate=3750, total=0
_LOW_INCOME_4_5L_EXPECTED: dict[str, Any] = dict(
    expected_old_tax=0,
    expected_new_tax=0,
    expected_regime="old",
    expected_savings=0,
)


DEMO_PROFILES: dict[str, dict[str, dict[str, Any]]] = {
    "salaried_12l": {"inputs": _SALARIED_12L, "expected": _SALARIED_12L_EXPECTED},
    "heavy_deductions_10l": {
        "inputs": _HEAVY_DEDUCTIONS_10L,
        "expected": _HEAVY_DEDUCTIONS_10L_EXPECTED,
    },
    "low_income_4_5l": {"inputs": _LOW_INCOME_4_5L, "expected": _LOW_INCOME_4_5L_EXPECTED},
}
