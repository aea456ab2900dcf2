"""
regimes.py: statutory configuration records, one per (fiscal year, regime).

Slab boundaries, caps and thresholds are regime-year-specific statutory facts.
They live here as named constants and are bundled into RegimeConfig records.
The tax engine pipeline is generic over RegimeConfig: adding a fiscal year
means adding two records to _REGISTRY, never touching tax_engine.py.

FY 2024-25 (AY 2025-26): pre-Budget-2025 new regime slabs (3L/6L/9L/12L/15L).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence

from taxcompare.engine.schemas import DeductionBreakdown, RateSlab, Regime
from taxcompare.intake.schemas import TaxInputs

# ===========================================================================
# FISCAL YEAR
# ===========================================================================

FY_2024_25 = "2024-25"
DEFAULT_FISCAL_YEAR = FY_2024_25

# ===========================================================================
# SHARED CONSTANTS
# ===========================================================================

CESS_RATE                 = 0.04
SURCHARGE_THRESHOLD       = 5_000_000     # no surcharge at or below ₹50L taxable

# ===========================================================================
# OLD REGIME: FY 2024-25
# ===========================================================================

OLD_STD_DEDUCTION         = 50_000
CAP_80C                   = 150_000
CAP_80D                   = 50_000
CAP_80CCD1B               = 50_000
CAP_24B                   = 200_000

OLD_REBATE_THRESHOLD      = 500_000
OLD_REBATE_CAP            = 12_500

OLD_REGIME_SLABS: tuple[RateSlab, ...] = (
    RateSlab(0,         250_000,   0.00),
    RateSlab(250_000,   500_000,   0.05),
    RateSlab(500_000,   1_000_000, 0.20),
    RateSlab(1_000_000, math.inf,  0.30),
)

OLD_SURCHARGE_SLABS: tuple[RateSlab, ...] = (
    RateSlab(0,          5_000_000,  0.00),
    RateSlab(5_000_000,  10_000_000, 0.10),
    RateSlab(10_000_000, 20_000_000, 0.15),
    RateSlab(20_000_000, 50_000_000, 0.25),
    RateSlab(50_000_000, math.inf,   0.37),
)

# ===========================================================================
# NEW REGIME: FY 2024-25 (Section 115BAC)
# ===========================================================================

NEW_STD_DEDUCTION         = 75_000
CAP_EMPLOYER_NPS_PCT      = 0.10          # 80CCD(2): 10% of basic salary
CAP_VRS                   = 500_000       # Section 10(10C)

NEW_REBATE_THRESHOLD      = 700_000
NEW_REBATE_CAP            = 25_000

NEW_REGIME_SLABS: tuple[RateSlab, ...] = (
    RateSlab(0,         300_000,   0.00),
    RateSlab(300_000,   600_000,   0.05),
    RateSlab(600_000,   900_000,   0.10),
    RateSlab(900_000,   1_200_000, 0.15),
    RateSlab(1_200_000, 1_500_000, 0.20),
    RateSlab(1_500_000, math.inf,  0.30),
)

# Flat 15% above ₹50L: the new regime does not escalate to 25%/37%
NEW_SURCHARGE_SLABS: tuple[RateSlab, ...] = (
    RateSlab(0,         5_000_000, 0.00),
    RateSlab(5_000_000, math.inf,  0.15),
)


# ===========================================================================
# SLAB TABLE VALIDATION
# ===========================================================================

def validate_slab_table(slabs: Sequence[RateSlab]) -> None:
    """
    Check a slab table is well formed: non-empty, starts at 0, contiguous,
    strictly increasing bounds, last band unbounded.

    Raises:
        ValueError: describing the first malformed band.
    """
    if not slabs:
        raise ValueError("slab table is empty")
    if slabs[0].lower != 0:
        raise ValueError(f"slab table must start at 0, starts at {slabs[0].lower}")
    for index, slab in enumerate(slabs):
        if slab.upper <= slab.lower:
            raise ValueError(f"slab {index} has upper {slab.upper} <= lower {slab.lower}")
        if slab.rate < 0:
            raise ValueError(f"slab {index} has negative rate {slab.rate}")
        if index > 0 and slab.lower != slabs[index - 1].upper:
            raise ValueError(
                f"slab {index} starts at {slab.lower}, previous ends at {slabs[index - 1].upper}"
            )
    if not math.isinf(slabs[-1].upper):
        raise ValueError(f"last slab must be unbounded, ends at {slabs[-1].upper}")


# ===========================================================================
# REGIME CONFIGURATION RECORD
# ===========================================================================

@dataclass(frozen=True)
class RegimeConfig:
    """Everything that differs between two regimes (or two fiscal years)."""
    regime: Regime
    fiscal_year: str
    slabs: tuple[RateSlab, ...]
    standard_deduction: float
    rebate_threshold: float
    rebate_cap: float
    surcharge_slabs: tuple[RateSlab, ...]
    derive_deductions: Callable[[TaxInputs, "RegimeConfig"], DeductionBreakdown]
    surcharge_threshold: float = SURCHARGE_THRESHOLD
    cess_rate: float = CESS_RATE

    def __post_init__(self) -> None:
        validate_slab_table(self.slabs)
        validate_slab_table(self.surcharge_slabs)


# ===========================================================================
# DEDUCTION DERIVATION: one function per regime
# ===========================================================================

def _old_regime_deductions_2024_25(inputs: TaxInputs, config: RegimeConfig) -> DeductionBreakdown:
    """
    Old regime: std deduction ₹50K, 80C/80D/80CCD(1B)/24(b) capped,
    80E, 80G, HRA and LTA uncapped.
    """
    return DeductionBreakdown(
        standard_deduction=float(config.standard_deduction),
        section_80c=min(inputs.section_80c, CAP_80C),
        section_80d=min(inputs.section_80d, CAP_80D),
        section_80ccd1b=min(inputs.section_80ccd1b, CAP_80CCD1B),
        section_80e=inputs.section_80e,
        section_80g=inputs.section_80g,
        hra_exemption=inputs.hra_exemption,
        lta=inputs.lta,
        home_loan_interest=min(inputs.home_loan_interest, CAP_24B),
    )


def _new_regime_deductions_2024_25(inputs: TaxInputs, config: RegimeConfig) -> DeductionBreakdown:
    """
    New regime: std deduction ₹75K, employer NPS capped at 10% of basic,
    transport allowance only for disabled taxpayers, VRS capped at ₹5L.

    Employer NPS cap uses basic_salary, not gross: basic=0 forces the
    deduction to 0 whatever contribution is claimed.
    """
    return DeductionBreakdown(
        standard_deduction=float(config.standard_deduction),
        employer_nps=min(inputs.employer_nps, inputs.basic_salary * CAP_EMPLOYER_NPS_PCT),
        transport_allowance=inputs.transport_allowance if inputs.is_disabled else 0.0,
        conveyance_allowance=inputs.conveyance_allowance,
        gratuity=inputs.gratuity,
        vrs=min(inputs.vrs, CAP_VRS),
        leave_encashment=inputs.leave_encashment,
    )


OLD_REGIME_2024_25 = RegimeConfig(
    regime=Regime.old,
    fiscal_year=FY_2024_25,
    slabs=OLD_REGIME_SLABS,
    standard_deduction=OLD_STD_DEDUCTION,
    rebate_threshold=OLD_REBATE_THRESHOLD,
    rebate_cap=OLD_REBATE_CAP,
    surcharge_slabs=OLD_SURCHARGE_SLABS,
    derive_deductions=_old_regime_deductions_2024_25,
)

NEW_REGIME_2024_25 = RegimeConfig(
    regime=Regime.new,
    fiscal_year=FY_2024_25,
    slabs=NEW_REGIME_SLABS,
    standard_deduction=NEW_STD_DEDUCTION,
    rebate_threshold=NEW_REBATE_THRESHOLD,
    rebate_cap=NEW_REBATE_CAP,
    surcharge_slabs=NEW_SURCHARGE_SLABS,
    derive_deductions=_new_regime_deductions_2024_25,
)


# ===========================================================================
# REGISTRY
# ===========================================================================

_REGISTRY: dict[tuple[str, Regime], RegimeConfig] = {
    (config.fiscal_year, config.regime): config
    for config in (OLD_REGIME_2024_25, NEW_REGIME_2024_25)
}


def get_regime_config(regime: Regime | str, fiscal_year: str = DEFAULT_FISCAL_YEAR) -> RegimeConfig:
    """
    Look up the configuration record for a regime in a fiscal year.

    Raises:
        KeyError: if the fiscal year (or regime) is not registered.
    """
    key = (fiscal_year, Regime(regime))
    try:
        return _REGISTRY[key]
    except KeyError:
        raise KeyError(
            f"No {key[1].value} regime configuration for fiscal year {fiscal_year!r}; "
            f"supported: {', '.join(supported_fiscal_years())}"
        ) from None


def supported_fiscal_years() -> list[str]:
    """Registered fiscal years, oldest first."""
    return sorted({year for year, _ in _REGISTRY})
