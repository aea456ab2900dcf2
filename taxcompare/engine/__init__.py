from taxcompare.engine.schemas import DeductionBreakdown, RateSlab, Regime, TaxComparison, TaxResult
from taxcompare.engine.tax_engine import (
    calculate_new_regime,
    calculate_old_regime,
    compare_regimes,
    compute_rebate,
    compute_slab_tax,
    compute_surcharge,
)

__all__ = [
    "DeductionBreakdown",
    "RateSlab",
    "Regime",
    "TaxComparison",
    "TaxResult",
    "calculate_new_regime",
    "calculate_old_regime",
    "compare_regimes",
    "compute_rebate",
    "compute_slab_tax",
    "compute_surcharge",
]
