"""
formatting.py: on-screen presentation of a TaxComparison.

Consumes the engine's output only; no tax rules live here.

  - format_inr(amount)          → "₹12,34,567"  (Indian digit grouping, whole rupees)
  - build_results_view(comp)    → ResultsView   (one card per regime + recommendation)
  - recommendation_text(comp)   → one-sentence headline for the results screen
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from taxcompare.engine.schemas import Regime, TaxComparison, TaxResult

RUPEE = "₹"

REGIME_NAMES = {
    Regime.old: "Old Tax Regime",
    Regime.new: "New Tax Regime",
}

REGIME_DESCRIPTIONS = {
    Regime.old: "Traditional regime with multiple deductions",
    Regime.new: "Simplified regime with lower tax rates",
}


def format_inr(amount: float) -> str:
    """
    Format an amount as whole rupees with Indian grouping (1,23,45,678).

    Grouping is done by hand: en_IN is not reliably installed as a locale.
    """
    rupees = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rupees < 0 else ""
    digits = str(abs(rupees))

    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        pairs.insert(0, head)
        digits = ",".join(pairs) + "," + tail

    return f"{sign}{RUPEE}{digits}"


# ---------------------------------------------------------------------------
# Results view models
# ---------------------------------------------------------------------------

class RegimeCard(BaseModel):
    """One regime's itemised breakdown, values already formatted."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    regime: Regime
    title: str
    description: str
    recommended: bool
    rows: List[Tuple[str, str]]     # (label, formatted value), display order
    total_tax: str


class ResultsView(BaseModel):
    """Everything the results screen shows, as display strings."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    fiscal_year: str
    cards: List[RegimeCard]          # old first, then new
    recommended_regime: str          # "Old Tax Regime" | "New Tax Regime"
    savings: str
    headline: str                    # recommendation_text()
    insights: List[str]


def _card_rows(result: TaxResult) -> list[tuple[str, str]]:
    """Breakdown rows; rebate and surcharge rows only appear when non-zero."""
    rows = [
        ("Total Income", format_inr(result.total_income)),
        ("Total Deductions", "-" + format_inr(result.total_deductions)),
        ("Taxable Income", format_inr(result.taxable_income)),
        ("Tax Before Rebate", format_inr(result.tax_before_rebate)),
    ]
    if result.rebate_amount > 0:
        rows.append(("Rebate u/s 87A", "-" + format_inr(result.rebate_amount)))
    rows.append(("Tax After Rebate", format_inr(result.tax_after_rebate)))
    if result.surcharge > 0:
        rows.append(("Surcharge", format_inr(result.surcharge)))
    rows.append(("Health & Education Cess", format_inr(result.cess)))
    rows.append(("Total Tax Liability", format_inr(result.total_tax)))
    return rows


def _insights(comparison: TaxComparison) -> list[str]:
    if comparison.recommended_regime == Regime.old:
        return [
            "The Old Tax Regime is more beneficial due to available deductions",
            f"Your total deductions of {format_inr(comparison.old_regime.total_deductions)} "
            "significantly reduce taxable income",
            "Consider maximizing deductions under sections 80C, 80D, and others",
        ]
    return [
        "The New Tax Regime offers lower tax rates despite limited deductions",
        "Simplified tax structure with fewer compliance requirements",
        "Consider if the convenience outweighs the tax savings",
    ]


def recommendation_text(comparison: TaxComparison) -> str:
    """One-line summary, e.g. New Tax Regime recommended, potential savings of ₹29,900."""
    return (
        f"{REGIME_NAMES[comparison.recommended_regime]} recommended, "
        f"potential savings of {format_inr(comparison.savings)}."
    )


def build_results_view(comparison: TaxComparison) -> ResultsView:
    """Turn a TaxComparison into the results screen's display strings."""
    cards = [
        RegimeCard(
            regime=result.regime,
            title=REGIME_NAMES[result.regime],
            description=REGIME_DESCRIPTIONS[result.regime],
            recommended=result.regime == comparison.recommended_regime,
            rows=_card_rows(result),
            total_tax=format_inr(result.total_tax),
        )
        for result in (comparison.old_regime, comparison.new_regime)
    ]
    return ResultsView(
        fiscal_year=comparison.fiscal_year,
        cards=cards,
        recommended_regime=REGIME_NAMES[comparison.recommended_regime],
        savings=format_inr(comparison.savings),
        headline=recommendation_text(comparison),
        insights=_insights(comparison),
    )
