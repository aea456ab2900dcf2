"""Results display tests: INR formatting and the per-regime cards."""
from __future__ import annotations

import pytest

from taxcompare.engine.schemas import Regime
from taxcompare.engine.tax_engine import compare_regimes
from taxcompare.intake.schemas import TaxInputs
from taxcompare.report.formatting import (
    build_results_view,
    format_inr,
    recommendation_text,
)
from taxcompare.tests.demo_profiles import DEMO_PROFILES


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (0, "₹0"),
        (999, "₹999"),
        (1_000, "₹1,000"),
        (29_900, "₹29,900"),
        (111_800, "₹1,11,800"),
        (12_34_567, "₹12,34,567"),
        (1_23_45_678, "₹1,23,45,678"),
        (10_00_00_000, "₹10,00,00,000"),
        (-1_50_000, "-₹1,50,000"),
        (1_499.5, "₹1,500"),
        (1_499.4, "₹1,499"),
    ],
)
def test_format_inr(amount: float, expected: str) -> None:
    assert format_inr(amount) == expected


def test_results_view_reference_profile(salaried_inputs: TaxInputs) -> None:
    view = build_results_view(compare_regimes(salaried_inputs))

    assert view.fiscal_year == "2024-25"
    assert view.recommended_regime == "New Tax Regime"
    assert view.savings == "₹29,900"
    assert view.headline == "New Tax Regime recommended, potential savings of ₹29,900."

    old_card, new_card = view.cards
    assert old_card.regime == Regime.old
    assert old_card.title == "Old Tax Regime"
    assert not old_card.recommended
    assert new_card.recommended
    assert new_card.total_tax == "₹81,900"
    assert old_card.rows == [
        ("Total Income", "₹12,00,000"),
        ("Total Deductions", "-₹2,25,000"),
        ("Taxable Income", "₹9,75,000"),
        ("Tax Before Rebate", "₹1,07,500"),
        ("Tax After Rebate", "₹1,07,500"),
        ("Health & Education Cess", "₹4,300"),
        ("Total Tax Liability", "₹1,11,800"),
    ]


def test_rebate_row_only_when_rebate_applies() -> None:
    view = build_results_view(compare_regimes(TaxInputs(gross_salary=450_000)))
    old_labels = [label for label, _ in view.cards[0].rows]
    assert "Rebate u/s 87A" in old_labels
    assert dict(view.cards[0].rows)["Rebate u/s 87A"] == "-₹7,500"
    assert "Surcharge" not in old_labels


def test_surcharge_row_only_above_threshold() -> None:
    view = build_results_view(compare_regimes(TaxInputs(gross_salary=6_000_000)))
    assert dict(view.cards[0].rows)["Surcharge"] == "₹1,59,750"
    assert dict(view.cards[1].rows)["Surcharge"] == "₹2,21,625"


def test_old_regime_insights_quote_total_deductions() -> None:
    comparison = compare_regimes(TaxInputs(**DEMO_PROFILES["heavy_deductions_10l"]["inputs"]))
    view = build_results_view(comparison)
    assert view.recommended_regime == "Old Tax Regime"
    assert view.insights[0] == "The Old Tax Regime is more beneficial due to available deductions"
    assert "₹7,00,000" in view.insights[1]


def test_new_regime_insights(salaried_inputs: TaxInputs) -> None:
    view = build_results_view(compare_regimes(salaried_inputs))
    assert view.insights[0].startswith("The New Tax Regime offers lower tax rates")
    assert len(view.insights) == 3


def test_tie_recommendation_text() -> None:
    comparison = compare_regimes(TaxInputs(gross_salary=450_000))
    assert recommendation_text(comparison) == (
        "Old Tax Regime recommended, potential savings of ₹0."
    )
