"""
Intake range validator: FY 2024-25 entry form limits.

Validates TaxInputs against the entry form's range rules AFTER Pydantic
structural validation has already passed (non-negative, finite, known fields).
Collects all violations in a single pass and raises InputValidationError,
a ValueError whose message is a JSON-encoded list of {field, issue} dicts; the
route builds the standard 422 envelope from exc.violations.

These limits belong to the input surface, not to the tax engine. The engine
clamps statutory caps on its own and never calls this module.

Limits:
  1. gross_salary, other_income, basic_salary   <= 10,00,00,000
  2. section_80c                                 <= 1,50,000
  3. section_80d                                 <= 50,000
  4. section_80ccd1b                             <= 50,000
  5. section_80e, section_80g, hra_exemption, lta <= 1,00,00,000
  6. home_loan_interest                          <= 2,00,000
  7. employer_nps, conveyance_allowance,
     gratuity, leave_encashment                  <= 1,00,00,000
  8. transport_allowance                         <= 10,00,000
  9. vrs                                         <= 5,00,000
"""
from __future__ import annotations

import json
import logging
from typing import Any

from taxcompare.intake.schemas import TaxInputs

logger = logging.getLogger(__name__)

_INCOME_MAX         = 100_000_000
_LARGE_AMOUNT_MAX   = 10_000_000
_TRANSPORT_MAX      = 1_000_000
_FORM_CAP_80C       = 150_000
_FORM_CAP_80D       = 50_000
_FORM_CAP_80CCD1B   = 50_000
_FORM_CAP_24B       = 200_000
_FORM_CAP_VRS       = 500_000

# (field, upper limit, statutory cap?): statutory caps get a "Maximum limit" message
_FIELD_LIMITS: list[tuple[str, float, bool]] = [
    ("gross_salary",         _INCOME_MAX,        False),
    ("other_income",         _INCOME_MAX,        False),
    ("basic_salary",         _INCOME_MAX,        False),
    ("section_80c",          _FORM_CAP_80C,      True),
    ("section_80d",          _FORM_CAP_80D,      True),
    ("section_80ccd1b",      _FORM_CAP_80CCD1B,  True),
    ("section_80e",          _LARGE_AMOUNT_MAX,  False),
    ("section_80g",          _LARGE_AMOUNT_MAX,  False),
    ("hra_exemption",        _LARGE_AMOUNT_MAX,  False),
    ("lta",                  _LARGE_AMOUNT_MAX,  False),
    ("home_loan_interest",   _FORM_CAP_24B,      True),
    ("employer_nps",         _LARGE_AMOUNT_MAX,  False),
    ("transport_allowance",  _TRANSPORT_MAX,     False),
    ("conveyance_allowance", _LARGE_AMOUNT_MAX,  False),
    ("gratuity",             _LARGE_AMOUNT_MAX,  False),
    ("vrs",                  _FORM_CAP_VRS,      True),
    ("leave_encashment",     _LARGE_AMOUNT_MAX,  False),
]


class InputValidationError(ValueError):
    """
    Raised when TaxInputs break one or more entry-form limits.

    str(exc) is the JSON-encoded violation list; the parsed list is also
    available as exc.violations.
    """

    def __init__(self, violations: list[dict[str, Any]]) -> None:
        self.violations = violations
        super().__init__(json.dumps(violations))


def validate_business_rules(inputs: TaxInputs) -> None:
    """
    Validate inputs against every entry-form limit.

    Collects every violation before raising, so callers receive all errors in
    one response rather than discovering them one at a time.

    Raises:
        InputValidationError: If any limit is exceeded.
    """
    violations: list[dict[str, Any]] = []

    for field, limit, statutory in _FIELD_LIMITS:
        value = getattr(inputs, field)
        if value <= limit:
            continue
        if statutory:
            issue = f"Maximum limit is ₹{limit:,.0f} (got ₹{value:,.0f})."
        else:
            issue = f"Amount too large: ₹{value:,.0f} exceeds ₹{limit:,.0f}."
        violations.append({"field": field, "issue": issue})

    if violations:
        # Log only the count and field names: no amounts
        logger.info(
            "Input validation failed: %d violation(s) fields=%s",
            len(violations),
            ",".join(v["field"] for v in violations),
        )
        raise InputValidationError(violations)
