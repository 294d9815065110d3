"""Upfront purchase cost estimates: LMI and stamp duty.

Both estimates use the simplified tables in :mod:`mortgage_calc.tables` and
are illustrative only. They return ``0`` when no property value is known.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from .exceptions import InvalidInputError
from .tables import LMI_FREE_LVR, LMI_TIERS, STAMP_DUTY_BRACKETS
from .utils import Number, to_decimal


def loan_to_value_ratio(loan_amount: Number, property_value: Number) -> Decimal:
    """Return the LVR as a percentage (``80`` for an 80 % loan)."""
    amount = to_decimal(loan_amount, "loan_amount")
    value = to_decimal(property_value, "property_value")
    if amount <= 0:
        raise InvalidInputError("Loan amount must be positive")
    if value <= 0:
        raise InvalidInputError("Property value must be positive to compute an LVR")
    return amount / value * Decimal(100)


def estimate_lmi(loan_amount: Number, property_value: Optional[Number]) -> Decimal:
    """Estimate the Lender's Mortgage Insurance premium.

    The premium is a flat percentage of the loan chosen by LVR band. Band
    upper bounds are inclusive, so an LVR of exactly 85 % pays the 0.5 % rate
    and exactly 80 % pays nothing.
    """
    if property_value is None or to_decimal(property_value, "property_value") == 0:
        return Decimal("0")
    amount = to_decimal(loan_amount, "loan_amount")
    lvr = loan_to_value_ratio(amount, property_value)
    if lvr <= LMI_FREE_LVR:
        return Decimal("0")
    for tier in LMI_TIERS:
        if tier.max_lvr is None or lvr <= tier.max_lvr:
            return amount * tier.rate
    return amount * LMI_TIERS[-1].rate


def estimate_stamp_duty(property_value: Optional[Number]) -> Decimal:
    """Estimate transfer (stamp) duty with a fixed progressive table.

    Each bracket charges ``base + rate * (value - lower)``.
    """
    if property_value is None:
        return Decimal("0")
    value = to_decimal(property_value, "property_value")
    if value <= 0:
        return Decimal("0")
    for bracket in STAMP_DUTY_BRACKETS:
        if bracket.upper is None or value <= bracket.upper:
            return bracket.base + (value - bracket.lower) * bracket.rate
    raise AssertionError("stamp duty table must end with an unbounded bracket")
