"""Modelling constants for the mortgage calculator.

The figures below are simplified, illustrative values for a single
jurisdiction (NSW-style stamp duty, Australian LMI bands). They are kept in
one place so they can be tuned without touching the algorithms.
"""

from __future__ import annotations

from decimal import Decimal
from typing import NamedTuple, Optional, Tuple


class LMITier(NamedTuple):
    """LMI premium rate applied when the LVR is at or below ``max_lvr``."""

    max_lvr: Optional[Decimal]  # percent, inclusive; None means unbounded
    rate: Decimal  # fraction of the loan amount


class StampDutyBracket(NamedTuple):
    """A progressive bracket: ``base + rate * (value - lower)``."""

    lower: Decimal
    upper: Optional[Decimal]  # inclusive; None means unbounded
    base: Decimal
    rate: Decimal


class PayoffStrategy(NamedTuple):
    name: str
    periods_per_year: int
    extra_payment: Decimal


# LVR at or below this percentage needs no mortgage insurance.
LMI_FREE_LVR = Decimal("80")

LMI_TIERS: Tuple[LMITier, ...] = (
    LMITier(Decimal("85"), Decimal("0.005")),
    LMITier(Decimal("90"), Decimal("0.01")),
    LMITier(Decimal("95"), Decimal("0.015")),
    LMITier(None, Decimal("0.02")),
)

STAMP_DUTY_BRACKETS: Tuple[StampDutyBracket, ...] = (
    StampDutyBracket(Decimal("0"), Decimal("14000"), Decimal("0"), Decimal("0.0125")),
    StampDutyBracket(Decimal("14000"), Decimal("32000"), Decimal("175"), Decimal("0.015")),
    StampDutyBracket(Decimal("32000"), Decimal("85000"), Decimal("445"), Decimal("0.0175")),
    StampDutyBracket(Decimal("85000"), Decimal("319000"), Decimal("1372.5"), Decimal("0.035")),
    StampDutyBracket(Decimal("319000"), Decimal("1064000"), Decimal("9562.5"), Decimal("0.045")),
    StampDutyBracket(Decimal("1064000"), None, Decimal("43087.5"), Decimal("0.055")),
)

# Annual capital growth assumed for investment properties.
CAPITAL_GROWTH_RATE = Decimal("0.03")

# Longest loan term accepted, in years.
MAX_TERM_YEARS = 100

WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12

# Number of periodic payments that make up one monthly payment. Weekly
# payments are the monthly payment divided by 4, which yields 13 "months"
# of repayments per year.
PAYMENTS_PER_MONTH = {
    12: 1,
    26: 2,
    52: 4,
}

FREQUENCIES = {
    "monthly": 12,
    "fortnightly": 26,
    "weekly": 52,
}

# A balance at or below this amount counts as repaid.
BALANCE_EPSILON = Decimal("0.01")

BASELINE_STRATEGY = PayoffStrategy("Minimum Payment", 12, Decimal("0"))

PAYOFF_STRATEGIES: Tuple[PayoffStrategy, ...] = (
    PayoffStrategy("Weekly Payments", 52, Decimal("0")),
    PayoffStrategy("Extra $100/month", 12, Decimal("100")),
    PayoffStrategy("Extra $500/month", 12, Decimal("500")),
)
