"""Conversions between annual figures and per-period figures."""

from __future__ import annotations

from decimal import Decimal

from .exceptions import InvalidInputError
from .tables import PAYMENTS_PER_MONTH
from .utils import Number, to_decimal


def to_periodic_rate(annual_rate_pct: Number, periods_per_year: int) -> Decimal:
    """Return the per-period rate for an annual percentage rate.

    ``to_periodic_rate(6, 12)`` is ``0.005``. Weekly rates use the simple
    ``annual / 52`` split rather than an actuarial equivalent.
    """
    return to_decimal(annual_rate_pct, "annual_rate_pct") / Decimal(100) / Decimal(periods_per_year)


def to_period_count(years: int, periods_per_year: int) -> int:
    return int(years) * int(periods_per_year)


def payment_divisor(periods_per_year: int) -> int:
    """Return how many periodic payments make up one monthly payment."""
    try:
        return PAYMENTS_PER_MONTH[periods_per_year]
    except KeyError:
        supported = ", ".join(str(p) for p in sorted(PAYMENTS_PER_MONTH))
        raise InvalidInputError(
            f"Unsupported payment frequency {periods_per_year}; use one of {supported} periods per year"
        ) from None
